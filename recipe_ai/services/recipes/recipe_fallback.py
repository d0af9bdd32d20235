# recipe_fallback.py
"""
Template recipes used when no text provider produced one.
"""

from typing import Any, Dict, List, Optional

FALLBACK_NUTRITION = {"calories": 350, "protein": 20, "carbs": 40, "fat": 15, "fiber": 5}


def _kenyan_template(ingredients: List[str]) -> Dict[str, Any]:
    return {
        "name": f"Kenyan Stew with {ingredients[0] if ingredients else 'Vegetables'}",
        "description": "A hearty Kenyan-style stew enhanced with Royco products",
        "prep_time": 20,
        "cook_time": 40,
        "steps": [
            "Heat oil in a large pot",
            "Sauté onions until golden brown",
            "Add Royco Beef Cubes dissolved in water",
            f"Add {', '.join(ingredients)}",
            "Add Royco Mchuzi Mix for thickness",
            "Simmer for 30 minutes",
            "Serve hot with ugali or rice",
        ],
    }


def _default_template(ingredients: List[str]) -> Dict[str, Any]:
    return {
        "name": f"Recipe with {' and '.join(ingredients[:2]) or 'Your Ingredients'}",
        "description": "A delicious recipe created with your ingredients",
        "prep_time": 15,
        "cook_time": 30,
        "steps": [
            "Prepare all ingredients",
            "Cook according to preference",
            "Season with Royco products",
            "Serve hot",
        ],
    }


def create_fallback_recipe(ingredients: List[str], preferences: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    prefs = preferences or {}
    cuisine = str(prefs.get("cuisine") or "").strip().lower()
    recipe = _kenyan_template(ingredients) if cuisine == "kenyan" else _default_template(ingredients)
    recipe.update({
        "servings": prefs.get("servings") or 4,
        "ingredients": [{"name": ing, "quantity": "1", "unit": "cup"} for ing in ingredients],
        "nutrition": dict(FALLBACK_NUTRITION),
    })
    return recipe
