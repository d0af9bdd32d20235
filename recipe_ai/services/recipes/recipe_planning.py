# recipe_planning.py
"""
Helpers on top of saved recipes: shopping lists, cost estimates and
concurrent cuisine variations.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Dict, List

VARIATION_CUISINES = ["Kenyan", "Swahili", "Ethiopian", "Indian"]
VARIATION_DIFFICULTIES = ["easy", "medium", "hard"]

BASE_COST_PER_SERVING_KES = 150
ROYCO_PRODUCT_COST_KES = 50


def _fmt_qty(q) -> str:
    if isinstance(q, float) and q.is_integer():
        return str(int(q))
    return str(q)


def generate_shopping_list(recipe: Dict[str, Any]) -> List[str]:
    items = []
    for ing in recipe.get("ingredients") or []:
        if not ing.get("is_royco_product"):
            items.append(f"{_fmt_qty(ing.get('quantity', 1))} {ing.get('unit', '')} {ing.get('name', '')}".strip())
    for product in (recipe.get("royco_products") or {}).get("products") or []:
        items.append(f"{product.get('amount', '')} {product.get('name', '')}".strip())
    return items


def estimate_recipe_cost(recipe: Dict[str, Any]) -> int:
    """Rough KES estimate."""
    servings = recipe.get("servings") or 4
    royco_count = len((recipe.get("royco_products") or {}).get("products") or [])
    return int(BASE_COST_PER_SERVING_KES * servings + ROYCO_PRODUCT_COST_KES * royco_count)


def variation_preferences(count: int) -> List[Dict[str, str]]:
    return [
        {
            "cuisine": VARIATION_CUISINES[i % len(VARIATION_CUISINES)],
            "difficulty": VARIATION_DIFFICULTIES[i % len(VARIATION_DIFFICULTIES)],
        }
        for i in range(count)
    ]


def generate_recipe_variations(generate: Callable[[List[str], Dict[str, Any]], Dict[str, Any]],
                               ingredients: List[str], count: int = 3) -> List[Dict[str, Any]]:
    """
    Run ``generate(ingredients, preferences)`` once per variation, concurrently.
    Results keep variation order; a failed variation is reported in place.
    """
    prefs = variation_preferences(count)
    if not prefs:
        return []

    def _one(p):
        try:
            return {"success": True, "recipe": generate(ingredients, p)}
        except Exception as e:
            return {"success": False, "error": str(e), "preferences": p}

    with ThreadPoolExecutor(max_workers=min(4, len(prefs))) as pool:
        return list(pool.map(_one, prefs))
