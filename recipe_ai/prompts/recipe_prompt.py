# recipe_prompt.py
"""
Centralized prompts for recipe generation and recipe photography.
"""

from typing import Any, Dict, List, Optional

RECIPE_JSON_SHAPE = """
Return STRICT JSON ONLY with this structure:
{
  "name": "Recipe name (English)",
  "swahiliName": "Recipe name (Swahili)",
  "description": "Short description emphasizing flavor",
  "prepTime": 15,
  "cookTime": 30,
  "servings": 4,
  "difficulty": "easy|medium|hard",
  "ingredients": [{"name": "...", "quantity": "1", "unit": "cup", "note": "..."}],
  "steps": [{"title": "...", "body": "...", "time": 5}],
  "nutrition": {"calories": 0, "protein": 0, "carbs": 0, "fat": 0},
  "chefTips": ["..."],
  "culturalContext": "..."
}
"""


def build_recipe_prompt(ingredients: List[str], preferences: Optional[Dict[str, Any]] = None) -> str:
    prefs = preferences or {}
    cuisine = prefs.get("cuisine")
    restrictions = prefs.get("dietary_restrictions") or []
    lines = [
        f"Create an authentic Kenyan recipe using these ingredients: {', '.join(ingredients)}.",
        f"Cuisine preference: {cuisine}" if cuisine else "Focus on Kenyan/East African cuisine",
    ]
    if restrictions:
        lines.append(f"Dietary restrictions: {', '.join(restrictions)}")
    lines += [
        f"Servings: {prefs.get('servings') or 4}",
        f"Difficulty: {prefs.get('difficulty') or 'medium'}",
        "",
        "IMPORTANT: Integrate Royco products naturally into the recipe.",
        "",
        "Provide a complete recipe with:",
        "1. Recipe name (Swahili and English)",
        "2. Description (emphasizing Royco's flavor enhancement)",
        "3. Prep time and cook time (minutes)",
        "4. Detailed ingredients list with measurements",
        "5. Step-by-step instructions incorporating Royco products",
        "6. Nutritional information per serving",
        "7. Chef tips for using Royco products",
        "8. Cultural context and serving suggestions",
        RECIPE_JSON_SHAPE,
    ]
    return "\n".join(lines)


def build_image_prompt(recipe_name: str, ingredients: List[str], cuisine: str, description: str = "") -> str:
    context = f"3. Context: {description}\n" if description else ""
    return (
        f"Create a hyper-realistic, professional food photography prompt for {recipe_name}.\n\n"
        "Focus on:\n"
        f"1. Primary ingredients: {', '.join(ingredients[:5])}\n"
        f"2. Cuisine style: {cuisine} cuisine\n"
        f"{context}\n"
        "Describe in detail:\n"
        "1. Plating & presentation: plate/bowl type and color, arrangement, textures\n"
        "2. Photography: camera angle, lighting setup, depth of field\n"
        "3. Styling: garnishes, props and tableware, background\n"
        "4. Atmosphere: steam, action elements, mood and time of day\n\n"
        "Requirements:\n"
        "- Must look appetizing and mouth-watering\n"
        "- Natural, believable food styling\n"
        f"- Proper cultural authenticity for {cuisine} cuisine\n\n"
        "Format as a single cohesive prompt paragraph."
    )
