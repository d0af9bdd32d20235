import math
import uuid
import time
from datetime import datetime
from typing import List, Dict, Any, Optional

from ...utils.helpers import fnum

DEFAULT_PREP_TIME = 15
DEFAULT_COOK_TIME = 30
DEFAULT_CALORIES = 450
DEFAULT_NUTRITION = {"calories": 450, "protein": 25, "carbs": 45, "fat": 18, "fiber": 8}
DEFAULT_SUMMARY = "A delicious recipe created with AI assistance."
DEFAULT_CULTURAL_CONTEXT = (
    "This recipe combines traditional Kenyan cooking with modern convenience using Royco products."
)
DEFAULT_CHEF_TIPS = [
    "Use Royco products at the right stage for maximum flavor",
    "Don't overcook after adding Royco to preserve the aromatic compounds",
    "Adjust Royco quantities based on your taste preference",
]


def _pick(d: Dict[str, Any], *keys, default=None):
    for k in keys:
        v = d.get(k)
        if v not in (None, "", [], {}):
            return v
    return default


def _name_text(value) -> str:
    """Names may come back bilingual: {"english": ..., "swahili": ...}."""
    if isinstance(value, dict):
        return str(_pick(value, "english", "en", "name", default="") or next(iter(value.values()), "")).strip()
    return str(value or "").strip()


def _minutes(value, default: int) -> int:
    n = fnum(value, default) if value is not None else default
    return int(round(n)) if n > 0 else default


def _coerce_ingredient(ing) -> Optional[Dict[str, Any]]:
    if isinstance(ing, str):
        return {"name": ing.strip()} if ing.strip() else None
    if not isinstance(ing, dict):
        return None
    name = _name_text(_pick(ing, "name", "item", "ingredient", default=""))
    if not name:
        return None
    row = {"name": name}
    qty = _pick(ing, "quantity", "amount", "qty")
    if qty is not None:
        row["quantity"] = str(qty)
    for k in ("unit", "note", "category", "group"):
        if ing.get(k):
            row[k] = str(ing[k])
    if ing.get("royco_product") or ing.get("isRoycoProduct"):
        row["royco_product"] = True
    return row


def _coerce_step(step) -> Optional[Any]:
    if isinstance(step, str):
        return step.strip() or None
    if not isinstance(step, dict):
        return None
    body = str(_pick(step, "body", "description", "instruction", "text", default="")).strip()
    if not body:
        return None
    row = {"body": body}
    if step.get("title"):
        row["title"] = str(step["title"])
    if step.get("time") is not None:
        row["time"] = fnum(step["time"]) or None
    tip = _pick(step, "tip", "note")
    if tip:
        row["tip"] = str(tip)
    if step.get("tips"):
        row["tips"] = step["tips"] if isinstance(step["tips"], list) else [step["tips"]]
    return row


def _string_list(value) -> List[str]:
    if isinstance(value, str):
        return [value] if value.strip() else []
    if isinstance(value, list):
        return [str(x) for x in value if str(x).strip()]
    return []


def coerce_raw_recipe(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Normalize whatever JSON a provider returned into one snake_case shape:
    {name, swahili_name, description, summary, prep_time, cook_time, servings,
     difficulty, ingredients[], steps[], nutrition, chef_tips[], cultural_context,
     royco_products, image}
    """
    if isinstance(data.get("recipe"), dict):
        data = data["recipe"]

    raw_name = _pick(data, "name", "title", "recipeName", "recipe_name", default="")
    swahili = _pick(data, "swahiliName", "swahili_name")
    if isinstance(raw_name, dict) and not swahili:
        swahili = _pick(raw_name, "swahili", "sw")

    servings = _pick(data, "servings", "serves")
    ingredients = [r for r in (_coerce_ingredient(i) for i in (data.get("ingredients") or [])) if r]
    steps = [r for r in (_coerce_step(s) for s in (_pick(data, "steps", "instructions", "method") or [])) if r]

    return {
        "name": _name_text(raw_name),
        "swahili_name": _name_text(swahili) if swahili else None,
        "description": str(_pick(data, "description", default="") or ""),
        "summary": _pick(data, "summary"),
        "prep_time": _minutes(_pick(data, "prepTime", "prep_time", "prep_time_minutes"), DEFAULT_PREP_TIME),
        "cook_time": _minutes(_pick(data, "cookTime", "cook_time", "cook_time_minutes"), DEFAULT_COOK_TIME),
        "servings": int(fnum(servings)) if servings is not None and fnum(servings) > 0 else None,
        "difficulty": str(data["difficulty"]).lower() if data.get("difficulty") else None,
        "ingredients": ingredients,
        "steps": steps,
        "nutrition": data.get("nutrition") if isinstance(data.get("nutrition"), dict) else None,
        "chef_tips": _string_list(_pick(data, "chefTips", "chef_tips", "tips")),
        "cultural_context": _pick(data, "culturalContext", "cultural_context"),
        "royco_products": _pick(data, "roycoProducts", "royco_products"),
        "image": data.get("image"),
    }


def new_recipe_id() -> str:
    return f"ai_{int(time.time() * 1000)}_{uuid.uuid4().hex[:9]}"


def first_sentence(text: str) -> Optional[str]:
    head = (text or "").split(".")[0].strip()
    return f"{head}." if head else None


class RecipeFormatter:
    """Builds the app-facing recipe from a coerced raw recipe"""

    @staticmethod
    def ingredient_rows(recipe_id: str, ingredients: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        rows = []
        for n, ing in enumerate(ingredients, start=1):
            name = ing.get("name", "")
            amount = str(ing.get("quantity") or "1")
            rows.append({
                "id": f"{recipe_id}-ing-{n}",
                "name": name,
                "item": name,
                "amount": amount,
                "quantity": fnum(amount, 1.0),
                "unit": ing.get("unit") or "cup",
                "category": ing.get("category") or "Main",
                "group": ing.get("group") or "Ingredients",
                "note": ing.get("note"),
                "is_royco_product": bool(ing.get("royco_product")) or "royco" in name.lower(),
            })
        return rows

    @staticmethod
    def step_rows(recipe_id: str, steps: List[Any], cook_time: int) -> List[Dict[str, Any]]:
        default_time = math.ceil(cook_time / (len(steps) or 5))
        rows = []
        for n, step in enumerate(steps, start=1):
            if isinstance(step, str):
                step = {"body": step}
            body = step.get("body", "")
            rows.append({
                "id": f"{recipe_id}-step-{n}",
                "title": step.get("title") or f"Step {n}",
                "body": body,
                "description": body,
                "time": step.get("time") or default_time,
                "tip": step.get("tip"),
                "tips": step.get("tips"),
            })
        return rows

    @staticmethod
    def format_recipe(raw: Dict[str, Any],
                      ingredients: List[str],
                      preferences: Optional[Dict[str, Any]],
                      image: str,
                      royco_products: Dict[str, Any],
                      source: str,
                      recipe_id: Optional[str] = None) -> Dict[str, Any]:
        prefs = preferences or {}
        recipe_id = recipe_id or new_recipe_id()
        cuisine = prefs.get("cuisine") or "Kenyan"
        prep, cook = raw.get("prep_time") or DEFAULT_PREP_TIME, raw.get("cook_time") or DEFAULT_COOK_TIME
        servings = raw.get("servings") or prefs.get("servings") or 4
        difficulty = raw.get("difficulty") or prefs.get("difficulty") or "medium"
        nutrition = raw.get("nutrition") or dict(DEFAULT_NUTRITION)
        description = raw.get("description") or (
            f"A flavorful {cuisine} dish made with {', '.join(ingredients[:3])} "
            f"and enhanced with Royco products for authentic taste."
        )

        return {
            "id": recipe_id,
            "title": raw.get("name") or "Delicious Recipe",
            "swahili_name": raw.get("swahili_name"),
            "summary": raw.get("summary") or first_sentence(raw.get("description") or "") or DEFAULT_SUMMARY,
            "description": description,
            "image": image,
            "images": [image],
            "hero_image": image,
            "cuisine": cuisine,
            "time": f"{prep + cook} min",
            "servings": servings,
            "difficulty": difficulty,
            "calories": fnum(nutrition.get("calories"), DEFAULT_CALORIES) or DEFAULT_CALORIES,
            "ingredients": RecipeFormatter.ingredient_rows(recipe_id, raw.get("ingredients") or []),
            "steps": RecipeFormatter.step_rows(recipe_id, raw.get("steps") or [], cook),
            "details": {
                "servings": servings,
                "prep_time": prep,
                "cook_time": cook,
                "total_time": prep + cook,
                "difficulty": difficulty,
                "cuisine": cuisine,
            },
            "nutrition": nutrition,
            "royco_products": royco_products,
            "royco_enhanced": bool(raw.get("royco_enhanced")),
            "sponsored_products": list(raw.get("sponsored_products") or []),
            "chef_tips": raw.get("chef_tips") or list(DEFAULT_CHEF_TIPS),
            "cultural_context": raw.get("cultural_context") or DEFAULT_CULTURAL_CONTEXT,
            "generated_at": datetime.utcnow().isoformat() + "Z",
            "is_ai_generated": True,
            "source": source,
            "created_by": "ai",
            "tags": ["AI Generated", "Royco Enhanced", cuisine, raw.get("difficulty") or "medium", *ingredients[:3]],
        }
