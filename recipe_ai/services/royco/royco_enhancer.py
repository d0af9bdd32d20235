# royco_enhancer.py
"""
Royco overlay for AI-generated recipes: keyword substitution in free text,
product suggestions from ingredient lists, and recipe post-processing.
"""

import copy
import re
from typing import Any, Dict, Iterable, List

from .catalog import GENERIC_TO_ROYCO_MAP, ROYCO_PRODUCTS, RoycoProduct
from ...prompts.royco_prompt import build_royco_enhanced_prompt

DEFAULT_ROYCO_NOTE = "for authentic East African flavor"

# One alternation, longest term first, so "black pepper powder" wins over
# "black pepper". Terms already preceded by "Royco " are not touched.
_GENERIC_TERMS = sorted(GENERIC_TO_ROYCO_MAP, key=len, reverse=True)
_GENERIC_RE = re.compile(
    r"(?<!royco )\b(" + "|".join(re.escape(t) for t in _GENERIC_TERMS) + r")\b",
    re.IGNORECASE,
)


def replace_with_royco_products(text: str) -> str:
    """Replace generic ingredients with Royco products in a text"""
    if not text:
        return text or ""
    return _GENERIC_RE.sub(lambda m: GENERIC_TO_ROYCO_MAP[m.group(1).lower()], text)


def suggest_royco_products(ingredients: Iterable[str]) -> List[RoycoProduct]:
    """Catalog products whose keywords, substitutes or name occur in the ingredient list"""
    ingredient_text = " ".join(str(i) for i in (ingredients or []) if i).lower()
    if not ingredient_text:
        return []

    suggestions = []
    for product in ROYCO_PRODUCTS:
        terms = list(product.keywords) + list(product.substitutes) + [product.display_name]
        if any(term.lower() in ingredient_text for term in terms):
            suggestions.append(product)
    return suggestions


def generate_royco_enhanced_prompt(base_prompt: str) -> str:
    return build_royco_enhanced_prompt(base_prompt)


def royco_name_for(ingredient_name: str):
    """First generic term (table order) contained in the name -> Royco product name, else None."""
    name = (ingredient_name or "").lower()
    for generic, royco in GENERIC_TO_ROYCO_MAP.items():
        if generic in name:
            return royco
    return None


def _enhance_ingredient(ingredient: Any) -> Any:
    if isinstance(ingredient, str):
        ingredient = {"name": ingredient}
    if not isinstance(ingredient, dict):
        return ingredient

    name = str(ingredient.get("name") or "")
    if "royco" in name.lower():
        return {**ingredient, "royco_product": True}

    royco = royco_name_for(name)
    if royco:
        return {
            **ingredient,
            "name": royco,
            "note": ingredient.get("note") or DEFAULT_ROYCO_NOTE,
            "royco_product": True,
        }
    return ingredient


def _enhance_step(step: Any) -> Any:
    if isinstance(step, str):
        return replace_with_royco_products(step)
    if not isinstance(step, dict):
        return step
    out = dict(step)
    for key in ("body", "description", "tip"):
        if isinstance(out.get(key), str):
            out[key] = replace_with_royco_products(out[key])
    if isinstance(out.get("tips"), list):
        out["tips"] = [replace_with_royco_products(t) if isinstance(t, str) else t for t in out["tips"]]
    return out


def ensure_royco_products(recipe: Dict[str, Any]) -> Dict[str, Any]:
    """
    Post-process a recipe so Royco products are properly mentioned.

    Generic ingredients are renamed to their Royco product, free-text fields
    are rewritten, and the recipe is flagged ``royco_enhanced`` with the list
    of ``sponsored_products``. The input dict is left untouched.
    """
    recipe = copy.deepcopy(recipe or {})

    if isinstance(recipe.get("ingredients"), list):
        recipe["ingredients"] = [_enhance_ingredient(i) for i in recipe["ingredients"]]

    for steps_key in ("steps", "instructions"):
        if isinstance(recipe.get(steps_key), list):
            recipe[steps_key] = [_enhance_step(s) for s in recipe[steps_key]]

    for key in ("description", "summary"):
        if isinstance(recipe.get(key), str):
            recipe[key] = replace_with_royco_products(recipe[key])

    for key in ("tips", "chef_tips", "chefTips"):
        if isinstance(recipe.get(key), list):
            recipe[key] = [replace_with_royco_products(t) if isinstance(t, str) else t for t in recipe[key]]

    names = []
    for ing in recipe.get("ingredients") or []:
        if isinstance(ing, dict):
            names.append(str(ing.get("name") or ""))
        elif isinstance(ing, str):
            names.append(ing)

    recipe["royco_enhanced"] = True
    recipe["sponsored_products"] = [p.display_name for p in suggest_royco_products(names)]
    return recipe
