# royco_suggestions.py
"""
LLM-written Royco usage notes for a recipe, with a fixed default when the
provider is missing or its reply cannot be used.
"""

import copy
import logging
from typing import Any, Dict, List

from ..recipes.recipe_generator_factory import RecipeGeneratorFactory
from ..shared.service_config import ServiceConfig
from ...prompts.royco_prompt import build_royco_suggestions_prompt
from ...utils.helpers import first_json_block

logger = logging.getLogger(__name__)

DEFAULT_ROYCO_SUGGESTION = {
    "products": [
        {
            "name": "Royco Beef Cubes",
            "usage": "Dissolve 2 cubes in 500ml warm water to create a rich beef stock",
            "benefit": "Adds deep umami flavor and enhances the natural meat taste",
            "amount": "2 cubes",
        },
        {
            "name": "Royco Mchuzi Mix",
            "usage": "Add 2 tablespoons during the sautéing stage for rich color and flavor",
            "benefit": "Creates authentic Kenyan stew consistency and taste",
            "amount": "2 tablespoons",
        },
    ],
    "preparation_tips": [
        "Always dissolve Royco cubes in warm water before adding to the dish",
        "Add Royco Mchuzi Mix after browning the onions for best flavor release",
        "Taste before adding salt as Royco products contain seasoning",
    ],
    "flavor_profile": "Rich, savory, and authentically Kenyan with balanced spices",
    "serving_suggestion": "Garnish with fresh dhania (coriander) and serve with ugali or chapati",
}


def default_royco_suggestion() -> Dict[str, Any]:
    return copy.deepcopy(DEFAULT_ROYCO_SUGGESTION)


def _normalize_product(p) -> Dict[str, str]:
    if isinstance(p, str):
        return {"name": p, "usage": "", "benefit": "", "amount": ""}
    return {
        "name": str(p.get("name") or p.get("product") or ""),
        "usage": str(p.get("usage") or p.get("instructions") or ""),
        "benefit": str(p.get("benefit") or p.get("flavorBenefit") or p.get("flavor_benefit") or ""),
        "amount": str(p.get("amount") or p.get("quantity") or ""),
    }


def normalize_suggestion(data: Dict[str, Any]) -> Dict[str, Any]:
    """camelCase or snake_case reply -> {products, preparation_tips, flavor_profile, serving_suggestion}"""
    products = [_normalize_product(p) for p in (data.get("products") or []) if isinstance(p, (str, dict))]
    products = [p for p in products if p["name"]]
    if not products:
        raise ValueError("suggestion has no products")
    tips = data.get("preparationTips") or data.get("preparation_tips") or []
    return {
        "products": products,
        "preparation_tips": [str(t) for t in tips] if isinstance(tips, list) else [str(tips)],
        "flavor_profile": str(data.get("flavorProfile") or data.get("flavor_profile") or ""),
        "serving_suggestion": str(data.get("servingSuggestion") or data.get("serving_suggestion") or ""),
    }


class RoycoSuggestionService:

    def __init__(self, config: ServiceConfig):
        self.config = config

    def suggest(self, recipe_name: str, ingredients: List[str], cuisine: str = "Kenyan") -> Dict[str, Any]:
        providers = RecipeGeneratorFactory.available(self.config)
        if not providers:
            return default_royco_suggestion()
        provider = providers[0]
        prompt = build_royco_suggestions_prompt(recipe_name, ingredients, cuisine)
        try:
            text = provider.complete_text(self.config, prompt)
            data = first_json_block(text)
            if not data:
                raise ValueError("no JSON object in suggestion reply")
            return normalize_suggestion(data)
        except Exception as e:
            logger.warning("Royco suggestions via %s failed, using defaults: %s", provider.name, e)
            return default_royco_suggestion()
