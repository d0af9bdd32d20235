# recipe_images.py
"""
Recipe hero images. A text provider writes a food-photography prompt and the
image URL is a keyword-tagged Unsplash source URL derived from it.
"""

import re
import logging
from typing import List, Tuple
from urllib.parse import quote

from .recipe_generator_factory import RecipeGeneratorFactory
from ..shared.service_config import ServiceConfig
from ...prompts.recipe_prompt import build_image_prompt

logger = logging.getLogger(__name__)

UNSPLASH = "https://source.unsplash.com"
PLACEHOLDER_IMAGE = f"{UNSPLASH}/800x600/?food,recipe"

CUISINE_IMAGES = {
    "kenyan": f"{UNSPLASH}/800x600/?ugali,kenyan,food",
    "swahili": f"{UNSPLASH}/800x600/?pilau,swahili,food",
    "ethiopian": f"{UNSPLASH}/800x600/?injera,ethiopian,food",
    "indian": f"{UNSPLASH}/800x600/?curry,indian,food",
}
DEFAULT_CUISINE_IMAGE = f"{UNSPLASH}/800x600/?food,cooking"

PROMPT_KEYWORDS = {
    "plate", "bowl", "dish", "food", "meal", "cuisine", "fresh",
    "hot", "traditional", "homemade", "gourmet", "delicious",
}

CUISINE_PROPS = {
    "kenyan": ["traditional clay pot", "wooden spoon", "sisal placemat", "calabash", "authentic Kenyan fabric"],
    "swahili": ["brass tray", "ornate spice containers", "traditional coffee pot", "coastal-inspired tablecloth"],
    "ethiopian": ["mesob basket", "traditional coffee pot", "handwoven table runner", "clay dishes"],
    "indian": ["brass thali", "copper vessels", "colorful silk fabric", "traditional spice box"],
}
DEFAULT_PROPS = ["white ceramic plate", "linen napkin", "wooden cutting board", "fresh herbs"]


def default_recipe_image(cuisine: str) -> str:
    return CUISINE_IMAGES.get((cuisine or "").strip().lower(), DEFAULT_CUISINE_IMAGE)


def suggest_props(cuisine: str) -> List[str]:
    return list(CUISINE_PROPS.get((cuisine or "").strip().lower(), DEFAULT_PROPS))


def suggest_camera_angle(recipe_name: str, ingredients: List[str]) -> str:
    words = set((recipe_name or "").lower().split()) | {i.lower() for i in ingredients}
    if words & {"rice", "curry", "stew", "soup", "sauce"}:
        return "45-degree angle to show depth and texture"
    if words & {"sandwich", "burger", "cake", "lasagna"}:
        return "straight-on angle to highlight layers"
    if words & {"appetizer", "snack", "cookie", "pastry"}:
        return "close-up shot with shallow depth of field"
    return "overhead shot for complete presentation"


def image_url_from_prompt(recipe_name: str, image_prompt: str) -> str:
    keywords = [w for w in re.split(r"[\s,]+", (image_prompt or "").lower()) if w in PROMPT_KEYWORDS][:3]
    name = quote((recipe_name or "").lower(), safe="")
    return f"{UNSPLASH}/1200x800/?food,{name},{','.join(keywords)}"


def fallback_image(recipe_name: str, ingredients: List[str], cuisine: str) -> str:
    terms = [re.sub(r"[^a-z0-9\s]", "", (recipe_name or "").lower()), (cuisine or "").lower(), "food", "cooking"]
    if ingredients:
        terms.insert(0, ingredients[0].lower())
    return f"{UNSPLASH}/800x600/?{quote(','.join(t for t in terms if t), safe='')}"


class RecipeIllustrator:

    def __init__(self, config: ServiceConfig):
        self.config = config

    def illustrate(self, recipe_name: str, ingredients: List[str], cuisine: str,
                   description: str = "") -> Tuple[str, str]:
        """
        Returns (image_url, image_prompt). The prompt is empty when no provider
        wrote one: a failed provider gets a search URL built from the recipe,
        no provider at all gets the cuisine default image.
        """
        providers = RecipeGeneratorFactory.available(self.config)
        image, image_prompt = None, ""
        if providers:
            prompt = build_image_prompt(recipe_name, ingredients, cuisine, description)
            prompt += (
                f"\nSuggested camera angle: {suggest_camera_angle(recipe_name, ingredients)}."
                f"\nSuggested props: {', '.join(suggest_props(cuisine))}."
            )
            try:
                image_prompt = providers[0].complete_text(self.config, prompt)
                image = image_url_from_prompt(recipe_name, image_prompt)
            except Exception as e:
                logger.warning("image prompt via %s failed: %s", providers[0].name, e)
                image_prompt = ""
                image = fallback_image(recipe_name, ingredients, cuisine)

        if not image:
            image = default_recipe_image(cuisine)
        if not image.startswith("http"):
            image = PLACEHOLDER_IMAGE
        return image, image_prompt
