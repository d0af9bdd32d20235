from typing import List, Dict, Any, Optional

from .recipe_planning import generate_shopping_list, estimate_recipe_cost, generate_recipe_variations
from ..detection.ingredient_detection_service import IngredientDetectionService
from ..shared.recipe_store import RecipeStore, create_recipe_store
from ..shared.response_cache import ResponseCache
from ..shared.service_config import ServiceConfig
from ...graphs.recipe_generation import run_recipe_generation


class RecipeService:
    """Recipe generation, saved recipes and the planning helpers built on them"""

    def __init__(self, config: ServiceConfig, store: Optional[RecipeStore] = None,
                 cache: Optional[ResponseCache] = None):
        self.config = config
        self.store = store or create_recipe_store(config)
        self.cache = cache or ResponseCache.from_config(config)

    def generate(self, ingredients: List[str], preferences: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Run the generation pipeline (or reuse a cached result) and save the recipe"""
        prefs = {k: v for k, v in (preferences or {}).items() if v not in (None, "", [])}
        key = self.cache.key("recipe", {"ingredients": ingredients, "preferences": prefs})
        cached = self.cache.get(key)
        if cached:
            # deleted or capped out of the store since it was cached
            if self.store.get(cached["id"]) is None:
                self.store.save(cached)
            return cached

        recipe = run_recipe_generation(self.config, ingredients, prefs)
        self.store.save(recipe)
        self.cache.set(key, recipe)
        return recipe

    def generate_from_image(self, image_paths: List[str],
                            preferences: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Detect ingredients, then generate. Returns {"detection": ..., "recipe": ...};
        recipe is None when nothing was detected.
        """
        detection = IngredientDetectionService(self.config, cache=self.cache).detect(image_paths)
        if not detection.success:
            return {"detection": detection.to_dict(), "recipe": None}
        names = [f.name for f in detection.ingredients]
        return {"detection": detection.to_dict(), "recipe": self.generate(names, preferences)}

    def variations(self, ingredients: List[str], count: int = 3) -> List[Dict[str, Any]]:
        return generate_recipe_variations(self.generate, ingredients, count)

    def get(self, recipe_id: str) -> Optional[Dict[str, Any]]:
        return self.store.get(recipe_id)

    def list(self, limit: int = 20) -> List[Dict[str, Any]]:
        return self.store.list(limit)

    def delete(self, recipe_id: str) -> bool:
        return self.store.delete(recipe_id)

    def shopping_list(self, recipe_id: str) -> Optional[List[str]]:
        recipe = self.store.get(recipe_id)
        return generate_shopping_list(recipe) if recipe else None

    def cost(self, recipe_id: str) -> Optional[int]:
        recipe = self.store.get(recipe_id)
        return estimate_recipe_cost(recipe) if recipe else None
