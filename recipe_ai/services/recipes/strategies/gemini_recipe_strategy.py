# gemini_recipe_strategy.py
from typing import Dict

from .recipe_generator_strategy import RecipeGeneratorStrategy
from ...shared.service_config import ServiceConfig


class GeminiRecipeStrategy(RecipeGeneratorStrategy):
    name = "gemini"

    def is_available(self, config: ServiceConfig) -> bool:
        return config.has_gemini

    def generate_recipe(self, config: ServiceConfig, prompt: str) -> Dict:
        from ...gemini.gemini_text import complete_json
        return complete_json(config, prompt)

    def complete_text(self, config: ServiceConfig, prompt: str) -> str:
        from ...gemini.gemini_text import complete_text
        return complete_text(config, prompt)
