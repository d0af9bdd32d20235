# openai_recipe_strategy.py
from typing import Dict

from .recipe_generator_strategy import RecipeGeneratorStrategy
from ...shared.service_config import ServiceConfig


class OpenAIRecipeStrategy(RecipeGeneratorStrategy):
    name = "openai"

    def is_available(self, config: ServiceConfig) -> bool:
        return config.has_openai

    def generate_recipe(self, config: ServiceConfig, prompt: str) -> Dict:
        from ...openai.openai_text import complete_json
        return complete_json(config, prompt)

    def complete_text(self, config: ServiceConfig, prompt: str) -> str:
        from ...openai.openai_text import complete_text
        return complete_text(config, prompt)
