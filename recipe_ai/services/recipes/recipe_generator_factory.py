# recipe_generator_factory.py
"""
Factory for creating recipe generator strategy instances.
"""

import logging
from typing import List

from .strategies.recipe_generator_strategy import RecipeGeneratorStrategy
from ..shared.service_config import ServiceConfig

logger = logging.getLogger(__name__)


class RecipeGeneratorFactory:

    @staticmethod
    def create(provider: str) -> RecipeGeneratorStrategy:
        """
        Raises:
            ValueError: If provider is not supported
        """
        provider = (provider or "").strip().lower()
        if provider == "gemini":
            from .strategies.gemini_recipe_strategy import GeminiRecipeStrategy
            return GeminiRecipeStrategy()
        elif provider == "openai":
            from .strategies.openai_recipe_strategy import OpenAIRecipeStrategy
            return OpenAIRecipeStrategy()
        else:
            raise ValueError(f"Unsupported provider: {provider}")

    @staticmethod
    def available(config: ServiceConfig) -> List[RecipeGeneratorStrategy]:
        """Configured text providers, in RECIPE_PROVIDERS order, that have credentials."""
        out = []
        for name in config.recipe_providers:
            try:
                strategy = RecipeGeneratorFactory.create(name)
            except ValueError as e:
                logger.warning("skipping recipe provider: %s", e)
                continue
            if strategy.is_available(config):
                out.append(strategy)
        return out
