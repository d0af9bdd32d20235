# recipe_generator_strategy.py
"""
Strategy interface for text generation used by the recipe pipeline.
"""

from abc import ABC, abstractmethod
from typing import Dict

from ...shared.service_config import ServiceConfig


class RecipeGeneratorStrategy(ABC):
    """
    Each text provider (Gemini, OpenAI) implements this interface.
    """

    name = "base"

    @abstractmethod
    def is_available(self, config: ServiceConfig) -> bool:
        pass

    @abstractmethod
    def generate_recipe(self, config: ServiceConfig, prompt: str) -> Dict:
        """
        Generate a recipe from a full prompt.

        Returns:
            The provider's JSON object, before shape coercion.

        Raises:
            ProviderUnavailable, ProviderError
        """
        pass

    @abstractmethod
    def complete_text(self, config: ServiceConfig, prompt: str) -> str:
        """Free-text completion (image prompts, Royco suggestions)."""
        pass
