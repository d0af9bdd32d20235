# detector_strategy.py
"""
Strategy interface for image detection.
Defines the contract that all detection providers must implement.
"""

from abc import ABC, abstractmethod
from typing import Dict, List

from ...shared.service_config import ServiceConfig


class DetectorStrategy(ABC):
    """
    Strategy interface for image detection.
    Each provider (Gemini, OpenAI, mock) implements this interface.
    """

    name = "base"

    @abstractmethod
    def is_available(self, config: ServiceConfig) -> bool:
        """True when the provider has the credentials it needs."""

    @abstractmethod
    def detect_ingredients(self, config: ServiceConfig, image_paths: List[str]) -> List[Dict]:
        """
        Detect food ingredients in the images.

        Returns:
            [{"name": str, "confidence": float}] as reported by the provider.

        Raises:
            ProviderUnavailable: credentials are missing
            ProviderError: the provider call failed or its reply did not parse
        """

    @abstractmethod
    def detect_groceries(self, config: ServiceConfig, image_paths: List[str]) -> List[Dict]:
        """
        Detect pantry items in the images.

        Returns:
            Raw item dicts: {name, category?, quantity?, unit?, confidence?}
        """
