# gemini_detector_strategy.py
"""
Gemini implementation of the DetectorStrategy.
"""

from typing import Dict, List

from .detector_strategy import DetectorStrategy
from ...shared.service_config import ServiceConfig


class GeminiDetectorStrategy(DetectorStrategy):
    name = "gemini"

    def is_available(self, config: ServiceConfig) -> bool:
        return config.has_gemini

    def detect_ingredients(self, config: ServiceConfig, image_paths: List[str]) -> List[Dict]:
        from ...gemini.gemini_vision import detect_ingredients
        return detect_ingredients(config, image_paths)

    def detect_groceries(self, config: ServiceConfig, image_paths: List[str]) -> List[Dict]:
        from ...gemini.gemini_vision import detect_groceries
        return detect_groceries(config, image_paths)
