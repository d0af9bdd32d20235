# mock_detector_strategy.py
"""
Demo pantry data used when no vision provider could answer.
"""

from typing import Dict, List

from .detector_strategy import DetectorStrategy
from ...shared.errors import ProviderUnavailable
from ...shared.service_config import ServiceConfig

MOCK_GROCERIES = [
    {"name": "Fresh Tomatoes", "category": "produce", "quantity": 6, "unit": "pieces", "confidence": 0.9},
    {"name": "Whole Milk", "category": "dairy", "quantity": 1, "unit": "liter", "confidence": 0.85},
    {"name": "Whole Wheat Bread", "category": "grain", "quantity": 1, "unit": "loaf", "confidence": 0.88},
    {"name": "Green Apples", "category": "produce", "quantity": 8, "unit": "pieces", "confidence": 0.92},
]


class MockDetectorStrategy(DetectorStrategy):
    name = "mock"

    def is_available(self, config: ServiceConfig) -> bool:
        return config.allow_mock_detection

    def detect_ingredients(self, config: ServiceConfig, image_paths: List[str]) -> List[Dict]:
        raise ProviderUnavailable("mock", "mock detection only covers grocery scans")

    def detect_groceries(self, config: ServiceConfig, image_paths: List[str]) -> List[Dict]:
        return [dict(item) for item in MOCK_GROCERIES]
