# detector_factory.py
"""
Factory for creating detector strategy instances.
"""

from .strategies.detector_strategy import DetectorStrategy


class DetectorFactory:
    """
    Factory for creating detector strategy instances by provider name.
    """

    @staticmethod
    def create(provider: str) -> DetectorStrategy:
        """
        Raises:
            ValueError: If provider is not supported
        """
        provider = (provider or "").strip().lower()
        if provider == "gemini":
            from .strategies.gemini_detector_strategy import GeminiDetectorStrategy
            return GeminiDetectorStrategy()
        elif provider == "openai":
            from .strategies.openai_detector_strategy import OpenAIDetectorStrategy
            return OpenAIDetectorStrategy()
        elif provider == "mock":
            from .strategies.mock_detector_strategy import MockDetectorStrategy
            return MockDetectorStrategy()
        else:
            raise ValueError(f"Unsupported provider: {provider}")
