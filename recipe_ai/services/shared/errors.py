class ProviderError(RuntimeError):
    """An AI provider call failed or returned something unusable."""

    def __init__(self, provider: str, msg: str, raw: str = ""):
        super().__init__(f"{provider}: {msg}")
        self.provider = provider
        self.raw = raw


class ProviderUnavailable(ProviderError):
    """The provider is not configured (no credentials) or does not support the task."""


class StoreError(RuntimeError):
    """Saved-recipe backend failure."""


class RecipeGenerationError(RuntimeError):
    """The recipe pipeline finished without a valid recipe."""
