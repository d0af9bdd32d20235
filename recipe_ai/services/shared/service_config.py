from typing import Any, List, Mapping, Optional

from flask import current_app


def parse_providers(value) -> List[str]:
    """'gemini, OpenAI,,' -> ['gemini', 'openai']"""
    if isinstance(value, (list, tuple)):
        items = value
    else:
        items = str(value or "").split(",")
    return [str(p).strip().lower() for p in items if str(p).strip()]


class ServiceConfig:
    """Snapshot of the settings the AI services need.

    Built from ``current_app.config`` by default so it can be handed to
    worker threads that run outside the application context.
    """

    def __init__(self, settings: Optional[Mapping[str, Any]] = None):
        settings = settings if settings is not None else current_app.config
        get = settings.get

        self.google_api_key = get('GOOGLE_API_KEY')
        self.project = get('GOOGLE_CLOUD_PROJECT')
        self.location = get('GOOGLE_CLOUD_LOCATION', 'global')
        self.openai_api_key = get('OPENAI_API_KEY')

        self.gemini_model = get('DEFAULT_GEMINI_MODEL', 'gemini-2.5-flash')
        self.openai_model = get('DEFAULT_OPENAI_MODEL', 'gpt-4o-mini')

        self.ingredient_providers = parse_providers(get('INGREDIENT_PROVIDERS', 'gemini,openai'))
        self.grocery_providers = parse_providers(get('GROCERY_PROVIDERS', 'openai,gemini'))
        self.recipe_providers = parse_providers(get('RECIPE_PROVIDERS', 'gemini,openai'))
        self.allow_mock_detection = bool(get('ALLOW_MOCK_DETECTION', True))

        self.upload_dir = get('UPLOAD_DIR', './uploads')
        self.data_dir = get('DATA_DIR', './data')
        self.cache_dir = get('CACHE_DIR', './data/cache')
        self.cache_enabled = bool(get('CACHE_ENABLED', True))
        self.cache_ttl_seconds = int(get('CACHE_TTL_SECONDS', 24 * 60 * 60))

        self.max_retries = int(get('MAX_RETRIES', 3))
        self.retry_delay = float(get('RETRY_DELAY_SECONDS', 1.0))

        self.recipe_store = str(get('RECIPE_STORE', 'local')).lower()
        self.recipes_table = get('RECIPES_TABLE', 'ROYCO_AI_RECIPES')
        self.aws_region = get('AWS_REGION', 'eu-west-1')
        self.max_saved_recipes = int(get('MAX_SAVED_RECIPES', 100))

        self.royco_enhancement = bool(get('ROYCO_ENHANCEMENT', True))

    @property
    def has_gemini(self) -> bool:
        return bool(self.google_api_key or self.project)

    @property
    def has_openai(self) -> bool:
        return bool(self.openai_api_key)

    def to_public_dict(self):
        """Settings safe to expose over /config (no secrets)."""
        return {
            "gemini_model": self.gemini_model,
            "openai_model": self.openai_model,
            "gemini_configured": self.has_gemini,
            "openai_configured": self.has_openai,
            "ingredient_providers": self.ingredient_providers,
            "grocery_providers": self.grocery_providers,
            "recipe_providers": self.recipe_providers,
            "allow_mock_detection": self.allow_mock_detection,
            "recipe_store": self.recipe_store,
            "cache_enabled": self.cache_enabled,
            "royco_enhancement": self.royco_enhancement,
        }
