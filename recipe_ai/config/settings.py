import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _env_flag(name: str, default: str = "true") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Config:
    """Base configuration class"""

    # Flask settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    MAX_CONTENT_LENGTH = 25 * 1024 * 1024  # 25MB per request

    # Upload / local storage settings
    UPLOAD_DIR = os.path.abspath(os.getenv("UPLOAD_DIR", "./uploads"))
    DATA_DIR = os.path.abspath(os.getenv("DATA_DIR", "./data"))
    CACHE_DIR = os.path.abspath(os.getenv("CACHE_DIR", "./data/cache"))
    ALLOWED_EXTENSIONS = {"jpg", "jpeg", "png", "webp"}

    # Google settings (API key or Vertex AI)
    GOOGLE_API_KEY = os.getenv("GOOGLE_API_KEY") or os.getenv("GEMINI_API_KEY")
    GOOGLE_CLOUD_PROJECT = os.getenv("GOOGLE_CLOUD_PROJECT")
    GOOGLE_CLOUD_LOCATION = os.getenv("GOOGLE_CLOUD_LOCATION", "global")

    # OpenAI settings
    OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")

    # Model settings
    DEFAULT_GEMINI_MODEL = os.getenv("DEFAULT_GEMINI_MODEL", "gemini-2.5-flash")
    DEFAULT_OPENAI_MODEL = os.getenv("DEFAULT_OPENAI_MODEL", "gpt-4o-mini")

    # Provider order per task (comma separated, first wins)
    INGREDIENT_PROVIDERS = os.getenv("INGREDIENT_PROVIDERS", "gemini,openai")
    GROCERY_PROVIDERS = os.getenv("GROCERY_PROVIDERS", "openai,gemini")
    RECIPE_PROVIDERS = os.getenv("RECIPE_PROVIDERS", "gemini,openai")
    ALLOW_MOCK_DETECTION = _env_flag("ALLOW_MOCK_DETECTION", "true")

    # Response cache
    CACHE_ENABLED = _env_flag("CACHE_ENABLED", "true")
    CACHE_TTL_SECONDS = int(os.getenv("CACHE_TTL_SECONDS", str(24 * 60 * 60)))

    # Provider retries
    MAX_RETRIES = int(os.getenv("MAX_RETRIES", "3"))
    RETRY_DELAY_SECONDS = float(os.getenv("RETRY_DELAY_SECONDS", "1.0"))

    # Saved recipes
    RECIPE_STORE = os.getenv("RECIPE_STORE", "local").lower()
    RECIPES_TABLE = os.getenv("RECIPES_TABLE", "ROYCO_AI_RECIPES")
    AWS_REGION = os.getenv("AWS_REGION") or os.getenv("AWS_DEFAULT_REGION") or "eu-west-1"
    MAX_SAVED_RECIPES = int(os.getenv("MAX_SAVED_RECIPES", "100"))

    # Royco overlay on generated recipes
    ROYCO_ENHANCEMENT = _env_flag("ROYCO_ENHANCEMENT", "true")

    @classmethod
    def init_app(cls, app):
        """Initialize app with configuration"""
        # Create local directories if they don't exist
        for key in ("UPLOAD_DIR", "DATA_DIR", "CACHE_DIR"):
            os.makedirs(app.config[key], exist_ok=True)


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    ALLOW_MOCK_DETECTION = _env_flag("ALLOW_MOCK_DETECTION", "false")


class TestingConfig(Config):
    """Testing configuration"""
    TESTING = True
    UPLOAD_DIR = os.path.abspath("./test_uploads")
    DATA_DIR = os.path.abspath("./test_data")
    CACHE_DIR = os.path.abspath("./test_data/cache")
    GOOGLE_API_KEY = None
    GOOGLE_CLOUD_PROJECT = None
    OPENAI_API_KEY = None
    CACHE_ENABLED = False
    RETRY_DELAY_SECONDS = 0.0
    RECIPE_STORE = "local"


# Configuration dictionary
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
