"""Application configuration."""
import os
from typing import Optional

# Constants - avoid magic numbers
DEFAULT_JWT_EXPIRATION_HOURS = 168  # 7 days
DEFAULT_SECRET_KEY = "dev-secret-key-change-in-production"
DEFAULT_DAILY_DRAW_LIMIT = 1
DEFAULT_HISTORY_LIMIT = 30
DEFAULT_LLM_MODEL = "gpt-3.5-turbo"


def get_database_url() -> str:
    """Get database connection URL."""
    return os.getenv("DATABASE_URL", "sqlite:///symbol_quest.db")


def _int_env(name: str, default: int) -> int:
    return int(os.getenv(name, default))


class Config:
    """Base configuration."""

    # Flask
    SECRET_KEY = os.getenv("FLASK_SECRET_KEY", DEFAULT_SECRET_KEY)

    # Database
    SQLALCHEMY_DATABASE_URI = get_database_url()
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Security
    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", SECRET_KEY)
    JWT_EXPIRATION_HOURS = _int_env("JWT_EXPIRATION_HOURS", DEFAULT_JWT_EXPIRATION_HOURS)
    JWT_ACCESS_TOKEN_EXPIRES = JWT_EXPIRATION_HOURS * 3600  # Convert to seconds

    # Rate limiting
    RATELIMIT_STORAGE_URI = os.getenv("RATELIMIT_STORAGE_URI", "memory://")
    RATELIMIT_ENABLED = True

    # Draws
    DAILY_DRAW_LIMIT = _int_env("DAILY_DRAW_LIMIT", DEFAULT_DAILY_DRAW_LIMIT)
    HISTORY_LIMIT = _int_env("HISTORY_LIMIT", DEFAULT_HISTORY_LIMIT)

    # Enhanced interpretation (OpenAI-compatible chat completions)
    LLM_API_ENDPOINT = os.getenv("LLM_API_ENDPOINT", "")
    LLM_API_KEY = os.getenv("LLM_API_KEY", "")
    LLM_MODEL = os.getenv("LLM_MODEL", DEFAULT_LLM_MODEL)


class DevelopmentConfig(Config):
    """Development configuration."""

    DEBUG = True
    TESTING = False


class TestingConfig(Config):
    """Testing configuration."""

    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"  # In-memory for tests
    RATELIMIT_ENABLED = False
    LLM_API_ENDPOINT = ""
    LLM_API_KEY = ""


class ProductionConfig(Config):
    """Production configuration."""

    DEBUG = False
    TESTING = False

    def __init__(self):
        """Initialize production config and validate required env vars."""
        super().__init__()

        # In production, these MUST be set via environment variables
        self.SECRET_KEY = os.getenv("FLASK_SECRET_KEY")
        self.JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY")

        if not self.SECRET_KEY:
            raise ValueError("FLASK_SECRET_KEY must be set in production")

        if not self.JWT_SECRET_KEY:
            raise ValueError("JWT_SECRET_KEY must be set in production")

        # Reject insecure default values
        if self.SECRET_KEY == DEFAULT_SECRET_KEY:
            raise ValueError(
                "FLASK_SECRET_KEY is using insecure default value. "
                "Please set a secure secret key in production."
            )

        if self.JWT_SECRET_KEY == DEFAULT_SECRET_KEY:
            raise ValueError(
                "JWT_SECRET_KEY is using insecure default value. "
                "Please set a secure secret key in production."
            )


# Configuration dictionary
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(env: Optional[str] = None) -> type:
    """
    Get configuration class based on environment.

    Args:
        env: Environment name (development, testing, production)

    Returns:
        Configuration class
    """
    if env is None:
        env = os.getenv("FLASK_ENV", "development")

    return config.get(env, config["default"])
