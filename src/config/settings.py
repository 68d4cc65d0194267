import os

from dotenv import load_dotenv


load_dotenv()


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """Application configuration settings."""

    # Environment
    ENVIRONMENT = os.getenv("ENVIRONMENT", "development")

    # Database
    DATABASE_URL = os.getenv("DATABASE_URL", None)
    DB_POOL_SIZE = int(os.getenv("DB_POOL_SIZE", "5"))
    DB_MAX_OVERFLOW = int(os.getenv("DB_MAX_OVERFLOW", "10"))
    DB_POOL_TIMEOUT = int(os.getenv("DB_POOL_TIMEOUT", "30"))
    DB_POOL_RECYCLE = int(os.getenv("DB_POOL_RECYCLE", "3600"))
    DB_COMMAND_TIMEOUT = int(os.getenv("DB_COMMAND_TIMEOUT", "60"))

    # Rate Limiting
    RATE_LIMIT_ENABLED = _env_bool("RATE_LIMIT_ENABLED", "true")
    INTERACTIONS_RATE_LIMIT = os.getenv("INTERACTIONS_RATE_LIMIT", "120/minute")

    # Analytics
    # When enabled, products without observed activity get placeholder values
    # so dashboard charts never render empty series.
    ANALYTICS_SIMULATE_MISSING_DATA = _env_bool(
        "ANALYTICS_SIMULATE_MISSING_DATA", "true"
    )
    ANALYTICS_RANDOM_SEED = (
        int(os.getenv("ANALYTICS_RANDOM_SEED"))
        if os.getenv("ANALYTICS_RANDOM_SEED")
        else None
    )


settings = Settings()
