from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings validated via Pydantic.

    Values are loaded from environment variables and/or a .env file.
    """

    # API Keys
    gemini_api_key: str = ""

    # Model tiers: fast outline pass, high-quality deep-dive pass
    overview_model: str = "gemini-1.5-flash"
    deep_dive_model: str = "gemini-1.5-pro"

    # Show persona used in the deep-dive prompt
    show_name: str = "Crazy Wisdom"
    host_name: str = "Stewart Alsop"

    # App config
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance.

    Gracefully handles missing .env files (e.g. in CI/testing) by falling
    back to environment variables and defaults.
    """
    try:
        return Settings()
    except Exception:
        # If .env is missing or unreadable, build settings from env vars only.
        return Settings(_env_file=None)  # type: ignore[call-arg]


settings = get_settings()
