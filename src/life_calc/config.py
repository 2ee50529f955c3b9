"""
Application settings.
Loaded from ``LIFE_CALC_*`` environment variables or a local ``.env``.
"""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_STORE_PATH = Path.home() / ".life-calc" / "dates.json"


class Settings(BaseSettings):
    """Settings for the life-calc shell"""

    # ======================
    # Storage
    # ======================
    STORE_PATH: Path = DEFAULT_STORE_PATH

    # ======================
    # Logging
    # ======================
    LOG_LEVEL: str = "WARNING"

    model_config = SettingsConfigDict(
        env_prefix="LIFE_CALC_",
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


def load_settings() -> Settings:
    """Build settings from the current environment."""
    return Settings()
