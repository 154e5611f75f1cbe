"""Dashboard settings via pydantic-settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from pitwall.client import DEFAULT_MODEL

MISSING_API_KEY_MESSAGE = "GEMINI_API_KEY environment variable not set"


class Settings(BaseSettings):
    """Strategy lab configuration.

    Values are loaded from environment variables, falling back to a ``.env``
    file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Generative model
    gemini_api_key: str = ""
    gemini_model: str = DEFAULT_MODEL
    request_timeout: float = 120.0

    # Saved scenarios
    scenario_store_path: str = "data/saved_scenarios.json"

    @property
    def has_api_key(self) -> bool:
        return bool(self.gemini_api_key.strip())


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
