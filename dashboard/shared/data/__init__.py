"""Data layer — model access, scenario storage and their factories."""

from __future__ import annotations

from pitwall import PitwallClient

from ..config import MISSING_API_KEY_MESSAGE, Settings, get_settings
from .base import ScenarioStore, scenario_display_name
from .errors import GenerationError, ScenarioStoreError, StrategyDataError
from .generator import ModelGenerator
from .json_store import JsonFileScenarioStore


def get_store(settings: Settings | None = None) -> ScenarioStore:
    """Return the saved-scenario store configured in *settings*."""
    settings = settings or get_settings()
    return JsonFileScenarioStore(settings.scenario_store_path)


def get_generator(settings: Settings | None = None) -> ModelGenerator:
    """Return a model generator, or raise GenerationError when no API key is set."""
    settings = settings or get_settings()
    if not settings.has_api_key:
        raise GenerationError(MISSING_API_KEY_MESSAGE)
    client = PitwallClient(
        api_key=settings.gemini_api_key,
        model=settings.gemini_model,
        timeout=settings.request_timeout,
    )
    return ModelGenerator(client)


__all__ = [
    "GenerationError",
    "JsonFileScenarioStore",
    "ModelGenerator",
    "ScenarioStore",
    "ScenarioStoreError",
    "StrategyDataError",
    "get_generator",
    "get_store",
    "scenario_display_name",
]
