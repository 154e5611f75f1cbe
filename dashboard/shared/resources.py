"""Process-wide dashboard resources, cached across Streamlit reruns."""

from __future__ import annotations

import streamlit as st

from .data import ScenarioStore, get_generator, get_store
from .services import StrategyService


@st.cache_resource
def get_strategy_service() -> StrategyService:
    """Raises GenerationError (uncached) when no API key is configured."""
    return StrategyService(get_generator())


@st.cache_resource
def get_scenario_store() -> ScenarioStore:
    return get_store()
