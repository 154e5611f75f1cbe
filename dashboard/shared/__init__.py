"""Shared dashboard utilities.

Streamlit-bound helpers live in ``shared.session`` and ``shared.resources``
and are imported by the pages directly.
"""

# --- Constants & formatting ---
from .constants import (
    COMPOUND_COLORS,
    F1_RED,
    PLOTLY_LAYOUT_DEFAULTS,
    TIRE_CONDITION_COLORS,
    TRACK_TYPES,
    WEATHER_PATTERNS,
)
from .formatters import format_event, format_lap_time, format_wear

# --- Configuration ---
from .config import Settings, get_settings

# --- Data layer ---
from .data import (
    GenerationError,
    ScenarioStoreError,
    StrategyDataError,
    get_generator,
    get_store,
)

# --- Service layer ---
from .services import (
    StrategyService,
    assign_driver_colors,
    compute_driver_stats,
    group_telemetry_by_driver,
    position_history,
    sort_driver_stats,
    stint_rows,
)

__all__ = [
    "COMPOUND_COLORS",
    "F1_RED",
    "GenerationError",
    "PLOTLY_LAYOUT_DEFAULTS",
    "ScenarioStoreError",
    "Settings",
    "StrategyDataError",
    "StrategyService",
    "TIRE_CONDITION_COLORS",
    "TRACK_TYPES",
    "WEATHER_PATTERNS",
    "assign_driver_colors",
    "compute_driver_stats",
    "format_event",
    "format_lap_time",
    "format_wear",
    "get_generator",
    "get_settings",
    "get_store",
    "group_telemetry_by_driver",
    "position_history",
    "sort_driver_stats",
    "stint_rows",
]
