"""Service layer — business logic for the strategy lab."""

from .common import (
    assign_driver_colors,
    group_telemetry_by_driver,
    lead_driver_name,
    stint_rows,
    team_for_driver,
)
from .race_stats import (
    SORTABLE_FIELDS,
    DriverStats,
    compute_driver_stats,
    drivers_in_event,
    fastest_lap_holder,
    position_history,
    sort_driver_stats,
)
from .scenario_form import build_custom_scenario, default_grid, validate_custom_scenario
from .strategy_service import CHAT_APOLOGY, ScenarioBundle, StrategyReport, StrategyService

__all__ = [
    "CHAT_APOLOGY",
    "DriverStats",
    "SORTABLE_FIELDS",
    "ScenarioBundle",
    "StrategyReport",
    "StrategyService",
    "assign_driver_colors",
    "build_custom_scenario",
    "compute_driver_stats",
    "default_grid",
    "drivers_in_event",
    "fastest_lap_holder",
    "group_telemetry_by_driver",
    "lead_driver_name",
    "position_history",
    "sort_driver_stats",
    "stint_rows",
    "team_for_driver",
    "validate_custom_scenario",
]
