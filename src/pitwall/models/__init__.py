"""Pitwall data models."""

from pitwall.models.chat import ChatMessage
from pitwall.models.enums import (
    SLICK_COMPOUNDS,
    WET_WEATHER_COMPOUNDS,
    DrivingStyle,
    EventType,
    Severity,
    TireCompound,
    TireCondition,
    TrackDegradation,
)
from pitwall.models.scenario import RaceScenario, SavedScenario, StartingGridEntry
from pitwall.models.simulation import LapSimulation, RaceEvent, SimulatedPosition
from pitwall.models.strategy import StrategyAnalysis, StrategyPlan, StrategyStint
from pitwall.models.telemetry import TelemetrySample

__all__ = [
    "SLICK_COMPOUNDS",
    "WET_WEATHER_COMPOUNDS",
    "ChatMessage",
    "DrivingStyle",
    "EventType",
    "LapSimulation",
    "RaceEvent",
    "RaceScenario",
    "SavedScenario",
    "Severity",
    "SimulatedPosition",
    "StartingGridEntry",
    "StrategyAnalysis",
    "StrategyPlan",
    "StrategyStint",
    "TelemetrySample",
    "TireCompound",
    "TireCondition",
    "TrackDegradation",
]
