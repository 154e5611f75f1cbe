"""Lap-by-lap race simulation models."""

from __future__ import annotations

from pydantic import Field

from pitwall.models._base import WireModel
from pitwall.models.enums import EventType, Severity, TireCompound, TireCondition


class RaceEvent(WireModel):
    """Something that happened on a lap (pit stop, overtake, VSC...)."""

    type: EventType
    description: str
    severity: Severity | None = None


class SimulatedPosition(WireModel):
    """A driver's running position and tire state at the end of a lap."""

    position: int
    driver: str
    tire_compound: TireCompound | None = None
    tire_wear: float | None = None
    tire_condition: TireCondition | None = None


class LapSimulation(WireModel):
    """Running order and events for a single lap."""

    lap: int
    positions: list[SimulatedPosition] = Field(default_factory=list)
    events: list[RaceEvent] = Field(default_factory=list)
