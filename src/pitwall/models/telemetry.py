"""Per-lap telemetry sample model."""

from __future__ import annotations

from pitwall.models._base import WireModel
from pitwall.models.enums import TireCompound


class TelemetrySample(WireModel):
    """One driver's telemetry for one lap."""

    driver: str
    lap: int
    tire_compound: TireCompound
    tire_wear: float | None = None
    lap_time: float | None = None
    fuel_load: float | None = None
    ers_deployment: float | None = None
    tyre_temperature: float | None = None
    brake_temperature: float | None = None
    downforce_level: float | None = None
