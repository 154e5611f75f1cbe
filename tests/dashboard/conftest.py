"""Shared fixtures for dashboard tests."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path

import pytest

from pitwall.models import (
    LapSimulation,
    RaceEvent,
    RaceScenario,
    SimulatedPosition,
    StartingGridEntry,
    TelemetrySample,
    TireCompound,
)

# Add dashboard to path so `shared` is importable
_dashboard_dir = str(Path(__file__).resolve().parent.parent.parent / "dashboard")
if _dashboard_dir not in sys.path:
    sys.path.insert(0, _dashboard_dir)


# ── Sample data fixtures ─────────────────────────────────────────────────────


def _make_sample(
    driver: str = "L. Norris",
    lap: int = 1,
    tire_wear: float | None = 2.0,
    lap_time: float | None = 91.0,
    compound: TireCompound = TireCompound.MEDIUM,
) -> TelemetrySample:
    return TelemetrySample(
        driver=driver,
        lap=lap,
        tire_compound=compound,
        tire_wear=tire_wear,
        lap_time=lap_time,
    )


def _make_lap(lap: int, order: list[str], events: Sequence[tuple[str, str]] = ()) -> LapSimulation:
    return LapSimulation(
        lap=lap,
        positions=[
            SimulatedPosition(position=pos, driver=driver, tire_compound=TireCompound.MEDIUM)
            for pos, driver in enumerate(order, start=1)
        ],
        events=[RaceEvent(type=kind, description=text) for kind, text in events],
    )


@pytest.fixture
def make_sample():
    """Factory fixture for creating telemetry samples with custom values."""
    return _make_sample


@pytest.fixture
def make_lap():
    """Factory fixture for creating simulated laps."""
    return _make_lap


@pytest.fixture
def sample_scenario() -> RaceScenario:
    return RaceScenario(
        track="Monza",
        weather="Sunny",
        race_laps=53,
        starting_grid=[
            StartingGridEntry(position=1, driver="C. Leclerc"),
            StartingGridEntry(position=2, driver="L. Norris"),
            StartingGridEntry(position=3, driver="M. Verstappen"),
        ],
        available_tires=[TireCompound.SOFT, TireCompound.MEDIUM, TireCompound.HARD],
    )


@pytest.fixture
def sample_telemetry() -> list[TelemetrySample]:
    """Two drivers, three laps each, deliberately out of lap order."""
    return [
        _make_sample("C. Leclerc", 2, tire_wear=6.0, lap_time=85.8),
        _make_sample("L. Norris", 1, tire_wear=3.0, lap_time=86.4),
        _make_sample("C. Leclerc", 1, tire_wear=3.0, lap_time=86.2),
        _make_sample("C. Leclerc", 3, tire_wear=9.5, lap_time=85.7),
        _make_sample("L. Norris", 3, tire_wear=10.0, lap_time=85.9),
        _make_sample("L. Norris", 2, tire_wear=6.5, lap_time=86.0),
    ]


@pytest.fixture
def sample_simulation() -> list[LapSimulation]:
    """Three laps: an overtake with DRS, a pit stop, then the fastest lap."""
    return [
        _make_lap(1, ["C. Leclerc", "L. Norris", "M. Verstappen"], [
            ("INFO", "Clean getaway for the front row."),
        ]),
        _make_lap(2, ["L. Norris", "C. Leclerc", "M. Verstappen"], [
            ("DRS", "L. Norris uses DRS on the main straight."),
            ("OVERTAKE", "L. Norris overtakes C. Leclerc into Turn 1."),
        ]),
        _make_lap(3, ["L. Norris", "M. Verstappen", "C. Leclerc"], [
            ("PIT", "C. Leclerc pits for Hard tires."),
            ("OVERTAKE", "M. Verstappen passes C. Leclerc in the pit cycle."),
            ("FASTEST_LAP", "M. Verstappen sets the fastest lap of the race."),
        ]),
    ]
