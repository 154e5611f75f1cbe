"""Shared pure functions for the service layer (no Streamlit dependency)."""

from __future__ import annotations

from collections.abc import Iterable

from pitwall.models import RaceScenario, StrategyPlan, TelemetrySample

from ..constants import COMPARISON_COLORS, F1_RED, TEAMS


def group_telemetry_by_driver(
    telemetry: Iterable[TelemetrySample],
) -> dict[str, list[TelemetrySample]]:
    """Return samples per driver, each list sorted by lap.

    Drivers keep the order in which they first appear.
    """
    grouped: dict[str, list[TelemetrySample]] = {}
    for sample in telemetry:
        grouped.setdefault(sample.driver, []).append(sample)
    for samples in grouped.values():
        samples.sort(key=lambda s: s.lap)
    return grouped


def lead_driver_name(scenario: RaceScenario) -> str | None:
    lead = scenario.lead_driver
    return lead.driver if lead is not None else None


def stint_rows(plan: StrategyPlan) -> list[dict]:
    """Flatten a plan into timeline rows: plan, stint, compound, start, end, laps."""
    return [
        {
            "plan": plan.name,
            "stint": index,
            "compound": stint.tire_compound.value,
            "start_lap": stint.start_lap,
            "end_lap": stint.end_lap,
            "laps": stint.duration,
        }
        for index, stint in enumerate(plan.stints, start=1)
    ]


def team_for_driver(driver: str) -> str | None:
    """Return the team name a driver races for, or None if unknown."""
    for team, info in TEAMS.items():
        if driver in info["drivers"]:
            return team
    return None


def assign_driver_colors(drivers: list[str]) -> dict[str, str]:
    """Assign a unique color to each driver, handling teammate collisions."""
    colors: dict[str, str] = {}
    used_colors: set[str] = set()
    fallback_idx = 0

    for driver in drivers:
        team = team_for_driver(driver)
        color = (TEAMS[team]["color"] if team else F1_RED).upper()

        if color in used_colors:
            found = False
            while fallback_idx < len(COMPARISON_COLORS):
                candidate = COMPARISON_COLORS[fallback_idx].upper()
                fallback_idx += 1
                if candidate not in used_colors:
                    color = candidate
                    found = True
                    break
            if not found:
                color = f"#{sum(map(ord, driver)) * 2654435761 % 0xFFFFFF:06X}"

        used_colors.add(color)
        colors[driver] = color

    return colors
