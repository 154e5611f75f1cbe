"""Per-driver statistics derived from a lap-by-lap race simulation."""

from __future__ import annotations

import re
from dataclasses import dataclass, fields

from pitwall.models import EventType, LapSimulation, RaceEvent

# Event descriptions name drivers as "L. Norris", "K. Antonelli", ...
_DRIVER_NAME_RE = re.compile(r"[A-Z]\.\s[A-Z][a-z]+")

_COUNTED_EVENTS = {
    EventType.PIT: "pit_stops",
    EventType.OVERTAKE: "overtakes",
    EventType.DRS: "drs_uses",
}


@dataclass(frozen=True)
class DriverStats:
    driver: str
    final_position: int
    pit_stops: int
    overtakes: int
    drs_uses: int
    has_fastest_lap: bool


SORTABLE_FIELDS = tuple(f.name for f in fields(DriverStats))


def drivers_in_event(event: RaceEvent) -> list[str]:
    """Driver names mentioned in an event description."""
    return _DRIVER_NAME_RE.findall(event.description)


def fastest_lap_holder(simulation: list[LapSimulation]) -> str | None:
    """First driver named in the first FASTEST_LAP event, if any."""
    for lap in simulation:
        for event in lap.events:
            if event.type is EventType.FASTEST_LAP:
                names = drivers_in_event(event)
                return names[0] if names else None
    return None


def compute_driver_stats(simulation: list[LapSimulation]) -> list[DriverStats]:
    """Count pit stops, overtakes and DRS uses for every finisher.

    An event counts for a driver when its description mentions the driver's
    name, so one overtake event counts for both drivers involved.
    Results follow the final lap's running order.
    """
    if not simulation:
        return []

    final_lap = simulation[-1]
    fastest = fastest_lap_holder(simulation)
    events = [event for lap in simulation for event in lap.events]

    stats: list[DriverStats] = []
    for entry in final_lap.positions:
        counts = dict.fromkeys(_COUNTED_EVENTS.values(), 0)
        for event in events:
            key = _COUNTED_EVENTS.get(event.type)
            if key is not None and entry.driver in event.description:
                counts[key] += 1
        stats.append(DriverStats(
            driver=entry.driver,
            final_position=entry.position,
            has_fastest_lap=entry.driver == fastest,
            **counts,
        ))
    return stats


def sort_driver_stats(
    stats: list[DriverStats],
    key: str = "final_position",
    descending: bool = False,
) -> list[DriverStats]:
    if key not in SORTABLE_FIELDS:
        raise ValueError(f"Unknown sort key: {key!r}")
    return sorted(stats, key=lambda s: getattr(s, key), reverse=descending)


def position_history(simulation: list[LapSimulation]) -> dict[str, list[tuple[int, int]]]:
    """Return {driver: [(lap, position), ...]} for a position chart."""
    history: dict[str, list[tuple[int, int]]] = {}
    for lap in simulation:
        for entry in lap.positions:
            history.setdefault(entry.driver, []).append((lap.lap, entry.position))
    return history
