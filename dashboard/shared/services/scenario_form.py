"""Validation and assembly of hand-authored race scenarios."""

from __future__ import annotations

from pitwall.models import (
    SLICK_COMPOUNDS,
    WET_WEATHER_COMPOUNDS,
    RaceScenario,
    StartingGridEntry,
    TrackDegradation,
)

from ..constants import DEFAULT_GRID, MAX_CUSTOM_LAPS, MIN_CUSTOM_LAPS


def default_grid() -> list[str]:
    """A fresh copy of the default 20-driver grid, pole first."""
    return list(DEFAULT_GRID)


def parse_race_laps(raw: str | int | None) -> int | None:
    """Parse a lap count typed into the form, or None if it is not a whole number."""
    if raw is None:
        return None
    if isinstance(raw, int):
        return raw
    try:
        return int(raw.strip())
    except ValueError:
        return None


def validate_custom_scenario(
    track: str,
    race_laps: str | int | None,
    drivers: list[str],
) -> dict[str, str]:
    """Return {field: message} for every invalid field; empty when valid."""
    errors: dict[str, str] = {}
    if not track.strip():
        errors["track"] = "Track name is required."

    laps = parse_race_laps(race_laps)
    if laps is None or not MIN_CUSTOM_LAPS <= laps <= MAX_CUSTOM_LAPS:
        errors["race_laps"] = (
            f"Race laps must be a number between {MIN_CUSTOM_LAPS} and {MAX_CUSTOM_LAPS}."
        )

    if not drivers or any(not d.strip() for d in drivers):
        errors["starting_grid"] = "All driver names are required."
    return errors


def build_custom_scenario(
    track: str,
    weather: str,
    race_laps: str | int,
    drivers: list[str],
    track_degradation: TrackDegradation | None = None,
) -> RaceScenario:
    """Assemble a scenario from form input that passed validation.

    Rain tires are offered only when the weather mentions rain.
    """
    laps = parse_race_laps(race_laps)
    if laps is None:
        raise ValueError(f"race_laps is not a whole number: {race_laps!r}")

    tires = list(SLICK_COMPOUNDS)
    if "rain" in weather.lower():
        tires += list(WET_WEATHER_COMPOUNDS)

    return RaceScenario(
        track=track.strip(),
        weather=weather.strip(),
        race_laps=laps,
        available_tires=tires,
        starting_grid=[
            StartingGridEntry(position=position, driver=driver.strip())
            for position, driver in enumerate(drivers, start=1)
        ],
        track_degradation=track_degradation,
    )
