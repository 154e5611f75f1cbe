"""Race scenario models (track, weather, grid)."""

from __future__ import annotations

from pydantic import Field

from pitwall.models._base import WireModel
from pitwall.models.enums import DrivingStyle, TireCompound, TrackDegradation


class StartingGridEntry(WireModel):
    """One slot on the starting grid."""

    position: int
    driver: str
    driving_style: DrivingStyle | None = None


class RaceScenario(WireModel):
    """A race to plan for: track, conditions, distance and grid."""

    track: str
    weather: str
    race_laps: int = Field(ge=1)
    starting_grid: list[StartingGridEntry] = Field(default_factory=list)
    available_tires: list[TireCompound] = Field(default_factory=list)
    track_degradation: TrackDegradation | None = None

    @property
    def is_rainy(self) -> bool:
        """True when the weather description mentions rain."""
        return "rain" in self.weather.lower()

    @property
    def lead_driver(self) -> StartingGridEntry | None:
        """The grid entry with the lowest position, or None for an empty grid."""
        if not self.starting_grid:
            return None
        return min(self.starting_grid, key=lambda entry: entry.position)


class SavedScenario(RaceScenario):
    """A scenario persisted under an id and display name."""

    id: str
    name: str
