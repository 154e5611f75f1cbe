"""Enumerations shared by scenario, strategy and simulation models."""

from __future__ import annotations

from enum import Enum


class _CaseInsensitiveEnum(str, Enum):
    """String enum whose lookup ignores case and surrounding whitespace."""

    @classmethod
    def _missing_(cls, value: object) -> _CaseInsensitiveEnum | None:
        if isinstance(value, str):
            wanted = value.strip().lower()
            for member in cls:
                if member.value.lower() == wanted:
                    return member
        return None

    def __str__(self) -> str:
        return self.value


class TireCompound(_CaseInsensitiveEnum):
    """Tire compounds; the last two are rain tires."""

    SOFT = "Soft"
    MEDIUM = "Medium"
    HARD = "Hard"
    INTERMEDIATE = "Intermediate"
    WET = "Wet"

    @property
    def is_wet_weather(self) -> bool:
        return self in (TireCompound.INTERMEDIATE, TireCompound.WET)


SLICK_COMPOUNDS: tuple[TireCompound, ...] = (
    TireCompound.SOFT,
    TireCompound.MEDIUM,
    TireCompound.HARD,
)
WET_WEATHER_COMPOUNDS: tuple[TireCompound, ...] = (
    TireCompound.INTERMEDIATE,
    TireCompound.WET,
)


class TrackDegradation(_CaseInsensitiveEnum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class DrivingStyle(_CaseInsensitiveEnum):
    AGGRESSIVE = "Aggressive"
    SMOOTH = "Smooth"
    BALANCED = "Balanced"


class TireCondition(_CaseInsensitiveEnum):
    """Qualitative tire state reported by the race simulation."""

    FRESH = "Fresh"
    GOOD = "Good"
    WORN = "Worn"
    AGED = "Aged"


class EventType(_CaseInsensitiveEnum):
    PIT = "PIT"
    OVERTAKE = "OVERTAKE"
    FASTEST_LAP = "FASTEST_LAP"
    INFO = "INFO"
    DRS = "DRS"
    VSC = "VSC"
    MECHANICAL_ISSUE = "MECHANICAL_ISSUE"
    TIRE_WEAR = "TIRE_WEAR"


class Severity(_CaseInsensitiveEnum):
    MINOR = "minor"
    MODERATE = "moderate"
    MAJOR = "major"
