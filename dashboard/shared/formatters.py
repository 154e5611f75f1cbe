"""Formatting helpers for the strategy lab dashboard."""

from __future__ import annotations

from pitwall.models import RaceEvent

from .constants import EVENT_LABELS


def format_lap_time(seconds: float | None) -> str:
    """Format seconds as m:ss.fff or '—' if None."""
    if seconds is None:
        return "—"
    mins, secs = divmod(seconds, 60)
    return f"{int(mins)}:{secs:06.3f}"


def format_wear(wear: float | None) -> str:
    """Format a tire wear percentage as '42.5%' or '—' if None."""
    if wear is None:
        return "—"
    return f"{wear:.1f}%"


def format_event(event: RaceEvent) -> str:
    """One-line event label, e.g. 'Overtake (minor): Norris passes Leclerc'."""
    label = EVENT_LABELS.get(event.type.value, event.type.value.title())
    if event.severity is not None:
        label = f"{label} ({event.severity.value})"
    return f"{label}: {event.description}"
