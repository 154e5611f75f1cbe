"""Tests for shared/formatters.py."""

from __future__ import annotations

from pitwall.models import RaceEvent

from shared.formatters import format_event, format_lap_time, format_wear


class TestFormatLapTime:
    def test_minutes(self):
        assert format_lap_time(91.234) == "1:31.234"

    def test_under_a_minute(self):
        assert format_lap_time(59.5) == "0:59.500"

    def test_none(self):
        assert format_lap_time(None) == "—"


class TestFormatWear:
    def test_value(self):
        assert format_wear(42.46) == "42.5%"

    def test_none(self):
        assert format_wear(None) == "—"


class TestFormatEvent:
    def test_plain(self):
        event = RaceEvent(type="PIT", description="L. Norris pits for Hards.")
        assert format_event(event) == "Pit stop: L. Norris pits for Hards."

    def test_severity(self):
        event = RaceEvent(type="INFO", description="Spin at Turn 4.", severity="moderate")
        assert format_event(event) == "Info (moderate): Spin at Turn 4."
