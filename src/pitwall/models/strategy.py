"""Pit/tire strategy models."""

from __future__ import annotations

from pydantic import Field

from pitwall.models._base import WireModel
from pitwall.models.enums import TireCompound


class StrategyStint(WireModel):
    """Laps ``start_lap`` to ``end_lap`` (inclusive) on one compound."""

    start_lap: int
    end_lap: int
    tire_compound: TireCompound

    @property
    def duration(self) -> int:
        return self.end_lap - self.start_lap + 1


class StrategyPlan(WireModel):
    """A named sequence of stints."""

    name: str
    stints: list[StrategyStint] = Field(default_factory=list)

    @property
    def first_stint(self) -> StrategyStint | None:
        return self.stints[0] if self.stints else None

    @property
    def pit_laps(self) -> list[int]:
        """Laps on which the car pits (end of every stint but the last)."""
        return [stint.end_lap for stint in self.stints[:-1]]


class StrategyAnalysis(WireModel):
    """Report text plus the primary and alternative plans."""

    analysis_text: str = ""
    plan_a: StrategyPlan | None = None
    plan_b: StrategyPlan | None = None

    @property
    def plans(self) -> list[StrategyPlan]:
        """Plan A then Plan B, skipping whichever is absent."""
        return [plan for plan in (self.plan_a, self.plan_b) if plan is not None]
