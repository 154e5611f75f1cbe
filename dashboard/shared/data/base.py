"""Abstract base for saved-scenario storage."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pitwall.models import RaceScenario, SavedScenario


def scenario_display_name(scenario: RaceScenario) -> str:
    """Default label for a saved scenario, e.g. 'Monza (Sunny, 53 Laps)'."""
    return f"{scenario.track} ({scenario.weather}, {scenario.race_laps} Laps)"


class ScenarioStore(ABC):
    """Backend-agnostic interface for named scenario persistence."""

    @abstractmethod
    def list_scenarios(self) -> list[SavedScenario]: ...

    @abstractmethod
    def save(self, scenario: RaceScenario, name: str | None = None) -> SavedScenario: ...

    @abstractmethod
    def get(self, scenario_id: str) -> SavedScenario: ...

    @abstractmethod
    def delete(self, scenario_id: str) -> None: ...
