"""Strategy lab service — orchestrates generation, auditing and chat."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from pitwall import ScenarioOptions, evaluate_strategy
from pitwall.models import (
    ChatMessage,
    LapSimulation,
    RaceScenario,
    StrategyAnalysis,
    TelemetrySample,
)

from ..api_logging import log_service_call
from ..data.errors import GenerationError
from ..data.generator import ModelGenerator

logger = logging.getLogger(__name__)

CHAT_APOLOGY = (
    "I'm sorry, but I encountered an error trying to process your question. "
    "Please try again."
)


@dataclass(frozen=True)
class ScenarioBundle:
    scenario: RaceScenario
    telemetry: list[TelemetrySample]


@dataclass(frozen=True)
class StrategyReport:
    analysis: StrategyAnalysis
    warnings: list[str]


class StrategyService:
    """Business logic behind the Race Control, simulation and chat pages."""

    def __init__(self, generator: ModelGenerator) -> None:
        self._generator = generator

    @log_service_call
    def generate_scenario(self, options: ScenarioOptions) -> ScenarioBundle:
        """Generate a scenario and its first-stint telemetry."""
        scenario, telemetry = self._generator.scenario_and_telemetry(options)
        return ScenarioBundle(scenario=scenario, telemetry=telemetry)

    @log_service_call
    def load_custom_scenario(self, scenario: RaceScenario) -> ScenarioBundle:
        """Generate telemetry for a hand-authored or saved scenario."""
        return ScenarioBundle(scenario=scenario, telemetry=self._generator.telemetry(scenario))

    @log_service_call
    def analyze(
        self,
        scenario: RaceScenario,
        telemetry: Sequence[TelemetrySample],
    ) -> StrategyReport:
        """Ask for a strategy and audit it against the scenario and telemetry."""
        if not telemetry:
            raise GenerationError("Please generate a race scenario and telemetry first.")
        analysis = self._generator.strategy(scenario, telemetry)
        return StrategyReport(
            analysis=analysis,
            warnings=evaluate_strategy(analysis, scenario, telemetry),
        )

    @log_service_call
    def simulate(
        self,
        scenario: RaceScenario,
        strategy: StrategyAnalysis,
    ) -> list[LapSimulation]:
        return self._generator.simulation(scenario, strategy)

    @log_service_call
    def ask(
        self,
        scenario: RaceScenario,
        strategy: StrategyAnalysis,
        history: Sequence[ChatMessage],
        question: str,
    ) -> list[ChatMessage]:
        """Return *history* extended with the question and the model's answer.

        A failed request still yields an answer: the apology text, so the
        transcript stays usable.
        """
        transcript = [*history, ChatMessage(role="user", content=question)]
        try:
            answer = self._generator.answer(scenario, strategy, transcript)
        except GenerationError as exc:
            logger.warning("Follow-up question failed: %s", exc)
            answer = CHAT_APOLOGY
        return [*transcript, ChatMessage(role="model", content=answer)]
