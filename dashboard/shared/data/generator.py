"""Generative-model access for the dashboard data layer."""

from __future__ import annotations

from collections.abc import Sequence

from pitwall import PitwallClient, PitwallError, ScenarioOptions
from pitwall.models import (
    ChatMessage,
    LapSimulation,
    RaceScenario,
    StrategyAnalysis,
    TelemetrySample,
)

from ..api_logging import log_api_call
from .errors import GenerationError


class ModelGenerator:
    """Wraps a PitwallClient, logging each request and mapping client errors.

    Every method raises ``GenerationError`` (carrying the client's message)
    instead of the client's own exception types.
    """

    def __init__(self, client: PitwallClient) -> None:
        self._client = client

    @log_api_call
    def scenario_and_telemetry(
        self, options: ScenarioOptions,
    ) -> tuple[RaceScenario, list[TelemetrySample]]:
        try:
            return self._client.generate_scenario_and_telemetry(options)
        except PitwallError as exc:
            raise GenerationError(str(exc)) from exc

    @log_api_call
    def telemetry(self, scenario: RaceScenario) -> list[TelemetrySample]:
        try:
            return self._client.generate_telemetry(scenario)
        except PitwallError as exc:
            raise GenerationError(str(exc)) from exc

    @log_api_call
    def strategy(
        self,
        scenario: RaceScenario,
        telemetry: Sequence[TelemetrySample],
    ) -> StrategyAnalysis:
        try:
            return self._client.analyze_strategy(scenario, telemetry)
        except PitwallError as exc:
            raise GenerationError(str(exc)) from exc

    @log_api_call
    def simulation(
        self,
        scenario: RaceScenario,
        strategy: StrategyAnalysis,
    ) -> list[LapSimulation]:
        try:
            return self._client.simulate_race(scenario, strategy)
        except PitwallError as exc:
            raise GenerationError(str(exc)) from exc

    @log_api_call
    def answer(
        self,
        scenario: RaceScenario,
        strategy: StrategyAnalysis,
        history: Sequence[ChatMessage],
    ) -> str:
        try:
            return self._client.ask_follow_up(scenario, strategy, history)
        except PitwallError as exc:
            raise GenerationError(str(exc)) from exc
