"""Public client classes for AI-generated race scenarios, strategies and simulations."""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from pitwall._http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, AsyncTransport, SyncTransport
from pitwall._prompts import (
    TELEMETRY_DRIVERS,
    ScenarioOptions,
    follow_up_prompt,
    follower_telemetry_prompt,
    lead_telemetry_prompt,
    scenario_prompt,
    simulation_prompt,
    starting_tire,
    strategy_prompt,
)
from pitwall._schemas import (
    SCENARIO_SCHEMA,
    SIMULATION_SCHEMA,
    STRATEGY_SCHEMA,
    TELEMETRY_SCHEMA,
    Schema,
)
from pitwall.exceptions import (
    PitwallEmptyResponseError,
    PitwallError,
    PitwallGenerationError,
    PitwallResponseFormatError,
    PitwallValidationError,
)
from pitwall.models._base import WireModel
from pitwall.models.chat import ChatMessage
from pitwall.models.enums import TireCompound
from pitwall.models.scenario import RaceScenario, StartingGridEntry
from pitwall.models.simulation import LapSimulation
from pitwall.models.strategy import StrategyAnalysis
from pitwall.models.telemetry import TelemetrySample

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.5-pro"

T = TypeVar("T")


class _TelemetryBatch(WireModel):
    telemetry: list[TelemetrySample]


class _SimulationBatch(WireModel):
    simulation: list[LapSimulation]


def _validate(model_type: type[T], data: Any) -> T:
    """Validate parsed JSON against a Pydantic model."""
    try:
        return TypeAdapter(model_type).validate_python(data)
    except ValidationError as exc:
        raise PitwallValidationError(
            f"Failed to validate {model_type.__name__} response: {exc}"
        ) from exc


def _endpoint(model: str) -> str:
    return f"/models/{model}:generateContent"


def _request_body(prompt: str, schema: Schema | None) -> dict[str, Any]:
    body: dict[str, Any] = {
        "contents": [{"role": "user", "parts": [{"text": prompt}]}],
    }
    if schema is not None:
        body["generationConfig"] = {
            "responseMimeType": "application/json",
            "responseSchema": schema,
        }
    return body


def _extract_text(response: dict[str, Any]) -> str:
    """Concatenate the text parts of the first candidate."""
    candidates = response.get("candidates") or []
    if candidates:
        parts = (candidates[0].get("content") or {}).get("parts") or []
        text = "".join(part.get("text", "") for part in parts)
        if text.strip():
            return text
    raise PitwallEmptyResponseError("AI model returned an empty response.")


def _parse_json(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        logger.error("Failed to parse JSON from model response: %s", exc)
        raise PitwallResponseFormatError(
            "The AI model returned data in an invalid format. Please try again."
        ) from exc


def _telemetry_drivers(scenario: RaceScenario) -> list[StartingGridEntry]:
    grid = sorted(scenario.starting_grid, key=lambda entry: entry.position)
    return grid[:TELEMETRY_DRIVERS]


def _telemetry_prompt(
    scenario: RaceScenario,
    slot: int,
    entry: StartingGridEntry,
    tire: TireCompound,
    baseline: list[float],
) -> str:
    if slot == 1:
        return lead_telemetry_prompt(scenario, entry, tire)
    return follower_telemetry_prompt(scenario, entry, slot, tire, baseline)


def _telemetry_failure(entry: StartingGridEntry, exc: PitwallError) -> PitwallGenerationError:
    logger.warning("Failed to generate telemetry for driver %s: %s", entry.driver, exc)
    return PitwallGenerationError(
        "Failed to generate complete telemetry data. "
        f"The process stopped at driver {entry.driver}."
    )


def _lap_times(samples: Sequence[TelemetrySample]) -> list[float]:
    return [s.lap_time for s in samples if s.lap_time is not None]


class PitwallClient:
    """Synchronous client for the generative model behind the strategy lab.

    Usage:
        client = PitwallClient(api_key="...")
        scenario = client.generate_scenario()
        client.close()

        # Or as a context manager:
        with PitwallClient(api_key="...") as client:
            scenario, telemetry = client.generate_scenario_and_telemetry()
            analysis = client.analyze_strategy(scenario, telemetry)
    """

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.model = model
        self._transport = SyncTransport(api_key=api_key, base_url=base_url, timeout=timeout)

    def __enter__(self) -> PitwallClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection."""
        self._transport.close()

    # ── Raw generation ─────────────────────────────────────────

    def generate_text(self, prompt: str) -> str:
        """Send a free-text prompt and return the model's reply."""
        response = self._transport.post(_endpoint(self.model), _request_body(prompt, None))
        return _extract_text(response)

    def generate_json(self, prompt: str, schema: Schema) -> Any:
        """Send a prompt constrained by *schema* and return the parsed JSON."""
        response = self._transport.post(_endpoint(self.model), _request_body(prompt, schema))
        return _parse_json(_extract_text(response))

    # ── Operations ─────────────────────────────────────────────

    def generate_scenario(self, options: ScenarioOptions | None = None) -> RaceScenario:
        """Generate a race scenario honouring the optional constraints."""
        data = self.generate_json(scenario_prompt(options or ScenarioOptions()), SCENARIO_SCHEMA)
        return _validate(RaceScenario, data)

    def generate_telemetry(self, scenario: RaceScenario) -> list[TelemetrySample]:
        """Generate first-stint telemetry for the top of the grid, leader first."""
        tire = starting_tire(scenario)
        baseline: list[float] = []
        samples: list[TelemetrySample] = []
        for slot, entry in enumerate(_telemetry_drivers(scenario), start=1):
            prompt = _telemetry_prompt(scenario, slot, entry, tire, baseline)
            try:
                batch = _validate(_TelemetryBatch, self.generate_json(prompt, TELEMETRY_SCHEMA))
            except PitwallError as exc:
                raise _telemetry_failure(entry, exc) from exc
            if slot == 1:
                baseline = _lap_times(batch.telemetry)
            samples.extend(batch.telemetry)
        return samples

    def generate_scenario_and_telemetry(
        self, options: ScenarioOptions | None = None,
    ) -> tuple[RaceScenario, list[TelemetrySample]]:
        """Generate a scenario, then telemetry for it."""
        scenario = self.generate_scenario(options)
        return scenario, self.generate_telemetry(scenario)

    def analyze_strategy(
        self,
        scenario: RaceScenario,
        telemetry: Sequence[TelemetrySample],
    ) -> StrategyAnalysis:
        """Ask for a Plan A / Plan B strategy report."""
        data = self.generate_json(strategy_prompt(scenario, telemetry), STRATEGY_SCHEMA)
        return _validate(StrategyAnalysis, data)

    def simulate_race(
        self,
        scenario: RaceScenario,
        strategy: StrategyAnalysis,
    ) -> list[LapSimulation]:
        """Ask for a lap-by-lap simulation with the leader on Plan A."""
        data = self.generate_json(simulation_prompt(scenario, strategy), SIMULATION_SCHEMA)
        return _validate(_SimulationBatch, data).simulation

    def ask_follow_up(
        self,
        scenario: RaceScenario,
        strategy: StrategyAnalysis,
        history: Sequence[ChatMessage],
    ) -> str:
        """Answer the latest chat message using only the scenario and report."""
        return self.generate_text(follow_up_prompt(scenario, strategy, history))


class AsyncPitwallClient:
    """Asynchronous client for the generative model behind the strategy lab.

    Usage:
        async with AsyncPitwallClient(api_key="...") as client:
            scenario = await client.generate_scenario()
    """

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.model = model
        self._transport = AsyncTransport(api_key=api_key, base_url=base_url, timeout=timeout)

    async def __aenter__(self) -> AsyncPitwallClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP connection."""
        await self._transport.close()

    # ── Raw generation ─────────────────────────────────────────

    async def generate_text(self, prompt: str) -> str:
        """Send a free-text prompt and return the model's reply."""
        response = await self._transport.post(_endpoint(self.model), _request_body(prompt, None))
        return _extract_text(response)

    async def generate_json(self, prompt: str, schema: Schema) -> Any:
        """Send a prompt constrained by *schema* and return the parsed JSON."""
        response = await self._transport.post(_endpoint(self.model), _request_body(prompt, schema))
        return _parse_json(_extract_text(response))

    # ── Operations ─────────────────────────────────────────────

    async def generate_scenario(self, options: ScenarioOptions | None = None) -> RaceScenario:
        """Generate a race scenario honouring the optional constraints."""
        data = await self.generate_json(
            scenario_prompt(options or ScenarioOptions()), SCENARIO_SCHEMA,
        )
        return _validate(RaceScenario, data)

    async def generate_telemetry(self, scenario: RaceScenario) -> list[TelemetrySample]:
        """Generate first-stint telemetry for the top of the grid, leader first.

        Drivers are requested one after another: followers are paced against
        the leader's lap times.
        """
        tire = starting_tire(scenario)
        baseline: list[float] = []
        samples: list[TelemetrySample] = []
        for slot, entry in enumerate(_telemetry_drivers(scenario), start=1):
            prompt = _telemetry_prompt(scenario, slot, entry, tire, baseline)
            try:
                data = await self.generate_json(prompt, TELEMETRY_SCHEMA)
                batch = _validate(_TelemetryBatch, data)
            except PitwallError as exc:
                raise _telemetry_failure(entry, exc) from exc
            if slot == 1:
                baseline = _lap_times(batch.telemetry)
            samples.extend(batch.telemetry)
        return samples

    async def generate_scenario_and_telemetry(
        self, options: ScenarioOptions | None = None,
    ) -> tuple[RaceScenario, list[TelemetrySample]]:
        """Generate a scenario, then telemetry for it."""
        scenario = await self.generate_scenario(options)
        return scenario, await self.generate_telemetry(scenario)

    async def analyze_strategy(
        self,
        scenario: RaceScenario,
        telemetry: Sequence[TelemetrySample],
    ) -> StrategyAnalysis:
        """Ask for a Plan A / Plan B strategy report."""
        data = await self.generate_json(strategy_prompt(scenario, telemetry), STRATEGY_SCHEMA)
        return _validate(StrategyAnalysis, data)

    async def simulate_race(
        self,
        scenario: RaceScenario,
        strategy: StrategyAnalysis,
    ) -> list[LapSimulation]:
        """Ask for a lap-by-lap simulation with the leader on Plan A."""
        data = await self.generate_json(simulation_prompt(scenario, strategy), SIMULATION_SCHEMA)
        return _validate(_SimulationBatch, data).simulation

    async def ask_follow_up(
        self,
        scenario: RaceScenario,
        strategy: StrategyAnalysis,
        history: Sequence[ChatMessage],
    ) -> str:
        """Answer the latest chat message using only the scenario and report."""
        return await self.generate_text(follow_up_prompt(scenario, strategy, history))
