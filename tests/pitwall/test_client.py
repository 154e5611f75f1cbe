"""Tests for the Pitwall client classes."""

from __future__ import annotations

import json

import httpx
import pytest
import respx

from pitwall import (
    AsyncPitwallClient,
    PitwallAPIError,
    PitwallClient,
    PitwallEmptyResponseError,
    PitwallGenerationError,
    PitwallResponseFormatError,
    PitwallValidationError,
    ScenarioOptions,
)
from pitwall.models import (
    ChatMessage,
    LapSimulation,
    RaceScenario,
    StrategyAnalysis,
    TelemetrySample,
    TireCompound,
    TrackDegradation,
)
from tests.conftest import (
    API_KEY,
    GENERATE_URL,
    SAMPLE_SCENARIO,
    SAMPLE_SIMULATION,
    SAMPLE_STRATEGY,
    gemini_response,
    telemetry_payload,
)

TOP_FIVE = ["L. Norris", "M. Verstappen", "O. Piastri", "C. Leclerc", "L. Hamilton"]


def _request_json(route: respx.Route, index: int = -1) -> dict:
    return json.loads(route.calls[index].request.content)


def _prompt(route: respx.Route, index: int = -1) -> str:
    return _request_json(route, index)["contents"][0]["parts"][0]["text"]


def _telemetry_responses() -> list[httpx.Response]:
    return [
        httpx.Response(200, json=gemini_response(telemetry_payload(driver)))
        for driver in TOP_FIVE
    ]


class TestPitwallClient:
    @respx.mock
    def test_generate_scenario(self) -> None:
        route = respx.post(GENERATE_URL).mock(
            return_value=httpx.Response(200, json=gemini_response(SAMPLE_SCENARIO))
        )
        with PitwallClient(api_key=API_KEY) as client:
            scenario = client.generate_scenario()
        assert isinstance(scenario, RaceScenario)
        assert scenario.track == "Silverstone"
        body = _request_json(route)
        assert body["generationConfig"]["responseMimeType"] == "application/json"
        assert "startingGrid" in body["generationConfig"]["responseSchema"]["properties"]
        assert route.calls.last.request.headers["x-goog-api-key"] == API_KEY

    @respx.mock
    def test_generate_scenario_options_reach_prompt(self) -> None:
        route = respx.post(GENERATE_URL).mock(
            return_value=httpx.Response(200, json=gemini_response(SAMPLE_SCENARIO))
        )
        options = ScenarioOptions(
            track_type="Street Circuit",
            weather_pattern="Wet Race",
            track_degradation=TrackDegradation.HIGH,
        )
        with PitwallClient(api_key=API_KEY) as client:
            client.generate_scenario(options)
        prompt = _prompt(route)
        assert "street circuit" in prompt
        assert "'High'" in prompt
        assert "'Wet Race'" in prompt

    @respx.mock
    def test_custom_model(self) -> None:
        route = respx.post(
            "https://generativelanguage.googleapis.com/v1beta/models/gemini-2.5-flash:generateContent"
        ).mock(return_value=httpx.Response(200, json=gemini_response("Box this lap.")))
        with PitwallClient(api_key=API_KEY, model="gemini-2.5-flash") as client:
            assert client.generate_text("Pit?") == "Box this lap."
        assert route.called
        assert "generationConfig" not in _request_json(route)

    @respx.mock
    def test_generate_telemetry_top_five_in_order(self) -> None:
        route = respx.post(GENERATE_URL).mock(side_effect=_telemetry_responses())
        scenario = RaceScenario.model_validate(SAMPLE_SCENARIO)
        with PitwallClient(api_key=API_KEY) as client:
            telemetry = client.generate_telemetry(scenario)

        assert route.call_count == 5
        assert len(telemetry) == 15
        assert all(isinstance(s, TelemetrySample) for s in telemetry)
        assert list(dict.fromkeys(s.driver for s in telemetry)) == TOP_FIVE

        assert "lead driver: L. Norris" in _prompt(route, 0)
        follower = _prompt(route, 1)
        assert "P2: M. Verstappen" in follower
        assert "baseline lap times were: 90.9, 90.8, 90.7" in follower
        assert "0.10 to 0.20 seconds" in follower
        assert 'exactly "Medium"' in follower

    @respx.mock
    def test_generate_telemetry_stops_at_failing_driver(self) -> None:
        responses = _telemetry_responses()
        responses[2] = httpx.Response(200, json=gemini_response("not json"))
        route = respx.post(GENERATE_URL).mock(side_effect=responses)
        scenario = RaceScenario.model_validate(SAMPLE_SCENARIO)
        with PitwallClient(api_key=API_KEY) as client:
            with pytest.raises(PitwallGenerationError) as exc_info:
                client.generate_telemetry(scenario)
        assert route.call_count == 3
        assert str(exc_info.value) == (
            "Failed to generate complete telemetry data. "
            "The process stopped at driver O. Piastri."
        )
        assert isinstance(exc_info.value.__cause__, PitwallResponseFormatError)

    @respx.mock
    def test_generate_telemetry_short_grid(self) -> None:
        route = respx.post(GENERATE_URL).mock(
            return_value=httpx.Response(200, json=gemini_response(telemetry_payload("A. Driver")))
        )
        scenario = RaceScenario.model_validate({
            **SAMPLE_SCENARIO,
            "startingGrid": [{"position": 1, "driver": "A. Driver"}],
            "availableTires": ["Soft", "Hard"],
        })
        with PitwallClient(api_key=API_KEY) as client:
            client.generate_telemetry(scenario)
        assert route.call_count == 1
        assert 'exactly "Soft"' in _prompt(route)

    @respx.mock
    def test_generate_scenario_and_telemetry(self) -> None:
        respx.post(GENERATE_URL).mock(side_effect=[
            httpx.Response(200, json=gemini_response(SAMPLE_SCENARIO)),
            *_telemetry_responses(),
        ])
        with PitwallClient(api_key=API_KEY) as client:
            scenario, telemetry = client.generate_scenario_and_telemetry()
        assert scenario.race_laps == 52
        assert len(telemetry) == 15

    @respx.mock
    def test_analyze_strategy(self, scenario, telemetry) -> None:
        route = respx.post(GENERATE_URL).mock(
            return_value=httpx.Response(200, json=gemini_response(SAMPLE_STRATEGY))
        )
        with PitwallClient(api_key=API_KEY) as client:
            analysis = client.analyze_strategy(scenario, telemetry)
        assert isinstance(analysis, StrategyAnalysis)
        assert analysis.plan_a is not None
        assert analysis.plan_a.stints[1].tire_compound is TireCompound.HARD
        prompt = _prompt(route)
        assert "Lead driver (L. Norris) telemetry summary over 3 laps" in prompt
        assert "Total Laps: 52" in prompt

    @respx.mock
    def test_simulate_race(self, scenario, strategy) -> None:
        route = respx.post(GENERATE_URL).mock(
            return_value=httpx.Response(200, json=gemini_response(SAMPLE_SIMULATION))
        )
        with PitwallClient(api_key=API_KEY) as client:
            laps = client.simulate_race(scenario, strategy)
        assert len(laps) == 2
        assert isinstance(laps[0], LapSimulation)
        assert "Plan A: One-Stop, pitting around lap 22" in _prompt(route)

    @respx.mock
    def test_ask_follow_up(self, scenario, strategy) -> None:
        route = respx.post(GENERATE_URL).mock(
            return_value=httpx.Response(200, json=gemini_response("Because the Hards last."))
        )
        history = [ChatMessage(role="user", content="Why one stop?")]
        with PitwallClient(api_key=API_KEY) as client:
            answer = client.ask_follow_up(scenario, strategy, history)
        assert answer == "Because the Hards last."
        prompt = _prompt(route)
        assert "user: Why one stop?" in prompt
        assert "One stop, Medium to Hard." in prompt

    @respx.mock
    def test_api_error(self) -> None:
        respx.post(GENERATE_URL).mock(
            return_value=httpx.Response(429, json={"error": {"message": "Quota exceeded"}})
        )
        with PitwallClient(api_key=API_KEY) as client:
            with pytest.raises(PitwallAPIError) as exc_info:
                client.generate_scenario()
        assert exc_info.value.status_code == 429

    @respx.mock
    @pytest.mark.parametrize(
        "body",
        [{"candidates": []}, {}, {"candidates": [{"content": {"parts": [{"text": "  "}]}}]}],
        ids=["no-candidates", "no-key", "blank-text"],
    )
    def test_empty_response(self, body: dict) -> None:
        respx.post(GENERATE_URL).mock(return_value=httpx.Response(200, json=body))
        with PitwallClient(api_key=API_KEY) as client:
            with pytest.raises(PitwallEmptyResponseError, match="empty response"):
                client.generate_scenario()

    @respx.mock
    def test_invalid_json(self) -> None:
        respx.post(GENERATE_URL).mock(
            return_value=httpx.Response(200, json=gemini_response("```json {oops"))
        )
        with PitwallClient(api_key=API_KEY) as client:
            with pytest.raises(PitwallResponseFormatError, match="invalid format"):
                client.generate_scenario()

    @respx.mock
    def test_validation_error(self) -> None:
        respx.post(GENERATE_URL).mock(
            return_value=httpx.Response(200, json=gemini_response({"track": "Monza"}))
        )
        with PitwallClient(api_key=API_KEY) as client:
            with pytest.raises(PitwallValidationError, match="RaceScenario"):
                client.generate_scenario()

    @respx.mock
    def test_multi_part_text(self) -> None:
        text = json.dumps(SAMPLE_SCENARIO)
        body = {"candidates": [{"content": {"parts": [{"text": text[:20]}, {"text": text[20:]}]}}]}
        respx.post(GENERATE_URL).mock(return_value=httpx.Response(200, json=body))
        with PitwallClient(api_key=API_KEY) as client:
            assert client.generate_scenario().track == "Silverstone"


class TestAsyncPitwallClient:
    @respx.mock
    @pytest.mark.asyncio
    async def test_generate_scenario(self) -> None:
        respx.post(GENERATE_URL).mock(
            return_value=httpx.Response(200, json=gemini_response(SAMPLE_SCENARIO))
        )
        async with AsyncPitwallClient(api_key=API_KEY) as client:
            scenario = await client.generate_scenario()
        assert scenario.track == "Silverstone"

    @respx.mock
    @pytest.mark.asyncio
    async def test_generate_telemetry(self) -> None:
        route = respx.post(GENERATE_URL).mock(side_effect=_telemetry_responses())
        scenario = RaceScenario.model_validate(SAMPLE_SCENARIO)
        async with AsyncPitwallClient(api_key=API_KEY) as client:
            telemetry = await client.generate_telemetry(scenario)
        assert route.call_count == 5
        assert telemetry[0].driver == "L. Norris"
        assert telemetry[-1].driver == "L. Hamilton"

    @respx.mock
    @pytest.mark.asyncio
    async def test_generate_telemetry_failure(self) -> None:
        responses = _telemetry_responses()
        responses[0] = httpx.Response(500, text="boom")
        respx.post(GENERATE_URL).mock(side_effect=responses)
        scenario = RaceScenario.model_validate(SAMPLE_SCENARIO)
        async with AsyncPitwallClient(api_key=API_KEY) as client:
            with pytest.raises(PitwallGenerationError, match="stopped at driver L. Norris"):
                await client.generate_telemetry(scenario)

    @respx.mock
    @pytest.mark.asyncio
    async def test_analyze_and_simulate(self, scenario, telemetry) -> None:
        respx.post(GENERATE_URL).mock(side_effect=[
            httpx.Response(200, json=gemini_response(SAMPLE_STRATEGY)),
            httpx.Response(200, json=gemini_response(SAMPLE_SIMULATION)),
        ])
        async with AsyncPitwallClient(api_key=API_KEY) as client:
            analysis = await client.analyze_strategy(scenario, telemetry)
            laps = await client.simulate_race(scenario, analysis)
        assert len(analysis.plans) == 2
        assert laps[-1].lap == 2

    @respx.mock
    @pytest.mark.asyncio
    async def test_ask_follow_up(self, scenario, strategy) -> None:
        respx.post(GENERATE_URL).mock(
            return_value=httpx.Response(200, json=gemini_response("Lap 22."))
        )
        async with AsyncPitwallClient(api_key=API_KEY) as client:
            answer = await client.ask_follow_up(
                scenario, strategy, [ChatMessage(role="user", content="When?")],
            )
        assert answer == "Lap 22."
