"""Tests for shared/services/strategy_service.py — orchestration with a mocked generator."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from pitwall import ScenarioOptions
from pitwall.models import (
    ChatMessage,
    StrategyAnalysis,
    StrategyPlan,
    StrategyStint,
    TireCompound,
)

from shared.data.errors import GenerationError
from shared.data.generator import ModelGenerator
from shared.services.strategy_service import (
    CHAT_APOLOGY,
    ScenarioBundle,
    StrategyReport,
    StrategyService,
)


@pytest.fixture
def generator():
    return MagicMock(spec=ModelGenerator)


@pytest.fixture
def service(generator):
    return StrategyService(generator)


def _risky_strategy() -> StrategyAnalysis:
    return StrategyAnalysis(
        analysis_text="Go long on Softs.",
        plan_a=StrategyPlan(
            name="Plan A",
            stints=[
                StrategyStint(start_lap=1, end_lap=25, tire_compound=TireCompound.SOFT),
                StrategyStint(start_lap=26, end_lap=53, tire_compound=TireCompound.HARD),
            ],
        ),
    )


class TestGenerateScenario:
    def test_bundle(self, service, generator, sample_scenario, sample_telemetry):
        generator.scenario_and_telemetry.return_value = (sample_scenario, sample_telemetry)
        bundle = service.generate_scenario(ScenarioOptions())
        assert bundle == ScenarioBundle(scenario=sample_scenario, telemetry=sample_telemetry)

    def test_error_propagates(self, service, generator):
        generator.scenario_and_telemetry.side_effect = GenerationError("quota")
        with pytest.raises(GenerationError, match="quota"):
            service.generate_scenario(ScenarioOptions())


class TestLoadCustomScenario:
    def test_generates_telemetry(self, service, generator, sample_scenario, sample_telemetry):
        generator.telemetry.return_value = sample_telemetry
        bundle = service.load_custom_scenario(sample_scenario)
        assert bundle.scenario is sample_scenario
        assert bundle.telemetry == sample_telemetry
        generator.telemetry.assert_called_once_with(sample_scenario)


class TestAnalyze:
    def test_requires_telemetry(self, service, generator, sample_scenario):
        with pytest.raises(GenerationError, match="generate a race scenario and telemetry first"):
            service.analyze(sample_scenario, [])
        generator.strategy.assert_not_called()

    def test_report_includes_warnings(self, service, generator, sample_scenario, sample_telemetry):
        generator.strategy.return_value = _risky_strategy()
        report = service.analyze(sample_scenario, sample_telemetry)
        assert isinstance(report, StrategyReport)
        assert report.analysis.analysis_text == "Go long on Softs."
        assert report.warnings == [
            'Plan A: The planned Soft tire stint of 25 laps is very long and risks a '
            'severe performance drop-off ("cliff").'
        ]

    def test_clean_strategy(self, service, generator, sample_scenario, sample_telemetry):
        generator.strategy.return_value = StrategyAnalysis(analysis_text="Fine")
        assert service.analyze(sample_scenario, sample_telemetry).warnings == []


class TestSimulate:
    def test_passes_through(self, service, generator, sample_scenario, sample_simulation):
        generator.simulation.return_value = sample_simulation
        strategy = _risky_strategy()
        assert service.simulate(sample_scenario, strategy) == sample_simulation
        generator.simulation.assert_called_once_with(sample_scenario, strategy)


class TestAsk:
    def test_appends_question_and_answer(self, service, generator, sample_scenario):
        generator.answer.return_value = "Pit on lap 18."
        history = [
            ChatMessage(role="user", content="Undercut?"),
            ChatMessage(role="model", content="Possible."),
        ]
        result = service.ask(sample_scenario, _risky_strategy(), history, "When do we pit?")
        assert [(m.role, m.content) for m in result] == [
            ("user", "Undercut?"),
            ("model", "Possible."),
            ("user", "When do we pit?"),
            ("model", "Pit on lap 18."),
        ]
        # The model sees the new question as the last message
        sent_history = generator.answer.call_args.args[2]
        assert sent_history[-1].content == "When do we pit?"
        assert len(history) == 2

    def test_failure_answers_with_apology(self, service, generator, sample_scenario):
        generator.answer.side_effect = GenerationError("HTTP 500: boom")
        result = service.ask(sample_scenario, _risky_strategy(), [], "Why?")
        assert result[-1] == ChatMessage(role="model", content=CHAT_APOLOGY)
        assert len(result) == 2
