"""Shared test fixtures and sample model responses."""

from __future__ import annotations

import json
from typing import Any

import pytest

from pitwall.models import (
    RaceScenario,
    StrategyAnalysis,
    TelemetrySample,
)

BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
GENERATE_URL = f"{BASE_URL}/models/gemini-2.5-pro:generateContent"
API_KEY = "test-key"


SAMPLE_SCENARIO = {
    "track": "Silverstone",
    "weather": "Sunny",
    "raceLaps": 52,
    "startingGrid": [
        {"position": 1, "driver": "L. Norris", "drivingStyle": "Smooth"},
        {"position": 2, "driver": "M. Verstappen", "drivingStyle": "Aggressive"},
        {"position": 3, "driver": "O. Piastri", "drivingStyle": "Balanced"},
        {"position": 4, "driver": "C. Leclerc", "drivingStyle": "Aggressive"},
        {"position": 5, "driver": "L. Hamilton", "drivingStyle": "Smooth"},
        {"position": 6, "driver": "G. Russell", "drivingStyle": "Balanced"},
    ],
    "availableTires": ["Soft", "Medium", "Hard"],
    "trackDegradation": "Medium",
}


def telemetry_payload(driver: str, laps: int = 3, start_time: float = 91.0) -> dict[str, Any]:
    """A ``{"telemetry": [...]}`` body for one driver."""
    return {
        "telemetry": [
            {
                "driver": driver,
                "lap": lap,
                "tireCompound": "Medium",
                "tireWear": 2.0 * lap,
                "lapTime": start_time - 0.1 * lap,
                "fuelLoad": 110.0 - 1.5 * lap,
                "ersDeployment": 60.0,
                "tyreTemperature": 98.0,
                "brakeTemperature": 650.0,
                "downforceLevel": 7.0,
            }
            for lap in range(1, laps + 1)
        ]
    }


SAMPLE_STRATEGY = {
    "analysisText": "PLAN A\nOne stop, Medium to Hard.",
    "planA": {
        "name": "Plan A: One-Stop",
        "stints": [
            {"startLap": 1, "endLap": 22, "tireCompound": "Medium"},
            {"startLap": 23, "endLap": 52, "tireCompound": "Hard"},
        ],
    },
    "planB": {
        "name": "Plan B: Two-Stop",
        "stints": [
            {"startLap": 1, "endLap": 15, "tireCompound": "Soft"},
            {"startLap": 16, "endLap": 35, "tireCompound": "Medium"},
            {"startLap": 36, "endLap": 52, "tireCompound": "Hard"},
        ],
    },
}

SAMPLE_SIMULATION = {
    "simulation": [
        {
            "lap": 1,
            "positions": [
                {"position": 1, "driver": "L. Norris", "tireCompound": "Medium",
                 "tireWear": 2.0, "tireCondition": "Fresh"},
                {"position": 2, "driver": "M. Verstappen", "tireCompound": "Medium",
                 "tireWear": 2.5, "tireCondition": "Fresh"},
            ],
            "events": [
                {"type": "INFO", "description": "Clean start from L. Norris."},
            ],
        },
        {
            "lap": 2,
            "positions": [
                {"position": 1, "driver": "M. Verstappen", "tireCompound": "Medium",
                 "tireWear": 5.0, "tireCondition": "Fresh"},
                {"position": 2, "driver": "L. Norris", "tireCompound": "Medium",
                 "tireWear": 4.0, "tireCondition": "Fresh"},
            ],
            "events": [
                {"type": "OVERTAKE", "description": "M. Verstappen passes L. Norris into Stowe."},
                {"type": "FASTEST_LAP", "description": "M. Verstappen sets the fastest lap."},
            ],
        },
    ]
}


def gemini_response(payload: Any) -> dict[str, Any]:
    """Wrap *payload* the way generateContent returns a JSON-mode answer."""
    text = payload if isinstance(payload, str) else json.dumps(payload)
    return {
        "candidates": [
            {"content": {"role": "model", "parts": [{"text": text}]}, "finishReason": "STOP"}
        ]
    }


@pytest.fixture
def scenario() -> RaceScenario:
    return RaceScenario.model_validate(SAMPLE_SCENARIO)


@pytest.fixture
def strategy() -> StrategyAnalysis:
    return StrategyAnalysis.model_validate(SAMPLE_STRATEGY)


@pytest.fixture
def telemetry() -> list[TelemetrySample]:
    return [
        TelemetrySample.model_validate(sample)
        for sample in telemetry_payload("L. Norris")["telemetry"]
    ]
