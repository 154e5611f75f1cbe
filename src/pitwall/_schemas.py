"""JSON response schemas sent to the model with each structured request.

Schemas use the generateContent ``responseSchema`` dialect (upper-case type
names). Enumerations come from the model enums so prompts, schemas and
parsing agree on spelling.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pitwall.models.enums import (
    DrivingStyle,
    EventType,
    Severity,
    TireCompound,
    TireCondition,
    TrackDegradation,
)

Schema = dict[str, Any]


def _enum(enum_type: type[Enum], description: str | None = None) -> Schema:
    schema: Schema = {"type": "STRING", "enum": [member.value for member in enum_type]}
    if description:
        schema["description"] = description
    return schema


def _obj(properties: dict[str, Schema], required: list[str] | None = None) -> Schema:
    return {
        "type": "OBJECT",
        "properties": properties,
        "required": required if required is not None else list(properties),
    }


def _array(items: Schema, description: str | None = None) -> Schema:
    schema: Schema = {"type": "ARRAY", "items": items}
    if description:
        schema["description"] = description
    return schema


STRING: Schema = {"type": "STRING"}
INTEGER: Schema = {"type": "INTEGER"}


def _number(description: str) -> Schema:
    return {"type": "NUMBER", "description": description}


SCENARIO_SCHEMA: Schema = _obj({
    "track": {"type": "STRING", "description": "Name of the F1 race track."},
    "weather": {"type": "STRING", "description": "Weather conditions, e.g., Sunny, Light Rain."},
    "trackDegradation": _enum(
        TrackDegradation, "The tire degradation characteristic of the track surface.",
    ),
    "availableTires": _array(
        _enum(TireCompound), "List of available tire compounds using standard names.",
    ),
    "startingGrid": _array(
        _obj({
            "position": INTEGER,
            "driver": STRING,
            "drivingStyle": _enum(DrivingStyle, "The driver's typical style."),
        }),
        "All 20 drivers and their starting positions, including their driving style.",
    ),
    "raceLaps": {"type": "INTEGER", "description": "Total number of laps for the race."},
})

TELEMETRY_SCHEMA: Schema = _obj({
    "telemetry": _array(_obj({
        "lap": INTEGER,
        "driver": {"type": "STRING", "description": "Driver's name, as provided in the scenario."},
        "lapTime": _number("Lap time in seconds, e.g., 91.234"),
        "tireWear": _number("Tire wear percentage, e.g., 15.5"),
        "fuelLoad": _number("Remaining fuel load in kg."),
        "ersDeployment": _number("Energy Recovery System deployment in kJ for the lap."),
        "tyreTemperature": _number("Average tyre surface temperature in Celsius for the lap."),
        "brakeTemperature": _number("Peak brake disc temperature in Celsius reached during the lap."),
        "downforceLevel": _number(
            "A relative index of aerodynamic downforce level (e.g., 75 for a high-downforce track).",
        ),
        "tireCompound": _enum(TireCompound),
    })),
})


def _plan(example_name: str) -> Schema:
    return _obj({
        "name": {"type": "STRING", "description": f"Name for the strategy, e.g., '{example_name}'"},
        "stints": _array(_obj({
            "startLap": INTEGER,
            "endLap": INTEGER,
            "tireCompound": _enum(TireCompound),
        })),
    })


STRATEGY_SCHEMA: Schema = _obj({
    "analysisText": {
        "type": "STRING",
        "description": "The full, human-readable text report of the strategy analysis.",
    },
    "planA": _plan("Plan A: Optimal One-Stop"),
    "planB": _plan("Plan B: Aggressive Two-Stop"),
})

SIMULATION_SCHEMA: Schema = _obj({
    "simulation": _array(_obj({
        "lap": INTEGER,
        "positions": _array(_obj({
            "position": INTEGER,
            "driver": STRING,
            "tireCompound": _enum(TireCompound),
            "tireWear": _number("Tire wear percentage for this lap."),
            "tireCondition": _enum(TireCondition, "Qualitative state of the tires."),
        })),
        "events": _array(_obj(
            {
                "type": _enum(EventType),
                "description": STRING,
                "severity": _enum(Severity, "Optional severity rating for incidents."),
            },
            required=["type", "description"],
        )),
    })),
})
