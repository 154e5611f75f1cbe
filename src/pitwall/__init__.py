"""Pitwall — AI-generated race scenarios, tire strategies and strategy audits."""

from pitwall._prompts import ScenarioOptions
from pitwall.audit import evaluate_strategy
from pitwall.client import AsyncPitwallClient, PitwallClient
from pitwall.exceptions import (
    PitwallAPIError,
    PitwallConnectionError,
    PitwallEmptyResponseError,
    PitwallError,
    PitwallGenerationError,
    PitwallResponseFormatError,
    PitwallTimeoutError,
    PitwallValidationError,
)

__all__ = [
    "AsyncPitwallClient",
    "PitwallAPIError",
    "PitwallClient",
    "PitwallConnectionError",
    "PitwallEmptyResponseError",
    "PitwallError",
    "PitwallGenerationError",
    "PitwallResponseFormatError",
    "PitwallTimeoutError",
    "PitwallValidationError",
    "ScenarioOptions",
    "evaluate_strategy",
]

__version__ = "0.1.0"
