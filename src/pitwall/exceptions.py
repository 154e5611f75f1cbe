"""Custom exceptions for the Pitwall client."""

from __future__ import annotations


class PitwallError(Exception):
    """Base exception for all Pitwall client errors."""


class PitwallConnectionError(PitwallError):
    """Raised when the client cannot connect to the model service."""


class PitwallTimeoutError(PitwallError):
    """Raised when a request to the model service times out."""


class PitwallAPIError(PitwallError):
    """Raised when the model service returns an error response (4xx/5xx)."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}")


class PitwallEmptyResponseError(PitwallError):
    """Raised when the model returns no text."""


class PitwallResponseFormatError(PitwallError):
    """Raised when the model returns text that is not valid JSON."""


class PitwallValidationError(PitwallError):
    """Raised when response data fails model validation."""


class PitwallGenerationError(PitwallError):
    """Raised when a multi-step generation stops part way through."""
