"""Data-layer errors for the strategy lab."""

from __future__ import annotations


class StrategyDataError(Exception):
    """Base data-layer error. UI catches only this."""


class GenerationError(StrategyDataError):
    """The generative model could not produce the requested data."""


class ScenarioStoreError(StrategyDataError):
    """Saved scenarios could not be read or written."""
