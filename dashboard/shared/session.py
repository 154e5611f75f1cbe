"""Streamlit session state for the scenario → strategy → simulation flow."""

from __future__ import annotations

from typing import Any

import streamlit as st

# Pipeline order: clearing a stage clears every later stage too
STAGES: tuple[str, ...] = ("scenario", "telemetry", "strategy", "warnings", "simulation", "chat")


def get(key: str, default: Any = None) -> Any:
    if key not in STAGES:
        raise KeyError(key)
    return st.session_state.get(key, default)


def put(key: str, value: Any) -> None:
    if key not in STAGES:
        raise KeyError(key)
    st.session_state[key] = value


def reset_from(stage: str) -> None:
    """Drop *stage* and everything downstream of it."""
    for key in STAGES[STAGES.index(stage):]:
        st.session_state.pop(key, None)
