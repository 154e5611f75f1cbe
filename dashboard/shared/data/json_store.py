"""Saved scenarios kept in a single JSON document on disk."""

from __future__ import annotations

import contextlib
import json
import os
import tempfile
import threading
import time
from pathlib import Path
from typing import Callable

from pydantic import TypeAdapter, ValidationError

from pitwall.models import RaceScenario, SavedScenario

from ..api_logging import log_api_call
from .base import ScenarioStore, scenario_display_name
from .errors import ScenarioStoreError

_SCENARIO_LIST = TypeAdapter(list[SavedScenario])


class JsonFileScenarioStore(ScenarioStore):
    """Scenario store backed by one JSON array file.

    The whole list is rewritten on every change through a temp file and an
    atomic rename, so a crash never leaves a half-written document behind.
    """

    def __init__(self, path: str | Path, clock: Callable[[], float] = time.time) -> None:
        self.path = Path(path)
        self._clock = clock
        self._lock = threading.Lock()

    # ── Public API ────────────────────────────────────────────────────

    @log_api_call
    def list_scenarios(self) -> list[SavedScenario]:
        return self._load()

    @log_api_call
    def save(self, scenario: RaceScenario, name: str | None = None) -> SavedScenario:
        with self._lock:
            scenarios = self._load()
            taken = {s.id for s in scenarios}
            saved = SavedScenario.model_validate({
                **scenario.model_dump(),
                "id": self._new_id(taken),
                "name": name or scenario_display_name(scenario),
            })
            self._write([*scenarios, saved])
        return saved

    @log_api_call
    def get(self, scenario_id: str) -> SavedScenario:
        for scenario in self._load():
            if scenario.id == scenario_id:
                return scenario
        raise ScenarioStoreError("Could not find the scenario to load.")

    @log_api_call
    def delete(self, scenario_id: str) -> None:
        with self._lock:
            scenarios = self._load()
            remaining = [s for s in scenarios if s.id != scenario_id]
            if len(remaining) != len(scenarios):
                self._write(remaining)

    # ── Persistence ───────────────────────────────────────────────────

    def _new_id(self, taken: set[str]) -> str:
        stamp = int(self._clock() * 1000)
        while f"scenario-{stamp}" in taken:
            stamp += 1
        return f"scenario-{stamp}"

    def _load(self) -> list[SavedScenario]:
        if not self.path.exists():
            return []
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
            return _SCENARIO_LIST.validate_python(raw)
        except (OSError, json.JSONDecodeError, ValidationError) as exc:
            raise ScenarioStoreError(f"Failed to read saved scenarios: {exc}") from exc

    def _write(self, scenarios: list[SavedScenario]) -> None:
        data = [s.to_wire() for s in scenarios]
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp = tempfile.mkstemp(dir=self.path.parent, suffix=".tmp")
        except OSError as exc:
            raise ScenarioStoreError(f"Failed to save scenario: {exc}") from exc
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
            Path(tmp).replace(self.path)
        except OSError as exc:
            with contextlib.suppress(OSError):
                os.unlink(tmp)
            raise ScenarioStoreError(f"Failed to save scenario: {exc}") from exc
