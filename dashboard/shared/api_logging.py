"""Call logging for the strategy lab data and service layers.

Model requests take seconds and fail in ways worth keeping (quota, malformed
JSON, a telemetry run that stopped part way), so every data-layer and
service-layer call is written to ``logs/api_calls.log`` with its arguments,
outcome and duration.
"""

from __future__ import annotations

import functools
import logging
import os
import threading
import time
from typing import Any, Callable, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

_LOG_DIR = os.path.join(os.path.dirname(__file__), "..", "logs")
_LOG_FILE = os.path.join(_LOG_DIR, "api_calls.log")
_LOGGER_NAME = "pitwall_dashboard.api"
_MAX_ARG_REPR = 80

_logger: logging.Logger | None = None
_logger_lock = threading.Lock()


def _get_logger() -> logging.Logger:
    """File logger, set up on first use so importing never touches the disk."""
    global _logger
    if _logger is not None:
        return _logger

    with _logger_lock:
        if _logger is None:
            os.makedirs(_LOG_DIR, exist_ok=True)
            logger = logging.getLogger(_LOGGER_NAME)
            logger.setLevel(logging.DEBUG)
            logger.propagate = False
            if not logger.handlers:
                handler = logging.FileHandler(_LOG_FILE, encoding="utf-8")
                handler.setFormatter(
                    logging.Formatter("%(asctime)s | %(levelname)s | %(message)s"),
                )
                logger.addHandler(handler)
            _logger = logger

    return _logger


def _short_repr(value: Any) -> str:
    """repr() clipped so whole scenarios and telemetry sets stay readable."""
    text = repr(value)
    if len(text) > _MAX_ARG_REPR:
        return text[: _MAX_ARG_REPR - 3] + "..."
    return text


def _arg_summary(args: tuple[Any, ...], kwargs: dict[str, Any]) -> str:
    # args[0] is self
    parts = [_short_repr(a) for a in args[1:]]
    parts += [f"{k}={_short_repr(v)}" for k, v in kwargs.items()]
    return ", ".join(parts)


def _item_count(result: Any) -> int:
    if isinstance(result, (list, tuple)):
        return len(result)
    return 0 if result is None else 1


def _logged(
    fn: Callable[..., Any],
    on_call: Callable[[str, str], str],
    on_ok: Callable[[str, str, Any, float], str],
    on_fail: Callable[[str, str, Exception, float], str],
) -> Callable[..., Any]:
    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = _get_logger()
        name = fn.__qualname__
        arg_str = _arg_summary(args, kwargs)
        logger.info(on_call(name, arg_str))

        start = time.monotonic()
        try:
            result = fn(*args, **kwargs)
        except Exception as exc:
            logger.error(on_fail(name, arg_str, exc, time.monotonic() - start))
            raise
        logger.info(on_ok(name, arg_str, result, time.monotonic() - start))
        return result

    return wrapper


def log_api_call(fn: F) -> F:
    """Log a data-layer call (model request or storage access) with its result size."""
    return _logged(  # type: ignore[return-value]
        fn,
        on_call=lambda name, args: f"CALL: {name}({args})",
        on_ok=lambda name, args, result, secs: (
            f"OK: {name}({args}) -> {_item_count(result)} items ({secs:.3f}s)"
        ),
        on_fail=lambda name, args, exc, secs: (
            f"FAIL: {name}({args}) -> {type(exc).__name__}: {exc} ({secs:.3f}s)"
        ),
    )


def log_service_call(fn: F) -> F:
    """Log a service-layer call with its duration."""
    return _logged(  # type: ignore[return-value]
        fn,
        on_call=lambda name, args: f"SERVICE CALL: {name}({args})",
        on_ok=lambda name, args, result, secs: f"SERVICE OK: {name} -> {secs:.3f}s",
        on_fail=lambda name, args, exc, secs: (
            f"SERVICE FAIL: {name} -> {type(exc).__name__}: {exc} ({secs:.3f}s)"
        ),
    )
