"""Call logging for the GeoPulse fetch and query layers."""

from __future__ import annotations

import functools
import inspect
import logging
import os
import threading
import time
from typing import Any, Callable, TypeVar

from geopulse import config

F = TypeVar("F", bound=Callable[..., Any])

_LOGGER_NAME = "geopulse.api"
_LOG_DIR: str | None = config.LOG_DIR
_LOG_FILE_NAME = "api_calls.log"

_logger: logging.Logger | None = None
_logger_lock = threading.Lock()


def _get_logger() -> logging.Logger:
    """Return the API logger, attaching a file handler on first use if LOG_DIR is set."""
    global _logger
    if _logger is not None:
        return _logger

    with _logger_lock:
        if _logger is not None:
            return _logger

        logger = logging.getLogger(_LOGGER_NAME)
        if _LOG_DIR is not None:
            os.makedirs(_LOG_DIR, exist_ok=True)
            logger.setLevel(logging.DEBUG)
            logger.propagate = False
            if not logger.handlers:
                handler = logging.FileHandler(
                    os.path.join(_LOG_DIR, _LOG_FILE_NAME), encoding="utf-8",
                )
                handler.setFormatter(
                    logging.Formatter("%(asctime)s | %(levelname)s | %(message)s"),
                )
                logger.addHandler(handler)
        _logger = logger

    return _logger


def _describe_args(args: tuple[Any, ...], kwargs: dict[str, Any]) -> str:
    # Skip 'self'
    arg_parts = [repr(a) for a in args[1:]]
    arg_parts += [f"{k}={v!r}" for k, v in kwargs.items()]
    return ", ".join(arg_parts)


def _logged(fn: F, prefix: str) -> F:
    """Wrap sync or async ``fn`` with CALL/OK/FAIL records."""
    name = fn.__qualname__

    def before(args: tuple[Any, ...], kwargs: dict[str, Any]) -> tuple[logging.Logger, str, float]:
        logger = _get_logger()
        arg_str = _describe_args(args, kwargs)
        logger.info("%sCALL: %s(%s)", prefix, name, arg_str)
        return logger, arg_str, time.monotonic()

    def ok(logger: logging.Logger, arg_str: str, start: float) -> None:
        logger.info("%sOK: %s(%s) (%.3fs)", prefix, name, arg_str, time.monotonic() - start)

    def fail(logger: logging.Logger, arg_str: str, start: float, exc: Exception) -> None:
        logger.error(
            "%sFAIL: %s(%s) -> %s: %s (%.3fs)",
            prefix, name, arg_str, type(exc).__name__, exc, time.monotonic() - start,
        )

    if inspect.iscoroutinefunction(fn):

        @functools.wraps(fn)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            logger, arg_str, start = before(args, kwargs)
            try:
                result = await fn(*args, **kwargs)
            except Exception as exc:
                fail(logger, arg_str, start, exc)
                raise
            ok(logger, arg_str, start)
            return result

        return async_wrapper  # type: ignore[return-value]

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger, arg_str, start = before(args, kwargs)
        try:
            result = fn(*args, **kwargs)
        except Exception as exc:
            fail(logger, arg_str, start, exc)
            raise
        ok(logger, arg_str, start)
        return result

    return wrapper  # type: ignore[return-value]


def log_api_call(fn: F) -> F:
    """Decorator that logs provider fetches."""
    return _logged(fn, "")


def log_service_call(fn: F) -> F:
    """Decorator that logs odds queries."""
    return _logged(fn, "SERVICE ")
