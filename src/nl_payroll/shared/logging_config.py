"""Logging setup for nl-payroll.

Rule functions under ``core.rules`` never log; services, parsers, report
writers and the CLI obtain loggers through :func:`get_logger` so that the
whole package sits under the ``nl_payroll`` logger namespace.
"""

__all__ = [
    "StructuredFormatter",
    "get_logger",
    "configure_logging",
    "reset_logging",
]

import json
import logging
import os
import sys
import threading
from datetime import UTC, date, datetime
from decimal import Decimal
from typing import Any

_LOGGER_PREFIX = "nl_payroll"

LOG_LEVEL_ENV = "NL_PAYROLL_LOG_LEVEL"

_STDLIB_KEYS: frozenset[str] = frozenset(
    vars(logging.LogRecord("", 0, "", 0, "", (), None)).keys()
) | {"message", "taskName"}


class _JSONEncoder(json.JSONEncoder):
    """Handle Decimal and dates in log payloads."""

    def default(self, obj: Any) -> Any:
        if isinstance(obj, Decimal):
            return str(obj)
        if isinstance(obj, (datetime, date)):
            return obj.isoformat()
        return str(obj)


class StructuredFormatter(logging.Formatter):
    """Formats each log record as a single JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Fields passed through ``extra=``
        for key, val in vars(record).items():
            if key not in _STDLIB_KEYS and key not in payload:
                payload[key] = val

        if record.exc_info and record.exc_info[1] is not None:
            exc = record.exc_info[1]
            payload["exc_type"] = type(exc).__name__
            payload["exc_message"] = str(exc)
            payload["traceback"] = self.formatException(record.exc_info)

        return json.dumps(payload, cls=_JSONEncoder)


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the nl_payroll namespace."""
    if name.startswith(f"{_LOGGER_PREFIX}."):
        name = name[len(_LOGGER_PREFIX) + 1 :]
    return logging.getLogger(f"{_LOGGER_PREFIX}.{name}")


_configured = False
_lock = threading.Lock()


def _level_from_env(default: int) -> int:
    value = os.getenv(LOG_LEVEL_ENV)
    if not value:
        return default
    level = logging.getLevelName(value.upper())
    return level if isinstance(level, int) else default


def configure_logging(
    *,
    level: int | None = None,
    json_format: bool = False,
    stream: Any = None,
    force: bool = False,
) -> None:
    """Configure the nl_payroll logger hierarchy.

    Later calls are ignored unless ``force`` is set, in which case the
    existing handler is replaced. When ``level`` is not given,
    ``NL_PAYROLL_LOG_LEVEL`` is consulted and WARNING is used as fallback.
    """
    global _configured
    with _lock:
        if _configured and not force:
            return
        _configured = True

    if level is None:
        level = _level_from_env(logging.WARNING)

    root_logger = logging.getLogger(_LOGGER_PREFIX)
    root_logger.handlers.clear()
    root_logger.setLevel(level)
    root_logger.propagate = False

    handler = logging.StreamHandler(stream or sys.stderr)
    if json_format:
        handler.setFormatter(StructuredFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)-7s %(name)s: %(message)s")
        )
    root_logger.addHandler(handler)


def reset_logging() -> None:
    """Reset logging configuration. FOR TESTING ONLY."""
    global _configured
    with _lock:
        _configured = False
    logger = logging.getLogger(_LOGGER_PREFIX)
    logger.handlers.clear()
    logger.setLevel(logging.WARNING)
    logger.propagate = True
