"""Opt-in JSON output for the library's own log records.

Every module logs through `logging.getLogger(__name__)`, so all records live
under the `pagi_external_api` logger. `configure_logging` only touches that
logger; root handlers and third-party loggers belong to the host application.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any, TextIO

LIBRARY_LOGGER = "pagi_external_api"

# Attributes every LogRecord has; anything else was passed via `extra=`.
_BUILTIN_RECORD_ATTRS: frozenset[str] = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime"}


def _record_extras(record: logging.LogRecord) -> dict[str, Any]:
    return {
        key: value
        for key, value in vars(record).items()
        if key not in _BUILTIN_RECORD_ATTRS and not key.startswith("_")
    }


class JsonFormatter(logging.Formatter):
    """One JSON object per record: timestamp, level, logger, message.

    `extra` and `exception` keys are added only when the record carries them.
    """

    def format(self, record: logging.LogRecord) -> str:  # noqa: A003 (record)
        created = datetime.fromtimestamp(record.created, tz=UTC)
        payload: dict[str, Any] = {
            "timestamp": created.isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if extras := _record_extras(record):
            payload["extra"] = extras
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


class _JsonStreamHandler(logging.StreamHandler):
    """Marker type so reconfiguration can find the handler it installed."""


def configure_logging(level: str = "INFO", stream: TextIO | None = None) -> logging.Handler:
    """Send the library's records to `stream` as JSON.

    Calling this again replaces the handler from the previous call. Handlers
    added by anyone else are left in place. Library records stop propagating
    to the root logger so they are not written twice.

    Args:
        level: Level name for the library logger, e.g. ``"DEBUG"``.
        stream: Destination stream. Defaults to stdout.

    Returns:
        The installed handler.
    """
    logger = logging.getLogger(LIBRARY_LOGGER)

    for existing in [h for h in logger.handlers if isinstance(h, _JsonStreamHandler)]:
        logger.removeHandler(existing)

    handler = _JsonStreamHandler(stream=stream or sys.stdout)
    handler.setFormatter(JsonFormatter())
    logger.addHandler(handler)
    logger.setLevel(level.upper())
    logger.propagate = False
    return handler
