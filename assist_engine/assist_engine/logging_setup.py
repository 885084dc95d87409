"""Logging setup for the assist engine and its CLI.

Two modes are supported:

* plain text (default) -- ``%(asctime)s  %(levelname)-8s  %(name)s  %(message)s``
* single-line JSON, enabled with ``QUERYLAB_STRUCTURED_LOGGING=true``

Output schema per JSON line::

    {
        "timestamp": "2025-05-15T12:34:56.789012+00:00",
        "level": "INFO",
        "logger": "assist_engine.diagnostics.engine",
        "message": "analysis pass finished",
        "document_id": "editor-1",     // present when passed via ``extra``
        "exc_info": "Traceback ..."    // present only on exceptions
    }
"""

from __future__ import annotations

import json
import logging
import traceback
from datetime import UTC, datetime
from typing import Any

from assist_engine.config import Settings

_TEXT_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s  %(message)s"

# Extra attributes copied into the JSON payload when present on a record.
_EXTRA_FIELDS = ("document_id", "assignment_id", "rule_id")


class JSONFormatter(logging.Formatter):
    """Format log records as single-line JSON."""

    def format(self, record: logging.LogRecord) -> str:
        """Render *record* as a single JSON line."""
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for field in _EXTRA_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                payload[field] = value

        if record.exc_info and record.exc_info[0] is not None:
            payload["exc_info"] = "".join(traceback.format_exception(*record.exc_info))

        return json.dumps(payload, default=str, ensure_ascii=False)


def configure_logging(settings: Settings, level: int | None = None) -> None:
    """Install a single root handler according to *settings*.

    Replaces any handlers already attached to the root logger so repeated
    calls (e.g. one per CLI invocation in tests) never duplicate output.
    *level* overrides the level derived from ``settings.debug``.
    """
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    handler = logging.StreamHandler()
    if settings.structured_logging:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(_TEXT_FORMAT))
    root_logger.addHandler(handler)
    if level is None:
        level = logging.DEBUG if settings.debug else logging.INFO
    root_logger.setLevel(level)

    if settings.structured_logging:
        logging.getLogger(__name__).info("Structured JSON logging enabled")
