from __future__ import annotations

import json
import logging
import os


class JsonFormatter(logging.Formatter):
    """Very small JSON formatter for structured logs."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401 - short
        payload = {
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
            "event_type": getattr(record, "event_type", record.getMessage()),
            "room": getattr(record, "room", None),
            "intent": getattr(record, "intent", None),
            "memories_total": getattr(record, "memories_total", None),
            "latency_ms": getattr(record, "latency_ms", None),
            "error_category": getattr(record, "error_category", None),
        }
        return json.dumps(payload, default=str)


def configure_logging(level: str | int | None = None) -> None:
    """Configure logging.

    Default format is human friendly, but when ``LOG_FORMAT=json`` is set the
    output becomes structured JSON. The level comes from ``LOG_LEVEL`` and
    defaults to ``WARNING`` so log lines do not interleave with the chat.
    """

    if level is None:
        level = os.getenv("LOG_LEVEL", "WARNING").upper()

    fmt = os.getenv("LOG_FORMAT", "plain").lower()
    if fmt == "json":
        handler = logging.StreamHandler()
        handler.setFormatter(JsonFormatter())
        logging.basicConfig(level=level, handlers=[handler], force=True)
    else:
        logging.basicConfig(
            level=level,
            format="%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt="%H:%M:%S",
            force=True,
        )
