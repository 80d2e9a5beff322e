"""JSON log output with request ids and client PII masked."""

from __future__ import annotations

import json
import logging
import re
from datetime import datetime, timezone
from typing import Any

from ..middlewares.request_id import request_id_ctx

MASK = "***"

# Quotes and customers carry client e-mails and phone numbers; neither may
# reach the log stream.
PII_PATTERNS = (
    re.compile(r"[\w.+-]+@[\w-]+\.[\w.-]+", re.I),
    re.compile(r"\b\d{10}\b"),
)

# Attributes passed through ``extra=`` that are copied into the JSON object.
EXTRA_FIELDS = ("method", "path", "status", "latency_ms", "quote_id")


def mask_pii(text: str) -> str:
    for pattern in PII_PATTERNS:
        text = pattern.sub(MASK, text)
    return text


class RequestIdFilter(logging.Filter):
    """Copy the current request id onto each record as ``req_id``."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.req_id = request_id_ctx.get()
        return True


class JsonFormatter(logging.Formatter):
    """One JSON object per line: ``ts, level, logger, req_id, msg`` plus extras."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, timezone.utc).isoformat(
                timespec="milliseconds"
            ),
            "level": record.levelname,
            "logger": record.name,
            "req_id": getattr(record, "req_id", None),
            "msg": mask_pii(record.getMessage()),
        }
        entry.update(
            (name, getattr(record, name))
            for name in EXTRA_FIELDS
            if getattr(record, name, None) is not None
        )
        if record.exc_info:
            entry["exc"] = mask_pii(self.formatException(record.exc_info))
        return json.dumps(entry, default=str)


def configure_logging(level: int | str = logging.INFO) -> None:
    """Send every log record to stderr as JSON at ``level``."""

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    handler.addFilter(RequestIdFilter())

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)
