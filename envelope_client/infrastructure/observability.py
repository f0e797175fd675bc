"""Structured Logging: JSON formatter and setup for client-side observability.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Request fields (url, method, status_code, envelope_code, action) surfaced when present
    - JSON format by default, human-readable on request
    - At most one handler installed per logger, however often setup runs
"""

import logging
import json
from datetime import datetime, timezone

_EXTRA_FIELDS = (
    "url", "method", "status_code", "envelope_code", "action",
    "resource", "error_code", "reason",
)

# Marks handlers installed by setup_logging
_OWNED = "_envelope_client_handler"


class JSONFormatter(logging.Formatter):
    """Format logs as JSON lines."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json",
                  logger_name: str = "envelope_client") -> logging.Handler:
    """Attach one stream handler to the package logger.

    Repeated calls replace the handler installed earlier instead of stacking
    another one. The root logger is left to the host application.
    """
    target = logging.getLogger(logger_name)
    for existing in [h for h in target.handlers if getattr(h, _OWNED, False)]:
        target.removeHandler(existing)
        existing.close()

    handler = logging.StreamHandler()
    setattr(handler, _OWNED, True)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    target.addHandler(handler)
    target.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
