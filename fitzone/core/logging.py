"""Process-wide logging setup.

Everything goes to stdout through one handler on the root logger, as plain
text for local work or one JSON object per line for log shippers. It is
driven by environment variables, not Settings, because it runs before the
app (and its required secrets) are loaded.

    LOG_LEVEL           DEBUG | INFO | WARNING | ERROR (default INFO)
    LOG_JSON            emit JSON lines (default false)
    LOG_REQUESTS        per-request lines from RequestLoggingMiddleware (default true)
    LOG_UVICORN_ACCESS  uvicorn access log (default: off when LOG_REQUESTS is on)
    LOG_SQL             SQLAlchemy statements at INFO (default false)
"""

from __future__ import annotations

import json
import logging
import logging.config
import os
import sys
from datetime import UTC, datetime
from typing import Any

# Attributes passed via ``extra=`` that are copied into JSON output.
STRUCTURED_FIELDS = (
    "method",
    "path",
    "query",
    "status_code",
    "duration_ms",
    "client_ip",
    "user_agent",
    "error_type",
    "user_id",
    "program_id",
)

_TRUTHY = frozenset({"1", "true", "t", "yes", "y", "on"})


def env_bool(name: str, *, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


class JsonFormatter(logging.Formatter):
    """One JSON object per record: ts, level, logger, msg, plus known extras."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        entry.update(
            (field, record.__dict__[field])
            for field in STRUCTURED_FIELDS
            if field in record.__dict__
        )
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(entry, ensure_ascii=False, default=str)


def _library_levels(level: str) -> dict[str, dict[str, Any]]:
    """Levels for third-party loggers, all propagating to our root handler."""
    uvicorn_access = env_bool(
        "LOG_UVICORN_ACCESS", default=not env_bool("LOG_REQUESTS", default=True)
    )
    log_sql = env_bool("LOG_SQL", default=False)
    levels = {
        "uvicorn": level,
        "uvicorn.error": level,
        "uvicorn.access": "INFO" if uvicorn_access else "WARNING",
        "httpx": os.getenv("HTTPX_LOG_LEVEL", "WARNING"),
        "sqlalchemy.engine": "INFO" if log_sql else "WARNING",
    }
    return {name: {"level": lvl, "propagate": True} for name, lvl in levels.items()}


def configure_logging() -> None:
    level = os.getenv("LOG_LEVEL", "INFO").upper()
    formatter = "json" if env_bool("LOG_JSON", default=False) else "text"

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "text": {
                    "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
                },
                "json": {"()": JsonFormatter},
            },
            "handlers": {
                "stdout": {
                    "class": "logging.StreamHandler",
                    "level": level,
                    "formatter": formatter,
                    "stream": sys.stdout,
                }
            },
            "root": {"handlers": ["stdout"], "level": level},
            "loggers": _library_levels(level),
        }
    )
