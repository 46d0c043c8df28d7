"""Structured logging configuration for the trace frontend.

Records are written as one JSON object per line. Request-scoped fields
(the caller address, the raw query) are attached with ``bind_logger`` and
end up under the ``context`` key, merged with any per-call
``extra={"context": {...}}``.
"""

import json
import logging
import logging.config
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from .config import Settings

# Loggers whose chatter is already covered by our own request logging
QUIET_LOGGERS = ("httpx", "httpcore", "uvicorn.access")


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        context = getattr(record, "context", None)
        if context:
            log_data["context"] = context

        return json.dumps(log_data, default=str)


class ContextAdapter(logging.LoggerAdapter):
    """Logger adapter that carries bound fields into every record's context."""

    def process(self, msg: Any, kwargs: Any) -> tuple[Any, Any]:
        extra = dict(kwargs.get("extra") or {})
        extra["context"] = {**self.extra, **(extra.get("context") or {})}
        kwargs["extra"] = extra
        return msg, kwargs

    def bind(self, **context: Any) -> "ContextAdapter":
        """Return a new adapter with additional bound fields."""
        return ContextAdapter(self.logger, {**self.extra, **context})


def bind_logger(
    logger: logging.Logger | ContextAdapter, **context: Any
) -> ContextAdapter:
    """Attach fields such as ``source`` or ``query`` to all records of a logger."""
    if isinstance(logger, ContextAdapter):
        return logger.bind(**context)
    return ContextAdapter(logger, context)


def build_logging_config(log_level: str, log_file: str) -> dict:
    """dictConfig for JSON output to a rotating file and stdout."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": "trace_frontend.logging_config.JSONFormatter",
            },
        },
        "handlers": {
            "file": {
                "class": "logging.handlers.RotatingFileHandler",
                "filename": log_file,
                "maxBytes": 10 * 1024 * 1024,  # 10 MB
                "backupCount": 5,
                "formatter": "json",
                "encoding": "utf-8",
            },
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "json",
                "stream": "ext://sys.stdout",
            },
        },
        "loggers": {name: {"level": "WARNING"} for name in QUIET_LOGGERS},
        "root": {
            "level": log_level.upper(),
            "handlers": ["file", "console"],
        },
    }


def setup_logging(settings: Settings | None = None) -> None:
    """
    Setup structured logging for the application.

    Args:
        settings: Source of LOG_LEVEL and LOG_FILE. Read from the
                  environment when omitted.
    """
    if settings is None:
        settings = Settings.from_env()

    Path(settings.log_file).parent.mkdir(parents=True, exist_ok=True)
    logging.config.dictConfig(build_logging_config(settings.log_level, settings.log_file))


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(name)
