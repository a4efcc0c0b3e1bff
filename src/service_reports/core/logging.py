"""Logging helpers for service-reports.

One call to :func:`setup_logging` per run configures the root logger with a
stdout handler and, when a log directory is usable, a rotating log file named
after the report job. Reader and CLI code attach run context (job, input
file) through :func:`with_log_context`; the JSON formatter emits it as
top-level fields.
"""

import contextlib
import json
import logging
import os
import sys
from collections.abc import Iterator
from datetime import UTC, datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path

from service_reports.core.constants import (
    ENV_LOG_LEVEL,
    LOG_FILE_BACKUP_COUNT,
    LOG_FILE_MAX_BYTES,
    LOG_FORMATS,
    VALID_LOG_LEVELS,
)

TEXT_LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

# Attributes every LogRecord has; anything else on a record came from `extra`.
_STANDARD_RECORD_ATTRS = frozenset(logging.makeLogRecord({}).__dict__) | {"message", "asctime", "extra_fields"}


class JSONFormatter(logging.Formatter):
    """Render each record as one JSON object per line.

    Context fields added with ``extra=`` or :func:`with_log_context` become
    top-level keys, so a run's lines can be filtered by job or input file.
    """

    def format(self, record: logging.LogRecord) -> str:
        try:
            message = record.getMessage()
        except Exception:
            # A bad %-placeholder must not lose the line.
            message = f"{record.msg} [log-message-format-error]"

        entry = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": message,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        extra_fields = getattr(record, "extra_fields", None)
        if isinstance(extra_fields, dict):
            entry.update(extra_fields)
        for key, value in record.__dict__.items():
            if key in _STANDARD_RECORD_ATTRS or key.startswith("_"):
                continue
            entry.setdefault(key, value)
        return json.dumps(entry, default=str)


class ContextLoggerAdapter(logging.LoggerAdapter):
    """LoggerAdapter whose context is merged with, not replaced by, per-call ``extra``."""

    def process(self, msg, kwargs):
        call_extra = kwargs.get("extra")
        kwargs["extra"] = {**self.extra, **(call_extra if isinstance(call_extra, dict) else {})}
        return msg, kwargs


def _base_logger(logger: logging.Logger | logging.LoggerAdapter | None) -> logging.Logger | None:
    while isinstance(logger, logging.LoggerAdapter):
        logger = logger.logger
    return logger if isinstance(logger, logging.Logger) else None


def with_log_context(
    logger: logging.Logger | logging.LoggerAdapter, **context: object
) -> logging.Logger | logging.LoggerAdapter:
    """Return an adapter that adds ``context`` to every record.

    Context already carried by ``logger`` is kept; ``None`` values are dropped.
    """
    base = _base_logger(logger)
    if base is None:
        return logger
    merged = dict(logger.extra) if isinstance(logger, logging.LoggerAdapter) and logger.extra else {}
    merged.update({key: value for key, value in context.items() if value is not None})
    return ContextLoggerAdapter(base, merged)


def _handler_chain(logger: logging.Logger) -> Iterator[logging.Handler]:
    current: logging.Logger | None = logger
    while current is not None:
        yield from current.handlers
        current = current.parent if current.propagate else None


def flush_logging_handlers(logger: logging.Logger | logging.LoggerAdapter | None = None) -> None:
    """Flush the handlers a logger's records reach, falling back to the root handlers."""
    base = _base_logger(logger)
    handlers = list(_handler_chain(base)) if base is not None else []
    for handler in dict.fromkeys(handlers or logging.root.handlers):
        with contextlib.suppress(Exception):
            handler.flush()


def _resolve_level(log_level: str | None) -> int:
    name = (log_level or os.environ.get(ENV_LOG_LEVEL) or "INFO").upper()
    if name not in VALID_LOG_LEVELS:
        print(f"Warning: Invalid log level '{log_level}', using INFO", file=sys.stderr)
        name = "INFO"
    return getattr(logging, name)


def _file_handler(job_name: str | None, log_dir: str | Path) -> RotatingFileHandler | None:
    log_path = Path(log_dir)
    try:
        log_path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        print(f"Warning: Cannot create log directory {log_path}: {e}. Logging to console only.", file=sys.stderr)
        return None
    timestamp = datetime.now(UTC).strftime("%Y%m%d_%H%M%S")
    log_file = log_path / f"{job_name or 'ServiceReports'}_{timestamp}.log"
    return RotatingFileHandler(log_file, maxBytes=LOG_FILE_MAX_BYTES, backupCount=LOG_FILE_BACKUP_COUNT)


def setup_logging(
    job_name: str | None = None,
    log_level: str | None = None,
    log_format: str = "text",
    log_dir: str | Path | None = "logs",
) -> logging.Logger:
    """Configure root logging for a report run.

    Args:
        job_name: Report job name used for log file naming
        log_level: Logging level name; falls back to ``LOG_LEVEL``, then INFO
        log_format: "text" or "json"
        log_dir: Directory for rotating log files; None logs to console only

    Returns:
        The ``service_reports`` package logger
    """
    level = _resolve_level(log_level)

    for handler in logging.root.handlers[:]:
        handler.close()
        logging.root.removeHandler(handler)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    file_handler = _file_handler(job_name, log_dir) if log_dir is not None else None
    if file_handler is not None:
        handlers.append(file_handler)

    if log_format.lower() not in LOG_FORMATS:
        print(f"Warning: Unknown log format '{log_format}', using text", file=sys.stderr)
    formatter = JSONFormatter() if log_format.lower() == "json" else logging.Formatter(TEXT_LOG_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        handler.setLevel(level)
        logging.root.addHandler(handler)
    logging.root.setLevel(level)

    logger = logging.getLogger("service_reports")
    logger.setLevel(logging.NOTSET)
    logger.propagate = True

    if file_handler is not None:
        logger.info(f"Logging initialized. Log file: {file_handler.baseFilename}")
    else:
        logger.info("Logging initialized. Console output only.")
    flush_logging_handlers(logger)
    return logger
