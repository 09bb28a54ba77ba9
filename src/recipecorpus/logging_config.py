"""Structured logging configuration for the recipe import pipeline."""

import json
import logging
import os
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any

from recipecorpus.config import Settings, get_settings

# Context variables for import run tracking
run_id_ctx: ContextVar[str | None] = ContextVar("run_id", default=None)
source_file_ctx: ContextVar[str | None] = ContextVar("source_file", default=None)
row_index_ctx: ContextVar[int | None] = ContextVar("row_index", default=None)

_CONTEXT_VARS: dict[str, ContextVar] = {
    "run_id": run_id_ctx,
    "source_file": source_file_ctx,
    "row_index": row_index_ctx,
}


def _current_context() -> dict[str, Any]:
    return {name: var.get() for name, var in _CONTEXT_VARS.items() if var.get() is not None}


class StructuredJsonFormatter(logging.Formatter):
    """JSON formatter for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        log_data.update(_current_context())

        if hasattr(record, "extra_data"):
            log_data.update(record.extra_data)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        log_data["location"] = {
            "file": record.filename,
            "line": record.lineno,
            "function": record.funcName,
        }

        return json.dumps(log_data)


class ContextualFormatter(logging.Formatter):
    """Human-readable formatter with context for development."""

    def format(self, record: logging.LogRecord) -> str:
        context_parts = []
        if run_id := run_id_ctx.get():
            context_parts.append(f"run={run_id[:8]}")
        if source_file := source_file_ctx.get():
            context_parts.append(f"file={os.path.basename(source_file)}")
        if (row_index := row_index_ctx.get()) is not None:
            context_parts.append(f"row={row_index}")

        context_str = f" [{', '.join(context_parts)}]" if context_parts else ""

        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")
        level = record.levelname.ljust(8)
        message = record.getMessage()

        formatted = f"{timestamp} | {level} | {record.name}{context_str} | {message}"

        if record.exc_info:
            formatted += "\n" + self.formatException(record.exc_info)

        return formatted


class ContextLogger(logging.LoggerAdapter):
    """Logger adapter that automatically includes context variables."""

    def process(self, msg: str, kwargs: dict) -> tuple[str, dict]:
        extra = kwargs.get("extra", {})
        extra.update(_current_context())
        kwargs["extra"] = extra
        return msg, kwargs


def get_logger(name: str) -> ContextLogger:
    """Get a context-aware logger for the given module name."""
    logger = logging.getLogger(name)
    return ContextLogger(logger, {})


def configure_logging(
    log_level: str | None = None,
    json_format: bool | None = None,
    log_file: str | None = None,
    settings: Settings | None = None,
) -> None:
    """
    Configure logging for the application.

    Args:
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to ``settings.log_level``.
        json_format: Use JSON format for logs. If None, auto-detect from
            ``settings.log_format`` and the environment.
        log_file: Optional file path to write logs to.
        settings: Settings to read defaults from; cached settings if None.
    """
    settings = settings or get_settings()

    if json_format is None:
        log_format = (settings.log_format or "").lower()
        json_format = log_format == "json" or (
            not log_format and not sys.stdout.isatty() and settings.is_production
        )

    level_str = (log_level or settings.log_level).upper()
    level = getattr(logging, level_str, logging.INFO)

    formatter: logging.Formatter
    if json_format:
        formatter = StructuredJsonFormatter()
    else:
        formatter = ContextualFormatter()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # Progress and reports go to stderr so JSON can be piped from stdout
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        root_logger.addHandler(file_handler)

    module_levels = {
        "recipecorpus": level,
        "recipecorpus.ingest": level,
        "recipecorpus.normalize": level,
    }

    for module_name, module_level in module_levels.items():
        logging.getLogger(module_name).setLevel(module_level)

    logger = get_logger(__name__)
    logger.debug(
        f"Logging configured: level={level_str}, format={'json' if json_format else 'text'}"
    )


def set_context(
    run_id: str | None = None,
    source_file: str | None = None,
    row_index: int | None = None,
) -> None:
    """Set logging context variables."""
    if run_id is not None:
        run_id_ctx.set(run_id)
    if source_file is not None:
        source_file_ctx.set(source_file)
    if row_index is not None:
        row_index_ctx.set(row_index)


def clear_context() -> None:
    """Clear all logging context variables."""
    for var in _CONTEXT_VARS.values():
        var.set(None)


class LoggingContext:
    """Context manager for setting logging context."""

    def __init__(
        self,
        run_id: str | None = None,
        source_file: str | None = None,
        row_index: int | None = None,
    ):
        self.run_id = run_id
        self.source_file = source_file
        self.row_index = row_index
        self._tokens: dict[str, Any] = {}

    def __enter__(self) -> "LoggingContext":
        values = {
            "run_id": self.run_id,
            "source_file": self.source_file,
            "row_index": self.row_index,
        }
        for name, value in values.items():
            if value is not None:
                self._tokens[name] = _CONTEXT_VARS[name].set(value)
        return self

    def __exit__(self, *args: Any) -> None:
        for name, token in self._tokens.items():
            _CONTEXT_VARS[name].reset(token)
        self._tokens.clear()
