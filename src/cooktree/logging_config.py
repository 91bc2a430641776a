"""Structured logging configuration for cooktree."""

import json
import logging
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any

from cooktree.config import get_settings

# Context variables for recipe and ingredient tracking
recipe_ctx: ContextVar[str | None] = ContextVar("recipe", default=None)
ingredient_ctx: ContextVar[str | None] = ContextVar("ingredient", default=None)


def _context() -> dict[str, str]:
    context = {}
    if recipe := recipe_ctx.get():
        context["recipe"] = recipe
    if ingredient := ingredient_ctx.get():
        context["ingredient"] = ingredient
    return context


class StructuredJsonFormatter(logging.Formatter):
    """JSON formatter for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        # Add recipe and ingredient context
        log_data.update(_context())

        # Add extra fields from the record
        if hasattr(record, "extra_data"):
            log_data.update(record.extra_data)

        # Add exception info if present
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Add location info
        log_data["location"] = {
            "file": record.filename,
            "line": record.lineno,
            "function": record.funcName,
        }

        return json.dumps(log_data, default=str)


class ContextualFormatter(logging.Formatter):
    """Human-readable formatter with recipe context for development."""

    def format(self, record: logging.LogRecord) -> str:
        # Build context string
        context_parts = [f"{key}={value}" for key, value in _context().items()]
        context_str = f" [{', '.join(context_parts)}]" if context_parts else ""

        # Format the message
        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")
        level = record.levelname.ljust(8)
        formatted = f"{timestamp} | {level} | {record.name}{context_str} | {record.getMessage()}"

        # Add exception if present
        if record.exc_info:
            formatted += "\n" + self.formatException(record.exc_info)

        return formatted


class ContextLogger(logging.LoggerAdapter):
    """Logger adapter that automatically includes context variables."""

    def process(self, msg: str, kwargs: dict) -> tuple[str, dict]:
        # Add context variables to extra
        extra = kwargs.get("extra", {})
        extra.update(_context())
        kwargs["extra"] = extra
        return msg, kwargs


def get_logger(name: str) -> ContextLogger:
    """Get a context-aware logger for the given module name."""
    return ContextLogger(logging.getLogger(name), {})


def configure_logging(
    log_level: str | None = None,
    json_format: bool | None = None,
    log_file: str | None = None,
) -> None:
    """
    Configure logging for applications embedding cooktree.

    Args:
        log_level: Minimum log level. Defaults to ``Settings.log_level``.
        json_format: Use JSON format for logs. If None, taken from settings,
            then auto-detected (JSON when not attached to a terminal in production).
        log_file: Optional file path to write logs to. Defaults to ``Settings.log_file``.
    """
    settings = get_settings()

    # Explicit argument, then settings, then auto-detect
    if json_format is None:
        json_format = settings.json_logs
    # Use JSON in production when not running interactively
    if json_format is None:
        json_format = not sys.stdout.isatty() and not settings.is_development

    # Get log level from settings or parameter
    level_str = (log_level or settings.log_level).upper()
    level = getattr(logging, level_str, logging.INFO)
    log_file = log_file or settings.log_file

    # Create formatter based on format preference
    formatter: logging.Formatter
    if json_format:
        formatter = StructuredJsonFormatter()
    else:
        formatter = ContextualFormatter()

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)
    root_logger.addHandler(console_handler)

    # Optional file handler
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        root_logger.addHandler(file_handler)

    # Library loggers follow the configured level
    logging.getLogger("cooktree").setLevel(level)

    # Log initial configuration
    logger = get_logger(__name__)
    logger.info(
        f"Logging configured: level={level_str}, format={'json' if json_format else 'text'}"
    )


def set_context(recipe: str | None = None, ingredient: str | None = None) -> None:
    """Set logging context variables."""
    if recipe is not None:
        recipe_ctx.set(recipe)
    if ingredient is not None:
        ingredient_ctx.set(ingredient)


def clear_context() -> None:
    """Clear all logging context variables."""
    recipe_ctx.set(None)
    ingredient_ctx.set(None)


class LoggingContext:
    """Context manager for setting logging context."""

    def __init__(self, recipe: str | None = None, ingredient: str | None = None):
        self.recipe = recipe
        self.ingredient = ingredient
        self._tokens: list[tuple[ContextVar, Any]] = []

    def __enter__(self) -> "LoggingContext":
        if self.recipe is not None:
            self._tokens.append((recipe_ctx, recipe_ctx.set(self.recipe)))
        if self.ingredient is not None:
            self._tokens.append((ingredient_ctx, ingredient_ctx.set(self.ingredient)))
        return self

    def __exit__(self, *args: Any) -> None:
        for ctx_var, token in reversed(self._tokens):
            ctx_var.reset(token)
        self._tokens.clear()
