"""Structured logging configuration for cipherline."""

import logging
import sys

from json_log_formatter import JSONFormatter


def configure_logging(
    level: str = "INFO",
    json_format: bool = False,
    recipe_name: str | None = None,
) -> None:
    """Configure logging for cipherline.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: If True, use JSON format; otherwise use normal format
        recipe_name: Optional recipe name attached to every record
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger("cipherline")
    logger.setLevel(log_level)

    # Remove existing handlers
    logger.handlers.clear()

    # Diagnostics go to stderr so pipeline output on stdout stays clean
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)

    if json_format:
        formatter = JSONFormatter()
    else:
        formatter = StructuredFormatter()

    handler.setFormatter(formatter)
    if recipe_name:
        handler.addFilter(_RecipeNameFilter(recipe_name))
    logger.addHandler(handler)


class _RecipeNameFilter(logging.Filter):
    def __init__(self, recipe_name: str):
        super().__init__()
        self._recipe_name = recipe_name

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "recipe_name"):
            record.recipe_name = self._recipe_name
        return True


class StructuredFormatter(logging.Formatter):
    """Structured formatter that adds context to log messages."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with context."""
        context = getattr(record, "context", {})

        parts = [f"[{record.levelname}]"]

        if hasattr(record, "recipe_name"):
            parts.append(f"recipe={record.recipe_name}")

        if hasattr(record, "step_id"):
            parts.append(f"step={record.step_id}")

        for key, value in context.items():
            parts.append(f"{key}={value}")

        parts.append(record.getMessage())

        return " ".join(parts)
