"""Logging for namedparams.

The package logs two kinds of events at DEBUG under the ``namedparams``
namespace, each carrying structured fields:

- ``namedparams.parameters.scanner``: one event per scan that was not served
  from the cache (``placeholder_style``, ``slot_count``, ``parameter_names``).
- ``namedparams.query``: binding a name the query does not use
  (``parameter_name``).

:func:`configure_logging` attaches a handler that renders these events as
JSON lines.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any, TextIO

from namedparams._serialization import encode_json

if TYPE_CHECKING:
    from logging import LogRecord

__all__ = ("ROOT_LOGGER_NAME", "StructuredFormatter", "configure_logging", "get_logger", "log_with_context")

ROOT_LOGGER_NAME = "namedparams"


class StructuredFormatter(logging.Formatter):
    """Render a record and its structured fields as one JSON object."""

    def format(self, record: LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if hasattr(record, "extra_fields"):
            log_entry.update(record.extra_fields)  # pyright: ignore
        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)
        return encode_json(log_entry)


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger under the ``namedparams`` namespace.

    Args:
        name: Logger name. If not provided, returns the root namedparams logger.

    Returns:
        Logger instance
    """
    if name is None:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if not name.startswith(ROOT_LOGGER_NAME):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(
    level: str = "DEBUG", format_style: str = "structured", stream: TextIO | None = None
) -> logging.Handler:
    """Send namedparams scan and bind events to ``stream``.

    Replaces handlers previously installed by this function and stops
    propagation to the root logger.

    Args:
        level: Logging level (DEBUG shows every scan and ignored parameter)
        format_style: "structured" for JSON lines, "simple" for plain text
        stream: Output stream, ``sys.stderr`` by default

    Returns:
        The installed handler.
    """
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(getattr(logging, level.upper()))
    root_logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stderr)
    if format_style == "structured":
        handler.setFormatter(StructuredFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    root_logger.addHandler(handler)
    root_logger.propagate = False
    return handler


def log_with_context(logger: logging.Logger, level: int, message: str, **extra_fields: Any) -> None:
    """Log a message with structured extra fields.

    Args:
        logger: The logger to use
        level: Log level
        message: Log message
        **extra_fields: Additional fields rendered by :class:`StructuredFormatter`
    """
    if not logger.isEnabledFor(level):
        return
    record = logger.makeRecord(logger.name, level, "(unknown file)", 0, message, (), None)
    record.extra_fields = extra_fields  # type: ignore[attr-defined]
    logger.handle(record)
