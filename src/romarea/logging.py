"""Logging configuration for romarea."""

import sys
from functools import partial
from pathlib import Path
from typing import Any

import structlog


def truncate_strings_processor(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
    max_length: int = 200,
) -> dict[str, Any]:
    """Shorten long string values such as room descriptions."""
    for key, value in event_dict.items():
        if key != "event" and isinstance(value, str) and len(value) > max_length:
            event_dict[key] = value[:max_length] + "..."
    return event_dict


def _level_to_int(level: str) -> int:
    levels = {
        "DEBUG": 10,
        "INFO": 20,
        "WARNING": 30,
        "ERROR": 40,
        "CRITICAL": 50,
    }
    return levels.get(level.upper(), 20)


def configure_logging(
    log_level: str = "INFO",
    log_file: Path | None = None,
    json_logs: bool = False,
    max_string: int = 200,
) -> None:
    """Configure structured logging for the loader and importer."""
    if log_file:
        output_stream = open(log_file, "a")
    else:
        output_stream = sys.stderr

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(
            fmt="iso" if json_logs else "%Y-%m-%d %H:%M:%S"
        ),
        partial(truncate_strings_processor, max_length=max_string),
    ]

    if json_logs:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=output_stream.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(_level_to_int(log_level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=output_stream),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a logger instance for a module."""
    return structlog.get_logger(name)
