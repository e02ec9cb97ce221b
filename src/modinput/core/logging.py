# src/modinput/core/logging.py
"""Structured logging rendered in the side-channel line format.

The host reads stderr line by line and takes the first token as the
severity, so every structlog event is rendered as a single
``LEVEL event key=value ...`` line.

Loggers are built against an explicit stream (usually the side channel's),
which keeps harness code free of global logging state. configure_logging()
exists for the CLI, which wants a process-wide default.
"""

import logging
import sys
from typing import Any, TextIO

import structlog

# structlog method names -> severity tokens the host understands
_LEVEL_TOKENS: dict[str, str] = {
    "debug": "DEBUG",
    "info": "INFO",
    "warning": "WARN",
    "warn": "WARN",
    "error": "ERROR",
    "exception": "ERROR",
    "critical": "FATAL",
    "fatal": "FATAL",
}

# Severity tokens -> stdlib numeric levels used for filtering
_LEVEL_NUMBERS: dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "FATAL": logging.CRITICAL,
    "CRITICAL": logging.CRITICAL,
}


def level_number(level: str) -> int:
    """Translate a severity token into a stdlib logging level.

    Raises:
        ValueError: If the token is not a known severity
    """
    try:
        return _LEVEL_NUMBERS[level.upper()]
    except KeyError:
        raise ValueError(f"Unknown log level: {level!r}") from None


def _one_line(value: Any) -> str:
    return " ".join(str(value).splitlines())


def render_side_channel_line(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> str:
    """structlog renderer producing ``LEVEL event key=value`` lines."""
    level = str(event_dict.pop("level", method_name)).lower()
    token = _LEVEL_TOKENS.get(level, level.upper())
    event = _one_line(event_dict.pop("event", ""))
    parts = [token, event]
    for key in sorted(event_dict):
        parts.append(f"{key}={_one_line(repr(event_dict[key]))}")
    return " ".join(part for part in parts if part)


def _processors() -> list[Any]:
    return [
        structlog.processors.add_log_level,
        structlog.processors.format_exc_info,
        render_side_channel_line,
    ]


def build_logger(stream: TextIO, level: str = "WARN") -> Any:
    """Build a structlog logger that writes to ``stream``.

    Args:
        stream: Text stream receiving the rendered lines
        level: Minimum severity token to emit

    Returns:
        A filtering bound logger
    """
    return structlog.wrap_logger(
        structlog.PrintLogger(file=stream),
        processors=_processors(),
        wrapper_class=structlog.make_filtering_bound_logger(level_number(level)),
        context_class=dict,
        cache_logger_on_first_use=False,
    )


def configure_logging(level: str = "WARN", stream: TextIO | None = None) -> None:
    """Configure the process-wide structlog defaults.

    Args:
        level: Minimum severity token to emit
        stream: Destination stream (defaults to stderr)
    """
    structlog.configure(
        processors=_processors(),
        wrapper_class=structlog.make_filtering_bound_logger(level_number(level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(
            file=stream if stream is not None else sys.stderr
        ),
        cache_logger_on_first_use=False,
    )


def get_logger(**initial_values: Any) -> Any:
    """Get a logger using the process-wide configuration."""
    return structlog.get_logger(**initial_values)
