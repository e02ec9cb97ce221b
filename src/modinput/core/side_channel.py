# src/modinput/core/side_channel.py
"""Side-channel diagnostics: the log stream the host reads from stderr.

Every line is ``SEVERITY message``. Nothing else is ever written here, and
event or scheme payloads never are.
"""

import sys
import traceback
from collections.abc import Iterable
from typing import Any, TextIO

from modinput.contracts.enums import Severity
from modinput.core.logging import build_logger


def severity_token(severity: Severity | str) -> str:
    """Return the bare token for a severity (enum or free-form string)."""
    if isinstance(severity, Severity):
        return severity.value
    return str(severity)


def format_log_entry(severity: Severity | str, frames: Iterable[str]) -> str:
    """Turn a severity and a stack trace into one side-channel line.

    Each frame description is followed by a literal backslash, which is how
    the host expects multi-part diagnostics to be packed into a single line.

    Args:
        severity: Severity token
        frames: Stack-frame descriptions

    Returns:
        The log line, without a trailing newline
    """
    return severity_token(severity) + " " + "".join(f"{frame}\\" for frame in frames)


def describe_exception(exc: BaseException) -> tuple[str, ...]:
    """Describe an exception as a sequence of single-line entries.

    The first entry is ``ExceptionType: message``, followed by one
    ``function(filename:lineno)`` entry per frame, most recent call first.
    """
    summary = "".join(traceback.format_exception_only(type(exc), exc)).strip()
    frames = [
        f"{frame.name}({frame.filename}:{frame.lineno})"
        for frame in reversed(traceback.extract_tb(exc.__traceback__))
    ]
    return tuple(" ".join(entry.splitlines()) for entry in [summary, *frames])


class SideChannel:
    """Line-oriented writer for host diagnostics.

    Passed explicitly to the dispatcher and every mode so that tests can
    capture it without touching the real process streams.

    Example:
        side_channel = SideChannel(io.StringIO())
        side_channel.log(Severity.FATAL, "Modular input script returned a null scheme.")
    """

    def __init__(self, stream: TextIO | None = None, *, level: str = "WARN") -> None:
        self._stream = stream if stream is not None else sys.stderr
        self.logger: Any = build_logger(self._stream, level)

    @property
    def stream(self) -> TextIO:
        return self._stream

    def set_level(self, level: str) -> None:
        """Rebuild the structlog logger with a new minimum severity."""
        self.logger = build_logger(self._stream, level)

    def write_line(self, line: str) -> None:
        """Write one preformatted line and flush."""
        self._stream.write(" ".join(line.splitlines()) + "\n")
        self._stream.flush()

    def log(self, severity: Severity | str, message: str) -> None:
        """Write ``SEVERITY message``."""
        self.write_line(f"{severity_token(severity)} {message}")

    def log_frames(self, severity: Severity | str, frames: Iterable[str]) -> None:
        """Write a stack trace as a single line."""
        self.write_line(format_log_entry(severity, frames))

    def log_exception(
        self, exc: BaseException, severity: Severity | str = Severity.ERROR
    ) -> None:
        """Write the full stack trace of ``exc`` as a single line."""
        self.log_frames(severity, describe_exception(exc))
