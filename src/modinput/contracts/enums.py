"""Modes, severities and exit codes shared across the harness.

Exit codes are flattened to {0, 1}: the host treats every
nonzero status the same way, so failure detail goes to the side channel.
"""

from enum import Enum, IntEnum


class InvocationMode(str, Enum):
    """Which of the protocol modes the process was launched in.

    Uses (str, Enum) so the value can be logged directly.
    """

    STREAM = "stream"
    SCHEME = "scheme"
    VALIDATE_ARGUMENTS = "validate_arguments"
    UNRECOGNIZED = "unrecognized"


class Severity(str, Enum):
    """Severity tokens understood by the host on the side channel.

    The host accepts an open set; these are the ones the harness emits.
    """

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"
    FATAL = "FATAL"


class ExitCode(IntEnum):
    """Process exit status reported to the host."""

    SUCCESS = 0
    FAILURE = 1


class StreamingMode(str, Enum):
    """How the input frames its events on stdout.

    EventWriter only produces XML framing. An input that declares SIMPLE
    must write its own line-oriented output and not use write_event().
    """

    XML = "xml"
    SIMPLE = "simple"


class ArgumentDataType(str, Enum):
    """Data types the host understands for scheme arguments."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
