"""Shared contracts for cross-boundary data types.

Import pattern:
    from modinput.contracts import ExitCode, InvocationMode, RunOutcome
"""

from modinput.contracts.enums import (
    ArgumentDataType,
    ExitCode,
    InvocationMode,
    Severity,
    StreamingMode,
)
from modinput.contracts.errors import (
    InputValidationError,
    MalformedDataError,
    PluginLoadError,
    ProtocolError,
)
from modinput.contracts.invocation import Invocation
from modinput.contracts.results import RunOutcome

__all__ = [
    # enums
    "ArgumentDataType",
    "ExitCode",
    "InvocationMode",
    "Severity",
    "StreamingMode",
    # errors
    "InputValidationError",
    "MalformedDataError",
    "PluginLoadError",
    "ProtocolError",
    # invocation
    "Invocation",
    # results
    "RunOutcome",
]
