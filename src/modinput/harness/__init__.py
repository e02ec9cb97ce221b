"""Harness: mode dispatch, the three modes, and the containment boundary."""

from modinput.harness.containment import contain
from modinput.harness.dispatcher import (
    INVALID_ARGUMENTS_MESSAGE,
    SCHEME_FLAG,
    VALIDATE_ARGUMENTS_FLAG,
    ModeDispatcher,
    select_mode,
)
from modinput.harness.modes import (
    NULL_SCHEME_MESSAGE,
    build_error_document,
    run_scheme_mode,
    run_stream_mode,
    run_validation_mode,
)
from modinput.harness.script import Script, run_script

__all__ = [
    "INVALID_ARGUMENTS_MESSAGE",
    "NULL_SCHEME_MESSAGE",
    "SCHEME_FLAG",
    "VALIDATE_ARGUMENTS_FLAG",
    "ModeDispatcher",
    "Script",
    "build_error_document",
    "contain",
    "run_scheme_mode",
    "run_script",
    "run_stream_mode",
    "run_validation_mode",
    "select_mode",
]
