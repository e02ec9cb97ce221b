# src/modinput/harness/dispatcher.py
"""Invocation-mode selection and dispatch.

| argv                   | mode     |
|------------------------|----------|
| (none)                 | stream   |
| --scheme               | scheme   |
| --validate-arguments   | validate |
| anything else          | error    |

The first argument is compared case-insensitively. Exactly one mode runs
per process.
"""

from collections.abc import Sequence
from typing import IO

from modinput.contracts.enums import ExitCode, InvocationMode, Severity
from modinput.contracts.invocation import Invocation
from modinput.core.side_channel import SideChannel
from modinput.harness.modes import (
    run_scheme_mode,
    run_stream_mode,
    run_validation_mode,
)
from modinput.plugins.protocols import ModularInputProtocol
from modinput.protocol.event_writer import EventWriter

SCHEME_FLAG = "--scheme"
VALIDATE_ARGUMENTS_FLAG = "--validate-arguments"
INVALID_ARGUMENTS_MESSAGE = "Invalid arguments to modular input script:"


def select_mode(args: Sequence[str]) -> Invocation:
    """Derive the invocation from the raw argument list."""
    args = tuple(args)
    if not args:
        return Invocation(InvocationMode.STREAM, args)

    flag = args[0].lower()
    if flag == SCHEME_FLAG:
        return Invocation(InvocationMode.SCHEME, args)
    if flag == VALIDATE_ARGUMENTS_FLAG:
        return Invocation(InvocationMode.VALIDATE_ARGUMENTS, args)
    return Invocation(InvocationMode.UNRECOGNIZED, args)


def invalid_arguments_message(args: Sequence[str]) -> str:
    return INVALID_ARGUMENTS_MESSAGE + "".join(f" {arg}" for arg in args)


class ModeDispatcher:
    """Routes one invocation to its mode handler.

    Example:
        dispatcher = ModeDispatcher(plugin, side_channel)
        exit_code = dispatcher.dispatch(["--scheme"], event_writer, stdin)
    """

    def __init__(
        self, plugin: ModularInputProtocol, side_channel: SideChannel
    ) -> None:
        self._plugin = plugin
        self._side_channel = side_channel

    def dispatch(
        self,
        args: Sequence[str],
        event_writer: EventWriter,
        input_stream: IO[bytes],
    ) -> ExitCode:
        """Run the selected mode and return its exit code.

        Exceptions from the mode propagate; Script.run() contains them.
        """
        invocation = select_mode(args)
        self._side_channel.logger.debug(
            "Dispatching modular input", mode=invocation.mode.value
        )

        if invocation.mode is InvocationMode.STREAM:
            return run_stream_mode(self._plugin, event_writer, input_stream)
        if invocation.mode is InvocationMode.SCHEME:
            return run_scheme_mode(self._plugin, event_writer, self._side_channel)
        if invocation.mode is InvocationMode.VALIDATE_ARGUMENTS:
            return run_validation_mode(
                self._plugin, event_writer, input_stream, self._side_channel
            )

        self._side_channel.log(Severity.ERROR, invalid_arguments_message(invocation.args))
        return ExitCode.FAILURE
