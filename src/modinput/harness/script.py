# src/modinput/harness/script.py
"""Public entry point for running a modular input.

Typical plugin script:

    from modinput import BaseModularInput, run_script

    class MyInput(BaseModularInput):
        ...

    if __name__ == "__main__":
        run_script(MyInput())
"""

import sys
from collections.abc import Sequence
from typing import IO, NoReturn

from modinput.contracts.enums import ExitCode, Severity
from modinput.core.config import HarnessSettings, load_settings
from modinput.core.side_channel import SideChannel
from modinput.harness.containment import contain
from modinput.harness.dispatcher import ModeDispatcher
from modinput.plugins.protocols import ModularInputProtocol
from modinput.protocol.event_writer import EventWriter


class Script:
    """Runs one modular input invocation and maps it to an exit code.

    Streams default to the process's stdin/stdout/stderr; pass them
    explicitly to run in-process (tests, embedding).
    """

    def __init__(
        self,
        plugin: ModularInputProtocol,
        *,
        settings: HarnessSettings | None = None,
        side_channel: SideChannel | None = None,
    ) -> None:
        self._plugin = plugin
        self._settings = settings
        self._side_channel = side_channel

    def _resolve_side_channel(self, event_writer: EventWriter | None) -> SideChannel:
        if self._side_channel is not None:
            return self._side_channel
        if event_writer is not None:
            return event_writer.side_channel
        return SideChannel()

    def run(
        self,
        args: Sequence[str],
        event_writer: EventWriter | None = None,
        input_stream: IO[bytes] | None = None,
    ) -> int:
        """Run the mode selected by ``args``.

        Never raises for failures inside the harness or the plugin: they are
        written to the side channel as one ERROR line and reported as exit
        code 1. That includes building the settings and the event writer.

        Args:
            args: Command-line arguments, without the program name
            event_writer: Output writer (default: stdout)
            input_stream: Binary input (default: stdin)

        Returns:
            0 on success, 1 on any failure
        """
        side_channel = self._resolve_side_channel(event_writer)
        owns_side_channel = self._side_channel is None and event_writer is None

        def execute() -> ExitCode:
            settings = self._settings if self._settings is not None else load_settings()
            if owns_side_channel:
                side_channel.set_level(settings.log_level)

            writer = event_writer
            if writer is None:
                writer = EventWriter(
                    side_channel=side_channel,
                    flush_each_event=settings.flush_each_event,
                )
            stream = input_stream if input_stream is not None else sys.stdin.buffer

            return ModeDispatcher(self._plugin, side_channel).dispatch(
                args, writer, stream
            )

        outcome = contain(execute)
        if outcome.is_failure and outcome.diagnostic is not None:
            side_channel.log_frames(Severity.ERROR, outcome.diagnostic)
        return int(outcome.exit_code)


def run_script(plugin: ModularInputProtocol) -> NoReturn:
    """Run ``plugin`` against the process's argv and streams, then exit."""
    sys.exit(Script(plugin).run(sys.argv[1:]))
