# src/modinput/harness/containment.py
"""The single boundary where failures become diagnostics.

Every mode lets exceptions bubble; contain() is the only place they are
caught. It returns a RunOutcome instead of raising so the caller decides
how to report it.
"""

from collections.abc import Callable

from modinput.contracts.enums import ExitCode
from modinput.contracts.results import RunOutcome
from modinput.core.side_channel import describe_exception


def contain(operation: Callable[[], ExitCode]) -> RunOutcome:
    """Run ``operation`` and capture any exception as a failed outcome."""
    try:
        exit_code = operation()
    except Exception as e:
        return RunOutcome.failed(describe_exception(e))
    return RunOutcome.completed(ExitCode(exit_code))
