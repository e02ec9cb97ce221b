"""Outcome of a contained harness run.

The containment boundary never raises; it returns one of these instead, so
the exit-code mapping and the diagnostic line can be tested in isolation.
"""

from dataclasses import dataclass
from typing import Literal

from modinput.contracts.enums import ExitCode


@dataclass(frozen=True)
class RunOutcome:
    """Result of running one mode inside the containment boundary.

    Use the factory methods to create instances.
    """

    status: Literal["success", "failure"]
    exit_code: ExitCode
    diagnostic: tuple[str, ...] | None = None

    @classmethod
    def completed(cls, exit_code: ExitCode) -> "RunOutcome":
        """The mode ran to the end and chose its own exit code."""
        return cls(status="success", exit_code=exit_code)

    @classmethod
    def failed(cls, diagnostic: tuple[str, ...]) -> "RunOutcome":
        """The mode raised; diagnostic holds the stack-frame descriptions."""
        return cls(status="failure", exit_code=ExitCode.FAILURE, diagnostic=diagnostic)

    @property
    def is_failure(self) -> bool:
        return self.status == "failure"
