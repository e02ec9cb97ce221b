"""The invocation derived from argv at process start."""

from dataclasses import dataclass

from modinput.contracts.enums import InvocationMode


@dataclass(frozen=True)
class Invocation:
    """Selected mode plus the raw arguments it was selected from.

    Created once by the dispatcher, consumed immediately, never persisted.
    """

    mode: InvocationMode
    args: tuple[str, ...] = ()
