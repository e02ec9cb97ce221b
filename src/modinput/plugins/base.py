# src/modinput/plugins/base.py
"""Base class for modular input implementations.

Inputs can subclass this for convenience, or implement
ModularInputProtocol directly.
"""

from abc import ABC, abstractmethod

from modinput.protocol.definitions import InputDefinition, ValidationDefinition
from modinput.protocol.event_writer import EventWriter
from modinput.protocol.scheme import Scheme


class BaseModularInput(ABC):
    """Base class for modular inputs.

    Subclass and implement get_scheme() and stream_events(). Override
    validate_input() only if the scheme enables external validation.

    Example:
        class HelloInput(BaseModularInput):
            name = "hello"

            def get_scheme(self) -> Scheme:
                return Scheme(title="Hello")

            def stream_events(self, inputs: InputDefinition, ew: EventWriter) -> None:
                for stanza in inputs.inputs:
                    ew.write_event(Event(data="hello", stanza=stanza))
    """

    name: str
    plugin_version: str = "0.0.0"

    @abstractmethod
    def get_scheme(self) -> Scheme | None:
        """Return the scheme advertised for ``--scheme``."""
        ...

    @abstractmethod
    def stream_events(self, inputs: InputDefinition, ew: EventWriter) -> None:
        """Produce events.

        Args:
            inputs: Configuration sent by the host
            ew: Writer for events and side-channel log lines
        """
        ...

    def validate_input(self, definition: ValidationDefinition) -> None:  # noqa: B027
        """Validate a proposed configuration.

        Raise any exception to reject it; its message is shown to the user.
        The default accepts everything.
        """
