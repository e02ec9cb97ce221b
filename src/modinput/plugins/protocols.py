# src/modinput/plugins/protocols.py
"""Plugin protocol defining the contract for a modular input.

The protocol is used for type checking and for the runtime shape check in
the plugin manager. BaseModularInput is a convenience implementation.

Lifecycle (one per process, exactly one method is called):
- get_scheme()               --scheme
- validate_input(definition) --validate-arguments
- stream_events(inputs, ew)  no arguments
"""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from modinput.protocol.definitions import InputDefinition, ValidationDefinition
    from modinput.protocol.event_writer import EventWriter
    from modinput.protocol.scheme import Scheme


@runtime_checkable
class ModularInputProtocol(Protocol):
    """Protocol for modular inputs.

    Example:
        class RandomNumbers:
            name = "random_numbers"

            def get_scheme(self) -> Scheme:
                return Scheme(title="Random numbers")

            def validate_input(self, definition: ValidationDefinition) -> None:
                if int(definition.parameters["max"]) < 0:
                    raise InputValidationError("max must be positive")

            def stream_events(self, inputs: InputDefinition, ew: EventWriter) -> None:
                for stanza in inputs.inputs:
                    ew.write_event(Event(data=str(random.random()), stanza=stanza))
    """

    name: str

    def get_scheme(self) -> "Scheme | None":
        """Return the parameters this input understands.

        Returning None is a configuration error reported at FATAL.
        """
        ...

    def validate_input(self, definition: "ValidationDefinition") -> None:
        """Reject a proposed configuration by raising; return to accept."""
        ...

    def stream_events(self, inputs: "InputDefinition", ew: "EventWriter") -> None:
        """Produce events for the lifetime of the process."""
        ...
