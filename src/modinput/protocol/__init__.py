"""Wire formats of the modular input protocol."""

from modinput.protocol.definitions import (
    InputDefinition,
    ParamValue,
    ValidationDefinition,
)
from modinput.protocol.event_writer import Event, EventWriter
from modinput.protocol.scheme import Argument, Scheme
from modinput.protocol.xml_reader import read_xml_document

__all__ = [
    "Argument",
    "Event",
    "EventWriter",
    "InputDefinition",
    "ParamValue",
    "Scheme",
    "ValidationDefinition",
    "read_xml_document",
]
