# src/modinput/harness/modes.py
"""The three protocol modes.

Each mode owns stdin/stdout for the duration of the call and returns an
exit code. None of them recovers from unexpected failures; those propagate
to the containment boundary in Script.run().
"""

import re
import xml.etree.ElementTree as ET
from typing import IO

from modinput.contracts.enums import ExitCode, Severity
from modinput.core.side_channel import SideChannel
from modinput.plugins.protocols import ModularInputProtocol
from modinput.protocol.definitions import InputDefinition, ValidationDefinition
from modinput.protocol.event_writer import EventWriter

NULL_SCHEME_MESSAGE = "Modular input script returned a null scheme."

# Characters outside the XML 1.0 Char production
_XML_ILLEGAL = re.compile(
    r"[^\x09\x0a\x0d\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]"
)


def build_error_document(message: str) -> ET.Element:
    """Build ``<error><message>TEXT</message></error>``.

    Characters that XML 1.0 cannot carry are dropped from the message.
    """
    error = ET.Element("error")
    ET.SubElement(error, "message").text = _XML_ILLEGAL.sub("", message)
    return error


def run_scheme_mode(
    plugin: ModularInputProtocol,
    event_writer: EventWriter,
    side_channel: SideChannel,
) -> ExitCode:
    """Write the plugin's scheme to stdout.

    A missing scheme is the plugin author's mistake, not a runtime failure,
    so it is logged at FATAL and nothing reaches stdout.
    """
    scheme = plugin.get_scheme()
    if scheme is None:
        side_channel.log(Severity.FATAL, NULL_SCHEME_MESSAGE)
        return ExitCode.FAILURE

    event_writer.write_xml_document(scheme.to_xml())
    return ExitCode.SUCCESS


def run_validation_mode(
    plugin: ModularInputProtocol,
    event_writer: EventWriter,
    input_stream: IO[bytes],
    side_channel: SideChannel,
) -> ExitCode:
    """Validate a proposed configuration.

    Success is signalled by writing nothing at all; any byte on stdout would
    be read by the host as an error document.
    """
    definition = ValidationDefinition.parse(input_stream)

    try:
        plugin.validate_input(definition)
    except Exception as e:
        side_channel.logger.debug(
            "Validation rejected", item=definition.name, reason=str(e)
        )
        event_writer.write_xml_document(build_error_document(str(e)))
        return ExitCode.FAILURE

    return ExitCode.SUCCESS


def run_stream_mode(
    plugin: ModularInputProtocol,
    event_writer: EventWriter,
    input_stream: IO[bytes],
) -> ExitCode:
    """Hand the parsed configuration to the plugin and stream its events.

    stream_events() may run for the life of the process. The writer is only
    closed when it returns normally.
    """
    inputs = InputDefinition.parse(input_stream)
    plugin.stream_events(inputs, event_writer)
    event_writer.close()
    return ExitCode.SUCCESS
