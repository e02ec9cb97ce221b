# src/modinput/protocol/event_writer.py
"""Framing of events and documents on stdout.

In XML streaming mode the host expects a single ``<stream>`` element that
stays open for the life of the process, with one ``<event>`` child per
event. The opening tag is written lazily with the first event and the
closing tag on close(), so an input that produces nothing writes nothing.
"""

import sys
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Any, TextIO

from modinput.contracts.enums import Severity
from modinput.contracts.errors import MalformedDataError, ProtocolError
from modinput.core.side_channel import SideChannel


@dataclass
class Event:
    """One event to hand to the host.

    Only data is required. time is seconds since the epoch (float) or a
    preformatted string.
    """

    data: str | None = None
    stanza: str | None = None
    time: float | str | None = None
    host: str | None = None
    index: str | None = None
    source: str | None = None
    sourcetype: str | None = None
    done: bool = True
    unbroken: bool = True

    def to_xml(self) -> ET.Element:
        """Serialize as an ``<event>`` element.

        Raises:
            MalformedDataError: If data is not set
        """
        if self.data is None:
            raise MalformedDataError(
                "Events must have at least the data field set to be written to XML."
            )

        event = ET.Element("event")
        if self.stanza is not None:
            event.set("stanza", self.stanza)
        event.set("unbroken", "1" if self.unbroken else "0")

        if self.time is not None:
            time_text = (
                f"{self.time:.3f}" if isinstance(self.time, float) else str(self.time)
            )
            ET.SubElement(event, "time").text = time_text

        for tag, value in (
            ("source", self.source),
            ("sourcetype", self.sourcetype),
            ("index", self.index),
            ("host", self.host),
            ("data", self.data),
        ):
            if value is not None:
                ET.SubElement(event, tag).text = value

        if self.done:
            ET.SubElement(event, "done")
        return event


class EventWriter:
    """Writes events and documents to stdout, diagnostics to the side channel.

    Example:
        ew = EventWriter(output=io.StringIO(), side_channel=SideChannel(io.StringIO()))
        ew.write_event(Event(data="hello", stanza="demo://one"))
        ew.close()
    """

    def __init__(
        self,
        output: TextIO | None = None,
        side_channel: SideChannel | None = None,
        *,
        flush_each_event: bool = True,
    ) -> None:
        self._output = output if output is not None else sys.stdout
        self._side_channel = side_channel if side_channel is not None else SideChannel()
        self._flush_each_event = flush_each_event
        self._header_written = False
        self._closed = False

    @property
    def side_channel(self) -> SideChannel:
        return self._side_channel

    @property
    def logger(self) -> Any:
        """structlog logger rendering onto the side channel."""
        return self._side_channel.logger

    @property
    def closed(self) -> bool:
        return self._closed

    def _check_open(self) -> None:
        if self._closed:
            raise ProtocolError("EventWriter is closed")

    def write_event(self, event: Event) -> None:
        """Frame one event on the output stream.

        Raises:
            MalformedDataError: If the event has no data
            ProtocolError: If the writer was already closed
        """
        self._check_open()
        element = event.to_xml()

        if not self._header_written:
            self._output.write("<stream>")
            self._header_written = True

        self._output.write(ET.tostring(element, encoding="unicode"))
        if self._flush_each_event:
            self._output.flush()

    def write_xml_document(self, document: ET.Element | ET.ElementTree) -> None:
        """Write a complete XML document to the output stream.

        The document is serialized in memory first, so a serialization
        failure never leaves a truncated document on the stream.
        """
        self._check_open()
        root = document.getroot() if isinstance(document, ET.ElementTree) else document
        text = ET.tostring(root, encoding="unicode")
        self._output.write(text)
        self._output.flush()

    def log(self, severity: Severity | str, message: str) -> None:
        """Write ``SEVERITY message`` on the side channel."""
        self._side_channel.log(severity, message)

    def log_exception(
        self, exc: BaseException, severity: Severity | str = Severity.ERROR
    ) -> None:
        """Write the stack trace of ``exc`` on the side channel."""
        self._side_channel.log_exception(exc, severity)

    def close(self) -> None:
        """Close the event stream (if one was opened) and flush.

        Safe to call more than once.
        """
        if self._closed:
            return
        if self._header_written:
            self._output.write("</stream>")
        self._output.flush()
        self._closed = True
