# src/modinput/protocol/xml_reader.py
"""Read exactly one XML document from a stream that may stay open.

The host does not close stdin or send a length prefix; the document's own
closing tag is the only framing. Bytes are pulled one at a time and handed
to an incremental parser at every ``>``, and reading stops as soon as the
root element closes. Anything after it is left in the stream.
"""

import xml.etree.ElementTree as ET
from typing import IO

from modinput.contracts.errors import ProtocolError


def read_xml_document(stream: IO[bytes] | IO[str]) -> ET.Element:
    """Parse the next complete XML document from ``stream``.

    Args:
        stream: Byte stream (text streams are accepted and UTF-8 encoded)

    Returns:
        The root element of the document

    Raises:
        ProtocolError: If the stream ends before the root element closes
        xml.etree.ElementTree.ParseError: If the bytes are not well-formed XML
    """
    parser = ET.XMLPullParser(events=("start", "end"))
    pending = bytearray()
    depth = 0

    while True:
        chunk = stream.read(1)
        if not chunk:
            raise ProtocolError(
                "Input stream ended before the XML document was complete"
            )
        if isinstance(chunk, str):
            chunk = chunk.encode("utf-8")
        pending += chunk

        # A start or end tag can only complete on '>'
        if chunk != b">":
            continue

        parser.feed(bytes(pending))
        pending.clear()
        # Expat 2.6+ may defer reparsing small feeds; flush() exists from 3.13
        flush = getattr(parser, "flush", None)
        if flush is not None:
            flush()

        for event, element in parser.read_events():
            if event == "start":
                depth += 1
                continue
            depth -= 1
            if depth == 0:
                return element
