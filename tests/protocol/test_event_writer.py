# tests/protocol/test_event_writer.py
"""Tests for event framing and the output writer."""

import io
import xml.etree.ElementTree as ET

import pytest

from modinput.contracts.errors import MalformedDataError, ProtocolError
from modinput.core.side_channel import SideChannel
from modinput.protocol.event_writer import Event, EventWriter


class FlushCountingStream(io.StringIO):
    def __init__(self) -> None:
        super().__init__()
        self.flushes = 0

    def flush(self) -> None:
        self.flushes += 1
        super().flush()


class TestEvent:
    def test_minimal_event(self) -> None:
        element = Event(data="hello").to_xml()

        assert ET.tostring(element, encoding="unicode") == (
            '<event unbroken="1"><data>hello</data><done /></event>'
        )

    def test_all_fields(self) -> None:
        element = Event(
            data="d",
            stanza="demo://a",
            time=1700000000.5,
            host="h",
            index="main",
            source="src",
            sourcetype="st",
            done=False,
            unbroken=False,
        ).to_xml()

        assert element.get("stanza") == "demo://a"
        assert element.get("unbroken") == "0"
        assert element.findtext("time") == "1700000000.500"
        assert [child.tag for child in element] == [
            "time",
            "source",
            "sourcetype",
            "index",
            "host",
            "data",
        ]

    def test_string_time_passed_through(self) -> None:
        assert Event(data="d", time="123").to_xml().findtext("time") == "123"

    def test_missing_data_raises(self) -> None:
        with pytest.raises(MalformedDataError, match="data field"):
            Event(stanza="demo://a").to_xml()

    def test_data_is_escaped(self) -> None:
        text = ET.tostring(Event(data="a<b&c").to_xml(), encoding="unicode")
        assert "<data>a&lt;b&amp;c</data>" in text


class TestEventWriter:
    def test_stream_framing(
        self, event_writer: EventWriter, out_stream: io.StringIO
    ) -> None:
        event_writer.write_event(Event(data="one", stanza="demo://a"))
        event_writer.write_event(Event(data="two", stanza="demo://a"))
        event_writer.close()

        output = out_stream.getvalue()
        assert output.startswith("<stream><event")
        assert output.endswith("</event></stream>")
        root = ET.fromstring(output)
        assert [event.findtext("data") for event in root] == ["one", "two"]

    def test_close_without_events_writes_nothing(
        self, event_writer: EventWriter, out_stream: io.StringIO
    ) -> None:
        event_writer.close()
        assert out_stream.getvalue() == ""
        assert event_writer.closed is True

    def test_close_is_idempotent(
        self, event_writer: EventWriter, out_stream: io.StringIO
    ) -> None:
        event_writer.write_event(Event(data="x"))
        event_writer.close()
        event_writer.close()

        assert out_stream.getvalue().count("</stream>") == 1

    def test_write_after_close_raises(self, event_writer: EventWriter) -> None:
        event_writer.close()
        with pytest.raises(ProtocolError, match="closed"):
            event_writer.write_event(Event(data="late"))

    def test_malformed_event_writes_no_header(
        self, event_writer: EventWriter, out_stream: io.StringIO
    ) -> None:
        with pytest.raises(MalformedDataError):
            event_writer.write_event(Event())
        assert out_stream.getvalue() == ""

    def test_write_xml_document(
        self, event_writer: EventWriter, out_stream: io.StringIO
    ) -> None:
        document = ET.Element("error")
        ET.SubElement(document, "message").text = "bad"

        event_writer.write_xml_document(document)

        assert out_stream.getvalue() == "<error><message>bad</message></error>"

    def test_write_xml_document_accepts_tree(
        self, event_writer: EventWriter, out_stream: io.StringIO
    ) -> None:
        event_writer.write_xml_document(ET.ElementTree(ET.Element("scheme")))
        assert out_stream.getvalue() == "<scheme />"

    def test_log_goes_to_side_channel_only(
        self,
        event_writer: EventWriter,
        out_stream: io.StringIO,
        err_stream: io.StringIO,
    ) -> None:
        event_writer.log("INFO", "polling")

        assert err_stream.getvalue() == "INFO polling\n"
        assert out_stream.getvalue() == ""

    def test_logger_renders_on_side_channel(self, out_stream: io.StringIO) -> None:
        err = io.StringIO()
        writer = EventWriter(output=out_stream, side_channel=SideChannel(err, level="INFO"))

        writer.logger.info("fetched", rows=3)

        assert err.getvalue() == "INFO fetched rows=3\n"
        assert out_stream.getvalue() == ""

    def test_flush_each_event(self) -> None:
        stream = FlushCountingStream()
        writer = EventWriter(output=stream, side_channel=SideChannel(io.StringIO()))

        writer.write_event(Event(data="a"))
        writer.write_event(Event(data="b"))

        assert stream.flushes == 2

    def test_flush_only_on_close(self) -> None:
        stream = FlushCountingStream()
        writer = EventWriter(
            output=stream,
            side_channel=SideChannel(io.StringIO()),
            flush_each_event=False,
        )

        writer.write_event(Event(data="a"))
        writer.write_event(Event(data="b"))
        assert stream.flushes == 0

        writer.close()
        assert stream.flushes == 1

    def test_defaults_to_process_streams(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        writer = EventWriter()
        writer.write_event(Event(data="x"))
        writer.log("WARN", "careful")
        writer.close()

        captured = capsys.readouterr()
        assert captured.out.startswith("<stream>")
        assert captured.err == "WARN careful\n"
