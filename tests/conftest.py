# tests/conftest.py
"""Shared test fixtures and helpers.

Provides captured streams, a side channel and event writer bound to them,
sample handshake documents, and a configurable in-memory modular input.

Hypothesis Configuration:
- "ci" profile: Fast tests for CI (100 examples) - default
- "nightly" profile: Thorough tests (1000 examples)
- "debug" profile: Minimal tests with verbose output (10 examples)

Set profile via environment variable:
    HYPOTHESIS_PROFILE=nightly pytest tests/
"""

import io
import os
from collections.abc import Callable
from typing import Any

import pytest
from hypothesis import Phase, Verbosity, settings

from modinput.core.config import HarnessSettings
from modinput.core.side_channel import SideChannel
from modinput.protocol.definitions import InputDefinition, ValidationDefinition
from modinput.protocol.event_writer import Event, EventWriter
from modinput.protocol.scheme import Argument, Scheme

# =============================================================================
# Hypothesis Configuration
# =============================================================================

settings.register_profile(
    "ci",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

settings.register_profile(
    "nightly",
    max_examples=1000,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "ci"))


# =============================================================================
# Sample documents
# =============================================================================

INPUT_XML = b"""<?xml version="1.0" encoding="utf-8"?>
<input>
  <server_host>tiny</server_host>
  <server_uri>https://127.0.0.1:8089</server_uri>
  <session_key>123102983109283019283</session_key>
  <checkpoint_dir>/opt/splunk/var/lib/splunk/modinputs</checkpoint_dir>
  <configuration>
    <stanza name="demo://alpha">
      <param name="message">hello</param>
      <param name="count">2</param>
    </stanza>
    <stanza name="demo://beta">
      <param name="message">bye</param>
      <param_list name="tags"><value>a</value><value>b</value></param_list>
    </stanza>
  </configuration>
</input>"""

VALIDATION_XML = b"""<?xml version="1.0" encoding="utf-8"?>
<items>
  <server_host>tiny</server_host>
  <server_uri>https://127.0.0.1:8089</server_uri>
  <session_key>123102983109283019283</session_key>
  <checkpoint_dir>/opt/splunk/var/lib/splunk/modinputs</checkpoint_dir>
  <item name="aaa">
    <param name="port">8080</param>
    <param_list name="hosts"><value>h1</value><value>h2</value></param_list>
  </item>
</items>"""


class DemoInput:
    """Modular input whose behaviour is set per test.

    Records what the harness passed in so tests can assert on it.
    """

    name = "demo"

    def __init__(
        self,
        scheme: Scheme | None = None,
        validator: Callable[[ValidationDefinition], None] | None = None,
        producer: Callable[[InputDefinition, EventWriter], None] | None = None,
    ) -> None:
        self._scheme = scheme
        self._validator = validator
        self._producer = producer
        self.received_inputs: InputDefinition | None = None
        self.received_definition: ValidationDefinition | None = None
        self.scheme_calls = 0

    def get_scheme(self) -> Scheme | None:
        self.scheme_calls += 1
        return self._scheme

    def validate_input(self, definition: ValidationDefinition) -> None:
        self.received_definition = definition
        if self._validator is not None:
            self._validator(definition)

    def stream_events(self, inputs: InputDefinition, ew: EventWriter) -> None:
        self.received_inputs = inputs
        if self._producer is not None:
            self._producer(inputs, ew)


def demo_scheme() -> Scheme:
    scheme = Scheme(title="Demo", description="Demo input")
    scheme.add_argument(Argument(name="message", title="Message"))
    scheme.add_argument(Argument(name="port", required_on_create=True))
    return scheme


def emit_per_stanza(inputs: InputDefinition, ew: EventWriter) -> None:
    for stanza, params in inputs.inputs.items():
        ew.write_event(Event(data=str(params.get("message", "")), stanza=stanza))


def reject_with(message: str) -> Callable[[Any], None]:
    def validator(definition: Any) -> None:
        raise ValueError(message)

    return validator


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def out_stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def err_stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def side_channel(err_stream: io.StringIO) -> SideChannel:
    return SideChannel(err_stream)


@pytest.fixture
def event_writer(out_stream: io.StringIO, side_channel: SideChannel) -> EventWriter:
    return EventWriter(output=out_stream, side_channel=side_channel)


@pytest.fixture
def harness_settings() -> HarnessSettings:
    return HarnessSettings()


@pytest.fixture
def input_xml() -> bytes:
    return INPUT_XML


@pytest.fixture
def validation_xml() -> bytes:
    return VALIDATION_XML


@pytest.fixture
def demo_input_cls() -> type[DemoInput]:
    return DemoInput


@pytest.fixture
def scheme() -> Scheme:
    return demo_scheme()


@pytest.fixture
def emit_events() -> Callable[[InputDefinition, EventWriter], None]:
    return emit_per_stanza


@pytest.fixture
def rejecting_validator() -> Callable[[str], Callable[[Any], None]]:
    return reject_with
