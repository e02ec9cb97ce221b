# src/modinput/protocol/definitions.py
"""Configuration documents the host sends on stdin.

InputDefinition arrives when the input is launched to collect data;
ValidationDefinition arrives with ``--validate-arguments`` before a
proposed configuration is saved. Both are parsed with the bounded reader,
so the host may keep stdin open after the document.

Input document shape:
    <input>
      <server_host>tiny</server_host>
      <server_uri>https://127.0.0.1:8089</server_uri>
      <session_key>123102983109283019283</session_key>
      <checkpoint_dir>/opt/splunk/var/lib/splunk/modinputs</checkpoint_dir>
      <configuration>
        <stanza name="foobar://aaa">
          <param name="param1">value1</param>
          <param_list name="multi"><value>a</value><value>b</value></param_list>
        </stanza>
      </configuration>
    </input>

Validation document shape:
    <items>
      <server_host>tiny</server_host>
      ...
      <item name="aaa">
        <param name="param1">value1</param>
      </item>
    </items>
"""

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import IO

from modinput.contracts.errors import ProtocolError
from modinput.protocol.xml_reader import read_xml_document

ParamValue = str | list[str]


def _require_name(element: ET.Element) -> str:
    name = element.get("name")
    if name is None:
        raise ProtocolError(f"<{element.tag}> element is missing its name attribute")
    return name


def _parse_parameters(element: ET.Element) -> dict[str, ParamValue]:
    """Collect <param> and <param_list> children into a dict."""
    parameters: dict[str, ParamValue] = {}
    for child in element:
        if child.tag == "param":
            parameters[_require_name(child)] = child.text or ""
        elif child.tag == "param_list":
            parameters[_require_name(child)] = [
                value.text or "" for value in child.iterfind("value")
            ]
    return parameters


def _expect_root(root: ET.Element, tag: str) -> None:
    if root.tag != tag:
        raise ProtocolError(f"Expected <{tag}> root element, got <{root.tag}>")


@dataclass(frozen=True)
class InputDefinition:
    """Parsed input configuration, passed unchanged to stream_events().

    metadata holds the host-level fields (server_host, server_uri,
    session_key, checkpoint_dir); inputs maps stanza name to parameters.
    """

    metadata: dict[str, str] = field(default_factory=dict)
    inputs: dict[str, dict[str, ParamValue]] = field(default_factory=dict)

    @classmethod
    def parse(cls, stream: IO[bytes]) -> "InputDefinition":
        """Read and parse one ``<input>`` document from ``stream``."""
        return cls.from_element(read_xml_document(stream))

    @classmethod
    def from_element(cls, root: ET.Element) -> "InputDefinition":
        _expect_root(root, "input")

        metadata: dict[str, str] = {}
        inputs: dict[str, dict[str, ParamValue]] = {}
        for child in root:
            if child.tag == "configuration":
                for stanza in child.iterfind("stanza"):
                    inputs[_require_name(stanza)] = _parse_parameters(stanza)
            else:
                metadata[child.tag] = child.text or ""
        return cls(metadata=metadata, inputs=inputs)


@dataclass(frozen=True)
class ValidationDefinition:
    """Parsed proposed configuration for validate_input().

    metadata holds the host-level fields plus ``name`` (the item name);
    parameters holds the proposed values.
    """

    metadata: dict[str, str] = field(default_factory=dict)
    parameters: dict[str, ParamValue] = field(default_factory=dict)

    @property
    def name(self) -> str:
        return self.metadata.get("name", "")

    @classmethod
    def parse(cls, stream: IO[bytes]) -> "ValidationDefinition":
        """Read and parse one ``<items>`` document from ``stream``."""
        return cls.from_element(read_xml_document(stream))

    @classmethod
    def from_element(cls, root: ET.Element) -> "ValidationDefinition":
        _expect_root(root, "items")

        items = root.findall("item")
        if len(items) != 1:
            raise ProtocolError(
                f"Validation document must contain exactly one <item>, found {len(items)}"
            )

        metadata = {child.tag: child.text or "" for child in root if child.tag != "item"}
        metadata["name"] = _require_name(items[0])
        return cls(metadata=metadata, parameters=_parse_parameters(items[0]))
