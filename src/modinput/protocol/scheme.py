# src/modinput/protocol/scheme.py
"""The scheme a modular input advertises to the host.

The scheme lists the parameters the input accepts. The host asks for it
once (``--scheme``) and uses it to build its configuration UI and to decide
whether to call ``--validate-arguments``.

Example:
    scheme = Scheme(title="Random numbers")
    scheme.add_argument(Argument(name="min", data_type=ArgumentDataType.NUMBER))
    element = scheme.to_xml()
"""

import xml.etree.ElementTree as ET

from pydantic import BaseModel, Field, field_validator

from modinput.contracts.enums import ArgumentDataType, StreamingMode
from modinput.contracts.errors import ProtocolError

_TRUE_TOKENS = frozenset({"true", "1", "yes"})
_FALSE_TOKENS = frozenset({"false", "0", "no"})


def _xml_bool(value: bool) -> str:
    return "true" if value else "false"


def _parse_bool(text: str | None, field: str) -> bool:
    token = (text or "").strip().lower()
    if token in _TRUE_TOKENS:
        return True
    if token in _FALSE_TOKENS:
        return False
    raise ProtocolError(f"Expected a boolean for <{field}>, got {text!r}")


def _child_text(element: ET.Element, tag: str) -> str | None:
    child = element.find(tag)
    if child is None:
        return None
    return child.text or ""


class Argument(BaseModel):
    """One parameter of a modular input."""

    model_config = {"frozen": True}

    name: str = Field(min_length=1, description="Parameter name as seen by the host")
    title: str | None = Field(default=None, description="Label shown in the UI")
    description: str | None = Field(default=None, description="Help text")
    validation: str | None = Field(
        default=None,
        description="Host-side validation rule, e.g. is_pos_int('port')",
    )
    data_type: ArgumentDataType = ArgumentDataType.STRING
    required_on_edit: bool = False
    required_on_create: bool = False

    def to_xml(self) -> ET.Element:
        """Serialize as an ``<arg>`` element."""
        arg = ET.Element("arg", {"name": self.name})
        for tag in ("title", "description", "validation"):
            value = getattr(self, tag)
            if value is not None:
                ET.SubElement(arg, tag).text = value
        ET.SubElement(arg, "data_type").text = self.data_type.value
        ET.SubElement(arg, "required_on_edit").text = _xml_bool(self.required_on_edit)
        ET.SubElement(arg, "required_on_create").text = _xml_bool(
            self.required_on_create
        )
        return arg

    @classmethod
    def from_xml(cls, element: ET.Element) -> "Argument":
        """Parse an ``<arg>`` element."""
        name = element.get("name")
        if not name:
            raise ProtocolError("<arg> element is missing its name attribute")

        data_type = _child_text(element, "data_type")
        required_on_edit = _child_text(element, "required_on_edit")
        required_on_create = _child_text(element, "required_on_create")
        try:
            parsed_type = ArgumentDataType(
                (data_type or ArgumentDataType.STRING.value).strip().lower()
            )
        except ValueError:
            raise ProtocolError(
                f"Unknown data_type {data_type!r} for argument {name!r}"
            ) from None

        return cls(
            name=name,
            title=_child_text(element, "title"),
            description=_child_text(element, "description"),
            validation=_child_text(element, "validation"),
            data_type=parsed_type,
            required_on_edit=(
                _parse_bool(required_on_edit, "required_on_edit")
                if required_on_edit is not None
                else False
            ),
            required_on_create=(
                _parse_bool(required_on_create, "required_on_create")
                if required_on_create is not None
                else False
            ),
        )


class Scheme(BaseModel):
    """Declared configuration shape of a modular input."""

    title: str = Field(min_length=1)
    description: str | None = None
    use_external_validation: bool = True
    use_single_instance: bool = False
    # EventWriter frames XML only; SIMPLE inputs write their own output
    streaming_mode: StreamingMode = StreamingMode.XML
    arguments: list[Argument] = Field(default_factory=list)

    @field_validator("arguments")
    @classmethod
    def validate_unique_names(cls, v: list[Argument]) -> list[Argument]:
        """Argument names must be unique."""
        seen: set[str] = set()
        for argument in v:
            if argument.name in seen:
                raise ValueError(f"Duplicate argument name: {argument.name!r}")
            seen.add(argument.name)
        return v

    def add_argument(self, argument: Argument) -> None:
        """Append an argument.

        Raises:
            ValueError: If an argument with the same name already exists
        """
        if any(existing.name == argument.name for existing in self.arguments):
            raise ValueError(f"Duplicate argument name: {argument.name!r}")
        self.arguments.append(argument)

    def get_argument(self, name: str) -> Argument | None:
        """Look up an argument by name."""
        for argument in self.arguments:
            if argument.name == name:
                return argument
        return None

    def to_xml(self) -> ET.Element:
        """Serialize as a complete ``<scheme>`` document element."""
        root = ET.Element("scheme")
        ET.SubElement(root, "title").text = self.title
        if self.description is not None:
            ET.SubElement(root, "description").text = self.description
        ET.SubElement(root, "use_external_validation").text = _xml_bool(
            self.use_external_validation
        )
        ET.SubElement(root, "use_single_instance").text = _xml_bool(
            self.use_single_instance
        )
        ET.SubElement(root, "streaming_mode").text = self.streaming_mode.value

        args = ET.SubElement(ET.SubElement(root, "endpoint"), "args")
        for argument in self.arguments:
            args.append(argument.to_xml())
        return root

    @classmethod
    def from_xml(cls, element: ET.Element) -> "Scheme":
        """Parse a ``<scheme>`` element produced by to_xml() or by hand.

        Raises:
            ProtocolError: If the element is not a well-formed scheme
        """
        if element.tag != "scheme":
            raise ProtocolError(f"Expected <scheme> root element, got <{element.tag}>")

        title = _child_text(element, "title")
        if not title:
            raise ProtocolError("<scheme> requires a non-empty <title>")

        external = _child_text(element, "use_external_validation")
        single = _child_text(element, "use_single_instance")
        mode = _child_text(element, "streaming_mode")
        try:
            streaming_mode = StreamingMode(
                (mode or StreamingMode.XML.value).strip().lower()
            )
        except ValueError:
            raise ProtocolError(f"Unknown streaming_mode {mode!r}") from None

        return cls(
            title=title,
            description=_child_text(element, "description"),
            use_external_validation=(
                _parse_bool(external, "use_external_validation")
                if external is not None
                else True
            ),
            use_single_instance=(
                _parse_bool(single, "use_single_instance")
                if single is not None
                else False
            ),
            streaming_mode=streaming_mode,
            arguments=[
                Argument.from_xml(arg) for arg in element.iterfind("endpoint/args/arg")
            ],
        )
