# src/modinput/plugins/inputs/heartbeat.py
"""Heartbeat input: emits a fixed number of marker events per stanza.

Useful for checking that the host, the harness and the index are wired up
before pointing a real input at them.

Parameters:
    message: Event text (default: "heartbeat")
    count: Events per stanza, positive integer (default: 1)
    interval: Seconds to wait between events, non-negative (default: 0)
"""

import math
import time

from modinput.contracts.enums import ArgumentDataType
from modinput.contracts.errors import InputValidationError
from modinput.plugins.base import BaseModularInput
from modinput.protocol.definitions import (
    InputDefinition,
    ParamValue,
    ValidationDefinition,
)
from modinput.protocol.event_writer import Event, EventWriter
from modinput.protocol.scheme import Argument, Scheme

DEFAULT_MESSAGE = "heartbeat"


def _single(parameters: dict[str, ParamValue], key: str) -> str | None:
    value = parameters.get(key)
    if isinstance(value, list):
        return value[0] if value else None
    return value


def _parse_count(raw: str | None) -> int:
    if raw is None or raw == "":
        return 1
    try:
        count = int(raw)
    except ValueError:
        raise InputValidationError(f"count must be an integer, got {raw!r}") from None
    if count < 1:
        raise InputValidationError(f"count must be positive, got {count}")
    return count


def _parse_interval(raw: str | None) -> float:
    if raw is None or raw == "":
        return 0.0
    try:
        interval = float(raw)
    except ValueError:
        raise InputValidationError(f"interval must be a number, got {raw!r}") from None
    if not math.isfinite(interval):
        raise InputValidationError(f"interval must be a finite number, got {raw!r}")
    if interval < 0:
        raise InputValidationError(f"interval must not be negative, got {interval}")
    return interval


class HeartbeatInput(BaseModularInput):
    """Emit ``count`` events per configured stanza."""

    name = "heartbeat"
    plugin_version = "1.0.0"

    def get_scheme(self) -> Scheme:
        scheme = Scheme(
            title="Heartbeat",
            description="Emit marker events to check the ingestion path.",
        )
        scheme.add_argument(
            Argument(name="message", title="Message", description="Event text")
        )
        scheme.add_argument(
            Argument(
                name="count",
                title="Count",
                description="Events per stanza",
                data_type=ArgumentDataType.NUMBER,
                validation="is_pos_int('count')",
            )
        )
        scheme.add_argument(
            Argument(
                name="interval",
                title="Interval",
                description="Seconds between events",
                data_type=ArgumentDataType.NUMBER,
            )
        )
        return scheme

    def validate_input(self, definition: ValidationDefinition) -> None:
        _parse_count(_single(definition.parameters, "count"))
        _parse_interval(_single(definition.parameters, "interval"))

    def stream_events(self, inputs: InputDefinition, ew: EventWriter) -> None:
        host = inputs.metadata.get("server_host")
        for stanza, parameters in inputs.inputs.items():
            message = _single(parameters, "message") or DEFAULT_MESSAGE
            count = _parse_count(_single(parameters, "count"))
            interval = _parse_interval(_single(parameters, "interval"))

            ew.logger.debug("Starting heartbeat", stanza=stanza, count=count)
            for sequence in range(count):
                if sequence and interval:
                    time.sleep(interval)
                ew.write_event(
                    Event(
                        data=f"{message} seq={sequence}",
                        stanza=stanza,
                        time=time.time(),
                        host=host,
                        sourcetype="modinput:heartbeat",
                    )
                )
