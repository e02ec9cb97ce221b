"""Core infrastructure: configuration, logging and the side channel."""

from modinput.core.config import HarnessSettings, load_settings
from modinput.core.logging import (
    build_logger,
    configure_logging,
    get_logger,
    render_side_channel_line,
)
from modinput.core.side_channel import (
    SideChannel,
    describe_exception,
    format_log_entry,
)

__all__ = [
    "HarnessSettings",
    "SideChannel",
    "build_logger",
    "configure_logging",
    "describe_exception",
    "format_log_entry",
    "get_logger",
    "load_settings",
    "render_side_channel_line",
]
