"""Exception types raised across the harness boundaries."""


class ProtocolError(Exception):
    """Raised when a handshake document is missing, truncated or misshapen."""

    pass


class MalformedDataError(Exception):
    """Raised when an event cannot be framed (e.g. it has no data)."""

    pass


class InputValidationError(Exception):
    """Raised by validate_input to reject a proposed configuration.

    The message is what the host shows to the user, so keep it short and
    human-readable. Any exception works; this one just documents intent.
    """

    pass


class PluginLoadError(Exception):
    """Raised when a modular input cannot be resolved or instantiated."""

    pass
