"""Hook implementation for built-in modular inputs."""

from typing import Any

from modinput.plugins.hookspecs import hookimpl


class ModinputBuiltinInputs:
    """Hook implementer for built-in modular inputs."""

    @hookimpl
    def modinput_get_inputs(self) -> list[type[Any]]:
        """Return built-in input classes."""
        from modinput.plugins.inputs.heartbeat import HeartbeatInput

        return [HeartbeatInput]


# Singleton instance for registration
builtin_inputs = ModinputBuiltinInputs()
