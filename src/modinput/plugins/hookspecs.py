# src/modinput/plugins/hookspecs.py
"""pluggy hook specifications for modular inputs.

Packages expose inputs to the ``modinput`` CLI by implementing these hooks,
either registered directly or through a ``modinput`` entry point.

Usage (implementing a plugin):
    from modinput.plugins.hookspecs import hookimpl

    class MyPlugin:
        @hookimpl  # NOT @hookspec - that's for defining specs
        def modinput_get_inputs(self):
            return [MyInput]
"""

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from modinput.plugins.protocols import ModularInputProtocol

# Project name for pluggy (also the entry point group)
PROJECT_NAME = "modinput"

hookspec = pluggy.HookspecMarker(PROJECT_NAME)

hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class ModularInputSpec:
    """Hook specifications for modular input plugins."""

    @hookspec
    def modinput_get_inputs(self) -> list[type["ModularInputProtocol"]]:  # type: ignore[empty-body]
        """Return modular input classes.

        Returns:
            List of input classes (not instances)
        """
