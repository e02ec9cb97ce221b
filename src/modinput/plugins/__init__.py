# src/modinput/plugins/__init__.py
"""Plugin system: modular input contract and registry via pluggy.

- Protocols: type contract for inputs
- Base classes: convenience base with the default validate_input
- Manager: discovery, registration and lookup
- Hookspecs: pluggy hook definitions
"""

from modinput.plugins.base import BaseModularInput
from modinput.plugins.hookspecs import hookimpl, hookspec
from modinput.plugins.manager import (
    InputSpec,
    PluginManager,
    instantiate_input,
    load_input_class,
)
from modinput.plugins.protocols import ModularInputProtocol

__all__ = [
    # Base classes
    "BaseModularInput",
    # Protocols
    "ModularInputProtocol",
    # Manager
    "InputSpec",
    "PluginManager",
    "instantiate_input",
    "load_input_class",
    # Hookspecs
    "hookimpl",
    "hookspec",
]
