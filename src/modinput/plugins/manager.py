# src/modinput/plugins/manager.py
"""Plugin manager for discovery, registration, and lookup.

Uses pluggy for hook-based registration. Inputs can also be referenced
directly as ``package.module:ClassName``.
"""

import importlib
from dataclasses import dataclass

import pluggy

from modinput.contracts.errors import PluginLoadError
from modinput.plugins.hookspecs import PROJECT_NAME, ModularInputSpec
from modinput.plugins.protocols import ModularInputProtocol


@dataclass(frozen=True)
class InputSpec:
    """Registration record for a modular input class."""

    name: str
    version: str
    class_name: str

    @classmethod
    def from_input(cls, input_cls: type) -> "InputSpec":
        """Create spec from an input class.

        Raises:
            ValueError: If the class is missing its 'name' attribute
        """
        try:
            name = input_cls.name  # type: ignore[attr-defined]
        except AttributeError:
            raise ValueError(
                f"Input {input_cls.__name__} must define 'name' attribute. "
                f"Add: name = 'your_input_name' to the class."
            ) from None

        return cls(
            name=name,
            version=getattr(input_cls, "plugin_version", "0.0.0"),
            class_name=f"{input_cls.__module__}:{input_cls.__qualname__}",
        )


def load_input_class(reference: str) -> type:
    """Import ``package.module:ClassName``.

    Raises:
        PluginLoadError: If the reference is malformed or cannot be imported
    """
    module_name, sep, attr = reference.partition(":")
    if not sep or not module_name or not attr:
        raise PluginLoadError(
            f"Input reference must look like 'package.module:ClassName', got {reference!r}"
        )
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise PluginLoadError(f"Cannot import module {module_name!r}: {e}") from e

    target: object = module
    for part in attr.split("."):
        try:
            target = getattr(target, part)
        except AttributeError:
            raise PluginLoadError(
                f"Module {module_name!r} has no attribute {attr!r}"
            ) from None
    if not isinstance(target, type):
        raise PluginLoadError(f"{reference!r} is not a class")
    return target


def instantiate_input(input_cls: type) -> ModularInputProtocol:
    """Create an input instance and check it satisfies the protocol.

    Raises:
        PluginLoadError: If construction fails or the shape is wrong
    """
    try:
        instance = input_cls()
    except TypeError as e:
        raise PluginLoadError(
            f"Cannot instantiate {input_cls.__name__}: {e}"
        ) from e
    if not isinstance(instance, ModularInputProtocol):
        raise PluginLoadError(
            f"{input_cls.__name__} does not implement get_scheme, "
            f"validate_input and stream_events"
        )
    return instance


class PluginManager:
    """Manages modular input discovery, registration, and lookup.

    Usage:
        manager = PluginManager()
        manager.register_builtin_plugins()
        manager.load_entrypoints()

        heartbeat_cls = manager.get_input_by_name("heartbeat")
    """

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(ModularInputSpec)

        # Map name to input class for duplicate detection
        self._inputs: dict[str, type[ModularInputProtocol]] = {}

    def register_builtin_plugins(self) -> None:
        """Register the inputs shipped with modinput."""
        from modinput.plugins.inputs.hookimpl import builtin_inputs

        self.register(builtin_inputs)

    def load_entrypoints(self) -> int:
        """Register plugins advertised under the ``modinput`` entry point group.

        Returns:
            Number of plugins loaded
        """
        count = self._pm.load_setuptools_entrypoints(PROJECT_NAME)
        self._refresh_cache()
        return count

    def register(self, plugin: object) -> None:
        """Register a hook implementer.

        Raises:
            ValueError: If an input name is already registered
        """
        self._pm.register(plugin)
        try:
            self._refresh_cache()
        except ValueError:
            self._pm.unregister(plugin)
            raise

    def _refresh_cache(self) -> None:
        """Rebuild the name cache from every registered hook implementer.

        Raises:
            ValueError: If two input classes share a name
        """
        new_inputs: dict[str, type[ModularInputProtocol]] = {}
        for inputs in self._pm.hook.modinput_get_inputs():
            for cls in inputs:
                name = InputSpec.from_input(cls).name
                if name in new_inputs:
                    raise ValueError(
                        f"Duplicate input name '{name}': "
                        f"already registered by {new_inputs[name].__name__}"
                    )
                new_inputs[name] = cls

        # All validated, update cache
        self._inputs = new_inputs

    def get_inputs(self) -> list[type[ModularInputProtocol]]:
        """Get all registered input classes."""
        return list(self._inputs.values())

    def get_specs(self) -> list[InputSpec]:
        """Get registration records, sorted by name."""
        return sorted(
            (InputSpec.from_input(cls) for cls in self._inputs.values()),
            key=lambda spec: spec.name,
        )

    def get_input_by_name(self, name: str) -> type[ModularInputProtocol] | None:
        """Get input class by name."""
        return self._inputs.get(name)

    def resolve(self, reference: str) -> ModularInputProtocol:
        """Instantiate an input given a registered name or ``module:Class``.

        Raises:
            PluginLoadError: If nothing matches or instantiation fails
        """
        input_cls = self.get_input_by_name(reference)
        if input_cls is None:
            if ":" not in reference:
                available = ", ".join(sorted(self._inputs)) or "none"
                raise PluginLoadError(
                    f"Unknown input {reference!r}. Available: {available}"
                )
            input_cls = load_input_class(reference)
        return instantiate_input(input_cls)
