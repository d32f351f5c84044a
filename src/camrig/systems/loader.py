"""Loader for installed camera systems.

The SystemLoader imports every module listed in settings.INSTALLED_SYSTEMS
(which registers their systems through @SystemRegistry.register),
instantiates the registered systems that live in those modules in
dependency order, registers them into a CameraContext and calls setup().

Example:
    loader = SystemLoader()
    context = CameraContext()
    loader.load(context)

    # Each frame
    loader.update_all(delta_time, context)
"""

from __future__ import annotations

import importlib
import logging
from typing import TYPE_CHECKING

from camrig.conf import settings
from camrig.systems.registry import SystemRegistry

if TYPE_CHECKING:
    from camrig.systems.base import BaseSystem
    from camrig.systems.context import CameraContext

logger = logging.getLogger(__name__)


class MissingDependencyError(Exception):
    """A system depends on a system that is not installed."""


class CircularDependencyError(Exception):
    """System dependencies form a cycle."""


class SystemLoader:
    """Instantiates and drives the installed camera systems.

    Attributes:
        installed_systems: Module paths whose systems are loaded.
        systems: Loaded system instances, in dependency order.
    """

    def __init__(self, installed_systems: list[str] | None = None) -> None:
        """Create a loader.

        Args:
            installed_systems: Module paths to load. Defaults to
                settings.INSTALLED_SYSTEMS.
        """
        self.installed_systems = list(
            settings.INSTALLED_SYSTEMS if installed_systems is None else installed_systems
        )
        self.systems: list[BaseSystem] = []

    def load(self, context: CameraContext) -> list[BaseSystem]:
        """Import, instantiate, register and set up the installed systems.

        Args:
            context: Context the systems are registered into.

        Returns:
            The system instances in initialization order.

        Raises:
            MissingDependencyError: A dependency is not among the installed systems.
            CircularDependencyError: Dependencies form a cycle.
        """
        for module_path in self.installed_systems:
            importlib.import_module(module_path)

        ordered = self._resolve_order(self._installed_classes())

        self.systems = []
        for system_class in ordered:
            system = system_class()
            context.register_system(system.name, system)
            self.systems.append(system)

        for system in self.systems:
            system.setup(context)

        logger.info("Loaded %d camera systems: %s", len(self.systems), [s.name for s in self.systems])
        return self.systems

    def update_all(self, delta_time: float, context: CameraContext) -> None:
        """Update every loaded system in initialization order."""
        for system in self.systems:
            system.update(delta_time, context)

    def cleanup_all(self) -> None:
        """Clean up every loaded system in reverse initialization order."""
        for system in reversed(self.systems):
            system.cleanup()
        logger.debug("Cleaned up %d camera systems", len(self.systems))

    def _installed_classes(self) -> dict[str, type[BaseSystem]]:
        """Registered systems defined in (or below) an installed module."""
        installed: dict[str, type[BaseSystem]] = {}
        for name, system_class in SystemRegistry.get_all().items():
            module = system_class.__module__
            if any(module == path or module.startswith(f"{path}.") for path in self.installed_systems):
                installed[name] = system_class
        return installed

    def _resolve_order(self, classes: dict[str, type[BaseSystem]]) -> list[type[BaseSystem]]:
        """Depth-first topological sort of the installed systems."""
        ordered: list[type[BaseSystem]] = []
        done: set[str] = set()
        visiting: list[str] = []

        def visit(name: str) -> None:
            if name in done:
                return
            if name in visiting:
                cycle = " -> ".join([*visiting[visiting.index(name) :], name])
                msg = f"Circular system dependency: {cycle}"
                raise CircularDependencyError(msg)

            visiting.append(name)
            for dependency in classes[name].dependencies:
                if dependency not in classes:
                    msg = f"System '{name}' depends on '{dependency}', which is not installed"
                    raise MissingDependencyError(msg)
                visit(dependency)
            for dependency in classes[name].optional_dependencies:
                if dependency in classes:
                    visit(dependency)
                else:
                    logger.debug("System '%s': optional dependency '%s' not installed", name, dependency)
            visiting.pop()

            done.add(name)
            ordered.append(classes[name])

        for name in classes:
            visit(name)
        return ordered
