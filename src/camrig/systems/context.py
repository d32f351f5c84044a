"""Camera context for wiring camera systems together.

This module provides the CameraContext class, a registry of the camera
systems that make up one camera rig. It replaces a process-wide "main
camera" lookup: whoever needs default wiring (a focal point enabling itself
without naming a focus manager, the driver looking for the wall resolver)
is handed a context explicitly.

Systems are registered by name and, when they declare a role, exposed as a
context attribute of that name:

    context = CameraContext()
    context.register_system("focus", focus_manager)
    context.register_system("shake", shake_manager)

    context.focus_manager is focus_manager  # True
    context.get_system("area")  # None

The focus, area and shake systems never read the context themselves; only
the camera driver and the enable() helpers of focal points and walls do.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from camrig.systems.area.base import AreaBaseManager
    from camrig.systems.base import BaseSystem
    from camrig.systems.camera.base import CameraBaseManager
    from camrig.systems.focus.base import FocusBaseManager
    from camrig.systems.shake.base import ShakeBaseManager


class CameraContext:
    """Registry of the systems making up one camera rig.

    Role attributes default to None so callers can check for a missing
    system without catching AttributeError.

    Attributes:
        focus_manager: The target aggregator, if registered.
        area_manager: The wall resolver, if registered.
        shake_manager: The trauma ledger, if registered.
        camera_manager: The per-frame driver, if registered.
    """

    focus_manager: FocusBaseManager | None
    area_manager: AreaBaseManager | None
    shake_manager: ShakeBaseManager | None
    camera_manager: CameraBaseManager | None

    def __init__(self) -> None:
        """Create an empty context."""
        self.focus_manager = None
        self.area_manager = None
        self.shake_manager = None
        self.camera_manager = None

        # Registry for all pluggable systems (accessed via get_system)
        self._systems: dict[str, BaseSystem] = {}

    def register_system(self, name: str, system: BaseSystem) -> None:
        """Register a system with the context.

        Called by the SystemLoader for each instantiated system. Once
        registered, the system can be accessed by name using get_system()
        and, if it declares a role, as an attribute.

        Args:
            name: Unique identifier for the system (e.g., "focus", "shake").
            system: The system instance to register.
        """
        self._systems[name] = system

        if system.role:
            setattr(self, system.role, system)

    def unregister_system(self, name: str) -> None:
        """Remove a system and clear its role attribute."""
        system = self._systems.pop(name, None)
        if system is not None and system.role and getattr(self, system.role, None) is system:
            setattr(self, system.role, None)

    def get_system(self, name: str) -> BaseSystem | None:
        """Get a registered system by name, or None if not registered."""
        return self._systems.get(name)

    def get_systems(self) -> dict[str, BaseSystem]:
        """Get all registered systems."""
        return self._systems
