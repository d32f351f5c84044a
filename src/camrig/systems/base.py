"""Base class for pluggable camera systems.

This module provides the abstract base class that all camera systems must
inherit from. Each system handles one aspect of the camera (focus blending,
wall containment, shake, the driver itself) and is driven once per frame.

Example:
    Creating a custom system::

        from camrig.systems.base import BaseSystem
        from camrig.systems.registry import SystemRegistry

        @SystemRegistry.register
        class LetterboxManager(BaseSystem):
            name = "letterbox"
            role = "letterbox_manager"
            dependencies = ["camera"]

            def setup(self, context):
                self.bar_height = 0.0

            def update(self, delta_time, context):
                zoom = context.camera_manager.zoom
                self.bar_height = max(0.0, zoom - 1.0) * 40
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from camrig.systems.context import CameraContext


class BaseSystem(ABC):
    """Base class for all pluggable camera systems.

    To create a custom system, subclass BaseSystem and implement setup().
    Use the @SystemRegistry.register decorator to make the system available
    for loading.

    Attributes:
        name: Unique identifier for the system. Must be defined as a class variable.
        role: Attribute name under which the context exposes the system
            (e.g. "focus_manager"). Empty string for no role attribute.
        dependencies: List of system names this system depends on. Systems are
            initialized in dependency order, ensuring dependencies are available
            when setup() is called.
        optional_dependencies: System names to initialize before this one when
            they are installed. Missing ones are skipped.
    """

    # System identifier (must be unique across all systems)
    name: ClassVar[str]

    role: ClassVar[str] = ""

    # Other systems this one depends on (by name)
    # Systems are initialized in dependency order
    dependencies: ClassVar[list[str]] = []

    optional_dependencies: ClassVar[list[str]] = []

    @abstractmethod
    def setup(self, context: CameraContext) -> None:
        """Initialize the system once all systems are registered.

        Args:
            context: Camera context providing access to other systems.
        """

    def update(self, delta_time: float, context: CameraContext) -> None:  # noqa: B027
        """Called every frame.

        Args:
            delta_time: Time elapsed since the last frame, in seconds.
            context: Camera context providing access to other systems.
        """

    def cleanup(self) -> None:  # noqa: B027
        """Called when the scene unloads or the game exits.

        Override this method to drop references to sprites, walls and
        other scene objects.
        """
