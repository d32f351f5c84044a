"""Base class for CameraManager."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from camrig.systems.base import BaseSystem

if TYPE_CHECKING:
    import arcade
    from pyglet.math import Vec2

    from camrig.systems.context import CameraContext


class CameraBaseManager(BaseSystem, ABC):
    """Base class for CameraManager."""

    role = "camera_manager"

    @property
    @abstractmethod
    def view_size(self) -> Vec2:
        """Size of the camera view rectangle in world units."""
        ...

    @abstractmethod
    def set_camera(self, camera: arcade.camera.Camera2D | None) -> None:
        """Set the camera the render pose is pushed to."""
        ...

    @abstractmethod
    def snap_to_target(self, context: CameraContext) -> None:
        """Jump straight to the current target without smoothing."""
        ...

    @abstractmethod
    def use(self) -> None:
        """Activate the managed camera for rendering."""
        ...
