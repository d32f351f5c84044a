"""Camera driver that composes focus, walls and shake.

This module provides the CameraManager, the per-frame orchestrator of a
camera rig. It owns the camera's stored pose (pan, zoom and lens pull) and
moves it toward the target produced by the other systems.

Frame Order:
    1. Ask the focus manager where the camera wants to be
    2. Ask the area manager how far that target must move to stay out of walls
    3. Smooth pan, zoom and pull toward the target, frame-rate independently:
       ``factor = 1 - exp(-speed * delta_time)``
    4. Tick the shake manager and read its shake
    5. Layer the shake on top of the smoothed pan for the render pose
    6. Push the render pose to the arcade Camera2D

    Shake is never written back into pan, so the smoothed motion stays
    predictable while the rendered camera jitters. Any missing system is
    skipped: without a focus manager the camera holds its pose, without an
    area manager there are no walls, without a shake manager there is no
    shake.

Rig State:
    - pan: smoothed camera center in world units
    - zoom: 0.25 to 4; the view rectangle is world_height / zoom tall
    - pull: -1 to 1; trades field of view for distance (see camrig.projection)
    - world_height: view height at zoom 1
    - aspect: viewport width / height

Usage Example:
    context = create_camera_rig()
    camera_manager = context.camera_manager
    camera_manager.set_camera(arcade.camera.Camera2D())
    context.focus_manager.set_base_target(player_sprite)

    camera_manager.snap_to_target(context)  # after a scene load

    # Each frame
    camera_manager.update(delta_time, context)

    # Before drawing world objects
    camera_manager.use()

Integration:
    - Registered as the "camera" system, exposed as context.camera_manager
    - Updated every frame by SystemLoader.update_all()
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, ClassVar

from arcade.math import clamp
from arcade.types import XYWH
from pyglet.math import Vec2

from camrig.conf import settings
from camrig.projection import pull_distance, world_height_to_fov, world_height_to_ortho_size
from camrig.systems.camera.base import CameraBaseManager
from camrig.systems.registry import SystemRegistry
from camrig.systems.shake.base import ShakeValue

if TYPE_CHECKING:
    import arcade
    from arcade.types import Rect

    from camrig.systems.context import CameraContext
    from camrig.types import Point

logger = logging.getLogger(__name__)

MIN_ZOOM = 0.25
MAX_ZOOM = 4.0


def smoothing_factor(speed: float, delta_time: float) -> float:
    """Fraction of the remaining distance to cover this frame.

    ``1 - exp(-speed * delta_time)`` converges at the same rate regardless
    of frame rate. Clamped to [0, 1].
    """
    return clamp(1.0 - math.exp(-speed * delta_time), 0.0, 1.0)


@SystemRegistry.register
class CameraManager(CameraBaseManager):
    """Drives the camera pose toward the blended, wall-corrected target.

    Attributes:
        camera: The arcade Camera2D the render pose is pushed to, or None.
        pan_speed: Base asymptotic speed for panning (per second).
        zoom_speed: Base asymptotic speed for zoom and pull (per second).
        base_distance: Camera distance at pull 0 and zoom 1.
        render_position: Last render position (pan plus shake).
        render_rotation: Last render rotation in degrees.
    """

    name: ClassVar[str] = "camera"
    optional_dependencies: ClassVar[list[str]] = ["focus", "area", "shake"]

    def __init__(
        self,
        camera: arcade.camera.Camera2D | None = None,
        pan_speed: float | None = None,
        zoom_speed: float | None = None,
        world_height: float | None = None,
        base_distance: float | None = None,
    ) -> None:
        """Initialize the camera manager.

        Every argument left as None is read from the CAMERA_* settings; the
        aspect ratio comes from SCREEN_WIDTH and SCREEN_HEIGHT.

        Args:
            camera: Camera to push the render pose to. Can be set later via
                set_camera().
            pan_speed: Base panning speed.
            zoom_speed: Base zoom and pull speed.
            world_height: View height in world units at zoom 1.
            base_distance: Camera distance at pull 0 and zoom 1.
        """
        self.camera: arcade.camera.Camera2D | None = camera
        self.pan_speed = settings.CAMERA_PAN_SPEED if pan_speed is None else pan_speed
        self.zoom_speed = settings.CAMERA_ZOOM_SPEED if zoom_speed is None else zoom_speed
        self.base_distance = settings.CAMERA_BASE_DISTANCE if base_distance is None else base_distance
        self.world_height = settings.CAMERA_WORLD_HEIGHT if world_height is None else world_height

        self._viewport: Point = (float(settings.SCREEN_WIDTH), float(settings.SCREEN_HEIGHT))
        self._pan = Vec2(0.0, 0.0)
        self._zoom = 1.0
        self._pull = 0.0

        self.render_position = Vec2(0.0, 0.0)
        self.render_rotation = 0.0

    def setup(self, context: CameraContext) -> None:
        """Initialize the camera system."""
        logger.debug("CameraManager setup complete")

    def cleanup(self) -> None:
        """Release the managed camera."""
        self.camera = None
        logger.debug("CameraManager cleanup complete")

    @property
    def pan(self) -> Vec2:
        """Smoothed camera center, without shake."""
        return self._pan

    @pan.setter
    def pan(self, value: Point) -> None:
        self._pan = Vec2(value[0], value[1])

    @property
    def zoom(self) -> float:
        """Zoom scale, clamped to [0.25, 4]."""
        return self._zoom

    @zoom.setter
    def zoom(self, value: float) -> None:
        self._zoom = clamp(value, MIN_ZOOM, MAX_ZOOM)

    @property
    def pull(self) -> float:
        """Lens pull, clamped to [-1, 1]."""
        return self._pull

    @pull.setter
    def pull(self, value: float) -> None:
        self._pull = clamp(value, -1.0, 1.0)

    @property
    def world_height(self) -> float:
        """View height in world units at zoom 1."""
        return self._world_height

    @world_height.setter
    def world_height(self, value: float) -> None:
        if value <= 0:
            msg = f"world_height must be positive, got {value}"
            raise ValueError(msg)
        self._world_height = value

    @property
    def aspect(self) -> float:
        """Viewport width divided by height."""
        width, height = self._viewport
        return width / height

    def set_viewport(self, width: float, height: float) -> None:
        """Set the viewport size in pixels (call on window resize).

        Raises:
            ValueError: If either dimension is not positive.
        """
        if width <= 0 or height <= 0:
            msg = f"Viewport size must be positive, got {width}x{height}"
            raise ValueError(msg)
        self._viewport = (float(width), float(height))

    @property
    def view_size(self) -> Vec2:
        """Size of the camera view rectangle in world units."""
        height = self.world_height / self.zoom
        return Vec2(self.aspect * height, height)

    def world_rect(self) -> Rect:
        """Camera view rectangle in world space, centered on pan."""
        width, height = self.view_size
        return XYWH(self._pan.x, self._pan.y, width, height)

    @property
    def distance(self) -> float:
        """Distance of the camera from the XY plane (pull and zoom applied)."""
        return pull_distance(self.base_distance, self.pull) / self.zoom

    @property
    def field_of_view(self) -> float:
        """Vertical field of view in degrees for a perspective projection."""
        return world_height_to_fov(self.world_height, pull_distance(self.base_distance, self.pull))

    @property
    def orthographic_size(self) -> float:
        """Orthographic half-height showing the current view rectangle."""
        return world_height_to_ortho_size(self.view_size.y)

    @property
    def render_zoom(self) -> float:
        """Camera2D zoom that fits the view rectangle into the viewport."""
        return self._viewport[1] / self.view_size.y

    def set_camera(self, camera: arcade.camera.Camera2D | None) -> None:
        """Set the camera to manage.

        Args:
            camera: The arcade Camera2D to push the render pose to, or None.
        """
        self.camera = camera
        if camera is not None:
            self._push()

    def update(self, delta_time: float, context: CameraContext) -> None:
        """Move the camera one frame toward its target.

        Called automatically every frame by SystemLoader.

        Args:
            delta_time: Time since last update, in seconds.
            context: Camera context providing the focus, area and shake systems.
        """
        target, zoom, pull, speed = self._target(context)

        pan_factor = smoothing_factor(self.pan_speed * speed, delta_time)
        self._pan = self._pan + (target - self._pan) * pan_factor
        if zoom is not None and pull is not None:
            zoom_factor = smoothing_factor(self.zoom_speed * speed, delta_time)
            self.zoom = self._zoom + (zoom - self._zoom) * zoom_factor
            self.pull = self._pull + (pull - self._pull) * zoom_factor

        shake = ShakeValue()
        if context.shake_manager is not None:
            context.shake_manager.tick(delta_time)
            shake = context.shake_manager.get_shake()
        self._apply_shake(shake)

    def snap_to_target(self, context: CameraContext) -> None:
        """Jump straight to the current target (scene loads, teleports).

        The shake is read but not ticked.
        """
        target, zoom, pull, _ = self._target(context)
        self._pan = target
        if zoom is not None and pull is not None:
            self.zoom = zoom
            self.pull = pull

        shake = ShakeValue()
        if context.shake_manager is not None:
            shake = context.shake_manager.get_shake()
        self._apply_shake(shake)
        logger.debug("Camera snapped to (%.1f, %.1f)", self._pan.x, self._pan.y)

    def use(self) -> None:
        """Activate the managed camera for rendering.

        Must be called before drawing world objects.
        """
        if self.camera is not None:
            self.camera.use()

    def _target(self, context: CameraContext) -> tuple[Vec2, float | None, float | None, float]:
        """Wall-corrected target position, zoom, pull and speed.

        Zoom and pull are None without a focus manager, which holds them.
        """
        target = self._pan
        zoom = pull = None
        speed = 1.0

        if context.focus_manager is not None:
            result = context.focus_manager.evaluate(self._pan)
            target = result.position
            zoom = result.zoom
            pull = result.pull
            speed = result.speed

        if context.area_manager is not None:
            target = target + context.area_manager.evaluate(target, self.view_size)

        return target, zoom, pull, speed

    def _apply_shake(self, shake: ShakeValue) -> None:
        self.render_position = self._pan + shake.offset
        self.render_rotation = shake.rotation
        self._push()

    def _push(self) -> None:
        if self.camera is None:
            return
        self.camera.position = (self.render_position.x, self.render_position.y)
        self.camera.zoom = self.render_zoom
        self.camera.angle = self.render_rotation
