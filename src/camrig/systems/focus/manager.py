"""Focus system for blending camera targets.

This module provides the FocusManager, which decides where the camera wants
to be. It owns one optional base target (typically the player) and a set of
focal points (a treasure chest, a boss, a doorway) and blends them into a
single target pose every frame.

Key Features:
    - Weighted blending of position, zoom, lens pull and speed
    - Distance gating: a focal point only pulls the camera while the
      reference point is within its max_distance
    - Configurable falloff through a response curve
    - Reference point relative to the base target or to the camera
    - Pluggable blend strategy
    - Focal points loaded from a Tiled object layer

Usage Example:
    focus = FocusManager()
    focus.set_base_target(player_sprite, weight=500)

    chest = FocalPoint(chest_sprite, weight=200, max_distance=300, zoom=1.5)
    focus.add_focal_point(chest)

    # Each frame (the CameraManager does this for you)
    target = focus.evaluate(camera_manager.pan)
    target.position, target.zoom, target.speed

Integration:
    - Registered as the "focus" system, exposed as context.focus_manager
    - Read by CameraManager.update() once per frame
    - Focal points join through FocalPoint.enable(context=context)
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, ClassVar

from pyglet.math import Vec2

from camrig.conf import settings
from camrig.curves import resolve_curve
from camrig.systems.focus.base import FocalPoint, FocusBaseManager
from camrig.systems.focus.blend import resolve_blend
from camrig.systems.registry import SystemRegistry
from camrig.tiled import float_property, shape_bounds
from camrig.types import DistanceMode, Transform

if TYPE_CHECKING:
    import arcade

    from camrig.curves import ResponseCurve
    from camrig.systems.context import CameraContext
    from camrig.systems.focus.base import AggregationResult
    from camrig.systems.focus.blend import BlendStrategy
    from camrig.types import Point, PositionSource

logger = logging.getLogger(__name__)

FOCAL_POINT_LAYER = "FocalPoints"
"""Name of the Tiled object layer focal points are loaded from."""


def parse_distance_mode(mode: DistanceMode | str) -> DistanceMode:
    """Accept a DistanceMode or its lowercase name ("relative_to_base")."""
    if isinstance(mode, DistanceMode):
        return mode
    try:
        return DistanceMode[mode.strip().upper()]
    except KeyError:
        msg = f"Unknown distance mode '{mode}'"
        raise ValueError(msg) from None


@SystemRegistry.register
class FocusManager(FocusBaseManager):
    """Blends a base target and focal points into a camera target.

    Attributes:
        base_target: Focal point that is always included, or None.
        distance_mode: Default reference for distance calculations.
        distance_curve: Falloff curve mapping distance / max_distance to a
            weight multiplier.
        blend: Blend strategy producing the final AggregationResult.
    """

    name: ClassVar[str] = "focus"
    dependencies: ClassVar[list[str]] = []

    def __init__(
        self,
        blend: str | BlendStrategy | None = None,
        distance_curve: str | ResponseCurve | None = None,
        distance_mode: DistanceMode | str | None = None,
    ) -> None:
        """Initialize the focus manager.

        Args:
            blend: Blend strategy name or callable. Defaults to
                settings.FOCUS_BLEND_STRATEGY.
            distance_curve: Falloff curve name or callable. Defaults to
                settings.FOCUS_DISTANCE_CURVE.
            distance_mode: Distance reference. Defaults to
                settings.FOCUS_DISTANCE_MODE.
        """
        self.blend = resolve_blend(settings.FOCUS_BLEND_STRATEGY if blend is None else blend)
        self.distance_curve = resolve_curve(
            settings.FOCUS_DISTANCE_CURVE if distance_curve is None else distance_curve
        )
        self.distance_mode = parse_distance_mode(
            settings.FOCUS_DISTANCE_MODE if distance_mode is None else distance_mode
        )
        self.base_target: FocalPoint | None = None
        # Insertion-ordered identity set
        self._focal_points: dict[FocalPoint, None] = {}
        self._tiled_points: list[FocalPoint] = []

    def setup(self, context: CameraContext) -> None:
        """Initialize the focus system."""
        logger.debug("FocusManager setup complete")

    def cleanup(self) -> None:
        """Drop the base target and every focal point."""
        self.clear()
        self.base_target = None
        logger.debug("FocusManager cleanup complete")

    @property
    def focal_points(self) -> tuple[FocalPoint, ...]:
        """Active focal points, in registration order."""
        return tuple(self._focal_points)

    def set_base_target(
        self,
        source: PositionSource,
        weight: float | None = None,
        zoom: float | None = None,
        pull: float | None = None,
        speed: float | None = None,
    ) -> FocalPoint:
        """Set the target that is always included in the blend.

        Values left as None keep the current base target's values (or the
        defaults if there is no base target yet: settings.FOCUS_BASE_WEIGHT,
        zoom 1, pull 0, speed 1).

        Args:
            source: Position source to always track (usually the player sprite).
            weight: Base weight.
            zoom: Zoom when looking at the base target.
            pull: Lens pull when looking at the base target.
            speed: Camera speed multiplier.

        Returns:
            The base target focal point.
        """
        if self.base_target is None:
            self.base_target = FocalPoint(
                source,
                weight=settings.FOCUS_BASE_WEIGHT,
                max_distance=math.inf,
            )
        base = self.base_target
        base.source = source
        if weight is not None:
            base.weight = weight
        if zoom is not None:
            base.zoom = zoom
        if pull is not None:
            base.pull = pull
        if speed is not None:
            base.speed = speed
        logger.debug(
            "Base target set (weight=%s, zoom=%s, pull=%s, speed=%s)",
            base.weight,
            base.zoom,
            base.pull,
            base.speed,
        )
        return base

    def clear_base_target(self) -> None:
        """Remove the base target."""
        self.base_target = None

    def add_focal_point(self, point: FocalPoint) -> None:
        """Add a focal point to the active set.

        Adding a point that is already active does nothing.
        """
        if point in self._focal_points:
            return
        self._focal_points[point] = None
        logger.debug("Focal point added (%d active)", len(self._focal_points))

    def remove_focal_point(self, point: FocalPoint) -> bool:
        """Remove a focal point from the active set.

        Args:
            point: The focal point to remove (matched by identity).

        Returns:
            True if the point was active, False if it was not (no-op).
        """
        if point not in self._focal_points:
            return False
        del self._focal_points[point]
        if point._manager is self:  # noqa: SLF001
            point._manager = None  # noqa: SLF001
        logger.debug("Focal point removed (%d active)", len(self._focal_points))
        return True

    def remove_focal_points_for(self, source: PositionSource) -> bool:
        """Remove every active focal point tracking ``source``.

        Returns:
            True if any focal point was removed.
        """
        matches = [point for point in self._focal_points if point.source is source]
        for point in matches:
            self.remove_focal_point(point)
        return bool(matches)

    def clear(self) -> None:
        """Remove every focal point (the base target is kept)."""
        for point in self._focal_points:
            if point._manager is self:  # noqa: SLF001
                point._manager = None  # noqa: SLF001
        self._focal_points.clear()
        self._tiled_points.clear()

    def evaluate(
        self,
        camera_position: Point,
        reference_mode: DistanceMode | None = None,
    ) -> AggregationResult:
        """Blend the base target and active focal points into one target.

        Args:
            camera_position: Current camera pan. Used as the distance
                reference in camera-relative mode (or without a base target)
                and as the fallback target when nothing has influence.
            reference_mode: Distance reference for this call. Defaults to
                distance_mode.

        Returns:
            Blended position, zoom, pull and speed.
        """
        mode = self.distance_mode if reference_mode is None else reference_mode
        camera = Vec2(camera_position[0], camera_position[1])

        if mode is DistanceMode.RELATIVE_TO_BASE and self.base_target is not None:
            reference = self.base_target.position
        else:
            reference = camera

        return self.blend(self.base_target, tuple(self._focal_points), reference, camera, self.distance_curve)

    def load_from_tiled(self, tile_map: arcade.TileMap) -> None:
        """Load static focal points from the FocalPoints object layer.

        Each object becomes a focal point at its center. Focal points loaded
        by a previous call are removed first.

        Supported Properties:
            - weight (float): Default 100
            - max_distance (float): Default 256
            - zoom (float): Default 1
            - pull (float): Default 0
            - speed (float): Default 1
            - influence_scale (float): Default 1

        Args:
            tile_map: Loaded TileMap.
        """
        for point in self._tiled_points:
            self.remove_focal_point(point)
        self._tiled_points = []

        layer = tile_map.object_lists.get(FOCAL_POINT_LAYER)
        if not layer:
            logger.debug("No %s layer found in map", FOCAL_POINT_LAYER)
            return

        for tiled_object in layer:
            bounds = shape_bounds(tiled_object.shape)
            if bounds is None:
                logger.warning("Skipping focal point '%s': unsupported shape", tiled_object.name)
                continue

            properties = tiled_object.properties
            max_distance = float_property(properties, "max_distance", 256.0)
            if max_distance <= 0:
                logger.warning("Skipping focal point '%s': max_distance must be positive", tiled_object.name)
                continue

            point = FocalPoint(
                Transform(bounds.x, bounds.y),
                weight=float_property(properties, "weight", 100.0),
                max_distance=max_distance,
                zoom=float_property(properties, "zoom", 1.0),
                pull=float_property(properties, "pull", 0.0),
                speed=float_property(properties, "speed", 1.0),
                influence_scale=float_property(properties, "influence_scale", 1.0),
            )
            self.add_focal_point(point)
            self._tiled_points.append(point)

        logger.info("Loaded %d focal points", len(self._tiled_points))
