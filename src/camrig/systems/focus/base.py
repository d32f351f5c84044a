"""Base class for FocusManager and the focal point data types."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pyglet.math import Vec2

from camrig.systems.base import BaseSystem

if TYPE_CHECKING:
    from camrig.systems.context import CameraContext
    from camrig.types import DistanceMode, Point, PositionSource


@dataclass(eq=False)
class FocalPoint:
    """One source of camera interest.

    The position is never stored: it is read from ``source`` every time the
    focus manager evaluates, so a focal point attached to a sprite follows
    the sprite. Focal points compare by identity, so two points with the
    same numbers are still distinct entries.

    Attributes:
        source: Position source (an arcade.Sprite, a Transform, ...).
        weight: Influence strength. Zero or negative weights contribute nothing.
        max_distance: Radius of effect. Points at or beyond this distance
            from the reference position contribute nothing.
        zoom: Target zoom when the camera looks at this point directly.
        pull: Target lens pull when the camera looks at this point directly.
        speed: Camera speed multiplier near this point.
        influence_scale: Runtime dimmer in [0, 1], independent of weight.
    """

    source: PositionSource
    weight: float = 100.0
    max_distance: float = 256.0
    zoom: float = 1.0
    pull: float = 0.0
    speed: float = 1.0
    influence_scale: float = 1.0
    _manager: FocusBaseManager | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate the radius of effect."""
        if self.max_distance <= 0:
            msg = f"Focal point max_distance must be positive, got {self.max_distance}"
            raise ValueError(msg)

    @property
    def position(self) -> Vec2:
        """Current world-space position of the source."""
        x, y = self.source.position
        return Vec2(x, y)

    @property
    def is_active(self) -> bool:
        """Whether this point is registered with a focus manager."""
        return self._manager is not None

    def enable(self, manager: FocusBaseManager | None = None, context: CameraContext | None = None) -> None:
        """Register with a focus manager.

        Args:
            manager: Focus manager to join. Takes precedence over context.
            context: Used for default wiring when no manager is given; the
                point joins ``context.focus_manager``.

        Raises:
            ValueError: If no focus manager can be found.
        """
        target = manager if manager is not None else getattr(context, "focus_manager", None)
        if target is None:
            msg = "FocalPoint.enable() needs a focus manager or a context that has one"
            raise ValueError(msg)
        if self._manager is not None and self._manager is not target:
            self._manager.remove_focal_point(self)
        target.add_focal_point(self)
        self._manager = target

    def disable(self) -> None:
        """Deregister from the focus manager, if any."""
        if self._manager is not None:
            self._manager.remove_focal_point(self)
            self._manager = None


@dataclass(frozen=True)
class AggregationResult:
    """Blended camera target.

    Attributes:
        position: Target pan position.
        zoom: Target zoom.
        pull: Target lens pull.
        speed: Speed multiplier for moving toward the target.
    """

    position: Vec2
    zoom: float = 1.0
    pull: float = 0.0
    speed: float = 1.0


class FocusBaseManager(BaseSystem, ABC):
    """Base class for FocusManager."""

    role = "focus_manager"

    @abstractmethod
    def add_focal_point(self, point: FocalPoint) -> None:
        """Add a focal point to the active set."""
        ...

    @abstractmethod
    def remove_focal_point(self, point: FocalPoint) -> bool:
        """Remove a focal point from the active set (no-op if absent)."""
        ...

    @abstractmethod
    def evaluate(
        self,
        camera_position: Point,
        reference_mode: DistanceMode | None = None,
    ) -> AggregationResult:
        """Blend the base target and active focal points into one target."""
        ...
