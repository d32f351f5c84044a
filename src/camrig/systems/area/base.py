"""Base class for AreaManager and the camera wall types."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from arcade.types import XYWH, Rect

from camrig.systems.base import BaseSystem
from camrig.types import WallMode

if TYPE_CHECKING:
    from pyglet.math import Vec2

    from camrig.systems.context import CameraContext
    from camrig.types import Point, PositionSource, SizedSource


def source_scale(source: Any) -> Point:  # noqa: ANN401
    """(scale_x, scale_y) of a source, accepting a scalar or a pair ``scale``."""
    scale = getattr(source, "scale", 1.0)
    if isinstance(scale, (int, float)):
        return (float(scale), float(scale))
    scale_x, scale_y = scale
    return (float(scale_x), float(scale_y))


@dataclass(eq=False)
class Wall:
    """An axis-aligned region the camera view may not overlap.

    The world rectangle is recomputed on every query from the source's
    current position and scale, so moving walls work without re-registering.

    Attributes:
        source: Transform the wall is attached to.
        rect: Local rectangle, centered on the source at (0, 0) by default.
        mode: Which axes the wall blocks.
    """

    source: PositionSource
    rect: Rect = XYWH(0.0, 0.0, 1.0, 1.0)
    mode: WallMode = WallMode.SOLID
    _manager: AreaBaseManager | None = field(default=None, init=False, repr=False)

    def world_rect(self) -> Rect:
        """World-space rectangle: local rect scaled, then offset by the source position."""
        x, y = self.source.position
        scale_x, scale_y = source_scale(self.source)
        return XYWH(
            x + self.rect.x * scale_x,
            y + self.rect.y * scale_y,
            abs(self.rect.width * scale_x),
            abs(self.rect.height * scale_y),
        )

    @property
    def is_active(self) -> bool:
        """Whether this wall is registered with an area manager."""
        return self._manager is not None

    def enable(self, manager: AreaBaseManager | None = None, context: CameraContext | None = None) -> None:
        """Register with an area manager.

        Args:
            manager: Area manager to join. Takes precedence over context.
            context: Used for default wiring when no manager is given; the
                wall joins ``context.area_manager``.

        Raises:
            ValueError: If no area manager can be found.
        """
        target = manager if manager is not None else getattr(context, "area_manager", None)
        if target is None:
            msg = "Wall.enable() needs an area manager or a context that has one"
            raise ValueError(msg)
        if self._manager is not None and self._manager is not target:
            self._manager.remove_wall(self)
        target.add_wall(self)
        self._manager = target

    def disable(self) -> None:
        """Deregister from the area manager, if any."""
        if self._manager is not None:
            self._manager.remove_wall(self)
            self._manager = None


@dataclass(eq=False)
class BoxWall(Wall):
    """A wall sized by its source's box, such as an arcade.Sprite.

    ``rect`` is relative to the box: the default unit rect covers the whole
    box, ``XYWH(0.25, 0, 0.5, 1)`` covers its right half. The source's
    width and height already include its scale.
    """

    source: SizedSource

    def world_rect(self) -> Rect:
        """World-space rectangle derived from the source box."""
        x, y = self.source.position
        width, height = self.source.width, self.source.height
        return XYWH(
            x + width * self.rect.x,
            y + height * self.rect.y,
            abs(width * self.rect.width),
            abs(height * self.rect.height),
        )


class AreaBaseManager(BaseSystem, ABC):
    """Base class for AreaManager."""

    role = "area_manager"

    @abstractmethod
    def add_wall(self, wall: Wall) -> None:
        """Add a wall to the active set."""
        ...

    @abstractmethod
    def remove_wall(self, wall: Wall) -> bool:
        """Remove a wall from the active set (no-op if absent)."""
        ...

    @abstractmethod
    def evaluate(self, candidate_center: Point, camera_size: Point) -> Vec2:
        """Offset keeping the camera rectangle out of the active walls."""
        ...
