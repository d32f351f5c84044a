"""Custom types and enumerations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Protocol

Point = tuple[float, float]


class PositionSource(Protocol):
    """Anything with a world-space position (an arcade.Sprite, a Transform, ...)."""

    @property
    def position(self) -> Point: ...


class SizedSource(PositionSource, Protocol):
    """A position source with a world-space size, such as an arcade.Sprite."""

    @property
    def width(self) -> float: ...

    @property
    def height(self) -> float: ...


@dataclass
class Transform:
    """Minimal external spatial transform.

    Used for focal points and walls that do not follow a sprite. The camera
    systems never copy its values; they read ``position`` and the scale every
    evaluation, so moving or scaling the transform takes effect on the next
    frame.

    Attributes:
        x: World-space x coordinate.
        y: World-space y coordinate.
        scale_x: Horizontal scale applied to wall rectangles.
        scale_y: Vertical scale applied to wall rectangles.
    """

    x: float = 0.0
    y: float = 0.0
    scale_x: float = 1.0
    scale_y: float = 1.0

    @property
    def position(self) -> Point:
        """Current (x, y) position."""
        return (self.x, self.y)

    @position.setter
    def position(self, value: Point) -> None:
        self.x, self.y = value

    @property
    def scale(self) -> Point:
        """Current (scale_x, scale_y) pair."""
        return (self.scale_x, self.scale_y)


class TraumaMode(Enum):
    """How new trauma combines with the stored value of a source.

    KEEP_MAX keeps the higher of the existing and new values per axis.
    ADD adds the new value and clamps to the maximum trauma.
    REPLACE stores the new value as is.
    """

    KEEP_MAX = auto()
    ADD = auto()
    REPLACE = auto()


class WallMode(Enum):
    """Axes a camera wall blocks."""

    SOLID = auto()
    HORIZONTAL = auto()
    VERTICAL = auto()
    NONE = auto()


class DistanceMode(Enum):
    """Reference point for focal point distance calculations.

    Camera-relative distances can get motion stuck on one focal point.
    """

    RELATIVE_TO_BASE = auto()
    RELATIVE_TO_CAMERA = auto()
