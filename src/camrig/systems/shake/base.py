"""Base class for ShakeManager and the shake value type."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pyglet.math import Vec2

from camrig.systems.base import BaseSystem
from camrig.types import TraumaMode

if TYPE_CHECKING:
    from camrig.types import Point


@dataclass(frozen=True)
class ShakeValue:
    """Shake to layer on top of the smoothed camera pose.

    Attributes:
        offset: Translational shake in world units.
        rotation: Rotational shake in degrees.
    """

    offset: Vec2 = field(default_factory=lambda: Vec2(0.0, 0.0))
    rotation: float = 0.0

    @property
    def is_zero(self) -> bool:
        """Whether this value leaves the camera untouched."""
        return self.offset.x == 0 and self.offset.y == 0 and self.rotation == 0


class ShakeBaseManager(BaseSystem, ABC):
    """Base class for ShakeManager."""

    role = "shake_manager"

    @abstractmethod
    def add_trauma(
        self,
        source_name: str,
        amount: float | Point,
        mode: TraumaMode | str = TraumaMode.KEEP_MAX,
    ) -> None:
        """Add trauma under a named source."""
        ...

    @abstractmethod
    def tick(self, delta_time: float) -> None:
        """Advance noise time and decay every source."""
        ...

    @abstractmethod
    def get_shake(self) -> ShakeValue:
        """Current shake from all trauma sources."""
        ...
