"""Shake system for trauma-driven camera shake.

This module provides the ShakeManager, which turns gameplay impulses
(explosions, hits, landings) into a continuous, decaying camera shake.

Trauma Model:
    Trauma is stored per named source as an (x, y) pair. Each source decays
    linearly toward zero every tick. The shake is computed from the sum of
    all sources, normalized by max_trauma and shaped by an intensity curve,
    so a small amount of trauma barely moves the camera while a large
    amount shakes it hard.

    Combination modes for repeated trauma on the same source:
    - KEEP_MAX: keep the higher of the stored and new values per axis
    - ADD: add the new value, clamped to max_trauma
    - REPLACE: store the new value as is

Noise:
    The offset and rotation are read from a coherent noise field along a
    time coordinate that advances by shake_speed per second. The three
    signals use separate channels, (t, 0), (0, t) and (t, t), so they do
    not move in lockstep.

Usage Example:
    shake = ShakeManager()

    # A grenade keeps its own source, so two grenades do not stack
    shake.add_trauma("grenade", 600)

    # A stream of hits stacks on the default source
    shake.add_default_trauma(150)

    # Each frame (the CameraManager does this for you)
    shake.tick(delta_time)
    value = shake.get_shake()

Integration:
    - Registered as the "shake" system, exposed as context.shake_manager
    - Ticked and read by CameraManager.update()
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar

from pyglet.math import Vec2

from camrig.conf import settings
from camrig.curves import resolve_curve
from camrig.noise import CoherentNoise
from camrig.systems.registry import SystemRegistry
from camrig.systems.shake.base import ShakeBaseManager, ShakeValue
from camrig.types import TraumaMode

if TYPE_CHECKING:
    from camrig.curves import ResponseCurve
    from camrig.noise import NoiseSource
    from camrig.systems.context import CameraContext
    from camrig.types import Point

logger = logging.getLogger(__name__)

DEFAULT_TRAUMA_SOURCE = "default"
"""Source name used by add_default_trauma()."""

ROTATION_THRESHOLD = 0.001
"""Rotational intensity below which the shake is zero."""


def parse_trauma_mode(mode: TraumaMode | str) -> TraumaMode:
    """Accept a TraumaMode or its lowercase name ("keep_max", "add", "replace")."""
    if isinstance(mode, TraumaMode):
        return mode
    if isinstance(mode, str):
        try:
            return TraumaMode[mode.strip().upper()]
        except KeyError:
            pass
    msg = f"Unknown trauma mode '{mode}'"
    raise ValueError(msg)


def _trauma_pair(amount: float | Point) -> Point:
    if isinstance(amount, (int, float)):
        amount_x = amount_y = float(amount)
    else:
        amount_x, amount_y = float(amount[0]), float(amount[1])
    if amount_x < 0 or amount_y < 0:
        msg = f"Trauma amounts must not be negative, got ({amount_x}, {amount_y})"
        raise ValueError(msg)
    return (amount_x, amount_y)


@SystemRegistry.register
class ShakeManager(ShakeBaseManager):
    """Accumulates, decays and renders named trauma sources.

    Attributes:
        max_trauma: Total trauma that produces maximum shake.
        shake_speed: Noise time advanced per second.
        decay_speed: Trauma removed from every source per second.
        max_offset: Largest translational shake in world units.
        max_rotation: Largest rotational shake in degrees.
        intensity_curve: Maps normalized trauma to shake intensity.
        noise: Coherent noise sampler.
    """

    name: ClassVar[str] = "shake"
    dependencies: ClassVar[list[str]] = []

    def __init__(
        self,
        max_trauma: float | None = None,
        shake_speed: float | None = None,
        decay_speed: float | None = None,
        max_offset: float | None = None,
        max_rotation: float | None = None,
        intensity_curve: str | ResponseCurve | None = None,
        noise: NoiseSource | None = None,
    ) -> None:
        """Initialize the shake manager.

        Every argument left as None is read from the SHAKE_* settings.

        Raises:
            ValueError: If max_trauma is not positive.
        """
        self.max_trauma = settings.SHAKE_MAX_TRAUMA if max_trauma is None else max_trauma
        if self.max_trauma <= 0:
            msg = f"max_trauma must be positive, got {self.max_trauma}"
            raise ValueError(msg)
        self.shake_speed = settings.SHAKE_SPEED if shake_speed is None else shake_speed
        self.decay_speed = settings.SHAKE_DECAY_SPEED if decay_speed is None else decay_speed
        self.max_offset = settings.SHAKE_MAX_OFFSET if max_offset is None else max_offset
        self.max_rotation = settings.SHAKE_MAX_ROTATION if max_rotation is None else max_rotation
        self.intensity_curve = resolve_curve(
            settings.SHAKE_INTENSITY_CURVE if intensity_curve is None else intensity_curve
        )
        self.noise = CoherentNoise(settings.SHAKE_NOISE_SEED) if noise is None else noise

        self.time = 0.0
        self._sources: dict[str, Point] = {}

    def setup(self, context: CameraContext) -> None:
        """Initialize the shake system."""
        logger.debug("ShakeManager setup complete")

    def cleanup(self) -> None:
        """Drop every trauma source."""
        self.clear()
        logger.debug("ShakeManager cleanup complete")

    def add_trauma(
        self,
        source_name: str,
        amount: float | Point,
        mode: TraumaMode | str = TraumaMode.KEEP_MAX,
    ) -> None:
        """Add trauma under a named source.

        Args:
            source_name: Sources with the same name combine according to mode.
            amount: Trauma for both axes, or an (x, y) pair.
            mode: How the amount combines with the stored value, as a
                TraumaMode or its name.

        Raises:
            ValueError: If either component of amount is negative, or the
                mode is unknown.
        """
        mode = parse_trauma_mode(mode)
        amount_x, amount_y = _trauma_pair(amount)
        stored_x, stored_y = self._sources.get(source_name, (0.0, 0.0))

        if mode is TraumaMode.KEEP_MAX:
            value = (max(stored_x, amount_x), max(stored_y, amount_y))
        elif mode is TraumaMode.ADD:
            value = (
                min(stored_x + amount_x, self.max_trauma),
                min(stored_y + amount_y, self.max_trauma),
            )
        else:
            value = (amount_x, amount_y)

        self._sources[source_name] = value
        logger.debug("Trauma '%s' -> (%s, %s) [%s]", source_name, value[0], value[1], mode.name)

    def add_default_trauma(self, amount: float | Point, mode: TraumaMode | str = TraumaMode.ADD) -> None:
        """Add trauma to the "default" source. Stacks by default."""
        self.add_trauma(DEFAULT_TRAUMA_SOURCE, amount, mode)

    def tick(self, delta_time: float) -> None:
        """Advance the noise time and decay every source linearly toward zero.

        Call exactly once per frame, before get_shake().
        """
        self.time += self.shake_speed * delta_time
        decay = self.decay_speed * delta_time
        for source_name, (value_x, value_y) in self._sources.items():
            if value_x == 0 and value_y == 0:
                continue
            self._sources[source_name] = (max(0.0, value_x - decay), max(0.0, value_y - decay))

    def get_trauma(self, source_name: str) -> Vec2:
        """Stored trauma of a source; (0, 0) for unknown names."""
        value_x, value_y = self._sources.get(source_name, (0.0, 0.0))
        return Vec2(value_x, value_y)

    def total_trauma(self) -> Vec2:
        """Sum of every source's trauma."""
        total_x = sum(value[0] for value in self._sources.values())
        total_y = sum(value[1] for value in self._sources.values())
        return Vec2(total_x, total_y)

    def clear(self) -> None:
        """Remove every trauma source."""
        self._sources.clear()

    def get_shake(self) -> ShakeValue:
        """Current shake from all trauma sources.

        Returns:
            Offset and rotation, both zero while the trauma is negligible.
        """
        total = self.total_trauma()
        normalized_x = min(total.x / self.max_trauma, 1.0)
        normalized_y = min(total.y / self.max_trauma, 1.0)

        intensity_x = self.intensity_curve(normalized_x)
        intensity_y = self.intensity_curve(normalized_y)
        rotational_intensity = self.intensity_curve((normalized_x + normalized_y) / 2)

        if rotational_intensity < ROTATION_THRESHOLD:
            return ShakeValue()

        t = self.time
        offset_x = self.noise.sample(t, 0.0) * intensity_x * self.max_offset
        offset_y = self.noise.sample(0.0, t) * intensity_y * self.max_offset
        rotation = self.noise.sample(t, t) * rotational_intensity * self.max_rotation
        return ShakeValue(Vec2(offset_x, offset_y), rotation)
