"""Response curves for distance falloff and shake intensity.

A response curve is any callable mapping a normalized value in [0, 1] to a
scalar. Focal point falloff and trauma intensity are both shaped by one, so
the feel of the camera is configured by picking a curve rather than by
changing code.

Built-in curves register themselves by name so settings can refer to them
as strings:

    from camrig.curves import resolve_curve

    falloff = resolve_curve("smooth_falloff")
    falloff(0.5)  # 0.5

    # Custom curves register the same way
    @CurveRegistry.register("cubic")
    def cubic(t: float) -> float:
        return t * t * t
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import ClassVar

from arcade.math import clamp

ResponseCurve = Callable[[float], float]
"""Maps a normalized value in [0, 1] to a scalar."""

logger = logging.getLogger(__name__)


class CurveRegistry:
    """Central registry of named response curves.

    Class Attributes:
        _curves: Dictionary mapping curve names to callables.
    """

    _curves: ClassVar[dict[str, ResponseCurve]] = {}

    @classmethod
    def register(cls, name: str) -> Callable[[ResponseCurve], ResponseCurve]:
        """Register a curve under a name.

        Used as a decorator on plain functions.

        Args:
            name: Name the curve is looked up by.

        Returns:
            Decorator returning the function unchanged.

        Raises:
            ValueError: If the name is empty.
        """
        if not name:
            msg = "Response curves must be registered with a non-empty name"
            raise ValueError(msg)

        def decorator(curve: ResponseCurve) -> ResponseCurve:
            if name in cls._curves:
                logger.warning("Curve '%s' is being re-registered", name)
            cls._curves[name] = curve
            logger.debug("Registered response curve: %s", name)
            return curve

        return decorator

    @classmethod
    def get(cls, name: str) -> ResponseCurve | None:
        """Get a registered curve by name."""
        return cls._curves.get(name)

    @classmethod
    def get_all(cls) -> dict[str, ResponseCurve]:
        """Get all registered curves."""
        return cls._curves.copy()

    @classmethod
    def is_registered(cls, name: str) -> bool:
        """Check if a curve is registered."""
        return name in cls._curves


def resolve_curve(curve: str | ResponseCurve) -> ResponseCurve:
    """Turn a curve name or callable into a callable.

    Args:
        curve: Registered curve name, or a callable used as is.

    Returns:
        The response curve callable.

    Raises:
        ValueError: If a name is given that is not registered.
    """
    if callable(curve):
        return curve
    resolved = CurveRegistry.get(curve)
    if resolved is None:
        known = ", ".join(sorted(CurveRegistry.get_all()))
        msg = f"Unknown response curve '{curve}' (known: {known})"
        raise ValueError(msg)
    return resolved


@CurveRegistry.register("linear")
def linear(t: float) -> float:
    """Identity on [0, 1]."""
    return clamp(t, 0.0, 1.0)


@CurveRegistry.register("linear_falloff")
def linear_falloff(t: float) -> float:
    """Full influence at 0, none at 1."""
    return 1.0 - clamp(t, 0.0, 1.0)


@CurveRegistry.register("quadratic")
def quadratic(t: float) -> float:
    """Slow start; the usual trauma-to-shake mapping."""
    t = clamp(t, 0.0, 1.0)
    return t * t


@CurveRegistry.register("ease_out")
def ease_out(t: float) -> float:
    """Fast start, slow finish."""
    t = 1.0 - clamp(t, 0.0, 1.0)
    return 1.0 - t * t


@CurveRegistry.register("smoothstep")
def smoothstep(t: float) -> float:
    """Hermite ease in and out."""
    t = clamp(t, 0.0, 1.0)
    return t * t * (3.0 - 2.0 * t)


@CurveRegistry.register("smooth_falloff")
def smooth_falloff(t: float) -> float:
    """Full influence near the point, easing out to none at the edge."""
    return 1.0 - smoothstep(t)


@CurveRegistry.register("flat")
def flat(t: float) -> float:  # noqa: ARG001
    """Constant 1: influence does not depend on the input."""
    return 1.0
