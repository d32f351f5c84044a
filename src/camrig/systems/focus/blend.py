"""Blend strategies for the focus manager.

A blend strategy turns the base target and the active focal points into a
single AggregationResult. The focus manager owns registration and the
reference position; the strategy owns the arithmetic, so a different
camera feel is a different function rather than a different manager class.

Strategies share one signature:

    strategy(base, points, reference, camera_position, curve) -> AggregationResult
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from pyglet.math import Vec2

from camrig.systems.focus.base import AggregationResult

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from camrig.curves import ResponseCurve
    from camrig.systems.focus.base import FocalPoint

    BlendStrategy = Callable[
        [FocalPoint | None, Iterable[FocalPoint], Vec2, Vec2, ResponseCurve],
        AggregationResult,
    ]


def default_pose(camera_position: Vec2) -> AggregationResult:
    """Hold still: current camera position with neutral zoom, pull and speed."""
    return AggregationResult(position=Vec2(camera_position[0], camera_position[1]), zoom=1.0, pull=0.0, speed=1.0)


def weighted_average(
    base: FocalPoint | None,
    points: Iterable[FocalPoint],
    reference: Vec2,
    camera_position: Vec2,
    curve: ResponseCurve,
) -> AggregationResult:
    """Weighted average of the base target and every in-range focal point.

    The base target contributes ``weight * field`` regardless of distance.
    Each focal point with positive weight whose distance to ``reference`` is
    below its ``max_distance`` contributes with an effective weight of
    ``weight * influence_scale * curve(distance / max_distance)``.

    Args:
        base: Base target, or None.
        points: Active focal points.
        reference: Position used for distance gating and falloff only.
        camera_position: Returned as the target when nothing has influence.
        curve: Falloff curve applied to the normalized distance.

    Returns:
        The blended target, or the default pose if the total weight is zero.
    """
    sum_x = sum_y = zoom_sum = pull_sum = speed_sum = weight_sum = 0.0

    if base is not None:
        base_x, base_y = base.position
        sum_x = base_x * base.weight
        sum_y = base_y * base.weight
        zoom_sum = base.zoom * base.weight
        pull_sum = base.pull * base.weight
        speed_sum = base.speed * base.weight
        weight_sum = base.weight

    ref_x, ref_y = reference[0], reference[1]
    for point in points:
        if point.weight <= 0:
            continue
        x, y = point.position
        dx = x - ref_x
        dy = y - ref_y
        if dx * dx + dy * dy >= point.max_distance * point.max_distance:
            continue

        distance_scale = curve(math.hypot(dx, dy) / point.max_distance)
        weight = point.weight * point.influence_scale * distance_scale
        sum_x += x * weight
        sum_y += y * weight
        zoom_sum += point.zoom * weight
        pull_sum += point.pull * weight
        speed_sum += point.speed * weight
        weight_sum += weight

    if weight_sum == 0:
        return default_pose(camera_position)

    return AggregationResult(
        position=Vec2(sum_x / weight_sum, sum_y / weight_sum),
        zoom=zoom_sum / weight_sum,
        pull=pull_sum / weight_sum,
        speed=speed_sum / weight_sum,
    )


def base_only(
    base: FocalPoint | None,
    points: Iterable[FocalPoint],  # noqa: ARG001
    reference: Vec2,  # noqa: ARG001
    camera_position: Vec2,
    curve: ResponseCurve,  # noqa: ARG001
) -> AggregationResult:
    """Follow the base target alone, ignoring focal points."""
    if base is None or base.weight == 0:
        return default_pose(camera_position)
    return AggregationResult(position=base.position, zoom=base.zoom, pull=base.pull, speed=base.speed)


BLEND_STRATEGIES: dict[str, BlendStrategy] = {
    "weighted_average": weighted_average,
    "base_only": base_only,
}
"""Built-in strategies by name (for settings.FOCUS_BLEND_STRATEGY)."""


def resolve_blend(blend: str | BlendStrategy) -> BlendStrategy:
    """Turn a strategy name or callable into a callable.

    Raises:
        ValueError: If a name is given that is not a built-in strategy.
    """
    if callable(blend):
        return blend
    if blend not in BLEND_STRATEGIES:
        known = ", ".join(sorted(BLEND_STRATEGIES))
        msg = f"Unknown blend strategy '{blend}' (known: {known})"
        raise ValueError(msg)
    return BLEND_STRATEGIES[blend]
