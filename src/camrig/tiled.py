"""Helpers for reading camera objects out of Tiled object layers.

arcade's TileMap already converts object shapes to world coordinates: a
point object's shape is an (x, y) pair, and rectangles and polygons are
lists of (x, y) vertices.
"""

from __future__ import annotations

import logging
from typing import Any

from arcade.types import LRBT, Rect

logger = logging.getLogger(__name__)


def shape_bounds(shape: Any) -> Rect | None:  # noqa: ANN401
    """Axis-aligned bounds of a Tiled object shape.

    Args:
        shape: A point ``(x, y)`` or a sequence of points.

    Returns:
        The bounding rectangle (zero-sized for points), or None if the shape
        is empty or not made of numbers.
    """
    if not isinstance(shape, (list, tuple)) or not shape:
        return None

    if len(shape) >= 2 and all(isinstance(value, (int, float)) for value in shape[:2]):
        x, y = float(shape[0]), float(shape[1])
        return LRBT(x, x, y, y)

    xs: list[float] = []
    ys: list[float] = []
    for point in shape:
        if not isinstance(point, (list, tuple)) or len(point) < 2:
            return None
        if not all(isinstance(value, (int, float)) for value in point[:2]):
            return None
        xs.append(float(point[0]))
        ys.append(float(point[1]))

    return LRBT(min(xs), max(xs), min(ys), max(ys))


def float_property(properties: dict[str, Any] | None, key: str, default: float) -> float:
    """Read a numeric Tiled custom property, falling back on bad values."""
    if not properties or key not in properties:
        return default
    value = properties[key]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        logger.warning("Invalid '%s' property value %r, using %s", key, value, default)
        return default
    return float(value)
