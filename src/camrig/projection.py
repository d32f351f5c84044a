"""Camera projection helpers.

Stateless conversions between a desired world-space view height and the
projection parameters that produce it. The CameraManager uses them to
expose ``field_of_view``, ``orthographic_size`` and ``distance`` for
renderers that draw with a perspective projection; arcade's Camera2D only
needs the zoom.

Pull trades field of view for distance: a negative pull moves the camera
back (up to 4x the base distance) and narrows the field of view, a positive
pull moves it in (down to 0.25x) and widens it, while the view height on the
XY plane stays the same.
"""

import math

from arcade.math import clamp, lerp

PULL_OUT_FACTOR = 4.0
"""Distance scale factor at pull -1."""

PULL_IN_FACTOR = 0.25
"""Distance scale factor at pull 1."""


def world_height_to_fov(height: float, distance: float) -> float:
    """Vertical field of view (degrees) that shows ``height`` at ``distance``.

    Args:
        height: View height on the XY plane in world units.
        distance: Distance from the camera to the XY plane.

    Returns:
        Field of view in degrees.
    """
    half_height = abs(height) / 2
    return math.degrees(math.atan2(half_height, abs(distance))) * 2


def world_height_to_ortho_size(height: float) -> float:
    """Orthographic half-size that shows ``height`` world units."""
    return height / 2


def pull_distance(base_distance: float, pull: float) -> float:
    """Camera distance for a pull value in [-1, 1].

    Args:
        base_distance: Distance at pull 0.
        pull: Lens pull; clamped to [-1, 1].

    Returns:
        The pulled distance.
    """
    pull = clamp(pull, -1.0, 1.0)
    factor = PULL_OUT_FACTOR if pull < 0 else PULL_IN_FACTOR
    return base_distance * lerp(1.0, factor, abs(pull))
