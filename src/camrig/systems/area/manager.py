"""Area system for keeping the camera view out of walls.

This module provides the AreaManager, which gives the camera collision-like
behavior against axis-aligned walls. Given where the camera wants to be and
the size of its view rectangle, it returns the offset that pushes the view
out of every wall it overlaps.

Wall Modes:
    - SOLID: pushes out along the axis with the smaller overlap
    - HORIZONTAL: always pushes left or right
    - VERTICAL: always pushes up or down
    - NONE: ignored (a wall can be switched off without deregistering it)

Resolution is sequential: walls are visited in registration order and each
wall sees the camera rectangle already moved by the corrections of the
walls before it. Deeply overlapping walls therefore resolve approximately
and order-dependently; there is no simultaneous solve.

Usage Example:
    area = AreaManager()
    area.add_wall(Wall(Transform(0, -400), XYWH(0, 0, 4000, 200)))
    area.add_walls_from_sprite_list(scene_walls, WallMode.SOLID)

    offset = area.evaluate(target_position, camera_manager.view_size)
    target = target_position + offset

Integration:
    - Registered as the "area" system, exposed as context.area_manager
    - Read by CameraManager.update() after the focus target is known
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar

from arcade.types import XYWH
from pyglet.math import Vec2

from camrig.systems.area.base import AreaBaseManager, BoxWall, Wall
from camrig.systems.registry import SystemRegistry
from camrig.tiled import shape_bounds
from camrig.types import Transform, WallMode

if TYPE_CHECKING:
    import arcade

    from camrig.systems.context import CameraContext
    from camrig.types import Point

logger = logging.getLogger(__name__)

WALL_LAYER = "CameraWalls"
"""Name of the Tiled object layer camera walls are loaded from."""


def _parse_wall_mode(value: object) -> WallMode:
    if isinstance(value, str):
        try:
            return WallMode[value.strip().upper()]
        except KeyError:
            pass
    logger.warning("Invalid camera wall mode %r, using 'solid'", value)
    return WallMode.SOLID


@SystemRegistry.register
class AreaManager(AreaBaseManager):
    """Resolves camera view overlap against a set of axis-aligned walls."""

    name: ClassVar[str] = "area"
    dependencies: ClassVar[list[str]] = []

    def __init__(self) -> None:
        """Initialize the area manager with no walls."""
        # Insertion-ordered identity set; order decides conflict resolution
        self._walls: dict[Wall, None] = {}
        self._tiled_walls: list[Wall] = []

    def setup(self, context: CameraContext) -> None:
        """Initialize the area system."""
        logger.debug("AreaManager setup complete")

    def cleanup(self) -> None:
        """Drop every wall."""
        self.clear()
        logger.debug("AreaManager cleanup complete")

    @property
    def walls(self) -> tuple[Wall, ...]:
        """Active walls, in registration order."""
        return tuple(self._walls)

    def add_wall(self, wall: Wall) -> None:
        """Add a wall to the active set. Adding an active wall does nothing."""
        if wall in self._walls:
            return
        self._walls[wall] = None
        logger.debug("Camera wall added (%d active)", len(self._walls))

    def remove_wall(self, wall: Wall) -> bool:
        """Remove a wall from the active set.

        Args:
            wall: The wall to remove (matched by identity).

        Returns:
            True if the wall was active, False if it was not (no-op).
        """
        if wall not in self._walls:
            return False
        del self._walls[wall]
        if wall._manager is self:  # noqa: SLF001
            wall._manager = None  # noqa: SLF001
        logger.debug("Camera wall removed (%d active)", len(self._walls))
        return True

    def add_walls_from_sprite_list(
        self,
        sprites: arcade.SpriteList,
        mode: WallMode = WallMode.SOLID,
    ) -> list[BoxWall]:
        """Create and register a BoxWall for every sprite in a sprite list.

        Args:
            sprites: Sprites whose boxes become walls (e.g. the scene's wall list).
            mode: Mode for every created wall.

        Returns:
            The created walls, in sprite order.
        """
        walls = [BoxWall(sprite, mode=mode) for sprite in sprites]
        for wall in walls:
            self.add_wall(wall)
        logger.debug("Added %d camera walls from sprite list", len(walls))
        return walls

    def clear(self) -> None:
        """Remove every wall."""
        for wall in self._walls:
            if wall._manager is self:  # noqa: SLF001
                wall._manager = None  # noqa: SLF001
        self._walls.clear()
        self._tiled_walls.clear()

    def evaluate(self, candidate_center: Point, camera_size: Point) -> Vec2:
        """Get the offset that keeps the camera rectangle out of active walls.

        For each wall (in registration order) the camera rectangle centered
        at ``candidate_center + offset`` is tested. On overlap, the corrected
        axis is pushed until the camera edge is flush with the wall edge on
        the camera's side of the wall's center.

        Args:
            candidate_center: Center the camera wants to move to.
            camera_size: (width, height) of the camera view rectangle.

        Returns:
            Offset to add to candidate_center; (0, 0) when nothing overlaps.
        """
        center_x, center_y = candidate_center[0], candidate_center[1]
        width, height = camera_size[0], camera_size[1]
        offset_x = offset_y = 0.0

        for wall in self._walls:
            if wall.mode is WallMode.NONE:
                continue

            # Take current offset into account
            camera_x = center_x + offset_x
            camera_y = center_y + offset_y
            left = camera_x - width / 2
            right = camera_x + width / 2
            bottom = camera_y - height / 2
            top = camera_y + height / 2

            wall_rect = wall.world_rect()
            overlap_x = width - max(0.0, right - wall_rect.right) - max(0.0, wall_rect.left - left)
            overlap_y = height - max(0.0, top - wall_rect.top) - max(0.0, wall_rect.bottom - bottom)
            overlap_x = max(0.0, overlap_x)
            overlap_y = max(0.0, overlap_y)

            if overlap_x == 0 or overlap_y == 0:
                continue

            # Wide X overlap -> Y correction, wide Y overlap -> X correction
            correct_vertical = wall.mode is WallMode.VERTICAL or (
                wall.mode is WallMode.SOLID and overlap_x > overlap_y
            )
            correct_horizontal = wall.mode is WallMode.HORIZONTAL or (
                wall.mode is WallMode.SOLID and not correct_vertical
            )

            if correct_vertical:
                if camera_y > wall_rect.y:
                    offset_y += wall_rect.top - bottom
                else:
                    offset_y += wall_rect.bottom - top

            if correct_horizontal:
                if camera_x > wall_rect.x:
                    offset_x += wall_rect.right - left
                else:
                    offset_x += wall_rect.left - right

        return Vec2(offset_x, offset_y)

    def load_from_tiled(self, tile_map: arcade.TileMap) -> None:
        """Load camera walls from the CameraWalls object layer.

        Each rectangle or polygon object becomes a wall covering its bounding
        box. Walls loaded by a previous call are removed first.

        Supported Properties:
            - mode (string): "solid", "horizontal", "vertical" or "none".
              Default: "solid"

        Args:
            tile_map: Loaded TileMap.
        """
        for wall in self._tiled_walls:
            self.remove_wall(wall)
        self._tiled_walls = []

        layer = tile_map.object_lists.get(WALL_LAYER)
        if not layer:
            logger.debug("No %s layer found in map", WALL_LAYER)
            return

        for tiled_object in layer:
            bounds = shape_bounds(tiled_object.shape)
            if bounds is None or bounds.width == 0 or bounds.height == 0:
                logger.warning("Skipping camera wall '%s': unsupported shape", tiled_object.name)
                continue

            mode = _parse_wall_mode((tiled_object.properties or {}).get("mode", "solid"))
            wall = Wall(Transform(bounds.x, bounds.y), XYWH(0.0, 0.0, bounds.width, bounds.height), mode)
            self.add_wall(wall)
            self._tiled_walls.append(wall)

        logger.info("Loaded %d camera walls", len(self._tiled_walls))
