"""Area system for keeping the camera view out of walls.

This package provides:
- Wall: An axis-aligned region attached to a transform
- BoxWall: A wall sized by a sprite's box
- AreaManager: Resolves the offset that moves the camera view out of walls
"""

from camrig.systems.area.base import AreaBaseManager, BoxWall, Wall, source_scale
from camrig.systems.area.manager import AreaManager

__all__ = ["AreaBaseManager", "AreaManager", "BoxWall", "Wall", "source_scale"]
