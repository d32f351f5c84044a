"""Camera systems for focus blending, wall containment, shake and driving."""

from camrig.systems.area import AreaManager, BoxWall, Wall
from camrig.systems.base import BaseSystem
from camrig.systems.camera import CameraManager
from camrig.systems.context import CameraContext
from camrig.systems.focus import AggregationResult, FocalPoint, FocusManager
from camrig.systems.loader import CircularDependencyError, MissingDependencyError, SystemLoader
from camrig.systems.registry import SystemRegistry
from camrig.systems.shake import ShakeManager, ShakeValue

__all__ = [
    "AggregationResult",
    "AreaManager",
    "BaseSystem",
    "BoxWall",
    "CameraContext",
    "CameraManager",
    "CircularDependencyError",
    "FocalPoint",
    "FocusManager",
    "MissingDependencyError",
    "ShakeManager",
    "ShakeValue",
    "SystemLoader",
    "SystemRegistry",
    "Wall",
]
