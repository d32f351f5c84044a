"""Camrig - a 2D tracking camera rig for Arcade.

This package computes, once per frame, where a 2D camera should look:
- Weighted blending of any number of focal points around a base target
- Axis-aligned camera walls that keep the view out of blocked regions
- Trauma-driven shake from coherent noise
- Frame-rate independent smoothing pushed to an arcade Camera2D

Quick start:
    import arcade

    from camrig import create_camera_rig

    context = create_camera_rig()
    context.camera_manager.set_camera(arcade.camera.Camera2D())
    context.focus_manager.set_base_target(player_sprite)

    # Each frame
    context.camera_manager.update(delta_time, context)

Alternative usage:
    # Access settings in your code
    from camrig.conf import settings

    print(settings.CAMERA_PAN_SPEED)  # 4.0

    # Or customize settings programmatically
    settings.configure(
        CAMERA_PAN_SPEED=6.0,
        SHAKE_MAX_OFFSET=8.0,
    )
"""

__version__ = "0.1.0"

from camrig.conf import settings
from camrig.helpers import create_camera_rig, setup_logging
from camrig.systems import (
    AggregationResult,
    AreaManager,
    BoxWall,
    CameraContext,
    CameraManager,
    FocalPoint,
    FocusManager,
    ShakeManager,
    ShakeValue,
    Wall,
)
from camrig.types import DistanceMode, Transform, TraumaMode, WallMode

__all__ = [
    "AggregationResult",
    "AreaManager",
    "BoxWall",
    "CameraContext",
    "CameraManager",
    "DistanceMode",
    "FocalPoint",
    "FocusManager",
    "ShakeManager",
    "ShakeValue",
    "Transform",
    "TraumaMode",
    "Wall",
    "WallMode",
    "__version__",
    "create_camera_rig",
    "settings",
    "setup_logging",
]
