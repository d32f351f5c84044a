"""Camera system for driving the camera pose.

This package provides:
- CameraManager: Smooths the camera toward the focus target, keeps it out
  of walls and layers shake on top
"""

from camrig.systems.camera.base import CameraBaseManager
from camrig.systems.camera.manager import CameraManager, smoothing_factor

__all__ = ["CameraBaseManager", "CameraManager", "smoothing_factor"]
