"""Shake system for trauma-driven camera shake.

This package provides:
- ShakeManager: Named trauma sources with linear decay and noise-based shake
- ShakeValue: Offset and rotation to layer on the camera pose
"""

from camrig.systems.shake.base import ShakeBaseManager, ShakeValue
from camrig.systems.shake.manager import DEFAULT_TRAUMA_SOURCE, ShakeManager, parse_trauma_mode

__all__ = ["DEFAULT_TRAUMA_SOURCE", "ShakeBaseManager", "ShakeManager", "ShakeValue", "parse_trauma_mode"]
