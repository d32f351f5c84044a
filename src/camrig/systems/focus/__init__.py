"""Focus system for blending weighted camera targets.

This package provides:
- FocalPoint: One weighted point of interest that follows a position source
- FocusManager: Blends the base target and active focal points each frame
- Blend strategies: weighted_average (default) and base_only
"""

from camrig.systems.focus.base import AggregationResult, FocalPoint, FocusBaseManager
from camrig.systems.focus.blend import BLEND_STRATEGIES, base_only, resolve_blend, weighted_average
from camrig.systems.focus.manager import FocusManager, parse_distance_mode

__all__ = [
    "BLEND_STRATEGIES",
    "AggregationResult",
    "FocalPoint",
    "FocusBaseManager",
    "FocusManager",
    "base_only",
    "parse_distance_mode",
    "resolve_blend",
    "weighted_average",
]
