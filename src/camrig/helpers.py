"""Helper functions for creating camera rigs.

This module provides high-level functions to simplify rig setup. Users can
call create_camera_rig() for a rig made of the installed systems, or build
the managers by hand and register them into a CameraContext themselves.
"""

import logging

from rich.logging import RichHandler

from camrig.systems.context import CameraContext
from camrig.systems.loader import SystemLoader


def setup_logging(log_level: str = "DEBUG") -> None:
    """Configure logging for the camera rig.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).

    Side effects:
        - Configures the root logger with RichHandler
        - Sets the specified log level
    """
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, markup=True)],
    )


def create_camera_rig(context: CameraContext | None = None) -> CameraContext:
    """Load the installed camera systems into a context.

    Imports every module in settings.INSTALLED_SYSTEMS, instantiates their
    systems in dependency order, registers them and calls setup().

    Args:
        context: Context to load into. A new one is created if None.

    Returns:
        The context, with focus_manager, area_manager, shake_manager and
        camera_manager set when the default systems are installed.

    Example:
        >>> from camrig import create_camera_rig
        >>> context = create_camera_rig()
        >>> context.focus_manager.set_base_target(player_sprite)
        >>> context.camera_manager.update(1 / 60, context)
    """
    if context is None:
        context = CameraContext()
    SystemLoader().load(context)
    return context
