"""Default settings for camrig.

Users can override these in their project's settings.py file.

Example:
    # In your project's settings.py:
    from camrig.conf import global_settings

    # Override framework defaults
    CAMERA_PAN_SPEED = 6.0
    SHAKE_MAX_ROTATION = 4.0

    # Add custom systems
    INSTALLED_SYSTEMS = [
        *global_settings.INSTALLED_SYSTEMS,
        "myproject.camera.letterbox",
    ]

World units match arcade's default projection, so one world unit is one
pixel at zoom 1.
"""

# Viewport settings
SCREEN_WIDTH = 1280
"""Width of the game window in pixels (used for the camera aspect ratio)."""

SCREEN_HEIGHT = 720
"""Height of the game window in pixels (used for the camera aspect ratio)."""

# Camera rig settings
CAMERA_WORLD_HEIGHT = 720.0
"""Height of the camera view rectangle in world units at zoom 1."""

CAMERA_BASE_DISTANCE = 10.0
"""Distance of the camera from the XY plane at pull 0 and zoom 1."""

CAMERA_PAN_SPEED = 4.0
"""Base asymptotic speed for camera panning (per second)."""

CAMERA_ZOOM_SPEED = 1.0
"""Base asymptotic speed for camera zoom and pull (per second)."""

# Focus settings
FOCUS_DISTANCE_MODE = "relative_to_base"
"""Reference for focal point distances: "relative_to_base" or "relative_to_camera"."""

FOCUS_DISTANCE_CURVE = "linear_falloff"
"""Name of the response curve mapping normalized distance to influence."""

FOCUS_BLEND_STRATEGY = "weighted_average"
"""Blend strategy: "weighted_average" (all focal points) or "base_only"."""

FOCUS_BASE_WEIGHT = 500.0
"""Default weight of the base target."""

# Shake settings
SHAKE_MAX_TRAUMA = 1000.0
"""Amount of trauma required to reach maximum shake values."""

SHAKE_SPEED = 10.0
"""Speed of noise field traversal. Lower values feel like a handheld camera."""

SHAKE_DECAY_SPEED = 1000.0
"""Linear trauma decay in units per second."""

SHAKE_MAX_OFFSET = 12.0
"""Maximum translational shake (+/-) in world units."""

SHAKE_MAX_ROTATION = 10.0
"""Maximum rotational shake (+/-) in degrees."""

SHAKE_INTENSITY_CURVE = "quadratic"
"""Name of the response curve mapping normalized trauma to intensity."""

SHAKE_NOISE_SEED = 0
"""Seed for the coherent noise used by camera shake."""

# Installed systems (like Django's INSTALLED_APPS)
INSTALLED_SYSTEMS = [
    "camrig.systems.focus",
    "camrig.systems.area",
    "camrig.systems.shake",
    "camrig.systems.camera",
]
"""List of module paths to import for system registration.

Users can add custom systems by extending this list in their settings.py:

Example:
    INSTALLED_SYSTEMS = [
        *global_settings.INSTALLED_SYSTEMS,
        "myproject.camera.letterbox",
    ]
"""
