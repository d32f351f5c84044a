"""Shared pytest configuration and fixtures."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from camrig.conf import settings

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture(autouse=True)
def configure_test_settings() -> Generator[None]:
    """Configure settings for each test.

    This fixture runs automatically before each test to configure settings
    and resets them after the test completes.

    Yields:
        None
    """
    settings.configure(
        SCREEN_WIDTH=1280,
        SCREEN_HEIGHT=720,
        CAMERA_WORLD_HEIGHT=720.0,
        CAMERA_BASE_DISTANCE=10.0,
        CAMERA_PAN_SPEED=4.0,
        CAMERA_ZOOM_SPEED=1.0,
        FOCUS_DISTANCE_MODE="relative_to_base",
        FOCUS_DISTANCE_CURVE="linear_falloff",
        FOCUS_BLEND_STRATEGY="weighted_average",
        FOCUS_BASE_WEIGHT=500.0,
        SHAKE_MAX_TRAUMA=1000.0,
        SHAKE_SPEED=10.0,
        SHAKE_DECAY_SPEED=1000.0,
        SHAKE_MAX_OFFSET=12.0,
        SHAKE_MAX_ROTATION=10.0,
        SHAKE_INTENSITY_CURVE="quadratic",
        SHAKE_NOISE_SEED=0,
    )
    yield
    # Reset settings after test
    settings._wrapped = None
