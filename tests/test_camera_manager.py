"""Unit tests for CameraManager."""

import math
import unittest
from unittest.mock import MagicMock

import pytest
from arcade.types import XYWH

from camrig.systems.area import AreaManager, Wall
from camrig.systems.camera import CameraManager, smoothing_factor
from camrig.systems.context import CameraContext
from camrig.systems.focus import FocalPoint, FocusManager
from camrig.systems.shake import ShakeManager
from camrig.types import Transform


class ConstantNoise:
    """Noise source returning the same value everywhere."""

    def __init__(self, value: float) -> None:
        self.value = value

    def sample(self, x: float, y: float) -> float:  # noqa: ARG002
        return self.value


def make_context(*, focus: bool = True, area: bool = False, shake: bool = False) -> CameraContext:
    """Context holding fresh managers for the requested systems."""
    context = CameraContext()
    if focus:
        context.register_system("focus", FocusManager())
    if area:
        context.register_system("area", AreaManager())
    if shake:
        context.register_system("shake", ShakeManager(noise=ConstantNoise(1.0), decay_speed=0))
    return context


class TestCameraRig(unittest.TestCase):
    """Test the rig state and derived values."""

    def setUp(self) -> None:
        """Create a camera manager with default settings."""
        self.manager = CameraManager()

    def test_defaults_from_settings(self) -> None:
        """Test that constructor defaults come from settings."""
        assert self.manager.pan_speed == 4.0
        assert self.manager.zoom_speed == 1.0
        assert self.manager.world_height == 720.0
        assert self.manager.base_distance == 10.0
        assert self.manager.aspect == pytest.approx(1280 / 720)

    def test_zoom_and_pull_are_clamped(self) -> None:
        """Test the zoom and pull ranges."""
        self.manager.zoom = 10
        self.manager.pull = -3
        assert self.manager.zoom == 4.0
        assert self.manager.pull == -1.0

        self.manager.zoom = 0
        self.manager.pull = 2
        assert self.manager.zoom == 0.25
        assert self.manager.pull == 1.0

    def test_view_size_follows_zoom(self) -> None:
        """Test that zooming in shrinks the view rectangle."""
        assert tuple(self.manager.view_size) == pytest.approx((1280, 720))

        self.manager.zoom = 2
        assert tuple(self.manager.view_size) == pytest.approx((640, 360))

    def test_set_viewport_changes_aspect(self) -> None:
        """Test that resizing the viewport keeps the height and changes the width."""
        self.manager.set_viewport(800, 800)

        assert tuple(self.manager.view_size) == pytest.approx((720, 720))

    def test_invalid_viewport_raises(self) -> None:
        """Test that the viewport must have a positive size."""
        with pytest.raises(ValueError, match="Viewport"):
            self.manager.set_viewport(0, 600)

    def test_invalid_world_height_raises(self) -> None:
        """Test that the world height must be positive."""
        with pytest.raises(ValueError, match="world_height"):
            CameraManager(world_height=-1)

    def test_world_rect_is_centered_on_pan(self) -> None:
        """Test the world-space view rectangle."""
        self.manager.pan = (100, 50)

        rect = self.manager.world_rect()

        assert rect.x == 100
        assert rect.y == 50
        assert rect.width == pytest.approx(1280)
        assert rect.height == pytest.approx(720)

    def test_distance_applies_pull_and_zoom(self) -> None:
        """Test the camera distance."""
        assert self.manager.distance == pytest.approx(10)

        self.manager.zoom = 2
        assert self.manager.distance == pytest.approx(5)

        self.manager.zoom = 1
        self.manager.pull = -1
        assert self.manager.distance == pytest.approx(40)

        self.manager.pull = 1
        assert self.manager.distance == pytest.approx(2.5)

    def test_field_of_view(self) -> None:
        """Test the perspective field of view."""
        expected = math.degrees(math.atan2(360, 10)) * 2

        assert self.manager.field_of_view == pytest.approx(expected)

    def test_orthographic_size(self) -> None:
        """Test the orthographic half-height."""
        assert self.manager.orthographic_size == pytest.approx(360)

        self.manager.zoom = 2
        assert self.manager.orthographic_size == pytest.approx(180)

    def test_render_zoom_fits_view_into_viewport(self) -> None:
        """Test the zoom pushed to Camera2D."""
        assert self.manager.render_zoom == pytest.approx(1)

        self.manager.zoom = 2
        assert self.manager.render_zoom == pytest.approx(2)

        manager = CameraManager(world_height=360)
        assert manager.render_zoom == pytest.approx(2)


class TestCameraManagerUpdate(unittest.TestCase):
    """Test the per-frame driver."""

    def test_holds_pose_without_systems(self) -> None:
        """Test that an empty context leaves the camera where it is."""
        manager = CameraManager()
        manager.pan = (10, 20)
        manager.zoom = 2

        manager.update(0.1, CameraContext())

        assert manager.pan.x == 10
        assert manager.pan.y == 20
        assert manager.zoom == 2

    def test_pan_uses_exponential_smoothing(self) -> None:
        """Test the smoothing step toward the focus target."""
        context = make_context()
        context.focus_manager.set_base_target(Transform(100, 0))
        manager = CameraManager()

        manager.update(0.1, context)

        assert manager.pan.x == pytest.approx(100 * (1 - math.exp(-0.4)))
        assert manager.pan.y == pytest.approx(0)

    def test_smoothing_is_frame_rate_independent(self) -> None:
        """Test that two half steps land where one full step does."""
        context = make_context()
        context.focus_manager.set_base_target(Transform(100, -50), zoom=2.0)
        one_step = CameraManager()
        two_steps = CameraManager()

        one_step.update(0.2, context)
        two_steps.update(0.1, context)
        two_steps.update(0.1, context)

        assert two_steps.pan.x == pytest.approx(one_step.pan.x)
        assert two_steps.pan.y == pytest.approx(one_step.pan.y)
        assert two_steps.zoom == pytest.approx(one_step.zoom)

    def test_smoothing_converges(self) -> None:
        """Test that the camera settles on its target."""
        context = make_context()
        context.focus_manager.set_base_target(Transform(300, 200), zoom=2.0, pull=0.5)
        manager = CameraManager()

        for _ in range(600):
            manager.update(1 / 60, context)

        assert manager.pan.x == pytest.approx(300, abs=1e-3)
        assert manager.pan.y == pytest.approx(200, abs=1e-3)
        assert manager.zoom == pytest.approx(2.0, abs=1e-3)
        assert manager.pull == pytest.approx(0.5, abs=1e-3)

    def test_zoom_uses_zoom_speed_and_target_speed(self) -> None:
        """Test zoom smoothing scaled by the target speed."""
        context = make_context()
        context.focus_manager.set_base_target(Transform(0, 0), zoom=3.0, speed=2.0)
        manager = CameraManager(zoom_speed=1.0)

        manager.update(0.1, context)

        assert manager.zoom == pytest.approx(1 + 2 * (1 - math.exp(-0.2)))

    def test_focal_point_pulls_camera(self) -> None:
        """Test that focal points shift the target."""
        context = make_context()
        context.focus_manager.set_base_target(Transform(0, 0), weight=100)
        FocalPoint(Transform(100, 0), weight=100, max_distance=1000, speed=1.0).enable(context=context)
        manager = CameraManager()

        manager.snap_to_target(context)

        assert manager.pan.x > 0

    def test_walls_keep_camera_out(self) -> None:
        """Test that the area correction is added to the target."""
        context = make_context(area=True)
        context.focus_manager.set_base_target(Transform(0, 0))
        context.area_manager.add_wall(Wall(Transform(0, -400), XYWH(0, 0, 4000, 200)))
        manager = CameraManager()

        manager.snap_to_target(context)

        # Floor top edge is -300; a 720 tall view must start there
        assert manager.pan.x == pytest.approx(0)
        assert manager.pan.y == pytest.approx(60)
        assert manager.world_rect().bottom == pytest.approx(-300)

    def test_shake_is_layered_not_fed_back(self) -> None:
        """Test that shake moves the render pose only."""
        shaken_context = make_context(shake=True)
        calm_context = make_context()
        for context in (shaken_context, calm_context):
            context.focus_manager.set_base_target(Transform(100, 0))
        shaken_context.shake_manager.add_trauma("boom", 1000)
        shaken = CameraManager()
        calm = CameraManager()

        for _ in range(10):
            shaken.update(1 / 60, shaken_context)
            calm.update(1 / 60, calm_context)

        assert shaken.pan.x == pytest.approx(calm.pan.x)
        assert shaken.pan.y == pytest.approx(calm.pan.y)
        assert shaken.render_position.x == pytest.approx(shaken.pan.x + 12)
        assert shaken.render_position.y == pytest.approx(shaken.pan.y + 12)
        assert shaken.render_rotation == pytest.approx(10)
        assert calm.render_position.x == pytest.approx(calm.pan.x)
        assert calm.render_rotation == 0

    def test_update_ticks_shake(self) -> None:
        """Test that the driver advances the shake clock."""
        context = make_context(shake=True)
        manager = CameraManager()

        manager.update(0.5, context)

        assert context.shake_manager.time == pytest.approx(5.0)

    def test_snap_does_not_tick_shake(self) -> None:
        """Test that snapping reads the shake without advancing it."""
        context = make_context(shake=True)
        manager = CameraManager()

        manager.snap_to_target(context)

        assert context.shake_manager.time == 0

    def test_snap_without_focus_keeps_zoom(self) -> None:
        """Test that snapping without a focus manager holds the pose."""
        manager = CameraManager()
        manager.pan = (5, 5)
        manager.zoom = 3

        manager.snap_to_target(make_context(focus=False))

        assert manager.pan.x == 5
        assert manager.zoom == 3


class TestCameraManagerCamera(unittest.TestCase):
    """Test pushing the render pose to an arcade camera."""

    def test_update_pushes_pose(self) -> None:
        """Test that position, zoom and angle reach the Camera2D."""
        camera = MagicMock()
        context = make_context(shake=True)
        context.focus_manager.set_base_target(Transform(50, 50), zoom=2.0)
        context.shake_manager.add_trauma("boom", 1000)
        manager = CameraManager(camera)

        manager.update(0.1, context)

        assert camera.position == (manager.render_position.x, manager.render_position.y)
        assert camera.zoom == pytest.approx(manager.render_zoom)
        assert camera.angle == pytest.approx(manager.render_rotation)

    def test_set_camera_pushes_current_pose(self) -> None:
        """Test that a newly attached camera is moved immediately."""
        manager = CameraManager()
        manager.snap_to_target(CameraContext())
        camera = MagicMock()

        manager.set_camera(camera)

        assert camera.position == (0.0, 0.0)
        assert camera.zoom == pytest.approx(1.0)

    def test_use_activates_camera(self) -> None:
        """Test that use() delegates to the Camera2D."""
        camera = MagicMock()
        manager = CameraManager(camera)

        manager.use()

        camera.use.assert_called_once()

    def test_use_without_camera(self) -> None:
        """Test that use() without a camera does nothing."""
        CameraManager().use()

    def test_cleanup_releases_camera(self) -> None:
        """Test that cleanup forgets the camera."""
        manager = CameraManager(MagicMock())

        manager.cleanup()

        assert manager.camera is None


class TestSmoothingFactor(unittest.TestCase):
    """Test the exponential smoothing factor."""

    def test_factor_range(self) -> None:
        """Test the limits of the smoothing factor."""
        assert smoothing_factor(4, 0) == 0
        assert smoothing_factor(4, 100) == pytest.approx(1)
        assert smoothing_factor(-4, 0.1) == 0

    def test_factor_value(self) -> None:
        """Test the smoothing formula."""
        assert smoothing_factor(4, 0.25) == pytest.approx(1 - math.exp(-1))
