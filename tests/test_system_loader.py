"""Unit tests for the system registry, loader and context."""

import unittest
from typing import ClassVar
from unittest.mock import MagicMock

import pytest

from camrig.systems.base import BaseSystem
from camrig.systems.context import CameraContext
from camrig.systems.loader import CircularDependencyError, MissingDependencyError, SystemLoader
from camrig.systems.registry import SystemRegistry

CALLS: list[str] = []


@SystemRegistry.register
class RecorderSystem(BaseSystem):
    name: ClassVar[str] = "test_recorder"
    role: ClassVar[str] = "recorder"
    dependencies: ClassVar[list[str]] = ["test_clock"]

    def setup(self, context: CameraContext) -> None:
        CALLS.append(f"setup:{self.name}:{context.get_system('test_clock') is not None}")

    def update(self, delta_time: float, context: CameraContext) -> None:
        CALLS.append(f"update:{self.name}")

    def cleanup(self) -> None:
        CALLS.append(f"cleanup:{self.name}")


@SystemRegistry.register
class ClockSystem(BaseSystem):
    name: ClassVar[str] = "test_clock"

    def setup(self, context: CameraContext) -> None:
        CALLS.append(f"setup:{self.name}")

    def update(self, delta_time: float, context: CameraContext) -> None:
        CALLS.append(f"update:{self.name}")

    def cleanup(self) -> None:
        CALLS.append(f"cleanup:{self.name}")


class TestSystemRegistry(unittest.TestCase):
    """Test SystemRegistry."""

    def test_register_requires_name(self) -> None:
        """Test that systems without a name are rejected."""

        class Nameless(BaseSystem):
            def setup(self, context: CameraContext) -> None:
                pass

        with pytest.raises(ValueError, match="must define a 'name'"):
            SystemRegistry.register(Nameless)

    def test_lookup(self) -> None:
        """Test getting registered systems."""
        assert SystemRegistry.get("test_clock") is ClockSystem
        assert SystemRegistry.is_registered("test_recorder")
        assert SystemRegistry.get("nothing") is None
        assert "test_clock" in SystemRegistry.get_all()

    def test_unregister(self) -> None:
        """Test removing a single system."""

        @SystemRegistry.register
        class Temporary(BaseSystem):
            name: ClassVar[str] = "test_temporary"

            def setup(self, context: CameraContext) -> None:
                pass

        SystemRegistry.unregister("test_temporary")

        assert not SystemRegistry.is_registered("test_temporary")

    def test_builtin_systems_registered(self) -> None:
        """Test that importing the packages registers the camera systems."""
        import camrig.systems  # noqa: F401, PLC0415

        for name in ("focus", "area", "shake", "camera"):
            assert SystemRegistry.is_registered(name), name


class TestSystemLoader(unittest.TestCase):
    """Test SystemLoader."""

    def setUp(self) -> None:
        """Reset the call log."""
        CALLS.clear()

    def tearDown(self) -> None:
        """Drop systems registered by individual tests."""
        for name in ("test_loop_a", "test_loop_b", "test_orphan", "test_lens"):
            SystemRegistry.unregister(name)

    def test_load_in_dependency_order(self) -> None:
        """Test that dependencies are instantiated and set up first."""
        context = CameraContext()
        loader = SystemLoader([__name__])

        systems = loader.load(context)

        assert [system.name for system in systems] == ["test_clock", "test_recorder"]
        assert CALLS == ["setup:test_clock", "setup:test_recorder:True"]
        assert context.recorder is systems[1]
        assert context.get_system("test_clock") is systems[0]

    def test_update_and_cleanup_order(self) -> None:
        """Test that updates run forward and cleanups in reverse."""
        context = CameraContext()
        loader = SystemLoader([__name__])
        loader.load(context)
        CALLS.clear()

        loader.update_all(0.016, context)
        loader.cleanup_all()

        assert CALLS == [
            "update:test_clock",
            "update:test_recorder",
            "cleanup:test_recorder",
            "cleanup:test_clock",
        ]

    def test_missing_dependency_raises(self) -> None:
        """Test that a dependency outside the installed systems is reported."""
        orphan = type(
            "Orphan",
            (BaseSystem,),
            {"name": "test_orphan", "dependencies": ["test_nowhere"], "setup": lambda self, context: None},
        )
        orphan.__module__ = __name__
        SystemRegistry.register(orphan)

        with pytest.raises(MissingDependencyError, match="test_nowhere"):
            SystemLoader([__name__]).load(CameraContext())

    def test_optional_dependencies_order_without_requiring(self) -> None:
        """Test that installed optional dependencies load first and missing ones are skipped."""
        lens = type(
            "Lens",
            (BaseSystem,),
            {
                "name": "test_lens",
                "optional_dependencies": ["test_recorder", "test_nowhere"],
                "setup": lambda self, context: None,
            },
        )
        lens.__module__ = __name__
        SystemRegistry.register(lens)

        systems = SystemLoader([__name__]).load(CameraContext())

        assert [system.name for system in systems] == ["test_clock", "test_recorder", "test_lens"]

    def test_circular_dependency_raises(self) -> None:
        """Test that dependency cycles are reported."""
        for name, dependency in (("test_loop_a", "test_loop_b"), ("test_loop_b", "test_loop_a")):
            system_class = type(
                name,
                (BaseSystem,),
                {"name": name, "dependencies": [dependency], "setup": lambda self, context: None},
            )
            system_class.__module__ = __name__
            SystemRegistry.register(system_class)

        with pytest.raises(CircularDependencyError, match="test_loop_a"):
            SystemLoader([__name__]).load(CameraContext())

    def test_default_installed_systems(self) -> None:
        """Test loading the default camera systems."""
        context = CameraContext()

        systems = SystemLoader().load(context)

        names = [system.name for system in systems]
        assert sorted(names) == ["area", "camera", "focus", "shake"]
        assert names[-1] == "camera"
        assert context.focus_manager is not None
        assert context.area_manager is not None
        assert context.shake_manager is not None
        assert context.camera_manager is not None


class TestCameraContext(unittest.TestCase):
    """Test CameraContext."""

    def test_roles_default_to_none(self) -> None:
        """Test that missing systems read as None."""
        context = CameraContext()

        assert context.focus_manager is None
        assert context.area_manager is None
        assert context.shake_manager is None
        assert context.camera_manager is None

    def test_register_sets_role(self) -> None:
        """Test that systems are exposed by role."""
        context = CameraContext()
        system = MagicMock()
        system.role = "shake_manager"

        context.register_system("shake", system)

        assert context.shake_manager is system
        assert context.get_systems() == {"shake": system}

    def test_unregister_clears_role(self) -> None:
        """Test that unregistering removes the role attribute."""
        context = CameraContext()
        system = MagicMock()
        system.role = "area_manager"
        context.register_system("area", system)

        context.unregister_system("area")
        context.unregister_system("area")

        assert context.area_manager is None
        assert context.get_system("area") is None
