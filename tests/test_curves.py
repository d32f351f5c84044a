"""Unit tests for response curves."""

import unittest

import pytest

from camrig.curves import CurveRegistry, ease_out, linear_falloff, quadratic, resolve_curve, smooth_falloff, smoothstep


class TestCurveRegistry(unittest.TestCase):
    """Test curve registration and lookup."""

    def tearDown(self) -> None:
        """Drop curves registered by a test."""
        CurveRegistry._curves.pop("test_cubic", None)

    def test_builtin_curves_are_registered(self) -> None:
        """Test that every built-in curve can be looked up by name."""
        for name in ("linear", "linear_falloff", "quadratic", "ease_out", "smoothstep", "smooth_falloff", "flat"):
            assert CurveRegistry.is_registered(name), name

    def test_register_decorator(self) -> None:
        """Test registering a custom curve."""

        @CurveRegistry.register("test_cubic")
        def cubic(t: float) -> float:
            return t**3

        assert CurveRegistry.get("test_cubic") is cubic
        assert resolve_curve("test_cubic")(0.5) == pytest.approx(0.125)

    def test_register_empty_name_raises(self) -> None:
        """Test that curves need a name."""
        with pytest.raises(ValueError, match="non-empty name"):
            CurveRegistry.register("")

    def test_resolve_callable_passes_through(self) -> None:
        """Test that callables are used as is."""

        def curve(t: float) -> float:
            return t

        assert resolve_curve(curve) is curve

    def test_resolve_unknown_name_raises(self) -> None:
        """Test that unknown names are rejected."""
        with pytest.raises(ValueError, match="Unknown response curve"):
            resolve_curve("zigzag")


class TestBuiltinCurves(unittest.TestCase):
    """Test the shape of the built-in curves."""

    def test_endpoints(self) -> None:
        """Test curve values at 0 and 1."""
        assert linear_falloff(0) == 1
        assert linear_falloff(1) == 0
        assert quadratic(0) == 0
        assert quadratic(1) == 1
        assert ease_out(1) == 1
        assert smoothstep(0) == 0
        assert smoothstep(1) == 1
        assert smooth_falloff(0) == 1
        assert smooth_falloff(1) == 0

    def test_inputs_are_clamped(self) -> None:
        """Test that values outside [0, 1] are clamped."""
        assert quadratic(2) == 1
        assert quadratic(-1) == 0
        assert linear_falloff(5) == 0

    def test_midpoints(self) -> None:
        """Test curve values at 0.5."""
        assert quadratic(0.5) == pytest.approx(0.25)
        assert ease_out(0.5) == pytest.approx(0.75)
        assert smoothstep(0.5) == pytest.approx(0.5)
        assert resolve_curve("flat")(0.7) == 1
