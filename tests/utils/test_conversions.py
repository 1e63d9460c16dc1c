"""Tests for scalar conversion helpers."""

import math

import pytest

from zetaml.utils.conversions import lerp, to_degrees, to_radians


def test_to_degrees():
    """Test radians to degrees."""
    assert to_degrees(math.pi) == pytest.approx(180.0)


def test_to_radians():
    """Test degrees to radians."""
    assert to_radians(180) == pytest.approx(math.pi)
    assert to_radians(to_degrees(1.25)) == pytest.approx(1.25)


def test_lerp():
    """Test linear remapping between ranges."""
    assert lerp(5, 0, 10, 0, 100) == pytest.approx(50.0)
    assert lerp(50, 0, 100, 0, 10) == pytest.approx(5.0)
    assert lerp(15, 0, 10, 0, 100) == pytest.approx(150.0)
