"""Scalar helpers: angle unit conversion and linear remapping."""

import math


def to_degrees(rad: float) -> float:
    """Convert an angle in radians to degrees."""
    return rad / (math.pi / 180.0)


def to_radians(deg: float) -> float:
    """Convert an angle in degrees to radians."""
    return deg * (math.pi / 180.0)


def lerp(
    val: float,
    start1: float,
    stop1: float,
    start2: float,
    stop2: float,
) -> float:
    """Map ``val`` from the range [start1, stop1] onto [start2, stop2].

    Args:
        val: Value to remap
        start1: Lower bound of the input range
        stop1: Upper bound of the input range
        start2: Lower bound of the output range
        stop2: Upper bound of the output range

    Returns:
        The remapped value (not clamped)
    """
    return start2 + (stop2 - start2) * ((val - start1) / (stop1 - start1))
