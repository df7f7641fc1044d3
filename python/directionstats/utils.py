"""Constants and small helpers shared by the direction statistics."""

from __future__ import annotations

from math import sqrt

FULL_CIRCLE_DEGREES = 360.0

# Empirical correction factor from Yamartino (1984).
YAMARTINO_B = 2.0 / sqrt(3.0) - 1.0


def normalize_bearing(degrees: float) -> float:
    """Map an ``atan2`` result in (-180, 180] onto the [0, 360) bearing range."""
    if degrees < 0.0:
        return degrees + FULL_CIRCLE_DEGREES
    return degrees


__all__ = ["FULL_CIRCLE_DEGREES", "YAMARTINO_B", "normalize_bearing"]
