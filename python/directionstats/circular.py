"""Array variants of the direction statistics.

These helpers evaluate the same formulas as :class:`DirectionAccumulator`
on samples that are already held in memory, optionally reducing along one
axis of a numpy array (e.g. one row of readings per station). Empty samples
and NaN inputs produce NaN without emitting numpy runtime warnings.
"""

from __future__ import annotations

from typing import Optional, Tuple, Union

import numpy as np
from numpy.lib.array_utils import normalize_axis_index

from .utils import FULL_CIRCLE_DEGREES, YAMARTINO_B

ArrayResult = Union[float, np.ndarray]


def _mean_components(angles_degrees, axis: Optional[int]) -> Tuple[np.ndarray, np.ndarray]:
    radians = np.deg2rad(np.asarray(angles_degrees, dtype=float))
    if axis is None:
        radians = radians.ravel()
        axis = 0
    axis = normalize_axis_index(axis, radians.ndim)
    count = radians.shape[axis]
    with np.errstate(invalid="ignore"):
        sin = np.sin(radians)
        cos = np.cos(radians)
    if count == 0:
        reduced = np.full(radians.shape[:axis] + radians.shape[axis + 1 :], np.nan)
        return reduced, reduced.copy()
    return sin.sum(axis=axis) / count, cos.sum(axis=axis) / count


def _as_result(values: np.ndarray) -> ArrayResult:
    if np.ndim(values) == 0:
        return float(values)
    return values


def circular_mean(angles_degrees, axis: Optional[int] = None) -> ArrayResult:
    """Mean bearing in degrees, normalised to [0, 360)."""
    avg_sin, avg_cos = _mean_components(angles_degrees, axis)
    with np.errstate(invalid="ignore"):
        degrees = np.rad2deg(np.arctan2(avg_sin, avg_cos))
        degrees = np.where(degrees < 0.0, degrees + FULL_CIRCLE_DEGREES, degrees)
    return _as_result(degrees)


def resultant_length(angles_degrees, axis: Optional[int] = None) -> ArrayResult:
    avg_sin, avg_cos = _mean_components(angles_degrees, axis)
    return _as_result(np.hypot(avg_sin, avg_cos))


def yamartino_std(angles_degrees, axis: Optional[int] = None) -> ArrayResult:
    """Yamartino (1984) approximation of the circular standard deviation, in degrees.

    A negative radicand caused by rounding yields NaN rather than being
    clamped to zero, matching the accumulator.
    """
    avg_sin, avg_cos = _mean_components(angles_degrees, axis)
    with np.errstate(invalid="ignore"):
        epsilon = np.sqrt(1.0 - (avg_sin * avg_sin + avg_cos * avg_cos))
        sigma = np.arcsin(epsilon) * (1.0 + YAMARTINO_B * epsilon**3)
    return _as_result(np.rad2deg(sigma))


__all__ = ["circular_mean", "resultant_length", "yamartino_std"]
