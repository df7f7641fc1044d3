"""Running circular statistics over a stream of angle measurements."""

from __future__ import annotations

import logging
import math
from typing import Iterable, Tuple

from .utils import YAMARTINO_B, normalize_bearing

logger = logging.getLogger(__name__)


class DirectionAccumulator:
    """Incremental aggregator of angles given in degrees.

    Only the measurement count and the sums of the sines and cosines are
    kept, so memory and update cost stay constant however many measurements
    are added. Both queries return NaN while the accumulator is empty.
    """

    __slots__ = ("_count", "_sum_sin", "_sum_cos")

    def __init__(self) -> None:
        self._count: int = 0
        self._sum_sin: float = 0.0
        self._sum_cos: float = 0.0

    @classmethod
    def from_values(cls, values: Iterable[float]) -> "DirectionAccumulator":
        accumulator = cls()
        for value in values:
            accumulator.add_measurement(float(value))
        logger.debug("Accumulated %d direction measurements", accumulator._count)
        return accumulator

    def add_measurement(self, angle_degrees: float) -> None:
        radians = math.radians(angle_degrees)
        if math.isfinite(radians):
            self._sum_sin += math.sin(radians)
            self._sum_cos += math.cos(radians)
        else:
            # math.sin rejects infinities; poison the sums like IEEE sin would.
            self._sum_sin += math.nan
            self._sum_cos += math.nan
        self._count += 1

    # Read-only state -------------------------------------------------------

    @property
    def count(self) -> int:
        return self._count

    @property
    def sum_sin(self) -> float:
        return self._sum_sin

    @property
    def sum_cos(self) -> float:
        return self._sum_cos

    # Derived statistics ----------------------------------------------------

    def _mean_components(self) -> Tuple[float, float]:
        return self._sum_sin / self._count, self._sum_cos / self._count

    def average_direction(self) -> float:
        """Mean bearing in degrees, in [0, 360)."""
        if self._count == 0:
            return math.nan
        avg_sin, avg_cos = self._mean_components()
        return normalize_bearing(math.degrees(math.atan2(avg_sin, avg_cos)))

    def resultant_length(self) -> float:
        """Length of the mean unit vector: 1 for identical angles, 0 for fully dispersed ones."""
        if self._count == 0:
            return math.nan
        avg_sin, avg_cos = self._mean_components()
        return math.hypot(avg_sin, avg_cos)

    def standard_deviation(self) -> float:
        """Circular standard deviation in degrees using Yamartino's approximation.

        The radicand ``1 - R**2`` is not clamped: when rounding pushes it below
        zero the result is NaN.
        """
        if self._count == 0:
            return math.nan
        avg_sin, avg_cos = self._mean_components()
        radicand = 1.0 - (avg_sin * avg_sin + avg_cos * avg_cos)
        if radicand < 0.0:
            return math.nan
        epsilon = math.sqrt(radicand)
        sigma = math.asin(epsilon) * (1.0 + YAMARTINO_B * epsilon**3)
        return math.degrees(sigma)

    # Combination -----------------------------------------------------------

    def combine(self, other: "DirectionAccumulator") -> "DirectionAccumulator":
        """Return a new accumulator holding the measurements of both operands."""
        if not isinstance(other, DirectionAccumulator):
            raise TypeError(
                f"cannot combine DirectionAccumulator with {type(other).__name__}"
            )
        merged = type(self)()
        merged._count = self._count + other._count
        merged._sum_sin = self._sum_sin + other._sum_sin
        merged._sum_cos = self._sum_cos + other._sum_cos
        logger.debug(
            "Combined accumulators of %d and %d measurements",
            self._count,
            other._count,
        )
        return merged

    def __add__(self, other: object) -> "DirectionAccumulator":
        if not isinstance(other, DirectionAccumulator):
            return NotImplemented
        return self.combine(other)

    def __repr__(self) -> str:
        return (
            f"DirectionAccumulator(count={self._count}, "
            f"sum_sin={self._sum_sin!r}, sum_cos={self._sum_cos!r})"
        )


__all__ = ["DirectionAccumulator"]
