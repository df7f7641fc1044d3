"""Running circular mean and Yamartino standard deviation of angle measurements."""

from .direction_accumulator import DirectionAccumulator
from .circular import circular_mean, resultant_length, yamartino_std
from .utils import FULL_CIRCLE_DEGREES, YAMARTINO_B, normalize_bearing

__all__ = [
    "DirectionAccumulator",
    "circular_mean",
    "resultant_length",
    "yamartino_std",
    "FULL_CIRCLE_DEGREES",
    "YAMARTINO_B",
    "normalize_bearing",
]
