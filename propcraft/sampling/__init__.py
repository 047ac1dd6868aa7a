"""Sampling primitives: the source of randomness and range validation."""

from .ranges import MAX_CODE_POINT, IntegralWidth, RangeType, check_range, choose
from .source import SourceOfRandomness

__all__ = [
    "SourceOfRandomness",
    "RangeType",
    "IntegralWidth",
    "MAX_CODE_POINT",
    "check_range",
    "choose",
]
