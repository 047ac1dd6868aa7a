"""
Range validation and unbiased bounded integral sampling.

``choose`` is the single algorithm behind every bounded integral draw: it
computes the span of the interval with Python's arbitrary-precision integers
and rejection-samples just enough raw bits to cover it, so no interval width
(including the full signed 64-bit range and beyond) suffers modulo bias.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import TYPE_CHECKING

from ..domain.errors import RangeError

if TYPE_CHECKING:
    from .source import SourceOfRandomness

MAX_CODE_POINT = 0x10FFFF


class RangeType(str, Enum):
    """Families of bounded sampling operations."""

    INTEGRAL = "integral"
    FLOAT = "float"
    CHARACTER = "character"


class IntegralWidth(int, Enum):
    """Signed native widths, in bits, that bounded integral draws narrow to."""

    BYTE = 8
    SHORT = 16
    INT = 32
    LONG = 64

    @property
    def minimum(self) -> int:
        return -(1 << (self.value - 1))

    @property
    def maximum(self) -> int:
        return (1 << (self.value - 1)) - 1


def check_range(range_type: RangeType, minimum, maximum) -> int:
    """
    Validate a closed interval before any sampling happens.

    Args:
        range_type: Family of the interval being checked
        minimum: Lower bound (code point for characters)
        maximum: Upper bound (code point for characters)

    Returns:
        ``0`` when the bounds are equal, ``-1`` otherwise

    Raises:
        RangeError: If ``minimum > maximum``, a float bound is not finite, or a
            character bound is not a valid code point
    """
    if range_type is RangeType.CHARACTER:
        for bound in (minimum, maximum):
            if not 0 <= bound <= MAX_CODE_POINT:
                raise RangeError(
                    f"{bound!r} is not a valid character code point",
                    range_type.value,
                    minimum,
                    maximum,
                )
    elif range_type is RangeType.FLOAT and not (
        math.isfinite(minimum) and math.isfinite(maximum)
    ):
        raise RangeError(
            f"bounds [{minimum}, {maximum}] must be finite",
            range_type.value,
            minimum,
            maximum,
        )

    if minimum > maximum:
        raise RangeError(
            f"bad range, {minimum!r} > {maximum!r}", range_type.value, minimum, maximum
        )
    return 0 if minimum == maximum else -1


def check_width(width: IntegralWidth, minimum: int, maximum: int) -> None:
    """Ensure both bounds are representable in a signed native width."""
    for bound in (minimum, maximum):
        if not width.minimum <= bound <= width.maximum:
            raise RangeError(
                f"{bound} does not fit in {width.value} signed bits",
                RangeType.INTEGRAL.value,
                minimum,
                maximum,
            )


def choose(random: SourceOfRandomness, minimum: int, maximum: int) -> int:
    """
    Draw uniformly from ``[minimum, maximum]`` by rejection sampling.

    The caller has already validated the interval and handled ``minimum == maximum``.
    """
    span = maximum - minimum + 1
    bits = (span - 1).bit_length()

    while True:
        candidate = random.next_big_integer(bits)
        if candidate < span:
            return minimum + candidate


def code_points(minimum: str | int, maximum: str | int) -> tuple[int, int]:
    """
    Convert character bounds to code points.

    Each bound may be a one-character string or an integer code point.

    Raises:
        RangeError: If a bound is of any other type or length, is not a
            valid code point, or ``minimum > maximum``
    """
    converted = []
    for bound in (minimum, maximum):
        if isinstance(bound, str) and len(bound) == 1:
            converted.append(ord(bound))
        elif isinstance(bound, int) and not isinstance(bound, bool):
            converted.append(bound)
        else:
            raise RangeError(
                f"character bounds must be single characters or code points, got {bound!r}",
                RangeType.CHARACTER.value,
                minimum,
                maximum,
            )
    low, high = converted
    check_range(RangeType.CHARACTER, low, high)
    return low, high
