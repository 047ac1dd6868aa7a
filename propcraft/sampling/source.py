"""
Source of randomness fed to generators.

SourceOfRandomness wraps a single reseedable bit source and exposes the
primitive and bounded sampling operations generators build on. One instance
belongs to exactly one generation run: it is not safe to share between
concurrent runs, and two instances seeded alike and driven by the same call
sequence produce identical outputs.
"""

from __future__ import annotations

import logging
import math
import random as _random

from ..domain.errors import RangeError
from ..ports.bit_source_port import BitSourcePort
from .ranges import (
    IntegralWidth,
    RangeType,
    check_range,
    check_width,
    choose,
    code_points,
)

logger = logging.getLogger(__name__)

_FLOAT_BITS = 24


class SourceOfRandomness:
    """A source of randomness, fed to generators so they can produce random values."""

    def __init__(self, delegate: BitSourcePort | None = None) -> None:
        """
        Make a new source of randomness.

        Args:
            delegate: Bit source to delegate to; defaults to an entropy-seeded
                ``random.Random``
        """
        self._delegate = delegate if delegate is not None else _random.Random()

    @classmethod
    def seeded(cls, seed: int) -> SourceOfRandomness:
        """Make a source whose output sequence is a pure function of ``seed``."""
        return cls(_random.Random(seed))

    @property
    def delegate(self) -> BitSourcePort:
        return self._delegate

    def set_seed(self, seed: int) -> None:
        """
        Reset the underlying bit source.

        Args:
            seed: Value with which to reseed this source of randomness
        """
        logger.debug("Reseeding source of randomness with %d", seed)
        self._delegate.seed(seed)

    # Primitive draws

    def next_boolean(self) -> bool:
        """Return a uniformly distributed boolean."""
        return self._delegate.getrandbits(1) == 1

    def next_bytes(self, count: int) -> bytes:
        """
        Give ``count`` uniformly random bytes.

        Args:
            count: Desired number of bytes

        Returns:
            Random bytes of length ``count``
        """
        return self._delegate.randbytes(count)

    def next_float(self) -> float:
        """Return a uniform float in ``[0.0, 1.0)`` with single-precision granularity."""
        return self._delegate.getrandbits(_FLOAT_BITS) / (1 << _FLOAT_BITS)

    def next_double(self) -> float:
        """Return a uniform float in ``[0.0, 1.0)`` with double-precision granularity."""
        return self._delegate.random()

    def next_gaussian(self) -> float:
        """Return a standard-normal distributed float."""
        return self._delegate.gauss(0.0, 1.0)

    def next_raw_int(self) -> int:
        """Return an integer uniformly distributed over the signed 32-bit range."""
        return _to_signed(self._delegate.getrandbits(32), 32)

    def next_raw_long(self) -> int:
        """Return an integer uniformly distributed over the signed 64-bit range."""
        return _to_signed(self._delegate.getrandbits(64), 64)

    def next_big_integer(self, number_of_bits: int) -> int:
        """
        Give a random non-negative integer representable in the given number of bits.

        Args:
            number_of_bits: Desired number of bits; zero always yields ``0``

        Returns:
            Integer uniformly distributed over ``[0, 2**number_of_bits)``
        """
        if number_of_bits < 0:
            raise ValueError(f"number of bits must be non-negative, got {number_of_bits}")
        return self._delegate.getrandbits(number_of_bits)

    # Bounded integral draws

    def next_long(self, minimum: int, maximum: int) -> int:
        """
        Give an integer uniformly distributed across ``[minimum, maximum]``.

        Equal bounds return ``minimum`` without drawing from the bit source.

        Args:
            minimum: Lower bound of the desired interval
            maximum: Upper bound of the desired interval

        Returns:
            A random value

        Raises:
            RangeError: If ``minimum > maximum`` or a bound exceeds 64 signed bits
        """
        check_width(IntegralWidth.LONG, minimum, maximum)
        return self._next_integral(minimum, maximum)

    def next_int(self, minimum: int, maximum: int) -> int:
        """Give an integer uniformly distributed across ``[minimum, maximum]`` (32-bit bounds)."""
        check_width(IntegralWidth.INT, minimum, maximum)
        return self._next_integral(minimum, maximum)

    def next_short(self, minimum: int, maximum: int) -> int:
        """Give an integer uniformly distributed across ``[minimum, maximum]`` (16-bit bounds)."""
        check_width(IntegralWidth.SHORT, minimum, maximum)
        return self._next_integral(minimum, maximum)

    def next_byte(self, minimum: int, maximum: int) -> int:
        """Give an integer uniformly distributed across ``[minimum, maximum]`` (8-bit bounds)."""
        check_width(IntegralWidth.BYTE, minimum, maximum)
        return self._next_integral(minimum, maximum)

    def next_int_below(self, n: int) -> int:
        """
        Give an integer uniformly distributed across ``[0, n)``.

        Raises:
            RangeError: If ``n`` is not positive
        """
        if n <= 0:
            raise RangeError(
                f"upper bound must be positive, got {n}", RangeType.INTEGRAL.value, 0, n
            )
        return self._next_integral(0, n - 1)

    def next_integer(self, minimum: int, maximum: int) -> int:
        """Give an integer uniformly distributed across an interval of any width."""
        return self._next_integral(minimum, maximum)

    def next_char(self, minimum: str | int, maximum: str | int) -> str:
        """
        Give a character uniformly distributed across ``[minimum, maximum]``.

        Args:
            minimum: Lower bound, as a one-character string or a code point
            maximum: Upper bound, as a one-character string or a code point

        Returns:
            A one-character string

        Raises:
            RangeError: If a bound is not a one-character string or a valid
                code point, or ``minimum > maximum``
        """
        low, high = code_points(minimum, maximum)
        return chr(self._next_integral(low, high))

    def _next_integral(self, minimum: int, maximum: int) -> int:
        if check_range(RangeType.INTEGRAL, minimum, maximum) == 0:
            return minimum
        return choose(self, minimum, maximum)

    # Bounded floating draws

    def next_double_between(self, minimum: float, maximum: float) -> float:
        """
        Give a float in ``[minimum, maximum]`` by scaling ``next_double()``.

        This naive interpolation is uniform enough for test data but is not
        uniform over representable floats for ranges spanning many orders of
        magnitude.

        Raises:
            RangeError: If ``minimum > maximum`` or a bound is not finite
        """
        return self._next_floating(minimum, maximum, self.next_double)

    def next_float_between(self, minimum: float, maximum: float) -> float:
        """Give a float in ``[minimum, maximum]`` by scaling ``next_float()``."""
        return self._next_floating(minimum, maximum, self.next_float)

    def _next_floating(self, minimum: float, maximum: float, unit) -> float:
        if check_range(RangeType.FLOAT, minimum, maximum) == 0:
            return minimum

        fraction = unit()
        span = maximum - minimum
        if math.isinf(span):
            result = minimum * (1.0 - fraction) + maximum * fraction
        else:
            result = minimum + span * fraction
        return min(max(result, minimum), maximum)


def _to_signed(value: int, bits: int) -> int:
    if value >= 1 << (bits - 1):
        return value - (1 << bits)
    return value
