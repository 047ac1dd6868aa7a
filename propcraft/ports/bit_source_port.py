"""
Bit Source Port interface definition.

This module defines the interface for the underlying, seed-capable
generator of unpredictable bits that a SourceOfRandomness delegates to.
``random.Random`` satisfies it out of the box.
"""

from typing_extensions import Protocol, runtime_checkable


@runtime_checkable
class BitSourcePort(Protocol):
    """
    Interface for a reseedable generator of uniformly random bits.

    Every sampling operation of the engine is expressed in terms of these
    primitives, so two bit sources seeded alike and driven by the same
    call sequence yield identical outputs.
    """

    def seed(self, a: int | None = None) -> None:
        """
        Reset internal state so that subsequent output is a pure function of ``a``.

        Args:
            a: Seed value; ``None`` seeds from system entropy
        """
        ...

    def getrandbits(self, k: int) -> int:
        """
        Return a non-negative integer with ``k`` uniformly random bits.

        Args:
            k: Number of bits to draw (may be zero)

        Returns:
            Integer in the interval ``[0, 2**k)``
        """
        ...

    def random(self) -> float:
        """Return a uniform float in ``[0.0, 1.0)``."""
        ...

    def gauss(self, mu: float = 0.0, sigma: float = 1.0) -> float:
        """Return a normally distributed float."""
        ...

    def randbytes(self, n: int) -> bytes:
        """Return ``n`` uniformly random bytes."""
        ...
