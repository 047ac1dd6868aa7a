"""
Componentized generators for composite values.

Every generator here obtains component values by calling its bound
component generators in slot order, threading the same source of randomness
through each call so that the draw sequence of the whole call tree stays
reproducible. Generators whose values may nest values of their own kind
hand a descended generation status to their components.
"""

from __future__ import annotations

import hashlib
import numbers
from collections.abc import Mapping, Set
from decimal import Decimal
from fractions import Fraction
from typing import Any

from ..domain.models import GenerationStatus, GeneratorSettings, Mark, Pair, Size, Tree
from ..ports.generator_port import GeneratorPort
from ..sampling.source import SourceOfRandomness
from .base import ComponentizedGenerator

DEFAULT_BRANCHING = 3


class PairGenerator(ComponentizedGenerator):
    """
    Produces ``Pair`` values from two component generators.

    Configured with ``Mark``, every produced pair carries the mark's label, so
    it only compares equal to pairs stamped with the same label.
    """

    accepted_settings = (Mark,)

    def __init__(self) -> None:
        super().__init__()
        self._mark: Mark | None = None

    def needed_components(self) -> int:
        return 2

    def _apply_settings(self, settings: GeneratorSettings) -> None:
        self._mark = settings

    def generate(self, random: SourceOfRandomness, status: GenerationStatus) -> Pair:
        first, second = self.component_generators()
        return Pair(
            first=first.generate(random, status),
            second=second.generate(random, status),
            mark=self._mark.label if self._mark is not None else None,
        )


class ListGenerator(ComponentizedGenerator):
    """
    Produces lists of elements from a single component generator.

    Lists may contain lists, so elements are generated one level deeper and
    a list generated with the depth budget spent is empty, whatever its
    ``Size``.
    """

    accepted_settings = (Size,)

    def __init__(self) -> None:
        super().__init__()
        self._length: Size | None = None

    def needed_components(self) -> int:
        return 1

    def _apply_settings(self, settings: GeneratorSettings) -> None:
        self._length = settings

    def generate(self, random: SourceOfRandomness, status: GenerationStatus) -> list[Any]:
        (elements,) = self.component_generators()
        if not status.can_descend():
            return []

        if self._length is not None:
            length = random.next_integer(self._length.minimum, self._length.maximum)
        else:
            length = random.next_integer(0, status.size)
        nested = status.descend()
        return [elements.generate(random, nested) for _ in range(length)]


def _canonical(value: Any) -> Any:
    """
    Reduce a value to a form whose ``repr`` is the same for equal values.

    Numbers that compare equal (``1``, ``1.0``, ``True``, ``Decimal(1)``)
    share one form, and mappings and sets are ordered by their canonical
    items. Other objects fall back to their own ``repr``, so arguments of
    those types must have a ``repr`` that follows equality.
    """
    if isinstance(value, complex):
        if value.imag == 0:
            return _canonical(value.real)
        return ("complex", _canonical(value.real), _canonical(value.imag))
    if isinstance(value, numbers.Real | Decimal):
        try:
            exact = Fraction(value)
        except (ValueError, OverflowError):
            # nan and infinities have no exact fraction
            return ("number", repr(float(value)))
        return ("number", exact.numerator, exact.denominator)
    if isinstance(value, str | bytes):
        return value
    if isinstance(value, Mapping):
        items = [(_canonical(k), _canonical(v)) for k, v in value.items()]
        return ("mapping", tuple(sorted(items, key=repr)))
    if isinstance(value, Set):
        return ("set", tuple(sorted((_canonical(item) for item in value), key=repr)))
    if isinstance(value, tuple):
        return ("tuple", tuple(_canonical(item) for item in value))
    if isinstance(value, list):
        return ("list", tuple(_canonical(item) for item in value))
    return ("object", repr(value))


class GeneratedFunction:
    """
    A pure function produced by ``FunctionGenerator``.

    The result for an argument comes from a fresh source of randomness seeded
    by a digest of the canonical form of the arguments and a per-function
    salt, so equal arguments always map to the same result.
    """

    def __init__(self, returns: GeneratorPort, status: GenerationStatus, salt: int) -> None:
        self._returns = returns
        self._status = status
        self._salt = salt

    def __call__(self, *args: Any) -> Any:
        key = repr((self._salt, _canonical(args)))
        digest = hashlib.sha256(key.encode()).digest()
        source = SourceOfRandomness.seeded(int.from_bytes(digest[:8], "big"))
        return self._returns.generate(source, self._status)

    def __repr__(self) -> str:
        return f"GeneratedFunction(returns={type(self._returns).__name__}, salt={self._salt})"


class FunctionGenerator(ComponentizedGenerator):
    """Produces pure functions whose results come from a return-value component generator."""

    def needed_components(self) -> int:
        return 1

    def generate(
        self, random: SourceOfRandomness, status: GenerationStatus
    ) -> GeneratedFunction:
        (returns,) = self.component_generators()
        return GeneratedFunction(returns, status, random.next_raw_long())


class TreeGenerator(ComponentizedGenerator):
    """
    Produces ``Tree`` values whose node values come from one component generator.

    Trees contain trees, so each nested call descends the generation status
    and nodes become leaves once the depth budget is spent. ``Size`` bounds
    the number of children per node; without it, the branching factor is at
    most ``min(status.size, DEFAULT_BRANCHING)``.
    """

    accepted_settings = (Size,)

    def __init__(self) -> None:
        super().__init__()
        self._branching: Size | None = None

    def needed_components(self) -> int:
        return 1

    def _apply_settings(self, settings: GeneratorSettings) -> None:
        self._branching = settings

    def generate(self, random: SourceOfRandomness, status: GenerationStatus) -> Tree:
        (values,) = self.component_generators()
        value = values.generate(random, status)
        if not status.can_descend():
            return Tree(value=value)

        if self._branching is not None:
            count = random.next_integer(self._branching.minimum, self._branching.maximum)
        else:
            count = random.next_integer(0, min(status.size, DEFAULT_BRANCHING))

        nested = status.descend()
        return Tree(
            value=value,
            children=tuple(self.generate(random, nested) for _ in range(count)),
        )
