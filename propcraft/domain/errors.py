"""Error taxonomy for the propcraft generation engine.

All errors are raised synchronously at the violated precondition and are
never retried inside the engine. Each error carries the structured context
that identifies which contract failed, so drivers can report it without
parsing the message.
"""

from __future__ import annotations

from typing import Any


class PropCraftError(Exception):
    """Base exception for propcraft domain errors."""

    pass


class RangeError(PropCraftError, ValueError):
    """Raised when a bounded sampling request has an illegal interval.

    Attributes:
        range_type: Name of the range family being checked (integral, float, character).
        minimum: Requested lower bound.
        maximum: Requested upper bound.
    """

    def __init__(
        self, message: str, range_type: str, minimum: Any, maximum: Any
    ) -> None:
        super().__init__(message)
        self.range_type = range_type
        self.minimum = minimum
        self.maximum = maximum


class CompositionArityError(PropCraftError, LookupError):
    """Raised when a componentized generator is bound to the wrong number of components.

    Attributes:
        generator: Name of the generator class whose arity was violated.
        expected: Number of components the generator declares it needs.
        actual: Number of components that were bound.
    """

    def __init__(self, generator: str, expected: int, actual: int) -> None:
        super().__init__(
            f"{generator} needs {expected} component generator(s), "
            f"but {actual} were bound"
        )
        self.generator = generator
        self.expected = expected
        self.actual = actual


class GeneratorConfigurationError(PropCraftError):
    """Raised when settings are not accepted by a generator or conflict with earlier settings."""

    pass
