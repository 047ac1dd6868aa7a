"""propcraft: random sampling and generator composition for property-based tests."""

from .domain import (
    CompositionArityError,
    GenerationStatus,
    GeneratorConfigurationError,
    InRange,
    Mark,
    Pair,
    PropCraftError,
    RangeError,
    Size,
    Tree,
)
from .generators import ComponentizedGenerator, Generator, bind
from .sampling import SourceOfRandomness

__version__ = "0.1.0"

__all__ = [
    "SourceOfRandomness",
    "GenerationStatus",
    "Generator",
    "ComponentizedGenerator",
    "bind",
    "InRange",
    "Mark",
    "Size",
    "Pair",
    "Tree",
    "PropCraftError",
    "RangeError",
    "CompositionArityError",
    "GeneratorConfigurationError",
]
