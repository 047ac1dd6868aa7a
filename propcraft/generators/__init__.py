"""Generator base classes and built-in generators."""

from .base import ComponentizedGenerator, Generator, bind
from .composites import (
    FunctionGenerator,
    GeneratedFunction,
    ListGenerator,
    PairGenerator,
    TreeGenerator,
)
from .primitives import (
    BooleanGenerator,
    CharacterGenerator,
    FloatGenerator,
    IntegerGenerator,
    StringGenerator,
)

__all__ = [
    "Generator",
    "ComponentizedGenerator",
    "bind",
    "BooleanGenerator",
    "IntegerGenerator",
    "FloatGenerator",
    "CharacterGenerator",
    "StringGenerator",
    "PairGenerator",
    "ListGenerator",
    "FunctionGenerator",
    "GeneratedFunction",
    "TreeGenerator",
]
