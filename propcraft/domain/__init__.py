"""Domain models and errors for propcraft."""

from .errors import (
    CompositionArityError,
    GeneratorConfigurationError,
    PropCraftError,
    RangeError,
)
from .models import (
    GenerationStatus,
    GeneratorSettings,
    InRange,
    Mark,
    Pair,
    Size,
    Tree,
)

__all__ = [
    "PropCraftError",
    "RangeError",
    "CompositionArityError",
    "GeneratorConfigurationError",
    "GenerationStatus",
    "GeneratorSettings",
    "InRange",
    "Mark",
    "Size",
    "Pair",
    "Tree",
]
