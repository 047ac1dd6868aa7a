"""
Domain models for the propcraft generation engine.

This module contains the value objects passed between the driver, the
source of randomness and generators: the per-call-tree generation status,
the closed set of generator settings, and the composite values built by
componentized generators. All models are immutable pydantic models.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class GenerationStatus(BaseModel):
    """
    Size and recursion budget for one generation call tree.

    The driver creates one status per top-level ``generate()`` call. Generators
    pass it unchanged to their components, or pass ``descend()`` when they
    recurse into a structure that may contain itself.
    """

    size: int = Field(
        ..., ge=0, description="Scales magnitude and length of generated values"
    )
    depth: int = Field(default=0, ge=0, description="Current recursion depth")
    max_depth: int = Field(
        default=8, ge=0, description="Deepest recursion level generators may reach"
    )

    model_config = ConfigDict(frozen=True)

    @property
    def remaining_depth(self) -> int:
        """Number of further recursion steps the budget allows."""
        return max(self.max_depth - self.depth, 0)

    def can_descend(self) -> bool:
        """Whether a generator may still recurse one level deeper."""
        return self.depth < self.max_depth

    def descend(self) -> GenerationStatus:
        """Status to hand to a nested, recursive ``generate()`` call."""
        return self.model_copy(update={"depth": self.depth + 1})


class GeneratorSettings(BaseModel):
    """Base class for the closed set of settings a generator may accept."""

    model_config = ConfigDict(frozen=True, extra="forbid")


class Mark(GeneratorSettings):
    """Stamp every composite built by the configured generator with a label."""

    label: str = Field(default="marked", min_length=1)


class InRange(GeneratorSettings):
    """Restrict a scalar generator to the closed interval ``[minimum, maximum]``.

    Either bound may be omitted to keep the generator's own default for it.
    """

    minimum: int | float | str | None = None
    maximum: int | float | str | None = None


class Size(GeneratorSettings):
    """Restrict the length of a generated collection."""

    minimum: int = Field(default=0, ge=0)
    maximum: int = Field(..., ge=0)

    @model_validator(mode="after")
    def validate_bounds(self) -> Size:
        """Ensure the minimum length does not exceed the maximum."""
        if self.minimum > self.maximum:
            raise ValueError("minimum cannot be greater than maximum")
        return self


class Pair(BaseModel):
    """
    Two-component composite value.

    Pairs compare by their components and their mark: an unmarked pair
    (``mark is None``) is equal to any other unmarked pair with equal
    components, while a marked pair only equals pairs carrying the same label.
    """

    first: Any
    second: Any
    mark: str | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def marked(self) -> bool:
        return self.mark is not None


class Tree(BaseModel):
    """Recursive composite: a value with zero or more child trees."""

    value: Any
    children: tuple[Tree, ...] = ()

    model_config = ConfigDict(frozen=True)

    def is_leaf(self) -> bool:
        return not self.children

    def height(self) -> int:
        """Number of edges on the longest path from this node to a leaf."""
        if not self.children:
            return 0
        return 1 + max(child.height() for child in self.children)

    def node_count(self) -> int:
        return 1 + sum(child.node_count() for child in self.children)
