"""
Generator Port interface definitions.

This module defines the contracts an external resolver or driver relies on
to bind, configure and invoke generators. Concrete generators implement them
through the base classes in ``propcraft.generators.base``.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from typing_extensions import Protocol, runtime_checkable

from ..domain.models import GenerationStatus, GeneratorSettings

if TYPE_CHECKING:
    from ..sampling.source import SourceOfRandomness


@runtime_checkable
class GeneratorPort(Protocol):
    """
    Interface for anything that can produce one value per invocation.

    Generators may hold configuration state set before first use, but must
    draw all randomness from the supplied source.
    """

    def generate(self, random: SourceOfRandomness, status: GenerationStatus) -> Any:
        """
        Produce one value.

        Args:
            random: Source of randomness for this run
            status: Size and depth budget of the current call tree

        Returns:
            The generated value

        Raises:
            RangeError: If a bounded draw receives an illegal interval
            CompositionArityError: If required components are not bound
        """
        ...

    def configure(self, settings: GeneratorSettings) -> None:
        """
        Apply settings once, before the first ``generate()`` call.

        Args:
            settings: One of the settings types the generator accepts

        Raises:
            GeneratorConfigurationError: If the settings are not accepted or
                conflict with settings already applied
        """
        ...


@runtime_checkable
class ComponentizedGeneratorPort(GeneratorPort, Protocol):
    """Interface for generators that compose values from sub-generators."""

    def needed_components(self) -> int:
        """Return the fixed number of component generators this generator requires."""
        ...

    def add_component_generators(self, generators: Sequence[GeneratorPort]) -> None:
        """
        Bind component generators in declared slot order.

        Args:
            generators: Exactly ``needed_components()`` generators

        Raises:
            CompositionArityError: If the count differs from the declared arity
        """
        ...
