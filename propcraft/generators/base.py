"""
Base classes for generators.

A Generator produces one value per ``generate()`` call. A
ComponentizedGenerator additionally declares a fixed arity and is handed
that many component generators, in slot order, by an external resolver
before first use. Both accept a closed set of typed settings through
``configure()``.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any, ClassVar

from ..domain.errors import CompositionArityError, GeneratorConfigurationError
from ..domain.models import GenerationStatus, GeneratorSettings
from ..ports.generator_port import GeneratorPort
from ..sampling.source import SourceOfRandomness

logger = logging.getLogger(__name__)


class Generator(ABC):
    """Produces values of one type from a source of randomness."""

    accepted_settings: ClassVar[tuple[type[GeneratorSettings], ...]] = ()

    def __init__(self) -> None:
        self._settings: dict[type[GeneratorSettings], GeneratorSettings] = {}

    @abstractmethod
    def generate(self, random: SourceOfRandomness, status: GenerationStatus) -> Any:
        """
        Produce one value.

        Args:
            random: Source of randomness for this run
            status: Size and depth budget of the current call tree

        Returns:
            The generated value
        """

    def configure(self, settings: GeneratorSettings) -> None:
        """
        Apply settings before the first ``generate()`` call.

        Each settings type is applied at most once. Re-applying equal settings
        is a no-op; applying different settings of an already applied type is
        rejected, since configuration cannot be undone.

        Raises:
            GeneratorConfigurationError: If the settings type is not accepted
                or conflicts with settings applied earlier
        """
        name = type(self).__name__
        settings_type = type(settings)
        if not isinstance(settings, self.accepted_settings):
            raise GeneratorConfigurationError(
                f"{name} does not accept {settings_type.__name__} settings"
            )

        applied = self._settings.get(settings_type)
        if applied is not None:
            if applied == settings:
                logger.debug("%s already configured with %r", name, settings)
                return
            raise GeneratorConfigurationError(
                f"{name} is already configured with {applied!r}, cannot apply {settings!r}"
            )

        self._apply_settings(settings)
        self._settings[settings_type] = settings
        logger.debug("Configured %s with %r", name, settings)

    def settings_of(self, settings_type: type[GeneratorSettings]) -> GeneratorSettings | None:
        """Return the applied settings of the given type, if any."""
        return self._settings.get(settings_type)

    def _apply_settings(self, settings: GeneratorSettings) -> None:
        """Hook for subclasses to update internal state from accepted settings."""
        pass


class ComponentizedGenerator(Generator):
    """Generator for composite values built from a fixed number of component generators."""

    def __init__(self) -> None:
        super().__init__()
        self._components: tuple[GeneratorPort, ...] | None = None

    @abstractmethod
    def needed_components(self) -> int:
        """Return the number of component generators this generator requires."""

    def add_component_generators(self, generators: Sequence[GeneratorPort]) -> None:
        """
        Bind component generators in declared slot order.

        Raises:
            CompositionArityError: If the count differs from ``needed_components()``
            GeneratorConfigurationError: If components were already bound
        """
        name = type(self).__name__
        if self._components is not None:
            raise GeneratorConfigurationError(f"{name} already has its components bound")

        bound = tuple(generators)
        expected = self.needed_components()
        if len(bound) != expected:
            raise CompositionArityError(name, expected, len(bound))

        self._components = bound
        logger.debug(
            "Bound %s to components %s",
            name,
            [type(component).__name__ for component in bound],
        )

    def is_bound(self) -> bool:
        return self._components is not None

    def component_generators(self) -> tuple[GeneratorPort, ...]:
        """
        Return the bound component generators in slot order.

        Raises:
            CompositionArityError: If no components have been bound yet
        """
        if self._components is None:
            raise CompositionArityError(type(self).__name__, self.needed_components(), 0)
        return self._components


def bind(generator: ComponentizedGenerator, *components: GeneratorPort) -> ComponentizedGenerator:
    """Bind ``components`` to ``generator`` and return it, for inline composition."""
    generator.add_component_generators(components)
    return generator
