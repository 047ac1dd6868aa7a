"""
Sampling Use Case - draw values from a bound generator.

This module implements a thin driver around the engine: for each run it
creates one independently seeded source of randomness and one generation
status from configuration, then invokes the generator repeatedly. Test
runner integration, generator discovery and reporting live elsewhere.
"""

from __future__ import annotations

import logging
import random
import secrets
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ..config.loader import ConfigLoader
from ..config.models import PropCraftConfig
from ..domain.models import GenerationStatus
from ..ports.bit_source_port import BitSourcePort
from ..ports.generator_port import GeneratorPort
from ..sampling.source import SourceOfRandomness

logger = logging.getLogger(__name__)


@dataclass
class SampleRun:
    """Values drawn in one run, with the seed needed to replay them."""

    seed: int
    status: GenerationStatus
    values: list[Any] = field(default_factory=list)


class SamplingUseCase:
    """Use case for drawing reproducible samples from a generator."""

    def __init__(
        self,
        config: PropCraftConfig | None = None,
        bit_source_factory: Callable[[int], BitSourcePort] = random.Random,
    ):
        """
        Initialize the use case.

        Args:
            config: propcraft configuration; defaults are used when omitted
            bit_source_factory: Builds a seeded bit source for each run
        """
        self._config = config or PropCraftConfig()
        self._bit_source_factory = bit_source_factory

    @classmethod
    def from_config_file(
        cls,
        config_file: str | Path | None = None,
        overrides: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> SamplingUseCase:
        """
        Build the use case from layered configuration.

        Settings are read from ``config_file`` (or a discovered
        ``.propcraft.toml``/``.propcraft.yml``), then ``PROPCRAFT_*``
        environment variables, then ``overrides``.

        Raises:
            ConfigurationError: If the configuration cannot be loaded
        """
        config = ConfigLoader(config_file).load_config(overrides)
        return cls(config, **kwargs)

    @property
    def config(self) -> PropCraftConfig:
        return self._config

    def new_status(self) -> GenerationStatus:
        """Build the generation status for one top-level call tree."""
        generation = self._config.generation
        return GenerationStatus(size=generation.size, max_depth=generation.max_depth)

    def new_source(self, seed: int) -> SourceOfRandomness:
        """Build a source of randomness whose output is a pure function of ``seed``."""
        return SourceOfRandomness(self._bit_source_factory(seed))

    def run(
        self,
        generator: GeneratorPort,
        count: int | None = None,
        seed: int | None = None,
    ) -> SampleRun:
        """
        Draw ``count`` values from ``generator``.

        Args:
            generator: Fully bound and configured generator
            count: Number of values; defaults to ``generation.sample_size``
            seed: Seed for this run; defaults to the configured seed, or a
                fresh one when none is configured

        Returns:
            The drawn values together with the seed and status used

        Raises:
            RangeError, CompositionArityError: Propagated from the generator
        """
        if seed is None:
            seed = self._config.seed if self._config.seed is not None else secrets.randbits(64)
        if count is None:
            count = self._config.generation.sample_size

        source = self.new_source(seed)
        status = self.new_status()
        logger.info(
            "Sampling %d value(s) from %s with seed %d",
            count,
            type(generator).__name__,
            seed,
        )

        values = [generator.generate(source, status) for _ in range(count)]
        return SampleRun(seed=seed, status=status, values=values)
