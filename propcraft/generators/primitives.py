"""Generators for scalar values and strings."""

from __future__ import annotations

from ..domain.errors import GeneratorConfigurationError
from ..domain.models import GenerationStatus, GeneratorSettings, InRange, Size
from ..sampling.ranges import IntegralWidth, RangeType, check_range, code_points
from ..sampling.source import SourceOfRandomness
from .base import Generator


class BooleanGenerator(Generator):
    """Produces uniformly distributed booleans."""

    def generate(self, random: SourceOfRandomness, status: GenerationStatus) -> bool:
        return random.next_boolean()


class IntegerGenerator(Generator):
    """Produces integers, by default across the signed 32-bit range."""

    accepted_settings = (InRange,)

    def __init__(self) -> None:
        super().__init__()
        self.minimum = IntegralWidth.INT.minimum
        self.maximum = IntegralWidth.INT.maximum

    def _apply_settings(self, settings: GeneratorSettings) -> None:
        minimum = self.minimum if settings.minimum is None else settings.minimum
        maximum = self.maximum if settings.maximum is None else settings.maximum
        if not isinstance(minimum, int) or not isinstance(maximum, int):
            raise GeneratorConfigurationError(
                f"IntegerGenerator needs integral bounds, got {settings!r}"
            )
        check_range(RangeType.INTEGRAL, minimum, maximum)
        self.minimum, self.maximum = minimum, maximum

    def generate(self, random: SourceOfRandomness, status: GenerationStatus) -> int:
        return random.next_integer(self.minimum, self.maximum)


class FloatGenerator(Generator):
    """Produces floats, by default in ``[0.0, 1.0]``."""

    accepted_settings = (InRange,)

    def __init__(self) -> None:
        super().__init__()
        self.minimum = 0.0
        self.maximum = 1.0

    def _apply_settings(self, settings: GeneratorSettings) -> None:
        try:
            minimum = self.minimum if settings.minimum is None else float(settings.minimum)
            maximum = self.maximum if settings.maximum is None else float(settings.maximum)
        except ValueError as e:
            raise GeneratorConfigurationError(
                f"FloatGenerator needs numeric bounds, got {settings!r}"
            ) from e
        check_range(RangeType.FLOAT, minimum, maximum)
        self.minimum, self.maximum = minimum, maximum

    def generate(self, random: SourceOfRandomness, status: GenerationStatus) -> float:
        return random.next_double_between(self.minimum, self.maximum)


class CharacterGenerator(Generator):
    """Produces one-character strings, by default printable ASCII."""

    accepted_settings = (InRange,)

    def __init__(self) -> None:
        super().__init__()
        self.minimum = ord(" ")
        self.maximum = ord("~")

    def _apply_settings(self, settings: GeneratorSettings) -> None:
        self.minimum, self.maximum = code_points(
            self.minimum if settings.minimum is None else settings.minimum,
            self.maximum if settings.maximum is None else settings.maximum,
        )

    def generate(self, random: SourceOfRandomness, status: GenerationStatus) -> str:
        return random.next_char(self.minimum, self.maximum)


class StringGenerator(Generator):
    """
    Produces strings whose length is bounded by the generation size.

    ``Size`` fixes the length interval instead; ``InRange`` restricts the
    characters used.
    """

    accepted_settings = (Size, InRange)

    def __init__(self) -> None:
        super().__init__()
        self._characters = CharacterGenerator()
        self._length: Size | None = None

    def _apply_settings(self, settings: GeneratorSettings) -> None:
        if isinstance(settings, Size):
            self._length = settings
        else:
            self._characters.configure(settings)

    def generate(self, random: SourceOfRandomness, status: GenerationStatus) -> str:
        if self._length is not None:
            length = random.next_integer(self._length.minimum, self._length.maximum)
        else:
            length = random.next_integer(0, status.size)
        return "".join(self._characters.generate(random, status) for _ in range(length))
