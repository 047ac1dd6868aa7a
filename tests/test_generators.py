"""Tests for scalar generators and the configuration hook."""

import pytest

from propcraft.domain.errors import GeneratorConfigurationError, RangeError
from propcraft.domain.models import GenerationStatus, InRange, Mark, Size
from propcraft.generators import (
    BooleanGenerator,
    CharacterGenerator,
    FloatGenerator,
    IntegerGenerator,
    StringGenerator,
)
from propcraft.sampling.source import SourceOfRandomness


def draw(generator, seed, count=50, status=None):
    """Draw ``count`` values from ``generator`` with a freshly seeded source."""
    source = SourceOfRandomness.seeded(seed)
    status = status or GenerationStatus(size=10)
    return [generator.generate(source, status) for _ in range(count)]


class TestScalarGenerators:
    """Test cases for built-in scalar generators."""

    def test_boolean_generator(self, seeded_source, status):
        generator = BooleanGenerator()
        values = {generator.generate(seeded_source, status) for _ in range(100)}
        assert values == {True, False}

    def test_integer_generator_defaults_to_32_bits(self):
        values = draw(IntegerGenerator(), seed=1, count=500)
        assert all(-(2**31) <= v <= 2**31 - 1 for v in values)

    def test_integer_generator_in_range(self):
        generator = IntegerGenerator()
        generator.configure(InRange(minimum=1, maximum=6))

        assert set(draw(generator, seed=2, count=500)) == {1, 2, 3, 4, 5, 6}

    def test_integer_generator_partial_range_keeps_default(self):
        generator = IntegerGenerator()
        generator.configure(InRange(minimum=0))

        assert generator.minimum == 0
        assert generator.maximum == 2**31 - 1

    def test_float_generator_in_range(self):
        generator = FloatGenerator()
        generator.configure(InRange(minimum=-1, maximum=1))

        values = draw(generator, seed=3, count=500)
        assert all(-1.0 <= v <= 1.0 for v in values)
        assert all(isinstance(v, float) for v in values)

    def test_character_generator_default_is_printable_ascii(self):
        values = draw(CharacterGenerator(), seed=4, count=500)
        assert all(" " <= v <= "~" for v in values)

    def test_character_generator_in_range(self):
        generator = CharacterGenerator()
        generator.configure(InRange(minimum="a", maximum="c"))

        assert set(draw(generator, seed=5, count=200)) == {"a", "b", "c"}

    def test_string_length_bounded_by_status_size(self):
        values = draw(StringGenerator(), seed=6, count=200, status=GenerationStatus(size=4))
        assert all(len(v) <= 4 for v in values)
        assert {len(v) for v in values} == {0, 1, 2, 3, 4}

    def test_string_generator_with_size_and_characters(self):
        generator = StringGenerator()
        generator.configure(Size(minimum=3, maximum=3))
        generator.configure(InRange(minimum="x", maximum="z"))

        for value in draw(generator, seed=7, count=100):
            assert len(value) == 3
            assert set(value) <= {"x", "y", "z"}


class TestConfigure:
    """Test the configuration hook shared by all generators."""

    def test_rejects_settings_it_does_not_accept(self):
        with pytest.raises(GeneratorConfigurationError) as exc_info:
            IntegerGenerator().configure(Mark())
        assert "does not accept Mark" in str(exc_info.value)

    def test_generator_without_settings_rejects_all(self):
        with pytest.raises(GeneratorConfigurationError):
            BooleanGenerator().configure(InRange(minimum=0, maximum=1))

    def test_identical_settings_are_idempotent(self):
        once = IntegerGenerator()
        once.configure(InRange(minimum=-5, maximum=5))

        twice = IntegerGenerator()
        twice.configure(InRange(minimum=-5, maximum=5))
        twice.configure(InRange(minimum=-5, maximum=5))

        assert draw(once, seed=11) == draw(twice, seed=11)
        assert twice.settings_of(InRange) == InRange(minimum=-5, maximum=5)

    def test_conflicting_settings_are_rejected(self):
        generator = IntegerGenerator()
        generator.configure(InRange(minimum=0, maximum=10))

        with pytest.raises(GeneratorConfigurationError) as exc_info:
            generator.configure(InRange(minimum=0, maximum=11))
        assert "already configured" in str(exc_info.value)
        assert generator.maximum == 10

    def test_reversed_range_fails_at_configuration(self):
        with pytest.raises(RangeError):
            IntegerGenerator().configure(InRange(minimum=9, maximum=1))

    def test_non_integral_bounds_are_rejected(self):
        with pytest.raises(GeneratorConfigurationError):
            IntegerGenerator().configure(InRange(minimum=0.5, maximum=2))

    @pytest.mark.parametrize(
        "minimum, maximum", [("ab", "c"), (65.5, 70), ("", "z"), (-3, 10)]
    )
    def test_invalid_character_bounds_are_rejected(self, minimum, maximum):
        generator = CharacterGenerator()

        with pytest.raises(RangeError) as exc_info:
            generator.configure(InRange(minimum=minimum, maximum=maximum))

        assert exc_info.value.range_type == "character"
        assert generator.settings_of(InRange) is None

    def test_failed_configuration_is_not_recorded(self):
        generator = IntegerGenerator()
        with pytest.raises(RangeError):
            generator.configure(InRange(minimum=9, maximum=1))

        generator.configure(InRange(minimum=1, maximum=9))
        assert all(1 <= v <= 9 for v in draw(generator, seed=12))
