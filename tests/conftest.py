"""Global fixtures and utilities for the propcraft test suite."""

import random
from unittest.mock import MagicMock

import pytest

from propcraft.domain.models import GenerationStatus
from propcraft.sampling.source import SourceOfRandomness


@pytest.fixture
def seeded_source():
    """Return a source of randomness with a fixed seed."""
    return SourceOfRandomness.seeded(42)


@pytest.fixture
def counting_delegate():
    """Return a real bit source wrapped in a mock that records every draw."""
    return MagicMock(wraps=random.Random(7))


@pytest.fixture
def counting_source(counting_delegate):
    """Return a source of randomness whose bit consumption can be asserted on."""
    return SourceOfRandomness(counting_delegate)


@pytest.fixture
def status():
    """Return a generation status with a modest size and depth budget."""
    return GenerationStatus(size=10, max_depth=5)
