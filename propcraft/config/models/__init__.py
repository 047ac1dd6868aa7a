"""Configuration models for propcraft.

This package contains all configuration models organized by concern.
"""

from .generation import GenerationConfig
from .logs import LoggingConfig
from .main import PropCraftConfig

__all__ = [
    "PropCraftConfig",
    "GenerationConfig",
    "LoggingConfig",
]
