"""Configuration management for propcraft."""

from .loader import ConfigLoader, ConfigurationError, load_config
from .models import GenerationConfig, LoggingConfig, PropCraftConfig

__all__ = [
    "PropCraftConfig",
    "GenerationConfig",
    "LoggingConfig",
    "ConfigLoader",
    "ConfigurationError",
    "load_config",
]
