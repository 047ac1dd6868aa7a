"""
Configuration loading for propcraft.

Settings come from four layers, later layers winning:

1. model defaults (``PropCraftConfig()``);
2. one settings file, TOML or YAML, given explicitly or discovered in the
   search directory under one of ``CONFIG_FILE_NAMES``;
3. ``PROPCRAFT_*`` environment variables, ``__`` separating nested keys
   (``PROPCRAFT_GENERATION__MAX_DEPTH=4``);
4. explicit overrides passed by the caller.

Values are handed to pydantic as found; the models do the type coercion.
Anything that goes wrong surfaces as ``ConfigurationError`` chained from
its cause.
"""

from __future__ import annotations

import logging
import os
import tomllib
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any, BinaryIO

import yaml
from pydantic import ValidationError

from .models import PropCraftConfig
from .models.main import _deep_merge

logger = logging.getLogger(__name__)

ENV_PREFIX = "PROPCRAFT_"
ENV_NESTING = "__"

CONFIG_FILE_NAMES = (
    ".propcraft.toml",
    ".propcraft.yml",
    ".propcraft.yaml",
    "propcraft.toml",
    "propcraft.yml",
    "propcraft.yaml",
)


class ConfigurationError(Exception):
    """Raised when configuration loading or validation fails."""


def _parse_toml(stream: BinaryIO) -> Any:
    return tomllib.load(stream)


def _parse_yaml(stream: BinaryIO) -> Any:
    return yaml.safe_load(stream)


_PARSERS: dict[str, tuple[str, Callable[[BinaryIO], Any], tuple[type[Exception], ...]]] = {
    ".toml": ("TOML", _parse_toml, (tomllib.TOMLDecodeError, UnicodeDecodeError)),
    ".yml": ("YAML", _parse_yaml, (yaml.YAMLError,)),
    ".yaml": ("YAML", _parse_yaml, (yaml.YAMLError,)),
}


def read_settings_file(path: Path) -> dict[str, Any]:
    """
    Read one settings file into a plain dictionary.

    Args:
        path: TOML (``.toml``) or YAML (``.yml``/``.yaml``) file

    Returns:
        The top-level table; empty when the file has no content

    Raises:
        ConfigurationError: If the file cannot be read, does not parse, has
            an unknown suffix, or its top level is not a table
    """
    try:
        kind, parse, errors = _PARSERS[path.suffix.lower()]
    except KeyError:
        raise ConfigurationError(
            f"Unsupported settings file {path}: expected one of {', '.join(_PARSERS)}"
        ) from None

    try:
        with open(path, "rb") as stream:
            content = parse(stream)
    except OSError as e:
        raise ConfigurationError(f"Failed to read {path}: {e}") from e
    except errors as e:
        raise ConfigurationError(f"Invalid {kind} in {path}: {e}") from e

    if content is None:
        logger.warning("Settings file %s is empty", path)
        return {}
    if not isinstance(content, dict):
        raise ConfigurationError(
            f"Invalid {kind} in {path}: top level must be a table of settings, "
            f"got {type(content).__name__}"
        )
    return content


def settings_from_environment(environ: Mapping[str, str]) -> dict[str, Any]:
    """
    Collect ``PROPCRAFT_*`` variables into a nested settings dictionary.

    Variables whose first key is not a propcraft setting are ignored, so
    unrelated ``PROPCRAFT_`` variables in the environment do not break
    loading. Values stay strings; the config models coerce them.
    """
    known = set(PropCraftConfig.model_fields)
    settings: dict[str, Any] = {}

    for name, value in environ.items():
        if not name.startswith(ENV_PREFIX):
            continue
        keys = name[len(ENV_PREFIX) :].lower().split(ENV_NESTING)
        if keys[0] not in known:
            logger.debug("Ignoring unrelated environment variable %s", name)
            continue

        table = settings
        for key in keys[:-1]:
            table = table.setdefault(key, {})
            if not isinstance(table, dict):
                raise ConfigurationError(
                    f"Environment variable {name} nests under a setting that is not a table"
                )
        table[keys[-1]] = value

    return settings


class ConfigLoader:
    """Builds a validated ``PropCraftConfig`` from files, environment and overrides."""

    def __init__(
        self,
        config_file: str | Path | None = None,
        search_dir: str | Path | None = None,
    ):
        """
        Initialize the configuration loader.

        Args:
            config_file: Settings file to read; discovered when omitted
            search_dir: Directory searched for ``CONFIG_FILE_NAMES``;
                defaults to the working directory at load time
        """
        self.config_file = Path(config_file) if config_file else None
        self.search_dir = Path(search_dir) if search_dir else None

    def find_config_file(self) -> Path | None:
        """Return the settings file to read, or None when there is none."""
        if self.config_file is not None:
            return self.config_file

        directory = self.search_dir or Path.cwd()
        for name in CONFIG_FILE_NAMES:
            candidate = directory / name
            if candidate.is_file():
                return candidate
        return None

    def load_config(
        self,
        overrides: dict[str, Any] | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> PropCraftConfig:
        """
        Load configuration from all layers.

        Args:
            overrides: Caller-supplied settings (highest priority)
            environ: Environment to read ``PROPCRAFT_*`` variables from;
                defaults to ``os.environ``

        Returns:
            Validated propcraft configuration

        Raises:
            ConfigurationError: If any layer is unreadable or the merged
                settings do not validate
        """
        settings: dict[str, Any] = {}

        path = self.find_config_file()
        if path is not None:
            settings = _deep_merge(settings, read_settings_file(path))
            logger.debug("Loaded settings from %s", path)

        from_env = settings_from_environment(os.environ if environ is None else environ)
        if from_env:
            settings = _deep_merge(settings, from_env)
            logger.debug("Applied %s settings from the environment", ", ".join(sorted(from_env)))

        if overrides:
            settings = _deep_merge(settings, overrides)

        try:
            return PropCraftConfig(**settings)
        except ValidationError as e:
            logger.error("Configuration validation failed: %s", e)
            raise ConfigurationError(f"Configuration validation failed: {e}") from e


def load_config(
    config_file: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> PropCraftConfig:
    """Load propcraft configuration from the default layers."""
    return ConfigLoader(config_file).load_config(overrides)
