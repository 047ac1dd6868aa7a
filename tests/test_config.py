"""Tests for the configuration system."""

import os
from unittest.mock import patch

import pytest
import yaml
from pydantic import ValidationError

from propcraft.config import ConfigLoader, PropCraftConfig, load_config
from propcraft.config.loader import (
    ENV_PREFIX,
    ConfigurationError,
    read_settings_file,
    settings_from_environment,
)


@pytest.fixture
def clean_dir(tmp_path, monkeypatch):
    """Run the test from an empty directory with no PROPCRAFT_ variables set."""
    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.startswith(ENV_PREFIX):
            monkeypatch.delenv(key)
    return tmp_path


class TestPropCraftConfig:
    """Test the main PropCraftConfig model."""

    def test_default_config_creation(self):
        """Test that default configuration can be created."""
        config = PropCraftConfig()

        assert config.seed is None
        assert config.generation.size == 100
        assert config.generation.max_depth == 8
        assert config.generation.sample_size == 100
        assert config.logging.level == "INFO"

    def test_generation_validation_failure(self):
        """Test generation budget validation failures."""
        with pytest.raises(ValidationError):
            PropCraftConfig(generation={"size": -1})
        with pytest.raises(ValidationError):
            PropCraftConfig(generation={"max_depth": 1000})
        with pytest.raises(ValidationError):
            PropCraftConfig(generation={"sample_size": 0})

    def test_invalid_log_level(self):
        """Test that unknown log levels are rejected."""
        with pytest.raises(ValidationError):
            PropCraftConfig(logging={"level": "LOUD"})

    def test_extra_fields_forbidden(self):
        """Test that extra fields are forbidden."""
        with pytest.raises(ValidationError) as exc_info:
            PropCraftConfig(invalid_field="value")
        assert "Extra inputs are not permitted" in str(exc_info.value)

    def test_update_from_dict(self):
        """Test updating configuration from a dictionary."""
        config = PropCraftConfig()

        updated = config.update_from_dict({"seed": 7, "generation": {"max_depth": 2}})

        assert config.seed is None
        assert updated.seed == 7
        assert updated.generation.max_depth == 2
        assert updated.generation.size == 100

    def test_log_level_is_case_insensitive(self):
        """Test that log level names are normalized to upper case."""
        assert PropCraftConfig(logging={"level": "debug"}).logging.level == "DEBUG"


class TestConfigLoader:
    """Test the ConfigLoader class."""

    def test_load_config_no_file(self, clean_dir):
        """Test loading config when no file exists."""
        config = ConfigLoader().load_config()

        assert isinstance(config, PropCraftConfig)
        assert config.generation.size == 100

    def test_load_config_with_yaml_file(self, clean_dir):
        """Test loading config from YAML file."""
        config_file = clean_dir / "settings.yml"
        config_file.write_text(
            yaml.dump({"seed": 11, "generation": {"size": 20, "max_depth": 4}})
        )

        config = ConfigLoader(config_file).load_config()

        assert config.seed == 11
        assert config.generation.size == 20
        assert config.generation.max_depth == 4

    def test_load_default_toml_file(self, clean_dir):
        """Test discovery of the default TOML file in the working directory."""
        (clean_dir / ".propcraft.toml").write_text(
            'seed = 3\n\n[logging]\nlevel = "DEBUG"\n'
        )

        config = ConfigLoader().load_config()

        assert config.seed == 3
        assert config.logging.level == "DEBUG"

    def test_search_dir_is_used_for_discovery(self, clean_dir):
        """Test discovery in an explicit search directory."""
        project = clean_dir / "project"
        project.mkdir()
        (project / "propcraft.yaml").write_text(yaml.dump({"seed": 8}))

        loader = ConfigLoader(search_dir=project)

        assert loader.find_config_file() == project / "propcraft.yaml"
        assert loader.load_config().seed == 8

    def test_load_config_with_empty_yaml(self, clean_dir):
        """Test loading config from empty YAML file."""
        config_file = clean_dir / "empty.yml"
        config_file.write_text("")

        config = ConfigLoader(config_file).load_config()

        assert config.generation.size == 100

    def test_load_config_with_invalid_yaml(self, clean_dir):
        """Test loading config from invalid YAML file."""
        config_file = clean_dir / "broken.yml"
        config_file.write_text("invalid: yaml: content: [")

        with pytest.raises(ConfigurationError) as exc_info:
            ConfigLoader(config_file).load_config()
        assert "Invalid YAML" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, yaml.YAMLError)

    def test_load_config_with_invalid_toml(self, clean_dir):
        """Test loading config from invalid TOML file."""
        config_file = clean_dir / "broken.toml"
        config_file.write_text("seed = [")

        with pytest.raises(ConfigurationError) as exc_info:
            ConfigLoader(config_file).load_config()
        assert "Invalid TOML" in str(exc_info.value)

    @pytest.mark.parametrize(
        "name, content",
        [("list.yml", "- a\n- b\n"), ("scalar.yaml", "42\n"), ("text.yml", "just text\n")],
    )
    def test_yaml_top_level_must_be_a_table(self, clean_dir, name, content):
        """Test that a YAML document that is not a mapping is rejected cleanly."""
        config_file = clean_dir / name
        config_file.write_text(content)

        with pytest.raises(ConfigurationError) as exc_info:
            ConfigLoader(config_file).load_config()
        assert "top level must be a table" in str(exc_info.value)

    def test_unsupported_suffix_is_rejected(self, clean_dir):
        """Test that unknown settings file types raise ConfigurationError."""
        config_file = clean_dir / "settings.ini"
        config_file.write_text("[generation]\nsize = 3\n")

        with pytest.raises(ConfigurationError) as exc_info:
            read_settings_file(config_file)
        assert "Unsupported settings file" in str(exc_info.value)

    def test_missing_explicit_file_is_an_error(self, clean_dir):
        """Test that an explicitly named file must exist."""
        with pytest.raises(ConfigurationError) as exc_info:
            ConfigLoader(clean_dir / "absent.toml").load_config()
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_validation_errors_are_wrapped(self, clean_dir):
        """Test that invalid values surface as ConfigurationError."""
        with pytest.raises(ConfigurationError) as exc_info:
            ConfigLoader().load_config(overrides={"generation": {"size": -5}})
        assert isinstance(exc_info.value.__cause__, ValidationError)

    def test_load_env_config(self, clean_dir):
        """Test loading configuration from environment variables."""
        env_vars = {
            "PROPCRAFT_SEED": "1234",
            "PROPCRAFT_GENERATION__MAX_DEPTH": "3",
            "PROPCRAFT_LOGGING__RICH_TRACEBACKS": "false",
            "PROPCRAFT_LOGGING__SUPPRESS_MODULES": "asyncio, httpx",
        }

        with patch.dict(os.environ, env_vars):
            config = ConfigLoader().load_config()

        assert config.seed == 1234
        assert config.generation.max_depth == 3
        assert config.logging.rich_tracebacks is False
        assert config.logging.suppress_modules == ["asyncio", "httpx"]

    def test_explicit_environ_replaces_process_environment(self, clean_dir):
        """Test that a supplied environment mapping is read instead of os.environ."""
        with patch.dict(os.environ, {"PROPCRAFT_SEED": "1"}):
            config = ConfigLoader().load_config(environ={"PROPCRAFT_SEED": "2"})

        assert config.seed == 2

    def test_unrelated_env_variables_are_ignored(self):
        """Test that only variables naming a propcraft setting are collected."""
        settings = settings_from_environment(
            {
                "PROPCRAFT_HOME": "/opt/propcraft",
                "PROPCRAFT_GENERATION__SIZE": "7",
                "PATH": "/usr/bin",
            }
        )

        assert settings == {"generation": {"size": "7"}}

    def test_env_variable_nested_under_scalar_is_rejected(self):
        """Test that nesting beneath a scalar setting raises ConfigurationError."""
        with pytest.raises(ConfigurationError):
            settings_from_environment({"PROPCRAFT_SEED": "1", "PROPCRAFT_SEED__X": "2"})

    def test_invalid_env_value_is_wrapped(self, clean_dir):
        """Test that uncoercible environment values raise ConfigurationError."""
        with pytest.raises(ConfigurationError):
            ConfigLoader().load_config(environ={"PROPCRAFT_GENERATION__SIZE": "lots"})

    def test_override_priority(self, clean_dir):
        """Test that explicit overrides beat environment and file values."""
        (clean_dir / ".propcraft.yml").write_text(yaml.dump({"seed": 1}))

        with patch.dict(os.environ, {"PROPCRAFT_SEED": "2"}):
            config = load_config(overrides={"seed": 3})
            env_only = load_config()
        file_only = load_config()

        assert config.seed == 3
        assert env_only.seed == 2
        assert file_only.seed == 1

    def test_environment_merges_into_file_tables(self, clean_dir):
        """Test that nested layers merge rather than replace whole tables."""
        (clean_dir / ".propcraft.toml").write_text("[generation]\nsize = 12\nmax_depth = 2\n")

        config = ConfigLoader().load_config(environ={"PROPCRAFT_GENERATION__MAX_DEPTH": "5"})

        assert config.generation.size == 12
        assert config.generation.max_depth == 5
