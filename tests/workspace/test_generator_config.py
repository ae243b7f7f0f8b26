# Copyright 2026 RamlGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the generator configuration module."""

from pathlib import Path

import pytest

from ramlgen.workspace import (
    CONFIG_FILE_NAME,
    GeneratorConfig,
    GeneratorConfigError,
    default_config_text,
    load_generator_config,
)

# ###############
# Helpers
# ###############


def _write_config(tmp_path: Path, content: str) -> Path:
    """Write a configuration file and return its path."""
    config_file = tmp_path / CONFIG_FILE_NAME
    config_file.write_text(content, encoding="utf-8")
    return config_file


# ###############
# Normal Cases
# ###############


def test_empty_config_uses_defaults(tmp_path: Path) -> None:
    """An empty file yields the default configuration."""
    config = load_generator_config(_write_config(tmp_path, ""))

    assert config == GeneratorConfig()
    assert config.package == "main"
    assert config.mode == "server"
    assert config.overwrite_structs is False


def test_full_config(tmp_path: Path) -> None:
    """Every supported key is read into the matching attribute."""
    content = """\
output-directory: gen/api
package: petstore
mode: client
template-directory: templates
overwrite-structs: true
gofmt: true
"""
    config = load_generator_config(_write_config(tmp_path, content))

    assert config.output_directory == "gen/api"
    assert config.package == "petstore"
    assert config.mode == "client"
    assert config.template_directory == "templates"
    assert config.overwrite_structs is True
    assert config.gofmt is True


def test_default_config_text_round_trips(tmp_path: Path) -> None:
    """The file written by 'ramlgen init' loads back as the defaults."""
    config = load_generator_config(_write_config(tmp_path, default_config_text()))
    assert config == GeneratorConfig()


# ###############
# Error Cases
# ###############


def test_file_not_found(tmp_path: Path) -> None:
    """Loading a non-existent file raises GeneratorConfigError."""
    with pytest.raises(GeneratorConfigError, match="not found"):
        load_generator_config(tmp_path / "missing.yaml")


def test_invalid_yaml_syntax(tmp_path: Path) -> None:
    """A file with invalid YAML raises GeneratorConfigError."""
    with pytest.raises(GeneratorConfigError, match="Invalid YAML"):
        load_generator_config(_write_config(tmp_path, "package: [\nbroken yaml"))


def test_not_a_mapping(tmp_path: Path) -> None:
    """A YAML file that is not a mapping raises GeneratorConfigError."""
    with pytest.raises(GeneratorConfigError, match="must be a YAML mapping"):
        load_generator_config(_write_config(tmp_path, "- just a list\n"))


def test_unknown_key(tmp_path: Path) -> None:
    """Misspelled keys are reported instead of silently ignored."""
    with pytest.raises(GeneratorConfigError, match="unknown field.*pakage"):
        load_generator_config(_write_config(tmp_path, "pakage: petstore\n"))


def test_invalid_mode(tmp_path: Path) -> None:
    """Only server and client modes are accepted."""
    with pytest.raises(GeneratorConfigError, match="'mode'"):
        load_generator_config(_write_config(tmp_path, "mode: python\n"))


def test_package_not_a_string(tmp_path: Path) -> None:
    """A non-string package name raises GeneratorConfigError."""
    with pytest.raises(GeneratorConfigError, match="'package'"):
        load_generator_config(_write_config(tmp_path, "package: 42\n"))


def test_flag_not_a_bool(tmp_path: Path) -> None:
    """Boolean settings reject non-boolean values."""
    with pytest.raises(GeneratorConfigError, match="'gofmt'"):
        load_generator_config(_write_config(tmp_path, "gofmt: sometimes\n"))
