# Copyright 2026 RamlGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the ramlgen configuration file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".ramlgen.yaml"

VALID_MODES = ("server", "client")


class GeneratorConfigError(Exception):
    """Raised when a generator configuration file is invalid or cannot be loaded."""


@dataclass
class GeneratorConfig:
    """Settings of a generation run.

    Attributes:
        output_directory: Directory receiving the generated files.
        package: Go package name of the generated code.
        mode: ``server`` for handler scaffolding, ``client`` for client code.
        template_directory: Optional directory with templates overriding the bundled ones.
        overwrite_structs: Regenerate struct files on every run instead of once.
        gofmt: Run gofmt over the generated files.
    """

    output_directory: str = "."
    package: str = "main"
    mode: str = "server"
    template_directory: str | None = None
    overwrite_structs: bool = False
    gofmt: bool = False


def load_generator_config(path: Path) -> GeneratorConfig:
    """Load and parse a ramlgen configuration file.

    Args:
        path: Path to the `.ramlgen.yaml` file.

    Returns:
        A GeneratorConfig populated from the file; absent keys keep their defaults.

    Raises:
        GeneratorConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise GeneratorConfigError(f"Config file not found: {path}") from None
    except OSError as exc:
        raise GeneratorConfigError(f"Cannot read config file: {exc}") from exc

    return _parse_generator_config(text, source_label=str(path))


def default_config_text() -> str:
    """Return the content written by ``ramlgen init``."""
    return (
        "# ramlgen configuration\n"
        "output-directory: .\n"
        "package: main\n"
        "mode: server\n"
        "overwrite-structs: false\n"
        "gofmt: false\n"
    )


# ################
# Implementation
# ################


def _parse_generator_config(text: str, source_label: str = "<string>") -> GeneratorConfig:
    """Parse configuration YAML text into a GeneratorConfig.

    Raises:
        GeneratorConfigError: If the YAML is invalid or a field has the wrong type.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise GeneratorConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise GeneratorConfigError(f"{source_label}: configuration must be a YAML mapping")

    unknown = sorted(set(data) - _KNOWN_KEYS, key=str)
    if unknown:
        raise GeneratorConfigError(f"{source_label}: unknown field(s): {', '.join(map(str, unknown))}")

    config = GeneratorConfig()
    config.output_directory = _optional_string(data, "output-directory", source_label) or config.output_directory
    config.package = _optional_string(data, "package", source_label) or config.package
    config.template_directory = _optional_string(data, "template-directory", source_label)
    config.overwrite_structs = _optional_bool(data, "overwrite-structs", source_label, config.overwrite_structs)
    config.gofmt = _optional_bool(data, "gofmt", source_label, config.gofmt)

    mode = _optional_string(data, "mode", source_label) or config.mode
    if mode not in VALID_MODES:
        raise GeneratorConfigError(f"{source_label}: 'mode' must be one of {', '.join(VALID_MODES)}, got '{mode}'")
    config.mode = mode
    return config


_KNOWN_KEYS = {"output-directory", "package", "mode", "template-directory", "overwrite-structs", "gofmt"}


def _optional_string(mapping: dict[str, object], key: str, source_label: str) -> str | None:
    """Extract an optional string field, raising GeneratorConfigError on a wrong type."""
    if key not in mapping or mapping[key] is None:
        return None
    value = mapping[key]
    if not isinstance(value, str):
        raise GeneratorConfigError(f"{source_label}: '{key}' must be a string")
    return value


def _optional_bool(mapping: dict[str, object], key: str, source_label: str, default: bool) -> bool:
    """Extract an optional boolean field, raising GeneratorConfigError on a wrong type."""
    if key not in mapping:
        return default
    value = mapping[key]
    if not isinstance(value, bool):
        raise GeneratorConfigError(f"{source_label}: '{key}' must be true or false")
    return value
