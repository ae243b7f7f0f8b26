# Copyright 2026 RamlGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Configuration of ramlgen generation runs."""

from ramlgen.workspace.config import (
    CONFIG_FILE_NAME,
    VALID_MODES,
    GeneratorConfig,
    GeneratorConfigError,
    default_config_text,
    load_generator_config,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "VALID_MODES",
    "GeneratorConfig",
    "GeneratorConfigError",
    "default_config_text",
    "load_generator_config",
]
