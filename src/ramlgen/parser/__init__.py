# Copyright 2026 RamlGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Loading of RAML API descriptions."""

from ramlgen.parser.raml import RamlError, load_api_definition, parse_api_definition

__all__ = [
    "RamlError",
    "load_api_definition",
    "parse_api_definition",
]
