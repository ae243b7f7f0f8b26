# Copyright 2026 RamlGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Conversion of RAML type names to Go type literals."""

from __future__ import annotations

# ###############
# Public Interface
# ###############

# Go literal for a value of any shape.
ANY_TYPE = "interface{}"


def convert_to_go_type(tipe: str) -> str:
    """Convert a RAML type name into a Go type literal.

    Built-in scalars map to Go scalars, ``X[]`` maps to ``[]X`` (recursively),
    union expressions and open shapes map to :data:`ANY_TYPE`, and any other
    name is returned unchanged as a reference to another generated struct.
    """
    tipe = tipe.strip()
    if tipe.endswith("[]"):
        return "[]" + convert_to_go_type(tipe[:-2])
    if "|" in tipe:
        return convert_union(tipe)
    if tipe.startswith("(") and tipe.endswith(")"):
        return convert_to_go_type(tipe[1:-1])
    return _BUILTIN_TYPES.get(tipe.lower(), tipe)


def convert_union(raw: str) -> str:
    """Convert a union expression (``A | B``) into a Go type literal.

    Go has no sum types, so every union is represented by an open interface.
    """
    return ANY_TYPE


# ################
# Implementation
# ################

_BUILTIN_TYPES: dict[str, str] = {
    "": ANY_TYPE,
    "any": ANY_TYPE,
    "object": ANY_TYPE,
    "array": "[]" + ANY_TYPE,
    "string": "string",
    "number": "float64",
    "integer": "int",
    "boolean": "bool",
    "date-only": "string",
    "time-only": "string",
    "datetime-only": "string",
    "datetime": "string",
    "file": "string",
    "nil": ANY_TYPE,
}
