# Copyright 2026 RamlGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Descriptions of the artifacts produced by the generator.

These are the data objects handed to the templates: one :class:`StructDef`
per generated structure and one :class:`ResourceDef` per top-level resource.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ramlgen.model.api import DeclaredType

# ###############
# Public Interface
# ###############


@dataclass
class FieldDef:
    """A field of a generated structure.

    Attributes:
        name: Exported field name.
        type: Target-language type literal.
        json_name: Key of the field in the JSON payload.
        required: Whether the property is mandatory.
        is_composition: True for embedded parents (inheritance via composition).
    """

    name: str
    type: str = ""
    json_name: str = ""
    required: bool = False
    is_composition: bool = False


@dataclass
class StructDef:
    """A structure to be emitted.

    A structure is either field-bearing (``fields`` populated) or a one-line
    alias (``is_one_line_def`` set and ``one_line_def`` holding the aliased
    type literal).
    """

    name: str
    package_name: str
    description: list[str] = field(default_factory=list)
    fields: dict[str, FieldDef] = field(default_factory=dict)
    one_line_def: str = ""
    is_one_line_def: bool = False
    source: DeclaredType | None = None


@dataclass
class MethodDef:
    """A handler binding derived from one method of a resource."""

    name: str
    verb: str
    endpoint: str
    req_body: str = ""
    resp_body: str = ""
    description: list[str] = field(default_factory=list)
    # URI parameter name -> identifier of the matching Go argument.
    path_params: dict[str, str] = field(default_factory=dict)


@dataclass
class ResourceDef:
    """A resource node together with its handler bindings and nested nodes."""

    name: str
    endpoint: str
    package_name: str
    is_server: bool = False
    methods: list[MethodDef] = field(default_factory=list)
    children: list[ResourceDef] = field(default_factory=list)

    def all_methods(self) -> list[MethodDef]:
        """Return this node's methods followed by its descendants', depth first."""
        result = list(self.methods)
        for child in self.children:
            result.extend(child.all_methods())
        return result

    def needs_json(self) -> bool:
        """Return True if any handler in this subtree exchanges a JSON structure."""
        return any(m.req_body or m.resp_body for m in self.all_methods())
