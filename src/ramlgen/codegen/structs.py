# Copyright 2026 RamlGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Synthesis of Go struct descriptions from catalog types and JSON bodies.

Inheritance is expressed as composition: every parent type becomes an
embedded field flagged ``is_composition``.  Arrays, maps, unions, enums and
specializations are emitted as one-line type definitions instead of
field-bearing structs.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ramlgen.codegen.classifier import DEFAULT_TYPE, TypeCategory, base_type_name, classify
from ramlgen.codegen.emitter import ArtifactEmitter, GenerationReport
from ramlgen.codegen.gotypes import convert_to_go_type, convert_union
from ramlgen.codegen.naming import body_struct_name, field_name
from ramlgen.model.api import APIDefinition, Body, DeclaredType, Property, SingleTypeExpr
from ramlgen.model.structs import FieldDef, StructDef

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

STRUCT_TEMPLATE = "struct.go.jinja"


def new_struct_def(
    name: str,
    package_name: str,
    description: str | None,
    properties: list[Property],
) -> StructDef:
    """Build a field-bearing struct description from a property list."""
    fields: dict[str, FieldDef] = {}
    for prop in properties:
        fields[prop.name] = FieldDef(
            name=field_name(prop.name),
            type=convert_to_go_type(prop.type),
            json_name=prop.name,
            required=prop.required,
        )
    return StructDef(
        name=name,
        package_name=package_name,
        description=comment_lines(description),
        fields=fields,
    )


def struct_def_from_type(declared: DeclaredType, name: str, package_name: str) -> StructDef:
    """Build the struct description of a catalog type, resolving advanced RAML types."""
    sd = new_struct_def(name, package_name, declared.description, declared.properties)
    sd.source = declared
    _StructBuilder(sd, declared).apply(classify(declared))
    return sd


def struct_def_from_body(body: Body, name_prefix: str, package_name: str, is_request: bool) -> StructDef:
    """Build the struct description of a request or response body.

    A body that only references a type (``application/json: Cat``) becomes a
    one-line definition of that type.
    """
    name = body_struct_name(name_prefix, "", is_request)
    sd = new_struct_def(name, package_name, None, body.properties)
    if not body.properties and body.type and body.type.lower() != DEFAULT_TYPE:
        sd.is_one_line_def = True
        sd.one_line_def = convert_to_go_type(body.type)
    return sd


def comment_lines(description: str | None) -> list[str]:
    """Split a description into the lines of a doc comment."""
    if not description:
        return []
    return [line.rstrip() for line in description.strip().splitlines()]


def generate_struct(
    sd: StructDef,
    directory: Path,
    emitter: ArtifactEmitter,
    report: GenerationReport,
    *,
    overwrite: bool = False,
) -> Path:
    """Render *sd* into ``<directory>/<name>.go`` and record the outcome in *report*."""
    path = directory / f"{sd.name}.go"
    written = emitter.render(sd, STRUCT_TEMPLATE, path, overwrite=overwrite)
    report.record(path, written)
    return path


def generate_structs(
    api: APIDefinition,
    directory: Path,
    package_name: str,
    emitter: ArtifactEmitter,
    report: GenerationReport,
    *,
    overwrite: bool = False,
) -> list[StructDef]:
    """Generate one struct file per entry of the API's type catalog.

    Raises:
        GenerationError: If the directory cannot be created or a file cannot be written.
    """
    emitter.check_create_dir(directory)
    structs: list[StructDef] = []
    for name, declared in api.types.items():
        sd = struct_def_from_type(declared, name, package_name)
        generate_struct(sd, directory, emitter, report, overwrite=overwrite)
        structs.append(sd)
    return structs


# ################
# Implementation
# ################


class _StructBuilder:
    """Applies the action of a :class:`TypeCategory` to a struct description."""

    def __init__(self, sd: StructDef, declared: DeclaredType) -> None:
        self._sd = sd
        self._t = declared

    def apply(self, category: TypeCategory) -> None:
        strtype = base_type_name(self._t)
        if category is TypeCategory.MULTIPLE_INHERITANCE:
            self._add_multiple_inheritance(strtype)
        elif category is TypeCategory.UNION:
            self._build_one_line(convert_union(strtype))
        elif category is TypeCategory.ARRAY:
            self._build_array(strtype)
        elif category is TypeCategory.MAP:
            self._build_map()
        elif category is TypeCategory.ENUM:
            self._build_enum()
        elif category is TypeCategory.SPECIALIZATION:
            self._build_one_line(convert_to_go_type(strtype))
        elif category is TypeCategory.SINGLE_INHERITANCE:
            self._add_composition(strtype)

    def _add_composition(self, parent: str) -> None:
        # Keyed by parent name: declaring the same parent twice yields one field.
        self._sd.fields[parent] = FieldDef(name=parent, is_composition=True)

    def _add_multiple_inheritance(self, strtype: str) -> None:
        # Compositions only; own properties are not emitted for multi-parent types.
        self._sd.fields = {}
        for parent in strtype.split(","):
            self._add_composition(parent.strip())

    def _build_array(self, strtype: str) -> None:
        if strtype.lower() == "array" and self._t.items:
            strtype = self._t.items + "[]"
        self._build_one_line(convert_to_go_type(strtype))

    def _build_map(self) -> None:
        if self._t.additional_properties:
            self._build_one_line("map[string]" + convert_to_go_type(self._t.additional_properties))
        elif len(self._t.properties) == 1:
            self._build_one_line("map[string]" + convert_to_go_type(self._t.properties[0].type))
        else:
            logger.warning("Map type '%s' has no resolvable value type; no definition emitted", self._sd.name)
            self._sd.fields = {}

    def _build_enum(self) -> None:
        if not isinstance(self._t.type, SingleTypeExpr):
            return
        self._build_one_line(convert_to_go_type(self._t.type.name))

    def _build_one_line(self, tipe: str) -> None:
        self._sd.fields = {}
        self._sd.is_one_line_def = True
        self._sd.one_line_def = tipe
