# Copyright 2026 RamlGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""API model and generated-artifact descriptions for ramlgen."""

from ramlgen.model.api import (
    METHOD_NAMES,
    AbsentTypeExpr,
    APIDefinition,
    Body,
    DeclaredType,
    Method,
    MultipleTypeExpr,
    Property,
    Resource,
    Response,
    SingleTypeExpr,
    TypeExpr,
    type_expression,
)
from ramlgen.model.structs import FieldDef, MethodDef, ResourceDef, StructDef

__all__ = [
    # API model
    "METHOD_NAMES",
    "AbsentTypeExpr",
    "APIDefinition",
    "Body",
    "DeclaredType",
    "Method",
    "MultipleTypeExpr",
    "Property",
    "Resource",
    "Response",
    "SingleTypeExpr",
    "TypeExpr",
    "type_expression",
    # Generated artifacts
    "FieldDef",
    "MethodDef",
    "ResourceDef",
    "StructDef",
]
