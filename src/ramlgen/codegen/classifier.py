# Copyright 2026 RamlGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Classification of declared types into the structural shape they compile to.

RAML 1.0 type declarations overlap syntactically: ``type: Animal`` may be an
inheritance, a specialization, or the base of an enum depending on the other
facets present.  :func:`classify` resolves the ambiguity by checking the
categories in a fixed order and returning the first that matches:

1. multiple inheritance (``type: [A, B]``)
2. union
3. array
4. map
5. plain object (``type: object`` or no ``type`` at all)
6. enum
7. specialization (no own properties)
8. single inheritance (everything else)
"""

from __future__ import annotations

from enum import Enum

from ramlgen.model.api import AbsentTypeExpr, DeclaredType, MultipleTypeExpr

# ###############
# Public Interface
# ###############

# Type name assumed when a declaration has no ``type`` facet.
DEFAULT_TYPE = "object"


class TypeCategory(Enum):
    """Structural category of a declared type, in classification order."""

    MULTIPLE_INHERITANCE = "multiple_inheritance"
    UNION = "union"
    ARRAY = "array"
    MAP = "map"
    PLAIN_OBJECT = "plain_object"
    ENUM = "enum"
    SPECIALIZATION = "specialization"
    SINGLE_INHERITANCE = "single_inheritance"


def classify(declared: DeclaredType) -> TypeCategory:
    """Return the :class:`TypeCategory` of *declared*; the first matching rule wins."""
    if isinstance(declared.type, MultipleTypeExpr) and len(declared.type.names) > 1:
        return TypeCategory.MULTIPLE_INHERITANCE
    if declared.is_union:
        return TypeCategory.UNION
    if declared.is_array:
        return TypeCategory.ARRAY
    if declared.is_map:
        return TypeCategory.MAP
    if base_type_name(declared).lower() == DEFAULT_TYPE:
        return TypeCategory.PLAIN_OBJECT
    if declared.is_enum:
        return TypeCategory.ENUM
    if not declared.properties:
        return TypeCategory.SPECIALIZATION
    return TypeCategory.SINGLE_INHERITANCE


def base_type_name(declared: DeclaredType) -> str:
    """Return the type expression as a string, defaulting to ``object`` when absent."""
    if isinstance(declared.type, AbsentTypeExpr):
        return DEFAULT_TYPE
    return declared.type_string()

