# Copyright 2026 RamlGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""In-memory representation of a parsed RAML API description."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############

# Verb slots of a resource in the order they are walked during generation.
METHOD_NAMES: tuple[str, ...] = ("Get", "Post", "Head", "Put", "Delete", "Patch", "Options")


class SingleTypeExpr(BaseModel):
    """A type expression naming exactly one type (``type: Animal``)."""

    kind: Literal["single"] = "single"
    name: str


class MultipleTypeExpr(BaseModel):
    """A type expression listing several parents (``type: [Animal, Cat]``)."""

    kind: Literal["multiple"] = "multiple"
    names: list[str]


class AbsentTypeExpr(BaseModel):
    """No ``type`` facet was declared."""

    kind: Literal["absent"] = "absent"


# The raw ``type`` facet of a declaration: a single name, a list of names, or nothing.
TypeExpr = Annotated[
    SingleTypeExpr | MultipleTypeExpr | AbsentTypeExpr,
    _Field(discriminator="kind"),
]


def type_expression(raw: object) -> TypeExpr:
    """Convert a raw YAML ``type`` value into a :data:`TypeExpr`.

    ``None`` becomes :class:`AbsentTypeExpr`.  A list, or a comma-joined
    string, with at least two non-empty names becomes :class:`MultipleTypeExpr`
    with surrounding whitespace trimmed from every name.  Everything else is a
    :class:`SingleTypeExpr`.
    """
    if raw is None:
        return AbsentTypeExpr()
    if isinstance(raw, list):
        names = [str(n).strip() for n in raw if str(n).strip()]
    else:
        names = [n.strip() for n in str(raw).split(",") if n.strip()]
    if len(names) > 1:
        return MultipleTypeExpr(names=names)
    if names:
        return SingleTypeExpr(name=names[0])
    return SingleTypeExpr(name=str(raw).strip())


class Property(BaseModel):
    """A named, typed member of a declared type or of a JSON body."""

    name: str
    type: str = ""
    required: bool = True
    description: str | None = None


class DeclaredType(BaseModel):
    """A named entry of the API's type catalog.

    The ``is_*`` markers are set by the loader from the declaration's facets;
    the classifier consumes them as-is.
    """

    name: str
    type: TypeExpr = _Field(default_factory=AbsentTypeExpr)
    properties: list[Property] = _Field(default_factory=list)
    additional_properties: str = ""
    items: str = ""
    enum: list[str] = _Field(default_factory=list)
    description: str | None = None
    is_array: bool = False
    is_map: bool = False
    is_enum: bool = False
    is_union: bool = False

    def type_string(self) -> str:
        """Return the type expression as written, comma-joining multiple names."""
        if isinstance(self.type, SingleTypeExpr):
            return self.type.name
        if isinstance(self.type, MultipleTypeExpr):
            return ",".join(self.type.names)
        return ""


class Body(BaseModel):
    """The payload of a request or a response.

    Attributes:
        has_json: True when an ``application/json`` representation exists.
        properties: Properties of the JSON schema (empty for non-JSON bodies).
    """

    has_json: bool = False
    properties: list[Property] = _Field(default_factory=list)
    type: str = ""


class Response(BaseModel):
    """A response declared under a status code."""

    code: str
    description: str | None = None
    body: Body = _Field(default_factory=Body)


class Method(BaseModel):
    """An HTTP method declared on a resource."""

    verb: str
    description: str | None = None
    body: Body = _Field(default_factory=Body)
    responses: list[Response] = _Field(default_factory=list)


class Resource(BaseModel):
    """A resource node of the API tree.

    Attributes:
        uri: The relative URI segment, e.g. ``/users`` or ``/{id}``.
        methods: Declared methods keyed by their capitalised verb (``Get``, ``Post``...).
        nested: Child resources in declaration order.
    """

    uri: str
    description: str | None = None
    methods: dict[str, Method] = _Field(default_factory=dict)
    nested: list[Resource] = _Field(default_factory=list)

    def method(self, name: str) -> Method | None:
        """Return the method declared for verb *name*, or None."""
        return self.methods.get(name)


class APIDefinition(BaseModel):
    """Top-level model of a RAML document."""

    title: str = ""
    version: str | None = None
    base_uri: str | None = None
    types: dict[str, DeclaredType] = _Field(default_factory=dict)
    resources: dict[str, Resource] = _Field(default_factory=dict)


# Resolve forward references in self-referential models.
Resource.model_rebuild()
