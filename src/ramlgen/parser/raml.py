# Copyright 2026 RamlGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Loader turning a RAML 1.0 document into an :class:`APIDefinition`.

This covers the subset of RAML the generator consumes: the type catalog,
the resource tree, methods, and the JSON bodies of requests and responses.
Traits, resource types, security schemes and ``!include`` are not supported.
"""

from __future__ import annotations

import re
from pathlib import Path

import yaml

from ramlgen.model.api import (
    METHOD_NAMES,
    APIDefinition,
    Body,
    DeclaredType,
    Method,
    Property,
    Resource,
    Response,
    SingleTypeExpr,
    type_expression,
)

# ###############
# Public Interface
# ###############

JSON_MEDIA_TYPE = "application/json"


class RamlError(Exception):
    """Raised when a RAML document cannot be read or has an unexpected shape."""


def load_api_definition(path: Path) -> APIDefinition:
    """Load and parse the RAML document at *path*.

    Raises:
        RamlError: If the file cannot be read or is not a valid RAML document.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise RamlError(f"RAML file not found: {path}") from None
    except OSError as exc:
        raise RamlError(f"Cannot read RAML file: {exc}") from exc

    return parse_api_definition(text, source_label=str(path))


def parse_api_definition(text: str, source_label: str = "<string>") -> APIDefinition:
    """Parse RAML document text into an :class:`APIDefinition`.

    Args:
        text: Raw RAML (YAML) content.
        source_label: Human-readable label used in error messages.

    Raises:
        RamlError: If the YAML is invalid or the document has an unexpected shape.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise RamlError(f"Invalid YAML in {source_label}: {exc}") from exc

    if not isinstance(data, dict):
        raise RamlError(f"{source_label}: RAML document must be a YAML mapping")

    raw_types = data.get("types") or {}
    if not isinstance(raw_types, dict):
        raise RamlError(f"{source_label}: 'types' must be a mapping")

    types = {str(name): _parse_type(str(name), raw, source_label) for name, raw in raw_types.items()}
    resources = {
        key: _parse_resource(key, value, f"{source_label}: {key}")
        for key, value in data.items()
        if isinstance(key, str) and key.startswith("/")
    }
    version = data.get("version")
    return APIDefinition(
        title=str(data.get("title") or ""),
        version=None if version is None else str(version),
        base_uri=data.get("baseUri"),
        types=types,
        resources=resources,
    )


# ################
# Implementation
# ################

_VERBS = {name.lower(): name for name in METHOD_NAMES}

# Pattern property names: ``/regex/`` or ``[name]``.
_PATTERN_PROPERTY_RE = re.compile(r"^(/.*/|\[.*\])$")

# Catalog names become Go type names verbatim.
_IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def _parse_type(name: str, raw: object, source_label: str) -> DeclaredType:
    """Parse a catalog entry, which is a bare type expression or a mapping of facets."""
    location = f"{source_label}: types.{name}"
    if not _IDENTIFIER_RE.match(name):
        raise RamlError(f"{location}: type name must be a valid identifier (letters, digits and '_')")
    if raw is None or isinstance(raw, (str, list)):
        raw = {"type": raw} if raw is not None else {}
    if not isinstance(raw, dict):
        raise RamlError(f"{location} must be a type expression or a mapping")

    raw_type = _type_value(raw.get("type", raw.get("schema")), location, allow_list=True)
    properties = _parse_properties(raw.get("properties"), location)
    additional = raw.get("additionalProperties")
    items = raw.get("items")
    if isinstance(items, dict):
        items = items.get("type")

    declared = DeclaredType(
        name=name,
        type=type_expression(raw_type),
        properties=properties,
        additional_properties=additional if isinstance(additional, str) else "",
        items=items if isinstance(items, str) else "",
        enum=[str(v) for v in raw.get("enum") or []],
        description=raw.get("description"),
    )
    _derive_markers(declared, "enum" in raw)
    return declared


def _derive_markers(declared: DeclaredType, has_enum: bool) -> None:
    """Set the array/map/enum/union markers from the declaration's facets."""
    if isinstance(declared.type, SingleTypeExpr):
        type_name = declared.type.name
        declared.is_union = "|" in type_name
        declared.is_array = type_name.endswith("[]") or type_name == "array"
    declared.is_map = bool(declared.additional_properties) or any(
        _PATTERN_PROPERTY_RE.match(p.name) for p in declared.properties
    )
    declared.is_enum = has_enum


def _parse_properties(raw: object, location: str) -> list[Property]:
    if raw is None:
        return []
    if not isinstance(raw, dict):
        raise RamlError(f"{location}: 'properties' must be a mapping")
    return [_parse_property(str(key), value, f"{location}.{key}") for key, value in raw.items()]


def _parse_property(key: str, raw: object, location: str) -> Property:
    """Parse one property; a trailing ``?`` on the name marks it optional."""
    required = not key.endswith("?")
    name = key[:-1] if not required else key
    if isinstance(raw, dict):
        tipe = _type_value(raw.get("type"), location, allow_list=False)
        if tipe is None and "properties" in raw:
            tipe = "object"
        return Property(
            name=name,
            type=tipe or "",
            required=bool(raw.get("required", required)),
            description=raw.get("description"),
        )
    return Property(name=name, type=_type_value(raw, location, allow_list=False) or "", required=required)


def _type_value(raw: object, location: str, *, allow_list: bool) -> str | list[str] | None:
    """Check the shape of a ``type`` facet and return it unchanged.

    Only type names (and, where *allow_list* is set, lists of parent names)
    are supported; inline type declarations must be moved to ``types``.

    Raises:
        RamlError: If *raw* has any other shape.
    """
    if raw is None or isinstance(raw, str):
        return raw
    if isinstance(raw, list):
        if not allow_list:
            raise RamlError(f"{location}: multiple parent types are only supported for catalog types")
        if not all(isinstance(item, str) for item in raw):
            raise RamlError(f"{location}: every parent type in 'type' must be a type name")
        return raw
    if isinstance(raw, dict):
        raise RamlError(f"{location}: inline type declarations are not supported; declare the type under 'types'")
    raise RamlError(f"{location}: 'type' must be a type name")


def _parse_resource(uri: str, raw: object, location: str) -> Resource:
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise RamlError(f"{location}: resource must be a mapping")

    resource = Resource(uri=uri, description=raw.get("description"))
    for key, value in raw.items():
        if not isinstance(key, str):
            continue
        if key.startswith("/"):
            resource.nested.append(_parse_resource(key, value, location + key))
        elif key in _VERBS:
            resource.methods[_VERBS[key]] = _parse_method(_VERBS[key], value, f"{location} {key}")
    return resource


def _parse_method(verb: str, raw: object, location: str) -> Method:
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise RamlError(f"{location}: method must be a mapping")

    raw_responses = raw.get("responses") or {}
    if not isinstance(raw_responses, dict):
        raise RamlError(f"{location}: 'responses' must be a mapping")

    responses = []
    for code, resp in raw_responses.items():
        resp = resp or {}
        if not isinstance(resp, dict):
            raise RamlError(f"{location}: response {code} must be a mapping")
        responses.append(
            Response(
                code=str(code),
                description=resp.get("description"),
                body=_parse_body(resp.get("body"), f"{location} response {code}"),
            )
        )
    return Method(
        verb=verb,
        description=raw.get("description"),
        body=_parse_body(raw.get("body"), f"{location} body"),
        responses=responses,
    )


def _parse_body(raw: object, location: str) -> Body:
    """Parse a body; only its JSON representation is retained.

    The JSON representation is the ``application/json`` entry, or the body
    itself when it declares ``type``/``properties`` without a media type.
    """
    if not isinstance(raw, dict):
        return Body()
    if JSON_MEDIA_TYPE in raw:
        json_body = raw[JSON_MEDIA_TYPE] or {}
    elif "properties" in raw or "type" in raw:
        json_body = raw
    else:
        return Body()
    if isinstance(json_body, str):
        return Body(has_json=True, type=json_body)
    if not isinstance(json_body, dict):
        raise RamlError(f"{location}: JSON body must be a type name or a mapping")
    tipe = _type_value(json_body.get("type", json_body.get("schema")), location, allow_list=False)
    return Body(
        has_json=True,
        properties=_parse_properties(json_body.get("properties"), location),
        type=tipe or "",
    )
