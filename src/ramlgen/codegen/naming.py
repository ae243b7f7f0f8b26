# Copyright 2026 RamlGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Identifier normalization for resource paths and generated structure names."""

from __future__ import annotations

import re

from ramlgen.codegen.emitter import GenerationError

# ###############
# Public Interface
# ###############

# Identifier used when a path carries no usable characters at all.
ROOT_NAME = "Root"

REQ_BODY_SUFFIX = "Req"
RESP_BODY_SUFFIX = "Resp"


def normalize_uri_title(uri: str) -> str:
    """Turn a URI into a PascalCase title.

    Every segment is stripped of path-parameter braces and split on any
    non-alphanumeric character; each resulting word gets an upper-case first
    letter and the words are concatenated in path order::

        /users/{id}          -> UsersId
        /user-groups/{gid}   -> UserGroupsGid

    An empty or separator-only URI yields :data:`ROOT_NAME`.
    """
    words = [w for w in _WORD_SPLIT_RE.split(uri) if w]
    if not words:
        return ROOT_NAME
    return "".join(_capitalize(w) for w in words)


def normalize_name(name: str) -> str:
    """Make *name* a valid exported identifier.

    Characters outside ``[A-Za-z0-9_]`` are dropped and a leading digit is
    prefixed with ``X``.
    """
    cleaned = _NON_IDENT_RE.sub("", name)
    if not cleaned:
        return ROOT_NAME
    if cleaned[0].isdigit():
        cleaned = "X" + cleaned
    return _capitalize(cleaned)


def normalize(path: str, title: str = "") -> str:
    """Return the identifier for *path* optionally followed by *title* (e.g. a method name)."""
    return normalize_name(normalize_uri_title(path) + title)


def body_struct_name(normalized_path: str, method_name: str, is_request: bool) -> str:
    """Return the name of a request or response body structure."""
    suffix = REQ_BODY_SUFFIX if is_request else RESP_BODY_SUFFIX
    return normalized_path + method_name + suffix


def field_name(prop_name: str) -> str:
    """Return the exported field name for a property (first letter capitalised)."""
    return normalize_name(prop_name)


def claim_name(seen: dict[str, str], name: str, endpoint: str) -> None:
    """Record that *endpoint* generates identifiers starting with *name*.

    Distinct endpoints can normalize to the same identifier (``/a-b`` and
    ``/a/b`` both give ``AB``); generating both would overwrite files and
    declare duplicate Go identifiers.

    Raises:
        GenerationError: If *name* was already claimed.
    """
    previous = seen.get(name)
    if previous is not None:
        raise GenerationError(f"Endpoints '{previous}' and '{endpoint}' both normalize to the name '{name}'")
    seen[name] = endpoint


# ################
# Implementation
# ################

_WORD_SPLIT_RE = re.compile(r"[^0-9A-Za-z]+")
_NON_IDENT_RE = re.compile(r"[^0-9A-Za-z_]")


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:]
