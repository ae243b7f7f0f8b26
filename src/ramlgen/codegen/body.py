# Copyright 2026 RamlGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Generation of request and response body structs for every resource method."""

from __future__ import annotations

import logging
from pathlib import Path

from ramlgen.codegen.emitter import ArtifactEmitter, GenerationReport
from ramlgen.codegen.naming import claim_name, normalize
from ramlgen.codegen.structs import generate_struct, struct_def_from_body
from ramlgen.model.api import METHOD_NAMES, APIDefinition, Body, Method, Resource
from ramlgen.model.structs import StructDef

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def body_struct_defs(
    resource: Resource,
    resource_path: str,
    package_name: str,
    seen: dict[str, str] | None = None,
) -> list[StructDef]:
    """Collect the body structs of *resource* and all of its nested resources.

    Struct names are ``<normalized full path><Method>Req`` for request bodies
    and ``<normalized full path><Method>Resp`` for response bodies.  Bodies
    without a JSON representation are skipped.  Methods are visited in
    :data:`~ramlgen.model.api.METHOD_NAMES` order, then nested resources in
    declaration order.

    Args:
        resource: The resource node to walk.
        resource_path: Concatenated URIs of the node's ancestors.
        package_name: Package the generated structs belong to.
        seen: Struct name prefixes already claimed, mapped to the endpoint
            that claimed them.  Share one mapping across all resources of an API.

    Raises:
        GenerationError: If two different endpoints normalize to the same name.
    """
    if seen is None:
        seen = {}
    full_path = resource_path + resource.uri
    normalized_path = normalize(full_path)

    result: list[StructDef] = []
    for method_name in METHOD_NAMES:
        method = resource.method(method_name)
        if method is None:
            continue
        prefix = normalized_path + method_name
        claim_name(seen, prefix, full_path)
        result.extend(_method_body_structs(prefix, package_name, method))

    for child in resource.nested:
        result.extend(body_struct_defs(child, full_path, package_name, seen))
    return result


def generate_body_structs(
    api: APIDefinition,
    directory: Path,
    package_name: str,
    emitter: ArtifactEmitter,
    report: GenerationReport,
    *,
    overwrite: bool = False,
) -> list[StructDef]:
    """Generate a struct file for every JSON request/response body of the API.

    Raises:
        GenerationError: On the first directory or file write failure.
    """
    emitter.check_create_dir(directory)
    structs: list[StructDef] = []
    seen: dict[str, str] = {}
    for resource in api.resources.values():
        for sd in body_struct_defs(resource, "", package_name, seen):
            generate_struct(sd, directory, emitter, report, overwrite=overwrite)
            structs.append(sd)
    return structs


# ################
# Implementation
# ################


def _method_body_structs(prefix: str, package_name: str, method: Method) -> list[StructDef]:
    result: list[StructDef] = []
    if _has_json_body(method.body, prefix, "request"):
        result.append(struct_def_from_body(method.body, prefix, package_name, is_request=True))
    for response in method.responses:
        if _has_json_body(response.body, prefix, f"response {response.code}"):
            result.append(struct_def_from_body(response.body, prefix, package_name, is_request=False))
    return result


def _has_json_body(body: Body, prefix: str, label: str) -> bool:
    if not body.has_json:
        logger.debug("%s: no JSON %s body, skipped", prefix, label)
    return body.has_json
