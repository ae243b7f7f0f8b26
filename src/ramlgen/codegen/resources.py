# Copyright 2026 RamlGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Routing scaffolding for the resources of an API.

In server mode every top-level resource produces two files:

* ``<name>_if.go`` holds the handler interface and the route wiring.  It is
  regenerated on every run.
* ``<name>_api.go`` holds the implementation stub.  It is written only if it
  does not exist yet; after that the developer owns it.

Nested resources do not get files of their own: their handlers are added to
the interface of the top-level resource they belong to.

In client mode each top-level resource produces one ``<name>_service.go``
file, always regenerated, plus one shared client file for the package.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Literal

from ramlgen.codegen.emitter import ArtifactEmitter, GenerationReport
from ramlgen.codegen.naming import body_struct_name, claim_name, normalize, normalize_name
from ramlgen.codegen.structs import comment_lines
from ramlgen.model.api import METHOD_NAMES, APIDefinition, Method, Resource
from ramlgen.model.structs import MethodDef, ResourceDef

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

GenerationMode = Literal["server", "client"]

RESOURCE_IF_TEMPLATE = "server_resources_interface.go.jinja"
RESOURCE_API_TEMPLATE = "server_resources_api.go.jinja"
CLIENT_SERVICE_TEMPLATE = "client_service.go.jinja"
CLIENT_TEMPLATE = "client.go.jinja"


def build_resource_def(
    resource: Resource,
    resource_path: str,
    package_name: str,
    *,
    is_server: bool,
    seen: dict[str, str] | None = None,
) -> ResourceDef:
    """Build the description of *resource* and, recursively, of its nested resources.

    Args:
        resource: The resource node.
        resource_path: Concatenated URIs of the node's ancestors.
        package_name: Package of the generated code.
        is_server: True for server scaffolding, False for client code.
        seen: Handler names already claimed, mapped to their endpoint.

    Raises:
        GenerationError: If two handlers of different endpoints get the same name.
    """
    if seen is None:
        seen = {}
    endpoint = resource_path + resource.uri
    normalized_path = normalize(endpoint)
    rd = ResourceDef(
        name=normalized_path,
        endpoint=endpoint,
        package_name=package_name,
        is_server=is_server,
    )
    for method_name in METHOD_NAMES:
        method = resource.method(method_name)
        if method is not None:
            claim_name(seen, normalized_path + method_name, endpoint)
            rd.methods.append(_method_def(normalized_path, endpoint, method_name, method))
    for child in resource.nested:
        rd.children.append(build_resource_def(child, endpoint, package_name, is_server=is_server, seen=seen))
    return rd


def interface_file_name(rd: ResourceDef) -> str:
    return f"{rd.name.lower()}_if.go"


def api_file_name(rd: ResourceDef) -> str:
    return f"{rd.name.lower()}_api.go"


def service_file_name(rd: ResourceDef) -> str:
    return f"{rd.name.lower()}_service.go"


def generate_server_resource(
    rd: ResourceDef,
    directory: Path,
    emitter: ArtifactEmitter,
    report: GenerationReport,
) -> None:
    """Write the interface file (always) and the API stub (only if absent) of *rd*."""
    if_path = directory / interface_file_name(rd)
    report.record(if_path, emitter.render(rd, RESOURCE_IF_TEMPLATE, if_path, overwrite=True))

    api_path = directory / api_file_name(rd)
    report.record(api_path, emitter.render(rd, RESOURCE_API_TEMPLATE, api_path, overwrite=False))


def generate_client_resource(
    rd: ResourceDef,
    directory: Path,
    emitter: ArtifactEmitter,
    report: GenerationReport,
) -> None:
    """Write the client service file of *rd*."""
    path = directory / service_file_name(rd)
    report.record(path, emitter.render(rd, CLIENT_SERVICE_TEMPLATE, path, overwrite=True))


def generate_resources(
    api: APIDefinition,
    directory: Path,
    package_name: str,
    mode: GenerationMode,
    emitter: ArtifactEmitter,
    report: GenerationReport,
) -> list[ResourceDef]:
    """Generate the scaffolding of every top-level resource of *api*.

    Resources are processed in declaration order; generation stops at the
    first failure.

    Returns:
        The descriptions of the top-level resources processed.

    Raises:
        ValueError: If *mode* is neither ``"server"`` nor ``"client"``.
        GenerationError: If the directory or a file cannot be written, or if
            two resources normalize to the same name.
    """
    if mode not in ("server", "client"):
        raise ValueError(f"Unknown generation mode: {mode!r}")
    is_server = mode == "server"

    emitter.check_create_dir(directory)
    rds: list[ResourceDef] = []
    resource_names: dict[str, str] = {}
    handler_names: dict[str, str] = {}
    for resource in api.resources.values():
        rd = build_resource_def(resource, "", package_name, is_server=is_server, seen=handler_names)
        claim_name(resource_names, rd.name.lower(), rd.endpoint)
        logger.info("Generating %s resource %s (%d handlers)", mode, rd.endpoint, len(rd.all_methods()))
        if is_server:
            generate_server_resource(rd, directory, emitter, report)
        else:
            generate_client_resource(rd, directory, emitter, report)
        rds.append(rd)

    if not is_server:
        client_path = directory / f"client_{package_name.lower()}.go"
        client_data = {"package_name": package_name, "api": api, "resources": rds}
        report.record(client_path, emitter.render(client_data, CLIENT_TEMPLATE, client_path, overwrite=True))
    return rds


# ################
# Implementation
# ################


def _method_def(normalized_path: str, endpoint: str, method_name: str, method: Method) -> MethodDef:
    prefix = normalized_path + method_name
    req_body = body_struct_name(prefix, "", is_request=True) if method.body.has_json else ""
    has_json_resp = any(r.body.has_json for r in method.responses)
    resp_body = body_struct_name(prefix, "", is_request=False) if has_json_resp else ""
    return MethodDef(
        name=prefix,
        verb=method_name.upper(),
        endpoint=endpoint,
        req_body=req_body,
        resp_body=resp_body,
        description=comment_lines(method.description),
        path_params=_path_params(endpoint),
    )


def _path_params(endpoint: str) -> dict[str, str]:
    params: dict[str, str] = {}
    for raw in _PATH_PARAM_RE.findall(endpoint):
        ident = normalize_name(raw)
        params[raw] = ident[:1].lower() + ident[1:]
    return params


_PATH_PARAM_RE = re.compile(r"\{([^}]+)\}")
