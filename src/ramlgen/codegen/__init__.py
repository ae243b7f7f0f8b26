# Copyright 2026 RamlGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Go code generation from a parsed API definition."""

from ramlgen.codegen.body import body_struct_defs, generate_body_structs
from ramlgen.codegen.classifier import TypeCategory, classify
from ramlgen.codegen.emitter import ArtifactEmitter, GenerationError, GenerationReport
from ramlgen.codegen.formatter import FormatterError, format_go_files
from ramlgen.codegen.pipeline import generate_api
from ramlgen.codegen.resources import build_resource_def, generate_resources
from ramlgen.codegen.structs import generate_structs, struct_def_from_body, struct_def_from_type

__all__ = [
    "ArtifactEmitter",
    "FormatterError",
    "GenerationError",
    "GenerationReport",
    "TypeCategory",
    "body_struct_defs",
    "build_resource_def",
    "classify",
    "format_go_files",
    "generate_api",
    "generate_body_structs",
    "generate_resources",
    "generate_structs",
    "struct_def_from_body",
    "struct_def_from_type",
]
