# Copyright 2026 RamlGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Full generation run: catalog structs, body structs, then resource scaffolding."""

from __future__ import annotations

from pathlib import Path

from ramlgen.codegen.body import generate_body_structs
from ramlgen.codegen.emitter import ArtifactEmitter, GenerationReport
from ramlgen.codegen.formatter import format_go_files
from ramlgen.codegen.resources import generate_resources
from ramlgen.codegen.structs import generate_structs
from ramlgen.model.api import APIDefinition
from ramlgen.workspace.config import GeneratorConfig

# ###############
# Public Interface
# ###############


def generate_api(api: APIDefinition, config: GeneratorConfig, *, base_dir: Path) -> GenerationReport:
    """Generate all Go code for *api* according to *config*.

    Relative directories in *config* are resolved against *base_dir*.  The
    run stops at the first error; files written before it stay on disk.

    Raises:
        GenerationError: If a directory or file cannot be written.
        FormatterError: If ``config.gofmt`` is set and gofmt fails.
    """
    output_dir = base_dir / config.output_directory
    template_dir = base_dir / config.template_directory if config.template_directory else None
    emitter = ArtifactEmitter(template_dir=template_dir)
    report = GenerationReport()

    generate_structs(api, output_dir, config.package, emitter, report, overwrite=config.overwrite_structs)
    generate_body_structs(api, output_dir, config.package, emitter, report, overwrite=config.overwrite_structs)
    generate_resources(api, output_dir, config.package, config.mode, emitter, report)

    if config.gofmt:
        format_go_files(report.written)
    return report
