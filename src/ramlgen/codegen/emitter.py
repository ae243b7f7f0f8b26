# Copyright 2026 RamlGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Template rendering and the overwrite policy for generated files.

Two kinds of files are produced:

* **Scaffolding** is rendered with ``overwrite=True`` and always reflects the
  current API description.
* **Stubs** are rendered with ``overwrite=False``: they are written only when
  the target does not exist yet, because the developer owns them afterwards.

The existence test happens right before each write and is never cached, so a
re-run after a partially failed run still honours the policy.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import jinja2

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class GenerationError(Exception):
    """Raised when a directory or a generated file cannot be created."""


@dataclass
class GenerationReport:
    """Paths written and skipped during a generation run.

    Attributes:
        written: Files rendered to disk.
        skipped: Generate-once files left untouched because they already existed.
    """

    written: list[Path] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)

    def record(self, path: Path, written: bool) -> None:
        """Add *path* to the written or skipped list."""
        if written:
            self.written.append(path)
        else:
            self.skipped.append(path)


class ArtifactEmitter:
    """Renders data objects through Jinja2 templates into files.

    Args:
        template_dir: Directory searched before the bundled templates, so
            individual templates can be overridden without forking the package.
    """

    def __init__(self, template_dir: Path | None = None) -> None:
        loaders: list[jinja2.BaseLoader] = []
        if template_dir is not None:
            loaders.append(jinja2.FileSystemLoader(str(template_dir)))
        loaders.append(jinja2.PackageLoader("ramlgen", "templates"))
        self._env = jinja2.Environment(
            loader=jinja2.ChoiceLoader(loaders),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=jinja2.StrictUndefined,
        )

    def render_text(self, data: Any, template_name: str) -> str:
        """Render *template_name* with *data* exposed as ``d`` and return the text."""
        try:
            template = self._env.get_template(template_name)
            return template.render(d=data)
        except jinja2.TemplateError as exc:
            raise GenerationError(f"Cannot render template '{template_name}': {exc}") from exc

    def render(self, data: Any, template_name: str, output_path: Path, *, overwrite: bool) -> bool:
        """Render a template into *output_path*.

        Args:
            data: Object exposed to the template as ``d``.
            template_name: Name of the template to render.
            output_path: Destination file.
            overwrite: When False, an existing *output_path* is left untouched.

        Returns:
            True if the file was written, False if it was skipped.

        Raises:
            GenerationError: If rendering or writing fails.
        """
        if not overwrite and output_path.exists():
            logger.info("Skipping %s: file already exists", output_path)
            return False

        text = self.render_text(data, template_name)
        try:
            output_path.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise GenerationError(f"Cannot write '{output_path}': {exc}") from exc
        logger.debug("Wrote %s", output_path)
        return True

    def check_create_dir(self, directory: Path) -> None:
        """Create *directory* (and parents) if it does not exist.

        Raises:
            GenerationError: If the directory cannot be created.
        """
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise GenerationError(f"Cannot create directory '{directory}': {exc}") from exc
