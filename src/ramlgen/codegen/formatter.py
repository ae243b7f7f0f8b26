# Copyright 2026 RamlGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Post-generation formatting of Go files with ``gofmt``."""

import subprocess
from pathlib import Path

# ###############
# Public Interface
# ###############


class FormatterError(Exception):
    """Raised when gofmt is unavailable or rejects a generated file."""


def format_go_files(paths: list[Path], *, timeout: int = 60) -> None:
    """Format *paths* in place with ``gofmt -w``.

    Non-Go files in *paths* are ignored.

    Raises:
        FormatterError: If gofmt is not on PATH, times out, or reports an error
            (usually a syntax error in a generated file).
    """
    go_files = [str(p) for p in paths if p.suffix == ".go"]
    if not go_files:
        return
    result = _run_gofmt(["-w", *go_files], timeout=timeout)
    if result.returncode != 0:
        raise FormatterError(f"gofmt failed: {result.stderr.strip()}")


# ################
# Implementation
# ################


def _run_gofmt(args: list[str], *, timeout: int) -> subprocess.CompletedProcess[str]:
    """Run gofmt and return the raw CompletedProcess result.

    Raises:
        FormatterError: If gofmt is not found on PATH or the command times out.
    """
    try:
        return subprocess.run(
            ["gofmt", *args],
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except FileNotFoundError as exc:
        raise FormatterError("gofmt executable not found on PATH") from exc
    except subprocess.TimeoutExpired as exc:
        raise FormatterError(f"gofmt timed out after {timeout}s") from exc
