#!/usr/bin/env python3
# Copyright 2026 RamlGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run all CI checks locally: format, lint, tests, a generation smoke run, and build."""

import pathlib
import subprocess
import sys
import tempfile
import time

from yachalk import chalk

# ###############
# Public Interface
# ###############

SAMPLE_RAML = "tests/data/api/petstore.raml"


def ci_steps(scratch_dir: str) -> list[tuple[str, list[str]]]:
    """Return the CI steps; generated smoke output goes below *scratch_dir*."""
    return [
        ("Format check", ["uv", "run", "ruff", "format", "--check", "src/", "tests/", "tools/"]),
        ("Lint", ["uv", "run", "ruff", "check", "src/", "tests/", "tools/"]),
        ("Tests", ["uv", "run", "pytest", "--cov=ramlgen", "--cov-report=term-missing"]),
        ("Generate server", _generate_cmd("server", scratch_dir)),
        ("Generate client", _generate_cmd("client", scratch_dir)),
        ("Build", ["uv", "build"]),
    ]


def main() -> int:
    """Run all CI steps and report results."""
    results: list[tuple[str, bool, float]] = []

    with tempfile.TemporaryDirectory(prefix="ramlgen-ci-") as scratch_dir:
        for name, cmd in ci_steps(scratch_dir):
            sep = chalk.blue("=" * 60)
            print(f"\n{sep}")
            print(chalk.blue(name))
            print(sep)
            start = time.monotonic()
            proc = subprocess.run(cmd, cwd=_repo_root())
            results.append((name, proc.returncode == 0, time.monotonic() - start))

    sep = chalk.blue("=" * 60)
    print(f"\n{sep}")
    print(chalk.blue("  Summary"))
    print(sep)
    failed = [name for name, passed, _ in results if not passed]
    for name, passed, elapsed in results:
        color = chalk.green if passed else chalk.red
        print(color(f"  {'PASS' if passed else 'FAIL'}  {name} ({elapsed:.1f}s)"))

    print()
    return 1 if failed else 0


# ################
# Implementation
# ################


def _generate_cmd(mode: str, scratch_dir: str) -> list[str]:
    out = str(pathlib.Path(scratch_dir) / mode)
    return ["uv", "run", "ramlgen", mode, SAMPLE_RAML, "--dir", out, "--package", "petstore"]


def _repo_root() -> str:
    return str(pathlib.Path(__file__).parent.parent)


if __name__ == "__main__":
    sys.exit(main())
