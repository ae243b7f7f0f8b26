# Copyright 2026 RamlGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the gofmt formatting pass."""

import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from ramlgen.codegen.formatter import FormatterError, format_go_files


def _completed(returncode: int = 0, stderr: str = "") -> MagicMock:
    result = MagicMock(spec=subprocess.CompletedProcess)
    result.returncode = returncode
    result.stdout = ""
    result.stderr = stderr
    return result


def test_formats_only_go_files() -> None:
    """Only .go files are passed to gofmt -w."""
    with patch("subprocess.run", return_value=_completed()) as mock_run:
        format_go_files([Path("a.go"), Path("notes.txt"), Path("b.go")])
    args = mock_run.call_args[0][0]
    assert args == ["gofmt", "-w", "a.go", "b.go"]


def test_nothing_to_format_does_not_run_gofmt() -> None:
    """gofmt is not run when there is no Go file."""
    with patch("subprocess.run") as mock_run:
        format_go_files([Path("README.md")])
    mock_run.assert_not_called()


def test_gofmt_error_is_raised() -> None:
    """A non-zero gofmt exit raises FormatterError with its stderr."""
    with patch("subprocess.run", return_value=_completed(2, "a.go:3:1: expected declaration")):
        with pytest.raises(FormatterError, match="expected declaration"):
            format_go_files([Path("a.go")])


def test_gofmt_missing() -> None:
    """A missing gofmt executable raises FormatterError."""
    with patch("subprocess.run", side_effect=FileNotFoundError):
        with pytest.raises(FormatterError, match="not found"):
            format_go_files([Path("a.go")])


def test_gofmt_timeout() -> None:
    """A gofmt timeout raises FormatterError."""
    with patch("subprocess.run", side_effect=subprocess.TimeoutExpired(cmd="gofmt", timeout=1)):
        with pytest.raises(FormatterError, match="timed out"):
            format_go_files([Path("a.go")], timeout=1)
