# Copyright 2026 RamlGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the ramlgen command-line interface."""

import argparse
import logging
import sys
from pathlib import Path

from yachalk import chalk

from ramlgen.codegen.emitter import GenerationError
from ramlgen.codegen.formatter import FormatterError
from ramlgen.codegen.pipeline import generate_api
from ramlgen.parser.raml import RamlError, load_api_definition
from ramlgen.workspace.config import (
    CONFIG_FILE_NAME,
    GeneratorConfig,
    GeneratorConfigError,
    default_config_text,
    load_generator_config,
)

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the ramlgen CLI."""
    parser = argparse.ArgumentParser(
        prog="ramlgen",
        description="ramlgen - generate Go code from RAML API descriptions",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # init subcommand
    init_parser = subparsers.add_parser(
        "init",
        help="Write a default configuration file",
        description=f"Create a {CONFIG_FILE_NAME} file with default settings.",
    )
    init_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory to write the configuration to (default: current directory)",
    )

    # server / client subcommands
    for mode, help_text in (
        ("server", "Generate structs, handler interfaces and implementation stubs"),
        ("client", "Generate structs and client services"),
    ):
        gen_parser = subparsers.add_parser(mode, help=help_text, description=help_text + ".")
        _add_generation_arguments(gen_parser)

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _add_generation_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("ramlfile", help="RAML file describing the API")
    parser.add_argument("--dir", default=None, help="Output directory (default: from config, else '.')")
    parser.add_argument("--package", default=None, help="Go package name (default: from config, else 'main')")
    parser.add_argument(
        "--config",
        default=None,
        help=f"Configuration file (default: {CONFIG_FILE_NAME} next to the RAML file, if present)",
    )
    parser.add_argument("--gofmt", action="store_true", help="Format generated files with gofmt")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log every generated and skipped file")


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "init":
        return _cmd_init(args)
    if args.command in ("server", "client"):
        return _cmd_generate(args)
    return 0


def _cmd_init(args: argparse.Namespace) -> int:
    """Handle the init subcommand."""
    directory = Path(args.directory).resolve()

    if not directory.exists():
        print(f"Error: directory '{directory}' does not exist.", file=sys.stderr)
        return 1

    config_file = directory / CONFIG_FILE_NAME
    if config_file.exists():
        print(f"Error: configuration already exists at '{config_file}'.", file=sys.stderr)
        return 1

    config_file.write_text(default_config_text(), encoding="utf-8")
    print(f"Wrote default configuration to '{config_file}'.")
    return 0


def _cmd_generate(args: argparse.Namespace) -> int:
    """Handle the server and client subcommands."""
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    raml_file = Path(args.ramlfile).resolve()
    if not raml_file.is_file():
        print(f"Error: RAML file '{raml_file}' does not exist.", file=sys.stderr)
        return 1

    try:
        config, base_dir = _load_config(args, raml_file)
    except GeneratorConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    config.mode = args.command
    if args.dir is not None:
        config.output_directory = str(Path(args.dir).resolve())
    if args.package is not None:
        config.package = args.package
    if args.gofmt:
        config.gofmt = True

    try:
        api = load_api_definition(raml_file)
    except RamlError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Generating {config.mode} code for '{api.title or raml_file.name}' (package {config.package})...")
    try:
        report = generate_api(api, config, base_dir=base_dir)
    except (GenerationError, FormatterError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    for path in report.written:
        print(chalk.green(f"  wrote    {path}"))
    for path in report.skipped:
        print(chalk.yellow(f"  kept     {path} (already exists)"))
    print(f"Done: {len(report.written)} file(s) written, {len(report.skipped)} kept.")
    return 0


def _load_config(args: argparse.Namespace, raml_file: Path) -> tuple[GeneratorConfig, Path]:
    """Return the effective configuration and the directory relative paths resolve against.

    Raises:
        GeneratorConfigError: If an explicit or discovered configuration file is invalid.
    """
    if args.config is not None:
        config_file = Path(args.config).resolve()
        return load_generator_config(config_file), config_file.parent

    discovered = raml_file.parent / CONFIG_FILE_NAME
    if discovered.exists():
        return load_generator_config(discovered), discovered.parent
    return GeneratorConfig(), Path.cwd()
