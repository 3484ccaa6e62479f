"""
Command-line interface for generating resource classes.

Usage:
  scim-codegen generate user-schema.json -o User.java
  scim-codegen generate --url https://example.com/Schemas/User.json
  scim-codegen validate group-schema.json
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Dict

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

from . import __version__
from .codegen import (
    GeneratorConfig,
    GeneratorError,
    InvalidSchemaError,
    SchemaError,
    generate_from_document,
    get_registry,
    load_config,
)
from .codegen.core.config import ConfigError, get_config_manager
from .logging_config import get_logger, setup_logging
from .utils import JSONLoaderError, load_schema_document

logger = get_logger(__name__)

console = Console()


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


def _add_input_args(parser: argparse.ArgumentParser) -> None:
    input_group = parser.add_mutually_exclusive_group(required=True)
    input_group.add_argument("source", nargs="?", help="Schema JSON file")
    input_group.add_argument("--url", help="URL to fetch the schema JSON from")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="scim-codegen",
        description="Generate Java resource classes from SCIM resource schemas",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  scim-codegen generate user-schema.json
  scim-codegen generate user-schema.json --package-name com.example -o User.java
  scim-codegen validate group-schema.json
        """.strip(),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )
    parser.add_argument("--log-file", metavar="FILE", help="Also write logs to FILE")

    subparsers = parser.add_subparsers(dest="command")

    generate = subparsers.add_parser(
        "generate", help="Generate a Java class from a schema"
    )
    _add_input_args(generate)
    generate.add_argument("--output", "-o", help="Output file (default: stdout)")
    generate.add_argument("--config", help="Configuration file path (JSON)")
    generate.add_argument("--package-name", "--package", help="Java package name")
    generate.add_argument(
        "--strict-types",
        action="store_true",
        help="Fail on attribute types without a Java mapping",
    )
    generate.add_argument(
        "--no-comments",
        action="store_true",
        help="Don't add attribute descriptions as comments",
    )
    generate.add_argument(
        "--skip-validation",
        action="store_true",
        help="Don't validate the schema against its meta schema",
    )
    generate.add_argument(
        "--verbose", action="store_true", help="Show generation result metadata"
    )
    generate.set_defaults(func=handle_generate)

    validate = subparsers.add_parser(
        "validate", help="Validate a schema against its meta schema"
    )
    _add_input_args(validate)
    validate.set_defaults(func=handle_validate)

    return parser


def _load_document(args: argparse.Namespace) -> Dict[str, Any]:
    """Load the schema document named on the command line."""
    try:
        return load_schema_document(file_path=args.source, url=args.url)
    except (JSONLoaderError, FileNotFoundError) as e:
        raise CLIError(f"Failed to load input: {e}") from e


def _build_config(args: argparse.Namespace) -> GeneratorConfig:
    """Build configuration from the config file and CLI arguments."""
    overrides = {}

    if args.package_name:
        overrides["package_name"] = args.package_name
    if args.strict_types:
        overrides["unknown_type_policy"] = "strict"
    if args.no_comments:
        overrides["add_comments"] = False
    if args.output:
        overrides["output_file"] = args.output

    try:
        config = load_config(custom_config=overrides, config_file=args.config)
    except ConfigError as e:
        raise CLIError(f"Configuration error: {e}") from e

    for warning in get_config_manager().validate_config(config):
        console.print(f"[yellow]⚠️  {escape(warning)}[/yellow]")

    return config


def _print_problems(error: InvalidSchemaError) -> None:
    console.print(f"[red]✗ Invalid schema:[/red] {escape(error.summary)}")
    for problem in error.problems:
        console.print(f"  [red]•[/red] {escape(problem)}", highlight=False)


def handle_generate(args: argparse.Namespace) -> int:
    """Handle the generate subcommand."""
    try:
        document = _load_document(args)
        config = _build_config(args)
        result = generate_from_document(
            document, config, registry=get_registry(), validate=not args.skip_validation
        )
    except InvalidSchemaError as e:
        _print_problems(e)
        return 1
    except (CLIError, SchemaError, GeneratorError) as e:
        console.print(f"[red]✗ Error:[/red] {escape(str(e))}")
        return 1

    if not result.success:
        console.print(
            f"[red]✗ Code generation failed:[/red] {escape(result.error_message)}"
        )
        return 1

    if config.output_file:
        output_path = Path(config.output_file)
        try:
            output_path.write_text(result.code, encoding="utf-8")
        except OSError as e:
            console.print(f"[red]✗ Failed to write to {output_path}:[/red] {escape(str(e))}")
            return 1
        console.print(
            f"[green]✓[/green] Generated class saved to [cyan]{output_path}[/cyan]"
        )
    else:
        console.print(Syntax(result.code, "java", theme="monokai"))

    if args.verbose and result.metadata:
        metadata_table = Table(
            title="📊 Generation Metadata",
            box=box.SIMPLE,
            show_header=True,
            header_style="bold cyan",
        )
        metadata_table.add_column("Property", style="bold")
        metadata_table.add_column("Value", style="green")

        for key, value in result.metadata.items():
            metadata_table.add_row(key.replace("_", " ").title(), str(value))

        console.print()
        console.print(metadata_table)

    if result.warnings:
        console.print("\n[yellow]⚠️  Warnings:[/yellow]")
        for warning in result.warnings:
            console.print(f"  [yellow]•[/yellow] {escape(warning)}")

    return 0


def handle_validate(args: argparse.Namespace) -> int:
    """Handle the validate subcommand."""
    try:
        document = _load_document(args)
        schema = get_registry().register_resource_schema(document)
    except InvalidSchemaError as e:
        _print_problems(e)
        return 1
    except CLIError as e:
        console.print(f"[red]✗ Error:[/red] {escape(str(e))}")
        return 1

    console.print(
        f"[green]✓[/green] Schema [cyan]{schema.id}[/cyan] is valid "
        f"({len(schema.attributes)} attributes)"
    )
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the scim-codegen command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level, args.log_file)

    if not getattr(args, "func", None):
        parser.print_help()
        return 1

    logger.debug("Running command %s", args.command)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
