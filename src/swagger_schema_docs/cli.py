"""Command line interface entry point."""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import click

from swagger_schema_docs.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    load_configuration,
    write_placeholder_configuration,
)
from swagger_schema_docs.doc_transformation import SchemaDocTransformer, build_documentation
from swagger_schema_docs.field_inventory import generate_inventory_workbook
from swagger_schema_docs.schema_management import (
    SchemaError,
    load_route_catalog,
    load_route_schema,
)

_PACKAGE_LOGGER_NAME = "swagger_schema_docs"


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="swagger-schema-docs")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log transformation details.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Public documentation schemas from internal route schemas."""
    if verbose:
        ctx.call_on_close(_enable_verbose_logging())


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a YAML configuration populated with the default settings."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="transform")
@click.option(
    "--input",
    "input_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to a YAML/JSON route schema",
)
@click.option(
    "--url",
    default="/",
    show_default=True,
    help="URL the route schema is registered on",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional YAML/JSON configuration file",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Write the transformed schema here instead of stdout",
)
def transform(input_path: str, url: str, config_path: str | None, output_path: str | None) -> None:
    """Transform a single route schema for documentation."""
    try:
        configuration = load_configuration(config_path)
        route = load_route_schema(input_path, url=url)
        transformed = SchemaDocTransformer(configuration.transformation).transform_route(route)
        _emit_json({"schema": transformed.schema, "url": transformed.url}, output_path)
    except (ConfigurationError, SchemaError, OSError) as exc:
        raise CliError(str(exc)) from exc


@cli.command(name="document")
@click.option(
    "--input",
    "input_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to a YAML/JSON route catalog (URL -> route schema)",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional YAML/JSON configuration file",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Write the documentation here instead of stdout",
)
def document(input_path: str, config_path: str | None, output_path: str | None) -> None:
    """Build the documentation document for a route catalog."""
    try:
        configuration = load_configuration(config_path)
        routes = load_route_catalog(input_path)
        _emit_json(build_documentation(routes, configuration), output_path)
    except (ConfigurationError, SchemaError, OSError) as exc:
        raise CliError(str(exc)) from exc


@cli.command(name="export-fields")
@click.option(
    "--input",
    "input_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to a YAML/JSON route catalog (URL -> route schema)",
)
@click.option(
    "--output",
    "output_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the field inventory workbook to write",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional YAML/JSON configuration file",
)
def export_fields(input_path: str, output_path: str, config_path: str | None) -> None:
    """Write an Excel inventory of every documented field."""
    try:
        configuration = load_configuration(config_path)
        routes = load_route_catalog(input_path)
        generate_inventory_workbook(build_documentation(routes, configuration), output_path)
    except (ConfigurationError, SchemaError, OSError, ValueError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(Path(output_path).resolve()))


def _enable_verbose_logging() -> Callable[[], None]:
    """Log package records to stderr at DEBUG; return the undo callback."""
    package_logger = logging.getLogger(_PACKAGE_LOGGER_NAME)
    previous_level = package_logger.level
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG)

    def _restore() -> None:
        package_logger.removeHandler(handler)
        package_logger.setLevel(previous_level)

    return _restore


def _emit_json(payload: Any, output_path: str | None) -> None:
    text = json.dumps(payload, indent=2, ensure_ascii=False)
    if output_path is None:
        click.echo(text)
        return
    destination = Path(output_path)
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(text + "\n", encoding="utf-8")
    click.echo(str(destination.resolve()))


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
