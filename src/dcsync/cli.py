"""CLI interface for dcsync - content type schema synchronization."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import click

from .client import DynamicContentClient
from .commands.content_type_schema import handler as import_handler
from .commands.content_type_schema import render_schema
from .config import Settings, default_config_path, load_settings, save_settings
from .errors import DcsyncError
from .utils import console


def _settings_from_context(ctx: click.Context) -> Settings:
    obj: Dict[str, Any] = ctx.obj or {}
    return load_settings(obj.get("config_path"), obj.get("overrides"))


def _fail(e: DcsyncError) -> None:
    console.print(str(e), style="bold red", markup=False, highlight=False)
    raise SystemExit(1)


@click.group()
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to the YAML configuration file (default: ~/.dcsync/config.yml)",
)
@click.option("--client-id", default=None, help="API client id")
@click.option("--client-secret", default=None, help="API client secret")
@click.option("--hub-id", default=None, help="Hub to operate on")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
@click.pass_context
def cli(
    ctx: click.Context,
    config_path: Optional[Path],
    client_id: Optional[str],
    client_secret: Optional[str],
    hub_id: Optional[str],
    verbose: bool,
) -> None:
    """Synchronize content type schemas with a Dynamic Content hub."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)
    ctx.obj = {
        "config_path": config_path,
        "overrides": {
            "client_id": client_id,
            "client_secret": client_secret,
            "hub_id": hub_id,
        },
    }


@cli.command("configure")
@click.pass_context
def configure_cmd(ctx: click.Context) -> None:
    """
    Save the hub credentials given as global options to the config file.

    Values already present in the file or environment are kept unless
    overridden on the command line.
    """
    settings = _settings_from_context(ctx)
    try:
        settings.require_hub()
    except DcsyncError as e:
        _fail(e)
    path = (ctx.obj or {}).get("config_path") or default_config_path()
    save_settings(path, settings)
    console.print(f"Saved configuration to {path}", style="green")


@cli.group("content-type-schema")
def content_type_schema() -> None:
    """Manage content type schemas."""
    pass


@content_type_schema.command("import")
@click.argument("dir", type=click.Path(file_okay=False, path_type=Path))
@click.pass_context
def import_cmd(ctx: click.Context, dir: Path) -> None:
    """
    Import content type schemas from a directory of JSON definitions.

    Each definition is matched to a stored schema by schemaId. Matches are
    updated when they differ, missing schemas are created, and a row is printed
    for each one as it completes.
    """
    try:
        import_handler(dir, _settings_from_context(ctx))
    except DcsyncError as e:
        _fail(e)


@content_type_schema.command("get")
@click.option("--id", "schema_id", required=True, help="content-type-schema ID")
@click.option("--json", "as_json", is_flag=True, default=False, help="Render as JSON")
@click.pass_context
def get_cmd(ctx: click.Context, schema_id: str, as_json: bool) -> None:
    """Get a content type schema by its hub id."""
    try:
        client = DynamicContentClient(_settings_from_context(ctx).require_hub())
        schema = client.content_type_schemas.get(schema_id)
    except DcsyncError as e:
        _fail(e)
    render_schema(schema, as_json=as_json)
