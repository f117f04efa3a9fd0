"""Click CLI commands for flask-swagger12.

Provides the 'flask swagger' command group with 'list' and 'dump' subcommands.

Features:
- list: show each registered API group with its route count
- dump: write the resource listing and API declarations as JSON or YAML
"""

from __future__ import annotations

import click
from flask import current_app
from flask.cli import AppGroup, with_appcontext

from flask_swagger12.declaration import build_declarations, build_listing
from flask_swagger12.errors import SwaggerError
from flask_swagger12.registry import get_api_groups, get_api_info, get_dispatcher, get_settings

swagger_cli = AppGroup("swagger", help="Swagger 1.2 documentation commands.")

DEFAULT_BASE_PATH = "http://localhost:5000"


@swagger_cli.command("list")
@with_appcontext
def list_command():
    """List registered API groups."""
    groups = get_api_groups()
    if not groups:
        click.echo("[flask-swagger12] No API groups registered.")
        return
    for name, group in groups.items():
        description = f" - {group.description}" if group.description else ""
        click.echo(f"/{name} ({len(group.routes)} routes){description}")


@swagger_cli.command("dump")
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["json", "yaml"]),
    default="json",
    help="Output format.",
)
@click.option(
    "--dir",
    "-d",
    "output_dir",
    type=click.Path(),
    default=None,
    help="Output directory. Defaults to SWAGGER12_OUTPUT_DIR config.",
)
@click.option(
    "--api",
    "api_names",
    multiple=True,
    help="API group to dump (repeatable). Defaults to all groups.",
)
@click.option(
    "--base-path",
    type=str,
    default=DEFAULT_BASE_PATH,
    help="basePath written into the API declarations.",
)
@click.option(
    "--dry-run",
    is_flag=True,
    default=False,
    help="Preview output without writing files.",
)
@with_appcontext
def dump_command(output_format, output_dir, api_names, base_path, dry_run):
    """Write the resource listing and API declarations to files."""
    app = current_app._get_current_object()
    settings = get_settings(app)
    groups = get_api_groups(app)

    if output_dir is None:
        output_dir = settings.output_dir

    unknown = [name for name in api_names if name not in groups]
    if unknown:
        raise click.ClickException(f"Unknown API group(s): {', '.join(unknown)}")

    api_info = get_api_info(app)
    try:
        listing = build_listing(api_info, groups)
        declarations = build_declarations(
            api_info,
            groups,
            base_path,
            names=api_names or None,
            dispatcher=get_dispatcher(app),
        )
    except SwaggerError as e:
        raise click.ClickException(str(e))

    click.echo(f"[flask-swagger12] Built {len(declarations)} API declarations.")

    from flask_swagger12.output import get_writer

    writer = get_writer(output_format)
    if dry_run:
        click.echo("[flask-swagger12] Dry run -- no files written.")
        names = writer.write(listing, declarations, output_dir, dry_run=True)
    else:
        names = writer.write(listing, declarations, output_dir)
        click.echo(f"[flask-swagger12] Written to {output_dir}/")
    for name in names:
        click.echo(f"[flask-swagger12]   - {name}")
