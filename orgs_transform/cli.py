"""Command-line interface for rendering normalized organization data."""

import json
from pathlib import Path
from typing import NoReturn

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from orgs_transform.control import TransformControl
from orgs_transform.core.config import Config, load_config
from orgs_transform.core.errors import TransformError
from orgs_transform.core.interfaces import DocumentTransform
from orgs_transform.core.schemas import TransformOptions

console = Console()


def _fail(message: str) -> NoReturn:
    console.print(f"[red]Error:[/red] {escape(message)}", soft_wrap=True)
    raise SystemExit(1)


def _control(config: Config) -> TransformControl:
    return TransformControl(
        transform_type=config.transform.transform_type,
        output=config.output,
    )


@click.group()
@click.option("--config", "-c", type=click.Path(exists=True), help="Path to config file")
@click.pass_context
def main(ctx: click.Context, config: str | None) -> None:
    """Orgs Transform - Render normalized GitHub organization data."""
    ctx.ensure_object(dict)
    ctx.obj["config"] = load_config(config) if config else load_config()


@main.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("--format", "-f", "transform_type", help="Transform type (html, json, markdown, text)")
@click.option("--description/--no-description", default=None, help="Include descriptions and urls")
@click.pass_context
def render(ctx: click.Context, path: str, transform_type: str | None, description: bool | None) -> None:
    """Render a JSON file of normalized data (or a query result holding it)."""
    config: Config = ctx.obj["config"]

    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except UnicodeDecodeError as e:
        _fail(f"{path} is not UTF-8 encoded: {e}")
    except json.JSONDecodeError as e:
        _fail(f"{path} is not valid JSON: {e}")

    # Accept a full query result as well as the bare normalized node
    if isinstance(data, dict) and isinstance(data.get("normalized"), dict):
        data = data["normalized"]

    options = TransformOptions(
        description=config.transform.description if description is None else description,
        transform_type=transform_type,
    )

    try:
        result = _control(config).transform(data, options)
    except TransformError as e:
        _fail(str(e))

    click.echo(result, nl=False)


@main.command()
@click.pass_context
def formats(ctx: click.Context) -> None:
    """List available transform types."""
    config: Config = ctx.obj["config"]

    try:
        control = _control(config)
    except TransformError as e:
        _fail(str(e))

    table = Table(show_header=True, header_style="bold")
    table.add_column("Format", style="bold")
    table.add_column("Kind")
    table.add_column("Active")

    active = control.get_active_format()
    for name in control.available_formats():
        kind = "document" if isinstance(control.get_transform(name), DocumentTransform) else "categories"
        table.add_row(name, kind, "[green]✓[/green]" if name == active else "")

    console.print(table)


@main.command()
@click.option("--output", "-o", type=click.Path(), default="config.yaml", help="Output path")
@click.pass_context
def init(ctx: click.Context, output: str) -> None:
    """Generate a default configuration file."""
    config = Config()
    config.to_yaml(output)
    console.print(f"[green]✓[/green] Created {output}")


if __name__ == "__main__":
    main()
