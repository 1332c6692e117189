"""CLI commands for listing, checking and creating items and layouts."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Any

import click
import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from sitefs.core.errors import SiteSourceError

if TYPE_CHECKING:
    from sitefs.cli import Context
    from sitefs.content.assembler import ContentObject

console = Console()


def _parse_attrs(attrs: tuple[str, ...]) -> dict[str, Any]:
    """Parse key=value pairs; values are YAML-decoded."""
    result: dict[str, Any] = {}
    for attr in attrs:
        if "=" not in attr:
            raise click.BadParameter(f"expected key=value, got {attr!r}", param_hint="--attr")
        key, raw = attr.split("=", 1)
        try:
            result[key.strip()] = yaml.safe_load(raw) if raw else ""
        except yaml.YAMLError as e:
            raise click.BadParameter(f"invalid value for {key}: {e}", param_hint="--attr") from e
    return result


def _relative(path: str, site_root: str) -> str:
    prefix = site_root.rstrip("/") + "/"
    return path[len(prefix):] if path.startswith(prefix) else path


def _print_objects(objects: list[ContentObject], title: str, site_root: str) -> None:
    if not objects:
        console.print(f"[yellow]No {title.lower()} found[/yellow]")
        return

    table = Table(title=title)
    table.add_column("Identifier", style="cyan")
    table.add_column("Filename")
    table.add_column("Binary", style="yellow")
    table.add_column("Modified", style="dim")

    for obj in sorted(objects, key=lambda o: o.identifier):
        table.add_row(
            obj.identifier,
            _relative(obj.filename or obj.attributes.get("meta_filename") or "", site_root),
            "yes" if obj.binary else "",
            obj.mtime.strftime("%Y-%m-%d %H:%M"),
        )

    console.print(table)


def _fail(error: SiteSourceError | FileNotFoundError) -> None:
    message = error.message if isinstance(error, SiteSourceError) else str(error)
    console.print(f"[red]Error:[/red] {escape(message)}")
    sys.exit(1)


@click.command(name="items")
@click.pass_obj
def items(ctx: Context) -> None:
    """List all items in the content directory."""
    try:
        objects = ctx.data_source.items()
    except (SiteSourceError, FileNotFoundError) as e:
        _fail(e)
        return
    _print_objects(objects, "Items", ctx.data_source.site_root.as_posix())


@click.command(name="layouts")
@click.pass_obj
def layouts(ctx: Context) -> None:
    """List all layouts in the layouts directory."""
    try:
        objects = ctx.data_source.layouts()
    except (SiteSourceError, FileNotFoundError) as e:
        _fail(e)
        return
    _print_objects(objects, "Layouts", ctx.data_source.site_root.as_posix())


@click.command(name="check")
@click.pass_obj
def check(ctx: Context) -> None:
    """Load items and layouts and report every error found.

    Exits with status 1 if any object fails to load.
    """
    from sitefs.content.assembler import ObjectKind

    try:
        data_source = ctx.data_source
    except (SiteSourceError, FileNotFoundError) as e:
        _fail(e)
        return
    errors = 0
    loaded = 0

    for kind in ObjectKind:
        for result in data_source.load_results(kind):
            if result.ok:
                loaded += 1
                continue
            errors += 1
            console.print(f"[red]✗[/red] {kind.value} {result.key}: {escape(result.error.message)}")

    if errors:
        console.print(f"\n[red]{errors} error(s)[/red], {loaded} object(s) loaded")
        sys.exit(1)
    console.print(f"[green]✓[/green] {loaded} object(s) loaded without errors")


def _create(ctx: Context, create: str, identifier: str, content: str, attrs: tuple[str, ...], extension: str) -> None:
    attributes = _parse_attrs(attrs)
    if ctx.dry_run:
        console.print(f"[dim]Would create {identifier} with {len(attributes)} attribute(s)[/dim]")
        return
    try:
        getattr(ctx.data_source, create)(content, attributes, identifier, extension=extension)
    except (SiteSourceError, FileNotFoundError) as e:
        _fail(e)


_create_options = [
    click.argument("identifier"),
    click.option("-c", "--content", default="", help="Body content"),
    click.option("-a", "--attr", "attrs", multiple=True, help="Attribute as key=value (repeatable)"),
    click.option("-e", "--extension", default=".html", show_default=True, help="File extension"),
]


def _with_create_options(func):
    for option in reversed(_create_options):
        func = option(func)
    return func


@click.command(name="create-item")
@_with_create_options
@click.pass_obj
def create_item(ctx: Context, identifier: str, content: str, attrs: tuple[str, ...], extension: str) -> None:
    """Create a new item in the content directory.

    \b
    Examples:
        sitefs create-item /about/ --content "Hello" --attr title=About
        sitefs create-item / --attr "tags=[a, b]"
    """
    _create(ctx, "create_item", identifier, content, attrs, extension)


@click.command(name="create-layout")
@_with_create_options
@click.pass_obj
def create_layout(ctx: Context, identifier: str, content: str, attrs: tuple[str, ...], extension: str) -> None:
    """Create a new layout in the layouts directory."""
    _create(ctx, "create_layout", identifier, content, attrs, extension)
