"""
Main CLI dispatcher for sitefs.

Usage:
    sitefs setup                         # Create content/ and layouts/
    sitefs items                         # List items
    sitefs layouts                       # List layouts
    sitefs check                         # Report every loading error
    sitefs create-item /about/ --content "..." --attr title=About
"""

from __future__ import annotations

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler

from sitefs import __version__

console = Console()


class Context:
    """Shared context for all commands."""

    def __init__(self, site_root: Path | None = None, verbose: bool = False, dry_run: bool = False):
        self.site_root = site_root
        self.verbose = verbose
        self.dry_run = dry_run
        self.console = console
        self._data_source = None

    def resolve_site_root(self) -> Path:
        from sitefs.core.config import find_site_root

        if self.site_root is None:
            self.site_root = find_site_root()
        return self.site_root

    @property
    def data_source(self):
        """Data source for the site, configured from sitefs.yaml."""
        if self._data_source is None:
            from sitefs.content.datasource import FilesystemDataSource
            from sitefs.core.config import get_paths, load_config
            from sitefs.core.events import FILE_CREATED

            root = self.resolve_site_root()
            config = load_config(get_paths(root).config_file)
            self._data_source = FilesystemDataSource(root, config)

            def _announce(event: str, path: str) -> None:
                if event == FILE_CREATED:
                    console.print(f"  [green]Created[/green] {path}")

            self._data_source.events.subscribe(_announce)
        return self._data_source


pass_context = click.make_pass_decorator(Context, ensure=True)


def configure_logging(verbose: bool) -> None:
    """Route sitefs log records through rich when verbose."""
    logger = logging.getLogger("sitefs")
    if not verbose:
        logger.setLevel(logging.WARNING)
        return
    logger.setLevel(logging.DEBUG)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=console, show_path=False))


@click.group()
@click.version_option(version=__version__, prog_name="sitefs")
@click.option(
    "--site-root",
    type=click.Path(file_okay=False, path_type=Path),
    help="Site root (default: nearest directory with sitefs.yaml)",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output")
@click.option("-n", "--dry-run", is_flag=True, help="Preview without making changes")
@click.pass_context
def main(ctx: click.Context, site_root: Path | None, verbose: bool, dry_run: bool) -> None:
    """Filesystem content tools.

    Discover items and layouts in a static site and create new ones.
    """
    configure_logging(verbose)
    ctx.obj = Context(site_root=site_root, verbose=verbose, dry_run=dry_run)

    if dry_run:
        console.print("[yellow]DRY RUN MODE - No changes will be made[/yellow]")


@main.command()
@click.pass_obj
def setup(ctx: Context) -> None:
    """Create the content and layouts directories."""
    if ctx.site_root is None:
        try:
            ctx.resolve_site_root()
        except FileNotFoundError:
            # Nothing set up yet, use cwd
            ctx.site_root = Path.cwd()

    data_source = ctx.data_source
    if not ctx.dry_run:
        data_source.setup()
    verb = "[dim]Would create[/dim]" if ctx.dry_run else "[green]Created[/green]"
    for kind_dir in (data_source.config.content_dir, data_source.config.layouts_dir):
        console.print(f"  {verb} {kind_dir}/")

    console.print()
    if ctx.dry_run:
        console.print("[yellow]DRY RUN - no changes made[/yellow]")
    else:
        console.print(f"[green]Done![/green] Site set up at {data_source.site_root}")


# Import and register commands (imports after main definition intentional)
from sitefs.content.commands import check, create_item, create_layout, items, layouts  # noqa: E402

main.add_command(items)
main.add_command(layouts)
main.add_command(check)
main.add_command(create_item)
main.add_command(create_layout)


if __name__ == "__main__":
    main()
