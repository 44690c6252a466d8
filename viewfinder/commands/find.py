"""Commands that resolve views and inspect the effective resolver."""

from __future__ import annotations

from pathlib import Path
from typing import NoReturn

import click
from rich.table import Table

from ..console import console
from ..console import error_console
from ..errors import ViewResolverError
from ..utils.error_format import describe_resolution_error
from ..utils.error_format import escape_markup
from .options import build_resolver
from .options import resolver_options


def report_error(ctx: click.Context, e: ViewResolverError) -> NoReturn:
    """Render a resolution error and exit with status 1."""
    error_console.print(f"[red]Error:[/red] {escape_markup(e)}", soft_wrap=True)
    for line in describe_resolution_error(e):
        error_console.print(f"[dim]{escape_markup(line)}[/dim]", soft_wrap=True)
    ctx.exit(1)


@click.command(name="find")
@click.argument("names", nargs=-1, required=True)
@resolver_options
@click.pass_context
def find(
    ctx: click.Context,
    names: tuple[str, ...],
    config_file: Path | None,
    locations: tuple[str, ...],
    prepend_locations: tuple[str, ...],
    extensions: tuple[str, ...],
    namespaces: tuple[str, ...],
):
    """Resolve view NAMES to template files.

    Prints one path per name. Namespaced views use @namespace::path.to.view.
    """
    try:
        resolver = build_resolver(config_file, locations, prepend_locations, extensions, namespaces)
        for name in names:
            click.echo(str(resolver.find(name)))
    except ViewResolverError as e:
        report_error(ctx, e)


@click.command(name="show")
@resolver_options
@click.pass_context
def show(
    ctx: click.Context,
    config_file: Path | None,
    locations: tuple[str, ...],
    prepend_locations: tuple[str, ...],
    extensions: tuple[str, ...],
    namespaces: tuple[str, ...],
):
    """Show effective locations, extensions and namespaces."""
    try:
        resolver = build_resolver(config_file, locations, prepend_locations, extensions, namespaces)
    except ViewResolverError as e:
        report_error(ctx, e)

    table = Table(title="Locations")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Path", style="cyan", overflow="fold")
    table.add_column("Exists", style="dim")
    for index, path in enumerate(resolver.paths, start=1):
        table.add_row(str(index), escape_markup(path), "yes" if path.is_dir() else "no")
    console.print(table)

    if resolver.extensions:
        console.print(f"[bold]Extensions:[/bold] {escape_markup(', '.join(resolver.extensions))}")
    else:
        console.print("[bold]Extensions:[/bold] [dim]none (exact filenames)[/dim]")

    hints = resolver.hints
    if not hints:
        console.print("[dim]No namespaces configured.[/dim]")
        return

    table = Table(title="Namespaces")
    table.add_column("Namespace", style="green")
    table.add_column("Hint paths", style="cyan", overflow="fold")
    for namespace, paths in hints.items():
        table.add_row(escape_markup(namespace), escape_markup("\n".join(str(p) for p in paths)))
    console.print(table)
