"""Manage configured search locations."""

from __future__ import annotations

import click

from ..console import console
from ..settings import AppSettings
from ..utils.error_format import escape_markup
from .options import SCOPE_LABELS
from .options import resolve_scope
from .options import scope_options


@click.group(invoke_without_command=True)
@click.pass_context
def location(ctx: click.Context):
    """Manage view search locations."""
    if ctx.invoked_subcommand is None:
        click.echo("\n" + ctx.get_help())
        ctx.exit()


@location.command(name="add")
@click.argument("path")
@scope_options
def location_add(path: str, scope_flag: str | None):
    """Append PATH to the search locations (lowest priority)."""
    scope = resolve_scope(scope_flag)
    AppSettings().add_location(path, scope=scope)
    console.print(f"[green]✓ Added location[/green] {escape_markup(path)}", soft_wrap=True)
    console.print(f"  Scope: {SCOPE_LABELS[scope]}")


@location.command(name="remove")
@click.argument("path")
@scope_options
@click.pass_context
def location_remove(ctx: click.Context, path: str, scope_flag: str | None):
    """Remove PATH from the search locations."""
    scope = resolve_scope(scope_flag)
    if not AppSettings().remove_location(path, scope=scope):
        console.print(f"[yellow]Location not configured in {scope} scope:[/yellow] {escape_markup(path)}")
        ctx.exit(1)
    console.print(f"[green]✓ Removed location[/green] {escape_markup(path)}", soft_wrap=True)
