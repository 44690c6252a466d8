"""Manage configured view extensions."""

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
def extension(ctx: click.Context):
    """Manage view file extensions."""
    if ctx.invoked_subcommand is None:
        click.echo("\n" + ctx.get_help())
        ctx.exit()


@extension.command(name="add")
@click.argument("ext")
@scope_options
def extension_add(ext: str, scope_flag: str | None):
    """Register EXT with the highest search priority."""
    scope = resolve_scope(scope_flag)
    AppSettings().add_extension(ext, scope=scope)
    console.print(f"[green]✓ Added extension[/green] {escape_markup(ext.lstrip('.'))}")
    console.print(f"  Scope: {SCOPE_LABELS[scope]}")
