"""Manage configured namespace hint paths."""

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
def namespace(ctx: click.Context):
    """Manage namespace hint paths (@namespace::view)."""
    if ctx.invoked_subcommand is None:
        click.echo("\n" + ctx.get_help())
        ctx.exit()


@namespace.command(name="add")
@click.argument("name")
@click.argument("path")
@scope_options
def namespace_add(name: str, path: str, scope_flag: str | None):
    """Append PATH to the hint paths of namespace NAME."""
    scope = resolve_scope(scope_flag)
    name = name.lstrip("@#")
    AppSettings().add_namespace(name, path, scope=scope)
    console.print(f"[green]✓ Added hint[/green] {escape_markup(name)} -> {escape_markup(path)}", soft_wrap=True)
    console.print(f"  Scope: {SCOPE_LABELS[scope]}")
