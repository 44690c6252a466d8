"""Shared click options for viewfinder commands."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any
from typing import cast

import click

from ..paths import create_view_resolver
from ..resolver import ViewResolver
from ..settings import AppSettings
from ..settings import Scope

SCOPE_LABELS: dict[str, str] = {
    "local": "local (.viewfinder/settings.local.yaml)",
    "project": "project (.viewfinder/settings.yaml)",
    "global": "global (~/.viewfinder/settings.yaml)",
}


def scope_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Add --local/--project/--global flags writing to a single ``scope_flag``."""
    func = click.option(
        "--global", "scope_flag", flag_value="global", help="Store in user settings (~/.viewfinder/settings.yaml)"
    )(func)
    func = click.option(
        "--project",
        "scope_flag",
        flag_value="project",
        help="Store in project settings (.viewfinder/settings.yaml) [default]",
    )(func)
    func = click.option(
        "--local", "scope_flag", flag_value="local", help="Store in local settings (.viewfinder/settings.local.yaml)"
    )(func)
    return func


def resolver_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Add options that adjust the resolver built from settings."""
    func = click.option(
        "--namespace",
        "-n",
        "namespaces",
        multiple=True,
        metavar="NS=PATH",
        help="Add a namespace hint path (repeatable)",
    )(func)
    func = click.option(
        "--extension",
        "-e",
        "extensions",
        multiple=True,
        help="Extension to try, highest priority first (repeatable)",
    )(func)
    func = click.option(
        "--prepend-location",
        "prepend_locations",
        multiple=True,
        type=click.Path(file_okay=False),
        help="Search location with the highest priority (repeatable)",
    )(func)
    func = click.option(
        "--location",
        "-l",
        "locations",
        multiple=True,
        type=click.Path(file_okay=False),
        help="Search location with the lowest priority (repeatable)",
    )(func)
    func = click.option(
        "--config",
        "-c",
        "config_file",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        help="Extra settings file merged over the scoped settings",
    )(func)
    return func


def parse_namespace_option(value: str) -> tuple[str, str]:
    """Split a ``NS=PATH`` option value."""
    namespace, sep, hint = value.partition("=")
    if not sep or not namespace or not hint:
        raise click.BadParameter(f"expected NS=PATH, got '{value}'", param_hint="--namespace")
    return namespace.lstrip("@#"), hint


def build_resolver(
    config_file: Path | None,
    locations: tuple[str, ...],
    prepend_locations: tuple[str, ...],
    extensions: tuple[str, ...],
    namespaces: tuple[str, ...],
) -> ViewResolver:
    """Create a resolver from settings and command-line locations and overrides.

    Command-line extensions keep their given order: the first one given has
    the highest priority.
    """
    resolver = create_view_resolver(AppSettings(extra_file=config_file), locations, prepend_locations)

    for extension in reversed(extensions):
        resolver.add_extension(extension.lstrip("."))
    for value in namespaces:
        namespace, hint = parse_namespace_option(value)
        resolver.add_namespace(namespace, hint)

    return resolver


def resolve_scope(scope_flag: str | None) -> Scope:
    """Scope chosen by the flags, defaulting to project."""
    return cast(Scope, scope_flag or "project")
