"""Path policy and dependency injection helpers.

Libraries receive locations via injection; this module provides the CLI's
choices for where views are searched.
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

from .resolver import ViewResolver
from .settings import AppSettings
from .settings import ViewSettings

LOCATIONS_ENV = "VIEWFINDER_LOCATIONS"


def get_env_locations() -> list[Path]:
    """Locations from $VIEWFINDER_LOCATIONS (os.pathsep separated), in order."""
    value = os.environ.get(LOCATIONS_ENV, "")
    return [Path(entry) for entry in value.split(os.pathsep) if entry]


def get_view_search_paths(
    views: ViewSettings,
    locations: Iterable[str | Path] = (),
    prepend_locations: Iterable[str | Path] = (),
) -> list[Path]:
    """Get search locations in precedence order.

    Order: prepended locations, environment locations, configured ones, then
    extra locations. When all of these are empty the current directory's
    ``views/`` is used.
    """
    paths = [Path(p) for p in prepend_locations]
    paths += get_env_locations() + [Path(p) for p in views.locations]
    paths += [Path(p) for p in locations]
    if not paths:
        paths.append(Path.cwd() / "views")
    return paths


def create_view_resolver(
    settings: AppSettings | None = None,
    locations: Iterable[str | Path] = (),
    prepend_locations: Iterable[str | Path] = (),
) -> ViewResolver:
    """Create a ViewResolver configured from merged settings.

    Extra locations are searched after the configured ones, prepended
    locations before them.

    Raises:
        SettingsError: Settings files are malformed
    """
    views = (settings or AppSettings()).get_view_settings()

    resolver = ViewResolver(
        get_view_search_paths(views, locations, prepend_locations),
        views.extensions,
        auto_flush=views.auto_flush,
    )
    for namespace, hints in views.namespaces.items():
        resolver.add_namespace(namespace, hints)

    return resolver
