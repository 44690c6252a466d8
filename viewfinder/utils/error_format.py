"""Error rendering helpers for the CLI.

Resolution errors carry the identifiers they failed on; these helpers turn
them into follow-up hints and keep view names and paths from being read as
Rich markup.
"""

from __future__ import annotations

from rich.markup import escape as _escape_markup

from ..errors import InvalidViewNameError
from ..errors import SettingsError
from ..errors import UnknownNamespaceError
from ..errors import ViewNotFoundError


def describe_resolution_error(e: BaseException) -> list[str]:
    """Return follow-up hint lines for a resolution failure."""
    if isinstance(e, ViewNotFoundError):
        if not e.searched:
            return ["No locations are configured. Add one with: viewfinder location add <path>"]
        return ["Searched:"] + [f"  {path}" for path in e.searched]
    if isinstance(e, UnknownNamespaceError):
        return [f"Register it with: viewfinder namespace add {e.namespace} <path>"]
    if isinstance(e, InvalidViewNameError):
        return ["Namespaced views look like: @namespace::path.to.view"]
    if isinstance(e, SettingsError) and e.path is not None:
        return [f"Fix or remove {e.path}"]
    return []


def escape_markup(value: object) -> str:
    """Escape a value for safe interpolation into Rich markup strings."""
    return _escape_markup(str(value))
