"""Exceptions raised by view resolution and the engine registry.

All errors are terminal: nothing in viewfinder retries a lookup. Each error
carries the identifier it failed on so callers can render their own message.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path


class ViewResolverError(Exception):
    """Base class for all viewfinder errors."""


class ViewNotFoundError(ViewResolverError, LookupError):
    """Raised when no location x extension candidate exists for a view."""

    def __init__(self, name: str, searched: Sequence[Path] = ()):
        self.name = name
        self.searched = list(searched)
        super().__init__(f"View [{name}] not found.")


class InvalidViewNameError(ViewResolverError, ValueError):
    """Raised when a namespaced view name does not have exactly two segments."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"View [{name}] has an invalid name.")


class UnknownNamespaceError(ViewResolverError, LookupError):
    """Raised when a namespaced view references a namespace with no hint paths."""

    def __init__(self, namespace: str):
        self.namespace = namespace
        super().__init__(f"No hint path defined for [{namespace}].")


class UnknownEngineError(ViewResolverError, LookupError):
    """Raised when an engine is requested for a key nothing was registered under."""

    def __init__(self, engine: str):
        self.engine = engine
        super().__init__(f"Engine [{engine}] is not available.")


class SettingsError(ViewResolverError):
    """Raised when a settings file cannot be parsed or validated."""

    def __init__(self, path: Path | None, message: str):
        self.path = path
        self.message = message
        super().__init__(f"{path}: {message}" if path else message)
