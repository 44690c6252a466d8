"""View resolution - map logical view names to template files.

A view name is either plain (``users.index``) or namespaced
(``@admin::users.index``). Plain names are searched across the global
locations; namespaced names are searched across the hint paths registered
for their namespace. Dots in the name become directory separators and each
registered extension is tried in priority order.

Search order is directory-major, extension-minor: every extension is tried
in a location before the next location is considered, so location priority
always outranks extension priority.

Usage contract:
- A ViewResolver holds no locks. Serialize access yourself when sharing one
  across threads or tasks; mutating it while a find() is in flight is
  undefined.
- Resolved views are cached until flush(). Changing locations, hints or
  extensions does NOT invalidate cached entries unless the resolver was
  created with auto_flush=True.
"""

from __future__ import annotations

import asyncio
import logging
import os
from collections.abc import Callable
from collections.abc import Iterable
from pathlib import Path
from typing import Protocol
from typing import runtime_checkable

from .errors import InvalidViewNameError
from .errors import UnknownNamespaceError
from .errors import ViewNotFoundError

logger = logging.getLogger(__name__)

HINT_PATH_DELIMITER = "::"

# Leading markers allowed in front of a namespace (@admin::, #admin::)
NAMESPACE_MARKERS = "@#"

ExistsCheck = Callable[[Path], bool]


def file_exists(path: Path) -> bool:
    """Default existence check: an unreadable candidate counts as absent."""
    try:
        return path.is_file()
    except OSError:
        return False


def normalize_location(location: str | Path) -> Path:
    """Canonicalize a location, keeping it as given if it does not exist yet."""
    try:
        return Path(location).resolve(strict=True)
    except (OSError, RuntimeError):
        return Path(location)


@runtime_checkable
class ViewFinderProtocol(Protocol):
    """Interface the rendering layer depends on."""

    def find(self, name: str) -> Path:
        """Get the fully qualified location of the view."""
        ...

    def add_location(self, location: str | Path) -> None:
        """Add a location to the finder."""
        ...

    def prepend_location(self, location: str | Path) -> None:
        """Prepend a location to the finder."""
        ...

    def add_namespace(self, namespace: str, hints: str | Path | Iterable[str | Path]) -> None:
        """Add a namespace hint to the finder."""
        ...

    def prepend_namespace(self, namespace: str, hints: str | Path | Iterable[str | Path]) -> None:
        """Prepend a namespace hint to the finder."""
        ...

    def add_extension(self, extension: str) -> None:
        """Add a valid view extension to the finder."""
        ...

    def has_hint_information(self, name: str) -> bool:
        """Return whether the view name has any hint information."""
        ...

    def flush(self) -> None:
        """Flush the cache of located views."""
        ...


class ViewResolver:
    """Locate view files across ordered locations, namespaces and extensions.

    Args:
        paths: Initial search locations, highest priority first
        extensions: Initial extensions (no leading dot), highest priority first.
            When empty, names are matched as exact filenames.
        auto_flush: Flush the resolved cache whenever locations, hints or
            extensions change. Off by default: callers flush explicitly.
        exists: Existence check used for every candidate. Defaults to a
            blocking filesystem query.

    Example:
        >>> resolver = ViewResolver(["templates"], ["html"])
        >>> resolver.add_namespace("admin", "admin/templates")
        >>> resolver.find("@admin::users.index")
        PosixPath('admin/templates/users/index.html')
    """

    def __init__(
        self,
        paths: Iterable[str | Path] = (),
        extensions: Iterable[str] | None = None,
        *,
        auto_flush: bool = False,
        exists: ExistsCheck | None = None,
    ):
        self._paths: list[Path] = [normalize_location(p) for p in paths]
        self._extensions: list[str] = []
        self._hints: dict[str, list[Path]] = {}
        self._founds: dict[str, Path] = {}
        self.auto_flush = auto_flush
        self._exists = exists or file_exists

        for extension in extensions or ():
            if extension not in self._extensions:
                self._extensions.append(extension)

    # ----- Lookup -----

    def find(self, name: str) -> Path:
        """Resolve a view name to the first existing file.

        Args:
            name: Plain (``users.index``) or namespaced (``@admin::users.index``)
                view name. Surrounding whitespace is ignored.

        Returns:
            Path of the first matching file

        Raises:
            ViewNotFoundError: No candidate exists
            InvalidViewNameError: Namespaced name without exactly two segments
            UnknownNamespaceError: Namespace has no hint paths
        """
        if name in self._founds:
            return self._founds[name]

        name = name.strip()
        if name in self._founds:
            return self._founds[name]

        namespace = None
        if self.has_hint_information(name):
            namespace, view = self._parse_namespace_segments(name)
            found = self._find_namespaced_view(name, namespace, view)
        else:
            found = self.find_in_paths(name, self._paths)

        self._founds[name] = found
        logger.debug(
            f"[view:resolve] {name} -> {found}",
            extra={"view": name, "namespace": namespace, "path": str(found)},
        )
        return found

    async def afind(self, name: str) -> Path:
        """Resolve a view without blocking the running event loop.

        Cached views return immediately; otherwise the filesystem search runs
        in the loop's default executor.
        """
        if name in self._founds:
            return self._founds[name]

        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self.find, name)

    def find_in_paths(self, name: str, paths: Iterable[str | Path]) -> Path:
        """Find a view in the given list of directories.

        Raises:
            ViewNotFoundError: No directory x extension candidate exists
        """
        searched = [Path(p) for p in paths]
        possible_files = self._possible_files(name)

        for directory in searched:
            for file in possible_files:
                candidate = directory / file
                if self._exists(candidate):
                    return candidate

        raise ViewNotFoundError(name, searched)

    def _find_namespaced_view(self, name: str, namespace: str, view: str) -> Path:
        try:
            return self.find_in_paths(view, self._hints[namespace])
        except ViewNotFoundError as e:
            raise ViewNotFoundError(name, e.searched) from e

    def _parse_namespace_segments(self, name: str) -> tuple[str, str]:
        segments = name.split(HINT_PATH_DELIMITER)
        if len(segments) != 2:
            raise InvalidViewNameError(name)

        namespace = segments[0].lstrip(NAMESPACE_MARKERS)
        if namespace not in self._hints:
            raise UnknownNamespaceError(namespace)

        return namespace, segments[1]

    def _possible_files(self, name: str) -> list[str]:
        if not self._extensions:
            return [name]

        stem = name.replace(".", os.sep)
        return [f"{stem}.{extension}" for extension in self._extensions]

    def has_hint_information(self, name: str) -> bool:
        """Return True if the name carries a namespace (delimiter after position 0)."""
        return name.find(HINT_PATH_DELIMITER) > 0

    # ----- Locations -----

    def add_location(self, location: str | Path) -> None:
        """Add a location with the lowest search priority."""
        self._paths.append(normalize_location(location))
        self._changed()

    def prepend_location(self, location: str | Path) -> None:
        """Add a location with the highest search priority."""
        self._paths.insert(0, normalize_location(location))
        self._changed()

    def set_paths(self, paths: Iterable[str | Path]) -> ViewResolver:
        """Replace all locations."""
        self._paths = [normalize_location(p) for p in paths]
        self._changed()
        return self

    # ----- Namespaces -----

    def add_namespace(self, namespace: str, hints: str | Path | Iterable[str | Path]) -> None:
        """Add hint paths for a namespace, after any it already has.

        Args:
            namespace: Case-sensitive namespace name, without the @ or # marker
            hints: One path (str or Path) or an iterable of paths; any other
                value raises TypeError
        """
        self._hints[namespace] = self._hints.get(namespace, []) + _as_path_list(hints)
        self._changed()

    def prepend_namespace(self, namespace: str, hints: str | Path | Iterable[str | Path]) -> None:
        """Add hint paths for a namespace, before any it already has.

        Accepts the same hints as add_namespace().
        """
        self._hints[namespace] = _as_path_list(hints) + self._hints.get(namespace, [])
        self._changed()

    # ----- Extensions -----

    def add_extension(self, extension: str) -> None:
        """Register an extension with the highest search priority.

        Re-adding an extension moves it to the front instead of duplicating it.
        """
        if extension in self._extensions:
            self._extensions.remove(extension)

        self._extensions.insert(0, extension)
        self._changed()

    # ----- Cache -----

    def flush(self) -> None:
        """Flush the cache of located views."""
        cleared = len(self._founds)
        self._founds.clear()
        logger.debug(f"[view:flush] {cleared} resolved views cleared", extra={"cleared": cleared})

    def _changed(self) -> None:
        if self.auto_flush:
            self.flush()

    # ----- Accessors -----

    @property
    def paths(self) -> list[Path]:
        return list(self._paths)

    @property
    def hints(self) -> dict[str, list[Path]]:
        return {namespace: list(hints) for namespace, hints in self._hints.items()}

    @property
    def extensions(self) -> list[str]:
        return list(self._extensions)

    @property
    def founds(self) -> dict[str, Path]:
        return dict(self._founds)

    def __repr__(self) -> str:
        return (
            f"ViewResolver(paths={len(self._paths)}, namespaces={len(self._hints)}, "
            f"extensions={self._extensions!r})"
        )


def _as_path_list(hints: str | Path | Iterable[str | Path]) -> list[Path]:
    if isinstance(hints, (str, Path)):
        return [Path(hints)]
    return [Path(h) for h in hints]
