"""Engine registry - lazily build one template engine per key.

The key typically corresponds to a file extension, so the engine for a
resolved view can be looked up from its suffix with engine_for().
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .errors import UnknownEngineError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EngineInstance:
    """An engine that is already constructed."""

    value: Any

    def build(self) -> Any:
        return self.value


@dataclass(frozen=True)
class EngineFactory:
    """A zero-argument constructor for an engine (a class or any callable)."""

    factory: Callable[[], Any]

    def build(self) -> Any:
        return self.factory()


EngineSource = EngineInstance | EngineFactory


class EngineResolver:
    """Memoized keyed factory for template engines.

    Usage:
        engines = EngineResolver()
        engines.register("html", JinjaEngine)
        engine = engines.resolve("html")  # built once, then reused
    """

    def __init__(self) -> None:
        self._sources: dict[str, EngineSource] = {}
        self._resolved: dict[str, Any] = {}

    def register(self, engine: str, source: EngineSource | Callable[[], Any] | Any) -> None:
        """Register an engine source under a key.

        Any previously resolved instance for the key is discarded.

        Args:
            engine: Engine key, usually a file extension without the dot
            source: EngineFactory or EngineInstance, a zero-argument callable
                (wrapped as a factory), or any other value (wrapped as an
                already-built instance)
        """
        self._resolved.pop(engine, None)

        if isinstance(source, (EngineInstance, EngineFactory)):
            self._sources[engine] = source
        elif callable(source):
            self._sources[engine] = EngineFactory(source)
        else:
            self._sources[engine] = EngineInstance(source)

    def resolve(self, engine: str) -> Any:
        """Return the engine for a key, building it on first use.

        Raises:
            UnknownEngineError: Nothing was registered under the key
        """
        if engine in self._resolved:
            return self._resolved[engine]

        if engine not in self._sources:
            raise UnknownEngineError(engine)

        instance = self._sources[engine].build()
        self._resolved[engine] = instance
        logger.debug(f"[engine:resolve] {engine} -> {type(instance).__name__}", extra={"engine": engine})
        return instance

    def engine_for(self, path: str | Path) -> Any:
        """Resolve the engine registered for a file's extension."""
        return self.resolve(Path(path).suffix.lstrip("."))

    @property
    def registered(self) -> list[str]:
        return list(self._sources)
