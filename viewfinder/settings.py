"""Settings management for viewfinder.

Simple, scope-aware YAML settings. The ``views`` section configures the
resolver:

    views:
      locations:
        - templates
      extensions:
        - html
        - txt
      namespaces:
        admin:
          - admin/templates
      auto_flush: false
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any
from typing import Literal

import yaml
from pydantic import BaseModel
from pydantic import Field
from pydantic import ValidationError
from pydantic import field_validator

from .errors import SettingsError

Scope = Literal["local", "project", "global"]


class ViewSettings(BaseModel):
    """Validated ``views`` section of the merged settings."""

    locations: list[str] = Field(default_factory=list)
    extensions: list[str] = Field(default_factory=list)
    namespaces: dict[str, list[str]] = Field(default_factory=dict)
    auto_flush: bool = False

    @field_validator("extensions")
    @classmethod
    def _strip_leading_dot(cls, value: list[str]) -> list[str]:
        return [ext.lstrip(".") for ext in value]

    @field_validator("namespaces", mode="before")
    @classmethod
    def _single_hint_to_list(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return {ns: [hints] if isinstance(hints, str) else hints for ns, hints in value.items()}
        return value


@dataclass
class SettingsPaths:
    """Standard paths for settings files."""

    global_settings: Path
    project_settings: Path
    local_settings: Path

    @classmethod
    def default(cls) -> SettingsPaths:
        """Create default paths for the standard viewfinder layout."""
        return cls(
            global_settings=Path.home() / ".viewfinder" / "settings.yaml",
            project_settings=Path.cwd() / ".viewfinder" / "settings.yaml",
            local_settings=Path.cwd() / ".viewfinder" / "settings.local.yaml",
        )


class AppSettings:
    """Settings manager with scope-aware merging.

    Scope priority (most specific wins):
    1. explicit file passed on the command line (--config)
    2. local (.viewfinder/settings.local.yaml) - gitignored, machine-specific
    3. project (.viewfinder/settings.yaml) - committed, team-shared
    4. global (~/.viewfinder/settings.yaml) - user defaults

    Usage:
        settings = AppSettings()
        views = settings.get_view_settings()
        settings.add_location("templates", scope="project")
    """

    def __init__(self, paths: SettingsPaths | None = None, extra_file: Path | None = None) -> None:
        self.paths = paths or SettingsPaths.default()
        self.extra_file = extra_file

    def get_merged_settings(self) -> dict[str, Any]:
        """Load and merge settings from all scopes.

        Raises:
            SettingsError: A settings file is not valid YAML
        """
        result: dict[str, Any] = {}
        files = [self.paths.global_settings, self.paths.project_settings, self.paths.local_settings]
        if self.extra_file is not None:
            files.append(self.extra_file)

        for path in files:
            result = self._deep_merge(result, self._load(path))
        return result

    def get_view_settings(self) -> ViewSettings:
        """Get the validated ``views`` section.

        Raises:
            SettingsError: The section does not match the expected shape
        """
        section = self.get_merged_settings().get("views") or {}
        try:
            return ViewSettings.model_validate(section)
        except ValidationError as e:
            raise SettingsError(None, f"invalid 'views' settings: {e}") from e

    # ----- View settings -----

    def add_location(self, location: str, scope: Scope = "project") -> None:
        """Append a search location at specified scope."""
        views = self._read_views(scope)
        locations = views.setdefault("locations", [])
        if location not in locations:
            locations.append(location)
        self._write_views(scope, views)

    def remove_location(self, location: str, scope: Scope = "project") -> bool:
        """Remove a search location from specified scope."""
        views = self._read_views(scope)
        locations = views.get("locations", [])
        if location not in locations:
            return False
        locations.remove(location)
        self._write_views(scope, views)
        return True

    def add_extension(self, extension: str, scope: Scope = "project") -> None:
        """Register an extension at specified scope with the highest priority."""
        extension = extension.lstrip(".")
        views = self._read_views(scope)
        extensions = [ext for ext in views.get("extensions", []) if ext != extension]
        views["extensions"] = [extension, *extensions]
        self._write_views(scope, views)

    def add_namespace(self, namespace: str, hint: str, scope: Scope = "project") -> None:
        """Append a hint path for a namespace at specified scope."""
        views = self._read_views(scope)
        namespaces = views.setdefault("namespaces", {})
        hints = namespaces.get(namespace) or []
        if isinstance(hints, str):
            hints = [hints]
        if hint not in hints:
            hints.append(hint)
        namespaces[namespace] = hints
        self._write_views(scope, views)

    # ----- Scope utilities -----

    def _get_scope_path(self, scope: Scope) -> Path:
        """Get settings file path for scope."""
        return {
            "local": self.paths.local_settings,
            "project": self.paths.project_settings,
            "global": self.paths.global_settings,
        }[scope]

    def _load(self, path: Path) -> dict[str, Any]:
        if not path.exists():
            return {}
        try:
            with open(path) as f:
                content = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise SettingsError(path, f"not valid YAML: {e}") from e
        if not isinstance(content, dict):
            raise SettingsError(path, "top level must be a mapping")
        return content

    def _read_views(self, scope: Scope) -> dict[str, Any]:
        return dict(self._load(self._get_scope_path(scope)).get("views") or {})

    def _write_views(self, scope: Scope, views: dict[str, Any]) -> None:
        path = self._get_scope_path(scope)
        settings = self._load(path)
        settings["views"] = views
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            yaml.safe_dump(settings, f, default_flow_style=False)

    def _deep_merge(self, base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dicts, overlay wins."""
        result = base.copy()
        for key, value in overlay.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value
        return result


def get_settings() -> AppSettings:
    """Get a settings instance with default paths."""
    return AppSettings()
