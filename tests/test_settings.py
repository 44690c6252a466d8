"""Tests for scope-aware YAML settings."""

from pathlib import Path
from textwrap import dedent

import pytest
import yaml

from viewfinder.errors import SettingsError
from viewfinder.settings import AppSettings
from viewfinder.settings import SettingsPaths
from viewfinder.settings import ViewSettings


@pytest.fixture
def settings_paths(tmp_path: Path) -> SettingsPaths:
    return SettingsPaths(
        global_settings=tmp_path / "home" / ".viewfinder" / "settings.yaml",
        project_settings=tmp_path / "project" / ".viewfinder" / "settings.yaml",
        local_settings=tmp_path / "project" / ".viewfinder" / "settings.local.yaml",
    )


def _write(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dedent(content))
    return path


class TestViewSettings:
    def test_defaults(self):
        views = ViewSettings()

        assert views.locations == []
        assert views.extensions == []
        assert views.namespaces == {}
        assert views.auto_flush is False

    def test_extension_dots_are_stripped(self):
        assert ViewSettings(extensions=[".html", "txt"]).extensions == ["html", "txt"]

    def test_single_namespace_hint(self):
        views = ViewSettings.model_validate({"namespaces": {"admin": "admin/views"}})

        assert views.namespaces == {"admin": ["admin/views"]}


class TestAppSettings:
    def test_missing_files_give_defaults(self, settings_paths):
        assert AppSettings(settings_paths).get_view_settings() == ViewSettings()

    def test_more_specific_scope_wins(self, settings_paths):
        _write(
            settings_paths.global_settings,
            """
            views:
              extensions: [txt]
              namespaces:
                mail: [~/mail]
            """,
        )
        _write(
            settings_paths.project_settings,
            """
            views:
              extensions: [html]
              namespaces:
                admin: [admin/views]
            """,
        )
        _write(settings_paths.local_settings, "views:\n  auto_flush: true\n")

        views = AppSettings(settings_paths).get_view_settings()

        assert views.extensions == ["html"]
        assert views.namespaces == {"mail": ["~/mail"], "admin": ["admin/views"]}
        assert views.auto_flush is True

    def test_extra_file_wins_over_scopes(self, settings_paths, tmp_path):
        _write(settings_paths.project_settings, "views:\n  locations: [a]\n")
        extra = _write(tmp_path / "extra.yaml", "views:\n  locations: [b]\n")

        views = AppSettings(settings_paths, extra_file=extra).get_view_settings()

        assert views.locations == ["b"]

    def test_malformed_yaml_raises(self, settings_paths):
        _write(settings_paths.project_settings, "views: [unclosed\n")

        with pytest.raises(SettingsError) as exc_info:
            AppSettings(settings_paths).get_merged_settings()

        assert exc_info.value.path == settings_paths.project_settings

    def test_non_mapping_raises(self, settings_paths):
        _write(settings_paths.project_settings, "- just\n- a list\n")

        with pytest.raises(SettingsError):
            AppSettings(settings_paths).get_merged_settings()

    def test_invalid_views_section_raises(self, settings_paths):
        _write(settings_paths.project_settings, "views:\n  auto_flush: [not, a, bool]\n")

        with pytest.raises(SettingsError, match="invalid 'views' settings"):
            AppSettings(settings_paths).get_view_settings()


class TestAppSettingsWrites:
    def test_add_location_appends_once(self, settings_paths):
        settings = AppSettings(settings_paths)

        settings.add_location("views")
        settings.add_location("more")
        settings.add_location("views")

        assert settings.get_view_settings().locations == ["views", "more"]

    def test_add_location_preserves_other_keys(self, settings_paths):
        _write(settings_paths.project_settings, "other: 1\nviews:\n  extensions: [html]\n")

        AppSettings(settings_paths).add_location("views")

        data = yaml.safe_load(settings_paths.project_settings.read_text())
        assert data == {"other": 1, "views": {"extensions": ["html"], "locations": ["views"]}}

    def test_remove_location(self, settings_paths):
        settings = AppSettings(settings_paths)
        settings.add_location("views")

        assert settings.remove_location("views") is True
        assert settings.remove_location("views") is False
        assert settings.get_view_settings().locations == []

    def test_add_extension_moves_to_front(self, settings_paths):
        settings = AppSettings(settings_paths)

        settings.add_extension("html")
        settings.add_extension(".txt")
        settings.add_extension("html")

        assert settings.get_view_settings().extensions == ["html", "txt"]

    def test_add_namespace_hint(self, settings_paths):
        settings = AppSettings(settings_paths)

        settings.add_namespace("admin", "a")
        settings.add_namespace("admin", "b")
        settings.add_namespace("admin", "a")

        assert settings.get_view_settings().namespaces == {"admin": ["a", "b"]}

    def test_scope_selects_file(self, settings_paths):
        AppSettings(settings_paths).add_location("views", scope="global")

        assert settings_paths.global_settings.exists()
        assert not settings_paths.project_settings.exists()
