"""Tests for the JSON-lines log sink."""

import json
import logging

import pytest

from viewfinder.logging_setup import ViewLogHandler
from viewfinder.logging_setup import init_view_logging
from viewfinder.resolver import ViewResolver


@pytest.fixture
def clean_root():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


def read_records(path):
    return [json.loads(line) for line in path.read_text().splitlines()]


def test_resolve_record_carries_view_fields(tmp_path, clean_root, make_view):
    log_file = tmp_path / "logs" / "out.jsonl"
    handler = init_view_logging(log_file, "debug")
    views = tmp_path / "views"
    admin = tmp_path / "admin"
    make_view("views/home.html")
    make_view("admin/index.html")

    resolver = ViewResolver([views], ["html"])
    resolver.add_namespace("admin", admin)
    resolver.find("home")
    resolver.find("@admin::index")
    handler.flush()

    home, index = [r for r in read_records(log_file) if r["message"].startswith("[view:resolve]")]
    assert home["level"] == "DEBUG"
    assert home["logger"] == "viewfinder.resolver"
    assert home["view"] == "home"
    assert home["path"] == str(views.resolve() / "home.html")
    assert "namespace" not in home
    assert index["view"] == "@admin::index"
    assert index["namespace"] == "admin"
    assert index["path"] == str(admin / "index.html")


def test_flush_record_counts_cleared_views(tmp_path, clean_root, make_view):
    log_file = tmp_path / "out.jsonl"
    handler = init_view_logging(log_file, "debug")
    make_view("views/a.html")
    make_view("views/b.html")

    resolver = ViewResolver([tmp_path / "views"], ["html"])
    resolver.find("a")
    resolver.find("b")
    resolver.flush()
    handler.flush()

    (record,) = [r for r in read_records(log_file) if r["message"].startswith("[view:flush]")]
    assert record["cleared"] == 2


def test_failed_lookup_writes_nothing(tmp_path, clean_root):
    log_file = tmp_path / "out.jsonl"
    handler = init_view_logging(log_file, "debug")

    with pytest.raises(LookupError):
        ViewResolver([tmp_path], ["html"]).find("missing")
    handler.flush()

    assert not log_file.exists() or log_file.read_text() == ""


def test_level_filters_debug_records(tmp_path, clean_root, make_view):
    log_file = tmp_path / "out.jsonl"
    handler = init_view_logging(log_file, "info")
    make_view("views/home.html")

    ViewResolver([tmp_path / "views"], ["html"]).find("home")
    logging.getLogger("viewfinder.test").info("kept")
    handler.flush()

    assert [r["message"] for r in read_records(log_file)] == ["kept"]


def test_reinit_replaces_previous_sink(tmp_path, clean_root):
    init_view_logging(tmp_path / "first.jsonl", "INFO")
    init_view_logging(tmp_path / "second.jsonl", "INFO")

    sinks = [h for h in clean_root.handlers if isinstance(h, ViewLogHandler)]
    assert len(sinks) == 1
    assert sinks[0].path == tmp_path / "second.jsonl"


def test_env_defaults(tmp_path, clean_root, monkeypatch):
    monkeypatch.setenv("VIEWFINDER_LOG_PATH", str(tmp_path / "env.jsonl"))
    monkeypatch.setenv("VIEWFINDER_LOG_LEVEL", "warning")

    handler = init_view_logging()

    assert handler.path == tmp_path / "env.jsonl"
    assert clean_root.level == logging.WARNING


def test_unknown_level_falls_back_to_info(tmp_path, clean_root):
    init_view_logging(tmp_path / "out.jsonl", "chatty")

    assert clean_root.level == logging.INFO
