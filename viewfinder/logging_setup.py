"""
JSON-lines log sink for viewfinder.

Every record becomes one JSON object. Resolver and registry records carry
structured fields (the view name, its namespace, the resolved path, how many
cached views a flush dropped, the engine key); those fields are written as
top-level keys when present.
"""

import json
import logging
import os
from datetime import UTC
from datetime import datetime
from pathlib import Path

LOG_PATH_ENV = "VIEWFINDER_LOG_PATH"
LOG_LEVEL_ENV = "VIEWFINDER_LOG_LEVEL"
DEFAULT_PATH = "./viewfinder.log.jsonl"

# Extras set by viewfinder's own log calls
VIEW_FIELDS = ("view", "namespace", "path", "cleared", "engine")


class JsonLineFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for field in VIEW_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                entry[field] = value
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


class ViewLogHandler(logging.FileHandler):
    """Append-only JSON-lines file handler."""

    def __init__(self, path: str | Path):
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        super().__init__(path, mode="a", encoding="utf-8", delay=True)
        self.path = path
        self.setFormatter(JsonLineFormatter())


def init_view_logging(path: str | Path | None = None, level: str | None = None) -> ViewLogHandler:
    """Route all logging to a single JSON-lines file, replacing a previous sink.

    Path and level default to $VIEWFINDER_LOG_PATH and $VIEWFINDER_LOG_LEVEL.
    Unknown level names fall back to INFO.
    """
    path = path or os.environ.get(LOG_PATH_ENV) or DEFAULT_PATH
    level_name = (level or os.environ.get(LOG_LEVEL_ENV) or "INFO").upper()

    root = logging.getLogger()
    for existing in [h for h in root.handlers if isinstance(h, ViewLogHandler)]:
        root.removeHandler(existing)
        existing.close()

    handler = ViewLogHandler(path)
    root.addHandler(handler)
    root.setLevel(logging.getLevelNamesMapping().get(level_name, logging.INFO))
    return handler
