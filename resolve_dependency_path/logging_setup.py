"""
JSONL logging bootstrap for the command-line wrapper.
The library itself never installs handlers; the CLI opts in with --log-file.
"""

import json
import logging
import os
from datetime import UTC
from datetime import datetime
from pathlib import Path

DEFAULT_PATH = os.environ.get("RESOLVE_DEPENDENCY_PATH_LOG_PATH", "./resolve-dependency-path.log.jsonl")
DEFAULT_LEVEL = os.environ.get("RESOLVE_DEPENDENCY_PATH_LOG_LEVEL", "INFO").upper()

# LogRecord attributes that are not user-supplied extras
_RESERVED_ATTRS = frozenset(
    {
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
        "name",
        "message",
    }
)


class JsonlHandler(logging.Handler):
    def __init__(self, path: str | Path):
        super().__init__()
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            base = {
                "ts": datetime.now(UTC).isoformat(timespec="milliseconds"),
                "lvl": record.levelname,
                "schema": {"name": "resolve_dependency_path.log", "ver": "1.0.0"},
                "logger": record.name,
                "message": record.getMessage(),
            }
            for k, v in record.__dict__.items():
                if k in _RESERVED_ATTRS:
                    continue
                base.setdefault(k, v)
            with self.path.open("a", encoding="utf-8") as f:
                f.write(json.dumps(base, ensure_ascii=False, default=str) + "\n")
        except Exception:
            self.handleError(record)


def init_json_logging(path: str | Path | None = None, level: str | None = None) -> JsonlHandler:
    """Install a single JsonlHandler on the root logger.

    Args:
        path: Log file path (default: RESOLVE_DEPENDENCY_PATH_LOG_PATH or ./resolve-dependency-path.log.jsonl)
        level: Level name (default: RESOLVE_DEPENDENCY_PATH_LOG_LEVEL or INFO)

    Returns:
        The installed handler
    """
    path = path or DEFAULT_PATH
    level = (level or DEFAULT_LEVEL).upper()
    root = logging.getLogger()
    root.setLevel(getattr(logging, level, logging.INFO))
    # Remove existing handlers of the same kind to avoid duplicates
    for h in list(root.handlers):
        if isinstance(h, JsonlHandler):
            root.removeHandler(h)
            h.close()
    handler = JsonlHandler(path)
    root.addHandler(handler)
    return handler
