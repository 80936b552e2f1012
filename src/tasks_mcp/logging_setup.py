# src/tasks_mcp/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path


class _StderrNoiseFilter(logging.Filter):
    """
    Keep the diagnostic stream readable:
    - allow all tasks_mcp logs
    - suppress HTTP client internals (httpx/httpcore) unless WARNING+
    - suppress MCP framework chatter unless WARNING+
    - suppress Python warnings (captured as 'py.warnings') unless ERROR+
    """

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name

        if name == "tasks_mcp" or name.startswith("tasks_mcp."):
            return True

        if name.startswith(("httpx", "httpcore", "mcp")):
            return record.levelno >= logging.WARNING

        if name == "py.warnings":
            return record.levelno >= logging.ERROR

        # Any other 3rd party: only errors.
        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_dir: str | Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> None:
    """
    Configure logging with:
    - stderr handler: filtered, never stdout (stdout carries the MCP stdio stream)
    - file handler: full logs for debugging, only when log_dir is given

    Call this ONCE, very early (before the server is created).
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(fmt)
    ch.addFilter(_StderrNoiseFilter())
    root.addHandler(ch)

    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_dir / "tasks-mcp.log"), encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(fmt)
        root.addHandler(fh)

    # Route warnings.warn(...) into logging as 'py.warnings'
    logging.captureWarnings(True)
