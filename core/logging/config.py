from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler, QueueHandler, QueueListener
from queue import Queue
from pathlib import Path
from typing import Optional

from .levels import register_levels, to_level
from .context import get_context
from .formatter import ConsoleFormatter, JSONFormatter

_listener: QueueListener | None = None


class ContextQueueHandler(QueueHandler):
    """Stamps the caller's context on records from plain stdlib loggers too."""

    def prepare(self, record: logging.LogRecord) -> logging.LogRecord:
        if getattr(record, "context", None) is None:
            ctx = get_context()
            if ctx:
                record.context = ctx
        return super().prepare(record)


def bootstrap_logging(
    *,
    service: str = "player-fetcher",
    level: str | int | None = None,
    log_dir: Optional[Path] = None,
    log_file_name: str = "player_fetcher.jsonl",
    console: Optional[bool] = None,
    max_bytes: int = 5_000_000,
    backup_count: int = 5,
) -> None:
    """Console (opt-in) plus rotating JSON-lines file behind a queue listener."""
    global _listener
    shutdown_logging()
    register_levels()
    root = logging.getLogger()
    root.handlers.clear()
    lvl = to_level(level or os.getenv("LOG_LEVEL", "INFO"))
    root.setLevel(lvl)

    if console is None:
        console = os.getenv("LOG_CONSOLE", "false").strip().lower() == "true"
    if console:
        handler = logging.StreamHandler()
        console_level = os.getenv("LOG_CONSOLE_LEVEL", "")
        handler.setLevel(to_level(console_level) if console_level else lvl)
        handler.setFormatter(ConsoleFormatter())
        root.addHandler(handler)

    if log_dir:
        try:
            log_dir.mkdir(parents=True, exist_ok=True)
            json_handler = RotatingFileHandler(
                str(log_dir / log_file_name), maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
            )
        except OSError as e:
            logging.getLogger(__name__).warning(f"file logging disabled: {e}")
        else:
            json_handler.setLevel(lvl)
            json_handler.setFormatter(JSONFormatter())
            q: Queue[logging.LogRecord] = Queue(-1)
            root.addHandler(ContextQueueHandler(q))
            _listener = QueueListener(q, json_handler, respect_handler_level=True)
            _listener.start()

    if not root.handlers:
        root.addHandler(logging.NullHandler())
    logging.getLogger(__name__).debug(f"logging ready service={service} level={logging.getLevelName(lvl)}")


def shutdown_logging() -> None:
    global _listener
    if _listener is not None:
        _listener.stop()
        _listener = None
