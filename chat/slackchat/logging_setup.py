"""Logging bootstrap for slackchat.

All ``slackchat.*`` module loggers propagate to the ``slackchat`` logger,
which is wired here and nowhere else.
"""
from __future__ import annotations

import dataclasses
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

import slackchat.config as _cfg


@dataclasses.dataclass(frozen=True)
class LoggingRuntime:
    level_name: str
    level: int
    file_path: str


_RUNTIME: Optional[LoggingRuntime] = None


def _parse_level(raw: str) -> tuple[str, int]:
    normalized = str(raw or "INFO").strip().upper()
    level = getattr(logging, normalized, logging.INFO)
    if not isinstance(level, int):
        level = logging.INFO
    return logging.getLevelName(level), level


def _make_stream_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setLevel(max(level, logging.WARNING))  # keep the terminal UI clean
    handler.setFormatter(logging.Formatter("[%(name)s] %(levelname)s %(message)s"))
    return handler


def _make_file_handler(level: int, file_path: str) -> logging.Handler:
    handler = RotatingFileHandler(
        file_path,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )
    return handler


def configure(level: Optional[str] = None, file_path: Optional[str] = None) -> LoggingRuntime:
    """Attach stderr + rotating file handlers to the ``slackchat`` logger.

    Idempotent: repeated calls return the runtime from the first call.
    """
    global _RUNTIME
    if _RUNTIME is not None:
        return _RUNTIME

    level_name, level_no = _parse_level(level or _cfg.LOG_LEVEL)
    path = file_path or _cfg.LOG_FILE or str(_cfg.LOG_DIR / "slackchat.log")
    Path(path).parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger("slackchat")
    logger.setLevel(level_no)
    logger.propagate = False
    logger.handlers.clear()
    logger.addHandler(_make_stream_handler(level_no))
    logger.addHandler(_make_file_handler(level_no, path))

    logging.captureWarnings(True)

    _RUNTIME = LoggingRuntime(level_name=level_name, level=level_no, file_path=path)
    return _RUNTIME


def get_runtime() -> Optional[LoggingRuntime]:
    return _RUNTIME


def reset() -> None:
    """Detach handlers so a later ``configure`` starts fresh (used by tests)."""
    global _RUNTIME
    logger = logging.getLogger("slackchat")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    logging.captureWarnings(False)
    _RUNTIME = None
