"""Structured logging helpers with per-run correlation metadata."""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from contextvars import ContextVar, Token
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Iterator, Optional

from pythonjsonlogger import jsonlogger

from random_verse.core.config import settings

_run_id: ContextVar[Optional[str]] = ContextVar("run_id", default=None)

BASE_DIR = Path(__file__).resolve().parent.parent
ROOT_DIR = BASE_DIR.parent

ROOT_LOGGER_NAME = "random_verse"
LOG_FILE_NAME = "random_verse.log"
LOG_MAX_BYTES = 5 * 1024 * 1024
LOG_BACKUP_COUNT = 5


def _resolve_log_level() -> int:
    level_name = str(getattr(settings, "RANDOM_VERSE_LOG_LEVEL", "warning")).upper()
    return getattr(logging, level_name, logging.WARNING)


def _resolve_logs_dir() -> Path:
    """Select a writable logs directory honoring configuration overrides."""

    configured_dir = getattr(settings, "RANDOM_VERSE_LOG_DIR", None)
    candidates = []
    if configured_dir:
        candidates.append(Path(configured_dir))

    data_dir = Path(getattr(settings, "DATA_DIR", Path.home() / ".random-verse"))
    # Precedence: explicit override → repo root logs → DATA_DIR/logs → package-local logs
    candidates.append(ROOT_DIR / "logs")
    candidates.append(data_dir / "logs")
    candidates.append(BASE_DIR / "logs")

    for candidate in candidates:
        try:
            candidate.mkdir(parents=True, exist_ok=True)
        except PermissionError:
            continue
        return candidate

    raise PermissionError("Unable to create a writable logs directory")


class VersionedJsonFormatter(jsonlogger.JsonFormatter):
    """Inject a schema version into each structured log entry."""

    def __init__(self, *args, schema_version: str, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._schema_version = schema_version

    def add_fields(
        self,
        log_record: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record.setdefault("schema_version", self._schema_version)


class RunIdFilter(logging.Filter):  # pylint: disable=too-few-public-methods
    """Attach the current run id to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.run_id = get_run_id() or "-"
        return True


def bind_run_id(value: Optional[str]) -> Token[Optional[str]]:
    """Bind ``value`` to the run id context variable."""

    return _run_id.set(value)


def reset_run_id(token: Token[Optional[str]]) -> None:
    """Reset the run id context variable to a previous state."""

    _run_id.reset(token)


def get_run_id() -> Optional[str]:
    """Return the current run id if bound."""

    return _run_id.get()


@contextmanager
def run_id_context(value: Optional[str]) -> Iterator[None]:
    """Context manager that temporarily binds a run id."""

    token = bind_run_id(value)
    try:
        yield
    finally:
        reset_run_id(token)


def _build_formatter() -> VersionedJsonFormatter:
    return VersionedJsonFormatter(
        " ".join(
            [
                "%(asctime)s",
                "%(levelname)s",
                "%(name)s",
                "%(message)s",
                "%(run_id)s",
            ]
        ),
        rename_fields={
            "asctime": "timestamp",
            "levelname": "level",
            "name": "logger",
            "run_id": "run",
        },
        datefmt="%Y-%m-%d %H:%M:%S",
        json_ensure_ascii=False,
        schema_version=str(getattr(settings, "RANDOM_VERSE_LOG_SCHEMA_VERSION", "1.0.0")),
    )


def _ensure_handlers(logger: logging.Logger) -> None:
    if logger.handlers:
        return

    formatter = _build_formatter()
    run_filter = RunIdFilter()

    # stdout is reserved for command output
    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.addFilter(run_filter)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    if getattr(settings, "RANDOM_VERSE_LOG_TO_FILE", False):
        file_handler = RotatingFileHandler(
            _resolve_logs_dir() / LOG_FILE_NAME,
            maxBytes=LOG_MAX_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.addFilter(run_filter)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """Return a logger that shares the package-level structured handlers."""

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(_resolve_log_level())
    _ensure_handlers(root)
    return logging.getLogger(name)


__all__ = [
    "RunIdFilter",
    "VersionedJsonFormatter",
    "bind_run_id",
    "reset_run_id",
    "get_run_id",
    "run_id_context",
    "get_logger",
]
