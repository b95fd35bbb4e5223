"""JSON-line logging on stderr; stdout carries only the per-file report."""

from __future__ import annotations

import json
import logging
import os
from datetime import datetime, timezone
from logging import Logger
from typing import Dict

from .rules import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV

_ROOT = "update_csproj"


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        line = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "event": getattr(record, "event", record.getMessage()),
            "payload": getattr(record, "payload", {}),
        }
        return json.dumps(line, ensure_ascii=False, default=str)


def get_logger(name: str) -> Logger:
    logger = logging.getLogger(f"{_ROOT}.{name}")
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(_JsonFormatter())
        logger.addHandler(handler)
        logger.propagate = False
        level = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
        logger.setLevel(getattr(logging, level, logging.WARNING))
    return logger


def log_event(logger: Logger, event: str, payload: Dict[str, object]) -> None:
    logger.info(event, extra={"event": event, "payload": payload})
