"""JSON logging with stable schema."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from province_migrate.common.constants import JSON_LOG_FIELDS
from province_migrate.common.fs import ensure_dir
from province_migrate.common.time_utils import utc_timestamp_iso


class JsonLineFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": utc_timestamp_iso(),
            "level": record.levelname,
            "run_id": getattr(record, "run_id", None),
            "stage": getattr(record, "stage", None),
            "region": getattr(record, "region", None),
            "service_code": getattr(record, "service_code", None),
            "event": getattr(record, "event", None),
            "status": getattr(record, "status", None),
            "duration_ms": getattr(record, "duration_ms", None),
            "rows_out": getattr(record, "rows_out", None),
            "error_code": getattr(record, "error_code", None),
            "message": record.getMessage(),
        }
        for field in JSON_LOG_FIELDS:
            payload.setdefault(field, None)
        return json.dumps(payload, ensure_ascii=False)


def build_logger(run_id: str, data_dir: Path, level: str = "INFO") -> logging.Logger:
    logger = logging.getLogger(f"province_migrate.{run_id}")
    logger.setLevel(level.upper())
    logger.handlers.clear()
    logger.propagate = False

    stream = logging.StreamHandler()
    stream.setFormatter(JsonLineFormatter())
    logger.addHandler(stream)

    log_path = data_dir / "run_meta" / f"{run_id}.log.jsonl"
    ensure_dir(log_path.parent)
    file_handler = logging.FileHandler(log_path, encoding="utf-8")
    file_handler.setFormatter(JsonLineFormatter())
    logger.addHandler(file_handler)

    return logger


def close_logger(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def log_event(logger: logging.Logger, message: str, **event_fields: Any) -> None:
    level = logging.ERROR if event_fields.get("status") == "error" else logging.INFO
    logger.log(level, message, extra=event_fields)
