"""Structured logging helpers."""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Mapping, Protocol

JSON_LOGS_ENV = "SOSFILTER_JSON_LOGS"


class Describable(Protocol):
    def describe(self) -> Mapping[str, object]: ...


def _json_logs_enabled(json_logs: bool | None) -> bool:
    if json_logs is None:
        return os.getenv(JSON_LOGS_ENV, "false").lower() == "true"
    return json_logs


def configure_logging(level: str = "INFO", json_logs: bool | None = None) -> None:
    """Set up root logging; SOSFILTER_JSON_LOGS=true switches to bare JSON messages."""

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(message)s" if _json_logs_enabled(json_logs) else "%(levelname)s:%(name)s:%(message)s",
    )


def filter_fields(filt: Describable) -> dict[str, Any]:
    """Log-sized summary of a filter: its description without coefficient rows."""

    described = dict(filt.describe())
    coefficients = described.pop("coefficients", None)
    if coefficients is not None:
        described["sections"] = len(coefficients)
    return described


def log_event(
    logger: logging.Logger,
    event: str,
    *,
    level: int = logging.INFO,
    json_logs: bool | None = None,
    **fields: Any,
) -> None:
    """Emit ``{"event": event, **fields}`` as a JSON string or as a mapping."""

    if not logger.isEnabledFor(level):
        return
    payload = {"event": event, **fields}
    if _json_logs_enabled(json_logs):
        logger.log(level, json.dumps(payload, default=str, sort_keys=True))
    else:
        logger.log(level, "%s", payload)
