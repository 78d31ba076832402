"""Logging setup for hosts embedding the navigator.

Components log through ``logging.getLogger(__name__)`` with structured
context in ``extra``; ``configure_logging`` decides where that output goes
and whether it is rendered as text or JSON.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

from .config import ObservabilityConfig, get_config

logger = logging.getLogger("mapnav")

# Attributes every LogRecord carries; anything else came in through ``extra``.
_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """Render a record as one JSON object, ``extra`` fields included."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "time": self.formatTime(record),
            "logger": record.name,
            "level": record.levelname,
            "message": record.getMessage(),
        }
        for key, value in vars(record).items():
            if key not in _RECORD_ATTRS and not key.startswith("_"):
                payload[key] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str, ensure_ascii=False)


def configure_logging(config: Optional[ObservabilityConfig] = None) -> logging.Logger:
    """Attach a stream handler to the ``mapnav`` logger.

    Calling it again replaces the handler installed by the previous call.
    """
    config = config or get_config().observability

    for handler in list(logger.handlers):
        if getattr(handler, "_mapnav_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler._mapnav_handler = True  # type: ignore[attr-defined]
    if config.structured:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(config.format))

    logger.addHandler(handler)
    logger.setLevel(config.level.upper())
    return logger
