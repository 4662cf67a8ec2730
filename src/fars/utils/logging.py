"""Centralized logging setup and JSON formatter for structured logging."""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Union

_PACKAGE_LOGGER = "fars"

# Attributes every LogRecord carries; anything else came from `extra=`.
_RESERVED_ATTRS = {
    "msg", "args", "levelname", "levelno", "pathname", "filename",
    "module", "exc_info", "exc_text", "stack_info", "lineno",
    "funcName", "created", "msecs", "relativeCreated", "thread",
    "threadName", "processName", "process", "name", "message",
    "taskName",
}


class JsonFormatter(logging.Formatter):
    """Emit log records as single-line JSON objects.

    Merges any `extra=` kwargs (e.g. ``year``, ``state``, ``path``)
    directly into the payload.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)

        for key, value in getattr(record, "__dict__", {}).items():
            if key not in _RESERVED_ATTRS:
                payload[key] = value

        # safe fallback for non-serializable objects
        return json.dumps(payload, default=str)


def configure_logging(
    level: Union[int, str] = "INFO",
    json_format: bool = False,
) -> logging.Logger:
    """Attach a stream handler to the ``fars`` package logger.

    Calling again replaces the handler installed by the previous call
    instead of stacking a second one.  The root logger is left alone.

    Args:
        level: Logging level name or number.
        json_format: Use ``JsonFormatter`` instead of plain text.

    Returns:
        The configured ``fars`` logger.
    """
    logger = logging.getLogger(_PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if getattr(handler, "_fars_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler._fars_handler = True
    if json_format:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )

    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
