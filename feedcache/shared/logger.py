"""Structured JSON logging for feed cache components.

Components pass either a short name ("runner") or their module ``__name__``
("feedcache.cache.file_store"); both end up under the ``feedcache`` logger.
"""

import json
import logging
from datetime import datetime, timezone

ROOT_LOGGER = "feedcache"


def component_name(name: str) -> str:
    """Strip the ``feedcache.`` prefix from a logger or module name."""
    return name.removeprefix(f"{ROOT_LOGGER}.")


class JsonFormatter(logging.Formatter):
    """Formats log records as single-line JSON objects.

    Each line names the component and the operation (the logging function)
    so save/load/validate traffic can be filtered per store or loader.
    """

    def format(self, record):
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "component": component_name(record.name),
            "operation": record.funcName,
            "level": record.levelname,
            "message": record.getMessage(),
        }
        if hasattr(record, "feed_data"):
            entry["data"] = record.feed_data
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def get_feed_logger(
    component: str,
    log_file: str | None = None,
    level: int | str = logging.INFO,
) -> logging.Logger:
    """Return a named logger that emits structured JSON.

    Args:
        component: Module ``__name__`` or short name (e.g. "runner").
        log_file: Optional path; writes JSON lines to this file instead of stderr.
        level: Logging level or level name, defaults to INFO.

    Returns:
        A ``logging.Logger`` instance named ``feedcache.<component>``.
    """
    logger = logging.getLogger(f"{ROOT_LOGGER}.{component_name(component)}")
    logger.setLevel(level)

    if not logger.handlers:
        if log_file:
            handler = logging.FileHandler(log_file)
        else:
            handler = logging.StreamHandler()
        handler.setFormatter(JsonFormatter())
        logger.addHandler(handler)

    return logger
