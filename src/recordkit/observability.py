"""Logging setup for applications that want recordkit's messages on screen.

The library itself only logs through loggers under ``recordkit`` (the parent
carries a ``NullHandler``); nothing is printed until ``setup_logging`` is
called. Calling it again swaps the handler it installed before.
"""

import json
import logging
from datetime import datetime, timezone

EXTRA_FIELDS = ("container", "action")
TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):
    """One JSON object per line, with violation fields when present."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log.update(
            (key, record.__dict__[key])
            for key in EXTRA_FIELDS
            if record.__dict__.get(key) is not None
        )
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


class _RecordkitHandler(logging.StreamHandler):
    """Marks the handler ``setup_logging`` owns."""


def setup_logging(level: str = "INFO", fmt: str = "text") -> logging.Handler:
    """Install a stream handler on the ``recordkit`` logger and return it."""
    logger = logging.getLogger("recordkit")
    for old in [h for h in logger.handlers if isinstance(h, _RecordkitHandler)]:
        logger.removeHandler(old)
        old.close()

    handler = _RecordkitHandler()
    handler.setFormatter(JSONFormatter() if fmt == "json" else logging.Formatter(TEXT_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
