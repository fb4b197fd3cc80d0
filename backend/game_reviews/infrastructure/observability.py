"""Structured Logging — one JSON object per log line for the reviews API.

Invariants:
    - Every line carries timestamp, level, logger and message
    - timestamp is when the record was created, in UTC
    - Request context (path, method, review_id, comment_id, username) and the
      domain error_code appear only when the call site passed them as extras
    - Exactly one handler is installed on the root logger, however often setup runs

Design Decisions:
    - fmt="text" swaps in a one-line text format for local development
    - The handler is found again by name, so re-creating the app in tests does
      not duplicate output
"""

import json
import logging
from datetime import datetime, timezone

EXTRA_FIELDS: tuple[str, ...] = (
    "error_code", "path", "method", "review_id", "comment_id", "username",
)

_HANDLER_NAME = "game_reviews"
_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(
            (key, record.__dict__[key])
            for key in EXTRA_FIELDS
            if record.__dict__.get(key) is not None
        )
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Install the API's root handler once and set the root level."""
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    if any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        return
    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(JSONFormatter() if fmt == "json" else logging.Formatter(_TEXT_FORMAT))
    root.addHandler(handler)
