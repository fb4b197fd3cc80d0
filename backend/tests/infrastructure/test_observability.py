"""Structured Logging — JSONFormatter output and extras."""

import json
import logging

from game_reviews.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "game_reviews.api", logging.WARNING, __file__, 1, "Invalid input", None, None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_basic_fields():
    out = json.loads(JSONFormatter().format(_record()))
    assert out["level"] == "WARNING"
    assert out["logger"] == "game_reviews.api"
    assert out["message"] == "Invalid input"
    assert "timestamp" in out


def test_json_formatter_surfaces_known_extras_only():
    out = json.loads(JSONFormatter().format(
        _record(error_code="INVALID_INPUT", path="/api/reviews/notID", secret="x"),
    ))
    assert out["error_code"] == "INVALID_INPUT"
    assert out["path"] == "/api/reviews/notID"
    assert "secret" not in out


def test_json_formatter_uses_record_creation_time():
    record = _record(review_id=3)
    record.created = 1610964101.251
    out = json.loads(JSONFormatter().format(record))
    assert out["timestamp"] == "2021-01-18T10:01:41.251000+00:00"
    assert out["review_id"] == 3


def test_setup_logging_installs_one_handler():
    root = logging.getLogger()
    before, level = list(root.handlers), root.level
    try:
        setup_logging("DEBUG", "json")
        setup_logging("WARNING", "text")
        assert len([h for h in root.handlers if h.get_name() == "game_reviews"]) == 1
        assert root.level == logging.WARNING
    finally:
        for handler in [h for h in root.handlers if h not in before]:
            root.removeHandler(handler)
        root.setLevel(level)
