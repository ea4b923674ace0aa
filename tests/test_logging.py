from __future__ import annotations

import json
import logging

import pytest

from gatherer.logging import JsonFormatter, configure_logging


def test_json_formatter_includes_extras() -> None:
    record = logging.LogRecord("event_listener_gatherer.pass", logging.INFO, __file__, 1, "collected %d", (3,), None)
    record.url = "https://example.test/"

    payload = json.loads(JsonFormatter().format(record))

    assert payload["message"] == "collected 3"
    assert payload["level"] == "INFO"
    assert payload["url"] == "https://example.test/"
    assert "lineno" not in payload


def test_text_format_can_be_selected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ELG_LOG_FORMAT", "text")
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        configure_logging(verbose=True)
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert not isinstance(root.handlers[0].formatter, JsonFormatter)
    finally:
        for handler in list(root.handlers):
            root.removeHandler(handler)
        for handler in saved_handlers:
            root.addHandler(handler)
        root.setLevel(saved_level)
