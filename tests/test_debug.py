"""Tests for the debug logging toggle."""

import logging

from rosa.shared import debug


def test_request_logging_only_when_enabled(caplog):
    caplog.set_level(logging.DEBUG)
    debug.disable()
    debug.log_request("GET /clusters", {"page": 1})
    assert not [r for r in caplog.records if r.name == "rosa.request"]

    debug.enable()
    try:
        debug.log_request("GET /clusters", {"page": 1})
        debug.log_response("GET /clusters 200", {"items": []})
    finally:
        debug.disable()

    messages = [r.getMessage() for r in caplog.records if r.name.startswith("rosa.")]
    assert 'GET /clusters request: {"page":1}' in messages
    assert 'GET /clusters 200 response: {"items":[]}' in messages
