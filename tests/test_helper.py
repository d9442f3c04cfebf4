"""Tests for the small string and collection helpers."""

import pytest
from prompt_toolkit.document import Document
from prompt_toolkit.validation import ValidationError as PromptValidationError

from rosa.shared import helper, interactive
from rosa.shared.errors import AbortedError


def test_slice_to_string_orders_by_length():
    assert helper.slice_to_string(["ccc", "a", "bb"]) == "[a, bb, ccc]"
    assert helper.slice_to_string(["manual", "auto"]) == "[auto, manual]"
    assert helper.slice_to_string([]) == "[]"


def test_handle_escaped_empty_string():
    assert helper.handle_escaped_empty_string('""') == ""
    assert helper.handle_escaped_empty_string("") == ""
    assert helper.handle_escaped_empty_string("foo=bar") == "foo=bar"
    assert helper.handle_escaped_empty_string('"foo"') == '"foo"'


def test_handle_empty_string_on_slice():
    assert helper.handle_empty_string_on_slice(["sg-1", "", "sg-2", ""]) == ["sg-1", "sg-2"]
    assert helper.handle_empty_string_on_slice([""]) == []


def _rejecting_prompt(answer, seen):
    def fake_prompt(message, default="", validator=None, **kwargs):
        try:
            validator.validate(Document(answer))
        except PromptValidationError as e:
            seen.append(e.message)
            raise KeyboardInterrupt from e
        return answer

    return fake_prompt


def test_option_errors_list_allowed_values(monkeypatch):
    seen = []
    monkeypatch.setattr("rosa.shared.interactive.prompt", _rejecting_prompt("semi", seen))
    with pytest.raises(AbortedError):
        interactive.get_option(interactive.Input(question="Mode", options=["manual", "auto"]))
    assert seen == ["'semi' is not one of [auto, manual]"]


def test_multiple_options_errors_list_allowed_values(monkeypatch):
    seen = []
    monkeypatch.setattr("rosa.shared.interactive.prompt", _rejecting_prompt("sg-9", seen))
    with pytest.raises(AbortedError):
        interactive.get_multiple_options(
            interactive.Input(question="Security groups", options=["sg-22", "sg-1"])
        )
    assert seen == ["'sg-9' not in [sg-1, sg-22]"]
