"""Tests for interactive prompts, confirmations and answer validators."""

import pytest
from prompt_toolkit.document import Document
from prompt_toolkit.validation import ValidationError as PromptValidationError

from rosa.shared import interactive
from rosa.shared.errors import AbortedError
from rosa.shared.interactive import confirm
from rosa.shared.interactive import validation as v


def test_required():
    v.required("x")
    for empty in (None, "", [], {}):
        with pytest.raises(ValueError, match="Value is required"):
            v.required(empty)


def test_max_length_and_compose():
    check = v.compose([v.required, v.max_length(3)])
    check("abc")
    with pytest.raises(ValueError, match="Max length is 3"):
        check("abcd")
    with pytest.raises(ValueError, match="Value is required"):
        check("")


@pytest.mark.parametrize(
    "value", [None, "", "/some/path", "https://example.com/path", "http://localhost:8080"]
)
def test_is_url_accepts(value):
    v.is_url(value)


@pytest.mark.parametrize("value", ["example.com", "https://exa mple.com"])
def test_is_url_rejects(value):
    with pytest.raises(ValueError, match="invalid URI for request"):
        v.is_url(value)


def test_is_url_rejects_non_strings():
    with pytest.raises(ValueError, match="can only validate strings, got 3"):
        v.is_url(3)


def test_is_cert(tmp_path):
    cert = tmp_path / "ca.crt"
    cert.write_text("---")
    v.is_cert(str(cert))
    v.is_cert("")
    v.is_cert('""')
    with pytest.raises(ValueError, match="does not have a valid file extension"):
        v.is_cert(str(tmp_path / "ca.txt"))
    with pytest.raises(ValueError, match="does not exist on the file system"):
        v.is_cert(str(tmp_path / "missing.pem"))


def test_is_cidr():
    v.is_cidr("10.0.0.0/16")
    v.is_cidr("10.0.0.1/16")
    for bad in ("10.0.0.0", "10.0.0.0/99", "nope/8"):
        with pytest.raises(ValueError, match="invalid CIDR address"):
            v.is_cidr(bad)


def test_reg_exp():
    check = v.reg_exp(r"^[a-z]+$")
    check("abc")
    check("")
    with pytest.raises(ValueError, match="does not match regular expression"):
        check("ABC")


def test_reg_exp_boolean():
    check = v.reg_exp_boolean("^true$")
    check(True)
    with pytest.raises(ValueError, match="false does not match"):
        check(False)
    with pytest.raises(ValueError, match="can only validate boolean values"):
        check("true")


@pytest.mark.parametrize(
    "multi_az, private_link, count",
    [(True, True, 3), (True, False, 6), (False, True, 1), (False, False, 2)],
)
def test_subnets_count_validator_accepts(multi_az, private_link, count):
    v.subnets_count_validator(multi_az, private_link)([f"subnet-{i}" for i in range(count)])


def test_subnets_count_validator_rejects():
    with pytest.raises(
        ValueError,
        match="The number of subnets for a multi-AZ cluster should be 6, instead received: 2",
    ):
        v.subnets_count_validator(True, False)(["a", "b"])
    with pytest.raises(ValueError, match="can only validate a slice of string"):
        v.subnets_count_validator(False, False)("subnet-1")


def test_availability_zones_count_validator():
    v.availability_zones_count_validator(True)(["a", "b", "c"])
    v.availability_zones_count_validator(False)(["a"])
    with pytest.raises(ValueError, match="single AZ cluster should be 1, instead received: 2"):
        v.availability_zones_count_validator(False)(["a", "b"])


def test_get_string_uses_default(prompt):
    answer = interactive.get_string(interactive.Input(question="Name", default="mp-1"))
    assert answer == "mp-1"
    assert prompt.questions == ["? Name: "]


def test_get_bool_and_int(prompt):
    prompt.answers = ["Yes", "n", " 7 "]
    assert interactive.get_bool(interactive.Input(question="A")) is True
    assert interactive.get_bool(interactive.Input(question="B", default=True)) is False
    assert interactive.get_int(interactive.Input(question="C")) == 7


def test_get_multiple_options(prompt):
    prompt.answers = ["sg-1, sg-3"]
    answer = interactive.get_multiple_options(
        interactive.Input(question="Groups", options=["sg-1", "sg-2", "sg-3"])
    )
    assert answer == ["sg-1", "sg-3"]


def test_prompt_validator_rejects_bad_answers():
    validator = interactive._AnswerValidator(lambda text: text, v.is_cidr)
    validator.validate(Document("10.0.0.0/16"))
    with pytest.raises(PromptValidationError):
        validator.validate(Document("10.0.0.0"))


def test_interrupt_aborts(monkeypatch):
    def interrupted(*args, **kwargs):
        raise EOFError

    monkeypatch.setattr("rosa.shared.interactive.prompt", interrupted)
    with pytest.raises(AbortedError, match="Interrupted by user"):
        interactive.get_string(interactive.Input(question="Name"))


def test_confirm_with_yes_skips_prompt(prompt):
    confirm.set_yes(True)
    assert confirm.confirm("delete everything")
    assert prompt.questions == []


def test_confirm_asks(prompt):
    prompt.answers = ["no"]
    assert not confirm.confirm("delete everything")
    assert prompt.questions == ["? Are you sure you want to delete everything?: "]


def test_enable_disable():
    assert not interactive.enabled()
    interactive.enable()
    assert interactive.enabled()
    interactive.disable()
    assert not interactive.enabled()
