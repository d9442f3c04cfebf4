"""Functions implementing the ``--interactive`` command line option.

When interactive mode is enabled, commands ask for every parameter, using the
flag value (if any) as the default answer. Prompts are rendered with
prompt_toolkit; answers are checked with the validators in
:mod:`rosa.shared.interactive.validation` before they are accepted.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence

from prompt_toolkit import prompt
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.document import Document
from prompt_toolkit.validation import ValidationError as PromptValidationError
from prompt_toolkit.validation import Validator as PromptValidator

from rosa.shared.errors import AbortedError
from rosa.shared.helper import slice_to_string
from rosa.shared.interactive.validation import Validator, compose, required

_state_lock = threading.Lock()
_enabled = False

_TRUE_ANSWERS = ("y", "yes", "true")
_FALSE_ANSWERS = ("n", "no", "false")


def enabled() -> bool:
    with _state_lock:
        return _enabled


def enable() -> None:
    global _enabled
    with _state_lock:
        _enabled = True


def disable() -> None:
    global _enabled
    with _state_lock:
        _enabled = False


@dataclass
class Input:
    """Describes a single question asked of the user."""

    question: str
    help: str = ""
    default: Any = None
    options: List[str] = field(default_factory=list)
    required: bool = False
    validators: List[Validator] = field(default_factory=list)


class _AnswerValidator(PromptValidator):
    """Adapt a parse-then-validate step to prompt_toolkit's validator API."""

    def __init__(self, parse, check: Validator) -> None:
        self._parse = parse
        self._check = check

    def validate(self, document: Document) -> None:
        try:
            self._check(self._parse(document.text))
        except ValueError as e:
            raise PromptValidationError(
                message=str(e), cursor_position=len(document.text)
            ) from e


def _ask(
    inp: Input,
    default: str,
    parse,
    check: Validator,
    completer: Optional[WordCompleter] = None,
) -> str:
    message = f"? {inp.question}: "
    try:
        return prompt(
            message,
            default=default,
            validator=_AnswerValidator(parse, check),
            validate_while_typing=False,
            completer=completer,
            bottom_toolbar=inp.help or None,
        )
    except (KeyboardInterrupt, EOFError) as e:
        raise AbortedError("Interrupted by user") from e


def _checks(inp: Input) -> Validator:
    validators = list(inp.validators)
    if inp.required:
        validators.insert(0, required)
    return compose(validators)


def _parse_bool(text: str) -> bool:
    answer = text.strip().lower()
    if answer in _TRUE_ANSWERS:
        return True
    if answer in _FALSE_ANSWERS:
        return False
    raise ValueError(f"'{text}' is not a valid yes/no answer")


def _parse_int(text: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        raise ValueError(f"'{text}' is not a valid integer") from None


def _parse_list(text: str) -> List[str]:
    return [item.strip() for item in text.split(",") if item.strip()]


def get_string(inp: Input) -> str:
    default = "" if inp.default is None else str(inp.default)
    answer = _ask(inp, default, lambda text: text.strip(), _checks(inp))
    return answer.strip()


def get_bool(inp: Input) -> bool:
    default = "yes" if inp.default else "no"
    answer = _ask(inp, default, _parse_bool, _checks(inp))
    return _parse_bool(answer)


def get_int(inp: Input) -> int:
    default = "" if inp.default is None else str(inp.default)
    answer = _ask(inp, default, _parse_int, _checks(inp))
    return _parse_int(answer)


def get_option(inp: Input) -> str:
    """Ask for one value out of ``inp.options``."""

    options = list(inp.options)

    def in_options(value: str) -> None:
        if value not in options:
            raise ValueError(f"'{value}' is not one of {slice_to_string(options)}")

    check = compose([_checks(inp), in_options])
    default = "" if inp.default is None else str(inp.default)
    answer = _ask(inp, default, lambda text: text.strip(), check, WordCompleter(options))
    return answer.strip()


def get_multiple_options(inp: Input) -> List[str]:
    """Ask for a comma-separated subset of ``inp.options``."""

    options = list(inp.options)

    def all_in_options(values: Sequence[str]) -> None:
        unknown = [value for value in values if value not in options]
        if unknown:
            raise ValueError(f"'{', '.join(unknown)}' not in {slice_to_string(options)}")

    check = compose([_checks(inp), all_in_options])
    default = inp.default
    if isinstance(default, (list, tuple)):
        default = ",".join(default)
    answer = _ask(
        inp, default or "", _parse_list, check, WordCompleter(options)
    )
    return _parse_list(answer)
