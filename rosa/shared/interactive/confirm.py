"""Support for the ``--yes`` flag and yes/no confirmations."""

from __future__ import annotations

import threading

from rosa.shared import interactive

_state_lock = threading.Lock()
_yes = False


def set_yes(value: bool) -> None:
    global _yes
    with _state_lock:
        _yes = value


def yes() -> bool:
    with _state_lock:
        return _yes


def prompt(default: bool, question: str) -> bool:
    """Return ``True`` when ``--yes`` was given, otherwise ask ``question``."""

    if yes():
        return True
    return interactive.get_bool(interactive.Input(question=question, default=default))


def confirm(question: str) -> bool:
    return prompt(False, f"Are you sure you want to {question}?")
