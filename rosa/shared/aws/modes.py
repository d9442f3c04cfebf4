"""Execution modes for operations that touch AWS resources."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from rosa.shared.errors import ModeError


class Mode(str, Enum):
    """Supported execution modes."""

    AUTO = "auto"
    MANUAL = "manual"


MODES = [mode.value for mode in Mode]

MODE_FLAG_HELP = (
    "How to perform the operation. Valid options are:\n"
    "auto: Resource changes will be automatically applied using the current AWS account\n"
    "manual: Commands necessary to modify AWS resources will be output to be run manually"
)


def modes_string() -> str:
    return "[" + " ".join(MODES) + "]"


def get_mode(value: Optional[str]) -> Optional[Mode]:
    """Parse ``value`` into a :class:`Mode`; an empty value means unset."""

    if not value:
        return None
    try:
        return Mode(value.lower())
    except ValueError as exc:
        raise ModeError(f"Invalid mode. Allowed values are {modes_string()}") from exc
