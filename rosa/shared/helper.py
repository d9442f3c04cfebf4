"""Small string and collection helpers shared by commands."""

from __future__ import annotations

from typing import Iterable, List


def slice_to_string(items: Iterable[str]) -> str:
    """Render ``items`` as ``[a, bb, ccc]``, shortest first."""

    ordered = sorted(items, key=lambda s: (len(s), s))
    return "[" + ", ".join(ordered) + "]"


def handle_escaped_empty_string(value: str) -> str:
    """Treat a literal ``""`` passed on the command line as empty."""

    if value == '""':
        return ""
    return value


def handle_empty_string_on_slice(items: Iterable[str]) -> List[str]:
    return [item for item in items if item != ""]
