"""Tabular and structured (json/yaml) rendering of API objects."""

from __future__ import annotations

import json
import sys
from dataclasses import asdict, is_dataclass
from enum import Enum
from typing import Any, Iterable, List, Sequence

import click
import yaml
from rich import box
from rich.console import Console
from rich.table import Table

# Wide enough that piped output is never truncated or folded.
_NON_TERMINAL_WIDTH = 4096


def to_plain(obj: Any) -> Any:
    """Convert dataclasses and enums into JSON/YAML-safe builtins."""

    if is_dataclass(obj) and not isinstance(obj, type):
        return to_plain(asdict(obj))
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, dict):
        return {key: to_plain(value) for key, value in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [to_plain(item) for item in obj]
    return obj


def dump(objects: Iterable[Any], output: str) -> None:
    data = to_plain(list(objects))
    if output == "yaml":
        click.echo(yaml.safe_dump(data, sort_keys=False), nl=False)
    else:
        click.echo(json.dumps(data, indent=2))


def print_table(headers: Sequence[str], rows: List[Sequence[str]]) -> None:
    table = Table(
        box=box.SIMPLE_HEAD,
        show_edge=False,
        pad_edge=False,
        header_style="bold",
    )
    for header in headers:
        table.add_column(header, no_wrap=True)
    for row in rows:
        table.add_row(*row)
    is_tty = bool(getattr(sys.stdout, "isatty", None) and sys.stdout.isatty())
    console = Console(highlight=False, width=None if is_tty else _NON_TERMINAL_WIDTH)
    console.print(table)
