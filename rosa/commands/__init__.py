"""Command groups exposed by the rosa CLI."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

import click

from rosa.shared.errors import RosaError

# click 8.2+ reports a bare group invocation as a usage error carrying the help text.
_HELP_ERRORS = tuple(
    cls for cls in (getattr(click.exceptions, "NoArgsIsHelpError", None),) if cls
)


def _reported(e: click.UsageError) -> click.ClickException:
    if isinstance(e, _HELP_ERRORS):
        return e
    return RosaError(e.format_message())


class AliasedGroup(click.Group):
    """Group whose subcommands can be invoked under alternative names.

    Usage errors (unknown options, missing required flags, bad values) are
    reported like any other failure: ``E: <message>`` and exit status 1.
    """

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._aliases: Dict[str, str] = {}

    def add_command(
        self,
        cmd: click.Command,
        name: Optional[str] = None,
        aliases: Iterable[str] = (),
    ) -> None:
        super().add_command(cmd, name)
        for alias in aliases:
            self._aliases[alias] = name or cmd.name

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        return super().get_command(ctx, self._aliases.get(cmd_name, cmd_name))

    def make_context(
        self,
        info_name: Optional[str],
        args: List[str],
        parent: Optional[click.Context] = None,
        **extra: Any,
    ) -> click.Context:
        try:
            return super().make_context(info_name, args, parent=parent, **extra)
        except click.UsageError as e:
            raise _reported(e) from e

    def invoke(self, ctx: click.Context) -> Any:
        try:
            return super().invoke(ctx)
        except click.UsageError as e:
            raise _reported(e) from e
