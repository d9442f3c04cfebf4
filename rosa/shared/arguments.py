"""Reusable click options shared by many commands."""

from __future__ import annotations

from typing import Any, Callable, Optional

import click

from rosa.shared import interactive
from rosa.shared.aws.modes import MODE_FLAG_HELP
from rosa.shared.interactive import confirm

F = Callable[..., Any]


def _store(key: str) -> Callable[[click.Context, click.Parameter, Any], Any]:
    def callback(ctx: click.Context, param: click.Parameter, value: Any) -> Any:
        if value is not None:
            ctx.ensure_object(dict)[key] = value
        return value

    return callback


def _enable_interactive(ctx: click.Context, param: click.Parameter, value: bool) -> None:
    if value:
        interactive.enable()


def _enable_yes(ctx: click.Context, param: click.Parameter, value: bool) -> None:
    if value:
        confirm.set_yes(True)


def cluster_option(func: F) -> F:
    return click.option(
        "-c",
        "--cluster",
        "cluster_key",
        required=True,
        help="Name or ID of the cluster.",
    )(func)


def region_option(func: F) -> F:
    return click.option(
        "--region",
        expose_value=False,
        callback=_store("region"),
        help="Use a specific AWS region, overriding the AWS_REGION environment variable.",
    )(func)


def profile_option(func: F) -> F:
    return click.option(
        "--profile",
        expose_value=False,
        callback=_store("profile"),
        help="Use a specific AWS profile from your credential file.",
    )(func)


def mode_option(func: F) -> F:
    return click.option(
        "-m",
        "--mode",
        default=None,
        help=MODE_FLAG_HELP,
    )(func)


def interactive_option(func: F) -> F:
    return click.option(
        "-i",
        "--interactive",
        is_flag=True,
        expose_value=False,
        callback=_enable_interactive,
        help="Enable interactive mode.",
    )(func)


def yes_option(func: F) -> F:
    return click.option(
        "-y",
        "--yes",
        is_flag=True,
        expose_value=False,
        callback=_enable_yes,
        help="Automatically answer yes to confirm operation.",
    )(func)


def output_option(func: F) -> F:
    return click.option(
        "-o",
        "--output",
        "output_format",
        type=click.Choice(["json", "yaml"]),
        default=None,
        help="Output format. Allowed formats are [json yaml].",
    )(func)


def flag_changed(ctx: click.Context, name: str) -> bool:
    """Return whether parameter ``name`` was given explicitly on the command line."""

    source: Optional[click.core.ParameterSource] = ctx.get_parameter_source(name)
    return source is click.core.ParameterSource.COMMANDLINE


def option_help(ctx: click.Context, name: str) -> str:
    """Return the help text of option ``name`` for use in interactive prompts."""

    for param in ctx.command.params:
        if param.name == name and isinstance(param, click.Option):
            return param.help or ""
    return ""
