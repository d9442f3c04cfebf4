"""rosa CLI implementation."""

from typing import Optional

import click

from rosa import __version__
from rosa.commands import AliasedGroup
from rosa.commands.create import create
from rosa.commands.delete import delete
from rosa.commands.list import list_cmd
from rosa.shared import arguments, debug, interactive
from rosa.shared.config import get_config_manager
from rosa.shared.interactive import confirm
from rosa.shared.reporter import get_reporter


@click.group(
    cls=AliasedGroup,
    help="Command line tool for Red Hat OpenShift Service on AWS.",
)
@click.version_option(__version__, prog_name="rosa")
@click.option("--debug", "debug_mode", is_flag=True, help="Enable debug mode.")
@arguments.region_option
@arguments.profile_option
@click.pass_context
def cli(ctx: click.Context, debug_mode: bool) -> None:
    """Root command for the rosa CLI."""
    if debug_mode:
        debug.enable()
    else:
        debug.disable()
    # Per-invocation state; a long-lived process may run several commands.
    interactive.disable()
    confirm.set_yes(False)
    ctx.ensure_object(dict)


@cli.command(help="Log in to the cluster-management API with an offline token.")
@click.option("--token", "-t", required=True, help="Access or refresh token.")
@click.option(
    "--url",
    default=None,
    help="URL of the API gateway, or one of the aliases 'production', 'staging' "
    "and 'integration'.",
)
def login(token: str, url: Optional[str]) -> None:
    """Persist the token and API URL for later commands."""
    config_manager = get_config_manager()
    config_manager.set_credentials(token, url)
    get_reporter().info(f"Logged in to '{config_manager.get_url()}'")


@cli.command(help="Remove the stored credentials.")
def logout() -> None:
    """Forget the stored token."""
    get_config_manager().clear()
    get_reporter().info("Logged out")


cli.add_command(create)
cli.add_command(delete)
cli.add_command(list_cmd)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
