"""``rosa delete`` command group."""

import click

from rosa.commands import AliasedGroup
from rosa.commands.delete.ingress import ingress_cmd
from rosa.commands.delete.machinepool import machinepool_cmd
from rosa.commands.delete.oidc_config import oidc_config_cmd
from rosa.commands.delete.oidc_provider import oidc_provider_cmd


@click.group(cls=AliasedGroup, help="Delete a specific resource")
def delete() -> None:
    """Delete resources."""


delete.add_command(ingress_cmd, aliases=("route", "routes", "ingresses"))
delete.add_command(machinepool_cmd, aliases=("machinepools", "machine-pool", "machine-pools"))
delete.add_command(oidc_config_cmd, aliases=("oidconfig", "oidcconfig"))
delete.add_command(oidc_provider_cmd, aliases=("oidcprovider",))
