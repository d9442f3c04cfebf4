"""``rosa list`` command group."""

import click

from rosa.commands import AliasedGroup
from rosa.commands.list.clusters import clusters_cmd
from rosa.commands.list.ingresses import ingresses_cmd
from rosa.commands.list.machinepools import machinepools_cmd
from rosa.commands.list.oidc_configs import oidc_configs_cmd


@click.group("list", cls=AliasedGroup, help="List all resources of a specific type")
def list_cmd() -> None:
    """List resources."""


list_cmd.add_command(clusters_cmd, aliases=("cluster",))
list_cmd.add_command(ingresses_cmd, aliases=("ingress", "route", "routes"))
list_cmd.add_command(machinepools_cmd, aliases=("machinepool", "machine-pools", "machine-pool"))
list_cmd.add_command(oidc_configs_cmd, aliases=("oidc-config", "oidcconfig", "oidcconfigs"))
