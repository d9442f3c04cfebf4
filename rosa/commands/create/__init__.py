"""``rosa create`` command group."""

import click

from rosa.commands import AliasedGroup
from rosa.commands.create.ingress import ingress_cmd
from rosa.commands.create.machinepool import machinepool_cmd


@click.group(cls=AliasedGroup, help="Create a resource from stdin")
def create() -> None:
    """Create resources."""


create.add_command(ingress_cmd, aliases=("route", "routes", "ingresses"))
create.add_command(machinepool_cmd, aliases=("machinepools", "machine-pool", "machine-pools"))
