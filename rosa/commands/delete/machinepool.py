"""``rosa delete machinepool``: remove a machine pool or node pool."""

from __future__ import annotations

import click

from rosa.shared import arguments
from rosa.shared.errors import OCMError
from rosa.shared.interactive import confirm
from rosa.shared.runtime import Runtime

EXAMPLES = """\b
Examples:
  # Delete machine pool with ID mp-1 from a cluster named 'mycluster'
  rosa delete machinepool --cluster=mycluster mp-1
"""


@click.command(
    "machinepool",
    short_help="Delete machine pool",
    help="Delete machine pool from cluster.",
    epilog=EXAMPLES,
)
@click.argument("machine_pool_id")
@arguments.cluster_option
@arguments.yes_option
@click.pass_context
def machinepool_cmd(ctx: click.Context, machine_pool_id: str, cluster_key: str) -> None:
    """Delete a machine pool or node pool from a cluster."""
    with Runtime.from_context(ctx, cluster_key) as r:
        cluster_key = r.get_cluster_key()
        cluster = r.fetch_cluster()

        if not confirm.confirm(
            f"delete machine pool '{machine_pool_id}' on cluster '{cluster_key}'"
        ):
            return

        try:
            if cluster.hypershift:
                r.ocm_client.delete_node_pool(cluster.id, machine_pool_id)
            else:
                r.ocm_client.delete_machine_pool(cluster.id, machine_pool_id)
        except OCMError as e:
            raise OCMError(
                f"Failed to delete machine pool '{machine_pool_id}' on cluster "
                f"'{cluster_key}': {e.message}",
                status_code=e.status_code,
            ) from e
        r.reporter.info(
            f"Successfully deleted machine pool '{machine_pool_id}' from cluster '{cluster_key}'"
        )
