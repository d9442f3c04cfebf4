"""``rosa list machinepools``."""

from __future__ import annotations

from typing import Dict, Optional

import click

from rosa.shared import arguments, output
from rosa.shared.errors import OCMError
from rosa.shared.ocm.models import Autoscaling
from rosa.shared.runtime import Runtime


def _replicas(replicas: Optional[int], autoscaling: Optional[Autoscaling]) -> str:
    if autoscaling:
        return f"{autoscaling.min_replicas}-{autoscaling.max_replicas}"
    return str(replicas or 0)


def _pairs(values: Dict[str, str], separator: str) -> str:
    return ", ".join(f"{key}{separator}{value}" for key, value in sorted(values.items()))


@click.command(
    "machinepools",
    short_help="List cluster machine pools",
    help="List machine pools configured on a cluster.",
)
@arguments.cluster_option
@arguments.output_option
@click.pass_context
def machinepools_cmd(ctx: click.Context, cluster_key: str, output_format: Optional[str]) -> None:
    """List the machine pools of a cluster."""
    with Runtime.from_context(ctx, cluster_key) as r:
        cluster_key = r.get_cluster_key()
        cluster = r.fetch_cluster()
        try:
            if cluster.hypershift:
                pools = r.ocm_client.get_node_pools(cluster.id)
            else:
                machine_pools = r.ocm_client.get_machine_pools(cluster.id)
        except OCMError as e:
            raise OCMError(
                f"Failed to get machine pools for cluster '{cluster_key}': {e.message}",
                status_code=e.status_code,
            ) from e

        if cluster.hypershift:
            if output_format:
                output.dump(pools, output_format)
                return
            output.print_table(
                ["ID", "AUTOSCALING", "REPLICAS", "INSTANCE TYPE", "LABELS", "TAGS", "SUBNET"],
                [
                    [
                        pool.id,
                        "Yes" if pool.autoscaling else "No",
                        _replicas(pool.replicas, pool.autoscaling),
                        pool.aws_node_pool.instance_type,
                        _pairs(pool.labels, "="),
                        _pairs(pool.aws_node_pool.tags, ":"),
                        pool.subnet,
                    ]
                    for pool in pools
                ],
            )
            return

        if output_format:
            output.dump(machine_pools, output_format)
            return
        output.print_table(
            ["ID", "AUTOSCALING", "REPLICAS", "INSTANCE TYPE", "LABELS", "TAGS", "SECURITY GROUP IDS"],
            [
                [
                    pool.id,
                    "Yes" if pool.autoscaling else "No",
                    _replicas(pool.replicas, pool.autoscaling),
                    pool.instance_type,
                    _pairs(pool.labels, "="),
                    _pairs(pool.tags, ":"),
                    ", ".join(pool.additional_security_group_ids),
                ]
                for pool in machine_pools
            ],
        )
