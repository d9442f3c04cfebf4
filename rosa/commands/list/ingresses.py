"""``rosa list ingresses``."""

from __future__ import annotations

from typing import Optional

import click

from rosa.shared import arguments, output
from rosa.shared.errors import OCMError
from rosa.shared.ocm.models import Ingress, ListeningMethod
from rosa.shared.runtime import Runtime


def _route_selectors(ingress: Ingress) -> str:
    return ", ".join(f"{key}={value}" for key, value in sorted(ingress.route_selectors.items()))


@click.command(
    "ingresses",
    short_help="List cluster Ingresses",
    help="List API and ingress endpoints for a cluster.",
)
@arguments.cluster_option
@arguments.output_option
@click.pass_context
def ingresses_cmd(ctx: click.Context, cluster_key: str, output_format: Optional[str]) -> None:
    """List the ingresses of a cluster."""
    with Runtime.from_context(ctx, cluster_key) as r:
        cluster_key = r.get_cluster_key()
        cluster = r.fetch_cluster()
        try:
            items = r.ocm_client.get_ingresses(cluster.id)
        except OCMError as e:
            raise OCMError(
                f"Failed to get ingresses for cluster '{cluster_key}': {e.message}",
                status_code=e.status_code,
            ) from e

        if output_format:
            output.dump(items, output_format)
            return
        if not items:
            r.reporter.info(f"There are no ingresses on cluster '{cluster_key}'")
            return

        output.print_table(
            ["ID", "APPLICATION ROUTER", "PRIVATE", "DEFAULT", "ROUTE SELECTORS", "LB-TYPE"],
            [
                [
                    ingress.id,
                    f"https://{ingress.dns_name}" if ingress.dns_name else "",
                    "yes" if ingress.listening == ListeningMethod.INTERNAL else "no",
                    "yes" if ingress.default else "no",
                    _route_selectors(ingress),
                    ingress.load_balancer_type.value,
                ]
                for ingress in items
            ],
        )
