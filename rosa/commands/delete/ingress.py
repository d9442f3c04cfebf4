"""``rosa delete ingress``: remove an additional application router."""

from __future__ import annotations

import click

from rosa.shared import arguments
from rosa.shared.errors import OCMError, RosaError
from rosa.shared.interactive import confirm
from rosa.shared.runtime import Runtime

DEFAULT_INGRESS_ALIAS = "apps"

EXAMPLES = """\b
Examples:
  # Delete ingress with ID a1b2 from a cluster named 'mycluster'
  rosa delete ingress --cluster=mycluster a1b2
"""


@click.command(
    "ingress",
    short_help="Delete cluster ingress",
    help="Delete the additional non-default application router for a cluster.",
    epilog=EXAMPLES,
)
@click.argument("ingress_id")
@arguments.cluster_option
@arguments.yes_option
@click.pass_context
def ingress_cmd(ctx: click.Context, ingress_id: str, cluster_key: str) -> None:
    """Delete an ingress from a cluster."""
    with Runtime.from_context(ctx, cluster_key) as r:
        cluster_key = r.get_cluster_key()
        cluster = r.fetch_cluster()

        try:
            ingresses = r.ocm_client.get_ingresses(cluster.id)
        except OCMError as e:
            raise OCMError(
                f"Failed to get ingresses for cluster '{cluster_key}': {e.message}",
                status_code=e.status_code,
            ) from e

        target = None
        for candidate in ingresses:
            if candidate.id == ingress_id or (
                ingress_id == DEFAULT_INGRESS_ALIAS and candidate.default
            ):
                target = candidate
                break
        if target is None:
            raise RosaError(f"Failed to get ingress '{ingress_id}' for cluster '{cluster_key}'")
        if target.default:
            raise RosaError(
                f"Ingress '{ingress_id}' is the default ingress of cluster '{cluster_key}' "
                "and cannot be deleted"
            )

        if not confirm.confirm(f"delete ingress {ingress_id} on cluster {cluster_key}"):
            return

        r.reporter.debug(f"Deleting ingress '{ingress_id}' on cluster '{cluster_key}'")
        try:
            r.ocm_client.delete_ingress(cluster.id, target.id)
        except OCMError as e:
            raise OCMError(
                f"Failed to delete ingress '{ingress_id}' on cluster '{cluster_key}': {e.message}",
                status_code=e.status_code,
            ) from e
        r.reporter.info(f"Successfully deleted ingress '{ingress_id}' from cluster '{cluster_key}'")
