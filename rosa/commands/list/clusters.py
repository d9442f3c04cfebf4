"""``rosa list clusters``."""

from __future__ import annotations

from typing import Optional

import click

from rosa.shared import arguments, output
from rosa.shared.runtime import Runtime


@click.command("clusters", short_help="List clusters", help="List clusters.")
@arguments.output_option
@click.pass_context
def clusters_cmd(ctx: click.Context, output_format: Optional[str]) -> None:
    """List clusters."""
    with Runtime.from_context(ctx) as r:
        r.with_ocm()
        items = r.ocm_client.get_clusters()

        if output_format:
            output.dump(items, output_format)
            return
        if not items:
            r.reporter.info("No clusters available")
            return

        output.print_table(
            ["ID", "NAME", "STATE", "TOPOLOGY"],
            [
                [
                    cluster.id,
                    cluster.name,
                    cluster.state.value,
                    "Hosted CP" if cluster.hypershift else "Classic",
                ]
                for cluster in items
            ],
        )
