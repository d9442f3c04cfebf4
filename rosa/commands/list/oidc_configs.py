"""``rosa list oidc-configs``."""

from __future__ import annotations

from typing import Optional

import click

from rosa.shared import arguments, output
from rosa.shared.runtime import Runtime


@click.command(
    "oidc-configs",
    short_help="List OIDC config resources",
    help="List OIDC config resources registered with the cluster service.",
)
@arguments.output_option
@click.pass_context
def oidc_configs_cmd(ctx: click.Context, output_format: Optional[str]) -> None:
    """List OIDC configs."""
    with Runtime.from_context(ctx) as r:
        r.with_ocm()
        configs = r.ocm_client.list_oidc_configs()

        if output_format:
            output.dump(configs, output_format)
            return
        if not configs:
            r.reporter.info("There are no OIDC configurations")
            return

        output.print_table(
            ["ID", "MANAGED", "ISSUER URL", "SECRET ARN"],
            [
                [config.id, str(config.managed).lower(), config.issuer_url, config.secret_arn]
                for config in configs
            ],
        )
