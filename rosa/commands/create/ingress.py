"""``rosa create ingress``: add an application router to a cluster."""

from __future__ import annotations

from typing import Any, Dict

import click

from rosa.shared import arguments, helper, interactive
from rosa.shared.errors import OCMError, RosaError, ValidationError
from rosa.shared.ocm.models import (
    ClusterState,
    IngressBuilder,
    ListeningMethod,
    LoadBalancerType,
)
from rosa.shared.runtime import Runtime

EXAMPLES = """\b
Examples:
  # Add an internal ingress to a cluster named "mycluster"
  rosa create ingress --private --cluster=mycluster

  # Add a public ingress to a cluster
  rosa create ingress --cluster=mycluster

  # Add an ingress with route selector label match
  rosa create ingress -c mycluster --label-match="foo=bar,bar=baz"
"""


def get_route_selector(label_match: str) -> Dict[str, str]:
    """Parse ``key=value,key2=value2`` into a selector map."""

    route_selectors: Dict[str, str] = {}
    if label_match == "":
        return route_selectors
    for item in label_match.split(","):
        if "=" not in item:
            raise ValueError("Expected key=value format for label-match")
        tokens = item.split("=")
        route_selectors[tokens[0].strip()] = tokens[1].strip()
    return route_selectors


def label_validator(val: Any) -> None:
    if not isinstance(val, str):
        raise ValueError(f"can only validate strings, got {val}")
    get_route_selector(val)


@click.command(
    "ingress",
    short_help="Add Ingress to cluster",
    help="Add an Ingress endpoint to determine API access to the cluster.",
    epilog=EXAMPLES,
)
@arguments.cluster_option
@click.option(
    "--private",
    is_flag=True,
    default=False,
    help="Restrict application route to direct, private connectivity.",
)
@click.option(
    "--label-match",
    default="",
    help=(
        "Label match for ingress. Format should be a comma-separated list of 'key=value'. "
        "If no label is specified, all routes will be exposed on both routers."
    ),
)
@click.option(
    "--nlb",
    is_flag=True,
    default=False,
    help="Chooses type of load balancer to be NLB.",
)
@arguments.interactive_option
@click.pass_context
def ingress_cmd(
    ctx: click.Context,
    cluster_key: str,
    private: bool,
    label_match: str,
    nlb: bool,
) -> None:
    """Add an ingress to a cluster."""

    with Runtime.from_context(ctx, cluster_key) as r:
        r.with_ocm()
        cluster_key = r.get_cluster_key()
        label_match = helper.handle_escaped_empty_string(label_match)

        if interactive.enabled():
            label_match = interactive.get_string(
                interactive.Input(
                    question="Label match for ingress",
                    help=arguments.option_help(ctx, "label_match"),
                    default=label_match,
                    validators=[label_validator],
                )
            )
        try:
            route_selectors = get_route_selector(label_match)
        except ValueError as e:
            raise ValidationError(str(e)) from e

        cluster = r.fetch_cluster()
        if cluster.private_link:
            raise RosaError(
                f"Cluster '{cluster_key}' is PrivateLink and does not support creating new ingresses"
            )
        if cluster.state != ClusterState.READY:
            raise RosaError(f"Cluster '{cluster_key}' is not yet ready")

        if interactive.enabled():
            private = interactive.get_bool(
                interactive.Input(
                    question="Private ingress",
                    help=arguments.option_help(ctx, "private"),
                    default=private,
                )
            )
            nlb = interactive.get_bool(
                interactive.Input(
                    question="Network Load Balancer",
                    help=arguments.option_help(ctx, "nlb"),
                    default=nlb,
                )
            )

        builder = IngressBuilder()
        builder.listening(ListeningMethod.INTERNAL if private else ListeningMethod.EXTERNAL)
        builder.load_balancer_type(LoadBalancerType.NLB if nlb else LoadBalancerType.CLASSIC)
        if route_selectors:
            builder.route_selectors(route_selectors)
        try:
            new_ingress = builder.build()
        except ValueError as e:
            raise RosaError(
                f"Failed to create ingress for cluster '{cluster_key}': {e}"
            ) from e

        try:
            r.ocm_client.create_ingress(cluster.id, new_ingress)
        except OCMError as e:
            raise OCMError(
                f"Failed to add ingress to cluster '{cluster_key}': {e.message}",
                status_code=e.status_code,
            ) from e

        r.reporter.info(f"Ingress has been created on cluster '{cluster_key}'.")
        r.reporter.info(f"To view all ingresses, run 'rosa list ingresses -c {cluster_key}'")
