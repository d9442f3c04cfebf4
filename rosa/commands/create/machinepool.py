"""``rosa create machinepool``: add compute nodes to a cluster.

Hosted-control-plane clusters receive a node pool; classic clusters receive a
machine pool. Both carry the instance type, replica count or autoscaling
bounds, labels, AWS tags and additional security groups.
"""

from __future__ import annotations

import re
from typing import Any, Dict, List, Optional

import click

from rosa.shared import arguments, helper, interactive
from rosa.shared.errors import OCMError, RosaError, ValidationError
from rosa.shared.interactive.validation import reg_exp
from rosa.shared.ocm.models import (
    AWSNodePoolBuilder,
    Autoscaling,
    Cluster,
    ClusterState,
    MachinePool,
    NodePool,
)
from rosa.shared.runtime import Runtime

DEFAULT_INSTANCE_TYPE = "m5.xlarge"

MACHINE_POOL_NAME_RE = r"^[a-z]([-a-z0-9]*[a-z0-9])?$"

EXAMPLES = """\b
Examples:
  # Interactively add a machine pool to a cluster named "mycluster"
  rosa create machinepool --cluster=mycluster --interactive

  # Add a machine pool mp-1 with 3 replicas of m5.xlarge to a cluster
  rosa create machinepool --cluster=mycluster --name=mp-1 --replicas=3 --instance-type=m5.xlarge

  # Add an autoscaling machine pool with labels and AWS tags
  rosa create machinepool -c mycluster --name=mp-1 --enable-autoscaling \\
    --min-replicas=2 --max-replicas=6 --labels=foo=bar --tags=team:infra
"""


def parse_labels(value: str) -> Dict[str, str]:
    labels: Dict[str, str] = {}
    for item in filter(None, (part.strip() for part in value.split(","))):
        if "=" not in item:
            raise ValueError(f"Expected key=value format for labels, got '{item}'")
        key, _, label_value = item.partition("=")
        labels[key.strip()] = label_value.strip()
    return labels


def parse_tags(value: str) -> Dict[str, str]:
    tags: Dict[str, str] = {}
    for item in filter(None, (part.strip() for part in value.split(","))):
        if ":" not in item:
            raise ValueError(f"Expected key:value format for tags, got '{item}'")
        key, _, tag_value = item.partition(":")
        tags[key.strip()] = tag_value.strip()
    return tags


def parse_security_group_ids(value: str) -> List[str]:
    return helper.handle_empty_string_on_slice(item.strip() for item in value.split(","))


def get_vpc_id_from_subnet(subnet: Dict[str, Any]) -> str:
    vpc_id = subnet.get("VpcId")
    if not vpc_id:
        raise ValidationError(
            "Unexpected situation a VPC ID should have been selected based on chosen subnets"
        )
    return vpc_id


def get_security_groups_option(
    r: Optional[Runtime], ctx: Optional[click.Context], cluster: Cluster
) -> List[str]:
    """Ask which security groups of the cluster's VPC to attach."""

    if not cluster.subnet_ids:
        raise ValidationError(
            "Expected cluster's subnets to contain subnets IDs, but got an empty list"
        )
    r.with_aws()
    subnets = r.aws_client.describe_subnets([cluster.subnet_ids[0]])
    if not subnets:
        raise ValidationError(
            f"Failed to find subnet '{cluster.subnet_ids[0]}' in region '{r.region}'"
        )
    vpc_id = get_vpc_id_from_subnet(subnets[0])
    groups = r.aws_client.get_security_groups(vpc_id)
    if not groups:
        r.reporter.warn(f"No additional security groups found in VPC '{vpc_id}'")
        return []
    return interactive.get_multiple_options(
        interactive.Input(
            question="Additional Security Group IDs",
            help=arguments.option_help(ctx, "additional_security_group_ids") if ctx else "",
            options=[group["GroupId"] for group in groups],
        )
    )


def create_aws_node_pool_builder(
    instance_type: str,
    security_group_ids: List[str],
    aws_tags: Dict[str, str],
) -> AWSNodePoolBuilder:
    builder = AWSNodePoolBuilder().instance_type(instance_type)
    if security_group_ids:
        builder.additional_security_group_ids(security_group_ids)
    if aws_tags:
        builder.tags(aws_tags)
    return builder


def _validate_replicas(
    enable_autoscaling: bool,
    replicas: int,
    min_replicas: int,
    max_replicas: int,
) -> None:
    if enable_autoscaling:
        if min_replicas < 0:
            raise ValidationError("Min replicas must be a non-negative number when autoscaling is set")
        if max_replicas < 1:
            raise ValidationError("Max replicas must be greater than zero when autoscaling is set")
        if max_replicas < min_replicas:
            raise ValidationError("Max replicas must not be less than min replicas")
    elif replicas < 0:
        raise ValidationError("The number of machine pool replicas needs to be a non-negative integer")


@click.command(
    "machinepool",
    short_help="Add machine pool to cluster",
    help="Add a machine pool to the cluster.",
    epilog=EXAMPLES,
)
@arguments.cluster_option
@click.option("--name", default="", help="Name for the machine pool (required).")
@click.option("--replicas", type=int, default=0, help="Count of machines for the machine pool.")
@click.option(
    "--enable-autoscaling",
    is_flag=True,
    default=False,
    help="Enable autoscaling for the machine pool.",
)
@click.option("--min-replicas", type=int, default=0, help="Minimum number of machines for the machine pool.")
@click.option("--max-replicas", type=int, default=0, help="Maximum number of machines for the machine pool.")
@click.option(
    "--instance-type",
    default=DEFAULT_INSTANCE_TYPE,
    show_default=True,
    help="Instance type that should be used.",
)
@click.option(
    "--labels",
    default="",
    help="Labels for machine pool. Format should be a comma-separated list of 'key=value'.",
)
@click.option(
    "--tags",
    default="",
    help="Apply user defined tags to all machine pool resources created in AWS. "
    "Format should be a comma-separated list of 'key:value'.",
)
@click.option("--subnet", default="", help="Select subnet to create a single AZ node pool (hosted clusters).")
@click.option(
    "--additional-security-group-ids",
    default="",
    help="Additional security group IDs to be added to the machine pool. "
    "Format should be a comma-separated list.",
)
@arguments.region_option
@arguments.profile_option
@arguments.interactive_option
@click.pass_context
def machinepool_cmd(
    ctx: click.Context,
    cluster_key: str,
    name: str,
    replicas: int,
    enable_autoscaling: bool,
    min_replicas: int,
    max_replicas: int,
    instance_type: str,
    labels: str,
    tags: str,
    subnet: str,
    additional_security_group_ids: str,
) -> None:
    """Add a machine pool or node pool to a cluster."""

    labels = helper.handle_escaped_empty_string(labels)
    tags = helper.handle_escaped_empty_string(tags)
    subnet = helper.handle_escaped_empty_string(subnet)
    additional_security_group_ids = helper.handle_escaped_empty_string(
        additional_security_group_ids
    )
    with Runtime.from_context(ctx, cluster_key) as r:
        cluster_key = r.get_cluster_key()
        cluster = r.fetch_cluster()
        if cluster.state != ClusterState.READY:
            raise RosaError(f"Cluster '{cluster_key}' is not ready")

        if interactive.enabled():
            name = interactive.get_string(
                interactive.Input(
                    question="Machine pool name",
                    help=arguments.option_help(ctx, "name"),
                    default=name,
                    required=True,
                    validators=[reg_exp(MACHINE_POOL_NAME_RE)],
                )
            )
        if not re.match(MACHINE_POOL_NAME_RE, name or ""):
            raise ValidationError(
                "Expected a valid name for the machine pool: it must consist of lower-case "
                "alphanumeric characters or '-', and start and end with an alphanumeric character"
            )

        if interactive.enabled():
            enable_autoscaling = interactive.get_bool(
                interactive.Input(
                    question="Enable autoscaling",
                    help=arguments.option_help(ctx, "enable_autoscaling"),
                    default=enable_autoscaling,
                )
            )
            if enable_autoscaling:
                min_replicas = interactive.get_int(
                    interactive.Input(
                        question="Min replicas",
                        help=arguments.option_help(ctx, "min_replicas"),
                        default=min_replicas,
                    )
                )
                max_replicas = interactive.get_int(
                    interactive.Input(
                        question="Max replicas",
                        help=arguments.option_help(ctx, "max_replicas"),
                        default=max_replicas,
                    )
                )
            else:
                replicas = interactive.get_int(
                    interactive.Input(
                        question="Replicas",
                        help=arguments.option_help(ctx, "replicas"),
                        default=replicas,
                    )
                )
            instance_type = interactive.get_string(
                interactive.Input(
                    question="Instance type",
                    help=arguments.option_help(ctx, "instance_type"),
                    default=instance_type,
                    required=True,
                )
            )
        _validate_replicas(enable_autoscaling, replicas, min_replicas, max_replicas)

        try:
            parsed_labels = parse_labels(labels)
            aws_tags = parse_tags(tags)
        except ValueError as e:
            raise ValidationError(str(e)) from e

        security_group_ids = parse_security_group_ids(additional_security_group_ids)
        if not security_group_ids and interactive.enabled():
            security_group_ids = get_security_groups_option(r, ctx, cluster)

        autoscaling = Autoscaling(min_replicas, max_replicas) if enable_autoscaling else None
        try:
            if cluster.hypershift:
                node_pool = NodePool(
                    id=name,
                    aws_node_pool=create_aws_node_pool_builder(
                        instance_type, security_group_ids, aws_tags
                    ).build(),
                    replicas=None if autoscaling else replicas,
                    autoscaling=autoscaling,
                    subnet=subnet,
                    labels=parsed_labels,
                )
                r.ocm_client.create_node_pool(cluster.id, node_pool)
            else:
                if subnet:
                    raise ValidationError("Setting the subnet is only supported for hosted clusters")
                pool = MachinePool(
                    id=name,
                    instance_type=instance_type,
                    replicas=None if autoscaling else replicas,
                    autoscaling=autoscaling,
                    labels=parsed_labels,
                    additional_security_group_ids=security_group_ids,
                    tags=aws_tags,
                )
                r.ocm_client.create_machine_pool(cluster.id, pool)
        except OCMError as e:
            raise OCMError(
                f"Failed to add machine pool to cluster '{cluster_key}': {e.message}",
                status_code=e.status_code,
            ) from e

        r.reporter.info(f"Machine pool '{name}' created successfully on cluster '{cluster_key}'")
        r.reporter.info(f"To view all machine pools, run 'rosa list machinepools -c {cluster_key}'")
