"""``rosa delete oidc-provider``: remove the IAM OIDC identity provider of a cluster."""

from __future__ import annotations

from typing import Optional, Protocol, Union

import click

from rosa.shared import arguments, interactive
from rosa.shared.aws import commandbuilder as awscb
from rosa.shared.aws.modes import MODES, Mode, get_mode, modes_string
from rosa.shared.errors import AWSError, ModeError, RosaError
from rosa.shared.interactive import confirm
from rosa.shared.interactive.validation import is_url
from rosa.shared.runtime import Runtime

EXAMPLES = """\b
Examples:
  # Delete the OIDC provider of an S3-hosted OIDC configuration
  rosa delete oidc-provider --mode auto \\
    --oidc-endpoint-url https://my-oidc-bucket.s3.us-east-1.amazonaws.com
"""


class DeleteOidcProviderStrategy(Protocol):
    def execute(self, r: Runtime, provider_arn: str) -> None:
        """Remove the provider identified by ``provider_arn``."""


class DeleteOidcProviderAutoStrategy:
    def execute(self, r: Runtime, provider_arn: str) -> None:
        if not confirm.confirm(f"delete the OIDC provider '{provider_arn}'"):
            r.reporter.info(f"Skipping deletion of OIDC provider '{provider_arn}'")
            return
        with r.reporter.spinner(f"Deleting OIDC provider '{provider_arn}'"):
            try:
                r.aws_client.delete_open_id_connect_provider(provider_arn)
            except AWSError as e:
                raise AWSError(
                    f"There was an error deleting the OIDC provider: {e.message}"
                ) from e
        r.reporter.info(f"Successfully deleted the OIDC provider {provider_arn}")


class DeleteOidcProviderManualStrategy:
    def execute(self, r: Runtime, provider_arn: str) -> None:
        command = (
            awscb.new_iam_command_builder()
            .set_command(awscb.DELETE_OPEN_ID_CONNECT_PROVIDER)
            .add_param(awscb.OPEN_ID_CONNECT_PROVIDER_ARN, provider_arn)
            .build()
        )
        r.reporter.info("Run the following command to delete the OIDC provider:")
        click.echo(command)


def get_oidc_provider_strategy(mode: Union[Mode, str, None]) -> DeleteOidcProviderStrategy:
    if mode == Mode.AUTO:
        return DeleteOidcProviderAutoStrategy()
    if mode == Mode.MANUAL:
        return DeleteOidcProviderManualStrategy()
    raise ModeError(f"Invalid mode. Allowed values are {modes_string()}")


def delete_oidc_provider(r: Runtime, mode: Union[Mode, str, None], oidc_endpoint_url: str) -> None:
    """Find the IAM provider for ``oidc_endpoint_url`` and remove it according to ``mode``."""

    strategy = get_oidc_provider_strategy(mode)
    r.with_aws().with_ocm()
    provider_arn = r.aws_client.get_open_id_connect_provider_arn(oidc_endpoint_url)
    if not provider_arn:
        r.reporter.info(f"No OIDC provider found for '{oidc_endpoint_url}'")
        return
    if r.ocm_client.has_a_cluster_using_oidc_endpoint_url(oidc_endpoint_url):
        raise RosaError(
            f"There are clusters using OIDC endpoint URL '{oidc_endpoint_url}', "
            "can't delete the provider"
        )
    strategy.execute(r, provider_arn)


@click.command(
    "oidc-provider",
    short_help="Delete OIDC provider",
    help="Delete the IAM OIDC identity provider of an OIDC configuration.",
    epilog=EXAMPLES,
)
@click.option(
    "--oidc-endpoint-url",
    default="",
    help="Endpoint URL for the OIDC provider to delete.",
)
@arguments.mode_option
@arguments.region_option
@arguments.profile_option
@arguments.interactive_option
@arguments.yes_option
@click.pass_context
def oidc_provider_cmd(ctx: click.Context, oidc_endpoint_url: str, mode: Optional[str]) -> None:
    """Delete the IAM OIDC provider of an endpoint URL."""
    with Runtime.from_context(ctx) as r:
        selected = get_mode(mode)

        if not interactive.enabled() and not arguments.flag_changed(ctx, "mode"):
            interactive.enable()

        if interactive.enabled():
            selected = get_mode(
                interactive.get_option(
                    interactive.Input(
                        question="OIDC provider deletion mode",
                        help=arguments.option_help(ctx, "mode"),
                        default=(selected or Mode.AUTO).value,
                        options=MODES,
                        required=True,
                    )
                )
            )

        if not oidc_endpoint_url or interactive.enabled():
            oidc_endpoint_url = interactive.get_string(
                interactive.Input(
                    question="OIDC endpoint URL",
                    help=arguments.option_help(ctx, "oidc_endpoint_url"),
                    default=oidc_endpoint_url,
                    required=True,
                    validators=[is_url],
                )
            )

        delete_oidc_provider(r, selected, oidc_endpoint_url)
