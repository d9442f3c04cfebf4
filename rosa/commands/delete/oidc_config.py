"""``rosa delete oidc-config``: clean up an OIDC configuration from its secret ARN.

The same logical deletion runs through one of three strategies:

* Red Hat hosted: drop the hosted config on the control plane, then the
  private key secret.
* auto: drop the private key secret, then empty and remove the S3 bucket.
* manual: print the equivalent ``aws`` commands.

Each strategy stops at its first failure; nothing is rolled back.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, Union

import click

from rosa.commands.delete.oidc_provider import delete_oidc_provider
from rosa.shared import arguments, interactive
from rosa.shared.aws import commandbuilder as awscb
from rosa.shared.aws.arn import (
    SECRETS_MANAGER,
    arn_validator,
    get_resource_id_from_secret_arn,
    parse_arn,
)
from rosa.shared.aws.modes import MODES, Mode, get_mode, modes_string
from rosa.shared.errors import AWSError, ModeError, OCMError, RosaError, ValidationError
from rosa.shared.runtime import Runtime

PREFIX_FOR_PRIVATE_KEY_SECRET = "rosa-private-key-"

EXAMPLES = """\b
Examples:
  # Delete OIDC config based on secret ARN that has been supplied
  rosa delete oidc-config --oidc-private-key-secret-arn <oidc_private_key_secret_arn>
"""


@dataclass
class OidcConfigInput:
    private_key_secret_arn: str
    bucket_name: str
    region: str

    @property
    def issuer_url(self) -> str:
        return f"https://{self.bucket_name}.s3.{self.region}.amazonaws.com"


class DeleteOidcConfigStrategy(Protocol):
    def execute(self, r: Runtime) -> None:
        """Run the ordered deletion steps, raising on the first failure."""


@dataclass
class DeleteRedHatHostedOidcConfigAutoStrategy:
    oidc_config: OidcConfigInput

    def execute(self, r: Runtime) -> None:
        r.with_ocm()
        with r.reporter.spinner("Deleting Red Hat hosted OIDC configuration"):
            try:
                r.ocm_client.delete_red_hat_hosted_oidc_config(self.oidc_config.bucket_name)
            except OCMError as e:
                raise OCMError(
                    f"There was a problem deleting Red Hat Hosted OIDC Configuration: {e.message}",
                    status_code=e.status_code,
                ) from e
            try:
                r.aws_client.delete_secret_in_secrets_manager(
                    self.oidc_config.private_key_secret_arn
                )
            except AWSError as e:
                raise AWSError(
                    f"There was a problem deleting private key from secrets manager: {e.message}"
                ) from e
        if r.reporter.is_terminal():
            r.reporter.info("Deleted OIDC configuration")


@dataclass
class DeleteOidcConfigAutoStrategy:
    oidc_config: OidcConfigInput

    def execute(self, r: Runtime) -> None:
        bucket_name = self.oidc_config.bucket_name
        with r.reporter.spinner(f"Deleting OIDC configuration '{bucket_name}'"):
            try:
                r.aws_client.delete_secret_in_secrets_manager(
                    self.oidc_config.private_key_secret_arn
                )
            except AWSError as e:
                raise AWSError(
                    f"There was a problem deleting private key from secrets manager: {e.message}"
                ) from e
            try:
                r.aws_client.delete_s3_bucket(bucket_name)
            except AWSError as e:
                raise AWSError(
                    f"There was a problem deleting S3 bucket '{bucket_name}': {e.message}"
                ) from e
        if r.reporter.is_terminal():
            r.reporter.info("Deleted OIDC configuration")


@dataclass
class DeleteOidcConfigManualStrategy:
    oidc_config: OidcConfigInput

    def execute(self, r: Runtime) -> None:
        bucket_name = self.oidc_config.bucket_name
        commands = [
            awscb.new_secrets_manager_command_builder()
            .set_command(awscb.DELETE_SECRET)
            .add_param(awscb.SECRET_ID, self.oidc_config.private_key_secret_arn)
            .add_param(awscb.REGION, self.oidc_config.region)
            .build(),
            awscb.new_s3_command_builder()
            .set_command(awscb.REMOVE)
            .add_value_no_param(f"s3://{bucket_name}")
            .add_param_no_value(awscb.RECURSIVE)
            .build(),
            awscb.new_s3_command_builder()
            .set_command(awscb.REMOVE_BUCKET)
            .add_value_no_param(f"s3://{bucket_name}")
            .build(),
        ]
        click.echo(awscb.join_commands(commands))


def get_oidc_config_strategy(
    mode: Union[Mode, str, None],
    oidc_config: OidcConfigInput,
    red_hat_hosted: bool = False,
) -> DeleteOidcConfigStrategy:
    """Pick the deletion strategy for ``mode`` and config ownership."""

    if red_hat_hosted:
        return DeleteRedHatHostedOidcConfigAutoStrategy(oidc_config)
    if mode == Mode.AUTO:
        return DeleteOidcConfigAutoStrategy(oidc_config)
    if mode == Mode.MANUAL:
        return DeleteOidcConfigManualStrategy(oidc_config)
    raise ModeError(f"Invalid mode. Allowed values are {modes_string()}")


def build_oidc_config_input(
    r: Runtime,
    private_key_secret_arn: str,
    region: str,
    red_hat_hosted: bool = False,
) -> OidcConfigInput:
    """Derive the bucket name from the secret ARN and check the config is unused."""

    try:
        parsed = parse_arn(private_key_secret_arn)
    except ValueError as e:
        raise ValidationError(
            f"There was a problem parsing secret ARN '{private_key_secret_arn}' : {e}"
        ) from e
    if parsed.service != SECRETS_MANAGER:
        raise ValidationError("Supplied secret ARN is not a valid Secrets Manager ARN")
    if parsed.region != region:
        raise ValidationError(
            f"Secret region '{parsed.region}' differs from chosen region '{region}', "
            "please run the command supplying region parameter."
        )
    try:
        secret_resource_name = get_resource_id_from_secret_arn(private_key_secret_arn)
    except ValueError as e:
        raise ValidationError(
            f"There was a problem parsing secret ARN '{private_key_secret_arn}' : {e}"
        ) from e

    bucket_name = secret_resource_name
    if bucket_name.startswith(PREFIX_FOR_PRIVATE_KEY_SECRET):
        bucket_name = bucket_name[len(PREFIX_FOR_PRIVATE_KEY_SECRET):]
    if not red_hat_hosted:
        index = bucket_name.rfind("-")
        if index != -1:
            bucket_name = bucket_name[:index]

    r.with_ocm()
    try:
        in_use = r.ocm_client.has_a_cluster_using_oidc_config(bucket_name)
    except OCMError as e:
        raise OCMError(
            "There was a problem checking if any clusters are using OIDC config "
            f"'{bucket_name}' : {e.message}",
            status_code=e.status_code,
        ) from e
    if in_use:
        raise RosaError(
            f"There are clusters using OIDC config '{bucket_name}', can't delete the configuration"
        )
    return OidcConfigInput(
        private_key_secret_arn=private_key_secret_arn,
        bucket_name=bucket_name,
        region=region,
    )


@click.command(
    "oidc-config",
    hidden=True,
    short_help="Delete OIDC Config",
    help="Cleans up OIDC config based on secret ARN.",
    epilog=EXAMPLES,
)
@click.option(
    "--oidc-private-key-secret-arn",
    default="",
    help="AWS Secrets Manager ARN for identification of config",
)
@click.option(
    "--rh-hosted",
    "red_hat_hosted",
    is_flag=True,
    default=False,
    help="Indicates whether it is a Red Hat hosted or Customer hosted OIDC Configuration.",
)
@arguments.mode_option
@arguments.region_option
@arguments.profile_option
@arguments.interactive_option
@arguments.yes_option
@click.pass_context
def oidc_config_cmd(
    ctx: click.Context,
    oidc_private_key_secret_arn: str,
    red_hat_hosted: bool,
    mode: Optional[str],
) -> None:
    """Delete an OIDC config and its IAM OIDC provider."""

    with Runtime.from_context(ctx) as r:
        selected = get_mode(mode)

        if red_hat_hosted and selected != Mode.AUTO:
            r.reporter.warn("--rh-hosted param is not supported outside --mode auto flow.")
            ctx.exit(1)

        try:
            r.with_aws()
        except AWSError as e:
            raise AWSError(f"Error getting region: {e.message}") from e
        region = r.region

        if not interactive.enabled() and not arguments.flag_changed(ctx, "mode"):
            interactive.enable()

        if interactive.enabled():
            selected = get_mode(
                interactive.get_option(
                    interactive.Input(
                        question="OIDC config deletion mode",
                        help=arguments.option_help(ctx, "mode"),
                        default=Mode.AUTO.value,
                        options=MODES,
                        required=True,
                    )
                )
            )

        secret_arn = oidc_private_key_secret_arn
        if secret_arn == "" or interactive.enabled():
            secret_arn = interactive.get_string(
                interactive.Input(
                    question="OIDC Private Key Secret ARN",
                    help=arguments.option_help(ctx, "oidc_private_key_secret_arn"),
                    required=True,
                    default=secret_arn,
                )
            )
        try:
            arn_validator(secret_arn)
        except ValueError as e:
            raise ValidationError(str(e)) from e

        oidc_input = build_oidc_config_input(r, secret_arn, region, red_hat_hosted)
        strategy = get_oidc_config_strategy(selected, oidc_input, red_hat_hosted)
        strategy.execute(r)
        delete_oidc_provider(r, selected, oidc_input.issuer_url)
