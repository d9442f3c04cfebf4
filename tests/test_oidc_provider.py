"""Tests for IAM OIDC provider deletion."""

import pytest

from rosa.cli import cli
from rosa.commands.delete.oidc_provider import (
    DeleteOidcProviderAutoStrategy,
    DeleteOidcProviderManualStrategy,
    get_oidc_provider_strategy,
)
from rosa.shared.aws.modes import Mode
from rosa.shared.errors import ModeError

URL = "https://mybucket.s3.us-east-1.amazonaws.com"
PROVIDER_ARN = "arn:aws:iam::123456789012:oidc-provider/mybucket.s3.us-east-1.amazonaws.com"


def _delete(*extra):
    return ["delete", "oidc-provider", "--oidc-endpoint-url", URL, "--region", "us-east-1", *extra]


def test_strategy_selection():
    assert isinstance(get_oidc_provider_strategy(Mode.AUTO), DeleteOidcProviderAutoStrategy)
    assert isinstance(get_oidc_provider_strategy("manual"), DeleteOidcProviderManualStrategy)
    with pytest.raises(ModeError):
        get_oidc_provider_strategy(None)


def test_manual_mode(runner, ocm, aws, calls):
    aws.provider_arn = PROVIDER_ARN
    result = runner.invoke(cli, _delete("--mode", "manual"))
    assert result.exit_code == 0, result.output
    assert (
        "aws iam delete-open-id-connect-provider "
        f"--open-id-connect-provider-arn {PROVIDER_ARN}"
    ) in result.output
    assert "aws.delete_open_id_connect_provider" not in calls


def test_auto_mode(runner, ocm, aws, calls):
    aws.provider_arn = PROVIDER_ARN
    result = runner.invoke(cli, _delete("--mode", "auto", "--yes"))
    assert result.exit_code == 0, result.output
    assert calls[-1] == "aws.delete_open_id_connect_provider"
    assert f"I: Successfully deleted the OIDC provider {PROVIDER_ARN}" in result.output


def test_auto_mode_declined(runner, ocm, aws, calls, prompt):
    aws.provider_arn = PROVIDER_ARN
    prompt.answers = ["no"]
    result = runner.invoke(cli, _delete("--mode", "auto"))
    assert result.exit_code == 0, result.output
    assert "Are you sure you want to delete the OIDC provider" in prompt.questions[0]
    assert "aws.delete_open_id_connect_provider" not in calls


def test_auto_mode_failure(runner, ocm, aws):
    aws.provider_arn = PROVIDER_ARN
    aws.failures["delete_open_id_connect_provider"] = "DeleteConflict: in use"
    result = runner.invoke(cli, _delete("--mode", "auto", "-y"))
    assert result.exit_code == 1
    assert "There was an error deleting the OIDC provider: DeleteConflict: in use" in result.output


def test_no_provider_found(runner, ocm, aws, calls):
    result = runner.invoke(cli, _delete("--mode", "auto", "-y"))
    assert result.exit_code == 0
    assert f"I: No OIDC provider found for '{URL}'" in result.output
    assert "ocm.has_a_cluster_using_oidc_endpoint_url" not in calls


def test_provider_in_use(runner, ocm, aws, calls):
    aws.provider_arn = PROVIDER_ARN
    ocm.oidc_endpoint_in_use = True
    result = runner.invoke(cli, _delete("--mode", "auto", "-y"))
    assert result.exit_code == 1
    assert f"There are clusters using OIDC endpoint URL '{URL}'" in result.output
    assert "aws.delete_open_id_connect_provider" not in calls


def test_prompts_when_mode_not_given(runner, ocm, aws, prompt):
    aws.provider_arn = PROVIDER_ARN
    prompt.answers = ["manual", URL]
    result = runner.invoke(cli, ["delete", "oidcprovider", "--region", "us-east-1"])
    assert result.exit_code == 0, result.output
    assert len(prompt.questions) == 2
    assert "aws iam delete-open-id-connect-provider" in result.output
