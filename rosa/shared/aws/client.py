"""Thin wrapper over boto3 for the AWS calls the CLI needs."""

from __future__ import annotations

import functools
import logging
import os
from typing import Any, Callable, Dict, List, Optional, TypeVar

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from rosa.shared.errors import AWSError

logger = logging.getLogger("rosa.aws")

T = TypeVar("T")


def _translate_errors(func: Callable[..., T]) -> Callable[..., T]:
    """Re-raise botocore failures as :class:`AWSError`."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> T:
        try:
            return func(*args, **kwargs)
        except ClientError as e:
            error = e.response.get("Error", {})
            message = error.get("Message") or str(e)
            raise AWSError(f"{error.get('Code', 'ClientError')}: {message}") from e
        except BotoCoreError as e:
            raise AWSError(str(e)) from e

    return wrapper


@_translate_errors
def get_region(region: Optional[str] = None, profile: Optional[str] = None) -> str:
    """Resolve the AWS region from the flag, the environment, or the profile."""

    if region:
        return region
    env_region = os.environ.get("AWS_REGION") or os.environ.get("AWS_DEFAULT_REGION")
    if env_region:
        return env_region
    session_region = boto3.session.Session(profile_name=profile).region_name
    if not session_region:
        raise AWSError(
            "Region is not set. Use --region to set the region, "
            "or set the AWS_REGION environment variable"
        )
    return session_region


class AWSClient:
    """AWS operations grouped by the resources the CLI manages."""

    def __init__(
        self,
        region: str,
        profile: Optional[str] = None,
        session: Optional[boto3.session.Session] = None,
    ) -> None:
        self.region = region
        self._session = session or boto3.session.Session(
            profile_name=profile, region_name=region
        )
        self._clients: Dict[str, Any] = {}

    def _client(self, service: str) -> Any:
        if service not in self._clients:
            self._clients[service] = self._session.client(service, region_name=self.region)
        return self._clients[service]

    # ------------------------------------------------------------------ #
    # Secrets Manager
    # ------------------------------------------------------------------ #

    @_translate_errors
    def delete_secret_in_secrets_manager(self, secret_arn: str) -> None:
        logger.debug("Deleting secret %s", secret_arn)
        self._client("secretsmanager").delete_secret(
            SecretId=secret_arn, ForceDeleteWithoutRecovery=True
        )

    # ------------------------------------------------------------------ #
    # S3
    # ------------------------------------------------------------------ #

    @_translate_errors
    def empty_s3_bucket(self, bucket_name: str) -> None:
        s3 = self._client("s3")
        paginator = s3.get_paginator("list_objects_v2")
        for page in paginator.paginate(Bucket=bucket_name):
            objects = [{"Key": obj["Key"]} for obj in page.get("Contents", [])]
            if objects:
                s3.delete_objects(Bucket=bucket_name, Delete={"Objects": objects})

    @_translate_errors
    def delete_s3_bucket(self, bucket_name: str) -> None:
        """Remove every object in ``bucket_name`` and then the bucket itself."""

        logger.debug("Deleting bucket %s", bucket_name)
        self.empty_s3_bucket(bucket_name)
        self._client("s3").delete_bucket(Bucket=bucket_name)

    # ------------------------------------------------------------------ #
    # EC2
    # ------------------------------------------------------------------ #

    @_translate_errors
    def describe_subnets(self, subnet_ids: List[str]) -> List[Dict[str, Any]]:
        if not subnet_ids:
            return []
        response = self._client("ec2").describe_subnets(SubnetIds=subnet_ids)
        return response.get("Subnets", [])

    @_translate_errors
    def get_security_groups(self, vpc_id: str) -> List[Dict[str, Any]]:
        """Return non-default security groups in ``vpc_id``."""

        paginator = self._client("ec2").get_paginator("describe_security_groups")
        groups: List[Dict[str, Any]] = []
        for page in paginator.paginate(Filters=[{"Name": "vpc-id", "Values": [vpc_id]}]):
            groups.extend(
                group for group in page.get("SecurityGroups", [])
                if group.get("GroupName") != "default"
            )
        return groups

    # ------------------------------------------------------------------ #
    # IAM
    # ------------------------------------------------------------------ #

    @_translate_errors
    def get_open_id_connect_provider_arn(self, oidc_endpoint_url: str) -> Optional[str]:
        """Return the ARN of the IAM OIDC provider for ``oidc_endpoint_url``, if any."""

        issuer = oidc_endpoint_url.replace("https://", "", 1).rstrip("/")
        response = self._client("iam").list_open_id_connect_providers()
        for provider in response.get("OpenIDConnectProviderList", []):
            arn = provider.get("Arn", "")
            if arn.endswith(f":oidc-provider/{issuer}"):
                return arn
        return None

    @_translate_errors
    def delete_open_id_connect_provider(self, provider_arn: str) -> None:
        logger.debug("Deleting OIDC provider %s", provider_arn)
        self._client("iam").delete_open_id_connect_provider(
            OpenIDConnectProviderArn=provider_arn
        )
