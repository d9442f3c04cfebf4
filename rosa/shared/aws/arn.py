"""ARN parsing helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from botocore.utils import ArnParser

SECRETS_MANAGER = "secretsmanager"

_parser = ArnParser()


@dataclass
class ARN:
    partition: str
    service: str
    region: str
    account: str
    resource: str


def parse_arn(value: str) -> ARN:
    """Parse ``value`` into its components, raising ``ValueError`` when malformed."""

    if not isinstance(value, str) or not value.startswith("arn:"):
        raise ValueError(f"arn: invalid prefix in '{value}'")
    parsed = _parser.parse_arn(value)
    return ARN(
        partition=parsed["partition"],
        service=parsed["service"],
        region=parsed["region"],
        account=parsed["account"],
        resource=parsed["resource"],
    )


def arn_validator(value: Any) -> None:
    """Interactive validator accepting empty input or a well-formed ARN."""

    if not isinstance(value, str):
        raise ValueError(f"can only validate strings, got {value}")
    if value == "":
        return
    try:
        parse_arn(value)
    except ValueError as exc:
        raise ValueError(f"Invalid ARN: {exc}") from exc


def get_resource_id_from_secret_arn(secret_arn: str) -> str:
    """Return the secret resource id from a Secrets Manager ARN.

    ``arn:aws:secretsmanager:us-east-1:123456789012:secret:rosa-private-key-abc-Xy12Zq``
    yields ``rosa-private-key-abc-Xy12Zq``. The id keeps the random suffix
    Secrets Manager appends to the secret name.
    """

    parsed = parse_arn(secret_arn)
    if parsed.service != SECRETS_MANAGER:
        raise ValueError(f"'{secret_arn}' is not a Secrets Manager ARN")
    prefix, _, name = parsed.resource.partition(":")
    if prefix != "secret" or not name:
        raise ValueError(f"'{secret_arn}' does not reference a secret")
    return name
