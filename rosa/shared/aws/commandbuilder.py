"""Assemble ``aws`` CLI command lines for manual mode."""

from __future__ import annotations

import shlex
from typing import List, Tuple

# Services
SECRETS_MANAGER = "secretsmanager"
S3 = "s3"
IAM = "iam"

# Commands
DELETE_SECRET = "delete-secret"
REMOVE = "rm"
REMOVE_BUCKET = "rb"
DELETE_OPEN_ID_CONNECT_PROVIDER = "delete-open-id-connect-provider"

# Params
SECRET_ID = "secret-id"
REGION = "region"
RECURSIVE = "recursive"
OPEN_ID_CONNECT_PROVIDER_ARN = "open-id-connect-provider-arn"


class AWSCommandBuilder:
    """Fluent builder producing ``aws <service> <command> [args]``."""

    def __init__(self, service: str) -> None:
        self._service = service
        self._command = ""
        self._values: List[str] = []
        self._params: List[Tuple[str, str]] = []
        self._flags: List[str] = []

    def set_command(self, command: str) -> "AWSCommandBuilder":
        self._command = command
        return self

    def add_param(self, param: str, value: str) -> "AWSCommandBuilder":
        self._params.append((param, value))
        return self

    def add_param_no_value(self, param: str) -> "AWSCommandBuilder":
        self._flags.append(param)
        return self

    def add_value_no_param(self, value: str) -> "AWSCommandBuilder":
        self._values.append(value)
        return self

    def build(self) -> str:
        parts = ["aws", self._service, self._command]
        parts.extend(shlex.quote(value) for value in self._values)
        for param, value in self._params:
            parts.extend([f"--{param}", shlex.quote(value)])
        parts.extend(f"--{flag}" for flag in self._flags)
        return " ".join(parts)


def new_secrets_manager_command_builder() -> AWSCommandBuilder:
    return AWSCommandBuilder(SECRETS_MANAGER)


def new_s3_command_builder() -> AWSCommandBuilder:
    return AWSCommandBuilder(S3)


def new_iam_command_builder() -> AWSCommandBuilder:
    return AWSCommandBuilder(IAM)


def join_commands(commands: List[str]) -> str:
    return "\n\n".join(commands)
