"""Per-command runtime: lazily built API clients plus the reporter."""

from __future__ import annotations

import re
from typing import Any, Dict, Optional

import click

from rosa.shared.aws.client import AWSClient, get_region
from rosa.shared.config import get_config_manager
from rosa.shared.errors import ValidationError
from rosa.shared.ocm.client import OCMClient
from rosa.shared.ocm.models import Cluster
from rosa.shared.reporter import Reporter, get_reporter

_CLUSTER_KEY_RE = re.compile(r"^(\w|-)+$")


def create_aws_client(region: Optional[str], profile: Optional[str]) -> AWSClient:
    return AWSClient(get_region(region, profile), profile=profile)


def create_ocm_client() -> OCMClient:
    config = get_config_manager()
    return OCMClient(config.get_url(), config.get_token())


class Runtime:
    """Holds the clients a command needs; use as a context manager."""

    def __init__(
        self,
        region: Optional[str] = None,
        profile: Optional[str] = None,
        cluster_key: Optional[str] = None,
        reporter: Optional[Reporter] = None,
    ) -> None:
        self.region = region
        self.profile = profile
        self.cluster_key = cluster_key
        self.reporter = reporter or get_reporter()
        self.aws_client: Optional[AWSClient] = None
        self.ocm_client: Optional[OCMClient] = None
        self._cluster: Optional[Cluster] = None

    @classmethod
    def from_context(cls, ctx: click.Context, cluster_key: Optional[str] = None) -> "Runtime":
        obj: Dict[str, Any] = ctx.find_root().ensure_object(dict)
        return cls(
            region=obj.get("region"),
            profile=obj.get("profile"),
            cluster_key=cluster_key,
        )

    def with_aws(self) -> "Runtime":
        if self.aws_client is None:
            self.aws_client = create_aws_client(self.region, self.profile)
            self.region = self.aws_client.region
        return self

    def with_ocm(self) -> "Runtime":
        if self.ocm_client is None:
            self.ocm_client = create_ocm_client()
        return self

    def get_cluster_key(self) -> str:
        key = self.cluster_key or ""
        if not _CLUSTER_KEY_RE.match(key):
            raise ValidationError(
                f"Cluster name, identifier or external identifier '{key}' isn't valid: "
                "it must contain only letters, digits, dashes and underscores"
            )
        return key

    def fetch_cluster(self) -> Cluster:
        if self._cluster is None:
            self.with_ocm()
            self._cluster = self.ocm_client.get_cluster(self.get_cluster_key())
        return self._cluster

    def cleanup(self) -> None:
        if self.ocm_client is not None:
            self.ocm_client.close()

    def __enter__(self) -> "Runtime":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.cleanup()
