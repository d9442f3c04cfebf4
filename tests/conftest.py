"""Shared fixtures: fake API clients and scripted prompt answers."""

from typing import Any, Dict, List, Optional

import pytest
from click.testing import CliRunner

from rosa.shared import interactive
from rosa.shared.errors import AWSError, ClusterNotFoundError, OCMError
from rosa.shared.interactive import confirm
from rosa.shared.ocm.models import Cluster, ClusterState


class FakeOCMClient:
    """In-memory stand-in for the cluster-management API client."""

    def __init__(self, calls: List[str]) -> None:
        self.calls = calls
        self.clusters: List[Cluster] = []
        self.ingresses: List[Any] = []
        self.node_pools: List[Any] = []
        self.machine_pools: List[Any] = []
        self.oidc_configs: List[Any] = []
        self.created: List[Any] = []
        self.oidc_config_in_use = False
        self.oidc_endpoint_in_use = False
        self.failures: Dict[str, str] = {}
        self.closed = False

    def _record(self, name: str, *args: Any) -> None:
        self.calls.append(f"ocm.{name}")
        if name in self.failures:
            raise OCMError(self.failures[name], status_code=500)

    def close(self) -> None:
        self.closed = True

    def get_cluster(self, cluster_key: str) -> Cluster:
        self._record("get_cluster")
        for cluster in self.clusters:
            if cluster_key in (cluster.id, cluster.name):
                return cluster
        raise ClusterNotFoundError(
            f"There is no cluster with identifier or name '{cluster_key}'"
        )

    def get_clusters(self) -> List[Cluster]:
        self._record("get_clusters")
        return list(self.clusters)

    def has_a_cluster_using_oidc_config(self, issuer_fragment: str) -> bool:
        self._record("has_a_cluster_using_oidc_config")
        return self.oidc_config_in_use

    def has_a_cluster_using_oidc_endpoint_url(self, oidc_endpoint_url: str) -> bool:
        self._record("has_a_cluster_using_oidc_endpoint_url")
        return self.oidc_endpoint_in_use

    def create_ingress(self, cluster_id: str, ingress: Any) -> Any:
        self._record("create_ingress")
        self.created.append(ingress)
        return ingress

    def get_ingresses(self, cluster_id: str) -> List[Any]:
        self._record("get_ingresses")
        return list(self.ingresses)

    def delete_ingress(self, cluster_id: str, ingress_id: str) -> None:
        self._record("delete_ingress")

    def create_node_pool(self, cluster_id: str, node_pool: Any) -> Any:
        self._record("create_node_pool")
        self.created.append(node_pool)
        return node_pool

    def get_node_pools(self, cluster_id: str) -> List[Any]:
        self._record("get_node_pools")
        return list(self.node_pools)

    def delete_node_pool(self, cluster_id: str, node_pool_id: str) -> None:
        self._record("delete_node_pool")

    def create_machine_pool(self, cluster_id: str, machine_pool: Any) -> Any:
        self._record("create_machine_pool")
        self.created.append(machine_pool)
        return machine_pool

    def get_machine_pools(self, cluster_id: str) -> List[Any]:
        self._record("get_machine_pools")
        return list(self.machine_pools)

    def delete_machine_pool(self, cluster_id: str, machine_pool_id: str) -> None:
        self._record("delete_machine_pool")

    def list_oidc_configs(self) -> List[Any]:
        self._record("list_oidc_configs")
        return list(self.oidc_configs)

    def delete_red_hat_hosted_oidc_config(self, oidc_config_id: str) -> None:
        self._record("delete_red_hat_hosted_oidc_config")


class FakeAWSClient:
    """In-memory stand-in for the boto3 wrapper."""

    def __init__(self, calls: List[str], region: str = "us-east-1") -> None:
        self.calls = calls
        self.region = region
        self.failures: Dict[str, str] = {}
        self.provider_arn: Optional[str] = None
        self.subnets: List[Dict[str, Any]] = []
        self.security_groups: List[Dict[str, Any]] = []

    def _record(self, name: str) -> None:
        self.calls.append(f"aws.{name}")
        if name in self.failures:
            raise AWSError(self.failures[name])

    def delete_secret_in_secrets_manager(self, secret_arn: str) -> None:
        self._record("delete_secret_in_secrets_manager")

    def delete_s3_bucket(self, bucket_name: str) -> None:
        self._record("delete_s3_bucket")

    def describe_subnets(self, subnet_ids: List[str]) -> List[Dict[str, Any]]:
        self._record("describe_subnets")
        return list(self.subnets)

    def get_security_groups(self, vpc_id: str) -> List[Dict[str, Any]]:
        self._record("get_security_groups")
        return list(self.security_groups)

    def get_open_id_connect_provider_arn(self, oidc_endpoint_url: str) -> Optional[str]:
        self._record("get_open_id_connect_provider_arn")
        return self.provider_arn

    def delete_open_id_connect_provider(self, provider_arn: str) -> None:
        self._record("delete_open_id_connect_provider")


def make_cluster(**overrides: Any) -> Cluster:
    values: Dict[str, Any] = {
        "id": "1a2b3c",
        "name": "mycluster",
        "state": ClusterState.READY,
        "region": "us-east-1",
    }
    values.update(overrides)
    return Cluster(**values)


@pytest.fixture(autouse=True)
def reset_state(tmp_path, monkeypatch):
    """Keep global flags and the user's config out of every test."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    monkeypatch.delenv("ROSA_TOKEN", raising=False)
    monkeypatch.delenv("OCM_URL", raising=False)
    interactive.disable()
    confirm.set_yes(False)
    yield
    interactive.disable()
    confirm.set_yes(False)


@pytest.fixture
def runner():
    """Create a CLI runner."""
    return CliRunner()


@pytest.fixture
def calls():
    return []


@pytest.fixture
def ocm(monkeypatch, calls):
    client = FakeOCMClient(calls)
    monkeypatch.setattr("rosa.shared.runtime.create_ocm_client", lambda: client)
    return client


@pytest.fixture
def aws(monkeypatch, calls):
    client = FakeAWSClient(calls)

    def create(region, profile):
        if region:
            client.region = region
        return client

    monkeypatch.setattr("rosa.shared.runtime.create_aws_client", create)
    return client


class ScriptedPrompt:
    """Replays queued answers; falls back to the prompt default once exhausted."""

    def __init__(self) -> None:
        self.answers: List[str] = []
        self.questions: List[str] = []

    def __call__(self, message: str, default: str = "", **kwargs: Any) -> str:
        self.questions.append(message)
        if self.answers:
            return self.answers.pop(0)
        return default


@pytest.fixture
def prompt(monkeypatch):
    scripted = ScriptedPrompt()
    monkeypatch.setattr("rosa.shared.interactive.prompt", scripted)
    return scripted
