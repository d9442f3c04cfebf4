"""HTTP client for the cluster-management (``clusters_mgmt/v1``) API."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import httpx

from rosa import __version__
from rosa.shared import debug
from rosa.shared.errors import ClusterNotFoundError, ConfigError, OCMError
from rosa.shared.ocm.models import (
    Cluster,
    Ingress,
    MachinePool,
    NodePool,
    OidcConfig,
)

API_PREFIX = "/api/clusters_mgmt/v1"
DEFAULT_TIMEOUT = 30.0
PAGE_SIZE = 100


class OCMClient:
    """Synchronous wrapper around the control-plane REST endpoints."""

    def __init__(
        self,
        url: str,
        token: Optional[str],
        *,
        transport: Optional[httpx.BaseTransport] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        if not token:
            raise ConfigError("Not logged in, run the 'rosa login' command")
        self._http = httpx.Client(
            base_url=url,
            headers={
                "Authorization": f"Bearer {token}",
                "Accept": "application/json",
                "User-Agent": f"rosa-cli/{__version__}",
            },
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )

    def close(self) -> None:
        self._http.close()

    # ------------------------------------------------------------------ #
    # Transport
    # ------------------------------------------------------------------ #

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        body: Optional[Dict[str, Any]] = None,
    ) -> Any:
        url = f"{API_PREFIX}{path}"
        debug.log_request(f"{method} {url}", {"params": params or {}, "body": body or {}})
        try:
            response = self._http.request(method, url, params=params, json=body)
        except httpx.HTTPError as e:
            raise OCMError(f"Failed to reach {url}: {e}") from e

        payload: Any = None
        if response.content:
            try:
                payload = response.json()
            except ValueError:
                payload = {"reason": response.text}
        debug.log_response(f"{method} {url} {response.status_code}", payload)

        if response.status_code >= 400:
            reason = ""
            if isinstance(payload, dict):
                reason = payload.get("reason", "")
            raise OCMError(
                f"status is {response.status_code}, {reason or response.reason_phrase}",
                status_code=response.status_code,
            )
        return payload

    def _list(self, path: str, search: Optional[str] = None) -> List[Dict[str, Any]]:
        items: List[Dict[str, Any]] = []
        page = 1
        while True:
            params: Dict[str, Any] = {"page": page, "size": PAGE_SIZE}
            if search:
                params["search"] = search
            payload = self._request("GET", path, params=params) or {}
            batch = payload.get("items", []) or []
            items.extend(batch)
            if len(batch) < PAGE_SIZE:
                return items
            page += 1

    def _count(self, path: str, search: str) -> int:
        payload = self._request("GET", path, params={"search": search, "size": 1}) or {}
        return int(payload.get("total", len(payload.get("items", []) or [])))

    # ------------------------------------------------------------------ #
    # Clusters
    # ------------------------------------------------------------------ #

    def get_cluster(self, cluster_key: str) -> Cluster:
        """Find a cluster by identifier, name, or external identifier."""

        search = (
            f"id = '{cluster_key}' or name = '{cluster_key}' "
            f"or external_id = '{cluster_key}'"
        )
        payload = self._request(
            "GET", "/clusters", params={"search": search, "size": 1}
        ) or {}
        items = payload.get("items", []) or []
        if not items:
            raise ClusterNotFoundError(
                f"There is no cluster with identifier or name '{cluster_key}'"
            )
        return Cluster.from_dict(items[0])

    def get_clusters(self) -> List[Cluster]:
        return [Cluster.from_dict(item) for item in self._list("/clusters")]

    def has_a_cluster_using_oidc_config(self, issuer_fragment: str) -> bool:
        return self._count(
            "/clusters", f"aws.sts.oidc_endpoint_url like '%{issuer_fragment}%'"
        ) > 0

    def has_a_cluster_using_oidc_endpoint_url(self, oidc_endpoint_url: str) -> bool:
        return self._count(
            "/clusters", f"aws.sts.oidc_endpoint_url = '{oidc_endpoint_url}'"
        ) > 0

    # ------------------------------------------------------------------ #
    # Ingresses
    # ------------------------------------------------------------------ #

    def create_ingress(self, cluster_id: str, ingress: Ingress) -> Ingress:
        payload = self._request(
            "POST", f"/clusters/{cluster_id}/ingresses", body=ingress.to_dict()
        )
        return Ingress.from_dict(payload or {})

    def get_ingresses(self, cluster_id: str) -> List[Ingress]:
        return [
            Ingress.from_dict(item)
            for item in self._list(f"/clusters/{cluster_id}/ingresses")
        ]

    def delete_ingress(self, cluster_id: str, ingress_id: str) -> None:
        self._request("DELETE", f"/clusters/{cluster_id}/ingresses/{ingress_id}")

    # ------------------------------------------------------------------ #
    # Node pools / machine pools
    # ------------------------------------------------------------------ #

    def create_node_pool(self, cluster_id: str, node_pool: NodePool) -> NodePool:
        payload = self._request(
            "POST", f"/clusters/{cluster_id}/node_pools", body=node_pool.to_dict()
        )
        return NodePool.from_dict(payload or {})

    def get_node_pools(self, cluster_id: str) -> List[NodePool]:
        return [
            NodePool.from_dict(item)
            for item in self._list(f"/clusters/{cluster_id}/node_pools")
        ]

    def delete_node_pool(self, cluster_id: str, node_pool_id: str) -> None:
        self._request("DELETE", f"/clusters/{cluster_id}/node_pools/{node_pool_id}")

    def create_machine_pool(self, cluster_id: str, machine_pool: MachinePool) -> MachinePool:
        payload = self._request(
            "POST", f"/clusters/{cluster_id}/machine_pools", body=machine_pool.to_dict()
        )
        return MachinePool.from_dict(payload or {})

    def get_machine_pools(self, cluster_id: str) -> List[MachinePool]:
        return [
            MachinePool.from_dict(item)
            for item in self._list(f"/clusters/{cluster_id}/machine_pools")
        ]

    def delete_machine_pool(self, cluster_id: str, machine_pool_id: str) -> None:
        self._request(
            "DELETE", f"/clusters/{cluster_id}/machine_pools/{machine_pool_id}"
        )

    # ------------------------------------------------------------------ #
    # OIDC configs
    # ------------------------------------------------------------------ #

    def list_oidc_configs(self) -> List[OidcConfig]:
        return [OidcConfig.from_dict(item) for item in self._list("/oidc_configs")]

    def delete_red_hat_hosted_oidc_config(self, oidc_config_id: str) -> None:
        self._request("DELETE", f"/oidc_configs/{oidc_config_id}")
