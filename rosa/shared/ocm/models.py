"""Request/response objects for the cluster-management API.

Each model knows how to read itself from the API's JSON (``from_dict``) and,
where the CLI sends it, how to serialise itself (``to_dict``). Builders give
commands a fluent way to assemble request bodies.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class ClusterState(str, Enum):
    """Lifecycle states reported for a cluster."""

    ERROR = "error"
    HIBERNATING = "hibernating"
    INSTALLING = "installing"
    PENDING = "pending"
    POWERING_DOWN = "powering_down"
    READY = "ready"
    RESUMING = "resuming"
    UNINSTALLING = "uninstalling"
    UNKNOWN = "unknown"
    VALIDATING = "validating"
    WAITING = "waiting"

    @classmethod
    def from_string(cls, value: Optional[str]) -> "ClusterState":
        try:
            return cls(value or "unknown")
        except ValueError:
            return cls.UNKNOWN


class ListeningMethod(str, Enum):
    INTERNAL = "internal"
    EXTERNAL = "external"

    @classmethod
    def from_string(cls, value: Optional[str]) -> "ListeningMethod":
        try:
            return cls(value or "external")
        except ValueError:
            return cls.EXTERNAL


class LoadBalancerType(str, Enum):
    CLASSIC = "classic"
    NLB = "nlb"

    @classmethod
    def from_string(cls, value: Optional[str]) -> "LoadBalancerType":
        try:
            return cls(value or "classic")
        except ValueError:
            return cls.CLASSIC


# --------------------------------------------------------------------------- #
# Cluster
# --------------------------------------------------------------------------- #


@dataclass
class Cluster:
    id: str
    name: str
    state: ClusterState
    region: str = ""
    version: str = ""
    multi_az: bool = False
    hypershift: bool = False
    private_link: bool = False
    subnet_ids: List[str] = field(default_factory=list)
    oidc_endpoint_url: str = ""
    oidc_config_id: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Cluster":
        aws = data.get("aws", {}) or {}
        sts = aws.get("sts", {}) or {}
        return cls(
            id=data.get("id", ""),
            name=data.get("name", ""),
            state=ClusterState.from_string(data.get("state")),
            region=(data.get("region") or {}).get("id", ""),
            version=(data.get("version") or {}).get("raw_id", ""),
            multi_az=bool(data.get("multi_az", False)),
            hypershift=bool((data.get("hypershift") or {}).get("enabled", False)),
            private_link=bool(aws.get("private_link", False)),
            subnet_ids=list(aws.get("subnet_ids", []) or []),
            oidc_endpoint_url=sts.get("oidc_endpoint_url", ""),
            oidc_config_id=(sts.get("oidc_config") or {}).get("id", ""),
        )


# --------------------------------------------------------------------------- #
# Ingress
# --------------------------------------------------------------------------- #


@dataclass
class Ingress:
    listening: ListeningMethod
    load_balancer_type: LoadBalancerType = LoadBalancerType.CLASSIC
    route_selectors: Dict[str, str] = field(default_factory=dict)
    id: str = ""
    default: bool = False
    dns_name: str = ""

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {
            "listening": self.listening.value,
            "load_balancer_type": self.load_balancer_type.value,
        }
        if self.route_selectors:
            body["route_selectors"] = dict(self.route_selectors)
        return body

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Ingress":
        return cls(
            id=data.get("id", ""),
            listening=ListeningMethod.from_string(data.get("listening")),
            load_balancer_type=LoadBalancerType.from_string(data.get("load_balancer_type")),
            route_selectors=dict(data.get("route_selectors", {}) or {}),
            default=bool(data.get("default", False)),
            dns_name=data.get("dns_name", ""),
        )


class IngressBuilder:
    def __init__(self) -> None:
        self._listening: Optional[ListeningMethod] = None
        self._load_balancer_type = LoadBalancerType.CLASSIC
        self._route_selectors: Dict[str, str] = {}

    def listening(self, method: ListeningMethod) -> "IngressBuilder":
        self._listening = method
        return self

    def load_balancer_type(self, lb_type: LoadBalancerType) -> "IngressBuilder":
        self._load_balancer_type = lb_type
        return self

    def route_selectors(self, selectors: Dict[str, str]) -> "IngressBuilder":
        self._route_selectors = dict(selectors)
        return self

    def build(self) -> Ingress:
        if self._listening is None:
            raise ValueError("ingress listening method must be set")
        return Ingress(
            listening=self._listening,
            load_balancer_type=self._load_balancer_type,
            route_selectors=self._route_selectors,
        )


# --------------------------------------------------------------------------- #
# Node pools (hosted control plane) and machine pools (classic)
# --------------------------------------------------------------------------- #


@dataclass
class AWSNodePool:
    instance_type: str
    additional_security_group_ids: List[str] = field(default_factory=list)
    tags: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"instance_type": self.instance_type}
        if self.additional_security_group_ids:
            body["additional_security_group_ids"] = list(self.additional_security_group_ids)
        if self.tags:
            body["tags"] = dict(self.tags)
        return body

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AWSNodePool":
        return cls(
            instance_type=data.get("instance_type", ""),
            additional_security_group_ids=list(data.get("additional_security_group_ids", []) or []),
            tags=dict(data.get("tags", {}) or {}),
        )


class AWSNodePoolBuilder:
    def __init__(self) -> None:
        self._instance_type = ""
        self._security_group_ids: List[str] = []
        self._tags: Dict[str, str] = {}

    def instance_type(self, value: str) -> "AWSNodePoolBuilder":
        self._instance_type = value
        return self

    def additional_security_group_ids(self, ids: List[str]) -> "AWSNodePoolBuilder":
        self._security_group_ids = list(ids)
        return self

    def tags(self, tags: Dict[str, str]) -> "AWSNodePoolBuilder":
        self._tags = dict(tags)
        return self

    def build(self) -> AWSNodePool:
        return AWSNodePool(
            instance_type=self._instance_type,
            additional_security_group_ids=self._security_group_ids,
            tags=self._tags,
        )


@dataclass
class Autoscaling:
    min_replicas: int
    max_replicas: int


@dataclass
class NodePool:
    id: str
    aws_node_pool: AWSNodePool
    replicas: Optional[int] = None
    autoscaling: Optional[Autoscaling] = None
    subnet: str = ""
    labels: Dict[str, str] = field(default_factory=dict)
    availability_zone: str = ""

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {
            "id": self.id,
            "aws_node_pool": self.aws_node_pool.to_dict(),
        }
        if self.autoscaling:
            body["autoscaling"] = {
                "min_replica": self.autoscaling.min_replicas,
                "max_replica": self.autoscaling.max_replicas,
            }
        else:
            body["replicas"] = self.replicas or 0
        if self.subnet:
            body["subnet"] = self.subnet
        if self.labels:
            body["labels"] = dict(self.labels)
        return body

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "NodePool":
        autoscaling = data.get("autoscaling")
        return cls(
            id=data.get("id", ""),
            aws_node_pool=AWSNodePool.from_dict(data.get("aws_node_pool", {}) or {}),
            replicas=data.get("replicas"),
            autoscaling=Autoscaling(
                autoscaling.get("min_replica", 0), autoscaling.get("max_replica", 0)
            ) if autoscaling else None,
            subnet=data.get("subnet", ""),
            labels=dict(data.get("labels", {}) or {}),
            availability_zone=data.get("availability_zone", ""),
        )


@dataclass
class MachinePool:
    id: str
    instance_type: str
    replicas: Optional[int] = None
    autoscaling: Optional[Autoscaling] = None
    labels: Dict[str, str] = field(default_factory=dict)
    additional_security_group_ids: List[str] = field(default_factory=list)
    tags: Dict[str, str] = field(default_factory=dict)
    subnets: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"id": self.id, "instance_type": self.instance_type}
        if self.autoscaling:
            body["autoscaling"] = {
                "min_replicas": self.autoscaling.min_replicas,
                "max_replicas": self.autoscaling.max_replicas,
            }
        else:
            body["replicas"] = self.replicas or 0
        if self.labels:
            body["labels"] = dict(self.labels)
        aws: Dict[str, Any] = {}
        if self.additional_security_group_ids:
            aws["additional_security_group_ids"] = list(self.additional_security_group_ids)
        if self.tags:
            aws["tags"] = dict(self.tags)
        if aws:
            body["aws"] = aws
        if self.subnets:
            body["subnets"] = list(self.subnets)
        return body

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MachinePool":
        autoscaling = data.get("autoscaling")
        aws = data.get("aws", {}) or {}
        return cls(
            id=data.get("id", ""),
            instance_type=data.get("instance_type", ""),
            replicas=data.get("replicas"),
            autoscaling=Autoscaling(
                autoscaling.get("min_replicas", 0), autoscaling.get("max_replicas", 0)
            ) if autoscaling else None,
            labels=dict(data.get("labels", {}) or {}),
            additional_security_group_ids=list(aws.get("additional_security_group_ids", []) or []),
            tags=dict(aws.get("tags", {}) or {}),
            subnets=list(data.get("subnets", []) or []),
        )


# --------------------------------------------------------------------------- #
# OIDC configuration
# --------------------------------------------------------------------------- #


@dataclass
class OidcConfig:
    id: str
    issuer_url: str = ""
    secret_arn: str = ""
    managed: bool = False
    reusable: bool = True

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "OidcConfig":
        return cls(
            id=data.get("id", ""),
            issuer_url=data.get("issuer_url", ""),
            secret_arn=data.get("secret_arn", ""),
            managed=bool(data.get("managed", False)),
            reusable=bool(data.get("reusable", True)),
        )
