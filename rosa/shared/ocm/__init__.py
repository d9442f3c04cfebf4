"""Cluster-management API client and models."""

from .client import OCMClient
from .models import (
    AWSNodePool,
    AWSNodePoolBuilder,
    Cluster,
    ClusterState,
    Ingress,
    IngressBuilder,
    ListeningMethod,
    LoadBalancerType,
    MachinePool,
    NodePool,
    OidcConfig,
)

__all__ = [
    "AWSNodePool",
    "AWSNodePoolBuilder",
    "Cluster",
    "ClusterState",
    "Ingress",
    "IngressBuilder",
    "ListeningMethod",
    "LoadBalancerType",
    "MachinePool",
    "NodePool",
    "OCMClient",
    "OidcConfig",
]
