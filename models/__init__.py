# Pydantic models
from .gameserver import (
    GameServerResources, GameServerNetworking, GameServerAdvanced,
    GameServerSpec, GameServerCondition, GameServerStatus, ObjectMeta,
    GameServer, GameServerCreate, GameServerList,
)
from .pod import (
    PodLogsResponse, RestartResponse, ResourceUsage, ResourceMetrics,
    GameServerMetricsResponse,
)
from .cluster import (
    HealthResponse, KubernetesHealthResponse, NamespaceList, ClusterInfo,
    MessageResponse,
)

__all__ = [
    # GameServer
    'GameServerResources', 'GameServerNetworking', 'GameServerAdvanced',
    'GameServerSpec', 'GameServerCondition', 'GameServerStatus', 'ObjectMeta',
    'GameServer', 'GameServerCreate', 'GameServerList',
    # Pod
    'PodLogsResponse', 'RestartResponse', 'ResourceUsage', 'ResourceMetrics',
    'GameServerMetricsResponse',
    # Cluster
    'HealthResponse', 'KubernetesHealthResponse', 'NamespaceList', 'ClusterInfo',
    'MessageResponse',
]
