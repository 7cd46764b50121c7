"""
Cluster related Pydantic models
"""
from typing import Optional, List
from pydantic import BaseModel

from .gameserver import CamelModel


class HealthResponse(BaseModel):
    """API 헬스체크 응답"""
    status: str
    timestamp: str
    version: str


class KubernetesHealthResponse(BaseModel):
    """Kubernetes 연결 상태"""
    status: str  # connected, disconnected
    environment: Optional[str] = None
    error: Optional[str] = None


class NamespaceList(BaseModel):
    """네임스페이스 이름 목록"""
    namespaces: List[str]


class ClusterInfo(CamelModel):
    """클러스터 버전 및 노드 수"""
    version: str
    node_count: int
    platform: str


class MessageResponse(BaseModel):
    message: str
