"""
Cluster information API
네임스페이스 목록, 클러스터 버전/노드 정보
"""
from fastapi import APIRouter

from core.config import settings
from models.cluster import ClusterInfo, NamespaceList
from services import cluster as cluster_service

router = APIRouter(prefix=settings.API_PREFIX, tags=["cluster"])


@router.get("/namespaces", response_model=NamespaceList)
def list_namespaces():
    """사용 가능한 네임스페이스 목록"""
    return cluster_service.list_namespaces()


@router.get("/cluster/info", response_model=ClusterInfo)
def get_cluster_info():
    """클러스터 버전, 플랫폼, 노드 수"""
    return cluster_service.get_cluster_info()
