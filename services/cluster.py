"""
클러스터 정보 조회 로직
네임스페이스 목록, API 서버 버전/노드 수, 연결 상태
"""
import logging

from kubernetes.client.rest import ApiException

from core.errors import GameServerAPIError, api_exception_reason
from core.kubernetes import get_k8s_clients
from models.cluster import ClusterInfo, KubernetesHealthResponse, NamespaceList
from utils.k8s_client import get_environment_info

logger = logging.getLogger(__name__)


def list_namespaces() -> NamespaceList:
    core_v1, _, _ = get_k8s_clients()
    try:
        namespaces = core_v1.list_namespace()
    except ApiException as e:
        logger.warning(f"Failed to list namespaces: {api_exception_reason(e)}")
        raise GameServerAPIError(500, "Failed to list namespaces") from e

    return NamespaceList(namespaces=[ns.metadata.name for ns in namespaces.items])


def get_cluster_info() -> ClusterInfo:
    """API 서버 버전, 플랫폼, 노드 수 조회"""
    core_v1, _, version_api = get_k8s_clients()

    try:
        version = version_api.get_code()
    except ApiException as e:
        logger.warning(f"Failed to get cluster version: {api_exception_reason(e)}")
        raise GameServerAPIError(500, "Failed to get cluster version") from e

    try:
        nodes = core_v1.list_node()
    except ApiException as e:
        logger.warning(f"Failed to get nodes: {api_exception_reason(e)}")
        raise GameServerAPIError(500, "Failed to get nodes") from e

    return ClusterInfo(
        version=version.git_version or "",
        node_count=len(nodes.items),
        platform=version.platform or "",
    )


def check_kubernetes_connection() -> KubernetesHealthResponse:
    """Kubernetes API 서버 연결 확인 (실패해도 예외 대신 disconnected 반환)"""
    environment = get_environment_info()["environment"]
    try:
        core_v1, _, _ = get_k8s_clients()
        core_v1.list_namespace(limit=1)
    except Exception as e:
        logger.warning(f"Kubernetes health check failed: {e}")
        return KubernetesHealthResponse(status="disconnected", environment=environment, error=str(e))

    return KubernetesHealthResponse(status="connected", environment=environment)


__all__ = ["list_namespaces", "get_cluster_info", "check_kubernetes_connection"]
