"""
Kubernetes 클라이언트 환경 자동 감지 유틸리티

환경에 따라 인증 방식을 자동으로 선택:
- Pod 내부 (KUBERNETES_SERVICE_HOST 존재): ServiceAccount 토큰 사용 (incluster_config)
- 로컬 개발 환경: $KUBECONFIG 또는 ~/.kube/config 파일 사용 (kube_config)
"""
import os
import logging
from typing import Tuple, Optional

from kubernetes import client, config
from kubernetes.client.rest import ApiException

logger = logging.getLogger(__name__)

# 환경 감지 결과 캐싱
_config_loaded = False
_is_in_cluster: Optional[bool] = None


def is_running_in_cluster() -> bool:
    """현재 코드가 K8s 클러스터 내부(Pod)에서 실행 중인지 확인"""
    return os.environ.get('KUBERNETES_SERVICE_HOST') is not None


def _kubeconfig_path() -> str:
    return os.environ.get('KUBECONFIG') or os.path.expanduser('~/.kube/config')


def _load_k8s_config() -> bool:
    """K8s 설정 로드 (환경 자동 감지)

    Returns:
        bool: 클러스터 내부 config 사용 시 True, kube_config 사용 시 False
    """
    global _config_loaded, _is_in_cluster

    if _config_loaded:
        return _is_in_cluster

    if is_running_in_cluster():
        try:
            config.load_incluster_config()
            _is_in_cluster = True
            _config_loaded = True
            logger.info("K8s config loaded: in-cluster (ServiceAccount)")
            return True
        except config.ConfigException as e:
            logger.warning(f"In-cluster config failed: {e}, falling back to kubeconfig")

    kubeconfig = _kubeconfig_path()
    try:
        config.load_kube_config(config_file=kubeconfig)
        _is_in_cluster = False
        _config_loaded = True
        logger.info(f"K8s config loaded: kubeconfig ({kubeconfig})")
        return False
    except config.ConfigException as e:
        logger.error(f"Failed to load any K8s config: {e}")
        raise RuntimeError(
            f"failed to get kubernetes config: no in-cluster service account "
            f"and no usable kubeconfig at {kubeconfig}"
        ) from e


def get_k8s_clients() -> Tuple[client.CoreV1Api, client.CustomObjectsApi, client.VersionApi]:
    """Kubernetes API 클라이언트 초기화 및 반환

    Returns:
        tuple: (CoreV1Api, CustomObjectsApi, VersionApi)
        - CoreV1Api: Pod, Namespace, Node 등 핵심 리소스
        - CustomObjectsApi: GameServer claim, metrics.k8s.io 등 커스텀 리소스
        - VersionApi: API 서버 버전 조회

    Raises:
        RuntimeError: K8s 설정 로드 실패 시

    Example:
        >>> core_v1, custom, _ = get_k8s_clients()
        >>> pods = core_v1.list_namespaced_pod("default")
    """
    _load_k8s_config()

    return (
        client.CoreV1Api(),
        client.CustomObjectsApi(),
        client.VersionApi(),
    )


def get_environment_info() -> dict:
    """현재 K8s 연결 환경 정보 반환"""
    env_info = {
        "environment": "in-cluster" if is_running_in_cluster() else "local",
        "configSource": "ServiceAccount token" if is_running_in_cluster() else _kubeconfig_path(),
    }

    if is_running_in_cluster():
        env_info["kubernetesHost"] = os.environ.get('KUBERNETES_SERVICE_HOST')
        env_info["kubernetesPort"] = os.environ.get('KUBERNETES_SERVICE_PORT')

    return env_info


__all__ = [
    'get_k8s_clients',
    'is_running_in_cluster',
    'get_environment_info',
    'ApiException'
]
