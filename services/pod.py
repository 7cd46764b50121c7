"""
GameServer Pod 관련 비즈니스 로직
Pod 조회, 로그 조회, 재시작(Pod 삭제), metrics-server 기반 사용률 계산
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from kubernetes.client.rest import ApiException
from urllib3.exceptions import HTTPError

from core.config import settings
from core.errors import GameServerAPIError, api_exception_reason, raise_for_api_exception
from core.kubernetes import get_k8s_clients
from models.pod import (
    GameServerMetricsResponse,
    PodLogsResponse,
    ResourceMetrics,
    ResourceUsage,
    RestartResponse,
)
from utils.helpers import nested_list, nested_map, nested_string
from utils.resources import (
    calculate_cpu_percentage,
    calculate_memory_percentage,
    format_cpu_for_display,
    format_memory_for_display,
)

logger = logging.getLogger(__name__)

NO_PODS_MESSAGE = "No pods found for GameServer"


class MetricsUnavailableError(Exception):
    """metrics-server 응답에 사용량 정보가 없음"""


def parse_tail_lines(lines: Optional[str]) -> int:
    """lines 쿼리 파라미터 파싱, 숫자가 아니거나 0 이하면 기본값"""
    try:
        value = int(lines) if lines is not None else settings.DEFAULT_LOG_LINES
    except ValueError:
        return settings.DEFAULT_LOG_LINES
    return value if value > 0 else settings.DEFAULT_LOG_LINES


def _list_pods(core_v1, namespace: str, label_selector: str) -> List[Any]:
    try:
        pods = core_v1.list_namespaced_pod(namespace, label_selector=label_selector)
    except ApiException as e:
        raise_for_api_exception(e, "find pods")
    return list(pods.items or [])


def find_game_server_pod(core_v1, namespace: str, name: str):
    """GameServer claim과 같은 네임스페이스에서 instance 라벨로 첫 번째 Pod 조회"""
    pods = _list_pods(core_v1, namespace, f"{settings.INSTANCE_LABEL}={name}")
    if not pods:
        raise GameServerAPIError(404, NO_PODS_MESSAGE)
    return pods[0]


def get_game_server_logs(namespace: str, name: str, lines: Optional[str] = None) -> PodLogsResponse:
    """GameServer Pod 로그 조회

    Args:
        namespace: GameServer claim 네임스페이스
        name: GameServer 이름
        lines: 조회할 로그 라인 수 (문자열 그대로, 잘못된 값은 기본값 사용)
    """
    tail_lines = parse_tail_lines(lines)
    core_v1, _, _ = get_k8s_clients()
    pod = find_game_server_pod(core_v1, namespace, name)
    pod_name = pod.metadata.name

    containers = pod.spec.containers if pod.spec and pod.spec.containers else []
    container = containers[0].name if containers else None

    kwargs = {"tail_lines": tail_lines}
    if container:
        kwargs["container"] = container

    try:
        logs = core_v1.read_namespaced_pod_log(pod_name, namespace, **kwargs)
    except ApiException as e:
        raise_for_api_exception(e, "get GameServer logs")

    # 에러/경고 라인 탐지
    error_count = 0
    warning_count = 0
    for line in (logs or "").splitlines():
        line_lower = line.lower()
        if "error" in line_lower or "exception" in line_lower or "fail" in line_lower:
            error_count += 1
        elif "warn" in line_lower:
            warning_count += 1

    return PodLogsResponse(
        pod=pod_name,
        container=container,
        tail_lines=tail_lines,
        logs=logs or "",
        error_count=error_count,
        warning_count=warning_count,
    )


def restart_game_server(namespace: str, name: str) -> RestartResponse:
    """GameServer Pod를 삭제해 워크로드 컨트롤러가 다시 띄우게 한다"""
    core_v1, _, _ = get_k8s_clients()
    pod = find_game_server_pod(core_v1, namespace, name)
    pod_name = pod.metadata.name

    try:
        core_v1.delete_namespaced_pod(pod_name, namespace)
    except ApiException as e:
        raise_for_api_exception(e, "restart GameServer")

    logger.info(f"Restarted GameServer {namespace}/{name} by deleting pod {pod_name}")
    return RestartResponse(
        message=f"GameServer {name} restarted successfully",
        pod=pod_name,
    )


def get_pod_usage(custom, namespace: str, pod_name: str) -> Tuple[str, str]:
    """metrics-server에서 첫 번째(메인 게임 서버) 컨테이너의 CPU/메모리 사용량 조회

    Raises:
        ApiException: metrics.k8s.io 호출 실패
        HTTPError: API 서버 연결 실패 (urllib3)
        MetricsUnavailableError: 응답에 컨테이너 사용량이 없음
    """
    result = custom.get_namespaced_custom_object(
        group="metrics.k8s.io",
        version="v1beta1",
        namespace=namespace,
        plural="pods",
        name=pod_name,
    )

    containers = nested_list(result, "containers")
    if not containers or not isinstance(containers[0], dict):
        raise MetricsUnavailableError("no container metrics found")

    usage = nested_map(containers[0], "usage")
    if not usage:
        raise MetricsUnavailableError("no usage data found")

    return nested_string(usage, "cpu") or "0m", nested_string(usage, "memory") or "0Mi"


def _metrics_location(claim: Dict[str, Any]) -> Tuple[str, str, str]:
    """claim spec에서 (gameType, resourceRef.name, 실제 네임스페이스) 계산

    컴포지션이 만든 리소스는 `{resourceRef.name}-{gameType}` 네임스페이스에 있고,
    Pod 라벨 값도 같은 이름을 사용한다.
    """
    spec = nested_map(claim, "spec")
    game_type = nested_string(spec, "gameType")
    resource_ref_name = nested_string(spec, "resourceRef", "name")

    if not resource_ref_name:
        raise GameServerAPIError(
            404,
            "GameServer resourceRef.name not found - server may not be ready yet",
        )

    return game_type, resource_ref_name, f"{resource_ref_name}-{game_type}"


def get_game_server_metrics(namespace: str, name: str) -> GameServerMetricsResponse:
    """GameServer Pod의 CPU/메모리 사용량과 설정값 대비 사용률

    metrics-server 조회가 실패해도 Pod가 존재하면 200으로 응답하고
    status를 "metrics_unavailable"로 표시한다.
    """
    core_v1, custom, _ = get_k8s_clients()

    try:
        claim = custom.get_namespaced_custom_object(
            group=settings.GAMESERVER_GROUP,
            version=settings.GAMESERVER_VERSION,
            namespace=namespace,
            plural=settings.GAMESERVER_PLURAL,
            name=name,
        )
    except ApiException as e:
        raise GameServerAPIError(404, f"GameServer not found: {api_exception_reason(e)}") from e
    except HTTPError as e:
        raise GameServerAPIError(404, f"GameServer not found: {e}") from e

    resources = nested_map(claim, "spec", "resources")
    configured_cpu = nested_string(resources, "cpu")
    configured_memory = nested_string(resources, "memory")

    game_type, resource_ref_name, actual_namespace = _metrics_location(claim)

    pods = _list_pods(core_v1, actual_namespace, f"{settings.WORKLOAD_LABEL}={actual_namespace}")
    if not pods:
        raise GameServerAPIError(
            404,
            f"No pods found for GameServer {name} in namespace {actual_namespace}",
            extra={
                "actualNamespace": actual_namespace,
                "resourceRefName": resource_ref_name,
                "gameType": game_type,
                "claimName": name,
            },
        )

    pod_name = pods[0].metadata.name

    try:
        cpu_usage, memory_usage = get_pod_usage(custom, actual_namespace, pod_name)
    except (ApiException, HTTPError, MetricsUnavailableError) as e:
        reason = api_exception_reason(e) if isinstance(e, ApiException) else str(e)
        logger.warning(f"Metrics unavailable for pod {actual_namespace}/{pod_name}: {reason}")
        return GameServerMetricsResponse(
            pod_name=pod_name,
            pod_namespace=actual_namespace,
            metrics=ResourceMetrics(
                cpu=ResourceUsage(current="0m", configured=configured_cpu, percentage=0),
                memory=ResourceUsage(current="0Mi", configured=configured_memory, percentage=0),
            ),
            status="metrics_unavailable",
            error=f"Metrics unavailable: {reason}",
        )

    return GameServerMetricsResponse(
        pod_name=pod_name,
        pod_namespace=actual_namespace,
        metrics=ResourceMetrics(
            cpu=ResourceUsage(
                current=format_cpu_for_display(cpu_usage),
                configured=configured_cpu,
                percentage=calculate_cpu_percentage(cpu_usage, configured_cpu),
            ),
            memory=ResourceUsage(
                current=format_memory_for_display(memory_usage),
                configured=configured_memory,
                percentage=calculate_memory_percentage(memory_usage, configured_memory),
            ),
        ),
        status="success",
    )


__all__ = [
    "MetricsUnavailableError",
    "parse_tail_lines",
    "find_game_server_pod",
    "get_game_server_logs",
    "restart_game_server",
    "get_pod_usage",
    "get_game_server_metrics",
]
