"""
GameServer Pod actions API
로그 조회, 재시작, 리소스 메트릭
"""
from typing import Optional

from fastapi import APIRouter, Query

from core.config import settings
from models.pod import GameServerMetricsResponse, PodLogsResponse, RestartResponse
from services import pod as pod_service

router = APIRouter(prefix=f"{settings.API_PREFIX}/gameservers", tags=["gameserver-actions"])


@router.get(
    "/{namespace}/{name}/logs",
    response_model=PodLogsResponse,
    response_model_exclude_none=True,
)
def get_game_server_logs(
    namespace: str,
    name: str,
    lines: Optional[str] = Query(None, description="조회할 로그 라인 수 (기본값 100)"),
):
    """GameServer Pod 로그"""
    return pod_service.get_game_server_logs(namespace, name, lines)


@router.post("/{namespace}/{name}/restart", response_model=RestartResponse)
def restart_game_server(namespace: str, name: str):
    """GameServer Pod 삭제 후 재생성"""
    return pod_service.restart_game_server(namespace, name)


@router.get(
    "/{namespace}/{name}/metrics",
    response_model=GameServerMetricsResponse,
    response_model_exclude_none=True,
)
def get_game_server_metrics(namespace: str, name: str):
    """GameServer CPU/메모리 사용량 및 설정값 대비 사용률"""
    return pod_service.get_game_server_metrics(namespace, name)
