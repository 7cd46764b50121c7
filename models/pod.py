"""
GameServer Pod 관련 Pydantic 모델
로그, 재시작, 리소스 메트릭 응답 구조 정의
"""

from typing import Optional
from pydantic import BaseModel

from .gameserver import CamelModel


class PodLogsResponse(CamelModel):
    """GameServer Pod 로그 응답"""
    pod: str
    container: Optional[str] = None
    tail_lines: int
    logs: str
    error_count: int = 0
    warning_count: int = 0


class RestartResponse(BaseModel):
    """Pod 삭제를 통한 재시작 결과"""
    message: str
    pod: str


class ResourceUsage(BaseModel):
    """단일 리소스(CPU 또는 메모리) 사용량"""
    current: str  # 표시용으로 포맷된 값 (e.g. "287m", "1.2Gi")
    configured: str  # GameServer spec에 설정된 값
    percentage: float


class ResourceMetrics(BaseModel):
    cpu: ResourceUsage
    memory: ResourceUsage


class GameServerMetricsResponse(CamelModel):
    """GameServer 메트릭 응답

    metrics-server 조회가 실패하면 status가 "metrics_unavailable"이 되고
    error에 사유가 담긴다.
    """
    pod_name: str
    pod_namespace: str
    metrics: ResourceMetrics
    status: str  # "success", "metrics_unavailable"
    error: Optional[str] = None


__all__ = [
    "PodLogsResponse",
    "RestartResponse",
    "ResourceUsage",
    "ResourceMetrics",
    "GameServerMetricsResponse",
]
