"""
Health check API
"""
from datetime import datetime, timezone

from fastapi import APIRouter

from core.config import settings
from models.cluster import HealthResponse, KubernetesHealthResponse
from services.cluster import check_kubernetes_connection

router = APIRouter(prefix=settings.API_PREFIX, tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health_check():
    """API 헬스체크"""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc).isoformat(),
        version=settings.APP_VERSION,
    )


@router.get(
    "/health/kubernetes",
    response_model=KubernetesHealthResponse,
    response_model_exclude_none=True,
)
def kubernetes_health_check():
    """Kubernetes 연결 헬스체크"""
    return check_kubernetes_connection()
