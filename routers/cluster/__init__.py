"""
클러스터 정보 라우터
- status: 네임스페이스 목록, 클러스터 버전/노드 수
"""
from .status import router as cluster_router

__all__ = [
    "cluster_router",
]
