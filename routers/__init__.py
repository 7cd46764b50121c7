"""
API Routers - 기능별 모듈화

디렉터리 구조:
- gameservers/: GameServer CRUD 및 Pod 액션 (logs, restart, metrics)
- cluster/    : 네임스페이스, 클러스터 정보
- health      : API / Kubernetes 헬스체크
"""

# GameServer 라우터
from .gameservers import (
    gameservers_router,
    gameserver_actions_router,
)

# Cluster 라우터
from .cluster import cluster_router

# Health 라우터
from .health import router as health_router

__all__ = [
    # GameServer
    'gameservers_router',
    'gameserver_actions_router',
    # Cluster
    'cluster_router',
    # Health
    'health_router',
]
