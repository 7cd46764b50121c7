"""
GameServer 라우터
- crud: GameServer claim CRUD
- actions: Pod 로그, 재시작, 메트릭
"""
from .crud import router as gameservers_router
from .actions import router as gameserver_actions_router

__all__ = [
    "gameservers_router",
    "gameserver_actions_router",
]
