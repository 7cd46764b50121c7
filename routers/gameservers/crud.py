"""
GameServer CRUD API
GameServer claim 목록, 조회, 생성, 수정, 삭제
"""
from typing import Optional

from fastapi import APIRouter, Query

from core.config import settings
from models.cluster import MessageResponse
from models.gameserver import GameServer, GameServerCreate, GameServerList, GameServerSpec
from services import gameserver as gameserver_service

router = APIRouter(prefix=f"{settings.API_PREFIX}/gameservers", tags=["gameservers"])


@router.get("", response_model=GameServerList, response_model_exclude_none=True)
def list_game_servers(
    namespace: Optional[str] = Query(
        None, description='조회할 네임스페이스 (기본값 "default", "all"이면 전체)'
    ),
):
    """GameServer 목록"""
    return gameserver_service.list_game_servers(namespace)


@router.post("", status_code=201, response_model=GameServer, response_model_exclude_none=True)
def create_game_server(request: GameServerCreate):
    """GameServer claim 생성"""
    return gameserver_service.create_game_server(request)


@router.get("/{namespace}/{name}", response_model=GameServer, response_model_exclude_none=True)
def get_game_server(namespace: str, name: str):
    return gameserver_service.get_game_server(namespace, name)


@router.put("/{namespace}/{name}", response_model=GameServer, response_model_exclude_none=True)
def update_game_server(namespace: str, name: str, spec: GameServerSpec):
    """GameServer spec 수정 (본문은 spec 객체)"""
    return gameserver_service.update_game_server(namespace, name, spec)


@router.delete("/{namespace}/{name}", response_model=MessageResponse)
def delete_game_server(namespace: str, name: str):
    gameserver_service.delete_game_server(namespace, name)
    return MessageResponse(message="GameServer deleted successfully")
