"""
GameServer 관련 Pydantic 모델

GameServer 스키마 자체는 외부 컴포지션 엔진의 CRD가 소유하며,
여기서는 API가 주고받는 JSON 형태(camelCase)만 정의한다.
"""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """camelCase JSON 필드를 사용하는 모델의 베이스"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class GameServerResources(CamelModel):
    """리소스 요구사항"""
    cpu: Optional[str] = None
    memory: Optional[str] = None
    storage_size: Optional[str] = None
    storage_class: Optional[str] = None


class GameServerNetworking(CamelModel):
    """네트워킹 설정"""
    service_type: Optional[str] = None
    enable_ingress: Optional[bool] = None
    ingress_host: Optional[str] = None


class GameServerAdvanced(CamelModel):
    """스케줄링 및 환경변수 등 고급 설정"""
    affinity: Optional[Dict[str, Any]] = None
    tolerations: Optional[List[Dict[str, Any]]] = None
    custom_env_vars: Optional[Dict[str, str]] = None


class GameServerSpec(CamelModel):
    """GameServer spec

    game_type은 라우팅 대상 컴포지션을 결정하며, 누락 여부는
    서비스 계층에서 검사해 명확한 오류 메시지를 돌려준다.
    """
    game_type: Optional[str] = None
    server_name: Optional[str] = None
    server_description: Optional[str] = None
    resources: Optional[GameServerResources] = None
    networking: Optional[GameServerNetworking] = None
    game_config: Optional[Dict[str, Any]] = None
    advanced: Optional[GameServerAdvanced] = None


class GameServerCondition(CamelModel):
    type: str = ""
    status: str = ""
    reason: Optional[str] = None
    message: Optional[str] = None
    last_transition_time: Optional[str] = None
    observed_generation: Optional[int] = None


class GameServerStatus(CamelModel):
    """컨트롤 플레인이 집계한 GameServer 상태"""
    phase: Optional[str] = None
    child_type: Optional[str] = None
    child_name: Optional[str] = None
    server_ip: Optional[str] = Field(default=None, alias="serverIP")
    game_port: Optional[int] = None
    web_port: Optional[int] = None
    server_endpoint: Optional[str] = None
    players_online: Optional[int] = None
    last_update: Optional[str] = None
    conditions: Optional[List[GameServerCondition]] = None


class ObjectMeta(CamelModel):
    """Kubernetes ObjectMeta 중 API가 노출하는 필드"""
    name: str = ""
    namespace: Optional[str] = None
    uid: Optional[str] = None
    resource_version: Optional[str] = None
    creation_timestamp: Optional[str] = None
    labels: Optional[Dict[str, str]] = None
    annotations: Optional[Dict[str, str]] = None


class GameServer(CamelModel):
    """GameServer 리소스 전체"""
    api_version: Optional[str] = None
    kind: Optional[str] = None
    metadata: ObjectMeta = Field(default_factory=ObjectMeta)
    spec: GameServerSpec = Field(default_factory=GameServerSpec)
    status: GameServerStatus = Field(default_factory=GameServerStatus)


class GameServerCreate(CamelModel):
    """GameServer claim 생성 요청"""
    api_version: Optional[str] = None
    kind: Optional[str] = None
    metadata: ObjectMeta = Field(default_factory=ObjectMeta)
    spec: GameServerSpec = Field(default_factory=GameServerSpec)


class GameServerList(BaseModel):
    """GameServer 목록 응답"""
    items: List[GameServer]
    total: int


__all__ = [
    "CamelModel",
    "GameServerResources",
    "GameServerNetworking",
    "GameServerAdvanced",
    "GameServerSpec",
    "GameServerCondition",
    "GameServerStatus",
    "ObjectMeta",
    "GameServer",
    "GameServerCreate",
    "GameServerList",
]
