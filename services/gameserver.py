"""
GameServer 관련 비즈니스 로직
GameServer claim 목록/조회/생성/수정/삭제 및 unstructured 객체 <-> 타입 모델 변환

실제 리소스 구성(컴포지션, 게임 타입별 라우팅, 기본값, 상태 집계)은
클러스터의 컨트롤 플레인이 담당하고, 여기서는 CustomObjectsApi 호출만 수행한다.
"""
import logging
from typing import Any, Dict, Optional

from kubernetes.client.rest import ApiException

from core.config import settings
from core.errors import GameServerAPIError, raise_for_api_exception
from core.kubernetes import get_k8s_clients
from models.gameserver import (
    GameServer,
    GameServerAdvanced,
    GameServerCondition,
    GameServerCreate,
    GameServerList,
    GameServerNetworking,
    GameServerResources,
    GameServerSpec,
    GameServerStatus,
    ObjectMeta,
)
from utils.helpers import (
    drop_empty,
    nested_bool,
    nested_field,
    nested_int,
    nested_list,
    nested_map,
    nested_string,
)

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "GameServer not found"


def _crd(namespace: Optional[str] = None) -> Dict[str, str]:
    """CustomObjectsApi 호출에 공통으로 쓰이는 group/version/plural 인자"""
    kwargs = {
        "group": settings.GAMESERVER_GROUP,
        "version": settings.GAMESERVER_VERSION,
        "plural": settings.GAMESERVER_PLURAL,
    }
    if namespace is not None:
        kwargs["namespace"] = namespace
    return kwargs


# ============================================
# 변환 헬퍼
# ============================================

def _optional_str(obj: Dict[str, Any], *path: str) -> Optional[str]:
    return nested_string(obj, *path) or None


def _optional_int(obj: Dict[str, Any], *path: str) -> Optional[int]:
    return nested_int(obj, *path) if nested_field(obj, *path) is not None else None


def _spec_from_unstructured(spec: Dict[str, Any]) -> GameServerSpec:
    resources = nested_map(spec, "resources")
    networking = nested_map(spec, "networking")
    advanced = nested_map(spec, "advanced")

    return GameServerSpec(
        game_type=_optional_str(spec, "gameType"),
        server_name=_optional_str(spec, "serverName"),
        server_description=_optional_str(spec, "serverDescription"),
        resources=GameServerResources(
            cpu=_optional_str(resources, "cpu"),
            memory=_optional_str(resources, "memory"),
            storage_size=_optional_str(resources, "storageSize"),
            storage_class=_optional_str(resources, "storageClass"),
        ) if resources else None,
        networking=GameServerNetworking(
            service_type=_optional_str(networking, "serviceType"),
            enable_ingress=nested_bool(networking, "enableIngress") or None,
            ingress_host=_optional_str(networking, "ingressHost"),
        ) if networking else None,
        game_config=nested_map(spec, "gameConfig") or None,
        advanced=GameServerAdvanced(
            affinity=nested_map(advanced, "affinity") or None,
            tolerations=[t for t in nested_list(advanced, "tolerations") if isinstance(t, dict)] or None,
            custom_env_vars={k: str(v) for k, v in nested_map(advanced, "customEnvVars").items()} or None,
        ) if advanced else None,
    )


def _status_from_unstructured(status: Dict[str, Any]) -> GameServerStatus:
    conditions = [
        GameServerCondition(
            type=nested_string(cond, "type"),
            status=nested_string(cond, "status"),
            reason=_optional_str(cond, "reason"),
            message=_optional_str(cond, "message"),
            last_transition_time=_optional_str(cond, "lastTransitionTime"),
            observed_generation=_optional_int(cond, "observedGeneration"),
        )
        for cond in nested_list(status, "conditions")
        if isinstance(cond, dict)
    ]

    return GameServerStatus(
        phase=_optional_str(status, "phase"),
        child_type=_optional_str(status, "childType"),
        child_name=_optional_str(status, "childName"),
        server_ip=_optional_str(status, "serverIP"),
        game_port=_optional_int(status, "gamePort"),
        web_port=_optional_int(status, "webPort"),
        server_endpoint=_optional_str(status, "serverEndpoint"),
        players_online=_optional_int(status, "playersOnline"),
        last_update=_optional_str(status, "lastUpdate"),
        conditions=conditions or None,
    )


def to_game_server(obj: Dict[str, Any]) -> GameServer:
    """CustomObjectsApi가 반환한 dict를 GameServer 모델로 변환

    알 수 없는 필드나 타입이 맞지 않는 값은 무시한다.
    """
    metadata = nested_map(obj, "metadata")

    return GameServer(
        api_version=_optional_str(obj, "apiVersion"),
        kind=_optional_str(obj, "kind"),
        metadata=ObjectMeta(
            name=nested_string(metadata, "name"),
            namespace=_optional_str(metadata, "namespace"),
            uid=_optional_str(metadata, "uid"),
            resource_version=_optional_str(metadata, "resourceVersion"),
            creation_timestamp=_optional_str(metadata, "creationTimestamp"),
            labels=nested_map(metadata, "labels") or None,
            annotations=nested_map(metadata, "annotations") or None,
        ),
        spec=_spec_from_unstructured(nested_map(obj, "spec")),
        status=_status_from_unstructured(nested_map(obj, "status")),
    )


def validate_game_type(game_type: Optional[str]) -> str:
    """gameType 필수 및 지원 여부 검사"""
    if not game_type:
        raise GameServerAPIError(400, "spec.gameType is required")
    if game_type not in settings.SUPPORTED_GAME_TYPES:
        raise GameServerAPIError(
            400,
            f"Unsupported game type: {game_type}. "
            f"Valid types: {', '.join(settings.SUPPORTED_GAME_TYPES)}",
        )
    return game_type


def build_spec(spec: GameServerSpec) -> Dict[str, Any]:
    """요청 spec을 컨트롤 플레인에 보낼 dict로 변환 (비어 있는 필드/섹션 제외)"""
    result: Dict[str, Any] = {"gameType": spec.game_type}
    result.update(drop_empty({
        "serverName": spec.server_name,
        "serverDescription": spec.server_description,
        "gameConfig": spec.game_config,
    }))

    sections = {
        "resources": spec.resources,
        "networking": spec.networking,
        "advanced": spec.advanced,
    }
    for key, section in sections.items():
        if section is None:
            continue
        values = drop_empty(section.model_dump(by_alias=True))
        if values:
            result[key] = values

    return result


def _game_type_label() -> str:
    return f"{settings.GAMESERVER_GROUP}/game-type"


def build_labels(name: str, game_type: str, extra: Optional[Dict[str, str]] = None) -> Dict[str, str]:
    """GameServer claim 기본 라벨, 요청 라벨이 같은 키를 덮어쓴다"""
    labels = {
        "app.kubernetes.io/name": "gameserver",
        settings.INSTANCE_LABEL: name,
        _game_type_label(): game_type,
    }
    labels.update(extra or {})
    return labels


# ============================================
# CRUD
# ============================================

def list_game_servers(namespace: Optional[str] = None) -> GameServerList:
    """GameServer 목록 조회

    Args:
        namespace: 조회할 네임스페이스, 비어 있으면 기본 네임스페이스,
            "all"이면 전체 네임스페이스
    """
    namespace = namespace or settings.DEFAULT_NAMESPACE
    _, custom, _ = get_k8s_clients()

    try:
        if namespace == "all":
            result = custom.list_cluster_custom_object(**_crd())
        else:
            result = custom.list_namespaced_custom_object(**_crd(namespace))
    except ApiException as e:
        raise_for_api_exception(e, "list GameServers")

    items = [to_game_server(item) for item in result.get("items", [])]
    return GameServerList(items=items, total=len(items))


def get_game_server_object(namespace: str, name: str) -> Dict[str, Any]:
    """GameServer claim 원본 dict 조회"""
    _, custom, _ = get_k8s_clients()
    try:
        return custom.get_namespaced_custom_object(name=name, **_crd(namespace))
    except ApiException as e:
        raise_for_api_exception(e, "get GameServer", not_found=NOT_FOUND_MESSAGE)


def get_game_server(namespace: str, name: str) -> GameServer:
    return to_game_server(get_game_server_object(namespace, name))


def create_game_server(request: GameServerCreate) -> GameServer:
    """GameServer claim 생성

    apiVersion/kind/namespace는 설정된 기본값으로 채우며,
    실제 리소스 구성은 컴포지션 엔진이 claim을 보고 수행한다.
    """
    api_version = request.api_version or settings.api_version
    kind = request.kind or settings.GAMESERVER_KIND
    namespace = request.metadata.namespace or settings.DEFAULT_NAMESPACE
    name = request.metadata.name

    if api_version != settings.api_version or kind != settings.GAMESERVER_KIND:
        raise GameServerAPIError(
            400,
            f"Unsupported resource {api_version}/{kind}. "
            f"Expected {settings.api_version}/{settings.GAMESERVER_KIND}",
        )
    if not name:
        raise GameServerAPIError(400, "metadata.name is required")
    game_type = validate_game_type(request.spec.game_type)

    body = {
        "apiVersion": api_version,
        "kind": kind,
        "metadata": {
            "name": name,
            "namespace": namespace,
            "labels": build_labels(name, game_type, request.metadata.labels),
        },
        "spec": build_spec(request.spec),
    }
    if request.metadata.annotations:
        body["metadata"]["annotations"] = dict(request.metadata.annotations)

    _, custom, _ = get_k8s_clients()
    try:
        created = custom.create_namespaced_custom_object(body=body, **_crd(namespace))
    except ApiException as e:
        raise_for_api_exception(e, "create GameServer")

    logger.info(f"Created GameServer {namespace}/{name} (gameType={game_type})")
    return to_game_server(created or body)


def update_game_server(namespace: str, name: str, spec: GameServerSpec) -> GameServer:
    """GameServer spec 수정

    요청 spec을 기존 spec 위에 병합한다. 요청에 포함된 섹션은 통째로 교체되고,
    컨트롤 플레인이 채운 필드(resourceRef, compositionRef 등)는 유지된다.
    """
    game_type = validate_game_type(spec.game_type)
    obj = get_game_server_object(namespace, name)

    merged = dict(nested_map(obj, "spec"))
    merged.update(build_spec(spec))
    obj["spec"] = merged

    # game-type 라벨은 spec.gameType과 항상 일치
    metadata = obj.setdefault("metadata", {})
    labels = dict(nested_map(metadata, "labels"))
    labels[_game_type_label()] = game_type
    metadata["labels"] = labels

    _, custom, _ = get_k8s_clients()
    try:
        updated = custom.replace_namespaced_custom_object(name=name, body=obj, **_crd(namespace))
    except ApiException as e:
        raise_for_api_exception(e, "update GameServer", not_found=NOT_FOUND_MESSAGE)

    logger.info(f"Updated GameServer {namespace}/{name}")
    return to_game_server(updated or obj)


def delete_game_server(namespace: str, name: str) -> None:
    _, custom, _ = get_k8s_clients()
    try:
        custom.delete_namespaced_custom_object(name=name, **_crd(namespace))
    except ApiException as e:
        raise_for_api_exception(e, "delete GameServer", not_found=NOT_FOUND_MESSAGE)

    logger.info(f"Deleted GameServer {namespace}/{name}")


__all__ = [
    "to_game_server",
    "validate_game_type",
    "build_spec",
    "build_labels",
    "list_game_servers",
    "get_game_server_object",
    "get_game_server",
    "create_game_server",
    "update_game_server",
    "delete_game_server",
]
