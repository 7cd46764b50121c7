"""
Utility helper functions

CustomObjectsApi는 커스텀 리소스를 가공되지 않은 dict로 돌려주므로,
중첩된 필드를 타입에 맞게 꺼내는 헬퍼를 모아둔다.
"""
from typing import Any, Dict, List, Optional


def nested_field(obj: Optional[Dict[str, Any]], *path: str) -> Any:
    """중첩 dict에서 경로를 따라 값을 조회, 중간에 없거나 dict가 아니면 None"""
    current: Any = obj
    for key in path:
        if not isinstance(current, dict):
            return None
        current = current.get(key)
    return current


def nested_map(obj: Optional[Dict[str, Any]], *path: str) -> Dict[str, Any]:
    """경로의 값이 dict이면 반환, 아니면 빈 dict"""
    value = nested_field(obj, *path)
    return value if isinstance(value, dict) else {}


def nested_list(obj: Optional[Dict[str, Any]], *path: str) -> List[Any]:
    value = nested_field(obj, *path)
    return value if isinstance(value, list) else []


def nested_string(obj: Optional[Dict[str, Any]], *path: str) -> str:
    """경로의 값이 문자열이면 반환, 아니면 빈 문자열"""
    value = nested_field(obj, *path)
    return value if isinstance(value, str) else ""


def nested_int(obj: Optional[Dict[str, Any]], *path: str) -> int:
    """경로의 값이 정수이면 반환, 아니면 0 (bool은 정수로 취급하지 않음)"""
    value = nested_field(obj, *path)
    if isinstance(value, bool) or not isinstance(value, int):
        return 0
    return value


def nested_bool(obj: Optional[Dict[str, Any]], *path: str) -> bool:
    return nested_field(obj, *path) is True


def is_empty(value: Any) -> bool:
    """None, False, 빈 문자열/컬렉션이면 True (숫자 0은 값으로 취급)"""
    if value is None or value is False:
        return True
    if isinstance(value, (str, dict, list)):
        return len(value) == 0
    return False


def drop_empty(values: Dict[str, Any]) -> Dict[str, Any]:
    """비어 있는 값을 제거한 새 dict 반환"""
    return {key: value for key, value in values.items() if not is_empty(value)}
