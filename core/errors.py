"""
API error type and Kubernetes error mapping
"""
import json
import logging
from typing import Any, Dict, NoReturn, Optional

from kubernetes.client.rest import ApiException

logger = logging.getLogger(__name__)

# 요청 내용 때문에 발생한 오류(이미 존재, 스키마 검증 실패)는 그대로 전달
CLIENT_ERROR_STATUSES = (409, 422)


class GameServerAPIError(Exception):
    """HTTP 상태 코드와 함께 클라이언트에 전달할 오류

    `{"error": message, **extra}` 형태의 JSON 본문으로 렌더링된다.
    """

    def __init__(self, status_code: int, message: str, extra: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.extra = extra or {}

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.message, **self.extra}


def api_exception_reason(exc: ApiException) -> str:
    """ApiException에서 사람이 읽을 수 있는 사유 추출 (Status 본문의 message 우선)"""
    if exc.body:
        try:
            body = json.loads(exc.body)
        except (TypeError, ValueError):
            body = None
        if isinstance(body, dict) and body.get("message"):
            return body["message"]
    return exc.reason or str(exc)


def raise_for_api_exception(
    exc: ApiException, action: str, not_found: Optional[str] = None
) -> NoReturn:
    """Kubernetes API 오류를 GameServerAPIError로 변환

    Args:
        exc: Kubernetes 클라이언트가 던진 예외
        action: 실패한 작업 설명 (e.g. "get GameServer")
        not_found: 404일 때 사용할 메시지, None이면 404도 500으로 처리
    """
    if exc.status == 404 and not_found is not None:
        raise GameServerAPIError(404, not_found) from exc

    reason = api_exception_reason(exc)
    logger.warning(f"Kubernetes API call failed ({action}): {exc.status} {reason}")
    status_code = exc.status if exc.status in CLIENT_ERROR_STATUSES else 500
    raise GameServerAPIError(status_code, f"Failed to {action}: {reason}") from exc


__all__ = ["GameServerAPIError", "api_exception_reason", "raise_for_api_exception"]
