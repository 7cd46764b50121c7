"""
GamePlane API 서버

GameServer 커스텀 리소스(gameplane.kubelize.io/v1alpha1)에 대한 얇은 HTTP 게이트웨이.
실제 리소스 구성은 클러스터의 컴포지션 엔진이 담당한다.

API 구조 (prefix /api/v1):
- /health, /health/kubernetes                   - 헬스체크
- /gameservers                                  - GameServer 목록/생성
- /gameservers/{namespace}/{name}               - GameServer 조회/수정/삭제
- /gameservers/{namespace}/{name}/logs|restart|metrics - Pod 액션
- /namespaces, /cluster/info                    - 클러스터 정보

관리 UI 빌드 결과(FRONTEND_PATH, STATIC_PATH)가 있으면 함께 서빙한다.
"""

import os
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.config import settings
from core.errors import GameServerAPIError
from routers import (
    cluster_router,
    gameserver_actions_router,
    gameservers_router,
    health_router,
)

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


# ============================================
# 오류 응답 ({"error": ...} 형식으로 통일)
# ============================================

async def gameserver_error_handler(request: Request, exc: GameServerAPIError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError):
    """요청 본문 검증 실패는 422 대신 400으로 응답"""
    details = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg')}"
        for err in exc.errors()
    )
    logger.info(f"Invalid request to {request.url.path}: {details}")
    return JSONResponse(status_code=400, content={"error": f"Invalid request body: {details}"})


# ============================================
# 관리 UI 정적 파일
# ============================================

def mount_frontend(app: FastAPI, frontend_path: str, static_path: str) -> None:
    """정적 자산(/static)과 SPA index.html 폴백 등록

    API 라우터를 모두 등록한 뒤에 호출해야 catch-all 경로가 API를 가리지 않는다.
    """
    if os.path.isdir(static_path):
        app.mount("/static", StaticFiles(directory=static_path), name="static")

    if not os.path.isdir(frontend_path):
        logger.info(f"Frontend directory {frontend_path} not found, serving API only")
        return

    frontend_root = os.path.realpath(frontend_path)

    @app.get("/{full_path:path}", include_in_schema=False)
    async def serve_frontend(full_path: str):
        """SPA 라우팅 - 파일이 있으면 파일, 없으면 index.html"""
        if full_path.startswith("api/"):
            return JSONResponse(status_code=404, content={"error": "Not Found"})

        file_path = os.path.realpath(os.path.join(frontend_root, full_path))
        if file_path.startswith(frontend_root + os.sep) and os.path.isfile(file_path):
            return FileResponse(file_path)

        index_path = os.path.join(frontend_root, "index.html")
        if os.path.isfile(index_path):
            return FileResponse(index_path)
        return JSONResponse(status_code=404, content={"error": "Not Found"})


def create_app() -> FastAPI:
    app = FastAPI(title=settings.APP_TITLE, version=settings.APP_VERSION)

    # CORS 설정
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=settings.CORS_METHODS,
        allow_headers=settings.CORS_HEADERS,
    )

    app.add_exception_handler(GameServerAPIError, gameserver_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    # ============================================
    # 라우터 등록
    # ============================================
    app.include_router(health_router)
    app.include_router(gameservers_router)
    app.include_router(gameserver_actions_router)
    app.include_router(cluster_router)

    mount_frontend(app, settings.FRONTEND_PATH, settings.STATIC_PATH)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting GamePlane API server on port {settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())
