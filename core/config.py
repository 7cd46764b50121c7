"""
Application configuration settings
"""
import os
from typing import List


def _env_list(name: str, default: str) -> List[str]:
    """콤마로 구분된 환경변수를 리스트로 변환"""
    raw = os.getenv(name, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


class Settings:
    """Application settings"""

    # App
    APP_TITLE: str = os.getenv("APP_TITLE", "GamePlane API")
    APP_VERSION: str = os.getenv("APP_VERSION", "1.0.0")
    API_PREFIX: str = "/api/v1"

    # Server
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8080"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # CORS
    CORS_ORIGINS: List[str] = _env_list(
        "CORS_ORIGINS", "http://localhost:1313,http://localhost:3000"
    )
    CORS_METHODS: List[str] = _env_list("CORS_METHODS", "GET,POST,PUT,DELETE,OPTIONS")
    CORS_HEADERS: List[str] = _env_list(
        "CORS_HEADERS", "Origin,Content-Type,Accept,Authorization"
    )

    # GameServer CRD
    GAMESERVER_GROUP: str = os.getenv("GAMESERVER_GROUP", "gameplane.kubelize.io")
    GAMESERVER_VERSION: str = os.getenv("GAMESERVER_VERSION", "v1alpha1")
    GAMESERVER_PLURAL: str = os.getenv("GAMESERVER_PLURAL", "gameservers")
    GAMESERVER_KIND: str = "GameServer"
    DEFAULT_NAMESPACE: str = os.getenv("DEFAULT_NAMESPACE", "default")

    SUPPORTED_GAME_TYPES: List[str] = ["sdtd", "ce", "pw", "vh", "we", "ln"]

    # Labels
    INSTANCE_LABEL: str = "app.kubernetes.io/instance"
    WORKLOAD_LABEL: str = "kubelize.io/gameserver"

    # Logs
    DEFAULT_LOG_LINES: int = int(os.getenv("DEFAULT_LOG_LINES", "100"))

    # Paths
    FRONTEND_PATH: str = os.getenv("FRONTEND_PATH", "./public")
    STATIC_PATH: str = os.getenv("STATIC_PATH", "./static")

    @property
    def api_version(self) -> str:
        return f"{self.GAMESERVER_GROUP}/{self.GAMESERVER_VERSION}"


settings = Settings()
