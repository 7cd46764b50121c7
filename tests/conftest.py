"""
Pytest configuration and fixtures
"""
import os
import sys
import pytest
from typing import Generator, AsyncGenerator
from unittest.mock import MagicMock, patch

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fastapi.testclient import TestClient
from httpx import AsyncClient, ASGITransport


# ============================================
# App Fixtures
# ============================================

@pytest.fixture(scope="session")
def app():
    """Create FastAPI app for testing"""
    from main import app as fastapi_app
    return fastapi_app


@pytest.fixture
def client(app) -> Generator:
    """Synchronous test client"""
    with TestClient(app) as c:
        yield c


@pytest.fixture
async def async_client(app) -> AsyncGenerator:
    """Asynchronous test client"""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


# ============================================
# Mock Fixtures
# ============================================

@pytest.fixture
def mock_k8s_clients():
    """Mock Kubernetes clients for every service module"""
    core_v1 = MagicMock()
    custom_api = MagicMock()
    version_api = MagicMock()
    clients = (core_v1, custom_api, version_api)

    targets = [
        "services.gameserver.get_k8s_clients",
        "services.pod.get_k8s_clients",
        "services.cluster.get_k8s_clients",
    ]
    patchers = [patch(target, return_value=clients) for target in targets]
    mocks = [p.start() for p in patchers]

    yield {
        "core_v1": core_v1,
        "custom_api": custom_api,
        "version_api": version_api,
        "mocks": mocks,
    }

    for p in patchers:
        p.stop()


def _make_pod(name: str, containers=("gameserver",)) -> MagicMock:
    """list_namespaced_pod 결과 항목과 같은 모양의 Pod mock"""
    pod = MagicMock()
    pod.metadata.name = name
    container_mocks = []
    for container_name in containers:
        container = MagicMock()
        container.name = container_name
        container_mocks.append(container)
    pod.spec.containers = container_mocks
    return pod


def _make_pod_list(*pods) -> MagicMock:
    pod_list = MagicMock()
    pod_list.items = list(pods)
    return pod_list


@pytest.fixture
def make_pod():
    return _make_pod


@pytest.fixture
def make_pod_list():
    return _make_pod_list


# ============================================
# Data Fixtures
# ============================================

@pytest.fixture
def sample_gameserver():
    """CustomObjectsApi가 반환하는 GameServer claim"""
    return {
        "apiVersion": "gameplane.kubelize.io/v1alpha1",
        "kind": "GameServer",
        "metadata": {
            "name": "valheim-1",
            "namespace": "default",
            "uid": "8f0c1f4e-1111-2222-3333-444455556666",
            "resourceVersion": "12345",
            "creationTimestamp": "2024-05-01T10:00:00Z",
            "labels": {
                "app.kubernetes.io/name": "gameserver",
                "app.kubernetes.io/instance": "valheim-1",
                "gameplane.kubelize.io/game-type": "vh",
            },
        },
        "spec": {
            "gameType": "vh",
            "serverName": "Vikings Only",
            "resources": {"cpu": "2", "memory": "4Gi", "storageSize": "10Gi"},
            "networking": {"serviceType": "LoadBalancer"},
            "gameConfig": {"server": {"maxPlayers": 10}},
            "resourceRef": {
                "apiVersion": "gameplane.kubelize.io/v1alpha1",
                "kind": "XGameServer",
                "name": "valheim-1-x7k2p",
            },
        },
        "status": {
            "phase": "Running",
            "serverIP": "10.0.0.12",
            "gamePort": 2456,
            "playersOnline": 3,
            "conditions": [
                {
                    "type": "Ready",
                    "status": "True",
                    "reason": "Available",
                    "lastTransitionTime": "2024-05-01T10:05:00Z",
                }
            ],
        },
    }


@pytest.fixture
def sample_create_request():
    """GameServer 생성 요청 본문"""
    return {
        "metadata": {"name": "palworld-1", "labels": {"team": "blue"}},
        "spec": {
            "gameType": "pw",
            "serverName": "Pals",
            "resources": {"cpu": "1500m", "memory": "8Gi"},
            "networking": {"serviceType": "NodePort", "enableIngress": False},
            "gameConfig": {"difficulty": "hard"},
        },
    }
