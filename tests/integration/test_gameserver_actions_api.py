"""
Integration tests for GameServer pod actions (logs, restart, metrics)
"""
from kubernetes.client.rest import ApiException
from urllib3.exceptions import MaxRetryError


METRICS_NAMESPACE = "valheim-1-x7k2p-vh"


class TestLogsAPI:
    """Tests for GET /api/v1/gameservers/{namespace}/{name}/logs"""

    def test_logs(self, client, mock_k8s_clients, make_pod, make_pod_list):
        core_v1 = mock_k8s_clients["core_v1"]
        core_v1.list_namespaced_pod.return_value = make_pod_list(make_pod("valheim-1-0"))
        core_v1.read_namespaced_pod_log.return_value = "\n".join([
            "Game server started",
            "ERROR: failed to load world",
            "Warning: low memory",
            "Unhandled Exception in worker",
            "Player joined",
        ])

        response = client.get("/api/v1/gameservers/default/valheim-1/logs")
        assert response.status_code == 200
        data = response.json()
        assert data["pod"] == "valheim-1-0"
        assert data["container"] == "gameserver"
        assert data["tailLines"] == 100
        assert data["errorCount"] == 2
        assert data["warningCount"] == 1
        assert data["logs"].startswith("Game server started")

        core_v1.list_namespaced_pod.assert_called_once_with(
            "default", label_selector="app.kubernetes.io/instance=valheim-1"
        )
        core_v1.read_namespaced_pod_log.assert_called_once_with(
            "valheim-1-0", "default", tail_lines=100, container="gameserver"
        )

    def test_logs_custom_lines(self, client, mock_k8s_clients, make_pod, make_pod_list):
        core_v1 = mock_k8s_clients["core_v1"]
        core_v1.list_namespaced_pod.return_value = make_pod_list(make_pod("valheim-1-0"))
        core_v1.read_namespaced_pod_log.return_value = ""

        response = client.get("/api/v1/gameservers/default/valheim-1/logs", params={"lines": "20"})
        assert response.status_code == 200
        assert response.json()["tailLines"] == 20
        assert core_v1.read_namespaced_pod_log.call_args.kwargs["tail_lines"] == 20

    def test_logs_invalid_lines_uses_default(self, client, mock_k8s_clients, make_pod, make_pod_list):
        core_v1 = mock_k8s_clients["core_v1"]
        core_v1.list_namespaced_pod.return_value = make_pod_list(make_pod("valheim-1-0"))
        core_v1.read_namespaced_pod_log.return_value = ""

        response = client.get("/api/v1/gameservers/default/valheim-1/logs", params={"lines": "lots"})
        assert response.status_code == 200
        assert response.json()["tailLines"] == 100

    def test_logs_no_pods(self, client, mock_k8s_clients, make_pod_list):
        mock_k8s_clients["core_v1"].list_namespaced_pod.return_value = make_pod_list()

        response = client.get("/api/v1/gameservers/default/valheim-1/logs")
        assert response.status_code == 404
        assert response.json() == {"error": "No pods found for GameServer"}

    def test_logs_pod_lookup_error(self, client, mock_k8s_clients):
        core_v1 = mock_k8s_clients["core_v1"]
        core_v1.list_namespaced_pod.side_effect = ApiException(status=403, reason="Forbidden")

        response = client.get("/api/v1/gameservers/default/valheim-1/logs")
        assert response.status_code == 500
        assert response.json()["error"] == "Failed to find pods: Forbidden"


class TestRestartAPI:
    """Tests for POST /api/v1/gameservers/{namespace}/{name}/restart"""

    def test_restart(self, client, mock_k8s_clients, make_pod, make_pod_list):
        core_v1 = mock_k8s_clients["core_v1"]
        core_v1.list_namespaced_pod.return_value = make_pod_list(
            make_pod("valheim-1-0"), make_pod("valheim-1-1")
        )

        response = client.post("/api/v1/gameservers/default/valheim-1/restart")
        assert response.status_code == 200
        assert response.json() == {
            "message": "GameServer valheim-1 restarted successfully",
            "pod": "valheim-1-0",
        }
        core_v1.delete_namespaced_pod.assert_called_once_with("valheim-1-0", "default")

    def test_restart_no_pods(self, client, mock_k8s_clients, make_pod_list):
        core_v1 = mock_k8s_clients["core_v1"]
        core_v1.list_namespaced_pod.return_value = make_pod_list()

        response = client.post("/api/v1/gameservers/default/valheim-1/restart")
        assert response.status_code == 404
        core_v1.delete_namespaced_pod.assert_not_called()

    def test_restart_delete_failure(self, client, mock_k8s_clients, make_pod, make_pod_list):
        core_v1 = mock_k8s_clients["core_v1"]
        core_v1.list_namespaced_pod.return_value = make_pod_list(make_pod("valheim-1-0"))
        core_v1.delete_namespaced_pod.side_effect = ApiException(status=500, reason="boom")

        response = client.post("/api/v1/gameservers/default/valheim-1/restart")
        assert response.status_code == 500
        assert response.json()["error"] == "Failed to restart GameServer: boom"


class TestMetricsAPI:
    """Tests for GET /api/v1/gameservers/{namespace}/{name}/metrics"""

    def test_metrics(self, client, mock_k8s_clients, sample_gameserver, make_pod, make_pod_list):
        core_v1 = mock_k8s_clients["core_v1"]
        custom = mock_k8s_clients["custom_api"]
        core_v1.list_namespaced_pod.return_value = make_pod_list(make_pod("valheim-0"))
        custom.get_namespaced_custom_object.side_effect = [
            sample_gameserver,
            {
                "containers": [
                    {"name": "gameserver", "usage": {"cpu": "500000000n", "memory": "1048576Ki"}},
                    {"name": "sidecar", "usage": {"cpu": "5m", "memory": "10Mi"}},
                ]
            },
        ]

        response = client.get("/api/v1/gameservers/default/valheim-1/metrics")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "success"
        assert data["podName"] == "valheim-0"
        assert data["podNamespace"] == METRICS_NAMESPACE
        assert "error" not in data
        assert data["metrics"]["cpu"] == {"current": "500m", "configured": "2", "percentage": 25.0}
        assert data["metrics"]["memory"] == {"current": "1.0Gi", "configured": "4Gi", "percentage": 25.0}

        core_v1.list_namespaced_pod.assert_called_once_with(
            METRICS_NAMESPACE, label_selector=f"kubelize.io/gameserver={METRICS_NAMESPACE}"
        )
        metrics_call = custom.get_namespaced_custom_object.call_args_list[1].kwargs
        assert metrics_call["group"] == "metrics.k8s.io"
        assert metrics_call["namespace"] == METRICS_NAMESPACE
        assert metrics_call["name"] == "valheim-0"

    def test_metrics_unavailable(self, client, mock_k8s_clients, sample_gameserver, make_pod, make_pod_list):
        """metrics-server failures still answer 200 with zeroed usage"""
        core_v1 = mock_k8s_clients["core_v1"]
        custom = mock_k8s_clients["custom_api"]
        core_v1.list_namespaced_pod.return_value = make_pod_list(make_pod("valheim-0"))
        custom.get_namespaced_custom_object.side_effect = [
            sample_gameserver,
            ApiException(status=503, reason="Service Unavailable"),
        ]

        response = client.get("/api/v1/gameservers/default/valheim-1/metrics")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "metrics_unavailable"
        assert data["error"] == "Metrics unavailable: Service Unavailable"
        assert data["metrics"]["cpu"] == {"current": "0m", "configured": "2", "percentage": 0.0}
        assert data["metrics"]["memory"] == {"current": "0Mi", "configured": "4Gi", "percentage": 0.0}

    def test_metrics_transport_error(self, client, mock_k8s_clients, sample_gameserver, make_pod, make_pod_list):
        """Connection failures to metrics.k8s.io also fall back to zeroed usage"""
        core_v1 = mock_k8s_clients["core_v1"]
        custom = mock_k8s_clients["custom_api"]
        core_v1.list_namespaced_pod.return_value = make_pod_list(make_pod("valheim-0"))
        custom.get_namespaced_custom_object.side_effect = [
            sample_gameserver,
            MaxRetryError(None, "/apis/metrics.k8s.io/v1beta1", "connection refused"),
        ]

        response = client.get("/api/v1/gameservers/default/valheim-1/metrics")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "metrics_unavailable"
        assert data["error"].startswith("Metrics unavailable: ")
        assert "Max retries exceeded" in data["error"]
        assert data["metrics"]["cpu"]["current"] == "0m"

    def test_metrics_claim_transport_error(self, client, mock_k8s_clients):
        custom = mock_k8s_clients["custom_api"]
        custom.get_namespaced_custom_object.side_effect = MaxRetryError(
            None, "/apis/gameplane.kubelize.io", "connection refused"
        )

        response = client.get("/api/v1/gameservers/default/valheim-1/metrics")
        assert response.status_code == 404
        assert response.json()["error"].startswith("GameServer not found: ")

    def test_metrics_empty_containers(self, client, mock_k8s_clients, sample_gameserver, make_pod, make_pod_list):
        core_v1 = mock_k8s_clients["core_v1"]
        custom = mock_k8s_clients["custom_api"]
        core_v1.list_namespaced_pod.return_value = make_pod_list(make_pod("valheim-0"))
        custom.get_namespaced_custom_object.side_effect = [sample_gameserver, {"containers": []}]

        response = client.get("/api/v1/gameservers/default/valheim-1/metrics")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "metrics_unavailable"
        assert data["error"] == "Metrics unavailable: no container metrics found"

    def test_metrics_claim_not_found(self, client, mock_k8s_clients):
        custom = mock_k8s_clients["custom_api"]
        custom.get_namespaced_custom_object.side_effect = ApiException(status=404, reason="Not Found")

        response = client.get("/api/v1/gameservers/default/missing/metrics")
        assert response.status_code == 404
        assert response.json() == {"error": "GameServer not found: Not Found"}

    def test_metrics_not_ready(self, client, mock_k8s_clients, sample_gameserver):
        """Claims without resourceRef have not been composed yet"""
        del sample_gameserver["spec"]["resourceRef"]
        mock_k8s_clients["custom_api"].get_namespaced_custom_object.return_value = sample_gameserver

        response = client.get("/api/v1/gameservers/default/valheim-1/metrics")
        assert response.status_code == 404
        assert response.json() == {
            "error": "GameServer resourceRef.name not found - server may not be ready yet"
        }
        mock_k8s_clients["core_v1"].list_namespaced_pod.assert_not_called()

    def test_metrics_no_pods(self, client, mock_k8s_clients, sample_gameserver, make_pod_list):
        mock_k8s_clients["custom_api"].get_namespaced_custom_object.return_value = sample_gameserver
        mock_k8s_clients["core_v1"].list_namespaced_pod.return_value = make_pod_list()

        response = client.get("/api/v1/gameservers/default/valheim-1/metrics")
        assert response.status_code == 404
        assert response.json() == {
            "error": f"No pods found for GameServer valheim-1 in namespace {METRICS_NAMESPACE}",
            "actualNamespace": METRICS_NAMESPACE,
            "resourceRefName": "valheim-1-x7k2p",
            "gameType": "vh",
            "claimName": "valheim-1",
        }
