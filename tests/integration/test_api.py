from fastapi.testclient import TestClient

from exec_timer.api.app import create_app
from exec_timer.services.order_service import OrderService


def test_order_route_times_one_call(metrics_log):
    client = TestClient(create_app(OrderService(delay_ms=0)))

    response = client.get("/order")

    assert response.status_code == 200
    assert response.content == b""
    assert len(metrics_log.records) == 1
    assert "OrderService.process_order executed in " in metrics_log.messages()[0]


def test_each_request_gets_its_own_measurement(metrics_log):
    client = TestClient(create_app(OrderService(delay_ms=0)))

    for _ in range(3):
        assert client.get("/order").status_code == 200
    assert len(metrics_log.records) == 3


def test_service_failure_returns_500_and_is_still_measured(monkeypatch, metrics_log):
    def interrupted(seconds):
        raise InterruptedError("sleep interrupted")

    monkeypatch.setattr("exec_timer.services.order_service.time.sleep", interrupted)
    client = TestClient(create_app(OrderService(delay_ms=10)), raise_server_exceptions=False)

    response = client.get("/order")

    assert response.status_code == 500
    assert len(metrics_log.records) == 1


def test_health_and_root():
    with TestClient(create_app(OrderService(delay_ms=0))) as client:
        health = client.get("/health")
        root = client.get("/")

    assert health.status_code == 200
    assert health.json()["status"] == "healthy"
    assert root.json()["docs"] == "/docs"
