from fastapi.testclient import TestClient

import hello_api.dependencies as deps
from hello_api.core.config import AppSettings
from hello_api.main import create_app
from hello_api.services.uptime_service import UptimeService


def _build_app(**overrides):
    settings = AppSettings(_env_file=None, **overrides)
    return create_app(settings)


def test_health_reports_ok_and_environment():
    app = _build_app(NODE_ENV="staging")
    with TestClient(app) as client:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/json")
        body = response.json()
        assert body["status"] == "OK"
        assert body["environment"] == "staging"
        assert isinstance(body["uptime"], (int, float))
        assert body["uptime"] >= 0


def test_health_environment_is_null_when_unset():
    app = _build_app(NODE_ENV=None)
    with TestClient(app) as client:
        assert client.get("/health").json()["environment"] is None


def test_health_uptime_is_non_decreasing():
    app = _build_app()
    with TestClient(app) as client:
        first = client.get("/health").json()["uptime"]
        second = client.get("/health").json()["uptime"]
        assert second >= first >= 0


def test_health_uses_injected_uptime_service():
    ticks = iter([110.0, 112.5])
    uptime_service = UptimeService(started_at=100.0, clock=lambda: next(ticks))
    app = _build_app()
    app.dependency_overrides[deps.get_uptime_service] = lambda: uptime_service

    try:
        with TestClient(app) as client:
            assert client.get("/health").json()["uptime"] == 10.0
            assert client.get("/health").json()["uptime"] == 12.5
    finally:
        app.dependency_overrides.pop(deps.get_uptime_service, None)


def test_uptime_never_negative():
    uptime_service = UptimeService(started_at=50.0, clock=lambda: 10.0)
    assert uptime_service.uptime_seconds() == 0.0
