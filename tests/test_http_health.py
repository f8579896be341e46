import pytest

from asset_server.interfaces.http.routers import health
from asset_server.modules.flags import FlagSnapshot


async def _ping_ok(engine):
    return None


async def _ping_down(engine):
    raise ConnectionRefusedError("connection refused")


def test_health_returns_ok(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.text == "ok"


def test_health_rejects_post(client):
    assert client.post("/health").status_code == 405


def test_ready_when_database_answers(client, monkeypatch):
    monkeypatch.setattr(health, "ping_database", _ping_ok)
    resp = client.get("/ready")
    assert resp.status_code == 200
    assert resp.text == "ready"


def test_not_ready_when_database_is_down(client, monkeypatch):
    monkeypatch.setattr(health, "ping_database", _ping_down)
    resp = client.get("/ready")
    assert resp.status_code == 503
    assert resp.text == "db not ready"


def test_flags_endpoint_reports_current_snapshot(client, container):
    resp = client.get("/_flags")
    assert resp.status_code == 200
    assert resp.headers["content-type"] == "application/json"
    assert resp.json() == {"offline": False, "logLevel": "info", "imageStorageLocation": "local"}

    container.flags.publish(FlagSnapshot(log_level="debug", image_storage_location="bucket"))
    assert client.get("/_flags").json()["logLevel"] == "debug"


@pytest.mark.parametrize(
    "path, expected",
    [
        ("/health", 200),
        ("/ready", 200),
        ("/assets/logo.png", 503),
        ("/assets/missing.png", 503),
        ("/_flags", 503),
        ("/nowhere", 503),
    ],
)
def test_offline_gate(client, container, monkeypatch, path, expected):
    monkeypatch.setattr(health, "ping_database", _ping_ok)
    container.flags.publish(FlagSnapshot(offline=True))
    resp = client.get(path)
    assert resp.status_code == expected
    if expected == 503:
        assert resp.text == "service temporarily offline"


def test_offline_gate_lifts_when_flag_clears(client, container):
    container.flags.publish(FlagSnapshot(offline=True))
    assert client.get("/assets/logo.png").status_code == 503
    container.flags.publish(FlagSnapshot(offline=False))
    assert client.get("/assets/logo.png").status_code == 200
