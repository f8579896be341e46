import json

import pytest
from fastapi.testclient import TestClient

from asset_server import main
from asset_server.core.container import ApplicationContainer
from asset_server.infrastructure.database import DatabaseUnavailableError
from asset_server.main import create_app

pytestmark = pytest.mark.usefixtures("restore_root_level")


@pytest.fixture
def db_waits(monkeypatch):
    calls = []

    async def fake_wait(engine, timeout, attempt_timeout, **kwargs):
        calls.append((timeout, attempt_timeout))

    monkeypatch.setattr(main, "wait_for_database", fake_wait)
    return calls


@pytest.fixture
def disposals(monkeypatch):
    events = []
    original = ApplicationContainer.dispose_engine

    async def recording_dispose(self):
        events.append("disposed")
        await original(self)

    monkeypatch.setattr(ApplicationContainer, "dispose_engine", recording_dispose)
    return events


def test_startup_applies_flag_file_and_shutdown_stops_watcher(
    container, settings, db_waits, disposals
):
    settings.flags.path.write_text(json.dumps({"offline": True}), encoding="utf-8")
    app = create_app(container)

    with TestClient(app) as client:
        watcher = app.state.flag_watcher
        assert watcher.running
        assert container.flags.current.offline is True
        assert client.get("/assets/logo.png").status_code == 503
        assert client.get("/health").status_code == 200

    assert db_waits == [(settings.database.startup_timeout, settings.database.connect_timeout)]
    assert watcher.running is False
    assert disposals == ["disposed"]


def test_engine_is_disposed_after_watcher_stops(container, db_waits, monkeypatch):
    order = []
    app = create_app(container)
    original_dispose = ApplicationContainer.dispose_engine

    async def recording_dispose(self):
        order.append(("dispose", app.state.flag_watcher.running))
        await original_dispose(self)

    monkeypatch.setattr(ApplicationContainer, "dispose_engine", recording_dispose)

    with TestClient(app) as client:
        assert client.get("/assets/logo.png").status_code == 200

    assert order == [("dispose", False)]


def test_undecodable_flag_file_at_startup_is_not_fatal(container, settings, db_waits):
    settings.flags.path.write_bytes(b"\xff\xfe")
    app = create_app(container)

    with TestClient(app) as client:
        resp = client.get("/_flags")
        assert resp.status_code == 200
        assert resp.json() == {"offline": False, "logLevel": "info", "imageStorageLocation": "local"}
        assert client.get("/assets/logo.png").status_code == 200


def test_database_outage_at_startup_is_fatal(container, monkeypatch, disposals):
    async def unreachable(engine, timeout, attempt_timeout, **kwargs):
        raise DatabaseUnavailableError("database not reachable after 3 attempts")

    monkeypatch.setattr(main, "wait_for_database", unreachable)
    app = create_app(container)

    with pytest.raises(DatabaseUnavailableError):
        with TestClient(app):
            pass

    assert disposals == ["disposed"]
    assert not hasattr(app.state, "flag_watcher")
