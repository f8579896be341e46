import logging

import pytest
from fastapi.testclient import TestClient

from asset_server.core.config import Settings
from asset_server.core.container import ApplicationContainer
from asset_server.main import create_app

PNG_BYTES = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR"
JPEG_BYTES = b"\xff\xd8\xff\xe0\x00\x10JFIF\x00"
SVG_BYTES = b'<svg xmlns="http://www.w3.org/2000/svg" width="1" height="1"></svg>'


@pytest.fixture
def asset_root(tmp_path):
    root = tmp_path / "assets"
    (root / "sub" / "dir").mkdir(parents=True)
    (root / "sub" / "dir" / "file.bin").write_bytes(b"\x00\x01payload\xff")
    (root / "logo.png").write_bytes(PNG_BYTES)
    (root / "photo.jpg").write_bytes(JPEG_BYTES)
    (root / "placeholder.jpg").write_bytes(SVG_BYTES)

    # Neighbours a naive prefix check would let through.
    sibling = tmp_path / "assets-evil"
    sibling.mkdir()
    (sibling / "file.txt").write_text("sibling secret")
    (tmp_path / "secret.txt").write_text("outside the root")
    return root


@pytest.fixture
def settings(asset_root, tmp_path):
    return Settings(
        assets_base_path=asset_root,
        database={"url": f"sqlite+aiosqlite:///{tmp_path / 'assets.db'}"},
        flags={"path": tmp_path / "flags.json"},
    )


@pytest.fixture
def container(settings):
    return ApplicationContainer(settings=settings)


@pytest.fixture
def client(container):
    return TestClient(create_app(container))


@pytest.fixture
def restore_root_level():
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)
