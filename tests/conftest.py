"""Pytest configuration and fixtures."""

import json
import zipfile
from pathlib import Path
from typing import Callable, Dict, List, Optional

import httpx
import pytest

from cws_publish.constants import CONFIG_FILE_NAME

CONFIG_ENV_VARS = [
    "EXTENSION_ID",
    "GOOGLE_CLIENT_ID",
    "GOOGLE_CLIENT_SECRET",
    "GOOGLE_REFRESH_TOKEN",
    "LOG_LEVEL",
    "LOG_TIMESTAMP",
]


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep the user's home config and credentials out of tests."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    assert not (home / CONFIG_FILE_NAME).exists()
    return home


@pytest.fixture
def zip_file(tmp_path) -> Path:
    """A small but real zip archive."""
    path = tmp_path / "extension.zip"
    with zipfile.ZipFile(path, "w") as archive:
        archive.writestr("manifest.json", json.dumps({"name": "demo", "version": "1.0.0"}))
        archive.writestr("background.js", "console.log('hello');\n")
    return path


@pytest.fixture
def text_file(tmp_path) -> Path:
    path = tmp_path / "extension.zip"
    path.write_text("definitely not a zip archive\n")
    return path


class RecordingTransport:
    """httpx.MockTransport wrapper that keeps every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: List[httpx.Request] = []
        self._handler = handler
        self.transport = httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        return self._handler(request)

    def client(self) -> httpx.Client:
        return httpx.Client(transport=self.transport)

    def paths(self) -> List[str]:
        return [r.url.path for r in self.requests]


def store_api_handler(upload_status: int = 200,
                      publish_status: int = 200,
                      token_status: int = 200,
                      upload_body: Optional[Dict] = None,
                      publish_body: Optional[Dict] = None):
    """Fake token, upload and publish endpoints."""

    def handler(request: httpx.Request) -> httpx.Response:
        path = request.url.path
        if path == "/oauth2/v4/token":
            return httpx.Response(
                token_status,
                json={"access_token": "ya29.token", "token_type": "Bearer", "expires_in": 3599}
            )
        if path.startswith("/upload/chromewebstore/v1.1/items/"):
            body = upload_body or {
                "kind": "chromewebstore#item",
                "id": "abcdefghijklmnop",
                "uploadState": "SUCCESS",
            }
            return httpx.Response(upload_status, json=body)
        if path.endswith("/publish"):
            body = publish_body or {
                "kind": "chromewebstore#item",
                "item_id": "abcdefghijklmnop",
                "status": ["OK"],
            }
            return httpx.Response(publish_status, json=body)
        raise AssertionError(f"Unexpected request {request.method} {request.url}")

    return handler


@pytest.fixture
def store_api():
    """Factory for a recording fake of the store API."""

    def factory(**kwargs) -> RecordingTransport:
        return RecordingTransport(store_api_handler(**kwargs))

    return factory


def write_store_config(src: Path,
                       name: str,
                       manifest: Dict,
                       files: Optional[Dict[str, str]] = None) -> Path:
    """Create src/<name>/manifest.json plus sibling files."""
    config_dir = src / name
    config_dir.mkdir(parents=True, exist_ok=True)
    manifest_path = config_dir / "manifest.json"
    manifest_path.write_text(json.dumps(manifest))
    for filename, content in (files or {}).items():
        (config_dir / filename).write_text(content)
    return manifest_path


@pytest.fixture
def src_dir(tmp_path) -> Path:
    path = tmp_path / "src"
    path.mkdir()
    return path


@pytest.fixture
def dest_dir(tmp_path) -> Path:
    path = tmp_path / "dest"
    path.mkdir()
    return path
