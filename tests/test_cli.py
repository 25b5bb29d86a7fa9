"""Tests for the command line interface."""

import logging

import pytest
from click.testing import CliRunner
from rich.logging import RichHandler

from cws_publish.__version__ import __version__
from cws_publish.api import Publisher
from cws_publish.cli.main import cli
from cws_publish.cli.commands import upload as upload_command

from conftest import write_store_config

CREDENTIALS = {
    "EXTENSION_ID": "abcdefghijklmnop",
    "GOOGLE_CLIENT_ID": "client-id",
    "GOOGLE_CLIENT_SECRET": "client-secret",
    "GOOGLE_REFRESH_TOKEN": "refresh-token",
}


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    level = root.level
    yield
    for handler in [h for h in root.handlers if isinstance(h, RichHandler)]:
        root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def runner():
    return CliRunner()


class TestRootApp:
    def test_help(self, runner):
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "upload" in result.output
        assert "build-store-configs" in result.output

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_missing_explicit_config(self, runner, tmp_path):
        result = runner.invoke(cli, ["--config", str(tmp_path / "nope.yaml"), "upload", "--help"])
        assert result.exit_code == 1
        assert "not found" in result.output


class TestBuildStoreConfigs:
    def test_copies_providers(self, runner, src_dir, dest_dir):
        write_store_config(
            src_dir,
            "store",
            {"providers": {"p1": "p1.js"}, "ruleSets": {"desktop-rules": "rules.yml"}},
            {"rules.yml": "loadExternalProvider: p1\n", "p1.js": "provider();"},
        )

        result = runner.invoke(cli, ["build-store-configs", "-s", str(src_dir), "-d", str(dest_dir)])

        assert result.exit_code == 0, result.output
        assert (dest_dir / "p1.js").read_text() == "provider();"
        assert "copied 1 provider" in result.output

    def test_nothing_resolved_is_success(self, runner, src_dir, dest_dir):
        write_store_config(src_dir, "store", {"providers": {}, "ruleSets": {}})

        result = runner.invoke(cli, ["build-store-configs", "--src", str(src_dir),
                                     "--dest", str(dest_dir)])

        assert result.exit_code == 0, result.output
        assert list(dest_dir.iterdir()) == []

    def test_no_manifests_fails(self, runner, src_dir, dest_dir):
        result = runner.invoke(cli, ["build-store-configs", "-s", str(src_dir), "-d", str(dest_dir)])

        assert result.exit_code == 1
        assert "no store configs" in result.output

    def test_requires_flags(self, runner):
        result = runner.invoke(cli, ["build-store-configs"])
        assert result.exit_code == 2


class TestUpload:
    def test_missing_credentials(self, runner, zip_file):
        result = runner.invoke(cli, ["upload", "-z", str(zip_file)])

        assert result.exit_code == 1
        assert "extension.id is required" in result.output

    def test_rejects_unknown_target(self, runner, zip_file):
        result = runner.invoke(cli, ["upload", "-z", str(zip_file), "-t", "everyone"],
                               env=CREDENTIALS)
        assert result.exit_code == 2

    def test_invalid_archive(self, runner, text_file, store_api, monkeypatch):
        api = store_api()
        monkeypatch.setattr(
            upload_command, "Publisher",
            lambda logger=None: Publisher(http_client=api.client(), logger=logger)
        )

        result = runner.invoke(cli, ["upload", "-z", str(text_file)], env=CREDENTIALS)

        assert result.exit_code == 1
        assert "Zip file is invalid" in result.output
        assert api.requests == []

    def test_upload_and_publish(self, runner, zip_file, store_api, monkeypatch):
        api = store_api()
        monkeypatch.setattr(
            upload_command, "Publisher",
            lambda logger=None: Publisher(http_client=api.client(), logger=logger)
        )

        result = runner.invoke(
            cli,
            ["upload", "--zipPath", str(zip_file), "--publish", "true", "--target", "trustedTesters"],
            env=CREDENTIALS,
        )

        assert result.exit_code == 0, result.output
        assert "Upload completed successfully" in result.output
        assert api.paths()[-1] == "/chromewebstore/v1.1/items/abcdefghijklmnop/publish"

    def test_config_file_credentials(self, runner, zip_file, tmp_path, store_api, monkeypatch):
        config = tmp_path / "cws.yaml"
        config.write_text(
            "extension:\n  id: from-file\n"
            "google:\n  client:\n    id: cid\n    secret: cs\n  refresh:\n    token: rt\n"
        )
        api = store_api()
        monkeypatch.setattr(
            upload_command, "Publisher",
            lambda logger=None: Publisher(http_client=api.client(), logger=logger)
        )

        result = runner.invoke(cli, ["--config", str(config), "upload", "-z", str(zip_file)])

        assert result.exit_code == 0, result.output
        assert api.paths() == [
            "/oauth2/v4/token",
            "/upload/chromewebstore/v1.1/items/from-file",
        ]

    def test_item_errors_with_brackets(self, runner, zip_file, store_api, monkeypatch):
        api = store_api(upload_body={
            "id": "abcdefghijklmnop",
            "uploadState": "FAILURE",
            "itemError": [{"error_code": "pkg_invalid", "error_detail": "bad entry [/icons/a.png]"}],
        })
        monkeypatch.setattr(
            upload_command, "Publisher",
            lambda logger=None: Publisher(http_client=api.client(), logger=logger)
        )

        result = runner.invoke(cli, ["upload", "-z", str(zip_file)], env=CREDENTIALS)

        assert result.exit_code == 0, result.output
        assert "[pkg_invalid] bad entry [/icons/a.png]" in result.output
