"""Tests for layered configuration."""

from pathlib import Path

import pytest

from cws_publish.api.exceptions import ConfigurationError
from cws_publish.constants import CONFIG_FILE_NAME
from cws_publish.services import ConfigService
from cws_publish.services.config_service import env_key

NESTED_CONFIG = """
extension:
  id: from-file
google:
  client:
    id: client-from-file
    secret: secret-from-file
  refresh:
    token: refresh-from-file
log:
  level: warning
  timestamp: false
"""


@pytest.fixture
def config_file(tmp_path) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text(NESTED_CONFIG)
    return path


def test_env_key():
    assert env_key("google.refresh.token") == "GOOGLE_REFRESH_TOKEN"


class TestLookup:
    def test_nested_file_values(self, config_file):
        config = ConfigService(config_file, environ={})
        assert config.get("extension.id") == "from-file"
        assert config.get("google.client.secret") == "secret-from-file"
        assert config.loaded_from == config_file

    def test_flat_dotted_keys(self, tmp_path):
        path = tmp_path / "flat.yaml"
        path.write_text('"extension.id": flat-id\n')
        assert ConfigService(path, environ={}).get("extension.id") == "flat-id"

    def test_environment_wins(self, config_file):
        config = ConfigService(config_file, environ={"EXTENSION_ID": "from-env"})
        assert config.get("extension.id") == "from-env"

    def test_default(self, config_file):
        assert ConfigService(config_file, environ={}).get("missing.key", "x") == "x"

    def test_expands_environment_variables(self, tmp_path, monkeypatch):
        path = tmp_path / "vars.yaml"
        path.write_text("google:\n  client:\n    secret: ${CWS_TEST_SECRET}\n")
        # expandvars reads the real process environment
        monkeypatch.setenv("CWS_TEST_SECRET", "expanded")

        config = ConfigService(path, environ={})

        assert config.get("google.client.secret") == "expanded"

    def test_default_file_in_home(self, isolated_config):
        (isolated_config / CONFIG_FILE_NAME).write_text("extension:\n  id: home-id\n")
        assert ConfigService(environ={}).get("extension.id") == "home-id"

    def test_missing_default_file_is_empty(self):
        assert ConfigService(environ={}).data == {}

    def test_missing_explicit_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            ConfigService(tmp_path / "nope.yaml", environ={}).load_config()

    def test_non_mapping_file(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigurationError):
            ConfigService(path, environ={}).load_config()


class TestSettings:
    def test_upload_settings(self, config_file):
        settings = ConfigService(config_file, environ={}).upload_settings(
            "dist/ext.zip", publish=True, target="trustedTesters"
        )
        assert settings.extension_id == "from-file"
        assert settings.client_id == "client-from-file"
        assert settings.refresh_token == "refresh-from-file"
        assert settings.zip_path == Path("dist/ext.zip")
        assert settings.publish is True
        assert "secret-from-file" not in repr(settings)

    @pytest.mark.parametrize("missing", [
        "EXTENSION_ID", "GOOGLE_CLIENT_ID", "GOOGLE_CLIENT_SECRET", "GOOGLE_REFRESH_TOKEN",
    ])
    def test_upload_settings_required(self, missing):
        environ = {
            "EXTENSION_ID": "id",
            "GOOGLE_CLIENT_ID": "client",
            "GOOGLE_CLIENT_SECRET": "secret",
            "GOOGLE_REFRESH_TOKEN": "refresh",
        }
        environ[missing] = ""
        key = missing.lower().replace("_", ".")

        with pytest.raises(ConfigurationError, match=f"{key} is required"):
            ConfigService(environ=environ).upload_settings("ext.zip")

    def test_upload_settings_requires_zip_path(self, config_file):
        with pytest.raises(ConfigurationError, match="zipPath is required"):
            ConfigService(config_file, environ={}).upload_settings("")

    def test_resolver_settings(self):
        settings = ConfigService(environ={}).resolver_settings("src", "dest")
        assert settings.src_dir == Path("src")
        assert settings.dest_dir == Path("dest")

    def test_logging_settings_from_file(self, config_file):
        settings = ConfigService(config_file, environ={}).logging_settings()
        assert settings.level == "warning"
        assert settings.timestamp is False

    def test_logging_settings_defaults(self):
        settings = ConfigService(environ={}).logging_settings()
        assert settings.level == "info"
        assert settings.timestamp is True

    def test_logging_timestamp_from_env(self):
        settings = ConfigService(environ={"LOG_TIMESTAMP": "no"}).logging_settings()
        assert settings.timestamp is False
