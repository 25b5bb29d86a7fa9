"""Configuration management service"""

import logging
import os
from pathlib import Path
from typing import Dict, Mapping, Optional, Any

import yaml

from ..api.exceptions import ConfigurationError
from ..constants import (
    CONFIG_FILE_NAME,
    CLIENT_ID_KEY,
    CLIENT_SECRET_KEY,
    DEFAULT_LOG_LEVEL,
    DEFAULT_PUBLISH_TARGET,
    DEST_KEY,
    EXTENSION_ID_KEY,
    LOG_LEVEL_KEY,
    LOG_TIMESTAMP_KEY,
    REFRESH_TOKEN_KEY,
    REQUIRED_UPLOAD_KEYS,
    SRC_KEY,
    ZIP_PATH_KEY,
)
from ..models import LoggingSettings, ResolverSettings, UploadSettings

TRUE_VALUES = {'1', 'true', 'yes', 'on'}
FALSE_VALUES = {'0', 'false', 'no', 'off', ''}


def env_key(key: str) -> str:
    """Environment variable name for a dotted config key"""
    return key.replace('.', '_').upper()


def default_config_path() -> Path:
    """Default config file in the user's home directory"""
    return Path.home() / CONFIG_FILE_NAME


class ConfigService:
    """Layered configuration: environment over config file over defaults"""

    def __init__(self,
                 config_file: Optional[Path] = None,
                 environ: Optional[Mapping[str, str]] = None):
        """Initialize config service

        Args:
            config_file: Explicit config file; the home directory default is
                used when omitted
            environ: Environment mapping, os.environ when omitted
        """
        self.config_file = Path(config_file) if config_file else None
        self.environ = os.environ if environ is None else environ
        self._data: Optional[Dict[str, Any]] = None
        self.loaded_from: Optional[Path] = None

    @property
    def data(self) -> Dict[str, Any]:
        """Parsed config file content (lazy load)"""
        if self._data is None:
            self.load_config()
        return self._data

    def load_config(self) -> Dict[str, Any]:
        """Load configuration from file

        A missing default file yields an empty configuration; a missing
        explicit file is an error.

        Returns:
            Parsed configuration mapping
        """
        path = self.config_file or default_config_path()

        if not path.is_file():
            if self.config_file is not None:
                raise ConfigurationError(f"Configuration file not found: {path}")
            self._data = {}
            return self._data

        try:
            with open(path, 'r', encoding='utf-8') as f:
                content = f.read()
        except OSError as e:
            raise ConfigurationError(f"Cannot read configuration file {path}: {e}") from e

        # Simple environment variable expansion
        content = os.path.expandvars(content)

        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid configuration file {path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file must contain a mapping: {path}")

        self._data = data
        self.loaded_from = path
        return self._data

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a dotted key

        Environment variables win over the config file. The file may nest
        the key (extension: {id: ...}) or spell it flat ("extension.id").
        """
        env_value = self.environ.get(env_key(key))
        if env_value is not None:
            return env_value

        node: Any = self.data
        for part in key.split('.'):
            if not isinstance(node, dict) or part not in node:
                node = None
                break
            node = node[part]
        if node is not None:
            return node

        if key in self.data and self.data[key] is not None:
            return self.data[key]

        return default

    def get_string(self, key: str, default: str = '') -> str:
        value = self.get(key)
        if value is None:
            return default
        return str(value)

    def get_bool(self, key: str, default: bool = False) -> bool:
        value = self.get(key)
        if value is None:
            return default
        if isinstance(value, bool):
            return value
        text = str(value).strip().lower()
        if text in TRUE_VALUES:
            return True
        if text in FALSE_VALUES:
            return False
        raise ConfigurationError(f"{key} must be a boolean, got {value!r}")

    def upload_settings(self,
                        zip_path: Optional[str],
                        publish: bool = False,
                        target: str = DEFAULT_PUBLISH_TARGET) -> UploadSettings:
        """Collect and validate settings for the upload command

        Raises:
            ConfigurationError: If a required value is missing
        """
        for key in REQUIRED_UPLOAD_KEYS:
            if not self.get_string(key):
                raise ConfigurationError(f"{key} is required")
        if not zip_path:
            raise ConfigurationError(f"{ZIP_PATH_KEY} is required")

        return UploadSettings(
            extension_id=self.get_string(EXTENSION_ID_KEY),
            client_id=self.get_string(CLIENT_ID_KEY),
            client_secret=self.get_string(CLIENT_SECRET_KEY),
            refresh_token=self.get_string(REFRESH_TOKEN_KEY),
            zip_path=Path(zip_path),
            publish=publish,
            target=target
        )

    def resolver_settings(self, src: Optional[str], dest: Optional[str]) -> ResolverSettings:
        """Collect and validate settings for the build-store-configs command

        Raises:
            ConfigurationError: If a directory is missing
        """
        if not src:
            raise ConfigurationError(f"{SRC_KEY} is required")
        if not dest:
            raise ConfigurationError(f"{DEST_KEY} is required")
        return ResolverSettings(src_dir=Path(src), dest_dir=Path(dest))

    def logging_settings(self) -> LoggingSettings:
        """Logging settings; invalid values fall back to defaults"""
        level = self.get_string(LOG_LEVEL_KEY, DEFAULT_LOG_LEVEL)
        try:
            timestamp = self.get_bool(LOG_TIMESTAMP_KEY, True)
        except ConfigurationError:
            logging.getLogger(__name__).warning(
                f"Invalid {LOG_TIMESTAMP_KEY} value, timestamps enabled"
            )
            timestamp = True
        return LoggingSettings(level=level, timestamp=timestamp)
