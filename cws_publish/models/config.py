"""Configuration data models"""

from dataclasses import dataclass
from pathlib import Path

from ..constants import DEFAULT_LOG_LEVEL, DEFAULT_PUBLISH_TARGET


@dataclass(frozen=True)
class UploadSettings:
    """Validated settings for the upload command"""

    extension_id: str
    client_id: str
    client_secret: str
    refresh_token: str
    zip_path: Path
    publish: bool = False
    target: str = DEFAULT_PUBLISH_TARGET

    def __repr__(self) -> str:
        return (
            f"UploadSettings(extension_id={self.extension_id!r}, "
            f"zip_path={str(self.zip_path)!r}, publish={self.publish}, "
            f"target={self.target!r})"
        )


@dataclass(frozen=True)
class ResolverSettings:
    """Validated settings for the build-store-configs command"""

    src_dir: Path
    dest_dir: Path


@dataclass(frozen=True)
class LoggingSettings:
    """Logging configuration read from the config file"""

    level: str = DEFAULT_LOG_LEVEL
    timestamp: bool = True
