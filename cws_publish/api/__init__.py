# cws_publish/api/__init__.py
"""API layer for cws-publish"""

from .exceptions import (
    CwsPublishError,
    ConfigurationError,
    InvalidFileTypeError,
    InvalidPublishTargetError,
    DirectoryNotFoundError,
    HTTPError,
    DecodeError,
    FileIOError,
    TokenError,
    UploadError,
    PublishError,
    ResolverError,
    NoManifestsFoundError,
)
from .publisher import Publisher, upload
from .resolver import build_store_configs

__all__ = [
    # Main classes
    "Publisher",

    # Convenience functions
    "upload",
    "build_store_configs",

    # Exceptions
    "CwsPublishError",
    "ConfigurationError",
    "InvalidFileTypeError",
    "InvalidPublishTargetError",
    "DirectoryNotFoundError",
    "HTTPError",
    "DecodeError",
    "FileIOError",
    "TokenError",
    "UploadError",
    "PublishError",
    "ResolverError",
    "NoManifestsFoundError",
]
