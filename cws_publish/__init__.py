"""cws-publish - Build and publish Chrome Web Store extensions.

This tool uploads packaged extensions to the Chrome Web Store publishing API
and assembles store provider scripts from store config manifests.
"""

from .__version__ import __version__, __version_info__, __license__

# Core API
from .api.publisher import Publisher, upload
from .api.resolver import build_store_configs

# Data models
from .models.item import AccessToken, ItemResource, ItemError
from .models.store_config import Manifest, RuleSet
from .models.result import UploadResult, ResolveResult, SkipReason

# Exceptions
from .api.exceptions import (
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

__all__ = [
    # Version information
    "__version__",
    "__version_info__",
    "__license__",

    # Main classes
    "Publisher",

    # Core API functions
    "upload",
    "build_store_configs",

    # Data models
    "AccessToken",
    "ItemResource",
    "ItemError",
    "Manifest",
    "RuleSet",
    "UploadResult",
    "ResolveResult",
    "SkipReason",

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
