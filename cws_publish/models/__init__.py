"""Data models for cws-publish"""

from .item import AccessToken, ItemError, ItemResource
from .store_config import Manifest, RuleSet
from .config import UploadSettings, ResolverSettings, LoggingSettings
from .result import (
    SkipReason,
    UploadResult,
    CopiedProvider,
    SkippedManifest,
    ResolveResult,
)

__all__ = [
    # Store API models
    "AccessToken",
    "ItemError",
    "ItemResource",

    # Store config models
    "Manifest",
    "RuleSet",

    # Settings
    "UploadSettings",
    "ResolverSettings",
    "LoggingSettings",

    # Result models
    "SkipReason",
    "UploadResult",
    "CopiedProvider",
    "SkippedManifest",
    "ResolveResult",
]
