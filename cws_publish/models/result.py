"""Operation result models"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional

from .item import ItemResource


class SkipReason(Enum):
    """Why a manifest produced no provider"""
    EMPTY_MANIFEST = "Rulesets and providers are empty"
    NO_DESKTOP_RULESET = "No desktop ruleset declared"
    NO_PROVIDER_NAME = "No provider for desktop"
    PROVIDER_NOT_DECLARED = "Provider is referenced but not declared"


@dataclass
class UploadResult:
    """Result of the upload workflow"""

    extension_id: str
    zip_path: Path
    content_type: str
    upload: ItemResource
    publish: Optional[ItemResource] = None
    publish_target: Optional[str] = None
    duration: float = 0.0

    @property
    def published(self) -> bool:
        return self.publish is not None


@dataclass
class CopiedProvider:
    """A provider script copied to the destination directory"""

    provider_name: str
    manifest_path: Path
    source: Path
    destination: Path
    size: int = 0


@dataclass
class SkippedManifest:
    """A manifest that resolved to nothing"""

    manifest_path: Path
    reason: SkipReason


@dataclass
class ResolveResult:
    """Result of resolving a store config tree"""

    src_dir: Path
    dest_dir: Path
    manifests: List[Path] = field(default_factory=list)
    copied: List[CopiedProvider] = field(default_factory=list)
    skipped: List[SkippedManifest] = field(default_factory=list)
    duration: float = 0.0

    @property
    def copied_names(self) -> List[str]:
        return [c.provider_name for c in self.copied]
