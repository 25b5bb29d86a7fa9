# cws_publish/services/store_config_service.py
"""Store config resolver: manifest → ruleset → provider script"""

import json
import logging
import time
from pathlib import Path
from typing import List, Optional, Union

import yaml

from ..api.exceptions import (
    DecodeError,
    DirectoryNotFoundError,
    FileIOError,
    NoManifestsFoundError,
)
from ..constants import MANIFEST_GLOB, PROVIDER_FILE_PATTERN
from ..models import (
    CopiedProvider,
    Manifest,
    ResolveResult,
    RuleSet,
    SkippedManifest,
    SkipReason,
)
from ..utils.file_utils import copy_file_contents, is_directory

Outcome = Union[CopiedProvider, SkippedManifest]


class StoreConfigService:
    """Copies the desktop provider of every store config into one folder"""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def resolve(self, src_dir: Path, dest_dir: Path) -> ResolveResult:
        """
        Resolve every manifest under src_dir and copy providers to dest_dir

        Args:
            src_dir: Directory holding one store config per subdirectory
            dest_dir: Directory receiving {provider}.js files

        Returns:
            ResolveResult: Copied providers and skipped manifests

        Raises:
            DirectoryNotFoundError: If either directory is missing
            NoManifestsFoundError: If src_dir has no */manifest.json
            FileIOError: If a required file cannot be read or a provider cannot be copied
            DecodeError: If a manifest or its ruleset is malformed
        """
        start_time = time.time()
        src_dir = Path(src_dir)
        dest_dir = Path(dest_dir)

        if not is_directory(src_dir):
            raise DirectoryNotFoundError(str(src_dir), "Source")
        if not is_directory(dest_dir):
            raise DirectoryNotFoundError(str(dest_dir), "Destination")

        manifests = self.find_manifests(src_dir)
        if not manifests:
            raise NoManifestsFoundError(str(src_dir))

        result = ResolveResult(src_dir=src_dir, dest_dir=dest_dir, manifests=manifests)
        for manifest_path in manifests:
            outcome = self.resolve_one(manifest_path, dest_dir)
            if isinstance(outcome, CopiedProvider):
                result.copied.append(outcome)
            else:
                result.skipped.append(outcome)

        self.logger.debug("Completed to copy store providers")
        result.duration = time.time() - start_time
        return result

    def find_manifests(self, src_dir: Path) -> List[Path]:
        """List manifest files one level below src_dir, sorted"""
        return sorted(p for p in src_dir.glob(MANIFEST_GLOB) if p.is_file())

    def resolve_one(self, manifest_path: Path, dest_dir: Path) -> Outcome:
        """
        Resolve a single manifest

        Any missing link in the manifest → ruleset → provider chain is a
        skip, not an error.

        Args:
            manifest_path: Path to manifest.json
            dest_dir: Directory receiving the provider

        Returns:
            CopiedProvider if a provider was copied, otherwise SkippedManifest
        """
        self.logger.debug(f"Get file, try to get provider information: {manifest_path}")
        dir_path = manifest_path.parent

        manifest = self.load_manifest(manifest_path)
        if manifest.is_empty:
            return self._skip(manifest_path, SkipReason.EMPTY_MANIFEST)

        ruleset_file = manifest.desktop_ruleset()
        if not ruleset_file:
            return self._skip(manifest_path, SkipReason.NO_DESKTOP_RULESET)

        ruleset = self.load_ruleset(dir_path / ruleset_file, manifest_path)
        if not ruleset.provider_name:
            return self._skip(manifest_path, SkipReason.NO_PROVIDER_NAME)

        provider_file = manifest.providers.get(ruleset.provider_name)
        if provider_file is None:
            return self._skip(manifest_path, SkipReason.PROVIDER_NOT_DECLARED)

        source = dir_path / provider_file
        destination = dest_dir / PROVIDER_FILE_PATTERN.format(provider=ruleset.provider_name)
        try:
            size = copy_file_contents(source, destination)
        except OSError as e:
            raise FileIOError(f"copy {source} -> {destination}: {e}") from e

        self.logger.info(f"Copied provider {ruleset.provider_name}: {source} -> {destination}")
        return CopiedProvider(
            provider_name=ruleset.provider_name,
            manifest_path=manifest_path,
            source=source,
            destination=destination,
            size=size
        )

    def load_manifest(self, manifest_path: Path) -> Manifest:
        """
        Read and parse a manifest file

        Raises:
            FileIOError: If the file cannot be read
            DecodeError: If the file is not a valid manifest
        """
        try:
            with open(manifest_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            return Manifest.from_dict(data)
        except OSError as e:
            raise FileIOError(f"read manifest {manifest_path}: {e}") from e
        except ValueError as e:
            raise DecodeError(f"parse manifest {manifest_path}: {e}") from e

    def load_ruleset(self, ruleset_path: Path, manifest_path: Path) -> RuleSet:
        """
        Read and parse a ruleset file referenced by a manifest

        Raises:
            FileIOError: If the file cannot be read
            DecodeError: If the file is not a YAML mapping
        """
        try:
            with open(ruleset_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
            return RuleSet.from_dict(data)
        except OSError as e:
            raise FileIOError(
                f"read ruleset {ruleset_path} (from {manifest_path}): {e}"
            ) from e
        except (yaml.YAMLError, ValueError) as e:
            raise DecodeError(
                f"parse ruleset {ruleset_path} (from {manifest_path}): {e}"
            ) from e

    def _skip(self, manifest_path: Path, reason: SkipReason) -> SkippedManifest:
        self.logger.debug(f"{reason.value}, skip it: {manifest_path}")
        return SkippedManifest(manifest_path=manifest_path, reason=reason)
