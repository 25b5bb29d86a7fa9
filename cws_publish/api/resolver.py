"""Resolver API for building store provider folders"""

import logging
from typing import Optional

from ..models import ResolverSettings, ResolveResult
from ..services.store_config_service import StoreConfigService


def build_store_configs(settings: ResolverSettings,
                        logger: Optional[logging.Logger] = None) -> ResolveResult:
    """
    Copy the desktop provider of each store config into the destination

    Args:
        settings: Validated resolver settings
        logger: Logger for progress messages

    Returns:
        ResolveResult: Copied providers and skipped manifests

    Raises:
        CwsPublishError: If resolution fails
    """
    service = StoreConfigService(logger)
    return service.resolve(settings.src_dir, settings.dest_dir)
