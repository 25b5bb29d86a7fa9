# cws_publish/services/__init__.py
"""Business logic services for cws-publish"""

from .config_service import ConfigService
from .token_service import TokenService
from .store_client import StoreClient
from .publish_service import PublishService
from .store_config_service import StoreConfigService

__all__ = [
    "ConfigService",
    "TokenService",
    "StoreClient",
    "PublishService",
    "StoreConfigService",
]
