"""Publisher API for upload and publish operations"""

import logging
from typing import Optional

import httpx

from ..constants import DEFAULT_HTTP_TIMEOUT, REFRESH_TOKEN_URI, ROOT_URI
from ..models import UploadResult, UploadSettings
from ..services.publish_service import PublishService
from ..services.store_client import StoreClient
from ..services.token_service import TokenService


class Publisher:
    """Publisher class wiring the store services to one HTTP client"""

    def __init__(self,
                 http_client: Optional[httpx.Client] = None,
                 root_uri: str = ROOT_URI,
                 token_uri: str = REFRESH_TOKEN_URI,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize publisher

        Args:
            http_client: HTTP client; a new one is created and owned when omitted
            root_uri: Chrome Web Store API root
            token_uri: OAuth2 token endpoint
            logger: Logger passed to every service
        """
        self._owns_client = http_client is None
        self.http_client = http_client or httpx.Client(timeout=DEFAULT_HTTP_TIMEOUT)
        self.logger = logger or logging.getLogger(__name__)

        self.token_service = TokenService(self.http_client, token_uri, self.logger)
        self.store_client = StoreClient(self.http_client, root_uri, self.logger)
        self.publish_service = PublishService(
            self.token_service,
            self.store_client,
            self.logger
        )

    def upload(self, settings: UploadSettings) -> UploadResult:
        """
        Validate, upload and optionally publish an archive

        Args:
            settings: Validated upload settings

        Returns:
            UploadResult: Upload outcome

        Raises:
            CwsPublishError: If any step fails
        """
        return self.publish_service.run(settings)

    def close(self) -> None:
        """Close the HTTP client if this publisher created it"""
        if self._owns_client:
            self.http_client.close()

    def __enter__(self) -> 'Publisher':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


def upload(settings: UploadSettings, **kwargs) -> UploadResult:
    """
    Convenience function for uploading an archive

    Args:
        settings: Validated upload settings
        **kwargs: Arguments for Publisher

    Returns:
        UploadResult: Upload outcome
    """
    with Publisher(**kwargs) as publisher:
        return publisher.upload(settings)
