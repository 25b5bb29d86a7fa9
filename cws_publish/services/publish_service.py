# cws_publish/services/publish_service.py
"""Upload and publish workflow for the Chrome Web Store"""

import logging
import time
from pathlib import Path
from typing import BinaryIO, Optional

from ..api.exceptions import (
    CwsPublishError,
    FileIOError,
    InvalidFileTypeError,
    InvalidPublishTargetError,
    PublishError,
    UploadError,
)
from ..constants import (
    ALLOWED_FILE_TYPES,
    PUBLISH_PATH_PATTERN,
    PUBLISH_TARGETS,
    UPLOAD_FIELD_NAME,
    UPLOAD_PART_CONTENT_TYPE,
    UPLOAD_PATH_PATTERN,
)
from ..models import AccessToken, ItemResource, UploadResult, UploadSettings
from ..utils.file_utils import sniff_file
from .store_client import StoreClient
from .token_service import TokenService


class PublishService:
    """Store publisher: validate archive, upload, optionally publish"""

    def __init__(self,
                 token_service: TokenService,
                 store_client: StoreClient,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize publish service

        Args:
            token_service: Token service for access tokens
            store_client: Client for store API requests
            logger: Logger to report progress on
        """
        self.token_service = token_service
        self.store_client = store_client
        self.logger = logger or logging.getLogger(__name__)

    def run(self, settings: UploadSettings) -> UploadResult:
        """
        Run the upload workflow

        The archive must pass validation before it is uploaded, and the
        upload must succeed before publish is attempted. Any failure aborts
        the remaining steps.

        Args:
            settings: Validated upload settings

        Returns:
            UploadResult: Upload (and publish) outcome

        Raises:
            CwsPublishError: If any step fails
        """
        start_time = time.time()
        zip_path = Path(settings.zip_path)

        self.logger.debug("Validate zip file should matched with allowed mime type")
        try:
            handle = open(zip_path, 'rb')
        except OSError as e:
            raise FileIOError(f"open {zip_path}: {e}") from e

        with handle:
            content_type = self.validate_archive(handle)
            token = self._fetch_token(settings)

            self.logger.info(f"Uploading {zip_path.name} to item {settings.extension_id}")
            upload_item = self.upload(handle, settings.extension_id, token)

        result = UploadResult(
            extension_id=settings.extension_id,
            zip_path=zip_path,
            content_type=content_type,
            upload=upload_item
        )

        if settings.publish:
            self.logger.info(f"Publishing item {settings.extension_id} to {settings.target}")
            result.publish = self.publish(settings.extension_id, settings.target, token)
            result.publish_target = settings.target

        result.duration = time.time() - start_time
        return result

    def validate_archive(self, handle: BinaryIO) -> str:
        """
        Check that an open file sniffs as an allowed archive type

        Leaves the read position at the start of the file.

        Args:
            handle: Archive opened in binary mode

        Returns:
            Detected content type

        Raises:
            InvalidFileTypeError: If the content type is not allowed
            FileIOError: If the file cannot be read
        """
        try:
            content_type = sniff_file(handle)
        except OSError as e:
            raise FileIOError(f"validate_archive: {e}") from e

        self.logger.debug(f"Got file with type: {content_type}")
        if content_type not in ALLOWED_FILE_TYPES:
            raise InvalidFileTypeError(content_type)
        return content_type

    def upload(self, handle: BinaryIO, extension_id: str, token: AccessToken) -> ItemResource:
        """
        Upload the archive as a new package of an item

        Args:
            handle: Archive opened in binary mode
            extension_id: Store item ID
            token: Access token

        Returns:
            ItemResource: Item state after upload

        Raises:
            UploadError: If the request fails or the response is invalid
            FileIOError: If the archive cannot be read
        """
        try:
            content = handle.read()
        except OSError as e:
            raise FileIOError(f"upload: read archive: {e}") from e

        filename = Path(getattr(handle, 'name', 'extension.zip')).name
        files = {UPLOAD_FIELD_NAME: (filename, content, UPLOAD_PART_CONTENT_TYPE)}
        url = self.store_client.url(UPLOAD_PATH_PATTERN.format(extension_id=extension_id))

        try:
            return self.store_client.execute('PUT', url, token, files=files)
        except CwsPublishError as e:
            raise UploadError(f"upload: {e}") from e

    def publish(self, extension_id: str, target: str, token: AccessToken) -> ItemResource:
        """
        Publish the current package of an item

        Args:
            extension_id: Store item ID
            target: Publish target (default or trustedTesters)
            token: Access token

        Returns:
            ItemResource: Item state after publish

        Raises:
            InvalidPublishTargetError: If target is not supported
            PublishError: If the request fails or the response is invalid
        """
        if target not in PUBLISH_TARGETS:
            raise InvalidPublishTargetError(target)

        url = self.store_client.url(PUBLISH_PATH_PATTERN.format(extension_id=extension_id))

        try:
            return self.store_client.execute(
                'POST', url, token,
                params={'publishTarget': target},
                content=b''
            )
        except CwsPublishError as e:
            raise PublishError(f"publish: {e}") from e

    def _fetch_token(self, settings: UploadSettings) -> AccessToken:
        return self.token_service.refresh(
            settings.client_id,
            settings.client_secret,
            settings.refresh_token
        )
