# cws_publish/services/store_client.py
"""Authenticated Chrome Web Store request executor"""

import logging
from typing import Optional, Any

import httpx

from ..api.exceptions import HTTPError, DecodeError
from ..constants import ROOT_URI
from ..models import AccessToken, ItemResource

# Longest response body excerpt kept in error messages
MAX_ERROR_BODY = 200


class StoreClient:
    """Issues authorized requests and decodes item resources"""

    def __init__(self,
                 http_client: httpx.Client,
                 root_uri: str = ROOT_URI,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize store client

        Args:
            http_client: HTTP client used for all requests
            root_uri: API root, without trailing slash
            logger: Logger to report responses on
        """
        self.http_client = http_client
        self.root_uri = root_uri.rstrip('/')
        self.logger = logger or logging.getLogger(__name__)

    def url(self, path: str) -> str:
        """Build an absolute URL for an API path"""
        return f"{self.root_uri}{path}"

    def execute(self,
                method: str,
                url: str,
                token: AccessToken,
                **kwargs: Any) -> ItemResource:
        """
        Send an authorized request and decode the item resource

        Args:
            method: HTTP method
            url: Absolute request URL
            token: Access token for the Authorization header
            **kwargs: Extra arguments for httpx.Client.request

        Returns:
            ItemResource: Decoded response body

        Raises:
            HTTPError: On transport failure or non-200 status
            DecodeError: If the body is not an item resource
        """
        headers = dict(kwargs.pop('headers', None) or {})
        headers['Authorization'] = token.authorization

        try:
            response = self.http_client.request(method, url, headers=headers, **kwargs)
        except httpx.HTTPError as e:
            raise HTTPError(f"{method} {url}: request failed: {e}") from e

        try:
            if response.status_code != 200:
                raise HTTPError(
                    f"Failed to request. Status code: {response.status_code} "
                    f"({response.text[:MAX_ERROR_BODY]})",
                    status_code=response.status_code
                )

            try:
                payload = response.json()
                if not isinstance(payload, dict):
                    raise ValueError("response is not a JSON object")
                item = ItemResource.from_dict(payload)
            except ValueError as e:
                raise DecodeError(f"Invalid item resource: {e}") from e
        finally:
            response.close()

        fields = ", ".join(f"{k}={v}" for k, v in item.log_fields().items())
        self.logger.debug(f"Request completed: {fields}")
        for index, error in enumerate(item.item_errors):
            self.logger.warning(f"Item error {index}: [{error.code}] {error.detail}")

        return item
