# cws_publish/services/token_service.py
"""OAuth2 token refresh service"""

import logging
from typing import Optional

import httpx

from ..api.exceptions import TokenError
from ..constants import REFRESH_TOKEN_URI
from ..models import AccessToken


class TokenService:
    """Exchanges a refresh token for a short-lived access token"""

    def __init__(self,
                 http_client: httpx.Client,
                 token_uri: str = REFRESH_TOKEN_URI,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize token service

        Args:
            http_client: HTTP client used for the token request
            token_uri: OAuth2 token endpoint
            logger: Logger to report progress on
        """
        self.http_client = http_client
        self.token_uri = token_uri
        self.logger = logger or logging.getLogger(__name__)

    def refresh(self, client_id: str, client_secret: str, refresh_token: str) -> AccessToken:
        """
        Perform a refresh-token grant

        Args:
            client_id: OAuth2 client ID
            client_secret: OAuth2 client secret
            refresh_token: Long-lived refresh token

        Returns:
            AccessToken: Fresh access token

        Raises:
            TokenError: On transport failure, non-200 status or bad body
        """
        self.logger.debug("Going to refresh token")
        data = {
            "client_id": client_id,
            "client_secret": client_secret,
            "refresh_token": refresh_token,
            "grant_type": "refresh_token",
        }

        try:
            response = self.http_client.post(self.token_uri, data=data)
        except httpx.HTTPError as e:
            raise TokenError(f"refresh: request failed: {e}") from e

        try:
            if response.status_code != 200:
                raise TokenError(
                    f"refresh: failed to refresh token, status code {response.status_code}"
                )

            try:
                payload = response.json()
            except ValueError as e:
                raise TokenError(f"refresh: invalid token response: {e}") from e
        finally:
            response.close()

        if not isinstance(payload, dict):
            raise TokenError("refresh: token response is not a JSON object")

        token = AccessToken.from_dict(payload)
        self.logger.debug(f"Access token refreshed (type: {token.type})")
        return token
