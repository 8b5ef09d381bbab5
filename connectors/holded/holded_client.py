"""Holded HTTP Client.

Low-level HTTP client for Holded invoicing API calls.
Handles the API key header, status-code error mapping and response parsing.
Each call is a single attempt; there is no retry policy.
"""

from typing import Any, Dict, List, Optional
from dataclasses import dataclass
import json
import logging

import aiohttp

logger = logging.getLogger(__name__)


DEFAULT_BASE_URL = "https://api.holded.com/api/invoicing/v1"


class HoldedApiError(Exception):
    """Base exception for Holded API errors."""
    def __init__(self, message: str, status_code: int = 0, response_body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body


class HoldedAuthenticationError(HoldedApiError):
    """Authentication failed (missing key, 401/403)."""
    pass


class HoldedNotFoundError(HoldedApiError):
    """Resource not found (404)."""
    pass


class HoldedRateLimitError(HoldedApiError):
    """Rate limit exceeded (429)."""
    def __init__(self, message: str, retry_after: Optional[int] = None):
        super().__init__(message, 429)
        self.retry_after = retry_after


class HoldedValidationError(HoldedApiError):
    """Validation error from Holded (400)."""
    pass


@dataclass
class HoldedApiConfig:
    """Configuration for Holded API client."""
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = 30.0

    def get_url(self, endpoint: str) -> str:
        """Get the full URL for an endpoint."""
        return f"{self.base_url.rstrip('/')}/{endpoint.lstrip('/')}"


class HoldedApiClient:
    """HTTP client for the Holded API.

    Usage:
        client = HoldedApiClient(api_key, HoldedApiConfig())
        await client.connect()
        try:
            contacts = await client.list_contacts()
        finally:
            await client.disconnect()

    A pre-built aiohttp session may be passed in; the client then leaves
    its lifecycle to the caller.
    """

    def __init__(
        self,
        api_key: Optional[str],
        api_config: Optional[HoldedApiConfig] = None,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        self.api_key = api_key
        self.api_config = api_config or HoldedApiConfig()
        self._session = session
        self._owns_session = session is None

    @property
    def is_connected(self) -> bool:
        return self._session is not None

    async def connect(self) -> None:
        """Open the HTTP session."""
        if self._session is None:
            self._session = aiohttp.ClientSession()
            self._owns_session = True

    async def disconnect(self) -> None:
        """Close the HTTP session if this client opened it."""
        if self._session is not None and self._owns_session:
            await self._session.close()
        self._session = None

    def _get_headers(self) -> Dict[str, str]:
        """Get headers for API requests."""
        if not self.api_key:
            raise HoldedAuthenticationError("Holded API key is not configured")

        return {
            "key": self.api_key,
            "Accept": "application/json",
        }

    async def _request(self, method: str, endpoint: str) -> Any:
        """Make an authenticated API request.

        Returns:
            Parsed JSON body (None for an empty body)

        Raises:
            HoldedAuthenticationError: Missing key or 401/403
            HoldedNotFoundError: 404
            HoldedRateLimitError: 429
            HoldedValidationError: 400
            HoldedApiError: Other API errors or a non-JSON body
        """
        if self._session is None:
            raise HoldedApiError("Not connected. Call connect() first.")

        headers = self._get_headers()
        url = self.api_config.get_url(endpoint)
        timeout = aiohttp.ClientTimeout(total=self.api_config.timeout_seconds)

        logger.debug(f"{method} {url}")

        async with self._session.request(
            method,
            url,
            headers=headers,
            timeout=timeout,
        ) as response:
            response_text = await response.text()

            if response.status < 400:
                if not response_text:
                    return None
                try:
                    return json.loads(response_text)
                except ValueError as e:
                    raise HoldedApiError(
                        f"Invalid JSON from {url}: {e}",
                        response.status,
                        response_text,
                    ) from e

            if response.status in (401, 403):
                raise HoldedAuthenticationError(
                    f"Authentication failed: {response_text}",
                    response.status,
                    response_text,
                )

            if response.status == 404:
                raise HoldedNotFoundError(
                    f"Resource not found: {url}",
                    response.status,
                    response_text,
                )

            if response.status == 429:
                retry_after = response.headers.get("Retry-After")
                raise HoldedRateLimitError(
                    "Rate limit exceeded",
                    int(retry_after) if retry_after and retry_after.isdigit() else None,
                )

            if response.status == 400:
                raise HoldedValidationError(
                    f"Validation error: {response_text}",
                    response.status,
                    response_text,
                )

            raise HoldedApiError(
                f"API error {response.status}: {response_text}",
                response.status,
                response_text,
            )

    async def list_contacts(self) -> List[Dict[str, Any]]:
        """List contacts (first and only page, no filters).

        Holded answers with a bare JSON array. A `{"data": [...]}` envelope
        is accepted as well.
        """
        body = await self._request("GET", "contacts")

        if isinstance(body, dict) and "data" in body:
            body = body["data"]

        if not isinstance(body, list):
            raise HoldedApiError(
                f"Unexpected contacts response shape: {type(body).__name__}"
            )

        return body
