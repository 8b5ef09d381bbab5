"""Holded ERP Connector.

Implements the ERPConnector interface for the Holded invoicing API.
"""

import logging
from typing import Any, Dict, List, Optional

import aiohttp

from connectors.erp_base import (
    ERPConnector,
    ERPConfig,
    ERPConnectionStatus,
    register_connector,
)
from connectors.holded.holded_client import (
    DEFAULT_BASE_URL,
    HoldedApiClient,
    HoldedApiConfig,
)

logger = logging.getLogger(__name__)


@register_connector("holded")
class HoldedConnector(ERPConnector):
    """Holded connector implementation.

    Required configuration:
    - api_key: Holded API key (sent in the `key` header)

    Optional configuration:
    - base_url: API root (default: https://api.holded.com/api/invoicing/v1)
    - timeout_seconds: total request timeout
    """

    def __init__(self, config: ERPConfig, session: Optional[aiohttp.ClientSession] = None):
        super().__init__(config)

        api_config = HoldedApiConfig(
            base_url=config.base_url or DEFAULT_BASE_URL,
            timeout_seconds=config.timeout_seconds,
        )
        self._api_client = HoldedApiClient(config.api_key, api_config, session=session)

    # =========================================================================
    # Connection Management
    # =========================================================================

    async def connect(self) -> None:
        """Open the HTTP session to Holded."""
        try:
            await self._api_client.connect()
        except Exception:
            self._connection_status = ERPConnectionStatus.FAILED
            raise
        self._connection_status = ERPConnectionStatus.CONNECTED

    async def disconnect(self) -> None:
        """Close the HTTP session to Holded."""
        await self._api_client.disconnect()
        self._connection_status = ERPConnectionStatus.DISCONNECTED

    async def test_connection(self) -> bool:
        """Test if the API key is accepted by listing contacts.

        Opens and closes its own session when the connector is not connected.
        """
        opened = not self._api_client.is_connected
        try:
            if opened:
                await self._api_client.connect()
            await self._api_client.list_contacts()
            return True
        except Exception as e:
            logger.warning(f"Holded connection test failed: {e}")
            return False
        finally:
            if opened:
                await self._api_client.disconnect()

    # =========================================================================
    # Contacts
    # =========================================================================

    async def list_contacts(self) -> List[Dict[str, Any]]:
        """List contacts from Holded (single page)."""
        return await self._api_client.list_contacts()
