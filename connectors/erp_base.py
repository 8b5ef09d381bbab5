"""Abstract ERP Connector Interface.

This module defines the abstract interface that all ERP connectors must implement.
It is intentionally ERP-agnostic - no Holded specifics here.

Connectors implement this interface to:
1. Open and close a session with their ERP
2. List the raw contact records the dashboard displays

Key Design Principles:
- The contact fetcher and API routes depend ONLY on this interface
- Connectors are constructed by the caller and passed in, never held globally
- ERP-specific implementations live in connector subfolders
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional


# =============================================================================
# Enums
# =============================================================================

class ERPConnectionStatus(str, Enum):
    """Connection status to ERP system."""
    CONNECTED = "CONNECTED"
    DISCONNECTED = "DISCONNECTED"
    FAILED = "FAILED"


# =============================================================================
# Configuration
# =============================================================================

@dataclass
class ERPConfig:
    """Configuration for an ERP connector.

    Generic configuration that can be extended by specific connectors.
    """
    connector_type: str                     # "holded", ...
    base_url: Optional[str] = None          # ERP API endpoint
    api_key: Optional[str] = None           # Credential, from process configuration
    timeout_seconds: float = 30.0


# =============================================================================
# Abstract Connector Interface
# =============================================================================

class ERPConnector(ABC):
    """Abstract base class for ERP connectors.

    Implementations:
    - connectors/holded/holded_connector.py
    """

    def __init__(self, config: ERPConfig):
        """Initialize connector with configuration."""
        self.config = config
        self._connection_status = ERPConnectionStatus.DISCONNECTED

    # =========================================================================
    # Connection Management
    # =========================================================================

    @abstractmethod
    async def connect(self) -> None:
        """Open the connection to the ERP system."""
        pass

    @abstractmethod
    async def disconnect(self) -> None:
        """Close the connection to the ERP system."""
        pass

    @abstractmethod
    async def test_connection(self) -> bool:
        """Test if the connection is valid and authenticated.

        Returns:
            True if connection is healthy
        """
        pass

    @property
    def connection_status(self) -> ERPConnectionStatus:
        """Get current connection status."""
        return self._connection_status

    # =========================================================================
    # Contacts
    # =========================================================================

    @abstractmethod
    async def list_contacts(self) -> List[Dict[str, Any]]:
        """List contact records exactly as the ERP returns them.

        Single call, no pagination or filter parameters. Records are
        loosely typed; validation is the caller's job.

        Raises:
            Exception: Any connection, authentication or response error
        """
        pass

    # -------------------------------------------------------------------------
    # Utilities
    # -------------------------------------------------------------------------

    def get_connector_name(self) -> str:
        """Get the name of this connector."""
        return self.config.connector_type

    async def __aenter__(self) -> "ERPConnector":
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.disconnect()


# =============================================================================
# Connector Factory
# =============================================================================

_connector_registry: Dict[str, type] = {}


def register_connector(connector_type: str):
    """Decorator to register a connector implementation."""
    def decorator(cls):
        _connector_registry[connector_type] = cls
        return cls
    return decorator


def create_connector(config: ERPConfig) -> ERPConnector:
    """Create a connector instance from configuration.

    Args:
        config: ERPConfig with connector_type specified

    Returns:
        Configured connector instance

    Raises:
        ValueError: If connector_type is not registered
    """
    connector_type = config.connector_type.lower()

    if connector_type not in _connector_registry:
        available = list(_connector_registry.keys())
        raise ValueError(
            f"Unknown connector type: {connector_type}. "
            f"Available: {available}"
        )

    connector_class = _connector_registry[connector_type]
    return connector_class(config)


def list_available_connectors() -> List[str]:
    """List all registered connector types."""
    return list(_connector_registry.keys())
