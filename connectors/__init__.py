"""ERP Connectors - Pluggable ERP system integrations.

This package contains the abstract ERP interface and concrete implementations
for specific ERP systems.

This package handles:
- ERP-specific authentication
- API communication
- Raw record retrieval (normalization happens in contacts/)

To add a new ERP:
1. Create a new folder (e.g., odoo/)
2. Implement ERPConnector interface
3. Register using @register_connector decorator
"""

from connectors.erp_base import (
    ERPConnector,
    ERPConfig,
    ERPConnectionStatus,
    create_connector,
    register_connector,
    list_available_connectors,
)

# Importing the implementations registers them
from connectors import holded  # noqa: F401

__all__ = [
    "ERPConnector",
    "ERPConfig",
    "ERPConnectionStatus",
    "create_connector",
    "register_connector",
    "list_available_connectors",
]
