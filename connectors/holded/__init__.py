"""Holded Connector Package.

Implements the ERPConnector interface for the Holded invoicing API.
"""

from connectors.holded.holded_connector import HoldedConnector
from connectors.holded.holded_client import (
    HoldedApiClient,
    HoldedApiConfig,
    HoldedApiError,
    HoldedAuthenticationError,
    HoldedNotFoundError,
    HoldedRateLimitError,
    HoldedValidationError,
)
from connectors.holded.holded_models import HoldedContact

__all__ = [
    # Connector
    "HoldedConnector",
    # HTTP client
    "HoldedApiClient",
    "HoldedApiConfig",
    # Errors
    "HoldedApiError",
    "HoldedAuthenticationError",
    "HoldedNotFoundError",
    "HoldedRateLimitError",
    "HoldedValidationError",
    # Models
    "HoldedContact",
]
