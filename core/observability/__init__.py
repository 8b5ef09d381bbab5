"""
Observability Module for the Contacts Dashboard

Provides:
- Structured logging with correlation IDs
"""

from core.observability.logging import (
    configure_logging,
    get_logger,
    get_correlation_context,
    CorrelationContext,
    with_correlation,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "get_correlation_context",
    "CorrelationContext",
    "with_correlation",
]
