"""API Routes Package."""

from api.routes import health, contacts

__all__ = [
    "health",
    "contacts",
]
