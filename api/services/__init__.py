"""API Services Package."""

from api.services.contacts_table import (
    CONTACT_COLUMNS,
    TYPE_COLORS,
    get_type_color,
    build_contacts_table,
    render_contacts_page,
)

__all__ = [
    "CONTACT_COLUMNS",
    "TYPE_COLORS",
    "get_type_color",
    "build_contacts_table",
    "render_contacts_page",
]
