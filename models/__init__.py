"""Models Package.

Data models for the contacts dashboard including:
- Contact display models (normalized contacts, types, chip colors)
- API response models for the contacts table
"""

from models.contacts import (
    ContactType,
    ChipColor,
    DisplayContact,
    ContactFetchResult,
)

from models.api_responses import (
    ContactChip,
    ContactsTableColumn,
    ContactsTableRow,
    ContactsTable,
    ContactsTableResponse,
)

__all__ = [
    # Contacts
    "ContactType",
    "ChipColor",
    "DisplayContact",
    "ContactFetchResult",
    # API responses
    "ContactChip",
    "ContactsTableColumn",
    "ContactsTableRow",
    "ContactsTable",
    "ContactsTableResponse",
]
