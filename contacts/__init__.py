"""Contacts - fetch and normalize remote contacts for display."""

from contacts.fetcher import (
    ContactFetcher,
    is_valid_record,
    normalize_contacts,
    to_display_contact,
)

__all__ = [
    "ContactFetcher",
    "is_valid_record",
    "normalize_contacts",
    "to_display_contact",
]
