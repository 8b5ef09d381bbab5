"""
Contact display models.

These Pydantic models are the local, UI-ready shape of a remote contact.
They are built fresh on every page load and never persisted.

Hierarchy:
- ContactType: categorical relationship type (drives chip color)
- ChipColor: chip colors the table renderer can emit
- DisplayContact: one normalized contact
- ContactFetchResult: fetch outcome (contacts + failure marker)
"""

from __future__ import annotations

from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# ENUMS
# =============================================================================

class ContactType(str, Enum):
    """Business relationship type of a contact."""
    CLIENT = "client"
    SUPPLIER = "supplier"
    LEAD = "lead"
    DEBTOR = "debtor"
    CREDITOR = "creditor"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: Any) -> Optional["ContactType"]:
        """Map a raw remote value onto the enumeration.

        None or empty stays None (absent). Any unrecognized value becomes
        UNKNOWN, including the literal string "unknown".
        """
        if value is None or value == "":
            return None
        if not isinstance(value, str):
            return cls.UNKNOWN
        for member in cls:
            if member is not cls.UNKNOWN and member.value == value:
                return member
        return cls.UNKNOWN


class ChipColor(str, Enum):
    """Chip colors used by the contacts table."""
    SUCCESS = "success"        # green
    WARNING = "warning"        # yellow
    PRIMARY = "primary"        # blue
    DANGER = "danger"          # red
    SECONDARY = "secondary"    # purple
    DEFAULT = "default"        # neutral


# =============================================================================
# CONTACTS
# =============================================================================

class DisplayContact(BaseModel):
    """Locally normalized contact, ready for the table renderer.

    Field names follow Python conventions; the remote camelCase names are
    accepted on input and used on output (by_alias).
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str = Field(..., min_length=1, description="Remote contact identifier")
    custom_id: Optional[str] = Field(default=None, alias="customId")
    name: Optional[str] = None
    code: Optional[str] = Field(default=None, description="Tax/fiscal code")
    trade_name: Optional[str] = Field(default=None, alias="tradeName")
    email: Optional[str] = None
    mobile: Optional[str] = None
    phone: Optional[str] = None
    type: Optional[ContactType] = None
    raw_type: Optional[str] = Field(
        default=None,
        alias="rawType",
        description="Type string exactly as received from the remote API",
    )


class ContactFetchResult(BaseModel):
    """Outcome of one contact fetch.

    `error` is set when the fetch failed; `contacts` is then empty.
    """
    contacts: List[DisplayContact] = Field(default_factory=list)
    error: Optional[str] = None
    dropped: int = Field(default=0, description="Records discarded for lacking an id")

    @property
    def failed(self) -> bool:
        return self.error is not None
