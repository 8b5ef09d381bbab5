"""
API Response Models for the Contacts Dashboard.

These Pydantic models define the data contract between the backend and the
page that displays the contacts table. They double as the OpenAPI schema of
the JSON route.

Hierarchy:
- ContactsTableResponse: JSON route payload (table + fetch outcome)
- ContactsTable: columns and rows, in display order
- ContactsTableRow: one row per contact
- ContactChip: colored type chip inside a row
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from models.contacts import ChipColor, ContactType


class ContactsTableColumn(BaseModel):
    """Column of the contacts table."""
    key: str = Field(..., description="DisplayContact field shown in this column")
    label: str = Field(..., description="Header text")


class ContactChip(BaseModel):
    """Colored chip for a contact type."""
    label: Optional[str] = Field(default=None, description="Type text as received")
    color: ChipColor = ChipColor.DEFAULT
    variant: str = "flat"


class ContactsTableRow(BaseModel):
    """One row of the contacts table."""
    key: str = Field(..., description="Row identity, the contact id")
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    type: Optional[ContactType] = None
    chip: ContactChip
    trade_name: Optional[str] = None
    code: Optional[str] = None
    mobile: Optional[str] = None


class ContactsTable(BaseModel):
    """Contacts table, read-only and unsorted."""
    columns: List[ContactsTableColumn]
    rows: List[ContactsTableRow] = Field(default_factory=list)

    @property
    def row_count(self) -> int:
        return len(self.rows)


class ContactsTableResponse(BaseModel):
    """GET /contacts payload."""
    table: ContactsTable
    fetch_failed: bool = Field(
        default=False,
        description="True when the remote fetch failed and the table is empty because of it",
    )
    dropped: int = Field(default=0, description="Remote records discarded for lacking an id")
