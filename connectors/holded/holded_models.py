"""Holded data models.

These are Holded-specific models that map to the Holded invoicing API schema.
They are separate from the display models in /models/contacts.py.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# =============================================================================
# Holded API Models
# =============================================================================

class HoldedBaseModel(BaseModel):
    """Base model for Holded API entities.

    Holded returns many more fields than the dashboard reads; unknown
    fields are kept rather than rejected.
    """
    model_config = ConfigDict(populate_by_name=True, extra="allow")


class HoldedContact(HoldedBaseModel):
    """Holded Contact entity.

    Maps to: /invoicing/v1/contacts

    Text fields are lax: numbers (e.g. a phone sent as 910000000) become
    strings, other non-text values become None. `type` is kept as received.
    """
    id: Optional[str] = Field(None, alias="id")
    customId: Optional[str] = Field(None, alias="customId")
    name: Optional[str] = Field(None, alias="name")
    code: Optional[str] = Field(None, alias="code")  # NIF/CIF/VAT number
    tradeName: Optional[str] = Field(None, alias="tradeName")
    email: Optional[str] = Field(None, alias="email")
    mobile: Optional[str] = Field(None, alias="mobile")
    phone: Optional[str] = Field(None, alias="phone")
    type: Any = Field(None, alias="type")  # "client", "supplier", "lead", "debtor", "creditor"

    @field_validator(
        "customId", "name", "code", "tradeName", "email", "mobile", "phone",
        mode="before",
    )
    @classmethod
    def _coerce_text(cls, value: Any) -> Optional[str]:
        if value is None or isinstance(value, str):
            return value
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return None
