"""Contact fetcher.

Retrieves the remote contact list through an ERP connector and normalizes it
into DisplayContact records:
- records without a non-empty string `id` are dropped
- the remaining records are projected field by field, in remote order
- the `type` field is validated against ContactType

Any failure while fetching or projecting is logged and reported as an empty
result. `get_contacts()` hides the failure completely; `fetch_result()` keeps
it visible on the returned ContactFetchResult.
"""

from typing import Any, Iterable, List, Mapping, Tuple

from connectors.erp_base import ERPConnector
from connectors.holded.holded_models import HoldedContact
from core.observability.logging import get_logger, with_correlation
from models.contacts import ContactFetchResult, ContactType, DisplayContact

logger = get_logger(__name__)


def is_valid_record(record: Any) -> bool:
    """True when the record carries a non-empty string id."""
    if not isinstance(record, Mapping):
        return False
    contact_id = record.get("id")
    return isinstance(contact_id, str) and contact_id != ""


def to_display_contact(record: Mapping[str, Any]) -> DisplayContact:
    """Project one valid remote record onto a DisplayContact."""
    contact = HoldedContact.model_validate(record)
    raw_type = contact.type
    if raw_type is not None and not isinstance(raw_type, str):
        raw_type = str(raw_type)
    return DisplayContact(
        id=contact.id,
        custom_id=contact.customId,
        name=contact.name,
        code=contact.code,
        trade_name=contact.tradeName,
        email=contact.email,
        mobile=contact.mobile,
        phone=contact.phone,
        type=ContactType.parse(contact.type),
        raw_type=raw_type,
    )


def normalize_contacts(records: Iterable[Any]) -> Tuple[List[DisplayContact], int]:
    """Filter and project remote records.

    Returns:
        (contacts in original order, number of records dropped)
    """
    contacts: List[DisplayContact] = []
    dropped = 0
    for record in records:
        if not is_valid_record(record):
            dropped += 1
            continue
        contacts.append(to_display_contact(record))

    unknown = [c.raw_type for c in contacts if c.type is ContactType.UNKNOWN]
    if unknown:
        logger.warning(
            f"{len(unknown)} contact(s) with unrecognized type",
            extra_fields={"types": sorted(set(unknown))},
        )

    return contacts, dropped


class ContactFetcher:
    """Fetches and normalizes contacts through an injected connector.

    Usage:
        connector = create_connector(settings.erp_config())
        contacts = await ContactFetcher(connector).get_contacts()
    """

    def __init__(self, connector: ERPConnector):
        self.connector = connector

    async def fetch_result(self) -> ContactFetchResult:
        """Fetch contacts, reporting a failure instead of raising it."""
        with with_correlation(
            connector=self.connector.get_connector_name(),
            operation="list_contacts",
        ):
            try:
                async with self.connector:
                    records = await self.connector.list_contacts()
                contacts, dropped = normalize_contacts(records)
            except Exception as e:
                logger.exception(f"Error fetching contacts: {e}")
                return ContactFetchResult(contacts=[], error=str(e) or type(e).__name__)

            logger.info(
                "Fetched contacts",
                extra_fields={"contacts": len(contacts), "dropped": dropped},
            )
            return ContactFetchResult(contacts=contacts, dropped=dropped)

    async def get_contacts(self) -> List[DisplayContact]:
        """Fetch contacts; a failure is indistinguishable from zero contacts."""
        result = await self.fetch_result()
        return result.contacts
