"""Contacts endpoints.

The page route renders the contacts table as HTML; the JSON route returns the
same table together with the fetch outcome.
"""

from uuid import uuid4

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from api.services.contacts_table import build_contacts_table, render_contacts_page
from connectors.erp_base import ERPConnector, create_connector
from contacts.fetcher import ContactFetcher
from core.observability.logging import with_correlation
from core.settings import Settings, load_settings
from models.api_responses import ContactsTableResponse


router = APIRouter()


def get_settings(request: Request) -> Settings:
    """Settings loaded at startup, or from the environment when absent."""
    settings = getattr(request.app.state, "settings", None)
    if settings is None:
        settings = load_settings()
        request.app.state.settings = settings
    return settings


def get_connector(settings: Settings = Depends(get_settings)) -> ERPConnector:
    """A fresh connector per request."""
    return create_connector(settings.erp_config())


@router.get("/", response_class=HTMLResponse)
async def contacts_page(
    request: Request,
    connector: ERPConnector = Depends(get_connector),
) -> HTMLResponse:
    """Contacts page. A failed fetch renders an empty table."""
    with with_correlation(request_id=uuid4().hex, path=request.url.path):
        contacts = await ContactFetcher(connector).get_contacts()
        table = build_contacts_table(contacts)
    return HTMLResponse(render_contacts_page(table))


@router.get("/contacts", response_model=ContactsTableResponse)
async def contacts_table(
    request: Request,
    connector: ERPConnector = Depends(get_connector),
) -> ContactsTableResponse:
    """Contacts table as JSON, with `fetch_failed` set when the fetch failed."""
    with with_correlation(request_id=uuid4().hex, path=request.url.path):
        result = await ContactFetcher(connector).fetch_result()
        table = build_contacts_table(result.contacts)
    return ContactsTableResponse(
        table=table,
        fetch_failed=result.failed,
        dropped=result.dropped,
    )
