#!/usr/bin/env python
"""Check the Holded connector against the live API.

Fetches the contact list once with the configured key and prints the
normalized contacts, or the failure that an empty dashboard would hide.

Usage:
    export HOLDED_API_KEY="your-api-key"
    python scripts/check_holded_contacts.py

    # Show at most 5 contacts
    python scripts/check_holded_contacts.py --limit 5
"""

import argparse
import asyncio
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from api.services.contacts_table import get_type_color
from connectors import create_connector
from contacts.fetcher import ContactFetcher
from core.settings import load_settings


async def check_contacts(api_key: str, base_url: str, limit: int) -> bool:
    """Fetch contacts once and print the outcome."""
    settings = load_settings()
    settings.holded_api_key = api_key
    settings.holded_base_url = base_url

    connector = create_connector(settings.erp_config())
    result = await ContactFetcher(connector).fetch_result()

    print("=" * 60)
    print(f"Holded contacts ({settings.holded_base_url})")
    print("=" * 60)

    if result.failed:
        print(f"  ✗ Fetch failed: {result.error}")
        return False

    print(f"  ✓ {len(result.contacts)} contacts ({result.dropped} dropped without id)")
    for contact in result.contacts[:limit]:
        color = get_type_color(contact.type).value
        print(f"    - {contact.id}  {contact.name or '-':30}  {contact.raw_type or '-'} ({color})")

    return True


def main():
    parser = argparse.ArgumentParser(description="Check Holded contacts")
    parser.add_argument(
        "--api-key",
        default=os.environ.get("HOLDED_API_KEY"),
        help="Holded API key (default: $HOLDED_API_KEY)"
    )
    parser.add_argument(
        "--base-url",
        default=os.environ.get("HOLDED_BASE_URL", "https://api.holded.com/api/invoicing/v1"),
        help="Holded API root"
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=20,
        help="Maximum number of contacts to print"
    )

    args = parser.parse_args()

    if not args.api_key:
        print("Missing Holded credentials. Set HOLDED_API_KEY or pass --api-key.")
        sys.exit(1)

    success = asyncio.run(check_contacts(args.api_key, args.base_url, args.limit))
    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
