"""Contacts table renderer.

Turns an ordered list of DisplayContact into a ContactsTable (one row per
contact, type mapped to a chip color) and renders that table as an HTML page.
No sorting, filtering, pagination or editing.
"""

import html
from typing import Optional, Sequence, Union

from models.api_responses import (
    ContactChip,
    ContactsTable,
    ContactsTableColumn,
    ContactsTableRow,
)
from models.contacts import ChipColor, ContactType, DisplayContact


# =============================================================================
# COLUMNS AND COLORS
# =============================================================================

CONTACT_COLUMNS = [
    ContactsTableColumn(key="name", label="NOMBRE"),
    ContactsTableColumn(key="email", label="EMAIL"),
    ContactsTableColumn(key="phone", label="TELÉFONO"),
    ContactsTableColumn(key="type", label="TIPO"),
    ContactsTableColumn(key="trade_name", label="NOMBRE COMERCIAL"),
    ContactsTableColumn(key="code", label="CÓDIGO"),
    ContactsTableColumn(key="mobile", label="MÓVIL"),
]

TYPE_COLORS = {
    ContactType.CLIENT: ChipColor.SUCCESS,
    ContactType.SUPPLIER: ChipColor.WARNING,
    ContactType.LEAD: ChipColor.PRIMARY,
    ContactType.DEBTOR: ChipColor.DANGER,
    ContactType.CREDITOR: ChipColor.SECONDARY,
}

# CSS for each chip color (flat variant)
CHIP_STYLES = {
    ChipColor.SUCCESS: ("#e8faf0", "#12a150"),
    ChipColor.WARNING: ("#fefce8", "#c4841d"),
    ChipColor.PRIMARY: ("#e6f1fe", "#006fee"),
    ChipColor.DANGER: ("#fee7ef", "#f31260"),
    ChipColor.SECONDARY: ("#f2eafa", "#7828c8"),
    ChipColor.DEFAULT: ("#f4f4f5", "#3f3f46"),
}


def get_type_color(contact_type: Union[ContactType, str, None]) -> ChipColor:
    """Chip color for a contact type; DEFAULT when absent or unrecognized."""
    if contact_type is None:
        return ChipColor.DEFAULT
    if not isinstance(contact_type, ContactType):
        contact_type = ContactType.parse(contact_type)
    return TYPE_COLORS.get(contact_type, ChipColor.DEFAULT)


# =============================================================================
# TABLE
# =============================================================================

def _build_row(contact: DisplayContact) -> ContactsTableRow:
    label = contact.raw_type
    if label is None and contact.type is not None:
        label = contact.type.value
    return ContactsTableRow(
        key=contact.id,
        name=contact.name,
        email=contact.email,
        phone=contact.phone,
        type=contact.type,
        chip=ContactChip(label=label, color=get_type_color(contact.type)),
        trade_name=contact.trade_name,
        code=contact.code,
        mobile=contact.mobile,
    )


def build_contacts_table(contacts: Sequence[DisplayContact]) -> ContactsTable:
    """Build the table: one row per contact, in input order."""
    return ContactsTable(
        columns=list(CONTACT_COLUMNS),
        rows=[_build_row(contact) for contact in contacts],
    )


# =============================================================================
# HTML
# =============================================================================

def _cell(value: Optional[str]) -> str:
    return f"<td>{html.escape(value) if value else ''}</td>"


def _chip_html(chip: ContactChip) -> str:
    label = html.escape(chip.label) if chip.label else ""
    return (
        f"<span class='chip chip-{chip.color.value} chip-{chip.variant}' "
        f"data-color='{chip.color.value}'>{label}</span>"
    )


def _row_html(row: ContactsTableRow) -> str:
    cells = "".join([
        _cell(row.name),
        _cell(row.email),
        _cell(row.phone),
        f"<td>{_chip_html(row.chip)}</td>",
        _cell(row.trade_name),
        _cell(row.code),
        _cell(row.mobile),
    ])
    return f"<tr data-key='{html.escape(row.key, quote=True)}'>{cells}</tr>"


def _chip_css() -> str:
    rules = [
        ".chip{display:inline-block;padding:2px 10px;border-radius:9999px;font-size:12px;}"
    ]
    for color, (background, foreground) in CHIP_STYLES.items():
        rules.append(f".chip-{color.value}{{background:{background};color:{foreground};}}")
    return "\n".join(rules)


def render_contacts_page(table: ContactsTable, title: str = "Contactos") -> str:
    """Render the contacts table as a standalone HTML page."""
    headers = "".join(f"<th>{html.escape(column.label)}</th>" for column in table.columns)
    rows = "".join(_row_html(row) for row in table.rows)
    safe_title = html.escape(title)

    return f"""<!DOCTYPE html>
<html lang="es">
<head>
<meta charset="utf-8">
<title>{safe_title}</title>
<style>
body{{font-family:system-ui,sans-serif;padding:2rem;}}
h1{{font-size:1.5rem;font-weight:700;margin-bottom:1rem;}}
table{{border-collapse:collapse;width:100%;min-height:400px;}}
th,td{{text-align:left;padding:8px 12px;border-bottom:1px solid #e4e4e7;}}
th{{font-size:12px;color:#71717a;}}
{_chip_css()}
</style>
</head>
<body>
<h1>{safe_title}</h1>
<table aria-label="Contacts table">
<thead><tr>{headers}</tr></thead>
<tbody>{rows}</tbody>
</table>
</body>
</html>
"""
