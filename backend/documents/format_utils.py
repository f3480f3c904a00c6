"""Consistent formatting for tenancy agreement fields. Never render None."""
from __future__ import annotations

from datetime import date, datetime
from typing import Any

from models import Address, Person, is_blank

NOT_APPLICABLE = "N/A"
NEWLINE = "\n"


def format_date(d: Any) -> str:
    """Long UK date, e.g. 01 March 2024. Missing dates render as ""."""
    if d is None:
        return ""
    if isinstance(d, date):
        return d.strftime("%d %B %Y")
    text = str(d).strip()
    if not text:
        return ""
    for fmt in ("%Y-%m-%d", "%d/%m/%Y", "%d.%m.%Y"):
        try:
            return datetime.strptime(text[:10], fmt).date().strftime("%d %B %Y")
        except ValueError:
            continue
    return text


def na_for_empty(value: str | None) -> str:
    return NOT_APPLICABLE if is_blank(value) else value


def address_multiple_lines(address: Address | None) -> str:
    if address is None:
        return ""
    return NEWLINE.join(p for p in address.parts() if not is_blank(p))


def numbered_value(value: str | None, index: int) -> str:
    return f"({index}) {value or ''}"


def name_and_address(person: Person, index: int) -> str:
    return (
        f"Name ({index}): {person.name}{NEWLINE}"
        f"Address ({index}):{NEWLINE}{address_multiple_lines(person.address)}{NEWLINE}"
    )
