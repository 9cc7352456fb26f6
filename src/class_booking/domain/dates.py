"""Calendar date parsing for the YYYY-MM-DD wire format."""

import re
from datetime import date

_ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}")


def parse_iso_date(value: str) -> date | None:
    """Parse a strict YYYY-MM-DD string, returning None when it is invalid."""
    if not _ISO_DATE.fullmatch(value):
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None


def format_iso_date(value: date) -> str:
    """Format a date as YYYY-MM-DD."""
    return value.isoformat()
