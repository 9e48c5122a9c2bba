"""Display formatting for bills"""

import re
from datetime import date
from typing import Optional

from billed.models.enums import BillStatus

# French short month names, as the bills table has always shown them
_MONTHS_FR = (
    "janv.", "févr.", "mars", "avr.", "mai", "juin",
    "juil.", "août", "sept.", "oct.", "nov.", "déc.",
)

_STATUS_LABELS = {
    BillStatus.PENDING.value: "En attente",
    BillStatus.ACCEPTED.value: "Accepté",
    BillStatus.REFUSED.value: "Refused",
}

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def format_date(date_str: str) -> str:
    """
    Turn an ISO date into the table format: day, capitalised three-letter
    month and two-digit year, e.g. "2004-04-04" -> "4 Avr. 04".

    Raises ValueError when date_str is not an ISO calendar date.
    """
    parsed = date.fromisoformat(date_str)
    month = _MONTHS_FR[parsed.month - 1]
    month = month[0].upper() + month[1:]
    return f"{parsed.day} {month[:3]}. {parsed.year % 100:02d}"


def format_status(status: str) -> str:
    """Label shown for a status; raises KeyError for a status we do not know."""
    return _STATUS_LABELS[status]


def parse_leading_int(value: Optional[str]) -> Optional[int]:
    """Integer found at the start of a form value ("100 €" -> 100), else None."""
    if value is None:
        return None
    match = _LEADING_INT.match(value)
    return int(match.group(1)) if match else None


def parse_number(value: Optional[str]) -> Optional[float]:
    if value is None or not value.strip():
        return None
    try:
        return float(value.replace(",", "."))
    except ValueError:
        return None
