"""Date-string parsing and display formatting.

The core never sees raw strings; the shell parses user input here and
hands plain ``datetime`` values down.
"""

from __future__ import annotations

from datetime import date, datetime

from life_calc.exceptions import InvalidDateError

ISO_DATE_FORMAT = "%Y-%m-%d"
_FORMAT_HINT = "Use the YYYY-MM-DD format, e.g. 1990-05-17."


def parse_date_boundary(text: str) -> datetime:
    """Parse ``YYYY-MM-DD`` into a naive local-midnight datetime.

    Raises
    ------
    InvalidDateError
        If *text* is empty or not a valid calendar date.
    """
    stripped = text.strip()
    if not stripped:
        raise InvalidDateError("Date must not be empty.", hint=_FORMAT_HINT)
    try:
        return datetime.strptime(stripped, ISO_DATE_FORMAT)
    except ValueError as exc:
        raise InvalidDateError(
            f"Invalid date: {stripped}",
            hint=_FORMAT_HINT,
        ) from exc


def is_valid_date_string(text: str) -> bool:
    try:
        parse_date_boundary(text)
    except InvalidDateError:
        return False
    return True


def format_display_date(value: date | datetime) -> str:
    """Render *value* using the host locale's date representation."""
    return value.strftime("%x")
