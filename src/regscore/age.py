"""Regulation age relative to a fixed reference date."""

from __future__ import annotations

from datetime import date, datetime

from .exceptions import DateParseError

DATE_FORMAT = "%Y-%m-%d"


def parse_date(value: str | date, reg_id: str | None = None) -> date:
    """Parse a cleaned ``YYYY-MM-DD`` date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.strptime(str(value).strip(), DATE_FORMAT).date()
    except ValueError as exc:
        raise DateParseError(
            f"Cannot parse date {value!r}", reg_id=reg_id, field="LastAmendedDate"
        ) from exc


def age_days(last_amended: str | date, reference_date: str | date, reg_id: str | None = None) -> int:
    """Days elapsed between the last amendment and the reference date."""
    amended = parse_date(last_amended, reg_id)
    reference = parse_date(reference_date)
    return (reference - amended).days
