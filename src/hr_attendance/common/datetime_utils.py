from __future__ import annotations

import calendar
from datetime import date, datetime

from ..core.constants import DATE_FORMAT, MONTH_FORMAT


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, DATE_FORMAT).date()


def format_iso_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def month_bounds(month: str) -> tuple[date, date]:
    """Return the first and last day of a YYYY-MM month."""
    first = datetime.strptime(month, MONTH_FORMAT).date()
    last_day = calendar.monthrange(first.year, first.month)[1]
    return first, first.replace(day=last_day)


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch it.
    """
    return date.today()
