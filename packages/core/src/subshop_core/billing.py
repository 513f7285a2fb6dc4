"""Subscription period arithmetic."""

from __future__ import annotations

import calendar
from datetime import date

from .enums import Term


def add_months(start: date, months: int) -> date:
    """Shift *start* by whole calendar months, clamping to the month's last day."""
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def subscription_end(start: date, term: Term | str, number_of_terms: int) -> date:
    """Return the date a subscription of *number_of_terms* billing terms ends."""
    return add_months(start, Term(term).months * number_of_terms)
