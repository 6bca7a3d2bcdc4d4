"""
Half-month billing periods for the debt tracker.

Every month is split into two fixed buckets: day 1-15 and day 16 through the
last day of the month.
"""
from __future__ import annotations
import calendar
from dataclasses import dataclass
from datetime import date
from typing import Tuple

MONTH_ABBREVS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
                 "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

FIRST_HALF_END = 15


@dataclass(frozen=True)
class Period:
    """Display label of a bucket plus the start date of the bucket after it"""
    label: str
    next_period_start: date


def last_day_of_month(year: int, month: int) -> int:
    """Number of days in the given month"""
    return calendar.monthrange(year, month)[1]


def is_first_half(d: date) -> bool:
    return d.day <= FIRST_HALF_END


def period_bounds(d: date) -> Tuple[date, date]:
    """First and last day of the bucket containing d"""
    if is_first_half(d):
        return date(d.year, d.month, 1), date(d.year, d.month, FIRST_HALF_END)
    last = last_day_of_month(d.year, d.month)
    return date(d.year, d.month, FIRST_HALF_END + 1), date(d.year, d.month, last)


def compute_period(reference: date) -> Period:
    """
    Label the bucket containing ``reference`` and find where the next one starts.

    compute_period(date(2024, 1, 7))  -> Period("1-15 Jan", date(2024, 1, 16))
    compute_period(date(2024, 2, 20)) -> Period("16-29 Feb", date(2024, 3, 1))
    """
    month_name = MONTH_ABBREVS[reference.month - 1]
    if is_first_half(reference):
        label = f"1-{FIRST_HALF_END} {month_name}"
        next_start = date(reference.year, reference.month, FIRST_HALF_END + 1)
    else:
        last = last_day_of_month(reference.year, reference.month)
        label = f"{FIRST_HALF_END + 1}-{last} {month_name}"
        if reference.month == 12:
            next_start = date(reference.year + 1, 1, 1)
        else:
            next_start = date(reference.year, reference.month + 1, 1)
    return Period(label=label, next_period_start=next_start)


def initial_period_start(today: date) -> date:
    """Start of the bucket that contains today (used to seed a new ledger)"""
    return period_bounds(today)[0]
