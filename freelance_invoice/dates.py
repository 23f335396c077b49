"""Billing date derivation.

An invoice is dated on its reference day and bills for a fixed work window
that ends four days before it and starts fifteen days before it. Dates are
treated as local wall-clock dates: naive values are used as given and
timezone-aware values keep their own calendar day.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Any

from dateutil import parser as dateutil_parser

from .errors import InvalidDateError
from .formatting import fmt_date

WORK_END_OFFSET = timedelta(days=4)
WORK_START_OFFSET = timedelta(days=15)


@dataclass(frozen=True)
class WorkDates:
    invoice_date: str
    work_start_date: str
    work_end_date: str


def parse_reference_date(value: Any = None) -> date:
    """Resolve a reference date from a date, datetime, string or ``None`` (now)."""
    if value is None:
        return datetime.now().date()
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise InvalidDateError(f"Unsupported reference date type: {type(value).__name__}")

    raw = value.strip()
    if not raw:
        raise InvalidDateError("Reference date is empty.")
    try:
        return dateutil_parser.parse(raw).date()
    except (ValueError, OverflowError) as exc:
        raise InvalidDateError(f"Invalid reference date: {value!r}") from exc


def derive_dates(reference: Any) -> WorkDates:
    day = parse_reference_date(reference)
    try:
        work_start = day - WORK_START_OFFSET
    except OverflowError as exc:
        raise InvalidDateError(f"Reference date is too early: {day.isoformat()}") from exc
    return WorkDates(
        invoice_date=fmt_date(day),
        work_start_date=fmt_date(work_start),
        work_end_date=fmt_date(day - WORK_END_OFFSET),
    )
