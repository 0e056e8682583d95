"""
Date formatting for display.
"""
from datetime import date, datetime
from typing import Union

from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime

MONTH_ABBREVIATIONS = ['Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun',
                       'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec']


def _to_calendar_date(value: Union[date, datetime, str]) -> date:
    if isinstance(value, str):
        parsed = parse_datetime(value.strip()) or parse_date(value.strip())
        if parsed is None:
            raise ValueError(f"Invalid date: {value!r}")
        value = parsed

    if isinstance(value, datetime):
        if timezone.is_aware(value):
            value = timezone.localtime(value)
        return value.date()

    if isinstance(value, date):
        return value

    raise TypeError(f"Expected a date, datetime or ISO string, got {type(value).__name__}")


def format_date_uk(value: Union[date, datetime, str]) -> str:
    """
    Format a date in UK style: ``D MMM YYYY`` (e.g. ``20 Oct 2023``).

    Aware datetimes are shown in the project's local time zone; naive values
    and plain dates are taken as already local.
    """
    day = _to_calendar_date(value)
    return f"{day.day} {MONTH_ABBREVIATIONS[day.month - 1]} {day.year}"
