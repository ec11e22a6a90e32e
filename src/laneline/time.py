# SPDX-License-Identifier: MIT

import datetime
from typing import Any

import pendulum


def now_in(tz: str) -> pendulum.DateTime:
    return pendulum.now(tz)


def start_of_day(date: pendulum.Date | datetime.date, tz: str) -> pendulum.DateTime:
    return pendulum.datetime(date.year, date.month, date.day, tz=tz)


def parse_calendar_date(value: Any, tz: str) -> pendulum.DateTime:
    """
    Parse a calendar date from a data store value into midnight in `tz`.

    Accepts 'YYYY-MM-DD' strings (a time component is truncated to the day)
    as well as the `datetime.date` / `datetime.datetime` values PyYAML produces
    for unquoted dates.

    Raises:
        ValueError: If the value is not a recognizable calendar date
    """
    if isinstance(value, datetime.datetime):
        return start_of_day(pendulum.instance(value, tz=tz).in_tz(tz), tz)
    if isinstance(value, datetime.date):
        return start_of_day(value, tz)
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Not a calendar date: {value!r}")

    parsed = pendulum.parse(value.strip(), tz=tz)
    if isinstance(parsed, pendulum.DateTime):
        return start_of_day(parsed, tz)
    if isinstance(parsed, pendulum.Date):
        return start_of_day(parsed, tz)
    raise ValueError(f"Not a calendar date: {value!r}")


def parse_calendar_date_str(value: str) -> pendulum.Date:
    """Parse a 'YYYY-MM-DD' string into a pendulum.Date."""
    parsed = pendulum.parse(value, exact=True)
    if isinstance(parsed, pendulum.DateTime):
        return parsed.date()
    if isinstance(parsed, pendulum.Date):
        return parsed
    raise ValueError(f"Not a calendar date: {value!r}")


def span_percent(
    instant: pendulum.DateTime, start: pendulum.DateTime, end: pendulum.DateTime
) -> float:
    """Position of `instant` within [start, end) as a percentage of the span."""
    return (instant - start).total_seconds() / (end - start).total_seconds() * 100


def date_to_display_str(datetime: pendulum.DateTime) -> str:
    return datetime.format("YYYY-MM-DD")
