"""Date coercion for front matter values."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from dateutil import parser as dateutil_parser

from blogcorpus.core.exceptions import InvalidDateError

# Two fallbacks that differ in year, month and day. Both months have 31 days.
_DEFAULTS = (datetime(2000, 1, 1), datetime(2001, 12, 28))


def coerce_date(value: date | datetime | str | Any) -> date:
    """Convert a front matter value to a calendar date.

    YAML already turns unquoted ``2023-10-26`` into a ``date`` and
    ``2023-10-26 10:00`` into a ``datetime``; quoted values arrive as strings
    and go through ``dateutil``, which must find a year, a month and a day
    in them. Aware datetimes keep their own calendar day.

    Raises:
        InvalidDateError: if the value is empty, ``None`` or not a real date.

    """
    if value is None:
        raise InvalidDateError(value)

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    if not isinstance(value, str):
        raise InvalidDateError(value)

    raw = value.strip()
    if not raw:
        raise InvalidDateError(value)

    try:
        first, second = (dateutil_parser.parse(raw, default=default).date() for default in _DEFAULTS)
    except (TypeError, ValueError, OverflowError) as e:
        raise InvalidDateError(raw, e) from e

    # a part missing from the string was filled in from the fallback
    if first != second:
        raise InvalidDateError(raw)
    return first


__all__ = ["coerce_date"]
