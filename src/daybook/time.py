# SPDX-License-Identifier: MIT

import re
from typing import Optional, cast

import pendulum

_DATE_KEY_PATTERN = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")


def now_local() -> pendulum.DateTime:
    return pendulum.now("local")


def today_local() -> pendulum.Date:
    return now_local().date()


def local_date(datetime: pendulum.DateTime) -> pendulum.Date:
    """Calendar date of a timestamp in local time."""
    return datetime.in_tz("local").date()


def is_same_day(datetime: pendulum.DateTime, date: pendulum.Date) -> bool:
    return local_date(datetime) == date


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    return cast(pendulum.DateTime, pendulum.parse(datetime))


def datetime_to_display_local_datetime_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format("YYYY-MM-DD ddd HH:mm")


def datetime_to_display_local_time_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format("HH:mm")


def date_to_key(date: pendulum.Date) -> str:
    """Format a date as 'YYYY-MM-DD'."""
    return f"{date.year:04d}-{date.month:02d}-{date.day:02d}"


def date_from_key(date_str: str) -> Optional[pendulum.Date]:
    """Parse a 'YYYY-MM-DD' string, returning None for anything else."""
    match = _DATE_KEY_PATTERN.match(date_str)
    if match is None:
        return None
    year, month, day = (int(group) for group in match.groups())
    try:
        return pendulum.date(year, month, day)
    except ValueError:
        return None


def at_local_time(date: pendulum.Date, hour: int, minute: int) -> pendulum.DateTime:
    return pendulum.datetime(date.year, date.month, date.day, hour, minute, tz="local")
