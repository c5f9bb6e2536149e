# SPDX-License-Identifier: MIT

import re
from typing import Optional, cast

import pendulum
import typer

from daybook.model.event import ReminderOption
from daybook.time import at_local_time, date_from_key, today_local

_TIME_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})$")
_OFFSET_PATTERN = re.compile(r"^-?\d+$")


def parse_time(time_str: Optional[str]) -> Optional[tuple[int, int]]:
    """
    Parse a time string in (H)H:mm format and return a tuple of (hour, minute).

    Raises:
        typer.BadParameter: If the time format is invalid or values are out of range
    """
    if time_str is None:
        return None

    time_match = _TIME_PATTERN.match(time_str)
    if not time_match:
        raise typer.BadParameter(
            f"Time must be in HH:mm format (e.g., 8:00 or 17:30), got '{time_str}'"
        )

    hour = int(time_match.group(1))
    minute = int(time_match.group(2))

    if hour < 0 or hour > 23:
        raise typer.BadParameter(f"Hour must be between 0 and 23, got {hour}")
    if minute < 0 or minute > 59:
        raise typer.BadParameter(f"Minute must be between 0 and 59, got {minute}")

    return (hour, minute)


def parse_date(date_param: Optional[str | int]) -> Optional[pendulum.Date]:
    if date_param is None:
        return None

    date_str = str(date_param).strip()

    if re.match(r"^\d{4}-\d{2}-\d{2}$", date_str):
        date = date_from_key(date_str)
        if date is None:
            raise typer.BadParameter(f"Invalid date: '{date_str}'")
        return date

    # Relative days (e.g., "1", "-1", "365")
    if _OFFSET_PATTERN.match(date_str):
        return today_local().add(days=int(date_str))

    if date_str == "today" or date_str == "t":
        return today_local()
    if date_str == "yesterday" or date_str == "y":
        return today_local().subtract(days=1)
    if date_str == "tomorrow" or date_str == "o":
        return today_local().add(days=1)
    raise typer.BadParameter("Incorrect date format")


def parse_datetime(datetime_param: Optional[str | int]) -> Optional[pendulum.DateTime]:
    if datetime_param is None:
        return None

    datetime = str(datetime_param).strip()

    # YYYY-MM-DD with an optional HH:mm component
    if re.match(r"^\d{4}-\d{2}-\d{2}", datetime):
        try:
            return cast(pendulum.DateTime, pendulum.parse(datetime, tz="local"))
        except ValueError as e:
            raise typer.BadParameter(f"Invalid datetime '{datetime}': {e}")

    # (H)H:mm on today's date
    if _TIME_PATTERN.match(datetime):
        hour, minute = cast(tuple[int, int], parse_time(datetime))
        return at_local_time(today_local(), hour, minute)

    if datetime == "now" or datetime == "n":
        return pendulum.now("local").set(second=0, microsecond=0)

    date = parse_date(datetime)
    if date is None:
        raise typer.BadParameter("Incorrect datetime format")
    return at_local_time(date, 0, 0)


def parse_reminder(minutes: Optional[int]) -> Optional[ReminderOption]:
    if minutes is None:
        return None
    if minutes not in [option.value for option in ReminderOption]:
        valid = ", ".join(str(option.value) for option in ReminderOption)
        raise typer.BadParameter(f"Reminder must be one of {valid} minutes, got {minutes}")
    return ReminderOption(minutes)
