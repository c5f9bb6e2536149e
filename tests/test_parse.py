# SPDX-License-Identifier: MIT

import pendulum
import pytest
import typer

from daybook.model.event import ReminderOption
from daybook.terminal.parse import (
    parse_date,
    parse_datetime,
    parse_reminder,
    parse_time,
)
from daybook.time import today_local


def test_parse_time():
    assert parse_time("8:05") == (8, 5)
    assert parse_time("17:30") == (17, 30)
    assert parse_time(None) is None
    with pytest.raises(typer.BadParameter):
        parse_time("24:00")
    with pytest.raises(typer.BadParameter):
        parse_time("noon")


def test_parse_date():
    assert parse_date("2025-01-29") == pendulum.date(2025, 1, 29)
    assert parse_date("0") == today_local()
    assert parse_date("-1") == today_local().subtract(days=1)
    assert parse_date("tomorrow") == today_local().add(days=1)
    assert parse_date(None) is None


@pytest.mark.parametrize("value", ["2025-02-30", "someday", "01/29/2025"])
def test_parse_date_rejects_invalid_input(value):
    with pytest.raises(typer.BadParameter):
        parse_date(value)


def test_parse_datetime():
    parsed = parse_datetime("2025-03-14 09:30")

    assert (parsed.year, parsed.month, parsed.day) == (2025, 3, 14)
    assert (parsed.hour, parsed.minute) == (9, 30)
    assert parsed.utcoffset() == pendulum.datetime(2025, 3, 14, 9, 30, tz="local").utcoffset()

    midnight = parse_datetime("2025-03-14")
    assert (midnight.hour, midnight.minute) == (0, 0)

    on_today = parse_datetime("7:45")
    assert on_today.date() == today_local()
    assert (on_today.hour, on_today.minute) == (7, 45)

    tomorrow = parse_datetime("o")
    assert tomorrow.date() == today_local().add(days=1)
    assert (tomorrow.hour, tomorrow.minute) == (0, 0)


def test_parse_datetime_rejects_invalid_input():
    with pytest.raises(typer.BadParameter):
        parse_datetime("2025-02-30 10:00")
    with pytest.raises(typer.BadParameter):
        parse_datetime("whenever")


def test_parse_reminder():
    assert parse_reminder(None) is None
    assert parse_reminder(0) == ReminderOption.NONE
    assert parse_reminder(30) == ReminderOption.THIRTY_MINUTES
    with pytest.raises(typer.BadParameter):
        parse_reminder(15)
