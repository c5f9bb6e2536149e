# SPDX-License-Identifier: MIT

import pendulum

from daybook.service.holiday import HolidayLookup


def test_fixed_holiday():
    assert HolidayLookup().lookup(pendulum.date(2025, 1, 1)) == "New Year's Day"


def test_dated_lunar_holiday():
    assert HolidayLookup().lookup(pendulum.date(2025, 1, 29)) == "Lunar New Year"


def test_no_holiday():
    holidays = HolidayLookup()

    assert holidays.lookup(pendulum.date(2025, 1, 2)) is None
    assert not holidays.is_holiday(pendulum.date(2025, 1, 2))


def test_dated_entry_wins_over_fixed_entry():
    holidays = HolidayLookup(
        fixed={"01-29": "Fixed holiday"},
        dated={"2025-01-29": "Dated holiday"},
    )

    assert holidays.lookup(pendulum.date(2025, 1, 29)) == "Dated holiday"
    assert holidays.lookup(pendulum.date(2024, 1, 29)) == "Fixed holiday"


def test_years_outside_the_table_only_have_fixed_holidays():
    holidays = HolidayLookup()

    assert holidays.covered_years == [2024, 2025, 2026, 2027]
    assert holidays.lookup(pendulum.date(2030, 1, 1)) == "New Year's Day"
    assert holidays.lookup(pendulum.date(2030, 2, 2)) is None
