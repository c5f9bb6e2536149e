# SPDX-License-Identifier: MIT

import pendulum

from daybook.model.day import DayCell
from daybook.time import date_to_key

WEEKDAY_LABELS = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]

# Every month renders with at least five rows
MIN_MONTH_CELLS = 35


def sunday_weekday(date: pendulum.Date) -> int:
    """Weekday index with Sunday = 0 .. Saturday = 6."""
    return date.isoweekday() % 7


def week_start(reference: pendulum.Date) -> pendulum.Date:
    """Return the Sunday that starts the week containing reference."""
    return reference.subtract(days=sunday_weekday(reference))


def week_interval(reference: pendulum.Date) -> tuple[pendulum.Date, pendulum.Date]:
    """Return the (Sunday, Saturday) bounds of the week containing reference."""
    start = week_start(reference)
    return start, start.add(days=6)


def build_month_grid(reference: pendulum.Date) -> list[DayCell]:
    """
    Build the day cells of the month containing reference.

    The grid starts on a Sunday. Leading cells carry the trailing day numbers of
    the previous month, trailing cells the first day numbers of the next month;
    both have no date. The length is always a multiple of 7 and at least 35.

    Args:
        reference: Any date inside the month to lay out

    Returns:
        Ordered list of DayCell, row by row
    """
    month_start = reference.start_of("month")
    first_weekday = sunday_weekday(month_start)
    previous_month_days = month_start.subtract(months=1).days_in_month

    cells: list[DayCell] = []

    # Tail of the previous month
    for index in range(first_weekday):
        cells.append(
            {
                "date": None,
                "day_number": previous_month_days - first_weekday + 1 + index,
                "weekday": index,
                "is_current_month": False,
            }
        )

    for day_offset in range(month_start.days_in_month):
        date = month_start.add(days=day_offset)
        cells.append(
            {
                "date": date,
                "day_number": date.day,
                "weekday": sunday_weekday(date),
                "is_current_month": True,
            }
        )

    # Head of the next month, only as far as the row (or minimum height) needs
    next_day_number = 1
    while len(cells) % 7 != 0 or len(cells) < MIN_MONTH_CELLS:
        cells.append(
            {
                "date": None,
                "day_number": next_day_number,
                "weekday": len(cells) % 7,
                "is_current_month": False,
            }
        )
        next_day_number += 1

    return cells


def build_week_grid(reference: pendulum.Date) -> list[DayCell]:
    """Build the seven day cells of the Sunday-started week containing reference."""
    start = week_start(reference)
    cells: list[DayCell] = []
    for day_offset in range(7):
        date = start.add(days=day_offset)
        cells.append(
            {
                "date": date,
                "day_number": date.day,
                "weekday": day_offset,
                "is_current_month": True,
            }
        )
    return cells


def week_dates(reference: pendulum.Date) -> list[pendulum.Date]:
    return [
        cell["date"] for cell in build_week_grid(reference) if cell["date"] is not None
    ]


def month_title(reference: pendulum.Date) -> str:
    return reference.format("MMMM YYYY")


def week_title(reference: pendulum.Date) -> str:
    start, end = week_interval(reference)
    return f"{date_to_key(start)} ~ {date_to_key(end)}"
