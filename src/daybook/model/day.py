# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from daybook.model.event import Event


class DayCell(TypedDict):
    """
    One grid position of a month or week layout.

    Padding cells outside the displayed month have no date; their day_number
    still carries the adjacent month's day so the grid can be drawn.
    """

    date: Optional[pendulum.Date]
    day_number: int
    weekday: int  # 0 = Sunday .. 6 = Saturday
    is_current_month: bool


class DayView(TypedDict):
    cell: DayCell
    is_today: bool
    is_selected: bool
    is_weekend: bool
    holiday: Optional[str]
    events: list[Event]
