# SPDX-License-Identifier: MIT

from enum import Enum
from typing import Optional, TypedDict

import pendulum

from daybook.model.day import DayView
from daybook.model.event import Event


class ViewMode(str, Enum):
    MONTH = "month"
    WEEK = "week"


class NavigationState(TypedDict):
    anchor: pendulum.Date
    selected: pendulum.Date
    mode: ViewMode


class CalendarViewModel(TypedDict):
    mode: ViewMode
    title: str
    days: list[DayView]
    selected: pendulum.Date
    selected_holiday: Optional[str]
    selected_events: list[Event]
