# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Callable, Optional

import pendulum

from daybook import time
from daybook.model.day import DayCell, DayView
from daybook.model.entity_id import EntityId
from daybook.model.event import Event, EventColor, EventIcon, ReminderOption
from daybook.model.navigation import CalendarViewModel, NavigationState, ViewMode
from daybook.repository.event import EventRepository
from daybook.service.deep_link import DEFAULT_SCHEME, parse_date_url
from daybook.service.grid import (
    build_month_grid,
    build_week_grid,
    month_title,
    sunday_weekday,
    week_interval,
    week_start,
    week_title,
)
from daybook.service.holiday import HolidayLookup
from daybook.template.event import get_event_template

logger = logging.getLogger(__name__)


def sort_events(events: list[Event]) -> list[Event]:
    return sorted(events, key=lambda event: event["start"])


class CalendarController:
    """
    Owns the navigation state and joins the date grid with the event store.

    Every navigation or mutation recomputes view_model before returning.
    """

    def __init__(
        self,
        repository: EventRepository,
        holidays: Optional[HolidayLookup] = None,
        clock: Callable[[], pendulum.DateTime] = time.now_local,
        state: Optional[NavigationState] = None,
        start_mode: ViewMode = ViewMode.MONTH,
        deep_link_scheme: str = DEFAULT_SCHEME,
    ) -> None:
        self.repository = repository
        self.holidays = holidays if holidays is not None else HolidayLookup()
        self.clock = clock
        self.deep_link_scheme = deep_link_scheme

        if state is None:
            today = self.today
            state = {"anchor": today, "selected": today, "mode": start_mode}
        self.state: NavigationState = deepcopy(state)
        if not self.is_in_period(self.selected):
            self.state["anchor"] = self.selected
        self.view_model: CalendarViewModel = self.refresh()

    @property
    def today(self) -> pendulum.Date:
        return time.local_date(self.clock())

    @property
    def mode(self) -> ViewMode:
        return self.state["mode"]

    @property
    def anchor(self) -> pendulum.Date:
        return self.state["anchor"]

    @property
    def selected(self) -> pendulum.Date:
        return self.state["selected"]

    @property
    def current_month(self) -> pendulum.Date:
        return self.state["anchor"].start_of("month")

    def period_bounds(self) -> tuple[pendulum.Date, pendulum.Date]:
        if self.mode == ViewMode.WEEK:
            return week_interval(self.anchor)
        return self.current_month, self.current_month.end_of("month")

    def is_in_period(self, date: pendulum.Date) -> bool:
        start, end = self.period_bounds()
        return start <= date <= end

    # Navigation

    def next_period(self) -> None:
        self.__move_period(1)

    def previous_period(self) -> None:
        self.__move_period(-1)

    def __move_period(self, step: int) -> None:
        selected = self.selected

        if self.mode == ViewMode.MONTH:
            new_month = self.current_month.add(months=step)
            self.state["anchor"] = new_month
            if not self.is_in_period(selected):
                # Keep the day of month, clamped to the new month's length
                day = min(selected.day, new_month.days_in_month)
                self.state["selected"] = pendulum.date(
                    new_month.year, new_month.month, day
                )
        else:
            new_week = week_start(self.anchor).add(weeks=step)
            self.state["anchor"] = new_week
            if not self.is_in_period(selected):
                # Keep the weekday
                self.state["selected"] = new_week.add(days=sunday_weekday(selected))

        self.refresh()

    def go_to_today(self) -> None:
        today = self.today
        self.state["anchor"] = today
        self.state["selected"] = today
        self.refresh()

    def select_date(self, date: pendulum.Date) -> None:
        self.state["selected"] = date
        if not self.is_in_period(date):
            self.state["anchor"] = date
        self.refresh()

    def set_view_mode(self, mode: ViewMode) -> None:
        """Switch layout; the period moves to the selection when it would hide it."""
        self.state["mode"] = mode
        if not self.is_in_period(self.selected):
            self.state["anchor"] = self.selected
        self.refresh()

    def open_url(self, url: str) -> bool:
        """Apply a date deep link; returns whether the link named a date."""
        date = parse_date_url(url, self.deep_link_scheme)
        if date is None:
            logger.info("ignoring unrecognized link %s", url)
            return False
        self.select_date(date)
        return True

    # Mutations

    def add_event(
        self,
        title: str,
        start: pendulum.DateTime,
        memo: str = "",
        icon: EventIcon = EventIcon.CALENDAR,
        color: EventColor = EventColor.BLUE,
        notification_enabled: bool = False,
        reminder: ReminderOption = ReminderOption.NONE,
    ) -> Optional[Event]:
        """Create an event; a blank title rejects the creation and returns None."""
        if title.strip() == "":
            logger.info("rejected event with an empty title")
            return None

        event = get_event_template()
        event["title"] = title.strip()
        event["start"] = start
        event["memo"] = memo
        event["icon"] = icon
        event["color"] = color
        event["notification_enabled"] = notification_enabled
        event["reminder"] = reminder

        self.repository.add(event)
        self.refresh()
        return event

    def update_event(self, event: Event) -> bool:
        if event["title"].strip() == "":
            logger.info("rejected update of %s with an empty title", event["id"])
            return False

        event = deepcopy(event)
        event["title"] = event["title"].strip()
        event["updated"] = self.clock()
        updated = self.repository.update(event)
        self.refresh()
        return updated

    def delete_event(self, id: EntityId) -> bool:
        deleted = self.repository.delete(id) > 0
        self.refresh()
        return deleted

    # Queries

    def sorted_events_for_day(self, date: pendulum.Date) -> list[Event]:
        return sort_events(self.repository.events_for_day(date))

    def sorted_events_for_week(self, date: pendulum.Date) -> list[Event]:
        return sort_events(self.repository.events_for_week(date))

    def day_view(self, cell: DayCell) -> DayView:
        date = cell["date"]
        if date is None:
            return {
                "cell": cell,
                "is_today": False,
                "is_selected": False,
                "is_weekend": cell["weekday"] in (0, 6),
                "holiday": None,
                "events": [],
            }
        return {
            "cell": cell,
            "is_today": date == self.today,
            "is_selected": date == self.selected,
            "is_weekend": cell["weekday"] in (0, 6),
            "holiday": self.holidays.lookup(date),
            "events": self.sorted_events_for_day(date),
        }

    def refresh(self) -> CalendarViewModel:
        if self.mode == ViewMode.WEEK:
            cells = build_week_grid(self.anchor)
            title = week_title(self.anchor)
        else:
            cells = build_month_grid(self.anchor)
            title = month_title(self.anchor)

        self.view_model = {
            "mode": self.mode,
            "title": title,
            "days": [self.day_view(cell) for cell in cells],
            "selected": self.selected,
            "selected_holiday": self.holidays.lookup(self.selected),
            "selected_events": self.sorted_events_for_day(self.selected),
        }
        return self.view_model
