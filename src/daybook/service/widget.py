# SPDX-License-Identifier: MIT

import logging
from typing import Callable, Optional, TypedDict

import pendulum
import yaml
from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from daybook import configuration, time
from daybook.model.event import Event
from daybook.repository.event import deserialize_events
from daybook.repository.store import BlobStore, read_blob
from daybook.service.calendar import sort_events
from daybook.service.deep_link import DEFAULT_SCHEME, date_url
from daybook.service.grid import week_dates

logger = logging.getLogger(__name__)


class WidgetEntry(TypedDict):
    display_date: pendulum.Date
    events: list[Event]
    week_dates: list[pendulum.Date]
    url: str


class WidgetReader:
    """
    Glanceable view over the persisted events.

    Reads the events blob on every call, so it works whether or not the main
    app is running. The only blob it writes is its own display date, which
    previous_day and next_day step through; while that date is unset the
    widget follows today.
    """

    def __init__(
        self,
        store: BlobStore,
        clock: Callable[[], pendulum.DateTime] = time.now_local,
        deep_link_scheme: str = DEFAULT_SCHEME,
        key: str = configuration.EVENTS_BLOB_KEY,
        display_key: str = configuration.WIDGET_DISPLAY_DATE_BLOB_KEY,
    ) -> None:
        self.store = store
        self.clock = clock
        self.deep_link_scheme = deep_link_scheme
        self.key = key
        self.display_key = display_key

    def load_events(self) -> list[Event]:
        return deserialize_events(read_blob(self.store, self.key))

    def events_for_day(self, date: pendulum.Date) -> list[Event]:
        return sort_events(
            [event for event in self.load_events() if time.is_same_day(event["start"], date)]
        )

    def week_dates(self, date: pendulum.Date) -> list[pendulum.Date]:
        return week_dates(date)

    # Display date

    def display_date(self) -> pendulum.Date:
        blob = read_blob(self.store, self.display_key)
        if blob is not None:
            try:
                raw = load(blob.decode("utf-8"), Loader=Loader)
            except (yaml.YAMLError, UnicodeDecodeError):
                raw = None
                logger.warning("widget display date is unreadable, showing today")
            if raw is not None:
                date = time.date_from_key(str(raw))
                if date is not None:
                    return date
                logger.warning("widget display date %r is invalid, showing today", raw)
        return time.local_date(self.clock())

    def set_display_date(self, date: Optional[pendulum.Date]) -> None:
        """Pin the widget to date, or follow today again when date is None."""
        data = b""
        if date is not None:
            data = dump(time.date_to_key(date), Dumper=Dumper).encode("utf-8")
        try:
            self.store.save_blob(self.display_key, data)
        except OSError:
            logger.error("failed to persist the widget display date", exc_info=True)

    def previous_day(self) -> pendulum.Date:
        return self.__step(-1)

    def next_day(self) -> pendulum.Date:
        return self.__step(1)

    def __step(self, days: int) -> pendulum.Date:
        date = self.display_date().add(days=days)
        self.set_display_date(date)
        return date

    def entry(self, display_date: Optional[pendulum.Date] = None) -> WidgetEntry:
        if display_date is None:
            display_date = self.display_date()
        return {
            "display_date": display_date,
            "events": self.events_for_day(display_date),
            "week_dates": self.week_dates(display_date),
            "url": date_url(display_date, self.deep_link_scheme),
        }
