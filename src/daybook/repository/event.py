# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Any, Optional

import pendulum
import yaml
from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from daybook import configuration, time
from daybook.model.entity_id import EntityId
from daybook.model.event import Event, EventColor, EventIcon, ReminderOption
from daybook.repository.store import BlobStore, read_blob
from daybook.service.grid import week_interval
from daybook.service.notification import ReminderScheduler

logger = logging.getLogger(__name__)


def convert_event_for_serialization(event: Event) -> dict[str, Any]:
    return {
        "id": event["id"],
        "title": event["title"],
        "start": time.datetime_to_iso_str(event["start"]),
        "memo": event["memo"],
        "icon": event["icon"].value,
        "color": event["color"].value,
        "notification_enabled": event["notification_enabled"],
        "reminder": event["reminder"].value,
        "created": time.datetime_to_iso_str(event["created"]),
        "updated": time.datetime_to_iso_str(event["updated"]),
    }


def convert_event_for_deserialization(raw_event: dict[str, Any]) -> Event:
    start = time.datetime_from_str(raw_event["start"])
    created = raw_event.get("created")
    updated = raw_event.get("updated")
    return {
        "id": str(raw_event["id"]),
        "title": str(raw_event["title"]),
        "start": start,
        "memo": raw_event.get("memo") or "",
        "icon": EventIcon.from_name(raw_event.get("icon")),
        "color": EventColor.from_name(raw_event.get("color")),
        "notification_enabled": bool(raw_event.get("notification_enabled", False)),
        "reminder": ReminderOption.from_minutes(raw_event.get("reminder")),
        "created": time.datetime_from_str(created) if created else start,
        "updated": time.datetime_from_str(updated) if updated else start,
    }


def serialize_events(events: list[Event]) -> bytes:
    serializable_events = [convert_event_for_serialization(event) for event in events]
    return dump(serializable_events, Dumper=Dumper, allow_unicode=True).encode("utf-8")


def deserialize_events(blob: Optional[bytes]) -> list[Event]:
    """
    Decode a persisted event collection.

    A missing or unreadable blob decodes to an empty collection, the loss is
    logged but never raised.
    """
    if blob is None:
        return []
    try:
        raw_events = load(blob.decode("utf-8"), Loader=Loader)
        if raw_events is None:
            return []
        if not isinstance(raw_events, list):
            raise TypeError(f"expected a list of events, got {type(raw_events)}")
        return [convert_event_for_deserialization(raw) for raw in raw_events]
    except (
        yaml.YAMLError,
        UnicodeDecodeError,
        AttributeError,
        KeyError,
        TypeError,
        ValueError,
    ):
        logger.warning("event blob is unreadable, starting with no events", exc_info=True)
        return []


class EventRepository:
    def __init__(
        self,
        store: BlobStore,
        scheduler: Optional[ReminderScheduler] = None,
        key: str = configuration.EVENTS_BLOB_KEY,
    ) -> None:
        self.store = store
        self.scheduler = scheduler
        self.key = key
        self._events: Optional[list[Event]] = None

    @property
    def events(self) -> list[Event]:
        if self._events is None:
            self.__load_data()
        if self._events is None:
            raise ValueError()
        return self._events

    def __load_data(self) -> None:
        self._events = deserialize_events(read_blob(self.store, self.key))

    def __save_data(self) -> None:
        try:
            self.store.save_blob(self.key, serialize_events(self.events))
        except OSError:
            logger.error("failed to persist %d events", len(self.events), exc_info=True)

    def add(self, event: Event) -> EntityId:
        self.events.append(deepcopy(event))
        self.__save_data()

        if self.scheduler is not None:
            self.scheduler.schedule_event(event)

        return event["id"]

    def update(self, event: Event) -> bool:
        """Replace the stored event with the same id; unknown ids are ignored."""
        index = next(
            (i for i, stored in enumerate(self.events) if stored["id"] == event["id"]),
            None,
        )
        if index is None:
            logger.debug("update ignored, no event with id %s", event["id"])
            return False

        if self.scheduler is not None:
            self.scheduler.cancel_event(event["id"])

        self.events[index] = deepcopy(event)
        self.__save_data()

        if self.scheduler is not None:
            self.scheduler.schedule_event(event)

        return True

    def delete(self, id: EntityId) -> int:
        """Remove every event with the id and return how many were removed."""
        remaining = [event for event in self.events if event["id"] != id]
        deleted_count = len(self.events) - len(remaining)

        if self.scheduler is not None:
            self.scheduler.cancel_event(id)

        if deleted_count == 0:
            logger.debug("delete ignored, no event with id %s", id)
            return 0

        self._events = remaining
        self.__save_data()
        return deleted_count

    def get_all_events(self) -> list[Event]:
        return deepcopy(self.events)

    def get_event(self, id: EntityId) -> Optional[Event]:
        matching_events = [event for event in self.events if event["id"] == id]
        if len(matching_events) == 0:
            return None
        return deepcopy(matching_events[0])

    def find_by_id_prefix(self, prefix: str) -> list[Event]:
        return deepcopy([event for event in self.events if event["id"].startswith(prefix)])

    def events_for_day(self, date: pendulum.Date) -> list[Event]:
        """Events starting on the local calendar day of date, in storage order."""
        return deepcopy(
            [event for event in self.events if time.is_same_day(event["start"], date)]
        )

    def events_for_week(self, date: pendulum.Date) -> list[Event]:
        """Events starting in the Sunday-started week containing date."""
        start, end = week_interval(date)
        return deepcopy(
            [
                event
                for event in self.events
                if start <= time.local_date(event["start"]) <= end
            ]
        )
