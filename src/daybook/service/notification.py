# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Any, Callable, Optional, Protocol, TypedDict

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
from daybook.model.event import Event, ReminderOption
from daybook.repository.store import BlobStore, read_blob

logger = logging.getLogger(__name__)

ON_TIME_TITLE = "Event reminder"
REMINDER_SUFFIX = "_reminder"


class Notifier(Protocol):
    def schedule(
        self,
        id: str,
        title: str,
        body: str,
        fire_time: pendulum.DateTime,
        subtitle: Optional[str] = None,
    ) -> None: ...

    def cancel(self, ids: list[str]) -> None: ...


def reminder_id(event_id: EntityId) -> str:
    return f"{event_id}{REMINDER_SUFFIX}"


def notification_ids(event_id: EntityId) -> list[str]:
    """Both notification ids that may be scheduled for an event."""
    return [event_id, reminder_id(event_id)]


class ReminderScheduler:
    """
    Turns events into notifier requests.

    The notifier is best effort: anything it raises is logged and dropped so
    the mutation that triggered the request always completes.
    """

    def __init__(self, notifier: Notifier) -> None:
        self.notifier = notifier

    def schedule_event(self, event: Event) -> None:
        if not event["notification_enabled"]:
            return

        subtitle = event["memo"] if event["memo"] != "" else None

        self.__schedule(
            event["id"], ON_TIME_TITLE, event["title"], event["start"], subtitle
        )

        if event["reminder"] != ReminderOption.NONE:
            self.__schedule(
                reminder_id(event["id"]),
                f"Reminder: {event['reminder'].label}",
                event["title"],
                event["start"].subtract(minutes=event["reminder"].value),
                subtitle,
            )

    def cancel_event(self, event_id: EntityId) -> None:
        try:
            self.notifier.cancel(notification_ids(event_id))
        except Exception:
            logger.warning("failed to cancel notifications for %s", event_id, exc_info=True)

    def __schedule(
        self,
        id: str,
        title: str,
        body: str,
        fire_time: pendulum.DateTime,
        subtitle: Optional[str],
    ) -> None:
        try:
            self.notifier.schedule(id, title, body, fire_time, subtitle)
        except Exception:
            logger.warning("failed to schedule notification %s", id, exc_info=True)


class PendingReminder(TypedDict):
    id: str
    title: str
    body: str
    subtitle: Optional[str]
    fire_time: pendulum.DateTime


class StoredNotifier:
    """
    Notifier that keeps pending reminders in a blob of the store.

    Requests whose fire time is not in the future are dropped, a request with
    an id that is already pending replaces it.
    """

    def __init__(
        self,
        store: BlobStore,
        clock: Callable[[], pendulum.DateTime] = time.now_local,
        key: str = configuration.REMINDERS_BLOB_KEY,
    ) -> None:
        self.store = store
        self.clock = clock
        self.key = key
        self._reminders: Optional[list[PendingReminder]] = None

    @property
    def reminders(self) -> list[PendingReminder]:
        if self._reminders is None:
            self.__load_data()
        if self._reminders is None:
            raise ValueError()
        return self._reminders

    def __load_data(self) -> None:
        self._reminders = []
        blob = read_blob(self.store, self.key)
        if blob is None:
            return
        try:
            raw_reminders = load(blob.decode("utf-8"), Loader=Loader) or []
            for raw in raw_reminders:
                subtitle = raw.get("subtitle")
                self._reminders.append(
                    {
                        "id": str(raw["id"]),
                        "title": str(raw["title"]),
                        "body": str(raw["body"]),
                        "subtitle": str(subtitle) if subtitle is not None else None,
                        "fire_time": time.datetime_from_str(raw["fire_time"]),
                    }
                )
        except (
            yaml.YAMLError,
            UnicodeDecodeError,
            AttributeError,
            KeyError,
            TypeError,
            ValueError,
        ):
            logger.warning("pending reminders blob is unreadable, starting empty")
            self._reminders = []
            return

        # Fired reminders are dropped, the blob is rewritten on the next change
        now = self.clock()
        self._reminders = [r for r in self._reminders if r["fire_time"] > now]

    def __save_data(self) -> None:
        serializable: list[dict[str, Any]] = [
            {
                "id": reminder["id"],
                "title": reminder["title"],
                "body": reminder["body"],
                "subtitle": reminder["subtitle"],
                "fire_time": time.datetime_to_iso_str(reminder["fire_time"]),
            }
            for reminder in self.reminders
        ]
        self.store.save_blob(
            self.key, dump(serializable, Dumper=Dumper, allow_unicode=True).encode("utf-8")
        )

    def schedule(
        self,
        id: str,
        title: str,
        body: str,
        fire_time: pendulum.DateTime,
        subtitle: Optional[str] = None,
    ) -> None:
        if fire_time <= self.clock():
            logger.debug("skipping notification %s, fire time has passed", id)
            return

        self._reminders = [r for r in self.reminders if r["id"] != id]
        self._reminders.append(
            {
                "id": id,
                "title": title,
                "body": body,
                "subtitle": subtitle,
                "fire_time": fire_time,
            }
        )
        self.__save_data()

    def cancel(self, ids: list[str]) -> None:
        remaining = [r for r in self.reminders if r["id"] not in ids]
        if len(remaining) == len(self.reminders):
            return
        self._reminders = remaining
        self.__save_data()

    def pending(self) -> list[PendingReminder]:
        """Reminders still waiting to fire, earliest first."""
        now = self.clock()
        return sorted(
            deepcopy([r for r in self.reminders if r["fire_time"] > now]),
            key=lambda r: r["fire_time"],
        )
