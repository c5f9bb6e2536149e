# SPDX-License-Identifier: MIT

from typing import Any, Callable, Optional

import pendulum
import pytest

from daybook.model.event import Event, EventColor, EventIcon, ReminderOption
from daybook.repository.event import EventRepository
from daybook.repository.store import FileBlobStore
from daybook.service.calendar import CalendarController
from daybook.service.notification import ReminderScheduler
from daybook.template.event import get_event_template

# Friday
FIXED_NOW = pendulum.datetime(2025, 3, 14, 12, 0, tz="local")


class RecordingNotifier:
    def __init__(self) -> None:
        self.scheduled: dict[str, tuple[str, str, pendulum.DateTime]] = {}
        self.subtitles: dict[str, Optional[str]] = {}
        self.cancelled: list[str] = []

    def schedule(
        self,
        id: str,
        title: str,
        body: str,
        fire_time: pendulum.DateTime,
        subtitle: Optional[str] = None,
    ) -> None:
        self.scheduled[id] = (title, body, fire_time)
        self.subtitles[id] = subtitle

    def cancel(self, ids: list[str]) -> None:
        self.cancelled.extend(ids)
        for id in ids:
            self.scheduled.pop(id, None)


class FailingNotifier:
    def schedule(
        self,
        id: str,
        title: str,
        body: str,
        fire_time: pendulum.DateTime,
        subtitle: Optional[str] = None,
    ) -> None:
        raise RuntimeError("notification permission denied")

    def cancel(self, ids: list[str]) -> None:
        raise RuntimeError("notification permission denied")


class FailingStore:
    def load_blob(self, key: str) -> Optional[bytes]:
        return None

    def save_blob(self, key: str, data: bytes) -> None:
        raise OSError("disk full")


class UnreadableStore:
    def __init__(self) -> None:
        self.saved: dict[str, bytes] = {}

    def load_blob(self, key: str) -> Optional[bytes]:
        raise PermissionError(f"permission denied: {key}")

    def save_blob(self, key: str, data: bytes) -> None:
        self.saved[key] = data


@pytest.fixture
def store(tmp_path) -> FileBlobStore:
    return FileBlobStore(tmp_path / "blobs")


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def repository(store, notifier) -> EventRepository:
    return EventRepository(store, ReminderScheduler(notifier))


@pytest.fixture
def controller(repository) -> CalendarController:
    return CalendarController(repository, clock=lambda: FIXED_NOW)


@pytest.fixture
def make_event() -> Callable[..., Event]:
    def factory(
        title: str = "Standup",
        start: Optional[pendulum.DateTime] = None,
        **overrides: Any,
    ) -> Event:
        event = get_event_template()
        event["title"] = title
        event["start"] = start if start is not None else FIXED_NOW
        event["icon"] = overrides.pop("icon", EventIcon.CALENDAR)
        event["color"] = overrides.pop("color", EventColor.BLUE)
        event["reminder"] = overrides.pop("reminder", ReminderOption.NONE)
        event.update(overrides)  # type: ignore[typeddict-item]
        return event

    return factory
