# SPDX-License-Identifier: MIT

import pendulum

from daybook.model.event import EventColor, EventIcon, ReminderOption
from daybook.repository.event import (
    EventRepository,
    deserialize_events,
    serialize_events,
)
from daybook.service.calendar import sort_events
from daybook.service.notification import ReminderScheduler

from conftest import FIXED_NOW, FailingNotifier, FailingStore, UnreadableStore


def at(day: int, hour: int, minute: int = 0) -> pendulum.DateTime:
    return pendulum.datetime(2025, 3, day, hour, minute, tz="local")


def test_add_persists_event(store, repository, make_event):
    event = make_event("Dentist", at(14, 9))

    assert repository.add(event) == event["id"]

    reloaded = EventRepository(store)
    assert [e["title"] for e in reloaded.get_all_events()] == ["Dentist"]
    assert reloaded.get_event(event["id"])["start"] == at(14, 9)


def test_events_for_day_only_returns_that_day(repository, make_event):
    repository.add(make_event("Yesterday", at(13, 23, 59)))
    repository.add(make_event("Morning", at(14, 0, 0)))
    repository.add(make_event("Evening", at(14, 23, 59)))
    repository.add(make_event("Tomorrow", at(15, 0, 0)))

    titles = [e["title"] for e in repository.events_for_day(pendulum.date(2025, 3, 14))]

    assert sorted(titles) == ["Evening", "Morning"]


def test_same_day_events_sort_by_start(repository, make_event):
    repository.add(make_event("Nine", at(14, 9)))
    repository.add(make_event("Two", at(14, 14)))
    repository.add(make_event("Eight", at(14, 8)))

    events = repository.events_for_day(pendulum.date(2025, 3, 14))

    assert len(events) == 3
    assert [e["title"] for e in sort_events(events)] == ["Eight", "Nine", "Two"]


def test_events_for_week_is_sunday_to_saturday(repository, make_event):
    repository.add(make_event("Previous Saturday", at(8, 12)))
    repository.add(make_event("Sunday", at(9, 0)))
    repository.add(make_event("Saturday", at(15, 23, 30)))
    repository.add(make_event("Next Sunday", at(16, 0)))

    titles = [e["title"] for e in repository.events_for_week(pendulum.date(2025, 3, 12))]

    assert sorted(titles) == ["Saturday", "Sunday"]


def test_update_replaces_event(store, repository, make_event):
    event = make_event("Draft", at(14, 9))
    repository.add(event)

    event["title"] = "Final"
    event["start"] = at(20, 10)

    assert repository.update(event)
    assert repository.events_for_day(pendulum.date(2025, 3, 14)) == []
    assert EventRepository(store).get_event(event["id"])["title"] == "Final"


def test_update_unknown_id_is_a_no_op(repository, notifier, make_event):
    repository.add(make_event("Kept", at(14, 9)))
    before = repository.get_all_events()

    assert not repository.update(make_event("Ghost", at(14, 10)))
    assert repository.get_all_events() == before
    assert notifier.cancelled == []


def test_delete_removes_event_and_cancels_notifications(repository, notifier, make_event):
    event = make_event(
        "Call",
        at(14, 15),
        notification_enabled=True,
        reminder=ReminderOption.FIVE_MINUTES,
    )
    repository.add(event)

    assert repository.delete(event["id"]) == 1
    assert repository.get_event(event["id"]) is None
    assert repository.events_for_day(pendulum.date(2025, 3, 14)) == []
    assert event["id"] in notifier.cancelled
    assert f"{event['id']}_reminder" in notifier.cancelled
    assert notifier.scheduled == {}


def test_delete_unknown_id_is_a_no_op(repository, make_event):
    repository.add(make_event("Kept", at(14, 9)))

    assert repository.delete("does-not-exist") == 0
    assert len(repository.get_all_events()) == 1


def test_returned_events_are_copies(repository, make_event):
    event = make_event("Original", at(14, 9))
    repository.add(event)

    repository.get_all_events()[0]["title"] = "Changed"
    event["title"] = "Changed too"

    assert repository.get_event(event["id"])["title"] == "Original"


def test_find_by_id_prefix(repository, make_event):
    event = make_event("Prefixed", at(14, 9), id="abc123")
    repository.add(event)
    repository.add(make_event("Other", at(14, 9), id="xyz789"))

    assert [e["title"] for e in repository.find_by_id_prefix("abc")] == ["Prefixed"]
    assert repository.find_by_id_prefix("nope") == []


def test_schedules_on_time_and_lead_time_notifications(repository, notifier, make_event):
    event = make_event(
        "Flight",
        at(20, 8),
        notification_enabled=True,
        reminder=ReminderOption.TEN_MINUTES,
    )
    repository.add(event)

    assert notifier.scheduled[event["id"]] == ("Event reminder", "Flight", at(20, 8))
    title, body, fire_time = notifier.scheduled[f"{event['id']}_reminder"]
    assert title == "Reminder: 10 minutes before"
    assert body == "Flight"
    assert fire_time == at(20, 7, 50)


def test_no_lead_time_notification_without_reminder(repository, notifier, make_event):
    event = make_event("Lunch", at(20, 12), notification_enabled=True)
    repository.add(event)

    assert list(notifier.scheduled) == [event["id"]]


def test_disabled_notifications_schedule_nothing(repository, notifier, make_event):
    repository.add(
        make_event("Quiet", at(20, 12), reminder=ReminderOption.THIRTY_MINUTES)
    )

    assert notifier.scheduled == {}


def test_update_reschedules_notifications(repository, notifier, make_event):
    event = make_event(
        "Meeting",
        at(20, 10),
        notification_enabled=True,
        reminder=ReminderOption.FIVE_MINUTES,
    )
    repository.add(event)

    event["start"] = at(21, 11)
    event["reminder"] = ReminderOption.NONE
    repository.update(event)

    assert notifier.cancelled == [event["id"], f"{event['id']}_reminder"]
    assert notifier.scheduled == {event["id"]: ("Event reminder", "Meeting", at(21, 11))}


def test_notifier_failure_does_not_block_mutations(store, make_event):
    repository = EventRepository(store, ReminderScheduler(FailingNotifier()))
    event = make_event("Resilient", at(20, 10), notification_enabled=True)

    repository.add(event)
    event["title"] = "Still resilient"
    assert repository.update(event)
    assert EventRepository(store).get_event(event["id"])["title"] == "Still resilient"
    assert repository.delete(event["id"]) == 1


def test_store_failure_keeps_in_memory_state(make_event):
    repository = EventRepository(FailingStore())
    event = make_event("Unsaved", at(14, 9))

    repository.add(event)

    assert repository.get_event(event["id"])["title"] == "Unsaved"


def test_missing_blob_loads_empty(store):
    assert EventRepository(store).get_all_events() == []


def test_corrupt_blob_loads_empty(store):
    store.save_blob("events", b"\xff\xfe\x00garbage")
    assert EventRepository(store).get_all_events() == []

    store.save_blob("events", b"just a string")
    assert EventRepository(store).get_all_events() == []

    store.save_blob("events", b"- {title: no id}\n")
    assert EventRepository(store).get_all_events() == []


def test_serialization_keeps_every_color_icon_and_empty_memo(make_event):
    colors = list(EventColor)
    events = [
        make_event(
            f"Event {index}",
            FIXED_NOW.add(hours=index),
            icon=icon,
            color=colors[index % len(colors)],
            memo="" if index % 2 == 0 else "멀티바이트 memo: [not markup]",
            notification_enabled=index % 3 == 0,
            reminder=list(ReminderOption)[index % len(ReminderOption)],
        )
        for index, icon in enumerate(EventIcon)
    ]

    decoded = deserialize_events(serialize_events(events))

    assert decoded == events
    assert {e["color"] for e in decoded} == set(EventColor)
    assert {e["icon"] for e in decoded} == set(EventIcon)


def test_deserialization_tolerates_missing_optional_fields():
    decoded = deserialize_events(
        b"- id: legacy\n  title: Old event\n  start: '2025-03-14T09:00:00+00:00'\n"
        b"  color: mauve\n"
    )

    assert len(decoded) == 1
    event = decoded[0]
    assert event["memo"] == ""
    assert event["icon"] == EventIcon.CALENDAR
    assert event["color"] == EventColor.BLUE
    assert event["reminder"] == ReminderOption.NONE
    assert event["notification_enabled"] is False
    assert event["created"] == event["start"]


def test_unreadable_store_loads_empty(make_event):
    store = UnreadableStore()
    repository = EventRepository(store)

    assert repository.events_for_day(pendulum.date(2025, 3, 14)) == []
    assert repository.get_event("missing") is None

    event = make_event("Written anyway", at(14, 9))
    repository.add(event)
    assert [e["title"] for e in repository.get_all_events()] == ["Written anyway"]
    assert "events" in store.saved


def test_memo_is_sent_as_notification_subtitle(repository, notifier, make_event):
    with_memo = make_event(
        "Dentist",
        at(20, 9),
        memo="bring the insurance card",
        notification_enabled=True,
        reminder=ReminderOption.FIVE_MINUTES,
    )
    without_memo = make_event("Gym", at(20, 18), notification_enabled=True)
    repository.add(with_memo)
    repository.add(without_memo)

    assert notifier.subtitles[with_memo["id"]] == "bring the insurance card"
    assert notifier.subtitles[f"{with_memo['id']}_reminder"] == "bring the insurance card"
    assert notifier.subtitles[without_memo["id"]] is None
