# SPDX-License-Identifier: MIT

import pendulum

from daybook.service.notification import (
    StoredNotifier,
    notification_ids,
    reminder_id,
)

from conftest import FIXED_NOW, UnreadableStore


def fixed_clock() -> pendulum.DateTime:
    return FIXED_NOW


def test_notification_ids():
    assert reminder_id("abc") == "abc_reminder"
    assert notification_ids("abc") == ["abc", "abc_reminder"]


def test_stored_notifier_keeps_future_requests(store):
    notifier = StoredNotifier(store, clock=fixed_clock)

    notifier.schedule("late", "Event reminder", "Late", FIXED_NOW.add(hours=2))
    notifier.schedule("early", "Event reminder", "Early", FIXED_NOW.add(minutes=5))

    assert [r["id"] for r in notifier.pending()] == ["early", "late"]
    reloaded = StoredNotifier(store, clock=fixed_clock)
    assert [r["body"] for r in reloaded.pending()] == ["Early", "Late"]
    assert reloaded.pending()[0]["fire_time"] == FIXED_NOW.add(minutes=5)


def test_stored_notifier_drops_past_requests(store):
    notifier = StoredNotifier(store, clock=fixed_clock)

    notifier.schedule("past", "Event reminder", "Past", FIXED_NOW.subtract(minutes=1))
    notifier.schedule("now", "Event reminder", "Now", FIXED_NOW)

    assert notifier.pending() == []
    assert store.load_blob("reminders") is None


def test_stored_notifier_replaces_same_id(store):
    notifier = StoredNotifier(store, clock=fixed_clock)

    notifier.schedule("event", "Event reminder", "First", FIXED_NOW.add(hours=1))
    notifier.schedule("event", "Event reminder", "Second", FIXED_NOW.add(hours=3))

    pending = notifier.pending()
    assert len(pending) == 1
    assert pending[0]["body"] == "Second"


def test_stored_notifier_cancel(store):
    notifier = StoredNotifier(store, clock=fixed_clock)
    notifier.schedule("a", "Event reminder", "A", FIXED_NOW.add(hours=1))
    notifier.schedule("a_reminder", "Reminder", "A", FIXED_NOW.add(minutes=50))
    notifier.schedule("b", "Event reminder", "B", FIXED_NOW.add(hours=2))

    notifier.cancel(notification_ids("a"))
    notifier.cancel(["unknown"])

    assert [r["id"] for r in StoredNotifier(store, clock=fixed_clock).pending()] == ["b"]


def test_stored_notifier_corrupt_blob_is_empty(store):
    store.save_blob("reminders", b"- {id: only}\n")

    assert StoredNotifier(store, clock=fixed_clock).pending() == []


def test_stored_notifier_keeps_subtitle(store):
    notifier = StoredNotifier(store, clock=fixed_clock)

    notifier.schedule(
        "memo", "Event reminder", "Dentist", FIXED_NOW.add(hours=1), "bring the card"
    )
    notifier.schedule("plain", "Event reminder", "Gym", FIXED_NOW.add(hours=2))

    pending = StoredNotifier(store, clock=fixed_clock).pending()
    assert [r["subtitle"] for r in pending] == ["bring the card", None]


def test_fired_reminders_are_no_longer_pending(store):
    clock_time = [FIXED_NOW]
    notifier = StoredNotifier(store, clock=lambda: clock_time[0])
    notifier.schedule("soon", "Event reminder", "Soon", FIXED_NOW.add(minutes=10))
    notifier.schedule("later", "Event reminder", "Later", FIXED_NOW.add(hours=3))

    clock_time[0] = FIXED_NOW.add(hours=1)

    assert [r["id"] for r in notifier.pending()] == ["later"]
    reloaded = StoredNotifier(store, clock=lambda: clock_time[0])
    assert [r["id"] for r in reloaded.pending()] == ["later"]
    assert [r["id"] for r in reloaded.reminders] == ["later"]


def test_stored_notifier_with_unreadable_store_is_empty():
    store = UnreadableStore()
    notifier = StoredNotifier(store, clock=fixed_clock)

    assert notifier.pending() == []
    notifier.schedule("next", "Event reminder", "Next", FIXED_NOW.add(hours=1))
    assert [r["id"] for r in notifier.pending()] == ["next"]
    assert "reminders" in store.saved
