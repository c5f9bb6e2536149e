# SPDX-License-Identifier: MIT

from daybook.model.entity_id import generate_entity_id
from daybook.model.event import Event, EventColor, EventIcon, ReminderOption
from daybook.time import now_local


def get_event_template() -> Event:
    now = now_local()
    return {
        "id": generate_entity_id(),
        "title": "",
        "start": now,
        "memo": "",
        "icon": EventIcon.CALENDAR,
        "color": EventColor.BLUE,
        "notification_enabled": False,
        "reminder": ReminderOption.NONE,
        "created": now,
        "updated": now,
    }
