# SPDX-License-Identifier: MIT

from enum import Enum, IntEnum
from typing import TypedDict

import pendulum

from daybook.model.entity_id import EntityId


class EventColor(str, Enum):
    RED = "red"
    ORANGE = "orange"
    YELLOW = "yellow"
    GREEN = "green"
    BLUE = "blue"
    PURPLE = "purple"
    PINK = "pink"

    @classmethod
    def from_name(cls, name: object) -> "EventColor":
        """Map a stored color token to the palette, unknown tokens become blue."""
        for color in cls:
            if color.value == name:
                return color
        return cls.BLUE


class EventIcon(str, Enum):
    CALENDAR = "calendar"
    STAR = "star"
    HEART = "heart"
    BOLT = "bolt"
    FLAG = "flag"
    BELL = "bell"
    TAG = "tag"
    BRIEFCASE = "briefcase"
    HOUSE = "house"
    PERSON = "person"
    CART = "cart"
    AIRPLANE = "airplane"
    CAR = "car"
    FORK_KNIFE = "fork_knife"
    GAMECONTROLLER = "gamecontroller"
    MUSIC = "music"

    @classmethod
    def from_name(cls, name: object) -> "EventIcon":
        """Map a stored icon token to a known icon, unknown tokens become calendar."""
        for icon in cls:
            if icon.value == name:
                return icon
        return cls.CALENDAR


class ReminderOption(IntEnum):
    NONE = 0
    FIVE_MINUTES = 5
    TEN_MINUTES = 10
    THIRTY_MINUTES = 30

    @property
    def label(self) -> str:
        if self is ReminderOption.NONE:
            return "none"
        return f"{self.value} minutes before"

    @classmethod
    def from_minutes(cls, minutes: object) -> "ReminderOption":
        for option in cls:
            if option.value == minutes:
                return option
        return cls.NONE


class Event(TypedDict):
    id: EntityId
    title: str
    start: pendulum.DateTime
    memo: str
    icon: EventIcon
    color: EventColor
    notification_enabled: bool
    reminder: ReminderOption
    created: pendulum.DateTime
    updated: pendulum.DateTime
