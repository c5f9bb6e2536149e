# SPDX-License-Identifier: MIT

import random

from daybook.model.event import EventColor, EventIcon

# Colors for day numbers in grid views
TODAY_STYLE = "bold black on bright_cyan"
SELECTED_STYLE = "bold white on blue"
HOLIDAY_STYLE = "bold red"
SUNDAY_STYLE = "red"
SATURDAY_STYLE = "blue"
PADDING_STYLE = "bright_black"

EVENT_COLOR_STYLES: dict[EventColor, str] = {
    EventColor.RED: "red",
    EventColor.ORANGE: "orange1",
    EventColor.YELLOW: "yellow",
    EventColor.GREEN: "green",
    EventColor.BLUE: "blue",
    EventColor.PURPLE: "purple",
    EventColor.PINK: "hot_pink",
}

EVENT_ICON_GLYPHS: dict[EventIcon, str] = {
    EventIcon.CALENDAR: "📅",
    EventIcon.STAR: "⭐",
    EventIcon.HEART: "❤",
    EventIcon.BOLT: "⚡",
    EventIcon.FLAG: "⚑",
    EventIcon.BELL: "🔔",
    EventIcon.TAG: "🏷",
    EventIcon.BRIEFCASE: "💼",
    EventIcon.HOUSE: "🏠",
    EventIcon.PERSON: "👤",
    EventIcon.CART: "🛒",
    EventIcon.AIRPLANE: "✈",
    EventIcon.CAR: "🚗",
    EventIcon.FORK_KNIFE: "🍴",
    EventIcon.GAMECONTROLLER: "🎮",
    EventIcon.MUSIC: "♪",
}


def event_style(color: EventColor) -> str:
    return EVENT_COLOR_STYLES[color]


def event_glyph(icon: EventIcon) -> str:
    return EVENT_ICON_GLYPHS[icon]


def get_random_color() -> EventColor:
    """Return a random color from the event palette."""
    return random.choice(list(EventColor))
