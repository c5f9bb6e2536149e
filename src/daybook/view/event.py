# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from daybook.color import event_glyph, event_style
from daybook.model.event import Event
from daybook.time import (
    datetime_to_display_local_datetime_str,
    datetime_to_display_local_time_str,
)
from daybook.view.header import header


def event_line(event: Event, show_time: bool = True) -> Text:
    style = event_style(event["color"])
    line = Text()
    line.append(f"{event_glyph(event['icon'])} ", style=style)
    if show_time:
        line.append(f"{datetime_to_display_local_time_str(event['start'])} ", style="dim")
    line.append(event["title"], style=style)
    if event["notification_enabled"]:
        line.append(" 🔔", style="dim")
    return line


def events_view(
    title: str,
    events: list[Event],
    sub_header: Optional[str] = None,
    use_color: bool = True,
) -> None:
    header(title, sub_header)

    events_table = Table(box=box.SIMPLE)
    for column in ["id", "start", "title", "memo", "reminder"]:
        events_table.add_column(column)

    for event in events:
        row = [
            event["id"][:8],
            datetime_to_display_local_datetime_str(event["start"]),
            f"{event_glyph(event['icon'])} {event['title']}",
            event["memo"],
            event["reminder"].label if event["notification_enabled"] else "off",
        ]
        style = event_style(event["color"]) if use_color else ""
        events_table.add_row(*[Text(value, style=style) for value in row])

    console = Console()
    if len(events) == 0:
        console.print(" no events")
        return
    console.print(events_table)


def single_event_view(event: Event) -> None:
    header("event", event["title"])

    event_table = Table(box=box.SIMPLE)
    event_table.add_column("property")
    event_table.add_column("value")

    event_table.add_row("id", event["id"])
    event_table.add_row("title", event["title"])
    event_table.add_row("start", datetime_to_display_local_datetime_str(event["start"]))
    event_table.add_row("memo", event["memo"])
    event_table.add_row("icon", f"{event_glyph(event['icon'])} {event['icon'].value}")
    event_table.add_row(
        "color",
        Text(event["color"].value, style=event_style(event["color"])),
    )
    event_table.add_row("notification", "on" if event["notification_enabled"] else "off")
    event_table.add_row("reminder", event["reminder"].label)
    event_table.add_row(
        "created", datetime_to_display_local_datetime_str(event["created"])
    )
    event_table.add_row(
        "updated", datetime_to_display_local_datetime_str(event["updated"])
    )

    console = Console()
    console.print(event_table)
