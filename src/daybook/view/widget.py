# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from daybook.color import SATURDAY_STYLE, SELECTED_STYLE, SUNDAY_STYLE
from daybook.service.grid import WEEKDAY_LABELS
from daybook.service.widget import WidgetEntry
from daybook.view.event import event_line


def widget_view(entry: WidgetEntry, limit: int = 7) -> None:
    week_table = Table(box=None, show_header=True, padding=(0, 1))
    for index, day_name in enumerate(WEEKDAY_LABELS):
        style = SUNDAY_STYLE if index == 0 else SATURDAY_STYLE if index == 6 else "dim"
        week_table.add_column(day_name, header_style=style, justify="center")
    week_table.add_row(
        *[
            Text(
                f"{date.day:2d}",
                style=SELECTED_STYLE if date == entry["display_date"] else "",
            )
            for date in entry["week_dates"]
        ]
    )

    body = Table.grid()
    body.add_row(week_table)
    if len(entry["events"]) == 0:
        body.add_row(Text("no events", style="dim"))
    for event in entry["events"][:limit]:
        body.add_row(event_line(event))
    if len(entry["events"]) > limit:
        body.add_row(Text(f"+{len(entry['events']) - limit} more", style="dim"))
    body.add_row(Text(entry["url"], style="dim underline"))

    console = Console()
    console.print(
        Panel(
            body,
            title=entry["display_date"].format("ddd, MMM D"),
            box=box.ROUNDED,
            expand=False,
        )
    )
