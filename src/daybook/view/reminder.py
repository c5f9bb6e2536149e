# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from daybook.service.notification import PendingReminder
from daybook.time import datetime_to_display_local_datetime_str
from daybook.view.header import header


def _reminder_text(reminder: PendingReminder) -> Text:
    text = Text(reminder["body"])
    if reminder["subtitle"] is not None:
        text.append(f"\n{reminder['subtitle']}", style="dim")
    return text


def reminders_view(reminders: list[PendingReminder]) -> None:
    header("reminders", "pending")

    console = Console()
    if len(reminders) == 0:
        console.print(" no pending reminders")
        return

    table = Table(box=box.SIMPLE)
    table.add_column("fires at")
    table.add_column("title")
    table.add_column("event")
    for reminder in reminders:
        table.add_row(
            datetime_to_display_local_datetime_str(reminder["fire_time"]),
            reminder["title"],
            _reminder_text(reminder),
        )
    console.print(table)
