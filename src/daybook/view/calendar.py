# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from daybook.color import (
    HOLIDAY_STYLE,
    PADDING_STYLE,
    SATURDAY_STYLE,
    SELECTED_STYLE,
    SUNDAY_STYLE,
    TODAY_STYLE,
    event_style,
)
from daybook.model.day import DayView
from daybook.model.navigation import CalendarViewModel, ViewMode
from daybook.service.grid import WEEKDAY_LABELS
from daybook.view.event import event_line
from daybook.view.header import header

MAX_EVENTS_PER_CELL = 3


def calendar_view(view_model: CalendarViewModel, cell_width: int = 16) -> None:
    """
    Display the month or week grid of a view model followed by the selected day.

    Args:
        view_model: The computed calendar view model
        cell_width: Width of each day cell in characters
    """
    header(view_model["title"], view_model["mode"].value)

    console = Console()
    console.print()
    console.print(
        _render_grid(
            view_model["days"],
            cell_width,
            show_times=view_model["mode"] == ViewMode.WEEK,
        )
    )
    selected_day_view(view_model)


def selected_day_view(view_model: CalendarViewModel) -> None:
    console = Console()

    title = Text(view_model["selected"].format("YYYY-MM-DD ddd"), style="bold")
    if view_model["selected_holiday"] is not None:
        title.append(f"  {view_model['selected_holiday']}", style=HOLIDAY_STYLE)
    title.append(f"  ({len(view_model['selected_events'])} events)", style="dim")
    console.print(title)

    if len(view_model["selected_events"]) == 0:
        console.print(Text("no events", style="dim"))
    for event in view_model["selected_events"]:
        line = Text("  ")
        line.append_text(event_line(event))
        if event["memo"] != "":
            line.append(f"  {event['memo']}", style="dim")
        console.print(line)
    console.print()


def _day_number_style(day: DayView) -> str:
    cell = day["cell"]
    if not cell["is_current_month"]:
        return PADDING_STYLE
    if day["is_selected"]:
        return SELECTED_STYLE
    if day["is_today"]:
        return TODAY_STYLE
    if day["holiday"] is not None:
        return HOLIDAY_STYLE
    if cell["weekday"] == 0:
        return SUNDAY_STYLE
    if cell["weekday"] == 6:
        return SATURDAY_STYLE
    return "bold"


def _render_cell(day: DayView, cell_width: int, show_times: bool) -> Text:
    cell_content = Text()
    cell_content.append(f"{day['cell']['day_number']:2d}", style=_day_number_style(day))
    cell_content.append("\n")

    if day["holiday"] is not None:
        holiday = day["holiday"]
        if len(holiday) > cell_width:
            holiday = holiday[: cell_width - 3] + "..."
        cell_content.append(f"{holiday}\n", style=HOLIDAY_STYLE)

    for event in day["events"][:MAX_EVENTS_PER_CELL]:
        if show_times:
            line = event_line(event)
        else:
            line = Text("● ", style=event_style(event["color"]))
            line.append(event["title"], style=event_style(event["color"]))
        line.truncate(cell_width, overflow="ellipsis")
        cell_content.append_text(line)
        cell_content.append("\n")

    # Show count if more events exist
    if len(day["events"]) > MAX_EVENTS_PER_CELL:
        remaining = len(day["events"]) - MAX_EVENTS_PER_CELL
        cell_content.append(f"  +{remaining} more\n", style="dim")

    return cell_content


def _render_grid(days: list[DayView], cell_width: int, show_times: bool) -> Table:
    table = Table(box=box.SIMPLE, show_header=True, padding=(0, 1))

    for index, day_name in enumerate(WEEKDAY_LABELS):
        style = SUNDAY_STYLE if index == 0 else SATURDAY_STYLE if index == 6 else "bold"
        table.add_column(day_name, header_style=style, width=cell_width)

    for row_start in range(0, len(days), 7):
        week = days[row_start : row_start + 7]
        table.add_row(*[_render_cell(day, cell_width, show_times) for day in week])

    return table

