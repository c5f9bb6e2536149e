# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer
from rich.console import Console

from daybook.color import get_random_color
from daybook.model.event import EventColor, EventIcon, ReminderOption
from daybook.repository.configuration import CONFIGURATION_REPO
from daybook.service.grid import week_title
from daybook.terminal.custom_typer import AliasedTyperGroup
from daybook.terminal.parse import parse_date, parse_datetime, parse_reminder
from daybook.terminal.session import Session
from daybook.time import local_date, now_local, today_local
from daybook.view import event as event_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

console = Console()

DATETIME_HELP = "valid inputs: YYYY-MM-DD HH:mm, YYYY-MM-DD, (H)H:mm, now, today, yesterday, tomorrow, or day offset like 1, -1"
DATE_HELP = "valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1"


@app.command("add, a", no_args_is_help=True)
def add(
    title: Annotated[str, typer.Argument(help="event title")],
    start: Annotated[
        Optional[pendulum.DateTime],
        typer.Option("--start", "-s", parser=parse_datetime, help=DATETIME_HELP),
    ] = None,
    memo: Annotated[str, typer.Option("--memo", "-m")] = "",
    icon: Annotated[EventIcon, typer.Option("--icon", "-i")] = EventIcon.CALENDAR,
    color: Annotated[Optional[EventColor], typer.Option("--color", "-c")] = None,
    notify: Annotated[
        Optional[bool],
        typer.Option("--notify/--no-notify", "-n/-N", help="schedule reminders"),
    ] = None,
    reminder: Annotated[
        Optional[int],
        typer.Option("--reminder", "-r", help="lead time in minutes: 0, 5, 10, 30"),
    ] = None,
) -> None:
    config = CONFIGURATION_REPO.get_config()
    session = Session()

    # Determine color: use provided color, or random if config enabled
    event_color = color
    if event_color is None:
        event_color = (
            get_random_color() if config["random_color_for_events"] else EventColor.BLUE
        )

    event_reminder = parse_reminder(reminder)
    if event_reminder is None:
        event_reminder = ReminderOption.from_minutes(config["default_reminder"])

    event = session.controller.add_event(
        title,
        start if start is not None else now_local().set(second=0, microsecond=0),
        memo=memo,
        icon=icon,
        color=event_color,
        notification_enabled=config["notify_by_default"] if notify is None else notify,
        reminder=event_reminder,
    )
    if event is None:
        console.print("[red]event title must not be empty[/red]")
        raise typer.Exit(code=1)

    session.controller.select_date(local_date(event["start"]))
    session.save_navigation()
    event_view.single_event_view(event)


@app.command("modify, m", no_args_is_help=True)
def modify(
    id: Annotated[str, typer.Argument(help="event id or unique id prefix")],
    title: Annotated[Optional[str], typer.Option("--title", "-t")] = None,
    start: Annotated[
        Optional[pendulum.DateTime],
        typer.Option("--start", "-s", parser=parse_datetime, help=DATETIME_HELP),
    ] = None,
    memo: Annotated[Optional[str], typer.Option("--memo", "-m")] = None,
    icon: Annotated[Optional[EventIcon], typer.Option("--icon", "-i")] = None,
    color: Annotated[Optional[EventColor], typer.Option("--color", "-c")] = None,
    notify: Annotated[
        Optional[bool], typer.Option("--notify/--no-notify", "-n/-N")
    ] = None,
    reminder: Annotated[
        Optional[int],
        typer.Option("--reminder", "-r", help="lead time in minutes: 0, 5, 10, 30"),
    ] = None,
) -> None:
    session = Session()
    event = session.resolve_event(id)

    if title is not None:
        event["title"] = title
    if start is not None:
        event["start"] = start
    if memo is not None:
        event["memo"] = memo
    if icon is not None:
        event["icon"] = icon
    if color is not None:
        event["color"] = color
    if notify is not None:
        event["notification_enabled"] = notify
    event_reminder = parse_reminder(reminder)
    if event_reminder is not None:
        event["reminder"] = event_reminder

    if not session.controller.update_event(event):
        console.print("[red]event title must not be empty[/red]")
        raise typer.Exit(code=1)

    updated_event = session.repository.get_event(event["id"])
    if updated_event is not None:
        event_view.single_event_view(updated_event)


@app.command("delete, d", no_args_is_help=True)
def delete(
    id: Annotated[str, typer.Argument(help="event id or unique id prefix")],
) -> None:
    session = Session()
    event = session.resolve_event(id)
    session.controller.delete_event(event["id"])
    console.print(f"deleted event {event['id'][:8]}: {event['title']}")


@app.command("show, s", no_args_is_help=True)
def show(
    id: Annotated[str, typer.Argument(help="event id or unique id prefix")],
) -> None:
    session = Session()
    event_view.single_event_view(session.resolve_event(id))


@app.command("day")
def day(
    date: Annotated[
        Optional[pendulum.Date],
        typer.Option("--date", "-d", parser=parse_date, help=DATE_HELP),
    ] = None,
) -> None:
    """List the events of a day, earliest first."""
    session = Session()
    day_date = date if date is not None else today_local()
    event_view.events_view(
        day_date.format("YYYY-MM-DD ddd"),
        session.controller.sorted_events_for_day(day_date),
        session.controller.holidays.lookup(day_date),
    )


@app.command("week")
def week(
    date: Annotated[
        Optional[pendulum.Date],
        typer.Option("--date", "-d", parser=parse_date, help=DATE_HELP),
    ] = None,
) -> None:
    """List the events of the Sunday-started week containing a date."""
    session = Session()
    week_date = date if date is not None else today_local()
    event_view.events_view(
        week_title(week_date),
        session.controller.sorted_events_for_week(week_date),
    )
