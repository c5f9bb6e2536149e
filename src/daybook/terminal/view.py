# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer
from rich.console import Console

from daybook.model.navigation import ViewMode
from daybook.terminal.custom_typer import AliasedTyperGroup
from daybook.terminal.parse import parse_date
from daybook.terminal.session import Session
from daybook.view.calendar import calendar_view, selected_day_view
from daybook.view.widget import widget_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

console = Console()

DATE_HELP = "valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1"


def __show(session: Session) -> None:
    session.save_navigation()
    calendar_view(session.controller.view_model)


@app.command("show, s")
def show() -> None:
    """Show the calendar where it was left."""
    __show(Session())


@app.command("month, m")
def month(
    date: Annotated[
        Optional[pendulum.Date],
        typer.Option("--date", "-d", parser=parse_date, help=DATE_HELP),
    ] = None,
) -> None:
    """Show the month grid, optionally selecting a date."""
    session = Session()
    session.controller.set_view_mode(ViewMode.MONTH)
    if date is not None:
        session.controller.select_date(date)
    __show(session)


@app.command("week, w")
def week(
    date: Annotated[
        Optional[pendulum.Date],
        typer.Option("--date", "-d", parser=parse_date, help=DATE_HELP),
    ] = None,
) -> None:
    """Show the week grid, optionally selecting a date."""
    session = Session()
    session.controller.set_view_mode(ViewMode.WEEK)
    if date is not None:
        session.controller.select_date(date)
    __show(session)


@app.command("day, d")
def day(
    date: Annotated[
        Optional[pendulum.Date],
        typer.Option("--date", "-d", parser=parse_date, help=DATE_HELP),
    ] = None,
) -> None:
    """Show only the selected day with its holiday and events."""
    session = Session()
    if date is not None:
        session.controller.select_date(date)
    session.save_navigation()
    selected_day_view(session.controller.view_model)


@app.command("next, n")
def next_period(
    count: Annotated[int, typer.Argument(min=1, help="periods to advance")] = 1,
) -> None:
    """Advance by one month or week."""
    session = Session()
    for _ in range(count):
        session.controller.next_period()
    __show(session)


@app.command("prev, p")
def previous_period(
    count: Annotated[int, typer.Argument(min=1, help="periods to go back")] = 1,
) -> None:
    """Go back by one month or week."""
    session = Session()
    for _ in range(count):
        session.controller.previous_period()
    __show(session)


@app.command("today, t")
def today() -> None:
    """Jump back to today."""
    session = Session()
    session.controller.go_to_today()
    __show(session)


@app.command("select, sel", no_args_is_help=True)
def select(
    date: Annotated[
        pendulum.Date, typer.Argument(parser=parse_date, help=DATE_HELP)
    ],
) -> None:
    """Select a date, moving the calendar when it lies outside the shown period."""
    session = Session()
    session.controller.select_date(date)
    __show(session)


@app.command("mode", no_args_is_help=True)
def mode(
    view_mode: Annotated[ViewMode, typer.Argument(help="month or week")],
) -> None:
    """Switch between the month and week layout."""
    session = Session()
    session.controller.set_view_mode(view_mode)
    __show(session)


@app.command("open, o", no_args_is_help=True)
def open_link(
    url: Annotated[str, typer.Argument(help="link like daybook://date/2025-01-29")],
) -> None:
    """Open a date deep link."""
    session = Session()
    if not session.controller.open_url(url):
        console.print(f"[red]not a date link: {url}[/red]")
        raise typer.Exit(code=1)
    __show(session)


@app.command("widget, wg")
def widget(
    date: Annotated[
        Optional[pendulum.Date],
        typer.Option("--date", "-d", parser=parse_date, help=DATE_HELP),
    ] = None,
    limit: Annotated[int, typer.Option("--limit", "-l", min=1)] = 7,
    previous_day: Annotated[
        bool, typer.Option("--prev", "-p", help="move the widget one day back")
    ] = False,
    next_day: Annotated[
        bool, typer.Option("--next", "-n", help="move the widget one day forward")
    ] = False,
    follow_today: Annotated[
        bool, typer.Option("--today", "-t", help="let the widget follow today again")
    ] = False,
) -> None:
    """Compact summary of a day and its week; --date shows a day without moving the widget."""
    reader = Session().widget()
    if follow_today:
        reader.set_display_date(None)
    if previous_day:
        reader.previous_day()
    if next_day:
        reader.next_day()
    widget_view(reader.entry(date), limit)
