# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from daybook.terminal import configuration, event, reminder, view
from daybook.terminal.custom_typer import DaybookTyperGroup
from daybook.view import state as view_state

app = typer.Typer(
    cls=DaybookTyperGroup,
    help="Daybook - a personal calendar in the CLI",
    no_args_is_help=True,
)
app.add_typer(configuration.app, name="config, c")
app.add_typer(event.app, name="event, e")
app.add_typer(view.app, name="view, v")
app.add_typer(reminder.app, name="reminder, r")


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in views",
        ),
    ] = False,
) -> None:
    """
    Daybook - a personal calendar in the CLI

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)


def run() -> None:
    app()
