# SPDX-License-Identifier: MIT

import typer

from daybook.terminal.custom_typer import AliasedTyperGroup
from daybook.terminal.session import Session
from daybook.view.reminder import reminders_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("list, ls")
def list_reminders() -> None:
    """List reminders waiting to fire."""
    session = Session()
    reminders_view(session.notifier.pending())
