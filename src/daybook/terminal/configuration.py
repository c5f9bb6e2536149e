# SPDX-License-Identifier: MIT

from typing import Annotated, Literal, Optional, cast

import typer
from rich.console import Console
from rich.table import Table

from daybook import configuration
from daybook.model.navigation import ViewMode
from daybook.repository.configuration import CONFIGURATION_REPO
from daybook.terminal.custom_typer import AliasedTyperGroup
from daybook.terminal.parse import parse_reminder

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def _enabled(value: bool) -> str:
    return "✓ Enabled" if value else "✗ Disabled"


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("data_path", str(configuration.DATA_PATH))
    table.add_row("show_header", _enabled(config["show_header"]))
    table.add_row("start_view", config["start_view"])
    table.add_row("default_reminder", f"{config['default_reminder']} minutes")
    table.add_row("notify_by_default", _enabled(config["notify_by_default"]))
    table.add_row("random_color_for_events", _enabled(config["random_color_for_events"]))
    table.add_row("deep_link_scheme", config["deep_link_scheme"])
    table.add_row("log_level", config["log_level"])
    table.add_row("config_file", str(configuration.APP_CONFIG_PATH))

    console.print(table)


@app.command("set", no_args_is_help=True)
def set_config(
    data_path: Annotated[Optional[str], typer.Option("--data-path")] = None,
    remove_data_path: Annotated[bool, typer.Option("--remove-data-path")] = False,
    show_header: Annotated[
        Optional[bool], typer.Option("--show-header/--hide-header")
    ] = None,
    start_view: Annotated[Optional[ViewMode], typer.Option("--start-view")] = None,
    default_reminder: Annotated[
        Optional[int],
        typer.Option("--default-reminder", help="lead time in minutes: 0, 5, 10, 30"),
    ] = None,
    notify_by_default: Annotated[
        Optional[bool], typer.Option("--notify-by-default/--no-notify-by-default")
    ] = None,
    random_color_for_events: Annotated[
        Optional[bool],
        typer.Option("--random-color-for-events/--no-random-color-for-events"),
    ] = None,
    deep_link_scheme: Annotated[Optional[str], typer.Option("--deep-link-scheme")] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help="DEBUG, INFO, WARNING or ERROR"),
    ] = None,
) -> None:
    """Change configuration settings."""
    if log_level is not None and log_level.upper() not in [
        "DEBUG",
        "INFO",
        "WARNING",
        "ERROR",
    ]:
        raise typer.BadParameter(f"Unknown log level '{log_level}'")
    reminder = parse_reminder(default_reminder)

    CONFIGURATION_REPO.update_config(
        data_path=data_path,
        remove_data_path=remove_data_path,
        show_header=show_header,
        start_view=(
            cast(Literal["month", "week"], start_view.value)
            if start_view is not None
            else None
        ),
        default_reminder=reminder.value if reminder is not None else None,
        notify_by_default=notify_by_default,
        random_color_for_events=random_color_for_events,
        deep_link_scheme=deep_link_scheme,
        log_level=log_level,
    )
    CONFIGURATION_REPO.flush()
    view()
