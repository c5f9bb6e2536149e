# SPDX-License-Identifier: MIT

import typer

from daybook import configuration
from daybook.model.event import Event
from daybook.model.navigation import ViewMode
from daybook.repository.configuration import CONFIGURATION_REPO
from daybook.repository.event import EventRepository
from daybook.repository.navigation import NavigationRepository
from daybook.repository.store import FileBlobStore
from daybook.service.calendar import CalendarController
from daybook.service.holiday import HolidayLookup
from daybook.service.notification import ReminderScheduler, StoredNotifier
from daybook.service.widget import WidgetReader


class Session:
    """Wires the store, repositories and controller for one terminal invocation."""

    def __init__(self) -> None:
        config = CONFIGURATION_REPO.get_config()

        self.store = FileBlobStore(configuration.DATA_BLOBS_DIR)
        self.notifier = StoredNotifier(self.store)
        self.repository = EventRepository(self.store, ReminderScheduler(self.notifier))
        self.navigation = NavigationRepository(self.store)
        self.controller = CalendarController(
            self.repository,
            HolidayLookup(),
            state=self.navigation.load_state(),
            start_mode=ViewMode(config["start_view"]),
            deep_link_scheme=config["deep_link_scheme"],
        )

    def widget(self) -> WidgetReader:
        return WidgetReader(
            self.store,
            deep_link_scheme=CONFIGURATION_REPO.get_config()["deep_link_scheme"],
        )

    def save_navigation(self) -> None:
        self.navigation.save_state(self.controller.state)

    def resolve_event(self, id_prefix: str) -> Event:
        """Find the single event whose id starts with id_prefix."""
        matches = self.repository.find_by_id_prefix(id_prefix.strip())
        if id_prefix.strip() == "" or len(matches) == 0:
            raise typer.BadParameter(f"No event with id '{id_prefix}'")
        if len(matches) > 1:
            raise typer.BadParameter(
                f"Id '{id_prefix}' matches {len(matches)} events, use more characters"
            )
        return matches[0]
