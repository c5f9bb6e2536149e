# SPDX-License-Identifier: MIT

import logging
from typing import Optional

import yaml
from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from daybook import configuration
from daybook.model.navigation import NavigationState, ViewMode
from daybook.repository.store import BlobStore, read_blob
from daybook.time import date_from_key, date_to_key

logger = logging.getLogger(__name__)


class NavigationRepository:
    """Keeps the calendar position between terminal invocations."""

    def __init__(
        self, store: BlobStore, key: str = configuration.NAVIGATION_BLOB_KEY
    ) -> None:
        self.store = store
        self.key = key

    def load_state(self) -> Optional[NavigationState]:
        blob = read_blob(self.store, self.key)
        if blob is None:
            return None
        try:
            raw = load(blob.decode("utf-8"), Loader=Loader)
            anchor = date_from_key(str(raw["anchor"]))
            selected = date_from_key(str(raw["selected"]))
            mode = ViewMode(raw["mode"])
        except (yaml.YAMLError, UnicodeDecodeError, KeyError, TypeError, ValueError):
            logger.warning("navigation state is unreadable, ignoring it")
            return None
        if anchor is None or selected is None:
            logger.warning("navigation state has invalid dates, ignoring it")
            return None
        return {"anchor": anchor, "selected": selected, "mode": mode}

    def save_state(self, state: NavigationState) -> None:
        serializable = {
            "anchor": date_to_key(state["anchor"]),
            "selected": date_to_key(state["selected"]),
            "mode": state["mode"].value,
        }
        try:
            self.store.save_blob(self.key, dump(serializable, Dumper=Dumper).encode("utf-8"))
        except OSError:
            logger.error("failed to persist navigation state", exc_info=True)
