# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Literal, Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "daybook"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_BLOBS_DIR: Path = DATA_PATH / "blobs"
DATA_LOG_PATH: Path = DATA_PATH / "daybook.log"

EVENTS_BLOB_KEY = "events"
REMINDERS_BLOB_KEY = "reminders"
NAVIGATION_BLOB_KEY = "navigation"
WIDGET_DISPLAY_DATE_BLOB_KEY = "widget_display_date"


class Configuration(TypedDict):
    data_path: Optional[str]
    show_header: bool
    start_view: Literal["month", "week"]
    default_reminder: int
    notify_by_default: bool
    random_color_for_events: bool
    deep_link_scheme: str
    log_level: str


def default_configuration() -> Configuration:
    return {
        "data_path": None,
        "show_header": True,
        "start_view": "month",
        "default_reminder": 0,
        "notify_by_default": False,
        "random_color_for_events": False,
        "deep_link_scheme": "daybook",
        "log_level": "INFO",
    }


def set_data_path(data_path: Path) -> None:
    global DATA_PATH, DATA_BLOBS_DIR, DATA_LOG_PATH

    DATA_PATH = data_path
    DATA_BLOBS_DIR = DATA_PATH / "blobs"
    DATA_LOG_PATH = DATA_PATH / "daybook.log"


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before any
    repositories are instantiated.
    """
    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return

    data_path_setting = config.get("data_path")
    if data_path_setting is not None:
        set_data_path(Path(data_path_setting))
