# SPDX-License-Identifier: MIT

from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from daybook import configuration
from daybook.logging import configure_logging
from daybook.repository.configuration import CONFIGURATION_REPO
from daybook.view import state as view_state


def initialize() -> None:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    configuration.load_data_path_configuration()
    configuration.DATA_PATH.mkdir(parents=True, exist_ok=True)
    configuration.DATA_BLOBS_DIR.mkdir(parents=True, exist_ok=True)

    __ensure_config_file()

    config = CONFIGURATION_REPO.get_config()
    configure_logging(config["log_level"])
    view_state.set_show_header(config["show_header"])


def __ensure_config_file() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        config = configuration.default_configuration()
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))
