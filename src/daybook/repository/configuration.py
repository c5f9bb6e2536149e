# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, Literal, Optional, cast

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from daybook import configuration


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        loaded: Optional[dict[str, Any]] = None
        if configuration.APP_CONFIG_PATH.is_file():
            loaded = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)

        # Fill in settings added after the file was written
        config = cast(dict[str, Any], configuration.default_configuration())
        if loaded is not None:
            config.update(
                {key: value for key, value in loaded.items() if key in config}
            )
        self._config = cast(configuration.Configuration, config)

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))

    def flush(self) -> bool:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False
            return True
        return False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
        show_header: Optional[bool] = None,
        start_view: Optional[Literal["month", "week"]] = None,
        default_reminder: Optional[int] = None,
        notify_by_default: Optional[bool] = None,
        random_color_for_events: Optional[bool] = None,
        deep_link_scheme: Optional[str] = None,
        log_level: Optional[str] = None,
    ) -> None:
        self.is_dirty = True

        if data_path is not None:
            self.config["data_path"] = data_path
        if remove_data_path:
            self.config["data_path"] = None
        if show_header is not None:
            self.config["show_header"] = show_header
        if start_view is not None:
            self.config["start_view"] = start_view
        if default_reminder is not None:
            self.config["default_reminder"] = default_reminder
        if notify_by_default is not None:
            self.config["notify_by_default"] = notify_by_default
        if random_color_for_events is not None:
            self.config["random_color_for_events"] = random_color_for_events
        if deep_link_scheme is not None:
            self.config["deep_link_scheme"] = deep_link_scheme
        if log_level is not None:
            self.config["log_level"] = log_level.upper()


CONFIGURATION_REPO = ConfigurationRepository()
