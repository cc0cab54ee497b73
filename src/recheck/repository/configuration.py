# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from loguru import logger
from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from recheck import configuration


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
        loaded = None
        if configuration.APP_CONFIG_PATH.is_file():
            loaded = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)

        self._config = configuration.get_default_configuration()
        if loaded is None:
            return

        # Keys missing from older config files keep their defaults
        for key, value in loaded.items():
            if key in self._config:
                self._config[key] = value  # type: ignore[literal-required]
            else:
                logger.warning("Ignoring unknown configuration key {}", key)

    def __save_data(self, config: configuration.Configuration) -> None:
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
        civil_utc_offset_hours: Optional[float] = None,
        show_header: Optional[bool] = None,
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
        photo_retention_days: Optional[int] = None,
        log_level: Optional[str] = None,
        clear_ids_on_view: Optional[bool] = None,
    ) -> None:
        self.is_dirty = True

        if civil_utc_offset_hours is not None:
            self.config["civil_utc_offset_hours"] = civil_utc_offset_hours
        if show_header is not None:
            self.config["show_header"] = show_header
        if data_path is not None:
            self.config["data_path"] = data_path
        if remove_data_path:
            self.config["data_path"] = None
        if photo_retention_days is not None:
            self.config["photo_retention_days"] = photo_retention_days
        if log_level is not None:
            self.config["log_level"] = log_level.upper()
        if clear_ids_on_view is not None:
            self.config["clear_ids_on_view"] = clear_ids_on_view


CONFIGURATION_REPO = ConfigurationRepository()
