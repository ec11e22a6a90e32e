# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from laneline import configuration


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
        if not configuration.APP_CONFIG_PATH.is_file():
            self._config = configuration.get_default_configuration()
            return

        self._config = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)

        if self._config is None:
            raise ValueError()

        # Fill in settings added after the file was written
        for key, value in configuration.get_default_configuration().items():
            if key not in self._config:
                self._config[key] = value  # type: ignore[literal-required]

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))

    def flush(self) -> None:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        timezone: Optional[str] = None,
        default_zoom: Optional[str] = None,
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
        left_column_width: Optional[int] = None,
        row_unit_height: Optional[int] = None,
        row_padding: Optional[int] = None,
        min_row_height: Optional[int] = None,
        lane_margin: Optional[int] = None,
        header_row_height: Optional[int] = None,
        min_width_percent: Optional[float] = None,
    ) -> None:
        self.is_dirty = True

        if timezone is not None:
            self.config["timezone"] = timezone
        if default_zoom is not None:
            self.config["default_zoom"] = default_zoom
        if data_path is not None:
            self.config["data_path"] = data_path
        if remove_data_path:
            self.config["data_path"] = None
        if left_column_width is not None:
            self.config["left_column_width"] = left_column_width
        if row_unit_height is not None:
            self.config["row_unit_height"] = row_unit_height
        if row_padding is not None:
            self.config["row_padding"] = row_padding
        if min_row_height is not None:
            self.config["min_row_height"] = min_row_height
        if lane_margin is not None:
            self.config["lane_margin"] = lane_margin
        if header_row_height is not None:
            self.config["header_row_height"] = header_row_height
        if min_width_percent is not None:
            self.config["min_width_percent"] = min_width_percent


CONFIGURATION_REPO = ConfigurationRepository()
