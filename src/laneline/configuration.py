# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import NotRequired, Optional, TypedDict

import platformdirs

APP_NAME = "laneline"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_ITEMS_PATH: Path = DATA_PATH / "items.yaml"


class Configuration(TypedDict):
    timezone: str
    default_zoom: str
    data_path: Optional[str]
    left_column_width: int
    row_unit_height: NotRequired[int]
    row_padding: NotRequired[int]
    min_row_height: NotRequired[int]
    lane_margin: NotRequired[int]
    header_row_height: NotRequired[int]
    min_width_percent: NotRequired[float]


def get_default_configuration() -> Configuration:
    return {
        "timezone": "UTC",
        "default_zoom": "quarter",
        "data_path": None,
        "left_column_width": 40,
        "row_unit_height": 36,
        "row_padding": 24,
        "min_row_height": 80,
        "lane_margin": 12,
        "header_row_height": 40,
        "min_width_percent": 0.5,
    }


def items_path(config: Configuration) -> Path:
    """Resolve the work item snapshot file from the configured data path."""
    data_path = config.get("data_path")
    if data_path is None:
        return DATA_ITEMS_PATH
    return Path(data_path)
