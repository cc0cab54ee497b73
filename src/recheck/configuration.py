# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "recheck"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_ID_MAP_PATH: Path = DATA_PATH / "id_map.yaml"
DATA_ITEMS_DIR: Path = DATA_PATH / "items"
DATA_CHECK_INS_DIR: Path = DATA_PATH / "check_ins"
DATA_PHOTOS_DIR: Path = DATA_PATH / "photos"


class Configuration(TypedDict):
    civil_utc_offset_hours: float
    show_header: bool
    data_path: Optional[str]
    photo_retention_days: int
    log_level: str
    clear_ids_on_view: bool


def get_default_configuration() -> Configuration:
    return {
        "civil_utc_offset_hours": 9.0,
        "show_header": True,
        "data_path": None,
        "photo_retention_days": 30,
        "log_level": "WARNING",
        "clear_ids_on_view": True,
    }


def set_data_path(data_path: Path) -> None:
    global DATA_PATH, DATA_ID_MAP_PATH, DATA_ITEMS_DIR, DATA_CHECK_INS_DIR, DATA_PHOTOS_DIR

    DATA_PATH = data_path
    DATA_ID_MAP_PATH = DATA_PATH / "id_map.yaml"
    DATA_ITEMS_DIR = DATA_PATH / "items"
    DATA_CHECK_INS_DIR = DATA_PATH / "check_ins"
    DATA_PHOTOS_DIR = DATA_PATH / "photos"


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
