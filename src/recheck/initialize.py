# SPDX-License-Identifier: MIT

from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from loguru import logger

from recheck import configuration
from recheck import state as app_state
from recheck.log import configure_logging
from recheck.repository.configuration import CONFIGURATION_REPO


def initialize() -> None:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    configuration.load_data_path_configuration()
    configuration.DATA_PATH.mkdir(parents=True, exist_ok=True)

    __ensure_config_file()
    __ensure_data_dirs()

    config = CONFIGURATION_REPO.get_config()
    configure_logging(config["log_level"])
    app_state.set_show_header(config["show_header"])
    app_state.set_clear_ids(config["clear_ids_on_view"])
    logger.debug("Using data path {}", configuration.DATA_PATH)


def __ensure_config_file() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        config = configuration.get_default_configuration()
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))


def __ensure_data_dirs() -> None:
    # Directory-based entity stores (one file per entity)
    for directory in (
        configuration.DATA_ITEMS_DIR,
        configuration.DATA_CHECK_INS_DIR,
        configuration.DATA_PHOTOS_DIR,
    ):
        if not directory.is_dir():
            directory.mkdir(parents=True, exist_ok=True)
            (directory / ".gitkeep").touch()
