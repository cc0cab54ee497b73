# SPDX-License-Identifier: MIT

import atexit

from recheck.repository.check_in import CHECK_IN_REPO
from recheck.repository.check_item import CHECK_ITEM_REPO
from recheck.repository.configuration import CONFIGURATION_REPO
from recheck.repository.id_map import ID_MAP_REPO


def flush_all() -> None:
    CONFIGURATION_REPO.flush()
    ID_MAP_REPO.flush()

    # Flush entity repositories
    CHECK_ITEM_REPO.flush()
    CHECK_IN_REPO.flush()


def register_cleanup() -> None:
    atexit.register(flush_all)
