# SPDX-License-Identifier: MIT

from recheck.model.check_item import CheckItem
from recheck.model.entity_type import EntityType
from recheck.time import now_utc


def get_check_item_template() -> CheckItem:
    now = now_utc()
    return {
        "id": None,
        "entity_type": EntityType.ITEM,
        "name": "",
        "icon": None,
        "sort_order": 0,
        "archived": False,
        "created": now,
        "updated": now,
    }
