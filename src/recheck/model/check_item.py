# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from recheck.model.entity_id import EntityId


class CheckItem(TypedDict):
    id: Optional[EntityId]
    entity_type: str  # "item"
    name: str  # e.g., "Front door"
    icon: Optional[str]  # single glyph, e.g., "🔑"
    sort_order: int  # position on the home list, 0-based
    archived: bool  # hidden from the home list, still named in history
    created: pendulum.DateTime
    updated: pendulum.DateTime
