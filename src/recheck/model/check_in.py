# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from recheck.model.entity_id import EntityId


class CheckIn(TypedDict):
    """One "I checked it" event. Never modified after it is stored."""

    id: Optional[EntityId]
    entity_type: str  # "check_in"
    item_id: EntityId  # may outlive its item after a hard delete
    occurred_at: pendulum.DateTime  # UTC instant
    photo_ref: Optional[str]  # opaque reference, may point at an expired photo
    created: pendulum.DateTime
