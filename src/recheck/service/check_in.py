# SPDX-License-Identifier: MIT

from typing import Iterable, Optional

import pendulum

from recheck.model.check_in import CheckIn
from recheck.model.entity_id import EntityId
from recheck.model.entity_type import EntityType
from recheck.service.aggregate import aggregate_by_day
from recheck.time import CivilTime, now_utc


def record(
    item_id: EntityId,
    occurred_at: pendulum.DateTime,
    photo_ref: Optional[str] = None,
) -> CheckIn:
    """
    Build a new check-in for an item.

    Every call is an independent event: repeated check-ins of the same item on
    the same day are expected and are neither merged nor rate limited.
    """
    return {
        "id": None,
        "entity_type": EntityType.CHECK_IN,
        "item_id": item_id,
        "occurred_at": occurred_at.in_tz("UTC"),
        "photo_ref": photo_ref,
        "created": now_utc(),
    }


def today_counts(
    events: Iterable[CheckIn],
    now: pendulum.DateTime,
    civil: CivilTime,
) -> dict[EntityId, int]:
    today = civil.today(now)
    return aggregate_by_day(events, civil.day_bounds(today), civil).get(today, {})


def optimistic_today_count(today_count: int, pending_submissions: int) -> int:
    """
    Count to display while submissions are still in flight.

    The stored count is authoritative once they settle. A submission that
    fails is not subtracted here.
    """
    return today_count + max(0, pending_submissions)
