# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypeAlias, TypedDict

import pendulum

from recheck.model.entity_id import EntityId

PeriodKind = Literal["daily", "weekly"]

# civil date -> item id -> count
DayAggregate: TypeAlias = dict[pendulum.Date, dict[EntityId, int]]


class ItemCount(TypedDict):
    item_id: EntityId
    name: str
    icon: Optional[str]
    count: int


class CalendarCell(TypedDict):
    date: Optional[pendulum.Date]  # None for padding cells
    total_count: int
    per_item: list[ItemCount]  # count descending


class SeriesPoint(TypedDict):
    label: str
    per_item: dict[EntityId, int]


class Summary(TypedDict):
    this_week: int
    last_week: int
