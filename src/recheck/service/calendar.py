# SPDX-License-Identifier: MIT

import re
from typing import Iterable, Optional

import pendulum
from loguru import logger

from recheck.model.check_item import CheckItem
from recheck.model.entity_id import EntityId
from recheck.model.history import CalendarCell, DayAggregate, ItemCount
from recheck.service.aggregate import total
from recheck.time import CivilTime, days_since_monday, normalize_year_month

DELETED_ITEM_LABEL = "(deleted)"

MONTH_SELECTOR_PATTERN = re.compile(r"^(\d{4})-(\d{2})$")


def build_cells(year: int, month: int) -> list[Optional[int]]:
    """
    Lay out a month as complete Monday-start week rows.

    Days before the 1st and after the last day are None, so the result always
    has a length that is a multiple of 7.
    """
    year, month = normalize_year_month(year, month)
    first = pendulum.date(year, month, 1)

    cells: list[Optional[int]] = [None] * days_since_monday(first)
    cells.extend(range(1, first.days_in_month + 1))
    while len(cells) % 7 != 0:
        cells.append(None)
    return cells


def resolve_item(
    item_id: EntityId, items_by_id: dict[EntityId, CheckItem]
) -> tuple[str, Optional[str]]:
    item = items_by_id.get(item_id)
    if item is None:
        return DELETED_ITEM_LABEL, None
    return item["name"], item["icon"]


def attach_counts(
    cells: list[Optional[int]],
    year: int,
    month: int,
    day_aggregates: DayAggregate,
    items: Iterable[CheckItem],
) -> list[CalendarCell]:
    year, month = normalize_year_month(year, month)
    items_by_id = {item["id"]: item for item in items if item["id"] is not None}

    calendar_cells: list[CalendarCell] = []
    for day in cells:
        if day is None:
            calendar_cells.append({"date": None, "total_count": 0, "per_item": []})
            continue

        date = pendulum.date(year, month, day)
        day_counts = day_aggregates.get(date, {})
        per_item: list[ItemCount] = []
        for item_id, count in day_counts.items():
            name, icon = resolve_item(item_id, items_by_id)
            per_item.append(
                {"item_id": item_id, "name": name, "icon": icon, "count": count}
            )
        # stable sort: equal counts keep first-occurrence order
        per_item = sorted(per_item, key=lambda c: c["count"], reverse=True)

        calendar_cells.append(
            {
                "date": date,
                "total_count": total(day_counts),
                "per_item": per_item,
            }
        )

    return calendar_cells


def parse_month_selector(
    selector: Optional[str],
    now: pendulum.DateTime,
    civil: CivilTime,
) -> tuple[int, int]:
    """
    Turn a "YYYY-MM" string into (year, month).

    Anything that does not look like YYYY-MM falls back to the current civil
    month. Out-of-range months such as "2024-13" are carried, not rejected.
    """
    if selector is not None:
        match = MONTH_SELECTOR_PATTERN.match(selector.strip())
        if match:
            return normalize_year_month(int(match.group(1)), int(match.group(2)))
        logger.warning("Invalid month {!r}, using the current month", selector)
    return civil.current_month(now)


def previous_month(year: int, month: int) -> tuple[int, int]:
    return normalize_year_month(year, month - 1)


def next_month(year: int, month: int) -> tuple[int, int]:
    return normalize_year_month(year, month + 1)


def can_navigate_next(
    year: int,
    month: int,
    now: pendulum.DateTime,
    civil: CivilTime,
) -> bool:
    """Whether moving one month forward stays at or before the current month."""
    return normalize_year_month(year, month) < civil.current_month(now)
