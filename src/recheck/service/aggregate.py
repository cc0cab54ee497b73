# SPDX-License-Identifier: MIT

from bisect import bisect_right
from typing import Iterable, Sequence

from loguru import logger

from recheck.model.check_in import CheckIn
from recheck.model.entity_id import EntityId
from recheck.model.history import DayAggregate
from recheck.model.window import WeekWindow, Window
from recheck.time import CivilTime


def filter_window(events: Iterable[CheckIn], window: Window) -> list[CheckIn]:
    """
    Keep the events whose timestamp falls in [window.start, window.end).

    Callers that derive several aggregates from the same range should filter
    once and pass the result on, instead of filtering per aggregate.
    """
    return [event for event in events if window.contains(event["occurred_at"])]


def count_in_window(events: Iterable[CheckIn], window: Window) -> int:
    return sum(1 for event in events if window.contains(event["occurred_at"]))


def aggregate_by_day(
    events: Iterable[CheckIn],
    window: Window,
    civil: CivilTime,
) -> DayAggregate:
    """
    Count events per civil date and item inside a window.

    Args:
        events: Check-ins in any order
        window: Half-open UTC range to count
        civil: Civil time used to turn each timestamp into a date

    Returns:
        {civil_date: {item_id: count}}. Dates without events are absent and
        item ids are kept as stored, even when the item no longer exists.
    """
    counts: DayAggregate = {}
    for event in events:
        if not window.contains(event["occurred_at"]):
            continue
        date = civil.to_civil_date(event["occurred_at"])
        per_item = counts.setdefault(date, {})
        per_item[event["item_id"]] = per_item.get(event["item_id"], 0) + 1

    logger.debug("Aggregated {} days between {} and {}", len(counts), *window)
    return counts


def aggregate_by_week(
    events: Iterable[CheckIn],
    weeks: Sequence[WeekWindow],
) -> dict[WeekWindow, dict[EntityId, int]]:
    """
    Count events per week window and item.

    Args:
        events: Check-ins in any order
        weeks: Non-overlapping half-open windows, each with a display label

    Returns:
        {week: {item_id: count}} with every supplied week present, even when
        no event falls in it.
    """
    counts: dict[WeekWindow, dict[EntityId, int]] = {week: {} for week in weeks}
    ordered = sorted(weeks, key=lambda week: week.start)
    starts = [week.start for week in ordered]

    for event in events:
        index = bisect_right(starts, event["occurred_at"]) - 1
        if index < 0:
            continue
        week = ordered[index]
        if not week.contains(event["occurred_at"]):
            continue
        per_item = counts[week]
        per_item[event["item_id"]] = per_item.get(event["item_id"], 0) + 1

    return counts


def total(per_item: dict[EntityId, int]) -> int:
    return sum(per_item.values())
