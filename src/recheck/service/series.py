# SPDX-License-Identifier: MIT

from typing import Iterable

import pendulum
from loguru import logger

from recheck.model.check_in import CheckIn
from recheck.model.check_item import CheckItem
from recheck.model.history import PeriodKind, SeriesPoint
from recheck.model.window import WeekWindow, Window
from recheck.service.aggregate import aggregate_by_day, aggregate_by_week
from recheck.time import CivilTime

DAILY_POINTS = 30
WEEKLY_POINTS = 12

THIS_WEEK_LABEL = "this week"

PERIOD_KINDS: tuple[PeriodKind, ...] = ("daily", "weekly")


def daily_label(date: pendulum.Date) -> str:
    return f"{date.month}/{date.day}"


def week_label(start: pendulum.Date) -> str:
    return f"{start.month}/{start.day}~"


def history_window(now: pendulum.DateTime, civil: CivilTime) -> Window:
    """
    The range both series are drawn from: the whole current week plus the
    eleven weeks before it, which also covers the last thirty days.
    """
    return Window(
        civil.week_bounds(-(WEEKLY_POINTS - 1), now).start,
        civil.week_bounds(0, now).end,
    )


def daily_windows(now: pendulum.DateTime, civil: CivilTime) -> list[pendulum.Date]:
    today = civil.today(now)
    return [today.subtract(days=i) for i in range(DAILY_POINTS - 1, -1, -1)]


def weekly_windows(now: pendulum.DateTime, civil: CivilTime) -> list[WeekWindow]:
    weeks: list[WeekWindow] = []
    for i in range(WEEKLY_POINTS - 1, -1, -1):
        start, end = civil.week_bounds(-i, now)
        if i == 0:
            label = THIS_WEEK_LABEL
        else:
            label = week_label(civil.to_civil_date(start))
        weeks.append(WeekWindow(start, end, label))
    return weeks


def build_daily_series(
    events: Iterable[CheckIn],
    items: Iterable[CheckItem],
    now: pendulum.DateTime,
    civil: CivilTime,
) -> list[SeriesPoint]:
    """
    One point per civil day for the last thirty days, oldest first, ending
    with today. Every item gets a count on every point, zero included.
    """
    dates = daily_windows(now, civil)
    window = Window(
        civil.day_bounds(dates[0]).start,
        civil.day_bounds(dates[-1]).end,
    )
    counts = aggregate_by_day(events, window, civil)
    item_ids = [item["id"] for item in items if item["id"] is not None]

    points: list[SeriesPoint] = []
    for date in dates:
        per_day = counts.get(date, {})
        points.append(
            {
                "label": daily_label(date),
                "per_item": {item_id: per_day.get(item_id, 0) for item_id in item_ids},
            }
        )
    return points


def build_weekly_series(
    events: Iterable[CheckIn],
    items: Iterable[CheckItem],
    now: pendulum.DateTime,
    civil: CivilTime,
) -> list[SeriesPoint]:
    """
    One point per Monday-start civil week for the last twelve weeks, oldest
    first. The newest point is labelled "this week", the others by the date
    their week starts.
    """
    weeks = weekly_windows(now, civil)
    counts = aggregate_by_week(events, weeks)
    item_ids = [item["id"] for item in items if item["id"] is not None]

    return [
        {
            "label": week.label,
            "per_item": {
                item_id: counts[week].get(item_id, 0) for item_id in item_ids
            },
        }
        for week in weeks
    ]


def build_series(
    period: PeriodKind,
    events: Iterable[CheckIn],
    items: Iterable[CheckItem],
    now: pendulum.DateTime,
    civil: CivilTime,
) -> list[SeriesPoint]:
    logger.debug("Building {} series", period)
    if period == "weekly":
        return build_weekly_series(events, items, now, civil)
    return build_daily_series(events, items, now, civil)


def parse_period(period: str | None) -> PeriodKind:
    """Unknown or missing period selectors fall back to daily."""
    if period == "weekly":
        return "weekly"
    if period is not None and period != "daily":
        logger.warning("Invalid period {!r}, using daily", period)
    return "daily"
