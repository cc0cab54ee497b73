# SPDX-License-Identifier: MIT

from typing import Callable, Optional, TypeAlias, TypedDict

import pendulum

from recheck.model.check_in import CheckIn
from recheck.model.check_item import CheckItem
from recheck.model.history import CalendarCell, PeriodKind, SeriesPoint, Summary
from recheck.model.window import Window
from recheck.service.aggregate import aggregate_by_day, count_in_window
from recheck.service.calendar import (
    attach_counts,
    build_cells,
    can_navigate_next,
    parse_month_selector,
)
from recheck.service.series import (
    PERIOD_KINDS,
    build_series,
    history_window,
)
from recheck.time import CivilTime, Clock, now_utc

FetchEvents: TypeAlias = Callable[..., list[CheckIn]]
FetchItems: TypeAlias = Callable[[bool], list[CheckItem]]


class MonthView(TypedDict):
    year: int
    month: int
    today: pendulum.Date
    can_navigate_next: bool
    cells: list[CalendarCell]


class History:
    """
    Builds everything the history screens show from the event and item stores.

    Each method fetches its events once and derives all of its numbers from
    that snapshot. Archived items are always included so past check-ins keep
    their names.
    """

    def __init__(
        self,
        fetch_events: FetchEvents,
        fetch_items: FetchItems,
        civil: CivilTime,
        clock: Clock = now_utc,
    ) -> None:
        self.fetch_events = fetch_events
        self.fetch_items = fetch_items
        self.civil = civil
        self.clock = clock

    def calendar(self, year: int, month: int) -> list[CalendarCell]:
        window = self.civil.month_bounds(year, month)
        events = self.fetch_events(window=window)
        day_aggregates = aggregate_by_day(events, window, self.civil)
        return attach_counts(
            build_cells(year, month),
            year,
            month,
            day_aggregates,
            self.fetch_items(True),
        )

    def month_view(self, selector: Optional[str]) -> MonthView:
        now = self.clock()
        year, month = parse_month_selector(selector, now, self.civil)
        return {
            "year": year,
            "month": month,
            "today": self.civil.today(now),
            "can_navigate_next": can_navigate_next(year, month, now, self.civil),
            "cells": self.calendar(year, month),
        }

    def summary(self) -> Summary:
        now = self.clock()
        last_week = self.civil.week_bounds(-1, now)
        this_week = self.civil.week_bounds(0, now)
        events = self.fetch_events(window=Window(last_week.start, this_week.end))
        return {
            "this_week": count_in_window(events, this_week),
            "last_week": count_in_window(events, last_week),
        }

    def all_series(self) -> dict[PeriodKind, list[SeriesPoint]]:
        """Both series, derived from a single fetch of the history window."""
        now = self.clock()
        events = self.fetch_events(window=history_window(now, self.civil))
        items = self.fetch_items(True)
        return {
            period: build_series(period, events, items, now, self.civil)
            for period in PERIOD_KINDS
        }

    def series(self, period: PeriodKind) -> list[SeriesPoint]:
        return self.all_series()[period]

    def items(self) -> list[CheckItem]:
        return self.fetch_items(True)
