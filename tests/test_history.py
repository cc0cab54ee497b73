# SPDX-License-Identifier: MIT

"""Tests for assembling calendar, summary and series from the stores."""

from typing import Optional

import pendulum
import pytest

from recheck.model.window import Window
from recheck.service.history import History
from recheck.service.series import DAILY_POINTS, WEEKLY_POINTS


class FakeStore:
    def __init__(self, events, items):
        self.events = events
        self.items = items
        self.event_fetches: list[Optional[Window]] = []

    def fetch_events(self, item_id=None, window=None):
        self.event_fetches.append(window)
        return [
            event
            for event in self.events
            if (item_id is None or event["item_id"] == item_id)
            and (window is None or window.contains(event["occurred_at"]))
        ]

    def fetch_items(self, include_archived):
        return [item for item in self.items if include_archived or not item["archived"]]


@pytest.fixture
def store(now, civil, make_event, make_item):
    day = civil.civil_midnight(pendulum.date(2025, 3, 10))
    events = [
        make_event("a", day.add(hours=8)),
        make_event("a", day.add(hours=9)),
        make_event("b", day.add(hours=10)),
        make_event("a", civil.week_bounds(-1, now).start),
        make_event("gone", civil.civil_midnight(pendulum.date(2025, 2, 14))),
    ]
    items = [
        make_item("a", "Door", "🔑"),
        make_item("b", "Window", archived=True),
    ]
    return FakeStore(events, items)


@pytest.fixture
def history(store, now, civil):
    return History(store.fetch_events, store.fetch_items, civil, clock=lambda: now)


def test_calendar_scenario(history):
    cells = history.calendar(2025, 3)
    cell = next(c for c in cells if c["date"] == pendulum.date(2025, 3, 10))

    assert cell["total_count"] == 3
    assert [(c["name"], c["count"]) for c in cell["per_item"]] == [
        ("Door", 2),
        ("Window", 1),
    ]


def test_calendar_resolves_deleted_items(history):
    cells = history.calendar(2025, 2)
    cell = next(c for c in cells if c["date"] == pendulum.date(2025, 2, 14))

    assert cell["per_item"][0]["name"] == "(deleted)"


def test_month_view_falls_back_on_bad_selector(history):
    month_view = history.month_view("not-a-month")

    assert (month_view["year"], month_view["month"]) == (2025, 3)
    assert month_view["today"] == pendulum.date(2025, 3, 12)
    assert month_view["can_navigate_next"] is False
    assert len(month_view["cells"]) == 42


def test_month_view_for_past_month(history):
    month_view = history.month_view("2025-02")

    assert month_view["can_navigate_next"] is True
    assert len(month_view["cells"]) == 35


def test_summary(history):
    assert history.summary() == {"this_week": 3, "last_week": 1}


def test_summary_without_events(now, civil):
    store = FakeStore([], [])
    history = History(store.fetch_events, store.fetch_items, civil, clock=lambda: now)

    assert history.summary() == {"this_week": 0, "last_week": 0}


def test_all_series_fetches_events_once(history, store):
    series = history.all_series()

    assert len(series["daily"]) == DAILY_POINTS
    assert len(series["weekly"]) == WEEKLY_POINTS
    assert len(store.event_fetches) == 1
    assert series["weekly"][-1]["per_item"] == {"a": 2, "b": 1}
    assert series["weekly"][-2]["per_item"] == {"a": 1, "b": 0}


def test_series_includes_archived_items(history):
    points = history.series("daily")

    assert points[-3]["per_item"] == {"a": 2, "b": 1}


def test_series_fetches_the_history_window_once(history, store, now, civil):
    weekly = history.series("weekly")

    assert len(weekly) == WEEKLY_POINTS
    assert store.event_fetches == [
        Window(civil.week_bounds(-11, now).start, civil.week_bounds(0, now).end)
    ]


def test_summary_counts_events_on_the_week_boundary(now, civil, make_event):
    boundary = civil.week_bounds(0, now).start
    store = FakeStore(
        [make_event("a", boundary), make_event("a", boundary.subtract(microseconds=1))],
        [],
    )
    history = History(store.fetch_events, store.fetch_items, civil, clock=lambda: now)

    assert history.summary() == {"this_week": 1, "last_week": 1}
