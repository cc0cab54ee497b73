# SPDX-License-Identifier: MIT

"""Tests for recording check-ins and the same-day counts."""

import pendulum

from recheck.model.entity_type import EntityType
from recheck.service.check_in import optimistic_today_count, record, today_counts


def test_record_builds_a_new_event():
    occurred_at = pendulum.datetime(2025, 3, 12, 12, tz="Asia/Tokyo")

    event = record("a", occurred_at, "photo.jpg")

    assert event["id"] is None
    assert event["entity_type"] == EntityType.CHECK_IN
    assert event["item_id"] == "a"
    assert event["occurred_at"] == occurred_at
    assert event["occurred_at"].timezone_name == "UTC"
    assert event["photo_ref"] == "photo.jpg"


def test_record_never_deduplicates(now):
    first = record("a", now)
    second = record("a", now)

    assert first["item_id"] == second["item_id"]
    assert first["occurred_at"] == second["occurred_at"]
    assert first is not second


def test_today_counts_uses_civil_day(now, civil, make_event):
    today_midnight = civil.civil_midnight(civil.today(now))
    events = [
        make_event("a", today_midnight),
        make_event("a", now),
        make_event("b", now),
        make_event("a", today_midnight.subtract(seconds=1)),
    ]

    assert today_counts(events, now, civil) == {"a": 2, "b": 1}
    assert today_counts([], now, civil) == {}


def test_optimistic_today_count():
    assert optimistic_today_count(3, 0) == 3
    assert optimistic_today_count(3, 1) == 4
    assert optimistic_today_count(0, 2) == 2
    assert optimistic_today_count(3, -1) == 3
