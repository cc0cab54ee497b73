# SPDX-License-Identifier: MIT

"""End to end tests of the command line interface against a temporary store."""

import pendulum
import pytest
from typer.testing import CliRunner

from recheck.repository.check_in import CHECK_IN_REPO
from recheck.repository.check_item import CHECK_ITEM_REPO
from recheck.terminal import common
from recheck.terminal.app import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def pinned_clock(now, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(common, "clock", lambda: now)


def set_clock(monkeypatch: pytest.MonkeyPatch, instant: pendulum.DateTime) -> None:
    monkeypatch.setattr(common, "clock", lambda: instant)


@pytest.fixture
def door() -> None:
    result = runner.invoke(app, ["item", "add", "Front door", "--icon", "🔑"])
    assert result.exit_code == 0, result.output


def test_item_add_shows_item(door):
    items = CHECK_ITEM_REPO.fetch_items(include_archived=False)

    assert [item["name"] for item in items] == ["Front door"]
    assert items[0]["icon"] == "🔑"


def test_item_add_rejects_blank_name():
    result = runner.invoke(app, ["item", "add", "   "])

    assert result.exit_code == 1
    assert "must not be empty" in result.output


def test_check_counts_up_today(door):
    first = runner.invoke(app, ["check", "1"])
    assert first.exit_code == 0, first.output
    assert "1 today" in first.output

    second = runner.invoke(app, ["c", "1"])
    assert second.exit_code == 0, second.output
    assert "2 today" in second.output

    assert len(CHECK_IN_REPO.fetch_events()) == 2


def test_check_in_the_past_does_not_count_today(door):
    result = runner.invoke(app, ["check", "1", "--at=-3"])

    assert result.exit_code == 0, result.output
    assert "0 today" in result.output
    assert len(CHECK_IN_REPO.fetch_events()) == 1


def test_check_unknown_item():
    result = runner.invoke(app, ["check", "7"])

    assert result.exit_code == 1
    assert "Unknown item id: 7" in result.output


def test_check_with_missing_photo(door, tmp_path):
    result = runner.invoke(app, ["check", "1", "--photo", str(tmp_path / "nope.jpg")])

    assert result.exit_code == 1
    assert CHECK_IN_REPO.fetch_events() == []


def test_today_lists_active_items(door):
    runner.invoke(app, ["check", "1"])

    result = runner.invoke(app, ["today"])

    assert result.exit_code == 0, result.output
    assert "Front door" in result.output


def test_detail_without_photo(door):
    runner.invoke(app, ["check", "1"])

    result = runner.invoke(app, ["detail", "1"])

    assert result.exit_code == 0, result.output
    assert "no photo yet" in result.output
    assert "1 checks today" in result.output


def test_history_calendar_and_summary(door):
    runner.invoke(app, ["check", "1"])

    result = runner.invoke(app, ["history", "calendar"])

    assert result.exit_code == 0, result.output
    assert "this week" in result.output
    assert "last week" in result.output


def test_history_calendar_cannot_go_past_current_month():
    result = runner.invoke(app, ["history", "calendar", "--next"])

    assert result.exit_code == 1
    assert "Cannot go past the current month" in result.output


def test_history_calendar_previous_month():
    result = runner.invoke(app, ["history", "calendar", "--month", "2024-01", "--prev"])

    assert result.exit_code == 0, result.output
    assert "2023-12" in result.output


def test_history_graph_weekly(door):
    runner.invoke(app, ["check", "1"])

    result = runner.invoke(app, ["h", "graph", "--period", "weekly"])

    assert result.exit_code == 0, result.output
    assert "this week" in result.output
    assert "Front door" in result.output


def test_history_graph_hides_items(door):
    result = runner.invoke(app, ["history", "graph", "--hide", "1"])

    assert result.exit_code == 0, result.output
    assert "Front door" not in result.output


def test_archive_hides_item_from_list(door):
    result = runner.invoke(app, ["item", "archive", "1"])
    assert result.exit_code == 0, result.output

    listed = runner.invoke(app, ["item", "list"])
    assert "Front door" not in listed.output

    listed = runner.invoke(app, ["item", "list", "--archived"])
    assert "Front door" in listed.output


def test_delete_keeps_check_ins(door):
    runner.invoke(app, ["check", "1"])

    result = runner.invoke(app, ["item", "delete", "1", "--yes"])

    assert result.exit_code == 0, result.output
    assert CHECK_ITEM_REPO.fetch_items(include_archived=True) == []
    assert len(CHECK_IN_REPO.fetch_events()) == 1


def test_config_set_rejects_bad_offset():
    result = runner.invoke(app, ["config", "set", "--offset", "20"])

    assert result.exit_code == 1
    assert "between -14 and 14" in result.output


def test_photo_cleanup_without_photos():
    result = runner.invoke(app, ["photo", "cleanup"])

    assert result.exit_code == 0, result.output
    assert "Removed 0 photo(s) older than 30 days" in result.output


def test_check_rejects_future_moments(door):
    result = runner.invoke(app, ["check", "1", "--at", "2025-03-13 09:00"])

    assert result.exit_code != 0
    assert CHECK_IN_REPO.fetch_events() == []


def test_detail_shows_photo_from_an_earlier_day(door, tmp_path):
    image = tmp_path / "door.jpg"
    image.write_bytes(b"\xff\xd8\xff")
    runner.invoke(app, ["check", "1", "--at=-2", "--photo", str(image)])

    result = runner.invoke(app, ["detail", "1"])

    assert result.exit_code == 0, result.output
    assert "latest photo" in result.output
    assert "0 checks today" in result.output


def test_month_rollover_in_civil_time(door, monkeypatch):
    # 2025-03-31 23:59 in UTC+9
    set_clock(monkeypatch, pendulum.datetime(2025, 3, 31, 14, 59, tz="UTC"))
    assert "1 today" in runner.invoke(app, ["check", "1"]).output

    result = runner.invoke(app, ["history", "calendar", "--no-days"])
    assert "2025-03" in result.output
    result = runner.invoke(app, ["history", "calendar", "--next"])
    assert result.exit_code == 1
    assert "Cannot go past the current month" in result.output

    # One minute later it is April in UTC+9
    set_clock(monkeypatch, pendulum.datetime(2025, 3, 31, 15, 0, tz="UTC"))
    assert "1 today" in runner.invoke(app, ["check", "1"]).output

    result = runner.invoke(app, ["history", "calendar", "--no-days"])
    assert result.exit_code == 0, result.output
    assert "2025-04" in result.output
    result = runner.invoke(app, ["history", "calendar", "--month", "2025-03", "--next"])
    assert result.exit_code == 0, result.output
    assert "2025-04" in result.output
