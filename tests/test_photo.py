# SPDX-License-Identifier: MIT

"""Tests for storing, finding and expiring check-in photos."""

from pathlib import Path

import pytest

from recheck import configuration
from recheck.service.photo import expire_photos, latest_photo, photo_path, store_photo


@pytest.fixture
def image(tmp_path: Path) -> Path:
    path = tmp_path / "door.JPG"
    path.write_bytes(b"\xff\xd8\xff")
    return path


def test_store_photo_copies_into_store(image, now):
    photo_ref = store_photo(image, now)

    assert photo_ref.startswith("20250312030000-")
    assert photo_ref.endswith(".jpg")
    stored = photo_path(photo_ref)
    assert stored is not None
    assert stored.parent == configuration.DATA_PHOTOS_DIR
    assert stored.read_bytes() == image.read_bytes()
    assert image.is_file()


def test_store_missing_photo_raises(tmp_path, now):
    with pytest.raises(FileNotFoundError):
        store_photo(tmp_path / "missing.png", now)


def test_photo_path_for_unknown_reference():
    assert photo_path(None) is None
    assert photo_path("never-stored.jpg") is None


def test_latest_photo_picks_newest_existing(image, now, make_event):
    old_ref = store_photo(image, now.subtract(days=2))
    new_ref = store_photo(image, now)
    events = [
        make_event("a", now.subtract(days=2), old_ref),
        make_event("a", now.add(minutes=1)),
        make_event("a", now, new_ref),
        make_event("a", now.subtract(days=1), "expired.jpg"),
    ]

    latest = latest_photo(events)

    assert latest is not None
    assert latest[0]["photo_ref"] == new_ref
    assert latest[1] == photo_path(new_ref)
    assert latest_photo([make_event("a", now)]) is None


def test_expire_photos_removes_only_old_files(image, now, make_event):
    old_ref = store_photo(image, now.subtract(days=31))
    recent_ref = store_photo(image, now.subtract(days=3))
    events = [
        make_event("a", now.subtract(days=31), old_ref),
        make_event("a", now.subtract(days=3), recent_ref),
        make_event("a", now.subtract(days=40)),
    ]

    assert expire_photos(events, now, 30) == [old_ref]
    assert photo_path(old_ref) is None
    assert photo_path(recent_ref) is not None
    assert events[0]["photo_ref"] == old_ref

    # Already gone
    assert expire_photos(events, now, 30) == []


def test_backdated_check_in_keeps_its_photo(image, now, make_event):
    photo_ref = store_photo(image, now)
    event = make_event("a", now.subtract(days=40), photo_ref)
    event["created"] = now

    assert expire_photos([event], now, 30) == []
    assert photo_path(photo_ref) is not None

    assert expire_photos([event], now.add(days=31), 30) == [photo_ref]
    assert photo_path(photo_ref) is None
