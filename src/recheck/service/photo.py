# SPDX-License-Identifier: MIT

import shutil
from pathlib import Path
from typing import Iterable, Optional

import pendulum
from loguru import logger

from recheck import configuration
from recheck.model.check_in import CheckIn
from recheck.model.entity_id import generate_entity_id


def store_photo(source: Path, now: pendulum.DateTime) -> str:
    """
    Copy an image into the photo store and return its reference.

    Raises FileNotFoundError when the source does not exist.
    """
    if not source.is_file():
        raise FileNotFoundError(f"Photo not found: {source}")

    configuration.DATA_PHOTOS_DIR.mkdir(parents=True, exist_ok=True)
    photo_ref = (
        f"{now.in_tz('UTC').format('YYYYMMDDHHmmss')}-{generate_entity_id()}"
        f"{source.suffix.lower()}"
    )
    shutil.copy2(source, configuration.DATA_PHOTOS_DIR / photo_ref)
    logger.info("Stored photo {}", photo_ref)
    return photo_ref


def photo_path(photo_ref: Optional[str]) -> Optional[Path]:
    """The stored file for a reference, or None once it has expired."""
    if photo_ref is None:
        return None
    path = configuration.DATA_PHOTOS_DIR / photo_ref
    if not path.is_file():
        return None
    return path


def latest_photo(events: Iterable[CheckIn]) -> Optional[tuple[CheckIn, Path]]:
    for event in sorted(events, key=lambda e: e["occurred_at"], reverse=True):
        path = photo_path(event["photo_ref"])
        if path is not None:
            return event, path
    return None


def expire_photos(
    events: Iterable[CheckIn],
    now: pendulum.DateTime,
    retention_days: int,
) -> list[str]:
    """
    Delete stored photos kept longer than the retention period.

    Age counts from when the check-in was stored, not from its occurred_at,
    so a photo attached to a backdated check-in gets the full retention.
    The check-ins keep their photo_ref; only the file goes away.

    Returns:
        The references whose files were removed
    """
    cutoff = now.subtract(days=retention_days)
    expired: list[str] = []
    for event in events:
        if event["photo_ref"] is None or event["created"] >= cutoff:
            continue
        path = photo_path(event["photo_ref"])
        if path is None:
            continue
        path.unlink()
        expired.append(event["photo_ref"])

    logger.info("Expired {} photos older than {}", len(expired), cutoff)
    return expired
