# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional, cast

import typer

from recheck import state as app_state
from recheck.model.entity_id import EntityId
from recheck.repository.check_in import CHECK_IN_REPO
from recheck.repository.check_item import CHECK_ITEM_REPO
from recheck.repository.id_map import ID_MAP_REPO
from recheck.service.aggregate import filter_window
from recheck.service.check_in import optimistic_today_count, record, today_counts
from recheck.service.photo import latest_photo, store_photo
from recheck.terminal.common import (
    current_time,
    get_civil_time,
    get_item_by_synthetic_id,
)
from recheck.terminal.parse import parse_datetime
from recheck.view.views import check_in as check_in_report


def check(
    id: int,
    at: Annotated[
        Optional[str],
        typer.Option(
            "--at",
            "-a",
            help="when it was checked: now, HH:mm, YYYY-MM-DD HH:mm, -1",
        ),
    ] = None,
    photo: Annotated[
        Optional[Path],
        typer.Option("--photo", "-p", help="image to attach to this check"),
    ] = None,
) -> None:
    """Record that an item was just checked."""
    civil = get_civil_time()
    now = current_time()

    item = get_item_by_synthetic_id(id)
    item_id = cast(EntityId, item["id"])
    occurred_at = parse_datetime(at, now, civil) or now

    photo_ref = None
    if photo is not None:
        try:
            photo_ref = store_photo(photo, now)
        except FileNotFoundError as e:
            typer.echo(str(e))
            raise typer.Exit(1)

    # Today's stored count before this submission lands
    persisted = today_counts(CHECK_IN_REPO.fetch_events(item_id=item_id), now, civil)
    CHECK_IN_REPO.save_new_check_in(record(item_id, occurred_at, photo_ref))

    counts_today = civil.today(occurred_at) == civil.today(now)
    check_in_report.recorded_view(
        item,
        optimistic_today_count(persisted.get(item_id, 0), 1 if counts_today else 0),
    )


def today() -> None:
    """Show active items and how many times each was checked today."""
    civil = get_civil_time()
    now = current_time()

    if app_state.get_clear_ids():
        ID_MAP_REPO.clear_ids()

    items = CHECK_ITEM_REPO.fetch_items(include_archived=False)
    today_window = civil.day_bounds(civil.today(now))
    counts = today_counts(CHECK_IN_REPO.fetch_events(window=today_window), now, civil)
    check_in_report.today_view(items, counts)


def detail(id: int) -> None:
    """Show today's checks for one item and its latest photo."""
    civil = get_civil_time()
    now = current_time()

    item = get_item_by_synthetic_id(id)
    check_ins = CHECK_IN_REPO.fetch_events(item_id=cast(EntityId, item["id"]))
    latest = latest_photo(check_ins)

    check_in_report.item_detail_view(
        item,
        filter_window(check_ins, civil.day_bounds(civil.today(now))),
        latest[1] if latest is not None else None,
        civil,
    )
