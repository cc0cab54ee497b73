# SPDX-License-Identifier: MIT

import pendulum
import typer

from recheck.model.check_item import CheckItem
from recheck.model.entity_id import EntityId
from recheck.repository.check_in import CHECK_IN_REPO
from recheck.repository.check_item import CHECK_ITEM_REPO, ItemNotFoundError
from recheck.repository.configuration import CONFIGURATION_REPO
from recheck.repository.id_map import ID_MAP_REPO
from recheck.service.history import History
from recheck.time import CivilTime, Clock, now_utc

# Source of "now" for every command
clock: Clock = now_utc


def current_time() -> pendulum.DateTime:
    return clock()


def get_civil_time() -> CivilTime:
    config = CONFIGURATION_REPO.get_config()
    return CivilTime(config["civil_utc_offset_hours"])


def get_history() -> History:
    return History(
        fetch_events=CHECK_IN_REPO.fetch_events,
        fetch_items=CHECK_ITEM_REPO.fetch_items,
        civil=get_civil_time(),
        clock=current_time,
    )


def get_real_item_id(synthetic_id: int) -> EntityId:
    try:
        return ID_MAP_REPO.get_real_id("items", synthetic_id)
    except KeyError:
        typer.echo(f"Unknown item id: {synthetic_id}. Run 'recheck item list' first.")
        raise typer.Exit(1)


def get_item_by_synthetic_id(synthetic_id: int) -> CheckItem:
    real_id = get_real_item_id(synthetic_id)
    try:
        return CHECK_ITEM_REPO.get_item(real_id)
    except ItemNotFoundError:
        typer.echo(f"Item {synthetic_id} no longer exists.")
        raise typer.Exit(1)
