# SPDX-License-Identifier: MIT

from typing import Annotated, Optional, cast

import typer

from recheck import state as app_state
from recheck.model.entity_id import EntityId
from recheck.repository.check_item import CHECK_ITEM_REPO
from recheck.repository.id_map import ID_MAP_REPO
from recheck.template.check_item import get_check_item_template
from recheck.terminal.common import get_civil_time, get_item_by_synthetic_id
from recheck.terminal.custom_typer import AliasedTyperGroup
from recheck.terminal.parse import parse_id_list
from recheck.view.views import item as item_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("add, a", no_args_is_help=True)
def add(
    name: str,
    icon: Annotated[
        Optional[str],
        typer.Option("--icon", "-i", help="single emoji shown next to the name"),
    ] = None,
) -> None:
    """Create a new item to check."""
    name = name.strip()
    if not name:
        typer.echo("Item name must not be empty")
        raise typer.Exit(1)

    item = get_check_item_template()
    item["name"] = name
    item["icon"] = icon

    id = CHECK_ITEM_REPO.save_new_item(item)

    item_report.single_item_view(CHECK_ITEM_REPO.get_item(id), get_civil_time())


@app.command("list, ls")
def list_items(
    archived: Annotated[
        bool, typer.Option("--archived", "-a", help="include archived items")
    ] = False,
) -> None:
    """List items in their display order."""
    if app_state.get_clear_ids():
        ID_MAP_REPO.clear_ids()

    items = CHECK_ITEM_REPO.fetch_items(include_archived=archived)
    item_report.items_view("items", items)


@app.command("modify, m", no_args_is_help=True)
def modify(
    id: int,
    name: Annotated[Optional[str], typer.Option("--name", "-n")] = None,
    icon: Annotated[Optional[str], typer.Option("--icon", "-i")] = None,
    remove_icon: Annotated[bool, typer.Option("--remove-icon", "-ri")] = False,
) -> None:
    """Rename an item or change its icon."""
    item = get_item_by_synthetic_id(id)
    item_id = cast(EntityId, item["id"])

    CHECK_ITEM_REPO.modify_item(
        item_id,
        name=name.strip() if name is not None else None,
        icon=icon,
        remove_icon=remove_icon,
    )

    item_report.single_item_view(CHECK_ITEM_REPO.get_item(item_id), get_civil_time())


@app.command("move, mv", no_args_is_help=True)
def move(id: int, position: int) -> None:
    """Move an item to a 1-based position in the list."""
    item = get_item_by_synthetic_id(id)
    if item["archived"]:
        typer.echo(f"Item {id} is archived; unarchive it before moving it.")
        raise typer.Exit(1)

    CHECK_ITEM_REPO.move_item(cast(EntityId, item["id"]), position - 1)

    item_report.items_view("items", CHECK_ITEM_REPO.fetch_items(include_archived=False))


def __set_archived(id: str, archived: bool) -> None:
    for synthetic_id in parse_id_list(id):
        item = get_item_by_synthetic_id(synthetic_id)
        CHECK_ITEM_REPO.modify_item(cast(EntityId, item["id"]), archived=archived)

    item_report.items_view("items", CHECK_ITEM_REPO.fetch_items(include_archived=True))


@app.command("archive, ar", no_args_is_help=True)
def archive(id: str) -> None:
    """Hide items from the home list; their history keeps their names."""
    __set_archived(id, True)


@app.command("unarchive, ua", no_args_is_help=True)
def unarchive(id: str) -> None:
    """Bring archived items back to the home list."""
    __set_archived(id, False)


@app.command("delete, d", no_args_is_help=True)
def delete(
    id: str,
    yes: Annotated[bool, typer.Option("--yes", "-y", help="skip confirmation")] = False,
) -> None:
    """Delete items permanently. Their check-ins stay and show as deleted."""
    items = [get_item_by_synthetic_id(synthetic_id) for synthetic_id in parse_id_list(id)]

    if not yes:
        names = ", ".join(item["name"] for item in items)
        typer.confirm(f"Permanently delete {names}?", abort=True)

    for item in items:
        CHECK_ITEM_REPO.delete_item(cast(EntityId, item["id"]))

    item_report.items_view("items", CHECK_ITEM_REPO.fetch_items(include_archived=True))
