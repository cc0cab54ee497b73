# SPDX-License-Identifier: MIT

from typing import cast

from rich import box
from rich.console import Console
from rich.table import Table

from recheck.model.check_item import CheckItem
from recheck.model.entity_id import EntityId
from recheck.repository.id_map import ID_MAP_REPO
from recheck.time import CivilTime, datetime_to_display_civil_datetime_str
from recheck.view.views.header import header
from recheck.view.views.util import format_icon


def items_view(report_name: str, items: list[CheckItem]) -> None:
    """Display list of items in a table."""
    header(report_name)

    items_table = Table(box=box.SIMPLE)
    items_table.add_column("id")
    items_table.add_column("")
    items_table.add_column("name")
    items_table.add_column("order")
    items_table.add_column("archived")

    for item in items:
        items_table.add_row(
            str(ID_MAP_REPO.associate_id("items", cast(EntityId, item["id"]))),
            format_icon(item["icon"]),
            item["name"],
            str(item["sort_order"]),
            "yes" if item["archived"] else "",
            style="dim" if item["archived"] else None,
        )

    console = Console()
    console.print(items_table)


def single_item_view(item: CheckItem, civil: CivilTime) -> None:
    """Display detailed view of a single item."""
    header("item")

    item_table = Table(box=box.SIMPLE)
    item_table.add_column("property")
    item_table.add_column("value")

    item_table.add_row(
        "id", str(ID_MAP_REPO.associate_id("items", cast(EntityId, item["id"])))
    )
    item_table.add_row("name", item["name"])
    item_table.add_row("icon", format_icon(item["icon"]))
    item_table.add_row("order", str(item["sort_order"]))
    item_table.add_row("archived", "yes" if item["archived"] else "no")
    item_table.add_row(
        "created", datetime_to_display_civil_datetime_str(item["created"], civil)
    )
    item_table.add_row(
        "updated", datetime_to_display_civil_datetime_str(item["updated"], civil)
    )

    console = Console()
    console.print(item_table)
