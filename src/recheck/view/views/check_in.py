# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, cast

from rich import box
from rich.console import Console
from rich.table import Table

from recheck.model.check_in import CheckIn
from recheck.model.check_item import CheckItem
from recheck.model.entity_id import EntityId
from recheck.repository.id_map import ID_MAP_REPO
from recheck.service.photo import photo_path
from recheck.time import CivilTime, datetime_to_display_civil_time_str
from recheck.view.views.header import header
from recheck.view.views.util import format_icon


def recorded_view(item: CheckItem, display_count: int) -> None:
    console = Console()
    console.print(
        f" {format_icon(item['icon'])} [bold]{item['name']}[/bold]"
        f"  [sky_blue1]{display_count}[/sky_blue1] today"
    )


def today_view(items: list[CheckItem], counts: dict[EntityId, int]) -> None:
    """
    Active items with how often each was checked today.

     id     name          today
    ────────────────────────────
     1   🔑 Front door     3
     2   🔥 Stove          0
    """
    header("today")

    if len(items) == 0:
        console = Console()
        console.print(" No items yet. Add one with [bold]recheck item add NAME[/bold].")
        return

    today_table = Table(box=box.SIMPLE)
    today_table.add_column("id")
    today_table.add_column("")
    today_table.add_column("name")
    today_table.add_column("today", justify="right")

    for item in items:
        count = counts.get(cast(EntityId, item["id"]), 0)
        today_table.add_row(
            str(ID_MAP_REPO.associate_id("items", cast(EntityId, item["id"]))),
            format_icon(item["icon"]),
            item["name"],
            str(count),
            style=None if count > 0 else "dim",
        )

    console = Console()
    console.print(today_table)


def item_detail_view(
    item: CheckItem,
    check_ins: list[CheckIn],
    latest_photo: Optional[Path],
    civil: CivilTime,
) -> None:
    header("detail")

    console = Console()
    console.print(f" {format_icon(item['icon'])} [bold]{item['name']}[/bold]")
    if latest_photo is not None:
        console.print(f" latest photo: {latest_photo}")
    else:
        console.print(" [dim]no photo yet[/dim]")
    console.print(f" [bold]{len(check_ins)}[/bold] checks today")

    if len(check_ins) == 0:
        return

    check_ins_table = Table(box=box.SIMPLE)
    check_ins_table.add_column("id")
    check_ins_table.add_column("time")
    check_ins_table.add_column("photo")

    for check_in in sorted(check_ins, key=lambda c: c["occurred_at"], reverse=True):
        if check_in["photo_ref"] is None:
            photo = ""
        elif photo_path(check_in["photo_ref"]) is None:
            photo = "[dim]expired[/dim]"
        else:
            photo = "yes"
        check_ins_table.add_row(
            str(
                ID_MAP_REPO.associate_id(
                    "check_ins", cast(EntityId, check_in["id"])
                )
            ),
            datetime_to_display_civil_time_str(check_in["occurred_at"], civil),
            photo,
        )

    console.print(check_ins_table)
