# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from recheck.model.check_item import CheckItem
from recheck.model.entity_id import EntityId
from recheck.model.history import CalendarCell, PeriodKind, SeriesPoint, Summary
from recheck.service.history import MonthView
from recheck.service.series import THIS_WEEK_LABEL
from recheck.view.views.header import header
from recheck.view.views.util import format_difference, format_icon, heatmap_style

WEEKDAY_LABELS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


def summary_view(summary: Summary) -> None:
    """
    this week   12
    last week    9  (+3)
    """
    console = Console()
    difference = summary["this_week"] - summary["last_week"]

    summary_table = Table(box=box.ROUNDED, show_header=False)
    summary_table.add_column("period")
    summary_table.add_column("count", justify="right")
    summary_table.add_column("difference", style="dim")
    summary_table.add_row(
        "this week", f"[bold]{summary['this_week']}[/bold]", ""
    )
    summary_table.add_row(
        "last week",
        str(summary["last_week"]),
        f"({format_difference(difference)})" if difference != 0 else "",
    )
    console.print(summary_table)


def __cell_text(cell: CalendarCell, is_today: bool) -> Text:
    if cell["date"] is None:
        return Text("")

    count = cell["total_count"]
    text = Text(f"{cell['date'].day:>2}", style=heatmap_style(count))
    if count > 0:
        text.append(f" {count:>2}", style=heatmap_style(count) + " bold")
    else:
        text.append("   ", style=heatmap_style(count))
    if is_today:
        text.stylize("underline")
    return text


def calendar_view(
    month_view: MonthView,
    summary: Optional[Summary] = None,
    show_days: bool = True,
) -> None:
    header(f"history {month_view['year']}-{month_view['month']:02d}")

    if summary is not None:
        summary_view(summary)

    calendar_table = Table(
        box=box.SIMPLE,
        title=f"{month_view['year']}-{month_view['month']:02d}",
        caption=None if month_view["can_navigate_next"] else "current month",
    )
    for label in WEEKDAY_LABELS:
        calendar_table.add_column(label, justify="center")

    cells = month_view["cells"]
    for row_start in range(0, len(cells), 7):
        calendar_table.add_row(
            *[
                __cell_text(cell, cell["date"] == month_view["today"])
                for cell in cells[row_start : row_start + 7]
            ]
        )

    console = Console()
    console.print(calendar_table)

    if show_days:
        day_breakdown_view([cell for cell in cells if cell["total_count"] > 0])


def day_breakdown_view(cells: list[CalendarCell]) -> None:
    """Per-day list of what was checked, busiest item first."""
    if len(cells) == 0:
        return

    days_table = Table(box=box.SIMPLE)
    days_table.add_column("date")
    days_table.add_column("")
    days_table.add_column("item")
    days_table.add_column("count", justify="right")

    for cell in cells:
        if cell["date"] is None:
            continue
        date_label = cell["date"].format("MM-DD ddd")
        for item_count in cell["per_item"]:
            days_table.add_row(
                date_label,
                format_icon(item_count["icon"]),
                item_count["name"],
                str(item_count["count"]),
            )
            date_label = ""
        days_table.add_row("", "", "[dim]total[/dim]", f"[bold]{cell['total_count']}[/bold]")

    console = Console()
    console.print(days_table)


def series_view(
    period: PeriodKind,
    points: list[SeriesPoint],
    items: list[CheckItem],
    hidden: Optional[set[EntityId]] = None,
) -> None:
    """
    Series as a table: one row per point, one column per visible item.

    hidden holds the ids of items the reader switched off.
    """
    header(f"history {period}")
    hidden = hidden or set()
    visible = [item for item in items if item["id"] not in hidden]

    series_table = Table(box=box.SIMPLE)
    series_table.add_column("week" if period == "weekly" else "date")
    for item in visible:
        series_table.add_column(
            f"{format_icon(item['icon'])} {item['name']}", justify="right"
        )
    series_table.add_column("total", justify="right")

    for point in points:
        counts = [point["per_item"].get(item["id"], 0) for item in visible]  # type: ignore[arg-type]
        is_current = point["label"] == THIS_WEEK_LABEL or point is points[-1]
        series_table.add_row(
            point["label"],
            *[str(count) if count > 0 else "[dim]0[/dim]" for count in counts],
            str(sum(counts)),
            style="bold" if is_current else None,
        )

    console = Console()
    console.print(series_table)
