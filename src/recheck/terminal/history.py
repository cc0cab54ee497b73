# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from recheck.model.entity_id import EntityId
from recheck.service.calendar import next_month, previous_month
from recheck.service.series import parse_period
from recheck.terminal.common import get_history, get_real_item_id
from recheck.terminal.custom_typer import AliasedTyperGroup
from recheck.terminal.parse import parse_id_list
from recheck.time import month_str
from recheck.view.views import history as history_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("calendar, c")
def calendar(
    month: Annotated[
        Optional[str],
        typer.Option("--month", "-m", help="YYYY-MM, defaults to the current month"),
    ] = None,
    go_prev: Annotated[
        bool, typer.Option("--prev", "-p", help="show the month before --month")
    ] = False,
    go_next: Annotated[
        bool, typer.Option("--next", "-n", help="show the month after --month")
    ] = False,
    no_days: Annotated[
        bool, typer.Option("--no-days", "-nd", help="hide the per-day breakdown")
    ] = False,
) -> None:
    """Month heatmap with this week / last week totals."""
    history = get_history()
    month_view = history.month_view(month)

    if go_prev or go_next:
        if go_next and not month_view["can_navigate_next"]:
            typer.echo("Cannot go past the current month")
            raise typer.Exit(1)
        year, month_number = (
            previous_month(month_view["year"], month_view["month"])
            if go_prev
            else next_month(month_view["year"], month_view["month"])
        )
        month_view = history.month_view(month_str(year, month_number))

    history_report.calendar_view(month_view, history.summary(), show_days=not no_days)


@app.command("graph, g")
def graph(
    period: Annotated[
        Optional[str],
        typer.Option("--period", "-p", help="daily (30 days) or weekly (12 weeks)"),
    ] = None,
    hide: Annotated[
        Optional[str],
        typer.Option("--hide", "-h", help="item ids to leave out, e.g. 1,3"),
    ] = None,
) -> None:
    """Check counts over time, per item."""
    history = get_history()
    period_kind = parse_period(period)

    hidden: set[EntityId] = set()
    if hide is not None:
        hidden = {get_real_item_id(id) for id in parse_id_list(hide)}

    history_report.series_view(
        period_kind, history.all_series()[period_kind], history.items(), hidden
    )


@app.command("summary, s")
def summary() -> None:
    """Total checks this week compared with last week."""
    history_report.summary_view(get_history().summary())
