# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich import box
from rich.console import Console
from rich.table import Table

from recheck.repository.configuration import CONFIGURATION_REPO
from recheck.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

LOG_LEVELS = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


@app.command("show, s")
def show() -> None:
    """Show the current configuration."""
    config_table = Table(box=box.SIMPLE)
    config_table.add_column("key")
    config_table.add_column("value")
    for key, value in CONFIGURATION_REPO.get_config().items():
        config_table.add_row(key, "" if value is None else str(value))

    console = Console()
    console.print(config_table)


@app.command("set")
def set_config(
    offset: Annotated[
        Optional[float],
        typer.Option("--offset", "-o", help="civil UTC offset in hours, e.g. 9 or -5.5"),
    ] = None,
    retention: Annotated[
        Optional[int],
        typer.Option("--retention", "-r", help="days to keep photos"),
    ] = None,
    log_level: Annotated[Optional[str], typer.Option("--log-level", "-l")] = None,
    data_path: Annotated[Optional[str], typer.Option("--data-path", "-dp")] = None,
    remove_data_path: Annotated[bool, typer.Option("--remove-data-path")] = False,
    show_header: Annotated[
        Optional[bool], typer.Option("--show-header/--hide-header")
    ] = None,
    clear_ids_on_view: Annotated[
        Optional[bool], typer.Option("--clear-ids/--keep-ids")
    ] = None,
) -> None:
    """Change configuration values."""
    if offset is not None and not -14 <= offset <= 14:
        typer.echo(f"Offset must be between -14 and 14 hours, got {offset}")
        raise typer.Exit(1)
    if retention is not None and retention < 0:
        typer.echo(f"Retention must not be negative, got {retention}")
        raise typer.Exit(1)
    if log_level is not None and log_level.upper() not in LOG_LEVELS:
        typer.echo(f"Invalid log level: {log_level}. Valid options: {', '.join(LOG_LEVELS)}")
        raise typer.Exit(1)

    CONFIGURATION_REPO.update_config(
        civil_utc_offset_hours=offset,
        show_header=show_header,
        data_path=data_path,
        remove_data_path=remove_data_path,
        photo_retention_days=retention,
        log_level=log_level,
        clear_ids_on_view=clear_ids_on_view,
    )
    show()
