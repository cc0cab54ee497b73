# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from recheck.repository.check_in import CHECK_IN_REPO
from recheck.repository.configuration import CONFIGURATION_REPO
from recheck.service.photo import expire_photos
from recheck.terminal.common import current_time
from recheck.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("cleanup, c")
def cleanup(
    days: Annotated[
        Optional[int],
        typer.Option("--days", "-d", help="override the configured retention"),
    ] = None,
) -> None:
    """Delete photos older than the retention period."""
    retention_days = (
        days if days is not None else CONFIGURATION_REPO.get_config()["photo_retention_days"]
    )
    expired = expire_photos(
        CHECK_IN_REPO.get_all_check_ins(), current_time(), retention_days
    )
    typer.echo(f"Removed {len(expired)} photo(s) older than {retention_days} days")
