# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from recheck.terminal import configuration, history, item, photo
from recheck.terminal.check import check, detail, today
from recheck.terminal.custom_typer import OrderedAliasedTyperGroup
from recheck import state as app_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="recheck - count how often you double-check things",
    no_args_is_help=True,
)
app.command(name="check, c", no_args_is_help=True)(check)
app.command(name="today, t")(today)
app.command(name="detail, d", no_args_is_help=True)(detail)
app.add_typer(item.app, name="item, i")
app.add_typer(history.app, name="history, h")
app.add_typer(photo.app, name="photo, p")
app.add_typer(configuration.app, name="config, cf")


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
) -> None:
    """
    recheck - count how often you double-check things

    Global options that apply to all commands.
    """
    if no_header:
        app_state.set_show_header(False)


def run() -> None:
    app()
