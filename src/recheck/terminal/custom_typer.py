# SPDX-License-Identifier: MIT

import re
from typing import Optional

import click
import typer.core

ALIAS_SEPARATOR = re.compile(r"\s*,\s*")


def command_aliases(registered_name: str) -> list[str]:
    """Split "item, i" into ["item", "i"]."""
    return ALIAS_SEPARATOR.split(registered_name)


class AliasedTyperGroup(typer.core.TyperGroup):
    """
    Group whose commands are registered as "name, alias" and can be invoked
    by any of the comma separated names.
    """

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        for registered_name, command in self.commands.items():
            if cmd_name in command_aliases(registered_name):
                return command
        return super().get_command(ctx, cmd_name)


class OrderedAliasedTyperGroup(AliasedTyperGroup):
    """Top level group: help lists the everyday commands first."""

    command_order = ["check", "today", "detail", "item", "history", "photo", "config"]

    def list_commands(self, ctx: click.Context) -> list[str]:
        def position(registered_name: str) -> int:
            name = command_aliases(registered_name)[0]
            if name in self.command_order:
                return self.command_order.index(name)
            return len(self.command_order)

        return sorted(self.commands, key=position)
