# SPDX-License-Identifier: MIT

import re
from typing import Optional

import click
import typer
import typer.core

# Root sub-apps in the order they are listed in --help
ROOT_COMMAND_ORDER = ["view, v", "event, e", "reminder, r", "config, c"]


class AliasedTyperGroup(typer.core.TyperGroup):
    """
    Group whose commands are registered as "name, alias" and can be invoked
    by any of the comma-separated names.
    """

    _ALIAS_SEPARATOR = re.compile(r" ?, ?")

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        return super().get_command(ctx, self._registered_name(cmd_name))

    def _registered_name(self, name: str) -> str:
        for registered in self.commands:
            if name in self._ALIAS_SEPARATOR.split(registered):
                return registered
        return name


class DaybookTyperGroup(AliasedTyperGroup):
    """Root group listing the sub-apps in a fixed order."""

    def list_commands(self, ctx: click.Context) -> list[str]:
        ordered = [name for name in ROOT_COMMAND_ORDER if name in self.commands]
        return ordered + [name for name in self.commands if name not in ordered]
