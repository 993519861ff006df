#!/usr/bin/env python3
# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

from __future__ import annotations

from typing import NoReturn

import typer
from rich.markup import escape

from . import command_registry
from .api import console, console_err
from .core.common import _get_version
from .startup import run_startup

app = typer.Typer(
    add_completion=False,
    help="Convert payloads between Base64, Z85 and Data URLs.",
)

_NO_COMMAND_HINT = "Run `z85kit --help` to list the commands."


def _version_callback(value: bool) -> None:
    if not value:
        return
    console.print(f"z85kit {_get_version()}", highlight=False)
    raise typer.Exit()


def _fail(message: str) -> NoReturn:
    console_err.print(f"[red]Error:[/red] {message}")
    raise typer.Exit(code=2)


@app.callback(invoke_without_command=True)
def cli(
    ctx: typer.Context,
    config: str | None = typer.Option(
        None,
        "--config",
        metavar="PATH",
        help="Read defaults from this TOML file instead of the user config.",
        rich_help_panel="Config",
    ),
    init_config: bool = typer.Option(
        False,
        "--init-config",
        help="Write the default config to the user config directory and exit.",
        is_eager=True,
        rich_help_panel="Config",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress warnings and status notes on stderr.",
        rich_help_panel="Output",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Print without ANSI colors.",
        rich_help_panel="Output",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Raise errors with a full traceback.",
        rich_help_panel="Output",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Print the installed z85kit version and exit.",
        callback=_version_callback,
        is_eager=True,
        rich_help_panel="Info",
    ),
) -> None:
    _ = version
    try:
        should_exit, ui = run_startup(
            config=config,
            quiet=quiet,
            no_color=no_color,
            debug=debug,
            init_config=init_config,
        )
    except (OSError, RuntimeError, ValueError) as exc:
        _fail(escape(str(exc)))
    if should_exit:
        raise typer.Exit()

    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["debug"] = debug
    ctx.obj["quiet"] = ui.quiet
    ctx.obj["no_color"] = ui.no_color
    if ctx.invoked_subcommand is None:
        _fail(f"no command given. {_NO_COMMAND_HINT}")


command_registry.register(app)


def main() -> None:
    app(prog_name="z85kit")
