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

import os
import shlex
import subprocess
from pathlib import Path

import typer
from rich.table import Table

from ...config import AppConfig, load_app_config, resolve_config_path
from ..api import build_kv_table, console
from ..core.common import _ctx_flag, _ctx_value, _run_cli
from ..core.log import _note
from ..io.outputs import _write_text

_CONFIG_HELP = (
    "Show or edit the active TOML config.\n\n"
    "With no flag the file opens in $VISUAL or $EDITOR, falling back to the\n"
    "system default application.\n\n"
    "Examples:\n"
    "  z85kit config --print-path\n"
    "  z85kit config --show\n"
    '  z85kit config --editor "code -w"\n'
)
_EDITOR_ENV_VARS = ("VISUAL", "EDITOR")
_SYSTEM_OPENER = {"", "default", "system"}


def register(app: typer.Typer) -> None:
    app.command(help=_CONFIG_HELP)(config)


def config(
    ctx: typer.Context,
    editor: str | None = typer.Option(
        None,
        "--editor",
        "-e",
        help="Editor command; 'default' uses the system opener.",
        rich_help_panel="Edit",
    ),
    print_path: bool = typer.Option(
        False,
        "--print-path",
        help="Print the resolved config path and exit.",
        rich_help_panel="Inspect",
    ),
    show: bool = typer.Option(
        False,
        "--show",
        help="Print the parsed settings and exit.",
        rich_help_panel="Inspect",
    ),
) -> None:
    explicit = _ctx_value(ctx, "config")
    quiet = _ctx_flag(ctx, "quiet")

    def _run() -> None:
        if print_path and show:
            raise ValueError("use either --print-path or --show, not both")
        path = resolve_config_path(explicit)
        if print_path:
            _write_text(str(path))
        elif show:
            console.print(_settings_table(load_app_config(path)))
        else:
            _open_in_editor(path, editor=editor, quiet=quiet)

    _run_cli(_run, debug=_ctx_flag(ctx, "debug"))


def _settings_table(app_config: AppConfig) -> Table:
    rows = [
        ("convert.input", app_config.convert.input.value),
        ("convert.output", app_config.convert.output.value),
        ("efficiency.sizes", ", ".join(map(str, app_config.efficiency.sizes))),
        ("ui.quiet", str(app_config.ui.quiet).lower()),
        ("ui.no_color", str(app_config.ui.no_color).lower()),
    ]
    title = str(app_config.path) if app_config.path is not None else None
    return build_kv_table(rows, title=title)


def _open_in_editor(path: Path, *, editor: str | None, quiet: bool) -> None:
    target = Path(os.path.expandvars(str(path))).expanduser()
    if not target.exists():
        raise FileNotFoundError(f"config file not found: {target}")

    argv = _resolve_editor_command(editor)
    if argv is None:
        _note(f"Opening {target}", quiet=quiet)
        typer.launch(str(target))
    else:
        _note(f"Opening {target} with {shlex.join(argv)}", quiet=quiet)
        subprocess.run([*argv, str(target)], check=False)


def _resolve_editor_command(editor: str | None) -> list[str] | None:
    """Return the editor argv, or None to hand the file to the system opener."""
    if editor is None:
        editor = next((os.environ[name] for name in _EDITOR_ENV_VARS if os.environ.get(name)), "")
    value = editor.strip()
    if value.lower() in _SYSTEM_OPENER:
        return None
    return shlex.split(value, posix=os.name != "nt")
