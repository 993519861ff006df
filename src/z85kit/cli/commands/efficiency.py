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

import json

import typer

from ...efficiency import get_encoding_efficiency
from ..api import build_efficiency_table, console
from ..core.common import _ctx_flag, _load_config, _run_cli
from ..io.outputs import _write_text

_EFFICIENCY_HELP = (
    "Compare Base64 and Z85 sizes for hypothetical payload sizes.\n\n"
    "Examples:\n"
    "  z85kit efficiency\n"
    "  z85kit efficiency 1024 65536 --json\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_EFFICIENCY_HELP)(efficiency)


def efficiency(
    ctx: typer.Context,
    sizes: list[int] | None = typer.Argument(
        None,
        help="Payload sizes in bytes (default from config).",
        show_default=False,
        min=0,
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the statistics as JSON.",
        rich_help_panel="Output",
    ),
) -> None:
    def _run() -> None:
        resolved = tuple(sizes) if sizes else _load_config(ctx).efficiency.sizes
        stats = [get_encoding_efficiency(size) for size in resolved]
        if as_json:
            _write_text(json.dumps([entry.to_dict() for entry in stats], indent=2))
            return
        console.print(build_efficiency_table(stats))

    _run_cli(_run, debug=_ctx_flag(ctx, "debug"))
