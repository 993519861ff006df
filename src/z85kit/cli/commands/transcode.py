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

import typer

from ...convert import base64_to_z85_with_options, z85_to_base64_with_options
from ..core.common import _ctx_flag, _data_type_callback, _load_config, _resolve_options, _run_cli
from ..io.inputs import _read_text_argument
from ..io.outputs import _write_text

_TO_Z85_HELP = (
    "Convert Base64 (or a base64 Data URL) to padded Z85.\n\n"
    "Examples:\n"
    "  z85kit to-z85 SGVsbG8gV29ybGQ=\n"
    '  z85kit to-z85 "data:image/png;base64,iVBORw0..." --input dataurl --output dataurl\n'
)

_TO_BASE64_HELP = (
    "Convert padded Z85 (or a z85 Data URL) to Base64.\n\n"
    "Examples:\n"
    '  z85kit to-base64 "nm=QNzY&b1A+]m^:1"\n'
    '  z85kit to-base64 "data:image/png;z85,..." --input dataurl --output raw\n'
)


def register(app: typer.Typer) -> None:
    app.command("to-z85", help=_TO_Z85_HELP)(to_z85)
    app.command("to-base64", help=_TO_BASE64_HELP)(to_base64)


def _input_option() -> str | None:
    return typer.Option(
        None,
        "--input",
        "-i",
        help="Input shape: raw or dataurl (default from config).",
        callback=_data_type_callback,
        rich_help_panel="Container",
    )


def _output_option() -> str | None:
    return typer.Option(
        None,
        "--output",
        "-o",
        help="Output shape: raw or dataurl (default from config).",
        callback=_data_type_callback,
        rich_help_panel="Container",
    )


def to_z85(
    ctx: typer.Context,
    text: str | None = typer.Argument(
        None,
        help="Base64 text or Data URL ('-' or omitted reads stdin).",
        show_default=False,
    ),
    input_type: str | None = _input_option(),
    output_type: str | None = _output_option(),
) -> None:
    def _run() -> None:
        options = _resolve_options(_load_config(ctx), input_type, output_type)
        _write_text(base64_to_z85_with_options(_read_text_argument(text), options))

    _run_cli(_run, debug=_ctx_flag(ctx, "debug"))


def to_base64(
    ctx: typer.Context,
    text: str | None = typer.Argument(
        None,
        help="Padded Z85 text or Data URL ('-' or omitted reads stdin).",
        show_default=False,
    ),
    input_type: str | None = _input_option(),
    output_type: str | None = _output_option(),
) -> None:
    def _run() -> None:
        options = _resolve_options(_load_config(ctx), input_type, output_type)
        _write_text(z85_to_base64_with_options(_read_text_argument(text), options))

    _run_cli(_run, debug=_ctx_flag(ctx, "debug"))
