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

from ...encoding.z85 import decode_z85, encode_z85
from ..core.common import _ctx_flag, _run_cli
from ..io.inputs import _read_payload_bytes, _read_text_argument
from ..io.outputs import _write_output, _write_text

_ENCODE_HELP = (
    "Encode bytes as padded Z85 (<z85>:<padding>).\n\n"
    "Examples:\n"
    '  z85kit encode "Hello World"\n'
    "  z85kit encode --file image.png\n"
    "  cat payload.bin | z85kit encode\n"
)

_DECODE_HELP = (
    "Decode padded Z85 (<z85>:<padding>) back to bytes.\n\n"
    "Examples:\n"
    '  z85kit decode "nm=QNzY&b1A+]m^:1"\n'
    "  z85kit decode - --output payload.bin < payload.z85\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_ENCODE_HELP)(encode)
    app.command(help=_DECODE_HELP)(decode)


def encode(
    ctx: typer.Context,
    text: str | None = typer.Argument(
        None,
        help="Text to encode as UTF-8 bytes ('-' or omitted reads stdin).",
        show_default=False,
    ),
    file: str | None = typer.Option(
        None,
        "--file",
        "-f",
        help="Encode the raw bytes of this file.",
        rich_help_panel="Input",
    ),
) -> None:
    def _run() -> None:
        data = _read_payload_bytes(text, file)
        _write_text(encode_z85(data))

    _run_cli(_run, debug=_ctx_flag(ctx, "debug"))


def decode(
    ctx: typer.Context,
    text: str | None = typer.Argument(
        None,
        help="Padded Z85 text ('-' or omitted reads stdin).",
        show_default=False,
    ),
    output: str | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Write decoded bytes to this file (default: stdout).",
        rich_help_panel="Output",
    ),
) -> None:
    quiet = _ctx_flag(ctx, "quiet")

    def _run() -> None:
        data = decode_z85(_read_text_argument(text))
        _write_output(output, data, quiet=quiet)

    _run_cli(_run, debug=_ctx_flag(ctx, "debug"))
