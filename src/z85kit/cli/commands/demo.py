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
from rich.markup import escape

from ...convert import (
    ConversionOptions,
    DataType,
    base64_to_z85_with_options,
    z85_to_base64_with_options,
)
from ...core.errors import CodecError
from ...efficiency import get_encoding_efficiency
from ...encoding.transcode import base64_to_z85, z85_to_base64
from ...encoding.z85 import decode_z85, encode_z85, split_padded_z85
from ..api import build_efficiency_table, build_kv_table, console, print_section
from ..core.common import _ctx_flag, _load_config, _run_cli

HELLO_WORLD_BASE64 = "SGVsbG8gV29ybGQ="
RED_PIXEL_PNG_BASE64 = (
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJ"
    "AAAADUlEQVR42mP8/5+hHgAHggJ/PchI7wAAAABJRU5ErkJggg=="
)
PADDING_SAMPLES = ("A", "AB", "ABC", "ABCD", "ABCDE")
_PREVIEW_CHARS = 50


def register(app: typer.Typer) -> None:
    app.command(help="Walk through the conversions with sample data.")(demo)


def demo(ctx: typer.Context) -> None:
    quiet = _ctx_flag(ctx, "quiet")

    def _run() -> None:
        sizes = _load_config(ctx).efficiency.sizes
        _demo_basic(quiet=quiet)
        _demo_raw_bytes(quiet=quiet)
        _demo_data_url(quiet=quiet)
        _demo_efficiency(sizes, quiet=quiet)
        _demo_padding(quiet=quiet)
        _demo_errors(quiet=quiet)

    _run_cli(_run, debug=_ctx_flag(ctx, "debug"))


def _print_rows(rows: list[tuple[str, str]]) -> None:
    console.print(build_kv_table([(key, escape(value)) for key, value in rows]))


def _preview(text: str) -> str:
    if len(text) <= _PREVIEW_CHARS:
        return text
    return f"{text[:_PREVIEW_CHARS]}..."


def _demo_basic(*, quiet: bool) -> None:
    print_section("Base64 <-> Z85", quiet=quiet)
    z85_data = base64_to_z85(HELLO_WORLD_BASE64)
    back = z85_to_base64(z85_data)
    _print_rows(
        [
            ("Base64", HELLO_WORLD_BASE64),
            ("Z85", z85_data),
            ("Base64 again", back),
            ("Match", str(back == HELLO_WORLD_BASE64)),
        ]
    )


def _demo_raw_bytes(*, quiet: bool) -> None:
    print_section("Encode/decode raw bytes", quiet=quiet)
    text = "Hello, Z85 encoding!"
    encoded = encode_z85(text.encode("utf-8"))
    decoded = decode_z85(encoded).decode("utf-8")
    _print_rows(
        [
            ("Text", text),
            ("Z85", encoded),
            ("Decoded", decoded),
            ("Match", str(decoded == text)),
        ]
    )


def _demo_data_url(*, quiet: bool) -> None:
    print_section("Data URL conversion", quiet=quiet)
    image_url = f"data:image/png;base64,{RED_PIXEL_PNG_BASE64}"
    both = ConversionOptions(DataType.DATA_URL, DataType.DATA_URL)
    strip = ConversionOptions(DataType.DATA_URL, DataType.RAW)
    z85_url = base64_to_z85_with_options(image_url, both)
    back_url = z85_to_base64_with_options(z85_url, both)
    raw_z85 = base64_to_z85_with_options(image_url, strip)
    raw_base64 = z85_to_base64_with_options(z85_url, strip)
    _print_rows(
        [
            ("Base64 Data URL", _preview(image_url)),
            ("Z85 Data URL", _preview(z85_url)),
            ("Back to Base64", _preview(back_url)),
            ("Round trip", str(back_url == image_url)),
            ("Raw Z85", _preview(raw_z85)),
            ("Raw Base64", _preview(raw_base64)),
            ("Matches payload", str(raw_base64 == RED_PIXEL_PNG_BASE64)),
        ]
    )


def _demo_efficiency(sizes: tuple[int, ...], *, quiet: bool) -> None:
    print_section("Encoding efficiency", quiet=quiet)
    console.print(build_efficiency_table([get_encoding_efficiency(size) for size in sizes]))


def _demo_padding(*, quiet: bool) -> None:
    print_section("Padding scenarios", quiet=quiet)
    rows: list[tuple[str, str]] = []
    for sample in PADDING_SAMPLES:
        encoded = encode_z85(sample.encode("ascii"))
        z85_part, padding = split_padded_z85(encoded)
        decoded = decode_z85(encoded).decode("ascii")
        rows.append(
            (
                f'"{sample}" ({len(sample)} bytes)',
                f"z85={z85_part} padding={padding} decoded={decoded!r}",
            )
        )
    _print_rows(rows)


def _demo_errors(*, quiet: bool) -> None:
    print_section("Error handling", quiet=quiet)
    cases = (
        ("Invalid Z85 format", lambda: z85_to_base64("invalid_z85_without_padding")),
        ("Invalid Base64", lambda: base64_to_z85("not valid base64!")),
        (
            "Invalid Data URL",
            lambda: z85_to_base64_with_options(
                "not_a_data_url",
                ConversionOptions(DataType.DATA_URL, DataType.DATA_URL),
            ),
        ),
        (
            "Raw to Data URL",
            lambda: base64_to_z85_with_options(
                HELLO_WORLD_BASE64,
                ConversionOptions(DataType.RAW, DataType.DATA_URL),
            ),
        ),
    )
    rows: list[tuple[str, str]] = []
    for label, action in cases:
        try:
            action()
        except CodecError as exc:
            rows.append((label, f"{type(exc).__name__}: {exc}"))
        else:
            rows.append((label, "no error raised"))
    _print_rows(rows)
