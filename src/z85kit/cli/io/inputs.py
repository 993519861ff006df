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

import sys
from pathlib import Path

from ...core.bounds import MAX_CLI_INPUT_BYTES

STDIN_MARKER = "-"


def _read_stdin_bytes() -> bytes:
    stream = getattr(sys.stdin, "buffer", None)
    if stream is not None:
        data = stream.read(MAX_CLI_INPUT_BYTES + 1)
    else:
        data = sys.stdin.read(MAX_CLI_INPUT_BYTES + 1).encode("utf-8")
    _check_size(len(data), label="stdin input")
    return data


def _read_file_bytes(path: str | Path) -> bytes:
    source = Path(path)
    if not source.is_file():
        raise FileNotFoundError(f"input file not found: {source}")
    size = source.stat().st_size
    _check_size(size, label=f"input file {source}")
    return source.read_bytes()


def _read_text_argument(value: str | None) -> str:
    """Return TEXT as given, or read it from stdin for ``-``/missing values."""
    if value is not None and value != STDIN_MARKER:
        return value.strip()
    data = _read_stdin_bytes()
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ValueError("stdin input must be UTF-8 text") from exc
    text = text.strip()
    if not text:
        raise ValueError("stdin input is empty; pass TEXT as an argument or pipe it in")
    return text


def _read_payload_bytes(text: str | None, file: str | None) -> bytes:
    if text is not None and file is not None:
        raise ValueError("use either TEXT or --file, not both")
    if file is not None:
        return _read_file_bytes(file)
    if text is not None and text != STDIN_MARKER:
        return text.encode("utf-8")
    return _read_stdin_bytes()


def _check_size(size: int, *, label: str) -> None:
    if size > MAX_CLI_INPUT_BYTES:
        raise ValueError(f"{label} exceeds MAX_CLI_INPUT_BYTES ({MAX_CLI_INPUT_BYTES} bytes)")
