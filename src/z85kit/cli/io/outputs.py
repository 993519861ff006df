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

from ..api import console
from ..core.log import _note, _warn


def _write_output(path: str | None, data: bytes, *, quiet: bool) -> None:
    if path:
        with open(path, "wb") as handle:
            handle.write(data)
        _note(f"wrote {path}", quiet=quiet)
        return
    if console.is_terminal and not _is_printable(data):
        _warn("writing binary data to the terminal; use --output to save it", quiet=quiet)
    sys.stdout.buffer.write(data)
    sys.stdout.buffer.flush()


def _write_text(text: str) -> None:
    console.print(text, markup=False, highlight=False, soft_wrap=True)


def _is_printable(data: bytes) -> bool:
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError:
        return False
    return all(ch.isprintable() or ch in "\r\n\t" for ch in text)
