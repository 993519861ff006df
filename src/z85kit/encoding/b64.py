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

import base64
import binascii

from ..core.errors import Base64DecodeError


def encode_base64(data: bytes | bytearray | memoryview) -> str:
    return base64.b64encode(bytes(data)).decode("ascii")


def decode_base64(text: str) -> bytes:
    """Decode standard, ``=``-padded Base64 and reject anything else.

    Only the canonical spelling is accepted: the unused bits of the final
    character must be zero, so every byte string has exactly one valid text.
    """
    try:
        data = base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise Base64DecodeError(f"Base64 decode error: {exc}") from exc
    if encode_base64(data) != text:
        raise Base64DecodeError("Base64 decode error: non-zero trailing bits before padding")
    return data


__all__ = ["decode_base64", "encode_base64"]
