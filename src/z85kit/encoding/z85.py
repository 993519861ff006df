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

"""Z85 (ZeroMQ 32/Z85) codec with an explicit ``:N`` padding suffix.

Canonical Z85 only accepts buffers whose length is a multiple of 4. The padded
form appends up to three zero bytes before packing and records how many were
added after a trailing colon, e.g. ``nm=QNzY&b1A+]m^:1`` for ``Hello World``.
"""

from __future__ import annotations

from ..core.bounds import MAX_Z85_GROUP_VALUE, Z85_GROUP_BYTES, Z85_GROUP_CHARS
from ..core.errors import Z85FormatError, Z85InvalidCharacterError, Z85LengthError

Z85_ALPHABET = (
    "0123456789"
    "abcdefghijklmnopqrstuvwxyz"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    ".-:+=^!/*?&<>()[]{}@%$#"
)
Z85_LOOKUP = {ch: idx for idx, ch in enumerate(Z85_ALPHABET)}
Z85_BASE = len(Z85_ALPHABET)

PADDING_SEPARATOR = ":"
_PADDING_DIGITS = frozenset("0123")


def char_at(value: int) -> str:
    if not 0 <= value < Z85_BASE:
        raise ValueError(f"z85 digit out of range: {value}")
    return Z85_ALPHABET[value]


def value_of(char: str) -> int:
    value = Z85_LOOKUP.get(char)
    if value is None:
        raise Z85InvalidCharacterError(f"invalid z85 character: {char!r}")
    return value


def pad_needed(length: int) -> int:
    """Return how many zero bytes bring ``length`` up to a multiple of 4."""
    if length < 0:
        raise ValueError("length must be non-negative")
    return (Z85_GROUP_BYTES - (length % Z85_GROUP_BYTES)) % Z85_GROUP_BYTES


def encode_z85_groups(data: bytes) -> str:
    """Encode a buffer whose length is a multiple of 4 as canonical Z85."""
    if len(data) % Z85_GROUP_BYTES:
        raise Z85LengthError("z85 input length must be a multiple of 4")
    out_chars: list[str] = []
    for offset in range(0, len(data), Z85_GROUP_BYTES):
        value = int.from_bytes(data[offset : offset + Z85_GROUP_BYTES], "big")
        group = [""] * Z85_GROUP_CHARS
        for idx in range(Z85_GROUP_CHARS - 1, -1, -1):
            value, digit = divmod(value, Z85_BASE)
            group[idx] = Z85_ALPHABET[digit]
        out_chars.extend(group)
    return "".join(out_chars)


def decode_z85_groups(text: str) -> bytes:
    """Decode canonical Z85 text (length a multiple of 5) to bytes."""
    if len(text) % Z85_GROUP_CHARS:
        raise Z85LengthError(
            f"z85 data length must be a multiple of 5 (got {len(text)} characters)"
        )
    out = bytearray()
    for offset in range(0, len(text), Z85_GROUP_CHARS):
        value = 0
        for char in text[offset : offset + Z85_GROUP_CHARS]:
            value = value * Z85_BASE + value_of(char)
        if value > MAX_Z85_GROUP_VALUE:
            raise Z85InvalidCharacterError(
                f"z85 group {text[offset : offset + Z85_GROUP_CHARS]!r} "
                "exceeds the 32-bit range"
            )
        out += value.to_bytes(Z85_GROUP_BYTES, "big")
    return bytes(out)


def encode_z85(data: bytes | bytearray | memoryview) -> str:
    raw = bytes(data)
    padding = pad_needed(len(raw))
    encoded = encode_z85_groups(raw + b"\x00" * padding)
    return f"{encoded}{PADDING_SEPARATOR}{padding}"


def decode_z85(text: str) -> bytes:
    z85_data, padding = split_padded_z85(text)
    decoded = decode_z85_groups(z85_data)
    if padding > len(decoded):
        raise Z85FormatError(
            f"padding {padding} exceeds decoded length {len(decoded)}"
        )
    if padding:
        return decoded[:-padding]
    return decoded


def split_padded_z85(text: str) -> tuple[str, int]:
    """Split ``<z85>:<N>`` at the last colon and validate the padding digit."""
    z85_data, sep, suffix = text.rpartition(PADDING_SEPARATOR)
    if not sep:
        raise Z85FormatError("Invalid format: expected 'z85_data:padding'")
    if len(suffix) != 1 or suffix not in _PADDING_DIGITS:
        raise Z85FormatError(f"Invalid padding number: {suffix!r} (expected 0-3)")
    return z85_data, int(suffix)


__all__ = [
    "PADDING_SEPARATOR",
    "Z85_ALPHABET",
    "Z85_BASE",
    "Z85_LOOKUP",
    "char_at",
    "decode_z85",
    "decode_z85_groups",
    "encode_z85",
    "encode_z85_groups",
    "pad_needed",
    "split_padded_z85",
    "value_of",
]
