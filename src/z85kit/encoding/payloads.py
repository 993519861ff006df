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

from abc import ABC, abstractmethod
from enum import Enum

from .b64 import decode_base64, encode_base64
from .z85 import decode_z85, encode_z85


class EncodingToken(str, Enum):
    """Encoding names as they appear in a Data URL header."""

    BASE64 = "base64"
    Z85 = "z85"


class PayloadEncoder(ABC):
    """Abstract base class for textual payload encodings."""

    token: EncodingToken

    @abstractmethod
    def encode(self, data: bytes) -> str:
        """Encode bytes to payload text."""
        ...

    @abstractmethod
    def decode(self, payload: str) -> bytes:
        """Decode payload text to bytes."""
        ...


class Base64Encoder(PayloadEncoder):
    token = EncodingToken.BASE64

    def encode(self, data: bytes) -> str:
        return encode_base64(data)

    def decode(self, payload: str) -> bytes:
        return decode_base64(payload)


class Z85Encoder(PayloadEncoder):
    """Padded Z85 (``<z85>:<N>``)."""

    token = EncodingToken.Z85

    def encode(self, data: bytes) -> str:
        return encode_z85(data)

    def decode(self, payload: str) -> bytes:
        return decode_z85(payload)


_ENCODERS: dict[EncodingToken, PayloadEncoder] = {}


def _register_encoder(encoder: PayloadEncoder) -> None:
    _ENCODERS[encoder.token] = encoder


_register_encoder(Base64Encoder())
_register_encoder(Z85Encoder())


def get_supported_tokens() -> set[str]:
    return {token.value for token in _ENCODERS}


def parse_encoding_token(value: str | EncodingToken) -> EncodingToken:
    """Map a header token to :class:`EncodingToken`; tokens are case-sensitive."""
    if isinstance(value, EncodingToken):
        return value
    try:
        return EncodingToken(value)
    except ValueError as exc:
        supported = ", ".join(sorted(get_supported_tokens()))
        raise ValueError(
            f"unsupported encoding token: {value!r} (expected one of: {supported})"
        ) from exc


def get_encoder(token: str | EncodingToken) -> PayloadEncoder:
    return _ENCODERS[parse_encoding_token(token)]


def transcode_payload(
    payload: str,
    source: str | EncodingToken,
    target: str | EncodingToken,
) -> str:
    """Decode ``payload`` from ``source`` and re-encode the bytes as ``target``."""
    data = get_encoder(source).decode(payload)
    return get_encoder(target).encode(data)


__all__ = [
    "Base64Encoder",
    "EncodingToken",
    "PayloadEncoder",
    "Z85Encoder",
    "get_encoder",
    "get_supported_tokens",
    "parse_encoding_token",
    "transcode_payload",
]
