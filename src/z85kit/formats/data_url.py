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

"""Parse and build ``data:<mime>;<encoding>,<payload>`` containers.

The header runs up to the first ``,`` (neither Base64 nor Z85 uses commas) and
is split at its last ``;``. Everything before that semicolon is the MIME type,
so ``data:text/plain;charset=utf-8;base64,...`` keeps
``text/plain;charset=utf-8`` intact.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..core.errors import DataUrlFormatError
from ..encoding.payloads import EncodingToken, parse_encoding_token

DATA_URL_SCHEME = "data:"
_TOKEN_SEPARATOR = ";"
_PAYLOAD_SEPARATOR = ","


@dataclass(frozen=True)
class DataUrl:
    mime: str
    encoding: EncodingToken
    payload: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "encoding", _require_token(self.encoding))

    def to_string(self) -> str:
        header = f"{self.mime}{_TOKEN_SEPARATOR}{self.encoding.value}"
        return f"{DATA_URL_SCHEME}{header}{_PAYLOAD_SEPARATOR}{self.payload}"

    def with_payload(self, encoding: str | EncodingToken, payload: str) -> DataUrl:
        return DataUrl(mime=self.mime, encoding=_require_token(encoding), payload=payload)

    def __str__(self) -> str:
        return self.to_string()


def parse_data_url(text: str) -> DataUrl:
    if not text.startswith(DATA_URL_SCHEME):
        raise DataUrlFormatError("Invalid data URL format: missing 'data:' prefix")
    header, sep, payload = text[len(DATA_URL_SCHEME) :].partition(_PAYLOAD_SEPARATOR)
    if not sep:
        raise DataUrlFormatError("Invalid data URL format: missing ',' before payload")
    mime, sep, token = header.rpartition(_TOKEN_SEPARATOR)
    if not sep:
        raise DataUrlFormatError("Invalid data URL format: missing ';' before encoding token")
    return DataUrl(mime=mime, encoding=_require_token(token), payload=payload)


def build_data_url(mime: str, encoding: str | EncodingToken, payload: str) -> str:
    return DataUrl(mime=mime, encoding=_require_token(encoding), payload=payload).to_string()


def _require_token(value: str | EncodingToken) -> EncodingToken:
    try:
        return parse_encoding_token(value)
    except ValueError as exc:
        raise DataUrlFormatError(f"Invalid data URL format: {exc}") from exc


__all__ = [
    "DATA_URL_SCHEME",
    "DataUrl",
    "build_data_url",
    "parse_data_url",
]
