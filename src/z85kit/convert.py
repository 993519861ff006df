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

from dataclasses import dataclass
from enum import Enum

from .core.errors import DataUrlFormatError, MimeTypeUnknownError
from .encoding.payloads import EncodingToken, transcode_payload
from .formats.data_url import DataUrl, parse_data_url


class DataType(str, Enum):
    RAW = "raw"
    DATA_URL = "dataurl"


@dataclass(frozen=True)
class ConversionOptions:
    input: DataType = DataType.RAW
    output: DataType = DataType.RAW

    def __post_init__(self) -> None:
        object.__setattr__(self, "input", parse_data_type(self.input, label="input"))
        object.__setattr__(self, "output", parse_data_type(self.output, label="output"))


def parse_data_type(value: str | DataType, *, label: str = "data type") -> DataType:
    if isinstance(value, DataType):
        return value
    if isinstance(value, str):
        normalized = value.strip().lower().replace("_", "").replace("-", "")
        for member in DataType:
            if member.value == normalized:
                return member
    raise ValueError(f"{label} must be 'raw' or 'dataurl'")


DEFAULT_OPTIONS = ConversionOptions()


def base64_to_z85_with_options(data: str, options: ConversionOptions | None = None) -> str:
    return convert_with_options(data, EncodingToken.BASE64, EncodingToken.Z85, options)


def z85_to_base64_with_options(data: str, options: ConversionOptions | None = None) -> str:
    return convert_with_options(data, EncodingToken.Z85, EncodingToken.BASE64, options)


def convert_with_options(
    data: str,
    source: EncodingToken,
    target: EncodingToken,
    options: ConversionOptions | None = None,
) -> str:
    """Transcode ``data`` from ``source`` to ``target``, honoring container shapes."""
    opts = options or DEFAULT_OPTIONS
    match (opts.input, opts.output):
        case (DataType.RAW, DataType.RAW):
            return transcode_payload(data, source, target)
        case (DataType.DATA_URL, DataType.DATA_URL):
            url = _parse_source_url(data, source)
            converted = transcode_payload(url.payload, source, target)
            return url.with_payload(target, converted).to_string()
        case (DataType.DATA_URL, DataType.RAW):
            url = _parse_source_url(data, source)
            return transcode_payload(url.payload, source, target)
        case (DataType.RAW, DataType.DATA_URL):
            raise MimeTypeUnknownError("Cannot convert raw to data URL: MIME type unknown")
    raise AssertionError(f"unhandled conversion: {opts.input} -> {opts.output}")


def _parse_source_url(data: str, source: EncodingToken) -> DataUrl:
    url = parse_data_url(data)
    if url.encoding is not source:
        raise DataUrlFormatError(
            f"Data URL does not contain ;{source.value}, marker "
            f"(found ;{url.encoding.value},)"
        )
    return url


__all__ = [
    "DEFAULT_OPTIONS",
    "ConversionOptions",
    "DataType",
    "base64_to_z85_with_options",
    "convert_with_options",
    "parse_data_type",
    "z85_to_base64_with_options",
]
