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

"""Base64 <-> Z85 transcoding with Data URL support."""

from .convert import (
    ConversionOptions as ConversionOptions,
    DataType as DataType,
    base64_to_z85_with_options as base64_to_z85_with_options,
    z85_to_base64_with_options as z85_to_base64_with_options,
)
from .core.errors import (
    Base64DecodeError as Base64DecodeError,
    CodecError as CodecError,
    DataUrlFormatError as DataUrlFormatError,
    MimeTypeUnknownError as MimeTypeUnknownError,
    Z85FormatError as Z85FormatError,
    Z85InvalidCharacterError as Z85InvalidCharacterError,
    Z85LengthError as Z85LengthError,
)
from .efficiency import (
    EfficiencyStats as EfficiencyStats,
    get_encoding_efficiency as get_encoding_efficiency,
)
from .encoding.payloads import EncodingToken as EncodingToken
from .encoding.transcode import (
    base64_to_z85 as base64_to_z85,
    z85_to_base64 as z85_to_base64,
)
from .encoding.z85 import decode_z85 as decode_z85, encode_z85 as encode_z85
from .formats.data_url import (
    DataUrl as DataUrl,
    build_data_url as build_data_url,
    parse_data_url as parse_data_url,
)

__all__ = [
    "Base64DecodeError",
    "CodecError",
    "ConversionOptions",
    "DataType",
    "DataUrl",
    "DataUrlFormatError",
    "EfficiencyStats",
    "EncodingToken",
    "MimeTypeUnknownError",
    "Z85FormatError",
    "Z85InvalidCharacterError",
    "Z85LengthError",
    "base64_to_z85",
    "base64_to_z85_with_options",
    "build_data_url",
    "decode_z85",
    "encode_z85",
    "get_encoding_efficiency",
    "parse_data_url",
    "z85_to_base64",
    "z85_to_base64_with_options",
]
