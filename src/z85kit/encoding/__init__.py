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

"""Payload codecs: Z85, Base64 and the encoding-token registry."""

from .b64 import decode_base64, encode_base64
from .payloads import (
    EncodingToken,
    PayloadEncoder,
    get_encoder,
    parse_encoding_token,
    transcode_payload,
)
from .transcode import base64_to_z85, z85_to_base64
from .z85 import (
    Z85_ALPHABET,
    decode_z85,
    decode_z85_groups,
    encode_z85,
    encode_z85_groups,
    pad_needed,
)

__all__ = [
    "EncodingToken",
    "PayloadEncoder",
    "Z85_ALPHABET",
    "base64_to_z85",
    "decode_base64",
    "decode_z85",
    "decode_z85_groups",
    "encode_base64",
    "encode_z85",
    "encode_z85_groups",
    "get_encoder",
    "pad_needed",
    "parse_encoding_token",
    "transcode_payload",
    "z85_to_base64",
]
