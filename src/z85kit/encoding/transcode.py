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

from .payloads import EncodingToken, transcode_payload


def base64_to_z85(base64_data: str) -> str:
    """Convert standard Base64 text to padded Z85 (``<z85>:<N>``)."""
    return transcode_payload(base64_data, EncodingToken.BASE64, EncodingToken.Z85)


def z85_to_base64(z85_data_with_padding: str) -> str:
    """Convert padded Z85 text back to standard Base64."""
    return transcode_payload(z85_data_with_padding, EncodingToken.Z85, EncodingToken.BASE64)


__all__ = ["base64_to_z85", "z85_to_base64"]
