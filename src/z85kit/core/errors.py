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


class CodecError(ValueError):
    """Base class for every conversion failure raised by z85kit."""


class Z85FormatError(CodecError):
    """Padded Z85 text lacks the ':' separator or carries a bad padding suffix."""


class Z85LengthError(CodecError):
    """Z85 character segment length is not a multiple of 5."""


class Z85InvalidCharacterError(CodecError):
    """Character outside the Z85 alphabet, or a group above the 32-bit range."""


class Base64DecodeError(CodecError):
    pass


class DataUrlFormatError(CodecError):
    pass


class MimeTypeUnknownError(CodecError):
    pass


__all__ = [
    "Base64DecodeError",
    "CodecError",
    "DataUrlFormatError",
    "MimeTypeUnknownError",
    "Z85FormatError",
    "Z85InvalidCharacterError",
    "Z85LengthError",
]
