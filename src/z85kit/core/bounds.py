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

# Largest value a single 5-character Z85 group may decode to.
MAX_Z85_GROUP_VALUE = 0xFFFF_FFFF

# Bytes per Z85 group and characters per encoded group.
Z85_GROUP_BYTES = 4
Z85_GROUP_CHARS = 5

# Bytes per Base64 quantum and characters per encoded quantum.
BASE64_GROUP_BYTES = 3
BASE64_GROUP_CHARS = 4

# 64 MiB maximum CLI input (stdin or file), in bytes.
MAX_CLI_INPUT_BYTES = 67_108_864


__all__ = [
    "BASE64_GROUP_BYTES",
    "BASE64_GROUP_CHARS",
    "MAX_CLI_INPUT_BYTES",
    "MAX_Z85_GROUP_VALUE",
    "Z85_GROUP_BYTES",
    "Z85_GROUP_CHARS",
]
