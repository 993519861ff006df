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

from .core.bounds import (
    BASE64_GROUP_BYTES,
    BASE64_GROUP_CHARS,
    Z85_GROUP_BYTES,
    Z85_GROUP_CHARS,
)
from .encoding.z85 import pad_needed


@dataclass(frozen=True)
class EfficiencyStats:
    original_size: int
    base64_size: int
    z85_size: int
    efficiency_ratio: float
    bandwidth_saving: float

    def to_dict(self) -> dict[str, object]:
        return {
            "original_size": self.original_size,
            "base64_size": self.base64_size,
            "z85_size": self.z85_size,
            "efficiency_ratio": self.efficiency_ratio,
            "bandwidth_saving": self.bandwidth_saving,
        }


def base64_encoded_size(original_size: int) -> int:
    groups = -(-original_size // BASE64_GROUP_BYTES)
    return groups * BASE64_GROUP_CHARS


def z85_encoded_size(original_size: int) -> int:
    """Z85 character count, excluding the ``:N`` padding suffix."""
    padded = original_size + pad_needed(original_size)
    return padded // Z85_GROUP_BYTES * Z85_GROUP_CHARS


def get_encoding_efficiency(original_size: int) -> EfficiencyStats:
    if isinstance(original_size, bool) or not isinstance(original_size, int):
        raise TypeError("original_size must be an integer")
    if original_size < 0:
        raise ValueError("original_size must be non-negative")
    base64_size = base64_encoded_size(original_size)
    z85_size = z85_encoded_size(original_size)
    efficiency_ratio = 1.0 if base64_size == 0 else z85_size / base64_size
    return EfficiencyStats(
        original_size=original_size,
        base64_size=base64_size,
        z85_size=z85_size,
        efficiency_ratio=efficiency_ratio,
        bandwidth_saving=(1.0 - efficiency_ratio) * 100.0,
    )


__all__ = [
    "EfficiencyStats",
    "base64_encoded_size",
    "get_encoding_efficiency",
    "z85_encoded_size",
]
