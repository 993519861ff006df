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

import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from ..convert import ConversionOptions, DataType, parse_data_type
from .installer import resolve_config_path

DEFAULT_EFFICIENCY_SIZES = (100, 1_000, 10_000, 100_000, 1_000_000)


@dataclass(frozen=True)
class ConvertDefaults:
    input: DataType = DataType.RAW
    output: DataType = DataType.RAW

    def to_options(self) -> ConversionOptions:
        return ConversionOptions(input=self.input, output=self.output)


@dataclass(frozen=True)
class EfficiencyDefaults:
    sizes: tuple[int, ...] = DEFAULT_EFFICIENCY_SIZES


@dataclass(frozen=True)
class UiDefaults:
    quiet: bool = False
    no_color: bool = False


@dataclass(frozen=True)
class AppConfig:
    path: Path | None = None
    convert: ConvertDefaults = field(default_factory=ConvertDefaults)
    efficiency: EfficiencyDefaults = field(default_factory=EfficiencyDefaults)
    ui: UiDefaults = field(default_factory=UiDefaults)


def load_app_config(path: str | Path | None = None) -> AppConfig:
    config_path = resolve_config_path(path)
    data = _load_toml(config_path)
    return AppConfig(
        path=config_path,
        convert=_parse_convert_defaults(_get_dict(data, "convert")),
        efficiency=_parse_efficiency_defaults(_get_dict(data, "efficiency")),
        ui=_parse_ui_defaults(_get_dict(data, "ui")),
    )


def _parse_convert_defaults(cfg: dict[str, object]) -> ConvertDefaults:
    return ConvertDefaults(
        input=_parse_data_type(cfg.get("input"), field="convert.input"),
        output=_parse_data_type(cfg.get("output"), field="convert.output"),
    )


def _parse_efficiency_defaults(cfg: dict[str, object]) -> EfficiencyDefaults:
    value = cfg.get("sizes")
    if value is None:
        return EfficiencyDefaults()
    if not isinstance(value, list):
        raise ValueError("efficiency.sizes must be a list of integers")
    sizes: list[int] = []
    for item in value:
        parsed = _parse_int_strict(item, field="efficiency.sizes")
        if parsed < 0:
            raise ValueError("efficiency.sizes entries must be non-negative")
        sizes.append(parsed)
    return EfficiencyDefaults(sizes=tuple(sizes))


def _parse_ui_defaults(cfg: dict[str, object]) -> UiDefaults:
    return UiDefaults(
        quiet=_parse_bool(cfg.get("quiet"), field="ui.quiet", default=False),
        no_color=_parse_bool(cfg.get("no_color"), field="ui.no_color", default=False),
    )


def _parse_data_type(value: object, *, field: str) -> DataType:
    if value is None:
        return DataType.RAW
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{field} must be 'raw' or 'dataurl'")
    return parse_data_type(value, label=field)


def _load_toml(path: Path) -> dict[str, object]:
    with path.open("rb") as handle:
        return tomllib.load(handle)


def _get_dict(data: dict[str, object], key: str) -> dict[str, object]:
    value = data.get(key)
    if isinstance(value, dict):
        return value
    return {}


_TRUE_WORDS = frozenset({"1", "true", "yes", "on"})
_FALSE_WORDS = frozenset({"0", "false", "no", "off"})


def _parse_bool(value: object, *, field: str, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    word = str(value).strip().lower() if isinstance(value, (int, str)) else None
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    raise ValueError(f"{field} must be a boolean")


def _parse_int_strict(value: object, *, field: str) -> int:
    """Accept ints, integral floats and decimal strings; ``bool`` is rejected."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise ValueError(f"{field} must be an integer")
