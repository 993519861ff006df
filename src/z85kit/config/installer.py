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

"""Locate the active config file and install the packaged default on first use.

Lookup order: an explicit path, then ``$Z85KIT_CONFIG``, then
``<user config dir>/z85kit/config.toml`` (created from ``default.toml`` when
missing), then the packaged ``default.toml`` itself.
"""

from __future__ import annotations

import os
import shutil
import sys
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "z85kit"
PACKAGE_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_CONFIG_PATH = PACKAGE_ROOT / "config/default.toml"
CONFIG_FILENAME = "config.toml"
CONFIG_PATH_ENV = "Z85KIT_CONFIG"
XDG_CONFIG_ENV = "XDG_CONFIG_HOME"


@dataclass(frozen=True)
class ConfigPaths:
    user_config_dir: Path
    user_config_path: Path


def _user_config_dir() -> Path:
    xdg_home = os.environ.get(XDG_CONFIG_ENV)
    if xdg_home:
        return Path(xdg_home) / APP_NAME
    if sys.platform == "darwin":
        return Path.home() / ".config" / APP_NAME
    return Path(user_config_dir(APP_NAME, appauthor=False))


def _build_paths() -> ConfigPaths:
    base = _user_config_dir()
    return ConfigPaths(user_config_dir=base, user_config_path=base / CONFIG_FILENAME)


def init_user_config() -> Path:
    """Install the default config into the user directory and return that directory."""
    paths = _build_paths()
    if not _ensure_user_config(paths):
        raise OSError(f"unable to create config dir at {paths.user_config_dir}")
    return paths.user_config_dir


def user_config_needs_init() -> bool:
    return not _build_paths().user_config_path.exists()


def resolve_config_path(path: str | Path | None = None) -> Path:
    if path:
        return Path(path)
    from_env = (os.environ.get(CONFIG_PATH_ENV) or "").strip()
    if from_env:
        return Path(from_env)
    paths = _build_paths()
    if _ensure_user_config(paths):
        return paths.user_config_path
    return DEFAULT_CONFIG_PATH


def _ensure_user_config(paths: ConfigPaths) -> bool:
    """Copy ``default.toml`` into place unless a user config already exists."""
    if paths.user_config_path.exists():
        return True
    try:
        paths.user_config_dir.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(DEFAULT_CONFIG_PATH, paths.user_config_path)
    except OSError:
        return False
    return True
