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

import os

from rich.traceback import install as install_rich_traceback

from ..config import (
    CONFIG_PATH_ENV,
    UiDefaults,
    init_user_config,
    load_app_config,
    user_config_needs_init,
)
from .api import configure_ui, console
from .core.log import _note, _warn


def run_startup(
    *,
    config: str | None,
    quiet: bool,
    no_color: bool,
    debug: bool,
    init_config: bool,
) -> tuple[bool, UiDefaults]:
    """Prepare consoles and the user config.

    Returns ``(should_exit, ui)`` where ``ui`` merges command-line flags with the
    ``[ui]`` section of the active config.
    """
    configure_ui(no_color=no_color)
    if debug:
        install_rich_traceback(show_locals=True)
    if init_config:
        config_dir = init_user_config()
        console.print(f"User config ready at {config_dir}")
        return True, UiDefaults(quiet=quiet, no_color=no_color)
    if _uses_user_config(config) and user_config_needs_init():
        try:
            config_dir = init_user_config()
        except OSError as exc:
            _warn(f"{exc}; using packaged defaults", quiet=quiet)
        else:
            _note(f"Initialized user config at {config_dir}", quiet=quiet)
    ui = load_app_config(config).ui
    merged = UiDefaults(quiet=quiet or ui.quiet, no_color=no_color or ui.no_color)
    configure_ui(no_color=merged.no_color)
    return False, merged


def _uses_user_config(config: str | None) -> bool:
    if config is not None:
        return False
    return not (os.environ.get(CONFIG_PATH_ENV) or "").strip()
