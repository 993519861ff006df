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
"""Shared rich consoles.

Command results go to ``console`` (stdout). Warnings, errors and status notes go
to ``console_err`` (stderr) so piped output stays clean.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import TextIO

from rich.console import Console
from rich.theme import Theme

THEME = Theme(
    {
        "title": "bold cyan",
        "rule": "blue",
        "success": "green",
        "warning": "yellow",
        "error": "bold red",
        "muted": "dim",
    }
)


def stream_is_terminal(stream: TextIO | None, fallback: TextIO | None) -> bool:
    """Report whether ``stream`` (or ``fallback`` when it is unset) is a TTY."""
    target = stream if stream is not None else fallback
    try:
        return bool(target.isatty())
    except (AttributeError, OSError, ValueError):
        return False


@dataclass
class UIContext:
    theme: Theme
    console: Console
    console_err: Console

    def set_color(self, enabled: bool) -> None:
        self.console.no_color = not enabled
        self.console_err.no_color = not enabled


def _make_console(*, stderr: bool) -> Console:
    if stderr:
        tty = stream_is_terminal(sys.__stderr__, sys.stderr)
    else:
        tty = stream_is_terminal(sys.__stdout__, sys.stdout)
    return Console(stderr=stderr, theme=THEME, force_terminal=tty)


def build_context() -> UIContext:
    return UIContext(
        theme=THEME,
        console=_make_console(stderr=False),
        console_err=_make_console(stderr=True),
    )


_CONTEXT = build_context()


def get_context() -> UIContext:
    return _CONTEXT
