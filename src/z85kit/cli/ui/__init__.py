#!/usr/bin/env python3
from __future__ import annotations

from collections.abc import Sequence

from rich import box
from rich.rule import Rule
from rich.table import Table
from rich.text import Text

from ...efficiency import EfficiencyStats
from .state import UIContext, get_context

DEFAULT_CONTEXT = get_context()
THEME = DEFAULT_CONTEXT.theme
console = DEFAULT_CONTEXT.console
console_err = DEFAULT_CONTEXT.console_err


def _resolve_context(context: UIContext | None) -> UIContext:
    return context or DEFAULT_CONTEXT


def configure_ui(*, no_color: bool, context: UIContext | None = None) -> None:
    _resolve_context(context).set_color(not no_color)


def build_kv_table(rows: Sequence[tuple[str, str]], *, title: str | None = None) -> Table:
    table = Table(title=title, show_header=False, box=box.SIMPLE, show_lines=False)
    table.add_column("Field", style="bold", no_wrap=True)
    table.add_column("Value")
    for key, value in rows:
        table.add_row(str(key), str(value))
    return table


def build_efficiency_table(stats: Sequence[EfficiencyStats]) -> Table:
    table = Table(title="Encoding efficiency", box=box.SIMPLE_HEAD)
    table.add_column("Data size", justify="right", no_wrap=True)
    table.add_column("Base64", justify="right")
    table.add_column("Z85", justify="right")
    table.add_column("Ratio", justify="right")
    table.add_column("Saving", justify="right", style="success")
    for entry in stats:
        table.add_row(
            f"{entry.original_size:,} B",
            f"{entry.base64_size:,} B",
            f"{entry.z85_size:,} B",
            f"{entry.efficiency_ratio:.4f}",
            f"{entry.bandwidth_saving:.2f}%",
        )
    return table


def print_section(title: str, *, quiet: bool, context: UIContext | None = None) -> None:
    if quiet:
        return
    context = _resolve_context(context)
    context.console.print(Rule(Text(title, style="title"), style="rule", align="left"))


__all__ = [
    "THEME",
    "build_efficiency_table",
    "build_kv_table",
    "configure_ui",
    "console",
    "console_err",
    "print_section",
]
