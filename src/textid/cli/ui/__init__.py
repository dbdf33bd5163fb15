#!/usr/bin/env python3
from __future__ import annotations

from rich.table import Table

from .state import UIContext, get_context

DEFAULT_CONTEXT = get_context()
THEME = DEFAULT_CONTEXT.theme
console = DEFAULT_CONTEXT.console
console_err = DEFAULT_CONTEXT.console_err


def _resolve_context(context: UIContext | None) -> UIContext:
    return context or DEFAULT_CONTEXT


def configure_ui(*, no_color: bool, context: UIContext | None = None) -> None:
    context = _resolve_context(context)
    context.console.no_color = no_color
    context.console_err.no_color = no_color


def build_kv_table(rows: list[tuple[str, str]], *, title: str | None = None) -> Table:
    table = Table(title=title, show_header=False, box=None, pad_edge=False)
    table.add_column(style="muted", no_wrap=True)
    table.add_column(style="accent", overflow="fold")
    for key, value in rows:
        table.add_row(key, value)
    return table


__all__ = [
    "THEME",
    "build_kv_table",
    "configure_ui",
    "console",
    "console_err",
]
