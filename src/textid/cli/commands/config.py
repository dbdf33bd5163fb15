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
import shlex
import subprocess
from pathlib import Path

import typer

from ...config import user_config_needs_init
from ..core.common import _ctx_app_config, _ctx_value, _run_cli
from ..ui import build_kv_table, console, console_err

_CONFIG_HELP = (
    "Show or edit the active TOML config.\n\n"
    "Without options the effective [format] and [ui] settings are printed.\n"
    "If no editor is specified, textid uses $VISUAL / $EDITOR when set, otherwise it opens\n"
    "the file with the system default application.\n\n"
    "Examples:\n"
    "  textid config\n"
    "  textid config --print-path\n"
    "  textid --config ./textid.toml config --edit\n"
    '  textid config --edit --editor "code -w"\n'
)


def register(app: typer.Typer) -> None:
    app.command(help=_CONFIG_HELP)(config)


def config(
    ctx: typer.Context,
    print_path: bool = typer.Option(
        False,
        "--print-path",
        help="Print the resolved config path and exit.",
        rich_help_panel="Behavior",
    ),
    edit: bool = typer.Option(
        False,
        "--edit",
        help="Open the config file in an editor.",
        rich_help_panel="Behavior",
    ),
    editor: str | None = typer.Option(
        None,
        "--editor",
        "-e",
        help="Editor command (defaults to $VISUAL/$EDITOR; use 'default' for system opener).",
        rich_help_panel="Behavior",
    ),
) -> None:
    quiet_value = bool(_ctx_value(ctx, "quiet"))
    debug_value = bool(_ctx_value(ctx, "debug"))

    def _run() -> None:
        app_config = _ctx_app_config(ctx)
        if print_path:
            console.print(str(app_config.path), soft_wrap=True, highlight=False)
            return
        if edit or editor is not None:
            _open_in_editor(app_config.path, editor=editor, quiet=quiet_value)
            return
        fmt = app_config.format
        rows = [
            ("path", str(app_config.path)),
            ("format.group_size", str(fmt.group_size)),
            ("format.separator", repr(fmt.separator)),
            ("format.case", fmt.case),
            ("format.checksum", str(fmt.checksum).lower()),
            ("format.line_length", str(fmt.line_length or 0)),
            ("ui.quiet", str(app_config.ui.quiet).lower()),
            ("ui.no_color", str(app_config.ui.no_color).lower()),
        ]
        console.print(build_kv_table(rows))
        if not quiet_value and user_config_needs_init():
            console_err.print(
                "[dim]Hint: run `textid --init-config` to create a user config.[/dim]"
            )

    _run_cli(_run, debug=debug_value)


def _open_in_editor(path: Path, *, editor: str | None, quiet: bool) -> None:
    resolved = Path(os.path.expandvars(str(path))).expanduser()
    if not resolved.exists():
        raise FileNotFoundError(f"config file not found: {resolved}")

    editor_cmd = _resolve_editor_command(editor)
    if editor_cmd is None:
        if not quiet:
            console.print(f"[dim]Opening {resolved}...[/dim]")
        typer.launch(str(resolved))
        return

    if not quiet:
        console.print(f"[dim]Opening {resolved} with {' '.join(editor_cmd)}...[/dim]")
    subprocess.run([*editor_cmd, str(resolved)], check=False)


def _resolve_editor_command(editor: str | None) -> list[str] | None:
    if editor is not None:
        value = editor.strip()
        if not value:
            return None
        if value.lower() in {"default", "system"}:
            return None
        return shlex.split(value, posix=os.name != "nt")

    value = os.environ.get("VISUAL") or os.environ.get("EDITOR") or ""
    value = value.strip()
    if not value:
        return None
    return shlex.split(value, posix=os.name != "nt")
