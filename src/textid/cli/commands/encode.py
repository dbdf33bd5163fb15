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

import typer

from ...encoding import encode_base32, encode_checksummed, group_text, wrap_groups
from ..core.common import _ctx_app_config, _ctx_value, _run_cli
from ..core.io import _read_blob
from ..ui import console

_ENCODE_HELP = (
    "Encode a blob as checksummed base32 text.\n\n"
    "By default the output is the identifier form: CRC-32 prefix, lower-case,\n"
    "grouped in runs of 5 with '-'. Defaults come from the [format] config section.\n\n"
    "Examples:\n"
    "  textid encode hello\n"
    "  textid encode --hex abcd01\n"
    "  textid encode --file key.bin --line-length 40\n"
    "  textid encode --plain --file - < blob.bin\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_ENCODE_HELP)(encode)


def encode(
    ctx: typer.Context,
    data: str | None = typer.Argument(
        None,
        help="Blob to encode (UTF-8 text, or hex with --hex).",
        show_default=False,
    ),
    file: str | None = typer.Option(
        None,
        "--file",
        "-f",
        help="Read the blob from a file (use - for stdin).",
        rich_help_panel="Inputs",
    ),
    hex_input: bool = typer.Option(
        False,
        "--hex",
        help="Treat the input as hex.",
        rich_help_panel="Inputs",
    ),
    plain: bool = typer.Option(
        False,
        "--plain",
        help="Canonical base32 only: no checksum, upper-case, no separators.",
        rich_help_panel="Format",
    ),
    checksum: bool | None = typer.Option(
        None,
        "--checksum/--no-checksum",
        help="Prefix the CRC-32 of the blob.",
        show_default=False,
        rich_help_panel="Format",
    ),
    grouped: bool = typer.Option(
        True,
        "--grouped/--no-grouped",
        help="Split the text into separator-joined groups.",
        rich_help_panel="Format",
    ),
    upper: bool | None = typer.Option(
        None,
        "--upper/--lower",
        help="Letter case of the output.",
        show_default=False,
        rich_help_panel="Format",
    ),
    line_length: int | None = typer.Option(
        None,
        "--line-length",
        min=0,
        help="Wrap grouped output onto lines of at most N characters (0 = never).",
        rich_help_panel="Format",
    ),
) -> None:
    debug_value = bool(_ctx_value(ctx, "debug"))

    def _run() -> None:
        blob = _read_blob(data, file=file, hex_input=hex_input)
        if plain:
            _print_lines([encode_base32(blob)])
            return
        fmt = _ctx_app_config(ctx).format
        use_checksum = fmt.checksum if checksum is None else checksum
        encoded = encode_checksummed(blob) if use_checksum else encode_base32(blob)
        lowercase = fmt.case == "lower" if upper is None else not upper
        if not grouped:
            _print_lines([encoded.lower() if lowercase else encoded])
            return
        text = group_text(
            encoded,
            group_size=fmt.group_size,
            separator=fmt.separator,
            lowercase=lowercase,
        )
        wrap_at = fmt.line_length if line_length is None else line_length
        if wrap_at:
            _print_lines(wrap_groups(text, separator=fmt.separator, line_length=wrap_at))
        else:
            _print_lines([text])

    _run_cli(_run, debug=debug_value)


def _print_lines(lines: list[str]) -> None:
    for line in lines or [""]:
        console.print(line, soft_wrap=True, highlight=False, markup=False, emoji=False)
