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

from ...encoding import crc32
from ..core.common import _ctx_value, _run_cli
from ..core.io import _read_blob
from ..ui import console


def register(app: typer.Typer) -> None:
    app.command(
        help=(
            "Print the CRC-32 of a blob as 8 hex digits.\n\n"
            "Examples:\n"
            "  textid checksum 123456789\n"
            "  textid checksum --file key.bin\n"
        )
    )(checksum)


def checksum(
    ctx: typer.Context,
    data: str | None = typer.Argument(
        None,
        help="Blob to checksum (UTF-8 text, or hex with --hex).",
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
) -> None:
    debug_value = bool(_ctx_value(ctx, "debug"))

    def _run() -> None:
        blob = _read_blob(data, file=file, hex_input=hex_input)
        console.print(f"{crc32(blob):08x}", highlight=False, markup=False)

    _run_cli(_run, debug=debug_value)
