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

from ...core.errors import InvalidCharacterError
from ...encoding import decode_base32, decode_checksummed, has_canonical_padding
from ..core.common import _ctx_app_config, _ctx_value, _run_cli
from ..core.io import _read_text, _strip_decorations, _write_output
from ..core.log import _warn
from ..ui import console

_DECODE_HELP = (
    "Decode base32 text back into the original blob.\n\n"
    "Case, whitespace, '-' and the configured format.separator are ignored. With --verify\n"
    "(the default when format.checksum is enabled) the CRC-32 prefix is checked and stripped.\n\n"
    "Examples:\n"
    "  textid decode em77e-bvlzu-aq\n"
    "  textid decode --no-verify GEZDGNBVGY3TQOI --format text\n"
    "  textid decode --file id.txt --output key.bin\n"
)
_OUTPUT_FORMATS = ("hex", "text", "raw")


def _format_callback(value: str) -> str:
    normalized = value.strip().lower()
    if normalized not in _OUTPUT_FORMATS:
        raise typer.BadParameter("format must be hex, text, or raw")
    return normalized


def register(app: typer.Typer) -> None:
    app.command(help=_DECODE_HELP)(decode)


def decode(
    ctx: typer.Context,
    text: str | None = typer.Argument(
        None,
        help="Base32 text to decode.",
        show_default=False,
    ),
    file: str | None = typer.Option(
        None,
        "--file",
        "-f",
        help="Read the text from a file (use - for stdin). Line breaks are ignored.",
        rich_help_panel="Inputs",
    ),
    verify: bool | None = typer.Option(
        None,
        "--verify/--no-verify",
        help="Check and strip the CRC-32 prefix.",
        show_default=False,
        rich_help_panel="Verification",
    ),
    output_format: str = typer.Option(
        "hex",
        "--format",
        help="How to print the blob: hex, text (UTF-8), or raw bytes.",
        callback=_format_callback,
        rich_help_panel="Output",
    ),
    output: str | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the raw blob to this file instead of printing it.",
        rich_help_panel="Output",
    ),
) -> None:
    quiet_value = bool(_ctx_value(ctx, "quiet"))
    debug_value = bool(_ctx_value(ctx, "debug"))

    def _run() -> None:
        fmt = _ctx_app_config(ctx).format
        source, positions = _strip_decorations(
            _read_text(text, file=file),
            separator=fmt.separator,
        )
        use_verify = fmt.checksum if verify is None else verify
        try:
            blob = decode_checksummed(source) if use_verify else decode_base32(source)
        except InvalidCharacterError as exc:
            raise InvalidCharacterError(exc.char, positions[exc.position]) from exc
        if not has_canonical_padding(source):
            _warn("trailing padding bits are not zero; they were ignored", quiet=quiet_value)
        if output:
            _write_output(output, blob, quiet=quiet_value)
            return
        if output_format == "raw":
            _write_output(None, blob, quiet=quiet_value)
        elif output_format == "text":
            try:
                decoded = blob.decode("utf-8")
            except UnicodeDecodeError as exc:
                raise ValueError("decoded blob is not UTF-8 text; use --format hex") from exc
            _print_line(decoded)
        else:
            _print_line(blob.hex())

    _run_cli(_run, debug=debug_value)


def _print_line(text: str) -> None:
    console.print(text, soft_wrap=True, highlight=False, markup=False, emoji=False)
