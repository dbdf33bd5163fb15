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

import sys
from pathlib import Path

from ..ui import console_err


def _read_blob(data: str | None, *, file: str | None, hex_input: bool) -> bytes:
    if data is not None and file is not None:
        raise ValueError("use either DATA or --file, not both")
    if file is not None:
        raw = _read_file_bytes(file)
        if hex_input:
            return _parse_hex(raw.decode("ascii", errors="replace"))
        return raw
    if data is None:
        raise ValueError("provide DATA or --file (use - for stdin)")
    if hex_input:
        return _parse_hex(data)
    return data.encode("utf-8")


def _read_text(text: str | None, *, file: str | None) -> str:
    if text is not None and file is not None:
        raise ValueError("use either TEXT or --file, not both")
    if file is not None:
        raw = _read_file_bytes(file)
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ValueError(f"input is not UTF-8 text: {file}") from exc
    if text is None:
        raise ValueError("provide TEXT or --file (use - for stdin)")
    return text


def _strip_decorations(text: str, *, separator: str) -> tuple[str, list[int]]:
    """Drop whitespace and separator characters.

    Returns the compact text and, for each kept character, its index in ``text``.
    """
    kept: list[str] = []
    positions: list[int] = []
    for index, char in enumerate(text):
        # Line breaks come from wrapped paper copies.
        if char.isspace() or char in separator:
            continue
        kept.append(char)
        positions.append(index)
    return "".join(kept), positions


def _parse_hex(text: str) -> bytes:
    cleaned = "".join(text.split())
    if cleaned[:2].lower() == "0x":
        cleaned = cleaned[2:]
    try:
        return bytes.fromhex(cleaned)
    except ValueError as exc:
        raise ValueError("input is not valid hex") from exc


def _read_file_bytes(path: str) -> bytes:
    if path == "-":
        return sys.stdin.buffer.read()
    try:
        return Path(path).expanduser().read_bytes()
    except FileNotFoundError as exc:
        raise ValueError(f"file not found: {path}") from exc
    except OSError as exc:
        raise ValueError(f"unable to read file: {path}") from exc


def _write_output(path: str | None, data: bytes, *, quiet: bool) -> None:
    if path:
        with open(path, "wb") as handle:
            handle.write(data)
        if not quiet:
            console_err.print(f"[dim]- wrote {path}[/dim]")
    else:
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
