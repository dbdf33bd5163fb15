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

from types import MappingProxyType

from ..core.errors import InvalidCharacterError

BASE32_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
SEPARATOR = "-"

# Lower-case keys are listed explicitly; str.upper() would fold some non-ASCII
# letters (e.g. "ß") into alphabet symbols.
BASE32_LOOKUP = MappingProxyType(
    {
        **{ch: idx for idx, ch in enumerate(BASE32_ALPHABET)},
        **{ch.lower(): idx for idx, ch in enumerate(BASE32_ALPHABET)},
    }
)


def encoded_length(byte_count: int) -> int:
    if byte_count < 0:
        raise ValueError("byte_count must be non-negative")
    return (byte_count * 8 + 4) // 5


def encode_base32(data: bytes) -> str:
    if not data:
        return ""
    bits = 0
    bit_count = 0
    out_chars: list[str] = []

    for byte in bytes(data):
        bits = (bits << 8) | byte
        bit_count += 8
        while bit_count >= 5:
            shift = bit_count - 5
            index = (bits >> shift) & 0x1F
            out_chars.append(BASE32_ALPHABET[index])
            bit_count -= 5
            bits &= (1 << bit_count) - 1

    if bit_count:
        index = (bits << (5 - bit_count)) & 0x1F
        out_chars.append(BASE32_ALPHABET[index])

    return "".join(out_chars)


def decode_base32(text: str) -> bytes:
    """Decode unpadded base32, ignoring case and ``-`` separators.

    Bits left over after the last whole byte are dropped without being checked;
    use :func:`has_canonical_padding` to find out whether they were zero.
    """
    bits = 0
    bit_count = 0
    out = bytearray()

    for position, value in _symbol_values(text):
        bits = (bits << 5) | value
        bit_count += 5
        if bit_count >= 8:
            shift = bit_count - 8
            out.append((bits >> shift) & 0xFF)
            bit_count -= 8
            bits &= (1 << bit_count) - 1
    return bytes(out)


def has_canonical_padding(text: str) -> bool:
    bits = 0
    bit_count = 0
    for _position, value in _symbol_values(text):
        bits = ((bits << 5) | value) & 0xFF
        bit_count = (bit_count + 5) % 8
    if not bit_count:
        return True
    return bits & ((1 << bit_count) - 1) == 0


def _symbol_values(text: str):
    for position, char in enumerate(text):
        if char == SEPARATOR:
            continue
        value = BASE32_LOOKUP.get(char)
        if value is None:
            raise InvalidCharacterError(char, position)
        yield position, value
