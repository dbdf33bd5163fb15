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

"""Base32 text with a CRC-32 prefix.

The checksum is computed over the blob, serialized big-endian and placed in
front of the blob before the whole thing is base32-encoded.
"""

from __future__ import annotations

from ..core.errors import ChecksumMismatchError, TruncatedIdentifierError
from .base32 import decode_base32, encode_base32
from .crc32 import CRC_LEN, checksum_bytes, crc32


def encode_checksummed(data: bytes) -> str:
    data = bytes(data)
    return encode_base32(checksum_bytes(data) + data)


def split_checksummed(raw: bytes) -> tuple[int, bytes]:
    if len(raw) < CRC_LEN:
        raise TruncatedIdentifierError(len(raw), CRC_LEN)
    expected = int.from_bytes(raw[:CRC_LEN], "big")
    return expected, bytes(raw[CRC_LEN:])


def decode_checksummed(text: str) -> bytes:
    expected, payload = split_checksummed(decode_base32(text))
    actual = crc32(payload)
    if expected != actual:
        raise ChecksumMismatchError(expected, actual)
    return payload
