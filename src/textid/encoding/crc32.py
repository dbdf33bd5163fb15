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

"""CRC-32 (ISO-HDLC), the same variant as ``zlib.crc32``."""

from __future__ import annotations

CRC32_POLYNOMIAL = 0xEDB88320
CRC_LEN = 4
_MASK32 = 0xFFFFFFFF


def _build_table() -> tuple[int, ...]:
    table: list[int] = []
    for index in range(256):
        crc = index
        for _ in range(8):
            if crc & 1:
                crc = (crc >> 1) ^ CRC32_POLYNOMIAL
            else:
                crc >>= 1
        table.append(crc)
    return tuple(table)


CRC32_TABLE = _build_table()


def crc32(data: bytes) -> int:
    crc = _MASK32
    for byte in bytes(data):
        crc = (crc >> 8) ^ CRC32_TABLE[(crc ^ byte) & 0xFF]
    return crc ^ _MASK32


def checksum_bytes(data: bytes) -> bytes:
    """Return the CRC-32 of ``data`` as 4 big-endian bytes."""
    return crc32(data).to_bytes(CRC_LEN, "big")
