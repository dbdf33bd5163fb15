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

import unittest
import zlib

from textid.encoding.crc32 import CRC32_TABLE, CRC_LEN, checksum_bytes, crc32


class TestCrc32(unittest.TestCase):
    def test_reference_values(self) -> None:
        cases = (
            (b"", 0x00000000),
            (b"123456789", 0xCBF43926),
            (b"abcdefghijklmnop", 0x943AC093),
            (b"\xab\xcd\x01", 0x233FF206),
        )
        for data, expected in cases:
            with self.subTest(data=data):
                self.assertEqual(crc32(data), expected)

    def test_matches_zlib(self) -> None:
        samples = (
            b"\x00",
            b"\xff" * 7,
            bytes(range(256)),
            b"The quick brown fox jumps over the lazy dog",
            bytes(reversed(range(256))) * 3,
        )
        for data in samples:
            with self.subTest(length=len(data)):
                self.assertEqual(crc32(data), zlib.crc32(data) & 0xFFFFFFFF)

    def test_table_is_fixed(self) -> None:
        self.assertIsInstance(CRC32_TABLE, tuple)
        self.assertEqual(len(CRC32_TABLE), 256)
        self.assertEqual(CRC32_TABLE[0], 0x00000000)
        self.assertEqual(CRC32_TABLE[1], 0x77073096)
        self.assertEqual(CRC32_TABLE[255], 0x2D02EF8D)

    def test_accepts_bytes_like(self) -> None:
        data = b"123456789"
        self.assertEqual(crc32(bytearray(data)), 0xCBF43926)
        self.assertEqual(crc32(memoryview(data)), 0xCBF43926)

    def test_deterministic(self) -> None:
        data = b"identity blob"
        self.assertEqual(crc32(data), crc32(data))

    def test_checksum_bytes_big_endian(self) -> None:
        self.assertEqual(checksum_bytes(b"abcdefghijklmnop"), bytes.fromhex("943ac093"))
        self.assertEqual(checksum_bytes(b""), b"\x00" * CRC_LEN)
        self.assertEqual(len(checksum_bytes(b"x" * 1000)), CRC_LEN)


if __name__ == "__main__":
    unittest.main()
