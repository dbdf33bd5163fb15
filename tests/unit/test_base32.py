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

import base64
import unittest

from textid.core.errors import DecodeError, InvalidCharacterError
from textid.encoding.base32 import (
    BASE32_ALPHABET,
    decode_base32,
    encode_base32,
    encoded_length,
    has_canonical_padding,
)


class TestBase32Encode(unittest.TestCase):
    def test_rfc4648_vectors_without_padding(self) -> None:
        cases = (
            (b"", ""),
            (b"f", "MY"),
            (b"fo", "MZXQ"),
            (b"foo", "MZXW6"),
            (b"foob", "MZXW6YQ"),
            (b"fooba", "MZXW6YTB"),
            (b"foobar", "MZXW6YTBOI"),
        )
        for data, expected in cases:
            with self.subTest(data=data):
                self.assertEqual(encode_base32(data), expected)

    def test_matches_stdlib_without_padding(self) -> None:
        data = bytes((i * 37 + 11) & 0xFF for i in range(64))
        for length in range(len(data) + 1):
            with self.subTest(length=length):
                chunk = data[:length]
                expected = base64.b32encode(chunk).decode("ascii").rstrip("=")
                self.assertEqual(encode_base32(chunk), expected)

    def test_length_law(self) -> None:
        for length in range(0, 41):
            with self.subTest(length=length):
                encoded = encode_base32(b"\xa5" * length)
                self.assertEqual(len(encoded), -(-length * 8 // 5))
                self.assertEqual(len(encoded), encoded_length(length))

    def test_output_uses_alphabet_only(self) -> None:
        encoded = encode_base32(bytes(range(256)))
        self.assertTrue(set(encoded) <= set(BASE32_ALPHABET))
        self.assertNotIn("=", encoded)

    def test_encoded_length_rejects_negative(self) -> None:
        with self.assertRaisesRegex(ValueError, "non-negative"):
            encoded_length(-1)


class TestBase32Decode(unittest.TestCase):
    def test_reference_scenarios(self) -> None:
        cases = (
            ("", b""),
            ("GEZDGNBVGY3TQOI", b"123456789"),
            ("MFRGGZDFMZTWQ2LKNNWG23TPOA", b"abcdefghijklmnop"),
            ("em77e-bvlzu-aq", b"\x23\x3f\xf2\x06\xab\xcd\x01"),
        )
        for text, expected in cases:
            with self.subTest(text=text):
                self.assertEqual(decode_base32(text), expected)

    def test_roundtrip(self) -> None:
        data = bytes((i * 91 + 7) & 0xFF for i in range(50))
        for length in range(len(data) + 1):
            with self.subTest(length=length):
                self.assertEqual(decode_base32(encode_base32(data[:length])), data[:length])

    def test_case_and_separator_insensitive(self) -> None:
        grouped = "mzxw6-ytboi"
        expected = b"foobar"
        self.assertEqual(decode_base32(grouped), expected)
        self.assertEqual(decode_base32(grouped.upper()), expected)
        self.assertEqual(decode_base32(grouped.replace("-", "")), expected)
        self.assertEqual(decode_base32("Mz-Xw-6y-Tb-Oi"), expected)
        self.assertEqual(decode_base32("---"), b"")

    def test_rejects_non_alphabet_characters(self) -> None:
        cases = (
            ("MZXW6YQ=", "=", 7),
            ("MZ XW", " ", 2),
            ("abc1", "1", 3),
            ("0", "0", 0),
            ("mzxw-8", "8", 5),
            ("MZßW", "ß", 2),
        )
        for text, char, position in cases:
            with self.subTest(text=text):
                with self.assertRaises(InvalidCharacterError) as ctx:
                    decode_base32(text)
                self.assertEqual(ctx.exception.char, char)
                self.assertEqual(ctx.exception.position, position)
                self.assertIsInstance(ctx.exception, DecodeError)
                self.assertIsInstance(ctx.exception, ValueError)

    def test_error_message_names_character(self) -> None:
        with self.assertRaisesRegex(ValueError, r"invalid base32 character '!' at position 1"):
            decode_base32("A!")

    def test_trailing_bits_are_not_validated(self) -> None:
        # "J" carries a set bit in the three padding positions where "I" does not.
        self.assertEqual(decode_base32("GEZDGNBVGY3TQOJ"), b"123456789")
        self.assertEqual(decode_base32("A"), b"")

    def test_has_canonical_padding(self) -> None:
        self.assertTrue(has_canonical_padding(""))
        self.assertTrue(has_canonical_padding("GEZDGNBVGY3TQOI"))
        self.assertTrue(has_canonical_padding("em77e-bvlzu-aq"))
        self.assertTrue(has_canonical_padding("MZXW6YTB"))
        self.assertFalse(has_canonical_padding("GEZDGNBVGY3TQOJ"))
        self.assertFalse(has_canonical_padding("em77e-bvlzu-ar"))
        with self.assertRaises(InvalidCharacterError):
            has_canonical_padding("MY=")


if __name__ == "__main__":
    unittest.main()
