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

"""Checksummed base32 text identifiers."""

from .core.errors import (
    ChecksumMismatchError,
    DecodeError,
    InvalidCharacterError,
    TruncatedIdentifierError,
)
from .encoding import (
    BASE32_ALPHABET,
    CRC_LEN,
    checksum_bytes,
    crc32,
    decode_base32,
    decode_checksummed,
    encode_base32,
    encode_checksummed,
    format_identifier,
    group_text,
    has_canonical_padding,
    parse_identifier,
    wrap_groups,
)

__all__ = [
    "BASE32_ALPHABET",
    "CRC_LEN",
    "ChecksumMismatchError",
    "DecodeError",
    "InvalidCharacterError",
    "TruncatedIdentifierError",
    "checksum_bytes",
    "crc32",
    "decode_base32",
    "decode_checksummed",
    "encode_base32",
    "encode_checksummed",
    "format_identifier",
    "group_text",
    "has_canonical_padding",
    "parse_identifier",
    "wrap_groups",
]
