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

from .base32 import (
    BASE32_ALPHABET as BASE32_ALPHABET,
    BASE32_LOOKUP as BASE32_LOOKUP,
    SEPARATOR as SEPARATOR,
    decode_base32 as decode_base32,
    encode_base32 as encode_base32,
    encoded_length as encoded_length,
    has_canonical_padding as has_canonical_padding,
)
from .checksummed import (
    decode_checksummed as decode_checksummed,
    encode_checksummed as encode_checksummed,
    split_checksummed as split_checksummed,
)
from .crc32 import CRC_LEN as CRC_LEN, checksum_bytes as checksum_bytes, crc32 as crc32
from .grouping import (
    format_identifier as format_identifier,
    group_text as group_text,
    parse_identifier as parse_identifier,
    wrap_groups as wrap_groups,
)
