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

"""Decode errors.

Every error derives from ``ValueError`` so code that already guards codec calls
with ``except ValueError`` keeps working.
"""

from __future__ import annotations


class DecodeError(ValueError):
    """Text could not be turned back into a blob."""


class InvalidCharacterError(DecodeError):
    def __init__(self, char: str, position: int) -> None:
        self.char = char
        self.position = position
        super().__init__(f"invalid base32 character {char!r} at position {position}")


class TruncatedIdentifierError(DecodeError):
    def __init__(self, length: int, required: int) -> None:
        self.length = length
        self.required = required
        super().__init__(
            f"identifier too short: {length} bytes decoded, at least {required} required"
        )


class ChecksumMismatchError(DecodeError):
    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"checksum mismatch: expected {expected:08x}, computed {actual:08x}")
