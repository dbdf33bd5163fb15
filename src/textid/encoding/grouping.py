#!/usr/bin/env python3
from __future__ import annotations

from .base32 import BASE32_LOOKUP, SEPARATOR
from .checksummed import decode_checksummed, encode_checksummed

DEFAULT_GROUP_SIZE = 5
DEFAULT_LINE_LENGTH = 80


def group_text(
    text: str,
    *,
    group_size: int = DEFAULT_GROUP_SIZE,
    separator: str = SEPARATOR,
    lowercase: bool = True,
) -> str:
    if group_size <= 0:
        raise ValueError("group_size must be positive")
    if any(ch in BASE32_LOOKUP for ch in separator):
        raise ValueError("separator must not contain base32 symbols")
    if lowercase:
        text = text.lower()
    groups = [text[i : i + group_size] for i in range(0, len(text), group_size)]
    return separator.join(groups)


def format_identifier(
    data: bytes,
    *,
    group_size: int = DEFAULT_GROUP_SIZE,
    separator: str = SEPARATOR,
    lowercase: bool = True,
) -> str:
    return group_text(
        encode_checksummed(data),
        group_size=group_size,
        separator=separator,
        lowercase=lowercase,
    )


def parse_identifier(text: str) -> bytes:
    return decode_checksummed(text)


def wrap_groups(
    text: str,
    *,
    separator: str = SEPARATOR,
    line_length: int = DEFAULT_LINE_LENGTH,
) -> list[str]:
    if line_length <= 0:
        raise ValueError("line_length must be positive")
    if not text:
        return []
    groups = text.split(separator) if separator else [text]

    lines: list[str] = []
    current = ""
    for group in groups:
        candidate = group if not current else f"{current}{separator}{group}"
        if current and len(candidate) > line_length:
            lines.append(current)
            current = group
        else:
            current = candidate

    if current:
        lines.append(current)
    return lines
