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

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, cast

from ..encoding.base32 import BASE32_LOOKUP, SEPARATOR
from ..encoding.grouping import DEFAULT_GROUP_SIZE
from .installer import resolve_config_path


@dataclass(frozen=True)
class FormatDefaults:
    group_size: int = DEFAULT_GROUP_SIZE
    separator: str = SEPARATOR
    case: Literal["lower", "upper"] = "lower"
    checksum: bool = True
    line_length: int | None = None


@dataclass(frozen=True)
class UiDefaults:
    quiet: bool = False
    no_color: bool = False


@dataclass(frozen=True)
class AppConfig:
    path: Path
    format: FormatDefaults = field(default_factory=FormatDefaults)
    ui: UiDefaults = field(default_factory=UiDefaults)


def load_app_config(path: str | Path | None = None) -> AppConfig:
    config_path = resolve_config_path(path)
    data = _load_toml(config_path)
    return AppConfig(
        path=config_path,
        format=_parse_format_defaults(_get_dict(data, "format")),
        ui=_parse_ui_defaults(_get_dict(data, "ui")),
    )


def _parse_format_defaults(cfg: dict[str, object]) -> FormatDefaults:
    group_size = _parse_optional_int_strict(cfg.get("group_size"), field="format.group_size")
    if group_size is not None and group_size <= 0:
        raise ValueError("format.group_size must be a positive integer")
    line_length = _parse_optional_int_strict(cfg.get("line_length"), field="format.line_length")
    if line_length is not None and line_length < 0:
        raise ValueError("format.line_length must be a positive integer or 0")
    return FormatDefaults(
        group_size=DEFAULT_GROUP_SIZE if group_size is None else group_size,
        separator=_parse_separator(cfg.get("separator"), field="format.separator"),
        case=_parse_case(cfg.get("case"), field="format.case"),
        checksum=_parse_bool(cfg.get("checksum"), field="format.checksum", default=True),
        line_length=line_length or None,
    )


def _parse_ui_defaults(cfg: dict[str, object]) -> UiDefaults:
    return UiDefaults(
        quiet=_parse_bool(cfg.get("quiet"), field="ui.quiet", default=False),
        no_color=_parse_bool(cfg.get("no_color"), field="ui.no_color", default=False),
    )


def _load_toml(path: Path) -> dict[str, object]:
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ValueError(f"invalid config file {path}: {exc}") from exc


def _get_dict(data: dict[str, object], key: str) -> dict[str, object]:
    value = data.get(key)
    if isinstance(value, dict):
        return value
    return {}


def _parse_separator(value: object, *, field: str) -> str:
    if value is None:
        return SEPARATOR
    if not isinstance(value, str):
        raise ValueError(f"{field} must be a string")
    if any(ch in BASE32_LOOKUP for ch in value):
        raise ValueError(f"{field} must not contain base32 symbols")
    return value


def _parse_case(value: object, *, field: str) -> Literal["lower", "upper"]:
    if value is None:
        return "lower"
    if not isinstance(value, str):
        raise ValueError(f"{field} must be 'lower' or 'upper'")
    normalized = value.strip().lower()
    if normalized not in {"lower", "upper"}:
        raise ValueError(f"{field} must be 'lower' or 'upper'")
    return cast(Literal["lower", "upper"], normalized)


def _parse_bool(value: object, *, field: str, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        if value in (0, 1):
            return bool(value)
        raise ValueError(f"{field} must be a boolean")
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
        raise ValueError(f"{field} must be a boolean")
    raise ValueError(f"{field} must be a boolean")


def _parse_optional_int_strict(value: object, *, field: str) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError(f"{field} must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"{field} must be an integer")
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return int(text)
        except ValueError as exc:
            raise ValueError(f"{field} must be an integer") from exc
    raise ValueError(f"{field} must be an integer")
