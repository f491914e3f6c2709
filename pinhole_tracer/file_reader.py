"""Reading simple ``key = value`` configuration files."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable
from os import PathLike
from typing import Dict, List, Optional, Union

_WHITESPACE = " \t\r\n"
_INT_MIN = -(2 ** 31)
_INT_MAX = 2 ** 31 - 1

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_HEX_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?)0[xX]((?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?\d+)?)")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE)


class ConfigError(Exception):
    """A configuration file is missing, unreadable or holds bad values."""


def read_file_lines(filename: Union[str, PathLike]) -> List[str]:
    """The non-empty lines of a file, without their newline characters.

    Raises ConfigError if the file cannot be opened.
    """
    try:
        with open(filename, encoding="utf-8", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise ConfigError(f"could not read {filename}") from exc
    return [line for line in text.split("\n") if line]


def filter_desired_lines(lines: Iterable[str], invalid_line_start: str) -> List[str]:
    """Drop empty lines and lines that start with ``invalid_line_start``."""
    return [line for line in lines if line and line[0] != invalid_line_start]


def split_lines_across_equals(lines: Iterable[str]) -> Dict[str, str]:
    """Map keys to values for lines of the form ``key = value``.

    Lines with no ``=`` or with ``=`` as the last character are skipped;
    a later line overrides an earlier one with the same key.
    """
    pairs: Dict[str, str] = {}
    for line in lines:
        key, sep, value = line.partition("=")
        if sep and value:
            pairs[key.strip(_WHITESPACE)] = value.strip(_WHITESPACE)
    return pairs


def _parse_int(value: str) -> Optional[int]:
    match = _INT_PREFIX.match(value)
    if match is None:
        return None
    number = int(match.group(1))
    if not _INT_MIN <= number <= _INT_MAX:
        return None
    return number


def _parse_float(value: str) -> Optional[float]:
    hex_match = _HEX_FLOAT_PREFIX.match(value)
    if hex_match is not None:
        sign, body = hex_match.groups()
        try:
            number = float.fromhex(f"{sign}0x{body}")
        except OverflowError:
            return None
        return None if math.isinf(number) else number

    match = _FLOAT_PREFIX.match(value)
    if match is None:
        return None
    text = match.group(1)
    number = float(text)
    if math.isinf(number) and "inf" not in text.lower():
        return None
    return number


def generalised_cast(value: str, target_type: type) -> Optional[object]:
    """Convert a config value to ``str``, ``bool``, ``int`` or ``float``.

    Numbers are read from the start of the string and trailing text is
    ignored. Returns None when the value cannot be converted; raises
    TypeError for any other target type.
    """
    if target_type is str:
        return value
    if target_type is bool:
        if value == "true":
            return True
        if value == "false":
            return False
        return None
    if target_type is int:
        return _parse_int(value)
    if target_type is float:
        return _parse_float(value)
    raise TypeError(f"cannot convert config values to {target_type!r}")