# -*- encoding: utf-8 -*-
# @File   : codec.py
# @Time   : 2024/11/03 14:20:55
# @Author : Kariko Lin

"""Typed views over the raw `str` values.

Values are always stored as text. Reading and writing other types
go through the functions here, one per supported type.
"""

from re import ASCII
from re import compile as regex

from .consts import FALSE_PRINT, TRUE_ALIASES, TRUE_PRINT

# leading numbers, read like `12px` -> 12.
# ASCII digits only: no `1_000`, no `nan`/`inf`, no full-width digits.
_INT_PREFIX = regex(r'\s*([+-]?\d+)', ASCII)
_FLOAT_PREFIX = regex(
    r'\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)', ASCII)

Scalar = bool | int | float | str


def decode_bool(text: str) -> bool:
    return text.lower() in TRUE_ALIASES


def decode_int(text: str) -> int | None:
    """`None` if no integer can be read from the start of `text`."""
    if (m := _INT_PREFIX.match(text)) is None:
        return None
    try:
        return int(m[1])
    except ValueError:
        # longer than `sys.get_int_max_str_digits()`
        return None


def decode_float(text: str) -> float | None:
    if (m := _FLOAT_PREFIX.match(text)) is None:
        return None
    return float(m[1])


def encode(value: Scalar) -> str:
    # bool is a subclass of int, so check it first.
    if isinstance(value, bool):
        return TRUE_PRINT if value else FALSE_PRINT
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        return value
    raise TypeError(
        f'unsupported INI value type: {type(value).__name__}')
