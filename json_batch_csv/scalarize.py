"""Render a single JSON value as one CSV cell.

`scalarize` returns the cell text for terminal values and the `RECURSE`
sentinel for objects that must be walked further by the flattener.
"""
from __future__ import annotations

import json
import math
from decimal import Decimal
from typing import Any, Union

from .constants import LIST_ITEM_SEPARATOR


class _Recurse:
    def __repr__(self) -> str:
        return 'RECURSE'


RECURSE = _Recurse()

PRIMITIVE_TYPES = (str, int, float, bool)


def is_primitive(value: Any) -> bool:
    return value is None or isinstance(value, PRIMITIVE_TYPES)


def format_primitive(value: Any) -> str:
    """String form of a JSON primitive, spelled the way JSON spells it."""
    if value is None:
        return ''
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float):
        return format_number(value)
    return str(value)


def format_number(value: float) -> str:
    """Shortest round-trip spelling of a float, laid out like JavaScript numbers.

    2.0 -> "2", 0.000001 -> "0.000001", 1e-7 -> "1e-7", 1e21 -> "1e+21".
    """
    # Only reachable through overflow, e.g. 1e400
    if math.isinf(value):
        return 'Infinity' if value > 0 else '-Infinity'
    if value == 0:
        return '0'

    dec = Decimal(repr(abs(value)))
    if not dec.is_finite():
        return repr(value)
    _, digit_tuple, exp = dec.as_tuple()
    digits = ''.join(str(d) for d in digit_tuple).lstrip('0')
    stripped = digits.rstrip('0')
    exp += len(digits) - len(stripped)
    digits = stripped

    k = len(digits)
    n = k + exp
    sign = '-' if value < 0 else ''

    if k <= n <= 21:
        text = digits + '0' * (n - k)
    elif 0 < n <= 21:
        text = f"{digits[:n]}.{digits[n:]}"
    elif -6 < n <= 0:
        text = f"0.{'0' * -n}{digits}"
    else:
        e = n - 1
        mantissa = digits if k == 1 else f"{digits[0]}.{digits[1:]}"
        text = f"{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"
    return sign + text


def to_compact_json(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, separators=(',', ':'))


def scalarize(value: Any) -> Union[str, _Recurse]:
    if value is None:
        return ''

    if isinstance(value, list):
        if all(is_primitive(v) for v in value):
            return LIST_ITEM_SEPARATOR.join(format_primitive(v) for v in value)
        return to_compact_json(value)

    if not isinstance(value, dict):
        return format_primitive(value)

    if not value:
        return ''
    return RECURSE
