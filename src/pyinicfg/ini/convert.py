# -*- encoding: utf-8 -*-
# @File   : convert.py
# @Time   : 2025/03/02 16:28:50
# @Author : Kariko Lin

"""Raw value -> typed value, done at lookup time and never cached.

Only the `ValueType` members are supported, there's no generic fallback
(e.g. `convert_value('5', list)` is an `UnsupportedType`, not `['5']`).
"""

import math
from ctypes import c_float
from re import IGNORECASE
from re import compile as regex
from typing import TypeAlias

from .consts import FALSE_TOKENS, TRUE_TOKENS, ValueType
from .errors import TypeConversionFailed, UnsupportedType

_INT_LITERAL = regex(r'[+-]?[0-9]+')
_FLOAT_LITERAL = regex(
    r'[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?'
    r'|inf(?:inity)?|nan)',
    IGNORECASE)

_PY_TYPES: dict[type, ValueType] = {
    bool: ValueType.BOOL,
    int: ValueType.INT,
    float: ValueType.DOUBLE,
    str: ValueType.STRING,
}

ConvertTarget: TypeAlias = ValueType | str | type


def resolve_type(target: ConvertTarget) -> ValueType:
    """Accepts a `ValueType`, its name (`'int'`) or a builtin type (`int`)."""
    if isinstance(target, ValueType):
        return target
    if isinstance(target, str):
        try:
            return ValueType(target.lower())
        except ValueError:
            raise UnsupportedType(target) from None
    if isinstance(target, type) and target in _PY_TYPES:
        return _PY_TYPES[target]
    raise UnsupportedType(target)


def to_int(value: str) -> int:
    if _INT_LITERAL.fullmatch(value) is None:
        raise TypeConversionFailed(value, ValueType.INT.value)
    return int(value)


def to_double(value: str, target: ValueType = ValueType.DOUBLE) -> float:
    # some locales write `3,14`.
    normalized = value.replace(',', '.')
    if _FLOAT_LITERAL.fullmatch(normalized) is None:
        raise TypeConversionFailed(value, target.value)
    ret = float(normalized)
    if math.isinf(ret) and 'inf' not in normalized.lower():
        # `1e999` and the like
        raise TypeConversionFailed(value, target.value)
    return ret


def to_float(value: str) -> float:
    """Like `to_double()`, but rounded to single precision."""
    ret = to_double(value, ValueType.FLOAT)
    try:
        single = c_float(ret).value
    except OverflowError:
        single = math.inf
    if math.isinf(single) and not math.isinf(ret):
        raise TypeConversionFailed(value, ValueType.FLOAT.value)
    return single


def to_bool(value: str) -> bool:
    lower = value.lower()
    if lower in TRUE_TOKENS:
        return True
    if lower in FALSE_TOKENS:
        return False
    raise TypeConversionFailed(value, ValueType.BOOL.value)


def convert_value(value: str, target: ConvertTarget) -> int | float | bool | str:
    match resolve_type(target):
        case ValueType.INT:
            return to_int(value)
        case ValueType.DOUBLE:
            return to_double(value)
        case ValueType.FLOAT:
            return to_float(value)
        case ValueType.BOOL:
            return to_bool(value)
        case ValueType.STRING:
            return value
