# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2025/03/02 14:22:47
# @Author : Kariko Lin

from enum import Enum


class ValueType(str, Enum):
    """Every type a raw value may be converted to. No others."""
    INT = 'int'
    DOUBLE = 'double'
    FLOAT = 'float'
    BOOL = 'bool'
    STRING = 'string'


TRUE_TOKENS = frozenset({'true', '1', 'yes', 'on'})
FALSE_TOKENS = frozenset({'false', '0', 'no', 'off'})

COMMENT_MARK = ';'

# written to disk byte for byte, so keep the leading newline.
DEFAULT_CONFIG = '''
[Section1]
; sample section with a comment
var1 = 5
var2 = Hello, world!

[Section2]
var1 = 42
var2 = Test string
'''
