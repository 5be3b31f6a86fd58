# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2025/03/02 14:12:30
# @Author : Kariko Lin

from .consts import DEFAULT_CONFIG, ValueType
from .convert import convert_value
from .errors import (
    IniError,
    IniSyntaxError,
    IniLookupError,
    MalformedSection,
    KeyOutsideSection,
    MissingEquals,
    EmptyName,
    EmptySectionName,
    EmptyKey,
    NameContainsWhitespace,
    MalformedPath,
    EmptyPathComponent,
    SectionNotFound,
    KeyNotFound,
    TypeConversionFailed,
    UnsupportedType,
    FileOpenFailed,
    DefaultWriteFailed
)
from .formats import IniJsonParser, IniYamlParser, dumps
from .model import IniDocument, IniSection
from .parser import IniParser
