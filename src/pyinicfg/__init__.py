# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2025/03/02 14:08:44
# @Author : Kariko Lin

from .ini import (
    DEFAULT_CONFIG,
    IniDocument,
    IniError,
    IniParser,
    IniSection,
    ValueType,
    convert_value
)
from .store import ConfigStore, load, write_default_config

__all__ = [
    'ConfigStore', 'load', 'write_default_config',
    'IniDocument', 'IniSection', 'IniParser', 'IniError',
    'ValueType', 'convert_value', 'DEFAULT_CONFIG'
]
