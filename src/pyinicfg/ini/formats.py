# -*- encoding: utf-8 -*-
# @File   : formats.py
# @Time   : 2025/03/04 21:13:40
# @Author : Kariko Lin

"""Other text formats of an `IniDocument`, as `{section: {key: value}}`.

Reading them back goes through the same name checks as INI text does,
so the result is always a document `IniParser` could have produced.
"""

import json
import warnings
from io import StringIO
from typing import Any, Literal, TypeAlias

import yaml

from ..abstract import FileHandler
from .errors import IniError
from .model import IniDocument
from .parser import IniParser, open_text, validate_name

DumpFormat: TypeAlias = Literal['ini', 'json', 'yaml']


def _scalar(section: str, key: str, value: Any) -> str:
    if isinstance(value, bool):  # yaml would give us `True`
        return 'true' if value else 'false'
    if value is None:
        return ''
    if isinstance(value, (dict, list)):
        warnings.warn(
            f'[{section}] {key} is not a scalar, '
            'nested values are stored as their text form.')
    return str(value)


def from_mapping(src: Any) -> IniDocument:
    """Build a document out of plain nested dicts (as loaded from json/yaml).

    There are no line numbers here, errors carry `line=None`.
    """
    if not isinstance(src, dict):
        raise IniError(f'expected a mapping of sections, got {type(src).__name__}')
    ret = IniDocument()
    for section, pairs in src.items():
        section = str(section)
        validate_name(section, None, kind='section')
        this_sect = ret._open_section(section)
        if pairs is None:
            continue
        if not isinstance(pairs, dict):
            raise IniError(f'section [{section}] is not a mapping')
        for key, val in pairs.items():
            key = str(key)
            validate_name(key, None)
            this_sect._assign(key, _scalar(section, key, val))
    return ret


class IniJsonParser(FileHandler[IniDocument]):
    def read(self) -> IniDocument:
        with open_text(self._fn, self._codec or 'utf-8-sig') as fp:
            return from_mapping(json.load(fp))

    def write(self, instance: IniDocument, indent: int = 2) -> None:
        with open(self._fn, 'w', encoding=self._codec or 'utf-8') as fp:
            json.dump(instance.to_dict(), fp, ensure_ascii=False, indent=indent)


class IniYamlParser(FileHandler[IniDocument]):
    def read(self) -> IniDocument:
        with open_text(self._fn, self._codec or 'utf-8-sig') as fp:
            return from_mapping(yaml.safe_load(fp))

    def write(self, instance: IniDocument) -> None:
        with open(self._fn, 'w', encoding=self._codec or 'utf-8') as fp:
            yaml.safe_dump(
                instance.to_dict(), fp,
                allow_unicode=True, sort_keys=False)


def dumps(instance: IniDocument, fmt: DumpFormat = 'ini') -> str:
    match fmt:
        case 'ini':
            return IniParser.dumps(instance)
        case 'json':
            return json.dumps(instance.to_dict(), ensure_ascii=False, indent=2)
        case 'yaml':
            buf = StringIO()
            yaml.safe_dump(
                instance.to_dict(), buf, allow_unicode=True, sort_keys=False)
            return buf.getvalue()
        case _:
            raise ValueError(f'unknown dump format: {fmt}')
