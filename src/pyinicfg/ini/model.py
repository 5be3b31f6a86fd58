# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2025/03/02 15:02:36
# @Author : Kariko Lin

"""
Plain INI structure: sections of `key = value` pairs, nothing more.

Both mappings are read only to users. Only `IniParser` fills them,
through the underscore methods below.
"""

from collections.abc import Mapping
from typing import Iterator

from .errors import (
    EmptyPathComponent,
    KeyNotFound,
    MalformedPath,
    SectionNotFound
)


class IniSection(Mapping[str, str]):
    """Key to *raw* value. Values stay strings, see `convert_value()`."""

    def __init__(self, section_name: str) -> None:
        self._name = section_name
        self.__data: dict[str, str] = {}

    @property
    def name(self) -> str:
        return self._name

    def __getitem__(self, key: str) -> str:
        return self.__data[key]

    def __len__(self) -> int:
        return len(self.__data)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__data)

    def __str__(self) -> str:
        return f'[{self._name}]'

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self._name, len(self.__data))

    def _assign(self, key: str, value: str) -> None:
        """for IniParser. later assignment wins."""
        self.__data[key] = value

    def to_dict(self) -> dict[str, str]:
        return self.__data.copy()


class IniDocument(Mapping[str, IniSection]):
    """INI file representation, sections kept in declaration order.

        ```ini
        [section]
        ; whole-line comment
        key = value
        [section]      ; re-entering keeps `key` above
        another = value = with equal signs
        ```
    """

    def __init__(self) -> None:
        self.__sections: dict[str, IniSection] = {}

    def __getitem__(self, key: str) -> IniSection:
        return self.__sections[key]

    def __len__(self) -> int:
        return len(self.__sections)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__sections)

    def __repr__(self) -> str:
        return f'IniDocument({list(self.__sections)!r})'

    def _open_section(self, name: str) -> IniSection:
        """for IniParser. never clears a section declared before."""
        if name not in self.__sections:
            self.__sections[name] = IniSection(name)
        return self.__sections[name]

    def find_value(self, path: str) -> str:
        """Resolve `section.key` to its raw value.

        Only the first dot separates, so `a.b.c` means key `b.c` of `[a]`.
        Misses list what *is* available, which saves a trip to the file.
        """
        section, dot, key = path.partition('.')
        if not dot:
            raise MalformedPath(f"malformed key path (missing '.'): {path}")
        if not section or not key:
            raise EmptyPathComponent(
                f'empty section or key name in path: {path}')

        if section not in self.__sections:
            raise SectionNotFound(section, list(self.__sections))
        pairs = self.__sections[section]
        if key not in pairs:
            raise KeyNotFound(section, key, list(pairs))
        return pairs[key]

    def to_dict(self) -> dict[str, dict[str, str]]:
        return {k: v.to_dict() for k, v in self.__sections.items()}
