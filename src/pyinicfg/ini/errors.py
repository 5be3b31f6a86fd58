# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2025/03/02 14:31:05
# @Author : Kariko Lin

"""Everything `pyinicfg` raises on purpose.

Parsing errors know the (1-based) line they were found on,
except for json / yaml sources which have no lines to point at.
Lookup and conversion errors quote the offending path or value instead.
"""


class IniError(Exception):
    """Base of all INI reading errors."""

    def __init__(self, msg: str, line: int | None = None) -> None:
        super().__init__(msg if line is None else f'line {line}: {msg}')
        self.line = line


# --- parsing ---

class IniSyntaxError(IniError):
    def __init__(self, msg: str, line: int | None) -> None:
        super().__init__(msg, line)


class MalformedSection(IniSyntaxError):
    pass


class KeyOutsideSection(IniSyntaxError):
    pass


class MissingEquals(IniSyntaxError):
    pass


class EmptyName(IniSyntaxError):
    pass


class EmptySectionName(EmptyName):
    pass


class EmptyKey(EmptyName):
    pass


class NameContainsWhitespace(IniSyntaxError):
    pass


# --- lookup ---

class IniLookupError(IniError, LookupError):
    pass


class MalformedPath(IniLookupError):
    pass


class EmptyPathComponent(IniLookupError):
    pass


class SectionNotFound(IniLookupError):
    def __init__(self, section: str, available: list[str]) -> None:
        super().__init__(
            f"section '{section}' not found. "
            f"available sections: {', '.join(available)}")
        self.section = section
        self.available = available


class KeyNotFound(IniLookupError):
    def __init__(self, section: str, key: str, available: list[str]) -> None:
        super().__init__(
            f"key '{key}' not found in section '{section}'. "
            f"available keys in '{section}': {', '.join(available)}")
        self.section = section
        self.key = key
        self.available = available


# --- conversion ---

class TypeConversionFailed(IniError, ValueError):
    def __init__(self, value: str, target: str) -> None:
        super().__init__(f"cannot convert '{value}' to {target}")
        self.value = value
        self.target = target


class UnsupportedType(IniError, TypeError):
    def __init__(self, target: object) -> None:
        super().__init__(f'no conversion defined for {target!r}')
        self.target = target


# --- files ---

class FileOpenFailed(IniError):
    def __init__(self, path: str) -> None:
        super().__init__(f'unable to open file: {path}')
        self.path = path


class DefaultWriteFailed(IniError):
    def __init__(self, path: str) -> None:
        super().__init__(f'unable to create default config file: {path}')
        self.path = path
