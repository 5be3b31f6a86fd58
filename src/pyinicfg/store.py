# -*- encoding: utf-8 -*-
# @File   : store.py
# @Time   : 2025/03/03 10:47:19
# @Author : Kariko Lin

"""Configuration store: one INI file, typed lookups by `section.key`.

    ```python
    cfg = load('config.ini', create_default=True)
    cfg.get_int('Section1.var1')      # 5
    cfg.get_string('Section1.var2')   # 'Hello, world!'
    ```

The document is parsed once, in the constructor, and never changes after.
"""

import logging
from io import StringIO

from .ini.consts import DEFAULT_CONFIG, ValueType
from .ini.convert import (
    ConvertTarget,
    convert_value,
    to_bool,
    to_double,
    to_float,
    to_int
)
from .ini.errors import DefaultWriteFailed, FileOpenFailed
from .ini.model import IniDocument
from .ini.parser import IniParser


def write_default_config(filename: str, encoding: str = 'utf-8') -> None:
    """Write the built-in sample config, verbatim, to `filename`."""
    try:
        with open(filename, 'w', encoding=encoding) as fp:
            fp.write(DEFAULT_CONFIG)
    except OSError as e:
        raise DefaultWriteFailed(filename) from e
    logging.info('created default config file: %s', filename)


class ConfigStore:
    def __init__(
        self, filename: str,
        create_default: bool = False, *,
        encoding: str | None = None,
        fatal_write: bool = False
    ) -> None:
        """Parse `filename`.

        If it can't be opened and `create_default` is set, the built-in
        sample config is used instead and written to `filename`.
        Failing to write it is only logged (see `write_error`),
        unless `fatal_write` is set.
        """
        self._fn = filename
        self._use_default = False
        self.write_error: DefaultWriteFailed | None = None

        try:
            self._doc = IniParser(filename, encoding).read()
        except FileOpenFailed:
            if not create_default:
                raise
            logging.debug('%s not readable, using default config', filename)
            self._doc = IniParser.readstream(StringIO(DEFAULT_CONFIG))
            self._use_default = True
            try:
                write_default_config(filename, encoding or 'utf-8')
            except DefaultWriteFailed as e:
                if fatal_write:
                    raise
                logging.warning(f'{e}\n  {e.__cause__}')
                self.write_error = e

    @property
    def filename(self) -> str:
        return self._fn

    @property
    def using_default(self) -> bool:
        """Whether values come from the built-in config, not the file."""
        return self._use_default

    @property
    def document(self) -> IniDocument:
        return self._doc

    def get_value(self, path: str) -> str:
        return self._doc.find_value(path)

    def get(self, path: str, target: ConvertTarget = ValueType.STRING):
        """Generic form of the `get_*` methods.

        `target` is a `ValueType`, its name, or one of `int`, `float`
        (double precision), `bool`, `str`.
        """
        return convert_value(self.get_value(path), target)

    def get_string(self, path: str) -> str:
        return self.get_value(path)

    def get_int(self, path: str) -> int:
        return to_int(self.get_value(path))

    def get_double(self, path: str) -> float:
        return to_double(self.get_value(path))

    def get_float(self, path: str) -> float:
        return to_float(self.get_value(path))

    def get_bool(self, path: str) -> bool:
        return to_bool(self.get_value(path))

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, str):
            return False
        section, _, key = path.partition('.')
        return section in self._doc and key in self._doc[section]

    def __str__(self) -> str:
        return self._fn + (' (default)' if self._use_default else '')


def load(
    filename: str, create_default: bool = False, **kwargs
) -> ConfigStore:
    """Open a config file, see `ConfigStore` for keywords."""
    return ConfigStore(filename, create_default, **kwargs)
