# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2025/03/02 15:40:12
# @Author : Kariko Lin

"""Line based INI reading.

Accepted lines (after trimming spaces and tabs):
1. blank, or starting with `;` (comment, whole line only);
2. `[name]`, opens or re-enters a section;
3. `key = value`, split at the *first* `=`, only inside a section.

Anything else is an error, reported with its line number.
There's no inline comment, quoting or escaping: `a = b ; c` has value `b ; c`.
"""

import logging
from io import StringIO, TextIOBase, TextIOWrapper

import chardet

from ..abstract import FileHandler
from .consts import COMMENT_MARK
from .errors import (
    EmptyKey,
    EmptySectionName,
    FileOpenFailed,
    KeyOutsideSection,
    MalformedSection,
    MissingEquals,
    NameContainsWhitespace
)
from .model import IniDocument, IniSection


def normalize(line: str) -> str:
    """Trim horizontal whitespace on both ends. Inner spaces are kept."""
    return line.strip(' \t')


def validate_name(
    name: str, line_num: int | None, *, kind: str = 'key'
) -> None:
    """`line_num` is None for sources without lines (json, yaml)."""
    if not name:
        if kind == 'section':
            raise EmptySectionName('empty section name', line_num)
        raise EmptyKey('empty key', line_num)
    if any(c.isspace() for c in name):
        raise NameContainsWhitespace(
            f"{kind} name '{name}' contains whitespace", line_num)


def split_key_value(line: str, line_num: int) -> tuple[str, str]:
    key, eq, val = line.partition('=')
    if not eq:
        raise MissingEquals("malformed line (missing '=')", line_num)
    key = normalize(key)
    if not key:
        raise EmptyKey('empty key', line_num)
    return key, normalize(val)


def open_text(filename: str, encoding: str) -> TextIOWrapper:
    """`open()` for reading; only this step maps to `FileOpenFailed`."""
    try:
        return open(filename, 'r', encoding=encoding)
    except OSError as e:
        raise FileOpenFailed(filename) from e


class IniParser(FileHandler[IniDocument]):
    FALLBACK_CODEC = 'cp1251'

    @staticmethod
    def readstream(buf: TextIOBase) -> IniDocument:
        """Parse an already decoded text stream.

        Use `self.read()` instead unless the text isn't in a file.
        """
        ret = IniDocument()
        this_sect: IniSection | None = None
        line_num = 0
        while raw := buf.readline():
            line_num += 1
            line = normalize(raw.rstrip('\r\n'))
            if not line or line[0] == COMMENT_MARK:
                continue

            if line[0] == '[':
                if line[-1] != ']':
                    raise MalformedSection(
                        "malformed section header (missing ']')", line_num)
                name = normalize(line[1:-1])
                validate_name(name, line_num, kind='section')
                this_sect = ret._open_section(name)
                continue

            if this_sect is None:
                raise KeyOutsideSection(
                    'key-value pair outside of any section', line_num)
            key, val = split_key_value(line, line_num)
            validate_name(key, line_num)
            this_sect._assign(key, val)
        logging.debug('parsed %d section(s) in %d line(s)', len(ret), line_num)
        return ret

    @classmethod
    def _decode_file(cls, filename: str) -> StringIO:
        with open(filename, 'rb') as fp:
            raw = fp.read()

        codec = chardet.detect(raw)
        if (codec is None or codec['encoding'] is None
                or codec['confidence'] < 0.8):
            codec = {'encoding': 'utf-8'}
        logging.debug('guessed encoding of %s: %s', filename, codec['encoding'])

        # fallbacks
        try:
            buf = raw.decode(codec['encoding'])
        except (UnicodeDecodeError, LookupError):
            # cp1251 leaves 0x98 undefined
            buf = raw.decode(cls.FALLBACK_CODEC, errors='replace')
        return StringIO(buf)

    def read(self) -> IniDocument:
        """Read the file bound to this parser.

        Text which isn't valid in the given encoding (utf-8 by default,
        BOM allowed) gets a second try with `chardet`.
        Only failing to open is a `FileOpenFailed`, read errors propagate.
        """
        codec = self._codec or 'utf-8-sig'
        fp = open_text(self._fn, codec)
        try:
            with fp:
                return self.readstream(fp)
        except UnicodeDecodeError:
            logging.info('%s is not %s encoded, guessing', self._fn, codec)
            return self.readstream(self._decode_file(self._fn))

    @staticmethod
    def dumps(
        instance: IniDocument, *,
        blank_lines: int = 1,
        delimiter: str = ' = '
    ) -> str:
        sections = []
        for sect in instance.values():
            ret = str(sect)
            for k, v in sect.items():
                ret += f'\n{k}{delimiter}{v}'
            sections.append(ret + '\n')
        return ('\n' * blank_lines).join(sections)

    def write(
        self, instance: IniDocument, *,
        blank_lines: int = 1,
        delimiter: str = ' = '
    ) -> None:
        """Save a whole document into the bound file.

        Comments and the original layout are not kept.
        """
        with open(self._fn, 'w', encoding=self._codec or 'utf-8') as fp:
            fp.write(self.dumps(
                instance, blank_lines=blank_lines, delimiter=delimiter))

    def __str__(self) -> str:
        return 'INI file: ' + super().__str__()
