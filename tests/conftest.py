"""
Shared fixtures for pyinicfg tests.
"""

from io import StringIO

import pytest

from pyinicfg.ini.parser import IniParser


@pytest.fixture
def write_ini(tmp_path):
    """Factory writing INI text into a temporary file, returns its path."""
    def _write(text: str, name: str = "config.ini", encoding: str = "utf-8") -> str:
        path = tmp_path / name
        path.write_bytes(text.encode(encoding))
        return str(path)
    return _write


@pytest.fixture
def parse():
    """Parse INI text straight from a string."""
    def _parse(text: str):
        return IniParser.readstream(StringIO(text))
    return _parse
