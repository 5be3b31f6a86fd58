"""
Tests for pyinicfg.ini.formats
"""

import json

import pytest
import yaml

from pyinicfg.ini.consts import DEFAULT_CONFIG
from pyinicfg.ini.errors import (
    EmptySectionName,
    FileOpenFailed,
    IniError,
    NameContainsWhitespace,
)
from pyinicfg.ini.formats import (
    IniJsonParser,
    IniYamlParser,
    dumps,
    from_mapping,
)


@pytest.fixture
def doc(parse):
    return parse(DEFAULT_CONFIG)


def test_dumps_json(doc):
    data = json.loads(dumps(doc, "json"))
    assert data == {
        "Section1": {"var1": "5", "var2": "Hello, world!"},
        "Section2": {"var1": "42", "var2": "Test string"},
    }


def test_dumps_yaml_keeps_strings(doc):
    data = yaml.safe_load(dumps(doc, "yaml"))
    assert data["Section1"]["var1"] == "5"
    assert list(data) == ["Section1", "Section2"]


def test_dumps_ini(doc):
    assert dumps(doc, "ini").startswith("[Section1]\nvar1 = 5\n")


def test_dumps_unknown_format(doc):
    with pytest.raises(ValueError):
        dumps(doc, "toml")


def test_json_file_roundtrip(tmp_path, doc):
    path = str(tmp_path / "cfg.json")
    IniJsonParser(path).write(doc)
    assert IniJsonParser(path).read().to_dict() == doc.to_dict()


def test_yaml_file_roundtrip(tmp_path, doc):
    path = str(tmp_path / "cfg.yaml")
    IniYamlParser(path).write(doc)
    assert IniYamlParser(path).read().to_dict() == doc.to_dict()


def test_yaml_scalars_become_text(tmp_path):
    path = tmp_path / "cfg.yml"
    path.write_text("Main:\n  count: 3\n  debug: true\n  name:\n", encoding="utf-8")
    doc = IniYamlParser(str(path)).read()
    assert doc["Main"].to_dict() == {"count": "3", "debug": "true", "name": ""}


def test_nested_values_warn():
    with pytest.warns(UserWarning):
        doc = from_mapping({"Main": {"items": [1, 2]}})
    assert doc["Main"]["items"] == "[1, 2]"


def test_from_mapping_validates_names():
    with pytest.raises(NameContainsWhitespace):
        from_mapping({"bad section": {}})
    with pytest.raises(NameContainsWhitespace):
        from_mapping({"Main": {"bad key": "x"}})


def test_from_mapping_rejects_non_mappings():
    with pytest.raises(IniError):
        from_mapping(["Main"])
    with pytest.raises(IniError):
        from_mapping({"Main": "value"})


def test_empty_section_from_mapping():
    doc = from_mapping({"Empty": None})
    assert len(doc["Empty"]) == 0


def test_missing_json_file(tmp_path):
    with pytest.raises(FileOpenFailed):
        IniJsonParser(str(tmp_path / "none.json")).read()


def test_mapping_errors_have_no_line_prefix():
    with pytest.raises(EmptySectionName) as exc:
        from_mapping({"": {}})
    assert exc.value.line is None
    assert str(exc.value) == "empty section name"
    with pytest.raises(NameContainsWhitespace) as exc:
        from_mapping({"Main": {"bad key": "x"}})
    assert not str(exc.value).startswith("line")
