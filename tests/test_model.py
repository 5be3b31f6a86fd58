"""
Tests for pyinicfg.ini.model (path lookups)
"""

import pytest

from pyinicfg.ini.consts import DEFAULT_CONFIG
from pyinicfg.ini.errors import (
    EmptyPathComponent,
    IniLookupError,
    KeyNotFound,
    MalformedPath,
    SectionNotFound,
)
from pyinicfg.ini.model import IniDocument


@pytest.fixture
def doc(parse):
    return parse(DEFAULT_CONFIG)


def test_find_value(doc):
    assert doc.find_value("Section1.var1") == "5"
    assert doc.find_value("Section2.var2") == "Test string"


def test_first_dot_separates(parse):
    doc = parse("[net]\nproxy.host = localhost\n")
    assert doc.find_value("net.proxy.host") == "localhost"


def test_missing_dot(doc):
    with pytest.raises(MalformedPath):
        doc.find_value("SectionOnly")


@pytest.mark.parametrize("path", [".var1", "Section1.", "."])
def test_empty_components(doc, path):
    with pytest.raises(EmptyPathComponent):
        doc.find_value(path)


def test_section_not_found_lists_sections(doc):
    with pytest.raises(SectionNotFound) as exc:
        doc.find_value("Missing.var1")
    assert str(exc.value).endswith("available sections: Section1, Section2")
    assert exc.value.available == ["Section1", "Section2"]
    assert isinstance(exc.value, LookupError)


def test_section_not_found_on_empty_document():
    with pytest.raises(SectionNotFound) as exc:
        IniDocument().find_value("a.b")
    assert str(exc.value).endswith("available sections: ")


def test_key_not_found_lists_keys(doc):
    with pytest.raises(KeyNotFound) as exc:
        doc.find_value("Section1.var3")
    assert "var3" in str(exc.value)
    assert str(exc.value).endswith("var1, var2")
    assert isinstance(exc.value, IniLookupError)


def test_key_not_found_in_empty_section(parse):
    doc = parse("[Empty]\n")
    with pytest.raises(KeyNotFound) as exc:
        doc.find_value("Empty.x")
    assert exc.value.available == []


def test_names_are_case_sensitive(doc):
    with pytest.raises(SectionNotFound):
        doc.find_value("section1.var1")
    with pytest.raises(KeyNotFound):
        doc.find_value("Section1.VAR1")


def test_mappings_are_read_only(doc):
    with pytest.raises(TypeError):
        doc["Section3"] = doc["Section1"]
    with pytest.raises(TypeError):
        doc["Section1"]["var1"] = "6"


def test_section_repr(doc):
    assert str(doc["Section1"]) == "[Section1]"
    assert repr(doc["Section1"]) == "[Section1] { .cnt = 2 }"


def test_to_dict_is_a_copy(doc):
    data = doc.to_dict()
    data["Section1"]["var1"] = "changed"
    assert doc.find_value("Section1.var1") == "5"
