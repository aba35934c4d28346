import io

import pytest

from logfour.properties import Properties


def _loaded(text):
    props = Properties()
    props.load(text)
    return props


@pytest.mark.parametrize("text", ["key=value", "key:value", "key value", "  key  =  value"])
def test_separators(text):
    assert _loaded(text)["key"] == "value"


def test_comments_are_ignored():
    assert _loaded("# a=b\n! c=d\n") == {}


def test_blank_lines_are_ignored():
    props = _loaded("\n   \nx=1\n\n")
    assert dict(props) == {"x": "1"}


def test_key_without_value():
    assert _loaded("key")["key"] == ""


def test_continuation_line():
    props = _loaded("key=a\\\n     b")
    assert props["key"] == "ab"


def test_value_escape():
    props = _loaded("k=a\\tb")
    assert props["k"] == "a\tb"


def test_key_escape_keeps_separator_in_key():
    props = _loaded("a\\=b=c")
    assert list(props.values()) == ["c"]
    assert "=" in next(iter(props))


def test_file_like_matches_text():
    text = "one=1\ntwo = 2\r\nthree:3\n"
    from_text = _loaded(text)
    from_file = _loaded(io.StringIO(text))
    assert from_file == from_text
    assert from_file["two"] == "2"


def test_load_none_raises():
    with pytest.raises(TypeError):
        Properties().load(None)


def test_property_falls_back_to_defaults():
    defaults = Properties()
    defaults.set_property("x", "from-default")
    props = Properties(defaults)
    props.set_property("y", "own")
    assert props.property("x") == "from-default"
    assert props.property("y") == "own"
    assert props.property("missing") is None
    assert props.property("missing", "fallback") == "fallback"


def test_own_value_wins_over_default():
    defaults = Properties()
    defaults.set_property("x", "old")
    props = Properties(defaults)
    props.set_property("x", "new")
    assert props.property("x", "other") == "new"


def test_property_names_order():
    defaults = Properties()
    defaults.set_property("a", "1")
    defaults.set_property("shared", "2")
    props = Properties(defaults)
    props.set_property("shared", "3")
    props.set_property("b", "4")
    assert props.property_names() == ["shared", "b", "a"]


def test_load_mapping():
    props = Properties()
    props.load_mapping({"Package": "Full", "Support": True, "Help/Language": "en_UK", "Background": object()})
    assert props["Package"] == "Full"
    assert props["Support"] == "true"
    assert props["Background"] == ""
    assert "Help/Language" not in props