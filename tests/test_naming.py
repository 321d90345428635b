"""Tests for identifier normalization and legality."""

import pytest

from json_const_generator.errors import InvalidIdentifier
from json_const_generator.naming import (
    IdentifierPolicy,
    check_identifier,
    legalize_identifier,
    normalize_constant,
    normalize_namespace,
    sanitize_identifier,
)


# ---------------------------------------------------------------------------
# normalize
# ---------------------------------------------------------------------------

def test_constant_is_uppercased():
    assert normalize_constant("ping") == "PING"
    assert normalize_constant("foo_bar") == "FOO_BAR"
    assert normalize_constant("de_DE") == "DE_DE"

def test_constant_has_no_word_boundary_insertion():
    assert normalize_constant("fooBar") == "FOOBAR"

def test_constant_unicode_uppercase():
    assert normalize_constant("пинг") == "ПИНГ"

def test_namespace_keeps_casing():
    assert normalize_namespace("dummy") == "dummy"
    assert normalize_namespace("myNamespace") == "myNamespace"


# ---------------------------------------------------------------------------
# check / sanitize
# ---------------------------------------------------------------------------

def test_check_identifier():
    assert check_identifier("PING") is None
    assert check_identifier("ПИНГ") is None
    assert check_identifier("") == "empty identifier"
    assert "characters" in check_identifier("two words")
    assert "characters" in check_identifier("1st")
    assert "reserved" in check_identifier("mod", ("mod", "fn"))

@pytest.mark.parametrize("identifier, expected", [
    ("two words", "two_words"),
    ("en-US", "en_US"),
    ("1st", "_1st"),
    ("", "_"),
    ("a.b", "a_b"),
    ("ok_name", "ok_name"),
])
def test_sanitize_identifier(identifier, expected):
    assert sanitize_identifier(identifier) == expected

def test_sanitize_reserved_word():
    assert sanitize_identifier("mod", ("mod",)) == "mod_"

def test_legalize_rejects_by_default():
    with pytest.raises(InvalidIdentifier) as exc_info:
        legalize_identifier("TWO WORDS", "two words")
    assert exc_info.value.identifier == "TWO WORDS"
    assert exc_info.value.location == "two words"

def test_legalize_substitutes():
    assert legalize_identifier("TWO WORDS", "two words", (), IdentifierPolicy.SUBSTITUTE) == "TWO_WORDS"

def test_legalize_keeps_valid_identifier():
    assert legalize_identifier("PING", "ping", ("mod",)) == "PING"

def test_forbidden_prefix():
    assert "'__'" in check_identifier("__X", (), ("__",))
    assert check_identifier("_X", (), ("__",)) is None
    assert check_identifier("__X") is None

@pytest.mark.parametrize("identifier, expected", [
    ("__X", "_X"),
    ("___X", "_X"),
    ("__", "_"),
    ("__init__", "_init__"),
])
def test_sanitize_forbidden_prefix(identifier, expected):
    assert sanitize_identifier(identifier, (), ("__",)) == expected

def test_legalize_forbidden_prefix():
    with pytest.raises(InvalidIdentifier) as exc_info:
        legalize_identifier("__X", "__x", (), IdentifierPolicy.REJECT, ("__",))
    assert exc_info.value.location == "__x"
    assert legalize_identifier("__X", "__x", (), IdentifierPolicy.SUBSTITUTE, ("__",)) == "_X"
