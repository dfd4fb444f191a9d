"""Tests for canonical text and prototype assembly."""

from protoscan.detector import EnderKind, TokenBuffer
from protoscan.detector.normalizer import access_level, build_prototype, join_tokens
from protoscan.detector.parameters import DeclarationParts


def test_join_tokens_collapses_trivia(java):
    buffer = TokenBuffer("  Map<K,\n   V>  /* c */ name  ", java)
    assert join_tokens(buffer, 0, len(buffer)) == "Map<K, V> name"


def test_join_tokens_keeps_literals(java):
    buffer = TokenBuffer('f("a   b")', java)
    assert join_tokens(buffer, 0, len(buffer)) == 'f("a   b")'


def test_access_level_rules(java, python_profile):
    assert access_level(java, ("protected", "static"), "x") == "protected"
    assert access_level(java, ("static",), "x") == "package"
    assert access_level(python_profile, (), "_hidden") == "private"
    assert access_level(python_profile, (), "__call__") == "public"
    assert access_level(python_profile, (), "visible") == "public"


def test_build_prototype_is_pure_assembly(java):
    parts = DeclarationParts(
        modifiers=("public",),
        type="int",
        name="size",
        parameters=(),
        has_parameter_list=True,
    )
    prototype = build_prototype(java, (), parts, ";", EnderKind.TERMINATOR, 5, 24)
    assert prototype.language == "java"
    assert prototype.access_level == "public"
    assert (prototype.start, prototype.end) == (5, 24)
    assert prototype.signature() == "public int size()"
