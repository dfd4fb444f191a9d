"""Tests for annotation clause skipping."""

import pytest

from protoscan.detector import TokenBuffer, skip_annotations
from protoscan.detector.errors import UnbalancedDelimiterError


def skip(text, profile):
    buffer = TokenBuffer(text, profile)
    clauses, index = skip_annotations(buffer)
    return buffer, clauses, index


@pytest.mark.parametrize("text", [
    "public void run();",
    "   \n  int x;",
    "/* not an annotation */ void f();",
])
def test_no_annotations_advances_nothing(java, text):
    _, clauses, index = skip(text, java)
    assert clauses == []
    assert index == 0


def test_marker_without_argument_clause(java):
    buffer, clauses, index = skip("@Override\npublic String toString()", java)
    assert len(clauses) == 1
    assert clauses[0].name == "Override"
    assert clauses[0].argument_text is None
    assert not clauses[0].has_arguments
    assert buffer[buffer.skip_trivia(index)].text == "public"


def test_marker_with_empty_argument_clause(java):
    _, clauses, _ = skip("@Test() void run();", java)
    assert clauses[0].argument_text == ""
    assert clauses[0].has_arguments


def test_single_value_argument(java):
    _, clauses, _ = skip('@SuppressWarnings("unchecked") void run();', java)
    assert clauses[0].argument_text == '"unchecked"'


def test_array_argument(java):
    _, clauses, _ = skip('@Tags({"a", "b"}) void run();', java)
    assert clauses[0].argument_text == '{"a", "b"}'


def test_multiline_key_value_argument_kept_verbatim(java, scenario_b):
    _, clauses, _ = skip(scenario_b, java)
    expected = '\n    owner = "Acme Corp",\n    year  =  2024'
    assert clauses[0].argument_text == expected
    assert clauses[0].source == "@Copyright(" + expected + ")"


@pytest.mark.parametrize("text", ["@Deprecated void f();", "@ Deprecated void f();"])
def test_whitespace_after_prefix_when_allowed(java, text):
    _, clauses, _ = skip(text, java)
    assert [c.name for c in clauses] == ["Deprecated"]


def test_whitespace_after_prefix_when_not_allowed(typescript):
    _, clauses, index = skip("@ Input() name: string;", typescript)
    assert clauses == []
    assert index == 0


def test_qualified_name(java):
    _, clauses, _ = skip("@javax.annotation.Nonnull String name;", java)
    assert clauses[0].name == "javax.annotation.Nonnull"


def test_excluded_name_is_not_an_annotation(java):
    _, clauses, index = skip("@interface Marker {}", java)
    assert clauses == []
    assert index == 0


def test_stacked_clauses_keep_source_order(java, scenario_d):
    _, clauses, _ = skip(scenario_d, java)
    assert [c.name for c in clauses] == ["Deprecated", "SuppressWarnings", "Author", "Tags"]


def test_clause_offsets_round_trip(java, scenario_d):
    _, clauses, _ = skip(scenario_d, java)
    for clause in clauses:
        assert scenario_d[clause.start:clause.end] == clause.source
        if clause.argument_text is not None:
            assert clause.argument_text in clause.source


def test_arguments_on_next_line(java, python_profile):
    _, java_clauses, _ = skip("@Named\n(\"x\") String s;", java)
    assert java_clauses[0].argument_text == '"x"'

    # A decorator's arguments must start on its own line
    _, py_clauses, _ = skip("@cache\n(x)", python_profile)
    assert py_clauses[0].argument_text is None


def test_unclosed_argument_clause_fails(java, unbalanced_annotation):
    with pytest.raises(UnbalancedDelimiterError):
        skip(unbalanced_annotation, java)


def test_profile_without_annotations(c_profile):
    _, clauses, index = skip("@x int f(void);", c_profile)
    assert clauses == []
    assert index == 0


def test_starts_at_the_first_token_by_default(java, scenario_d):
    buffer = TokenBuffer(scenario_d, java)
    clauses, index = skip_annotations(buffer)
    assert (clauses, index) == skip_annotations(buffer, 0)
    assert clauses
