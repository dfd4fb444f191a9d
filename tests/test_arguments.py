"""Tests for annotation argument interpretation."""

from protoscan.detector import AnnotationArgument, interpret_arguments, parse_arguments
from protoscan.detector.models import AnnotationClause


def test_positional_value(java):
    assert parse_arguments('"unchecked"', java) == (AnnotationArgument(None, '"unchecked"'),)


def test_key_value_pairs_across_lines(java):
    arguments = parse_arguments('\n  owner = "Acme",\n  year=2024\n', java)
    assert arguments == (
        AnnotationArgument("owner", '"Acme"'),
        AnnotationArgument("year", "2024"),
    )


def test_array_value_is_not_split(java):
    arguments = parse_arguments('tags = {"a", "b"}', java)
    assert arguments == (AnnotationArgument("tags", '{"a", "b"}'),)


def test_comparison_is_not_a_key(java):
    arguments = parse_arguments("a == b", java)
    assert arguments == (AnnotationArgument(None, "a == b"),)


def test_literal_text_is_untouched(java):
    arguments = parse_arguments('"a  =  b"', java)
    assert arguments[0].value == '"a  =  b"'


def test_interpret_clause_without_arguments(java):
    clause = AnnotationClause(name="Override", argument_text=None, source="@Override", start=0, end=9)
    assert interpret_arguments(clause, java) == ()


def test_interpret_clause_with_arguments(java):
    clause = AnnotationClause(
        name="Range", argument_text="min = 1, max = 5", source="@Range(min = 1, max = 5)",
        start=0, end=24,
    )
    assert [a.name for a in interpret_arguments(clause, java)] == ["min", "max"]
