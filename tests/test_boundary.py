"""Tests for declaration boundary finding."""

import pytest

from protoscan.detector import EnderKind, TokenBuffer, find_boundary
from protoscan.detector.errors import NoDeclarationFoundError, UnbalancedDelimiterError


def boundary_of(text, profile):
    buffer = TokenBuffer(text, profile)
    boundary = find_boundary(buffer, 0)
    return buffer, boundary


def test_terminator(java):
    buffer, boundary = boundary_of("abstract void run(int a);\nint next;", java)
    assert boundary.ender == ";"
    assert boundary.ender_kind is EnderKind.TERMINATOR
    assert buffer.raw(boundary.start, boundary.stop) == "abstract void run(int a)"


def test_body_opener(java):
    buffer, boundary = boundary_of("void run() {\n  a(); b();\n}", java)
    assert boundary.ender == "{"
    assert boundary.ender_kind is EnderKind.BODY_OPENER
    assert buffer.raw(boundary.start, boundary.stop) == "void run()"


def test_enders_inside_delimiters_do_not_count(java):
    text = 'void run(@A(x = "{;") int a, int[] b) throws E;'
    buffer, boundary = boundary_of(text, java)
    assert boundary.ender == ";"
    assert buffer.raw(boundary.start, boundary.stop) == text[:-1]


def test_initializer_braces_do_not_open_a_body(java):
    buffer, boundary = boundary_of("int[] values = {1, 2, 3};", java)
    assert boundary.ender == ";"
    assert buffer.raw(boundary.start, boundary.stop) == "int[] values = {1, 2, 3}"


def test_leading_trivia_is_skipped(java):
    buffer, boundary = boundary_of("\n  // note\n  int x;", java)
    assert buffer[boundary.start].text == "int"


def test_end_of_input_fails(java):
    with pytest.raises(NoDeclarationFoundError):
        boundary_of("void run()", java)


def test_stray_closer_fails(java):
    with pytest.raises(UnbalancedDelimiterError):
        boundary_of("void run) {", java)


def test_unclosed_parameter_list_fails(java):
    with pytest.raises(UnbalancedDelimiterError):
        boundary_of("void run(int a {", java)


def test_ender_with_nothing_before_it_fails(java):
    with pytest.raises(NoDeclarationFoundError):
        boundary_of("  ;", java)


def test_python_def_ends_at_colon(python_profile):
    buffer, boundary = boundary_of("def f(a: int,\n      b: str) -> dict[str, int]:\n    pass", python_profile)
    assert boundary.ender == ":"
    assert boundary.ender_kind is EnderKind.BODY_OPENER
    assert buffer.raw(boundary.start, boundary.stop).endswith("-> dict[str, int]")


def test_python_variable_ends_at_line_break(python_profile):
    buffer, boundary = boundary_of("timeout: float = 2.5\nother = 1\n", python_profile)
    assert boundary.ender_kind is EnderKind.LINE_BREAK
    assert buffer.raw(boundary.start, boundary.stop) == "timeout: float = 2.5"


def test_python_backslash_continues_line(python_profile):
    buffer, boundary = boundary_of("total = 1 + \\\n    2\n", python_profile)
    assert buffer.raw(boundary.start, boundary.stop) == "total = 1 + \\\n    2"


def test_python_last_line_needs_no_newline(python_profile):
    buffer, boundary = boundary_of("LIMIT = 10", python_profile)
    assert boundary.ender_kind is EnderKind.LINE_BREAK
    assert boundary.ender == ""
    assert buffer.raw(boundary.start, boundary.stop) == "LIMIT = 10"


def test_stop_excludes_trivia_before_ender(java):
    buffer, boundary = boundary_of("void run()  /* body */\n{", java)
    assert buffer[boundary.stop - 1].text == ")"
    assert buffer.raw(boundary.start, boundary.stop) == "void run()"
    assert buffer[boundary.after - 1].text == "{"


def test_nothing_after_the_ender_is_scanned(java):
    buffer, boundary = boundary_of('void run() {\n  log("unterminated\n}', java)
    assert boundary.ender == "{"
    assert buffer.scanned == boundary.after


def test_python_body_is_not_scanned(python_profile):
    buffer, boundary = boundary_of("def f(x):\n    s = '''never closed\n", python_profile)
    assert boundary.ender == ":"
    assert buffer.raw(boundary.start, boundary.stop) == "def f(x)"
