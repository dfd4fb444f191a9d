"""Tests for the lexical scanner and token buffer."""

import pytest

from protoscan.detector import TokenBuffer, TokenKind, scan
from protoscan.detector.errors import UnterminatedLiteralOrCommentError


def kinds(text, profile):
    return [(t.kind, t.text) for t in scan(text, profile)]


def test_scan_classifies_tokens(java):
    tokens = kinds('int x = 10;', java)
    assert tokens == [
        (TokenKind.IDENTIFIER, "int"),
        (TokenKind.WHITESPACE, " "),
        (TokenKind.IDENTIFIER, "x"),
        (TokenKind.WHITESPACE, " "),
        (TokenKind.PUNCTUATION, "="),
        (TokenKind.WHITESPACE, " "),
        (TokenKind.NUMBER, "10"),
        (TokenKind.PUNCTUATION, ";"),
    ]


def test_scan_offsets_are_absolute(java):
    text = "/** doc */ void run()"
    tokens = list(scan(text, java, start=11))
    assert tokens[0].text == "void"
    assert tokens[0].start == 11
    assert all(text[t.start:t.end] == t.text for t in tokens)


def test_literal_hides_delimiters(java):
    tokens = kinds('f(")", \'(\')', java)
    literals = [text for kind, text in tokens if kind is TokenKind.LITERAL]
    assert literals == ['")"', "'('"]


def test_escaped_quote_does_not_close_literal(java):
    tokens = kinds(r'"a\"b" x', java)
    assert tokens[0] == (TokenKind.LITERAL, r'"a\"b"')


def test_comments_are_single_tokens(java):
    tokens = kinds("a /* ( { */ b // ) }\nc", java)
    comments = [text for kind, text in tokens if kind is TokenKind.COMMENT]
    assert comments == ["/* ( { */", "// ) }"]
    assert (TokenKind.NEWLINE, "\n") in tokens


def test_text_block_quote_is_longest_match(java):
    tokens = kinds('"""a "quoted" b"""', java)
    assert tokens == [(TokenKind.LITERAL, '"""a "quoted" b"""')]


def test_identifier_extra_chars(java):
    tokens = kinds("$value _x", java)
    assert tokens[0] == (TokenKind.IDENTIFIER, "$value")
    assert tokens[2] == (TokenKind.IDENTIFIER, "_x")


def test_python_hash_comment(python_profile):
    tokens = kinds("x = 1  # (unbalanced", python_profile)
    assert tokens[-1] == (TokenKind.COMMENT, "# (unbalanced")


def test_unterminated_literal_raises(java):
    with pytest.raises(UnterminatedLiteralOrCommentError) as exc:
        list(scan('f("abc', java))
    assert exc.value.start == 2


def test_unterminated_block_comment_raises(java):
    with pytest.raises(UnterminatedLiteralOrCommentError):
        list(scan("f(/* never closed", java))


def test_nested_block_comments(java):
    profile = java.derive(block_comments_nest=True)
    tokens = kinds("/* a /* b */ c */x", profile)
    assert tokens == [(TokenKind.COMMENT, "/* a /* b */ c */"), (TokenKind.IDENTIFIER, "x")]


def test_buffer_match_multi_character_symbol(python_profile):
    buffer = TokenBuffer("-> int", python_profile)
    assert buffer.match(0, "->") == 2
    assert buffer.match(0, "=>") is None


def test_buffer_skip_trivia_respects_newlines(java):
    buffer = TokenBuffer("  \n x", java)
    assert buffer[buffer.skip_trivia(0)].text == "x"
    assert buffer[buffer.skip_trivia(0, newlines=False)].kind is TokenKind.NEWLINE


def test_buffer_raw_is_exact_source(java):
    text = "a (  b ,\n c )"
    buffer = TokenBuffer(text, java)
    assert buffer.raw(0, len(buffer)) == text


def test_buffer_scans_on_demand(java):
    buffer = TokenBuffer('run(); f("never closed', java)
    assert buffer.scanned == 0
    assert buffer[3].text == ";"
    assert buffer.scanned == 4
    assert buffer.within(3)
    assert not buffer.within(3, limit=3)


def test_buffer_length_scans_the_whole_span(java):
    buffer = TokenBuffer('run(); f("never closed', java)
    assert buffer.at(0).text == "run"
    with pytest.raises(UnterminatedLiteralOrCommentError):
        len(buffer)


def test_buffer_past_the_end(java):
    buffer = TokenBuffer("a b", java)
    assert buffer.at(5) is None
    assert not buffer.within(3)
    assert buffer.offset(5) == 3
    assert buffer.end_offset(5) == 3
