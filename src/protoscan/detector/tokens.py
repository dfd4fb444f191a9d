"""Token types produced by the lexical scanner."""

from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    """Category of a scanned token."""
    IDENTIFIER = "identifier"
    NUMBER = "number"
    PUNCTUATION = "punctuation"
    LITERAL = "literal"
    WHITESPACE = "whitespace"
    NEWLINE = "newline"
    COMMENT = "comment"


TRIVIA = frozenset({TokenKind.WHITESPACE, TokenKind.NEWLINE, TokenKind.COMMENT})


@dataclass(frozen=True)
class Token:
    """A classified slice of the source text.

    ``start`` and ``end`` are offsets into the full text handed to the
    scanner, so they stay meaningful for diagnostics after detection.
    """
    kind: TokenKind
    text: str
    start: int
    end: int

    @property
    def is_trivia(self) -> bool:
        return self.kind in TRIVIA

    def is_punct(self, char: str) -> bool:
        return self.kind is TokenKind.PUNCTUATION and self.text == char
