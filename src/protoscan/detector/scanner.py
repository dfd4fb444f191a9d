"""Lexical scanner and the token buffer the rest of the detector walks."""

import re
from functools import lru_cache
from typing import Iterator

from ..profiles.base import LanguageProfile
from .errors import UnterminatedLiteralOrCommentError
from .tokens import Token, TokenKind

NEWLINE_PATTERN = re.compile(r'\r\n|\r|\n')
WHITESPACE_PATTERN = re.compile(r'[^\S\r\n]+')
NUMBER_PATTERN = re.compile(r'\d[\w.]*')


@lru_cache(maxsize=None)
def _identifier_pattern(extra_chars: str) -> re.Pattern:
    """Build the identifier pattern for a profile's extra identifier characters."""
    extra = "".join(re.escape(c) for c in extra_chars if not c.isalnum())
    if not extra:
        return re.compile(r'[^\W\d]\w*')
    return re.compile(rf'(?:[^\W\d]|[{extra}])(?:\w|[{extra}])*')


@lru_cache(maxsize=None)
def _quotes_longest_first(quotes: tuple[str, ...]) -> tuple[str, ...]:
    return tuple(sorted(quotes, key=len, reverse=True))


def scan(
    text: str,
    profile: LanguageProfile,
    start: int = 0,
    end: int | None = None,
) -> Iterator[Token]:
    """Lazily classify ``text[start:end]`` into tokens.

    Literals and comments come out as single tokens so their contents never
    reach the delimiter balancer. Raises UnterminatedLiteralOrCommentError
    when the span ends inside one.
    """
    end = len(text) if end is None else end
    identifier = _identifier_pattern(profile.identifier_extra_chars)
    quotes = _quotes_longest_first(profile.string_quotes)
    pos = start

    while pos < end:
        match = NEWLINE_PATTERN.match(text, pos, end)
        if match:
            yield Token(TokenKind.NEWLINE, match.group(), pos, match.end())
            pos = match.end()
            continue

        match = WHITESPACE_PATTERN.match(text, pos, end)
        if match:
            yield Token(TokenKind.WHITESPACE, match.group(), pos, match.end())
            pos = match.end()
            continue

        # Comments are checked before strings and punctuation, since their
        # symbols may overlap with either
        comment_end = _scan_comment(text, pos, end, profile)
        if comment_end is not None:
            yield Token(TokenKind.COMMENT, text[pos:comment_end], pos, comment_end)
            pos = comment_end
            continue

        literal_end = _scan_literal(text, pos, end, quotes, profile.escape_char)
        if literal_end is not None:
            yield Token(TokenKind.LITERAL, text[pos:literal_end], pos, literal_end)
            pos = literal_end
            continue

        match = identifier.match(text, pos, end)
        if match:
            yield Token(TokenKind.IDENTIFIER, match.group(), pos, match.end())
            pos = match.end()
            continue

        match = NUMBER_PATTERN.match(text, pos, end)
        if match:
            yield Token(TokenKind.NUMBER, match.group(), pos, match.end())
            pos = match.end()
            continue

        yield Token(TokenKind.PUNCTUATION, text[pos], pos, pos + 1)
        pos += 1


def _scan_comment(text: str, pos: int, end: int, profile: LanguageProfile) -> int | None:
    """Return the end offset of a comment starting at ``pos``, if there is one."""
    for symbol in profile.line_comment_symbols:
        if text.startswith(symbol, pos, end):
            match = NEWLINE_PATTERN.search(text, pos, end)
            return match.start() if match else end

    for opening, closing in profile.block_comment_symbols:
        if not text.startswith(opening, pos, end):
            continue

        depth = 1
        i = pos + len(opening)
        while i < end:
            if text.startswith(closing, i, end):
                depth -= 1
                i += len(closing)
                if depth == 0:
                    return i
            elif profile.block_comments_nest and text.startswith(opening, i, end):
                depth += 1
                i += len(opening)
            else:
                i += 1

        raise UnterminatedLiteralOrCommentError(
            f"Unterminated comment opened by {opening!r}", pos, end
        )

    return None


def _scan_literal(
    text: str,
    pos: int,
    end: int,
    quotes: tuple[str, ...],
    escape_char: str | None,
) -> int | None:
    """Return the end offset of a string/char literal starting at ``pos``, if there is one."""
    for quote in quotes:
        if not text.startswith(quote, pos, end):
            continue

        i = pos + len(quote)
        while i < end:
            if escape_char and text[i] == escape_char:
                i += 2
            elif text.startswith(quote, i, end):
                return i + len(quote)
            else:
                i += 1

        raise UnterminatedLiteralOrCommentError(
            f"Unterminated literal opened by {quote!r}", pos, end
        )

    return None


class TokenBuffer:
    """Random-access view over the tokens of one span.

    Each detector component takes a buffer plus a token index and returns the
    index it stopped at, so the scan stays a single forward pass. Tokens are
    pulled from ``scan()`` only when an index is first reached, so text past
    the end of a declaration is never tokenized.
    """

    def __init__(
        self,
        text: str,
        profile: LanguageProfile,
        start: int = 0,
        end: int | None = None,
    ):
        self.text = text
        self.profile = profile
        self.start = start
        self.end = len(text) if end is None else end
        self.tokens: list[Token] = []
        self._pending: Iterator[Token] | None = scan(text, profile, start, self.end)

    def _fill(self, index: int) -> bool:
        """Scan until ``index`` exists or the span runs out."""
        while self._pending is not None and len(self.tokens) <= index:
            token = next(self._pending, None)
            if token is None:
                self._pending = None
            else:
                self.tokens.append(token)
        return index < len(self.tokens)

    def __len__(self) -> int:
        # Sizing the buffer tokenizes the rest of the span
        while self._pending is not None:
            self._fill(len(self.tokens))
        return len(self.tokens)

    def __getitem__(self, index: int) -> Token:
        if index >= 0:
            self._fill(index)
        return self.tokens[index]

    @property
    def scanned(self) -> int:
        """Number of tokens pulled from the span so far."""
        return len(self.tokens)

    def within(self, index: int, limit: int | None = None) -> bool:
        """Whether a token exists at ``index`` and before ``limit``.

        ``limit=None`` means the end of the span.
        """
        if index < 0 or (limit is not None and index >= limit):
            return False
        return self._fill(index)

    def at(self, index: int) -> Token | None:
        """Token at ``index``, or None past the end."""
        if self.within(index):
            return self.tokens[index]
        return None

    def offset(self, index: int) -> int:
        """Source offset where the token at ``index`` starts."""
        if self.within(index):
            return self.tokens[index].start
        return self.end

    def end_offset(self, index: int | None) -> int:
        """Source offset just past the token before ``index``.

        ``None`` stands for the end of the span.
        """
        if index is None:
            index = len(self)
        if index <= 0:
            return self.start
        self._fill(index - 1)
        return self.tokens[min(index, len(self.tokens)) - 1].end

    def skip_trivia(self, index: int, limit: int | None = None, newlines: bool = True) -> int:
        """Advance past whitespace and comments, and newlines unless told otherwise."""
        while self.within(index, limit):
            token = self.tokens[index]
            if token.kind is TokenKind.NEWLINE and not newlines:
                break
            if not token.is_trivia:
                break
            index += 1
        return index

    def match(self, index: int, literal: str, limit: int | None = None) -> int | None:
        """Match ``literal`` against adjacent tokens starting at ``index``.

        Multi-character symbols such as ``->`` span several punctuation
        tokens. Returns the index after the match, or None.
        """
        matched = ""
        while len(matched) < len(literal) and self.within(index, limit):
            token = self.tokens[index]
            if token.is_trivia:
                return None
            matched += token.text
            if not literal.startswith(matched):
                return None
            index += 1
        return index if matched == literal else None

    def match_any(
        self,
        index: int,
        literals: tuple[str, ...],
        limit: int | None = None,
    ) -> tuple[str, int] | None:
        """Match the longest of ``literals`` at ``index``."""
        for literal in sorted(literals, key=len, reverse=True):
            after = self.match(index, literal, limit)
            if after is not None:
                return literal, after
        return None

    def raw(self, first: int, stop: int) -> str:
        """Exact source text covered by tokens ``first`` up to ``stop``."""
        if stop <= first:
            return ""
        return self.text[self[first].start:self[stop - 1].end]

    def significant(self, first: int, stop: int) -> list[int]:
        """Indices of non-trivia tokens in ``first`` up to ``stop``."""
        return [i for i in range(first, stop) if self.within(i) and not self.tokens[i].is_trivia]
