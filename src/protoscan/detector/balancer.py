"""Delimiter balancing over a token buffer."""

from ..profiles.base import LanguageProfile
from .errors import UnbalancedDelimiterError
from .scanner import TokenBuffer
from .tokens import TokenKind


def skip_balanced(buffer: TokenBuffer, index: int, limit: int | None = None) -> int:
    """Skip the balanced region opened by the delimiter at ``index``.

    Returns the token index just past the matching close. Literals and
    comments are single tokens, so anything inside them is ignored. A close
    of the wrong kind, running out of tokens first, or no opening delimiter
    at ``index`` at all raises UnbalancedDelimiterError.
    """
    openers = buffer.profile.opening_delimiters
    closers = buffer.profile.closing_delimiters

    if not buffer.within(index, limit):
        raise UnbalancedDelimiterError(
            "Expected an opening delimiter but the span ended",
            buffer.offset(index),
            buffer.offset(index),
        )
    first = buffer[index]
    if first.kind is not TokenKind.PUNCTUATION or first.text not in openers:
        raise UnbalancedDelimiterError(
            f"Expected an opening delimiter but found {first.text!r}",
            first.start,
            first.end,
        )

    expected = [openers[first.text]]
    i = index + 1

    while buffer.within(i, limit):
        token = buffer[i]
        if token.kind is TokenKind.PUNCTUATION:
            if token.text in openers:
                expected.append(openers[token.text])
            elif token.text in closers:
                if token.text != expected[-1]:
                    raise UnbalancedDelimiterError(
                        f"Expected {expected[-1]!r} but found {token.text!r}",
                        first.start,
                        token.end,
                    )
                expected.pop()
                if not expected:
                    return i + 1
        i += 1

    raise UnbalancedDelimiterError(
        f"No matching {expected[-1]!r} for {first.text!r}",
        first.start,
        buffer.end_offset(limit),
    )


def find_matching_close(
    text: str,
    offset: int,
    profile: LanguageProfile,
    end: int | None = None,
) -> int:
    """Return the source offset one past the delimiter matching ``text[offset]``."""
    buffer = TokenBuffer(text, profile, offset, end)
    stop = skip_balanced(buffer, 0)
    return buffer[stop - 1].end


def is_generic_opener(buffer: TokenBuffer, index: int) -> bool:
    """Whether the token at ``index`` opens a generic argument group."""
    brackets = buffer.profile.generic_brackets
    return brackets is not None and buffer[index].is_punct(brackets[0])


def is_generic_closer(buffer: TokenBuffer, index: int) -> bool:
    """Whether the token at ``index`` closes a generic argument group.

    Arrows such as ``=>`` and ``->`` are never closers.
    """
    brackets = buffer.profile.generic_brackets
    if brackets is None or not buffer[index].is_punct(brackets[1]):
        return False
    previous = buffer.at(index - 1)
    return not (previous is not None and previous.text in ("=", "-")
                and previous.end == buffer[index].start)


def skip_generic(buffer: TokenBuffer, index: int, limit: int) -> int | None:
    """Skip a generic argument group like ``<K, List<V>>``.

    Angle brackets double as comparison operators, so an unclosed group is
    not an error: None is returned and the caller treats ``<`` as plain text.
    """
    depth = 0
    i = index
    openers = buffer.profile.opening_delimiters

    while i < limit:
        token = buffer[i]
        if is_generic_opener(buffer, i):
            depth += 1
        elif is_generic_closer(buffer, i):
            depth -= 1
            if depth == 0:
                return i + 1
        elif token.kind is TokenKind.PUNCTUATION and token.text in openers:
            i = skip_balanced(buffer, i, limit)
            continue
        i += 1

    return None


def split_top_level(
    buffer: TokenBuffer,
    first: int,
    stop: int,
    separator: str = ",",
    generics: bool = False,
) -> list[tuple[int, int]]:
    """Split ``first`` up to ``stop`` at separators outside any nested delimiter.

    Returns (start, stop) token ranges; there is always at least one, which
    may be empty.
    """
    openers = buffer.profile.opening_delimiters
    segments = []
    segment_start = first
    i = first

    while i < stop:
        token = buffer[i]
        if token.kind is TokenKind.PUNCTUATION and token.text in openers:
            i = skip_balanced(buffer, i, stop)
            continue
        if generics and is_generic_opener(buffer, i):
            after = skip_generic(buffer, i, stop)
            if after is not None:
                i = after
                continue
        if token.is_punct(separator):
            segments.append((segment_start, i))
            segment_start = i + 1
        i += 1

    segments.append((segment_start, stop))
    return segments


def find_top_level(
    buffer: TokenBuffer,
    first: int,
    stop: int,
    literals: tuple[str, ...],
    generics: bool = False,
) -> tuple[str, int, int] | None:
    """Find the first of ``literals`` outside nested delimiters.

    Returns the literal, its token index and the index after it. A lone
    ``=`` never matches inside ``==``, ``<=``, ``=>`` and the like.
    """
    if not literals:
        return None

    openers = buffer.profile.opening_delimiters
    i = first

    while i < stop:
        token = buffer[i]
        if token.kind is TokenKind.PUNCTUATION and token.text in openers:
            i = skip_balanced(buffer, i, stop)
            continue
        if generics and is_generic_opener(buffer, i):
            after = skip_generic(buffer, i, stop)
            if after is not None:
                i = after
                continue
        matched = buffer.match_any(i, literals, stop)
        if matched is not None:
            literal, after = matched
            if literal != "=" or is_lone_equals(buffer, i):
                return literal, i, after
        i += 1

    return None


def is_lone_equals(buffer: TokenBuffer, index: int) -> bool:
    previous = buffer.at(index - 1)
    following = buffer.at(index + 1)
    token = buffer[index]
    if previous is not None and previous.end == token.start and previous.text in "=!<>":
        return False
    if following is not None and following.start == token.end and following.text in ("=", ">"):
        return False
    return True
