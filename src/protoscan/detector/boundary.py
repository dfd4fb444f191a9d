"""Declaration boundary finding."""

import logging
from dataclasses import dataclass

from .balancer import is_lone_equals, skip_balanced
from .errors import NoDeclarationFoundError, UnbalancedDelimiterError
from .models import EnderKind
from .scanner import TokenBuffer
from .tokens import TokenKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Boundary:
    """Token range of a raw signature and what ended it.

    ``start`` is the first significant token and ``stop`` is one past the
    last significant token before the ender, so neither end carries
    whitespace or comments. ``after`` is the index just past the ender.
    """
    start: int
    stop: int
    after: int
    ender: str
    ender_kind: EnderKind


def find_boundary(buffer: TokenBuffer, index: int, limit: int | None = None) -> Boundary:
    """Scan forward from ``index`` to the first top-level terminator or body opener.

    Nested delimiters are skipped whole, so a ``;`` or ``{`` inside a
    parameter list or annotation argument never ends the scan. Once a
    top-level ``=`` is seen, braces belong to the initializer and only a
    terminator ends the declaration. Nothing after the ender is tokenized.
    """
    profile = buffer.profile
    openers = profile.opening_delimiters
    closers = profile.closing_delimiters

    first = buffer.skip_trivia(index, limit)
    keyword_seen = not profile.body_opener_keywords
    initializer_seen = False
    i = first

    while buffer.within(i, limit):
        token = buffer[i]

        if token.kind is TokenKind.NEWLINE:
            if profile.line_break_ends and not _continues_line(buffer, i, first):
                return _found(buffer, first, i, i + 1, "", EnderKind.LINE_BREAK)
            i += 1
            continue

        if token.is_trivia:
            i += 1
            continue

        if token.kind is TokenKind.IDENTIFIER and token.text in profile.body_opener_keywords:
            keyword_seen = True

        matched = buffer.match_any(i, profile.terminators, limit)
        if matched is not None:
            return _found(buffer, first, i, matched[1], matched[0], EnderKind.TERMINATOR)

        if keyword_seen and not initializer_seen:
            matched = buffer.match_any(i, profile.body_openers, limit)
            if matched is not None:
                return _found(buffer, first, i, matched[1], matched[0], EnderKind.BODY_OPENER)

        if token.kind is TokenKind.PUNCTUATION:
            if token.text in openers:
                i = skip_balanced(buffer, i, limit)
                continue
            if token.text in closers:
                raise UnbalancedDelimiterError(
                    f"Unexpected {token.text!r} before the declaration ended",
                    buffer.offset(first),
                    token.end,
                )
            if token.text == "=" and is_lone_equals(buffer, i):
                initializer_seen = True

        i += 1

    stop = len(buffer) if limit is None else limit
    if profile.line_break_ends and buffer.significant(first, stop):
        # The last line of the span needs no newline of its own
        return _found(buffer, first, stop, stop, "", EnderKind.LINE_BREAK)

    raise NoDeclarationFoundError(
        "No terminator or body opener before the end of the span",
        buffer.offset(first),
        buffer.end_offset(stop),
    )


def _continues_line(buffer: TokenBuffer, index: int, first: int) -> bool:
    """A backslash right before the newline joins the next line, as does a blank head."""
    if not buffer.significant(first, index):
        return True
    previous = buffer.at(index - 1)
    return previous is not None and previous.is_punct("\\")


def _found(
    buffer: TokenBuffer,
    first: int,
    ender_index: int,
    after: int,
    ender: str,
    ender_kind: EnderKind,
) -> Boundary:
    significant = buffer.significant(first, ender_index)
    if not significant:
        raise NoDeclarationFoundError(
            f"Found {ender_kind.value} {ender!r} with no declaration before it",
            buffer.offset(first),
            buffer.end_offset(after),
        )
    logger.debug("Declaration ends with %s %r at offset %d",
                 ender_kind.value, ender, buffer.offset(ender_index))
    return Boundary(first, significant[-1] + 1, after, ender, ender_kind)
