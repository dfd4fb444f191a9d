"""Annotation / decorator clause skipping."""

import logging

from .balancer import skip_balanced
from .models import AnnotationClause
from .scanner import TokenBuffer
from .tokens import TokenKind

logger = logging.getLogger(__name__)


def skip_annotations(
    buffer: TokenBuffer,
    index: int = 0,
    limit: int | None = None,
) -> tuple[list[AnnotationClause], int]:
    """Skip every annotation clause starting at ``index``.

    Returns the clauses in source order and the token index just past the
    last one. With no clauses the index comes back unchanged, leading
    whitespace included. Argument clauses are kept as raw text and not
    interpreted here.
    """
    clauses: list[AnnotationClause] = []

    if not buffer.profile.has_annotations:
        return clauses, index

    while True:
        lookahead = buffer.skip_trivia(index, limit)
        result = skip_annotation(buffer, lookahead, limit)
        if result is None:
            break
        clause, index = result
        clauses.append(clause)

    if clauses:
        logger.debug("Skipped %d annotation clause(s): %s", len(clauses),
                     ", ".join(c.name for c in clauses))
    return clauses, index


def skip_annotation(
    buffer: TokenBuffer,
    index: int,
    limit: int | None = None,
) -> tuple[AnnotationClause, int] | None:
    """Try to skip a single clause like ``@Preliminary`` or ``@Copyright("x")``."""
    profile = buffer.profile

    after_prefix = buffer.match(index, profile.annotation_prefix, limit)
    if after_prefix is None:
        return None

    lookahead = after_prefix
    if profile.whitespace_after_prefix:
        lookahead = buffer.skip_trivia(lookahead, limit)

    name_start = lookahead
    lookahead = skip_qualified_identifier(buffer, lookahead, limit)
    if lookahead is None:
        return None

    name = "".join(buffer[i].text for i in range(name_start, lookahead))
    if name in profile.annotation_exclusions:
        return None

    end = lookahead
    argument_text = None

    # The argument clause is optional; whitespace may separate it from the name
    lookahead = buffer.skip_trivia(lookahead, limit, newlines=profile.annotation_args_across_lines)
    if buffer.within(lookahead, limit) and buffer[lookahead].is_punct("("):
        end = skip_balanced(buffer, lookahead, limit)
        argument_text = buffer.raw(lookahead + 1, end - 1)

    clause = AnnotationClause(
        name=name,
        argument_text=argument_text,
        source=buffer.raw(index, end),
        start=buffer[index].start,
        end=buffer[end - 1].end,
    )
    return clause, end


def skip_qualified_identifier(buffer: TokenBuffer, index: int, limit: int | None = None) -> int | None:
    """Skip a dotted name such as ``javax.annotation.Nonnull``."""
    lookahead = index
    while True:
        if not buffer.within(lookahead, limit) or buffer[lookahead].kind is not TokenKind.IDENTIFIER:
            return None
        lookahead += 1
        if buffer.within(lookahead + 1, limit) and buffer[lookahead].is_punct("."):
            lookahead += 1
        else:
            return lookahead
