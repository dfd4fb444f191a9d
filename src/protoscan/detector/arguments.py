"""Interpretation of annotation argument clauses.

Skipping an annotation keeps its arguments as opaque text. This module turns
that text into ordered name/value pairs for callers that need them, such as
parameter-level annotations like ``@DefaultValue(value = "10")``.
"""

from ..profiles.base import LanguageProfile
from .balancer import find_top_level, split_top_level
from .models import AnnotationArgument, AnnotationClause
from .normalizer import join_tokens
from .scanner import TokenBuffer


def parse_arguments(text: str, profile: LanguageProfile) -> tuple[AnnotationArgument, ...]:
    """Split raw argument text into positional and ``key = value`` entries."""
    buffer = TokenBuffer(text, profile)
    arguments = []

    for first, stop in split_top_level(buffer, 0, len(buffer)):
        if not buffer.significant(first, stop):
            continue

        equals = find_top_level(buffer, first, stop, ("=",))
        if equals is None:
            arguments.append(AnnotationArgument(name=None, value=join_tokens(buffer, first, stop)))
            continue

        _, position, after = equals
        arguments.append(AnnotationArgument(
            name=join_tokens(buffer, first, position) or None,
            value=join_tokens(buffer, after, stop),
        ))

    return tuple(arguments)


def interpret_arguments(
    clause: AnnotationClause,
    profile: LanguageProfile,
) -> tuple[AnnotationArgument, ...]:
    """Arguments of ``clause``; empty when it had no argument clause."""
    if clause.arguments:
        return clause.arguments
    if not clause.argument_text:
        return ()
    return parse_arguments(clause.argument_text, profile)
