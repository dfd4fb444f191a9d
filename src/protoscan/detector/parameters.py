"""Parameter list parsing and the type/name splitting shared with declaration heads."""

from dataclasses import dataclass, replace

from .annotations import skip_annotation, skip_annotations
from .arguments import parse_arguments
from .balancer import (
    find_top_level,
    is_generic_opener,
    is_lone_equals,
    skip_balanced,
    skip_generic,
    split_top_level,
)
from .errors import MalformedParameterSegmentError, NoDeclarationFoundError
from .models import AnnotationClause, Parameter
from .normalizer import join_tokens
from .scanner import TokenBuffer
from .tokens import TokenKind


@dataclass
class DeclarationParts:
    """Pieces of a declaration after its leading annotations.

    ``annotations`` holds clauses written among the modifiers.
    """
    modifiers: tuple[str, ...]
    type: str
    name: str
    parameters: tuple[Parameter, ...]
    has_parameter_list: bool
    type_parameters: str = ""
    suffix: str = ""
    initializer: str | None = None
    type_separator: str = ""
    annotations: tuple[AnnotationClause, ...] = ()


def parse_parameter_list(
    buffer: TokenBuffer,
    open_index: int,
    limit: int | None = None,
) -> tuple[tuple[Parameter, ...], int]:
    """Parse the parameter list opened at ``open_index``.

    Returns the parameters in order and the index just past the closing
    parenthesis. Commas only split at depth zero relative to the list's own
    parenthesis, so annotation arguments and generic types stay whole.
    """
    segments, close_after = split_parameters(buffer, open_index, limit)

    parameters = []
    for position, (segment_first, segment_stop) in enumerate(segments):
        parameter = parse_parameter(buffer, segment_first, segment_stop, position)
        if parameter is not None:
            parameters.append(parameter)

    return tuple(parameters), close_after


def split_parameters(
    buffer: TokenBuffer,
    open_index: int,
    limit: int | None = None,
) -> tuple[list[tuple[int, int]], int]:
    """Token ranges of each parameter segment, and the index past the list.

    An empty list, or one holding only a marker such as C's ``void``, has
    no segments.
    """
    profile = buffer.profile
    close_after = skip_balanced(buffer, open_index, limit)
    first, stop = open_index + 1, close_after - 1

    if not buffer.significant(first, stop):
        return [], close_after

    segments = split_top_level(buffer, first, stop, ",", generics=profile.generic_brackets is not None)

    # Without trailing_comma the empty last segment fails as a malformed parameter
    if profile.trailing_comma and len(segments) > 1 and not buffer.significant(*segments[-1]):
        segments.pop()

    if len(segments) == 1:
        significant = buffer.significant(*segments[0])
        if len(significant) == 1 and buffer[significant[0]].text in profile.empty_parameter_markers:
            return [], close_after

    return segments, close_after


def parse_parameter(buffer: TokenBuffer, first: int, stop: int, position: int) -> Parameter | None:
    """Parse one comma-separated segment of a parameter list.

    Returns None for bare list markers like Python's ``*`` and ``/``.
    """
    profile = buffer.profile
    significant = buffer.significant(first, stop)
    start, end = _offsets(buffer, first, stop)

    if not significant:
        raise MalformedParameterSegmentError("Empty parameter", start, end, position)

    annotations, index = skip_annotations(buffer, first, stop)
    annotations = tuple(_with_arguments(clause, buffer) for clause in annotations)
    body = buffer.skip_trivia(index, stop)
    text = join_tokens(buffer, first, stop)

    if body >= stop:
        raise MalformedParameterSegmentError(
            f"Parameter {text!r} has annotations but no declaration", start, end, position
        )

    body_significant = buffer.significant(body, stop)
    if (len(body_significant) == 1 and not annotations
            and buffer[body_significant[0]].text in profile.parameter_markers):
        return None

    generics = profile.generic_brackets is not None
    default = find_top_level(buffer, body, stop, profile.default_value_separators, generics)
    if default is None:
        declaration_stop = stop
        default_value = None
    else:
        _, declaration_stop, after = default
        default_value = join_tokens(buffer, after, stop)

    if not buffer.significant(body, declaration_stop):
        raise MalformedParameterSegmentError(
            f"Parameter {text!r} has a default value but no name or type", start, end, position
        )

    leading_modifiers, inner_annotations, body = _skip_modifiers(buffer, body, declaration_stop)
    annotations += tuple(_with_arguments(clause, buffer) for clause in inner_annotations)
    if not buffer.significant(body, declaration_stop):
        raise MalformedParameterSegmentError(
            f"Parameter {text!r} has annotations but no declaration", start, end, position
        )

    if profile.is_pascal_style:
        modifiers, type_text, name, _ = _split_pascal(buffer, body, declaration_stop)
    else:
        modifiers, type_text, name = _split_c(buffer, body, declaration_stop)

    if name is None and not profile.allow_unnamed_parameters:
        raise MalformedParameterSegmentError(
            f"No parameter name in {text!r}", start, end, position
        )

    return Parameter(
        annotations=annotations,
        modifiers=leading_modifiers + modifiers,
        type=type_text,
        name=name,
        has_default=default is not None,
        default_value=default_value,
        text=text,
        start=start,
        end=end,
    )


def parse_declaration(buffer: TokenBuffer, first: int, stop: int) -> DeclarationParts:
    """Split a signature (annotations already removed) into its parts."""
    profile = buffer.profile
    found = _locate_parameters_or_initializer(buffer, first, stop)

    parameters: tuple[Parameter, ...] = ()
    has_parameter_list = False
    initializer = None
    head_stop = stop
    tail_first = stop

    if found is not None:
        kind, position = found
        head_stop = position
        if kind == "(":
            parameters, tail_first = parse_parameter_list(buffer, position, stop)
            has_parameter_list = True
        else:
            initializer = join_tokens(buffer, position + 1, stop)

    parts = _split_head(buffer, first, head_stop)
    parts.parameters = parameters
    parts.has_parameter_list = has_parameter_list
    parts.initializer = initializer

    if tail_first < stop and buffer.significant(tail_first, stop):
        tail = buffer.skip_trivia(tail_first, stop)
        matched = buffer.match_any(tail, profile.return_type_separators, stop)
        if matched is not None and not parts.type:
            parts.type_separator, after = matched
            parts.type = join_tokens(buffer, after, stop)
        else:
            parts.suffix = _join_nonempty(parts.suffix, join_tokens(buffer, tail_first, stop))

    return parts


def _locate_parameters_or_initializer(
    buffer: TokenBuffer,
    first: int,
    stop: int,
) -> tuple[str, int] | None:
    """Find the top-level parameter list or initializer, whichever comes first."""
    openers = buffer.profile.opening_delimiters
    i = first

    while i < stop:
        token = buffer[i]
        if token.is_punct("("):
            return "(", i
        if token.kind is TokenKind.PUNCTUATION and token.text in openers:
            i = skip_balanced(buffer, i, stop)
            continue
        if is_generic_opener(buffer, i):
            after = skip_generic(buffer, i, stop)
            if after is not None:
                i = after
                continue
        if token.is_punct("=") and is_lone_equals(buffer, i):
            return "=", i
        i += 1

    return None


def _split_head(buffer: TokenBuffer, first: int, stop: int) -> DeclarationParts:
    """Split the part before the parameters into modifiers, type and name."""
    profile = buffer.profile
    significant = buffer.significant(first, stop)
    start, end = _offsets(buffer, first, stop)

    modifiers = []
    annotations = []
    has_keyword = False
    k = 0
    while k < len(significant):
        index = significant[k]
        if profile.has_annotations:
            result = skip_annotation(buffer, index, stop)
            if result is not None:
                # Annotations may sit between modifiers, as in "public @Nullable String"
                clause, after = result
                annotations.append(clause)
                while k < len(significant) and significant[k] < after:
                    k += 1
                continue
        token = buffer[index]
        # The last word is always the name, as in a method called "get"
        if token.kind is not TokenKind.IDENTIFIER or k == len(significant) - 1:
            break
        if token.text in profile.declaration_keywords:
            has_keyword = True
        elif token.text not in profile.modifier_keywords:
            break
        modifiers.append(token.text)
        k += 1

    if k >= len(significant):
        raise NoDeclarationFoundError("Declaration has no name", start, end)

    rest = significant[k]

    if has_keyword:
        parts = _split_keyword_head(buffer, rest, stop, tuple(modifiers), start, end)
        parts.annotations = tuple(annotations)
        return parts

    type_parameters = ""
    if is_generic_opener(buffer, rest):
        after = skip_generic(buffer, rest, stop)
        if after is not None:
            type_parameters = join_tokens(buffer, rest, after)
            rest = buffer.skip_trivia(after, stop)

    if profile.is_pascal_style:
        extra_modifiers, type_text, name, name_generics = _split_pascal(buffer, rest, stop)
        separator = profile.type_separator if type_text else ""
        parts = DeclarationParts(
            modifiers=tuple(modifiers) + extra_modifiers,
            type=type_text,
            name=name or "",
            parameters=(),
            has_parameter_list=False,
            type_parameters=type_parameters or name_generics,
            type_separator=separator,
        )
    else:
        extra_modifiers, type_text, name = _split_c(buffer, rest, stop, name_may_be_type=True)
        parts = DeclarationParts(
            modifiers=tuple(modifiers) + extra_modifiers,
            type=type_text,
            name=name or "",
            parameters=(),
            has_parameter_list=False,
            type_parameters=type_parameters,
        )

    if not parts.name:
        raise NoDeclarationFoundError("Declaration has no name", start, end)
    parts.annotations = tuple(annotations)
    return parts


def _split_keyword_head(
    buffer: TokenBuffer,
    rest: int,
    stop: int,
    modifiers: tuple[str, ...],
    start: int,
    end: int,
) -> DeclarationParts:
    """Heads like ``class Foo<T> extends Bar`` where the name follows the keyword."""
    profile = buffer.profile
    token = buffer[rest]
    if token.kind is not TokenKind.IDENTIFIER:
        raise NoDeclarationFoundError("Declaration keyword is not followed by a name", start, end)

    after_name = rest + 1
    type_parameters = ""
    lookahead = buffer.skip_trivia(after_name, stop)
    if lookahead < stop and is_generic_opener(buffer, lookahead):
        after = skip_generic(buffer, lookahead, stop)
        if after is not None:
            type_parameters = join_tokens(buffer, lookahead, after)
            after_name = after

    parts = DeclarationParts(
        modifiers=modifiers,
        type="",
        name=token.text,
        parameters=(),
        has_parameter_list=False,
        type_parameters=type_parameters,
    )

    lookahead = buffer.skip_trivia(after_name, stop)
    if lookahead >= stop:
        return parts

    if profile.is_pascal_style and profile.type_separator:
        after_separator = buffer.match(lookahead, profile.type_separator, stop)
        if after_separator is not None:
            parts.type = join_tokens(buffer, after_separator, stop)
            parts.type_separator = profile.type_separator
            return parts

    parts.suffix = join_tokens(buffer, after_name, stop)
    return parts


def _split_c(
    buffer: TokenBuffer,
    first: int,
    stop: int,
    name_may_be_type: bool = False,
) -> tuple[tuple[str, ...], str, str | None]:
    """Split ``[modifiers] type name[suffix]`` into its parts.

    The name is the last top-level identifier, provided only array brackets
    follow it and it is not a bare type keyword.
    """
    profile = buffer.profile
    significant = buffer.significant(first, stop)

    modifiers = []
    k = 0
    while (k < len(significant) - 1 and buffer[significant[k]].kind is TokenKind.IDENTIFIER
           and buffer[significant[k]].text in profile.modifier_keywords):
        modifiers.append(buffer[significant[k]].text)
        k += 1

    type_first = significant[k] if significant else first
    openers = profile.opening_delimiters
    name_index = None
    i = type_first

    while i < stop:
        token = buffer[i]
        if token.is_trivia:
            i += 1
            continue
        if token.kind is TokenKind.PUNCTUATION and token.text in openers:
            keep = token.text == "[" and name_index is not None
            i = skip_balanced(buffer, i, stop)
            if not keep:
                name_index = None
            continue
        if is_generic_opener(buffer, i):
            after = skip_generic(buffer, i, stop)
            if after is not None:
                i = after
                name_index = None
                continue
        name_index = i if token.kind is TokenKind.IDENTIFIER else None
        i += 1

    if name_index is not None and buffer[name_index].text in profile.type_keywords:
        # "int x" names x, but "(int)" alone has no name; a declaration head
        # like "operator int" still needs one
        if not name_may_be_type or not buffer.significant(type_first, name_index):
            name_index = None

    if name_index is None:
        return tuple(modifiers), join_tokens(buffer, type_first, stop), None

    type_text = join_tokens(buffer, type_first, name_index) + join_tokens(buffer, name_index + 1, stop)
    return tuple(modifiers), type_text, buffer[name_index].text


def _split_pascal(
    buffer: TokenBuffer,
    first: int,
    stop: int,
) -> tuple[tuple[str, ...], str, str | None, str]:
    """Split ``[modifiers] name[<T>][?]: type`` into its parts.

    The last element is a generic group written right after the name, if any.
    """
    profile = buffer.profile
    generics = profile.generic_brackets is not None
    separator = None
    if profile.type_separator:
        separator = find_top_level(buffer, first, stop, (profile.type_separator,), generics)

    if separator is None:
        name_stop, type_text = stop, ""
    else:
        _, name_stop, after = separator
        type_text = join_tokens(buffer, after, stop)

    openers = profile.opening_delimiters
    name_index = None
    name_generics = None
    i = first
    while i < name_stop:
        token = buffer[i]
        if token.kind is TokenKind.PUNCTUATION and token.text in openers:
            i = skip_balanced(buffer, i, name_stop)
            continue
        if is_generic_opener(buffer, i):
            after = skip_generic(buffer, i, name_stop)
            if after is not None:
                if name_index is not None and name_generics is None:
                    name_generics = (i, after)
                i = after
                continue
        if token.kind is TokenKind.IDENTIFIER:
            name_index = i
            name_generics = None
        i += 1

    if name_index is None:
        # Destructuring patterns such as "{a, b}: Props" stand in for the name
        significant = buffer.significant(first, name_stop)
        if significant and buffer[significant[0]].text in openers:
            return (), type_text, join_tokens(buffer, first, name_stop), ""
        return tuple(join_tokens(buffer, first, name_stop).split()), type_text, None, ""

    modifiers = join_tokens(buffer, first, name_index).split()
    generic_text = ""
    trailing_first = name_index + 1
    if name_generics is not None:
        generic_text = join_tokens(buffer, *name_generics)
        trailing_first = name_generics[1]
    trailing = join_tokens(buffer, trailing_first, name_stop)
    if trailing:
        modifiers.append(trailing)
    return tuple(modifiers), type_text, buffer[name_index].text, generic_text


def _skip_modifiers(
    buffer: TokenBuffer,
    index: int,
    stop: int,
) -> tuple[tuple[str, ...], list[AnnotationClause], int]:
    """Skip modifiers with annotations mixed in, as in ``final @Nonnull String key``.

    A modifier keyword only counts when another word or annotation follows
    it. Returns the modifiers, the annotations and the index after them.
    """
    profile = buffer.profile
    modifiers = []
    annotations = []
    index = buffer.skip_trivia(index, stop)

    while buffer.within(index, stop):
        if profile.has_annotations:
            result = skip_annotation(buffer, index, stop)
            if result is not None:
                clause, after = result
                annotations.append(clause)
                index = buffer.skip_trivia(after, stop)
                continue
        token = buffer[index]
        following = buffer.skip_trivia(index + 1, stop)
        if (token.kind is not TokenKind.IDENTIFIER or token.text not in profile.modifier_keywords
                or not _starts_word(buffer, following, stop)):
            break
        modifiers.append(token.text)
        index = following

    return tuple(modifiers), annotations, index


def _starts_word(buffer: TokenBuffer, index: int, stop: int) -> bool:
    if not buffer.within(index, stop):
        return False
    if buffer[index].kind is TokenKind.IDENTIFIER:
        return True
    prefix = buffer.profile.annotation_prefix
    return bool(prefix) and buffer.match(index, prefix, stop) is not None


def _with_arguments(clause: AnnotationClause, buffer: TokenBuffer) -> AnnotationClause:
    """Parameter annotations get their arguments interpreted."""
    if not clause.argument_text:
        return clause
    return replace(clause, arguments=parse_arguments(clause.argument_text, buffer.profile))


def _offsets(buffer: TokenBuffer, first: int, stop: int) -> tuple[int, int]:
    """Source range of the significant tokens in the range, surrounding trivia excluded."""
    significant = buffer.significant(first, stop)
    if not significant:
        start = buffer.offset(first)
        return start, start
    return buffer[significant[0]].start, buffer[significant[-1]].end


def _join_nonempty(*parts: str) -> str:
    return " ".join(part for part in parts if part)
