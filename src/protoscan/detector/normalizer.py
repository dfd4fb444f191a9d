"""Canonical text and final Prototype assembly."""

from ..profiles.base import LanguageProfile
from .models import AnnotationClause, EnderKind, Prototype
from .scanner import TokenBuffer


def join_tokens(buffer: TokenBuffer, first: int, stop: int) -> str:
    """Rejoin tokens ``first`` up to ``stop`` as canonical single-line text.

    Any run of whitespace, newlines or comments becomes one space and the
    ends are stripped. Literal token text is kept exactly as written.
    """
    parts = []
    pending_space = False
    for i in range(first, stop):
        token = buffer[i]
        if token.is_trivia:
            pending_space = True
            continue
        if pending_space and parts:
            parts.append(" ")
        pending_space = False
        parts.append(token.text)
    return "".join(parts)


def access_level(profile: LanguageProfile, modifiers: tuple[str, ...], name: str) -> str:
    """Explicit access modifier, else the profile's naming rule or default."""
    for modifier in modifiers:
        if modifier in profile.access_keywords:
            return modifier
    if (profile.underscore_is_private and name.startswith("_")
            and not (name.startswith("__") and name.endswith("__"))):
        return "private"
    return profile.default_access_level


def build_prototype(
    profile: LanguageProfile,
    annotations: tuple[AnnotationClause, ...],
    parts,
    ender: str,
    ender_kind: EnderKind,
    start: int,
    end: int,
) -> Prototype:
    """Assemble already-recognized pieces into one immutable Prototype."""
    return Prototype(
        language=profile.name,
        annotations=tuple(annotations),
        modifiers=tuple(parts.modifiers),
        type=parts.type,
        name=parts.name,
        parameters=tuple(parts.parameters),
        has_parameter_list=parts.has_parameter_list,
        ender=ender,
        ender_kind=ender_kind,
        access_level=access_level(profile, tuple(parts.modifiers), parts.name),
        start=start,
        end=end,
        type_parameters=parts.type_parameters,
        suffix=parts.suffix,
        initializer=parts.initializer,
        type_separator=parts.type_separator,
    )
