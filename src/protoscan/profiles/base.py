"""Language profile definition shared by every detector component."""

from dataclasses import dataclass, field, replace


@dataclass(frozen=True)
class LanguageProfile:
    """Lexical and annotation conventions for one host language.

    Profiles are immutable and hashable so tables derived from them can be
    cached for the life of the process.
    """
    name: str
    extensions: tuple[str, ...] = ()

    # Annotations / decorators
    annotation_prefix: str | None = "@"
    whitespace_after_prefix: bool = True
    annotation_args_across_lines: bool = True
    annotation_exclusions: tuple[str, ...] = ()

    # Delimiters
    delimiter_pairs: tuple[tuple[str, str], ...] = (("(", ")"), ("[", "]"), ("{", "}"))
    generic_brackets: tuple[str, str] | None = None

    # Literals and comments
    string_quotes: tuple[str, ...] = ('"', "'")
    escape_char: str | None = "\\"
    line_comment_symbols: tuple[str, ...] = ("//",)
    block_comment_symbols: tuple[tuple[str, str], ...] = (("/*", "*/"),)
    block_comments_nest: bool = False
    identifier_extra_chars: str = "_"

    # Declaration enders
    terminators: tuple[str, ...] = (";",)
    body_openers: tuple[str, ...] = ("{",)
    # When set, a body opener only ends a declaration whose head uses one of these
    body_opener_keywords: frozenset[str] = field(default_factory=frozenset)
    line_break_ends: bool = False

    # Parameters
    parameter_style: str = "c"
    type_separator: str | None = None
    return_type_separators: tuple[str, ...] = ()
    default_value_separators: tuple[str, ...] = ("=",)
    modifier_keywords: frozenset[str] = field(default_factory=frozenset)
    declaration_keywords: frozenset[str] = field(default_factory=frozenset)
    type_keywords: frozenset[str] = field(default_factory=frozenset)
    parameter_markers: tuple[str, ...] = ()
    empty_parameter_markers: tuple[str, ...] = ()
    allow_unnamed_parameters: bool = False
    # A comma after the last parameter is accepted rather than an empty segment
    trailing_comma: bool = False

    # Access levels
    access_keywords: tuple[str, ...] = ("public", "protected", "private", "internal")
    default_access_level: str = "public"
    underscore_is_private: bool = False

    @property
    def opening_delimiters(self) -> dict[str, str]:
        """Map of opening delimiter to its closing delimiter."""
        return {opening: closing for opening, closing in self.delimiter_pairs}

    @property
    def closing_delimiters(self) -> dict[str, str]:
        """Map of closing delimiter to its opening delimiter."""
        return {closing: opening for opening, closing in self.delimiter_pairs}

    @property
    def has_annotations(self) -> bool:
        return bool(self.annotation_prefix)

    @property
    def is_pascal_style(self) -> bool:
        return self.parameter_style == "pascal"

    def derive(self, **changes) -> "LanguageProfile":
        """Return a copy of this profile with some fields replaced."""
        return replace(self, **changes)
