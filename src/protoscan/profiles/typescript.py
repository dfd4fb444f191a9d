"""TypeScript language profile."""

from .base import LanguageProfile

TYPESCRIPT = LanguageProfile(
    name="typescript",
    extensions=(".ts", ".tsx", ".mts", ".cts"),
    annotation_prefix="@",
    whitespace_after_prefix=False,
    annotation_args_across_lines=False,
    generic_brackets=("<", ">"),
    string_quotes=('"', "'", "`"),
    identifier_extra_chars="_$",
    terminators=(";",),
    body_openers=("{",),
    parameter_style="pascal",
    type_separator=":",
    return_type_separators=(":",),
    trailing_comma=True,
    modifier_keywords=frozenset({
        "export", "default", "declare", "public", "private", "protected",
        "static", "readonly", "abstract", "async", "override", "get", "set",
    }),
    declaration_keywords=frozenset({
        "function", "class", "interface", "enum", "type", "namespace",
        "const", "let", "var",
    }),
    type_keywords=frozenset({
        "string", "number", "boolean", "any", "unknown", "void", "never",
        "object", "symbol", "bigint",
    }),
    access_keywords=("public", "protected", "private"),
)
