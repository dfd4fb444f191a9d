"""Java language profile."""

from .base import LanguageProfile

JAVA = LanguageProfile(
    name="java",
    extensions=(".java",),
    annotation_prefix="@",
    # "@ Deprecated" is legal Java, though unusual
    whitespace_after_prefix=True,
    annotation_args_across_lines=True,
    annotation_exclusions=("interface",),
    generic_brackets=("<", ">"),
    string_quotes=('"""', '"', "'"),
    identifier_extra_chars="_$",
    terminators=(";",),
    body_openers=("{",),
    parameter_style="c",
    modifier_keywords=frozenset({
        "public", "protected", "private", "static", "final", "abstract",
        "synchronized", "native", "transient", "volatile", "strictfp",
        "default", "sealed",
    }),
    declaration_keywords=frozenset({"class", "interface", "enum", "record"}),
    type_keywords=frozenset({
        "boolean", "byte", "char", "short", "int", "long", "float", "double",
        "void", "var",
    }),
    access_keywords=("public", "protected", "private"),
    default_access_level="package",
)
