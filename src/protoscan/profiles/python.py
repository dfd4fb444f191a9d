"""Python language profile."""

from .base import LanguageProfile

PYTHON = LanguageProfile(
    name="python",
    extensions=(".py", ".pyi"),
    annotation_prefix="@",
    whitespace_after_prefix=True,
    annotation_args_across_lines=False,
    string_quotes=('"""', "'''", '"', "'"),
    line_comment_symbols=("#",),
    block_comment_symbols=(),
    terminators=(),
    body_openers=(":",),
    body_opener_keywords=frozenset({"def", "class"}),
    line_break_ends=True,
    parameter_style="pascal",
    type_separator=":",
    return_type_separators=("->",),
    modifier_keywords=frozenset({"async"}),
    declaration_keywords=frozenset({"def", "class"}),
    parameter_markers=("*", "/"),
    trailing_comma=True,
    access_keywords=(),
    underscore_is_private=True,
)
