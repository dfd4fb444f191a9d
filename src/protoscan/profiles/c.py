"""C language profile."""

from .base import LanguageProfile

C = LanguageProfile(
    name="c",
    extensions=(".c", ".h"),
    annotation_prefix=None,
    terminators=(";",),
    body_openers=("{",),
    parameter_style="c",
    modifier_keywords=frozenset({"static", "extern", "inline", "register"}),
    type_keywords=frozenset({
        "void", "char", "short", "int", "long", "float", "double", "signed",
        "unsigned", "_Bool", "const", "volatile",
    }),
    empty_parameter_markers=("void",),
    # Prototypes in headers routinely omit parameter names
    allow_unnamed_parameters=True,
    access_keywords=(),
)
