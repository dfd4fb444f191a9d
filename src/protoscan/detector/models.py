"""Data model for detected prototypes."""

from dataclasses import asdict, dataclass
from enum import Enum

from .errors import DetectionError


class EnderKind(Enum):
    """What ended the declaration scan."""
    TERMINATOR = "terminator"
    BODY_OPENER = "body_opener"
    LINE_BREAK = "line_break"


@dataclass(frozen=True)
class AnnotationArgument:
    """One entry of an interpreted annotation argument clause.

    ``name`` is None for positional values such as ``@Named("x")``.
    """
    name: str | None
    value: str


@dataclass(frozen=True)
class AnnotationClause:
    """An annotation or decorator clause, kept as written."""
    name: str
    argument_text: str | None
    source: str
    start: int
    end: int
    arguments: tuple[AnnotationArgument, ...] = ()

    @property
    def has_arguments(self) -> bool:
        """Whether an argument clause was present, even an empty ``()``."""
        return self.argument_text is not None


@dataclass(frozen=True)
class Parameter:
    """One entry of a parameter list, in source order."""
    annotations: tuple[AnnotationClause, ...]
    modifiers: tuple[str, ...]
    type: str
    name: str | None
    has_default: bool
    default_value: str | None
    text: str
    start: int
    end: int


@dataclass(frozen=True)
class Prototype:
    """Structured, annotation-aware signature of one declaration."""
    language: str
    annotations: tuple[AnnotationClause, ...]
    modifiers: tuple[str, ...]
    type: str
    name: str
    parameters: tuple[Parameter, ...]
    has_parameter_list: bool
    ender: str
    ender_kind: EnderKind
    access_level: str
    start: int
    end: int
    type_parameters: str = ""
    suffix: str = ""
    initializer: str | None = None
    # Non-empty when the type was written after the name, as in "-> int"
    type_separator: str = ""

    @property
    def parameter_names(self) -> list[str | None]:
        return [p.name for p in self.parameters]

    def signature(self) -> str:
        """Single-line canonical signature without annotations."""
        parts = list(self.modifiers)
        if self.type and not self.type_separator:
            parts.append(self.type)
        head = " ".join(parts + [self.name + self.type_parameters])

        if self.has_parameter_list:
            params = ", ".join(p.text for p in self.parameters)
            head = f"{head}({params})"
        if self.type and self.type_separator:
            if self.type_separator == ":":
                head = f"{head}: {self.type}"
            else:
                head = f"{head} {self.type_separator} {self.type}"
        if self.suffix:
            head = f"{head} {self.suffix}"
        if self.initializer is not None:
            head = f"{head} = {self.initializer}"
        return head

    def to_dict(self) -> dict:
        """JSON-ready representation."""
        data = asdict(self)
        data["ender_kind"] = self.ender_kind.value
        data["signature"] = self.signature()
        return data


@dataclass
class DetectionResult:
    """Outcome of detecting one span: a prototype or an error, never both."""
    start: int
    prototype: Prototype | None = None
    error: DetectionError | None = None
    source_file: str | None = None

    @property
    def success(self) -> bool:
        return self.prototype is not None

    def to_dict(self) -> dict:
        return {
            "source_file": self.source_file,
            "start": self.start,
            "prototype": self.prototype.to_dict() if self.prototype else None,
            "error": self.error.to_dict() if self.error else None,
        }
