"""Annotation-aware declaration prototype detection."""

from .annotations import skip_annotations
from .arguments import interpret_arguments, parse_arguments
from .balancer import find_matching_close, skip_balanced
from .boundary import Boundary, find_boundary
from .detector import PrototypeDetector, detect_prototype, try_detect
from .errors import (
    DetectionError,
    MalformedParameterSegmentError,
    NoDeclarationFoundError,
    UnbalancedDelimiterError,
    UnterminatedLiteralOrCommentError,
)
from .models import (
    AnnotationArgument,
    AnnotationClause,
    DetectionResult,
    EnderKind,
    Parameter,
    Prototype,
)
from .parameters import parse_parameter_list, split_parameters
from .scanner import TokenBuffer, scan
from .tokens import Token, TokenKind

__all__ = [
    "detect_prototype",
    "try_detect",
    "PrototypeDetector",
    "scan",
    "TokenBuffer",
    "Token",
    "TokenKind",
    "skip_balanced",
    "find_matching_close",
    "skip_annotations",
    "interpret_arguments",
    "parse_arguments",
    "find_boundary",
    "Boundary",
    "parse_parameter_list",
    "split_parameters",
    "AnnotationArgument",
    "AnnotationClause",
    "Parameter",
    "Prototype",
    "DetectionResult",
    "EnderKind",
    "DetectionError",
    "UnterminatedLiteralOrCommentError",
    "UnbalancedDelimiterError",
    "NoDeclarationFoundError",
    "MalformedParameterSegmentError",
]
