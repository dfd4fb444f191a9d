"""Typed detection failures.

Every failure carries the offending offset range so the surrounding tool can
report it and move on to the next declaration.
"""


class DetectionError(Exception):
    """Base class for prototype detection failures."""
    kind = "detection_error"

    def __init__(self, message: str, start: int, end: int):
        super().__init__(message)
        self.message = message
        self.start = start
        self.end = end

    def __str__(self) -> str:
        return f"{self.message} (offsets {self.start}-{self.end})"

    def to_dict(self) -> dict:
        return {
            "kind": self.kind,
            "message": self.message,
            "start": self.start,
            "end": self.end,
        }


class UnterminatedLiteralOrCommentError(DetectionError):
    """End of input reached inside a string, char literal or comment."""
    kind = "unterminated_literal_or_comment"


class UnbalancedDelimiterError(DetectionError):
    """An opening delimiter was never closed, or was closed by the wrong kind."""
    kind = "unbalanced_delimiter"


class NoDeclarationFoundError(DetectionError):
    """No terminator or body opener followed the annotations."""
    kind = "no_declaration_found"


class MalformedParameterSegmentError(DetectionError):
    """A parameter could not be split into type and name."""
    kind = "malformed_parameter_segment"

    def __init__(self, message: str, start: int, end: int, parameter_index: int):
        super().__init__(message, start, end)
        self.parameter_index = parameter_index

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["parameter_index"] = self.parameter_index
        return data
