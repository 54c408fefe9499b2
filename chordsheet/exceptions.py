from dataclasses import dataclass


class ChordSheetError(Exception):
    """Base exception for chordsheet."""

    stage = "Pipeline"


class ParseError(ChordSheetError):
    """Raised when source text violates the grammar of its notation."""

    stage = "Parser"

    def __init__(self, message: str, line_number: int | None = None):
        self.message = message
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class TransformError(ChordSheetError):
    """Raised when an operation on an otherwise valid song fails."""

    def __init__(self, stage: str, message: str):
        self.stage = stage
        self.message = message
        super().__init__(message)


class FormatError(ChordSheetError):
    """Raised when a song cannot be rendered."""

    stage = "Formatter"


@dataclass(frozen=True)
class ChordParseFailure:
    """A chord annotation that could not be parsed (non-fatal).

    The chord text is kept as literal text in the song.
    """

    text: str
    line_index: int
