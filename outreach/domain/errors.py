"""Exception types raised by the outreach pipeline."""


class OutreachError(Exception):
    """Base class for pipeline errors."""


class ParseError(OutreachError, ValueError):
    """A single input row could not be turned into a Profile."""

    def __init__(self, message: str, line_number: int | None = None, line: str | None = None) -> None:
        self.line_number = line_number
        self.line = line
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class DataFormatError(OutreachError, ValueError):
    """A labeled dataset cannot be used for training or evaluation."""


class ModelFormatError(OutreachError, OSError):
    """A model artifact is corrupt or was written by an incompatible version."""
