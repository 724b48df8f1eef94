"""Exception types raised at the model boundary."""

from typing import Optional


class MarkupError(Exception):
    """Base class for markupgen errors."""

    pass


class DeserializationError(MarkupError):
    """Raised when a generic value does not match the expected model shape."""

    def __init__(self, message: str, target: Optional[str] = None):
        self.target = target
        super().__init__(message)


class SourceLoadError(MarkupError):
    """Raised when document source text cannot be read into a generic value."""

    def __init__(
        self, message: str, line: Optional[int] = None, column: Optional[int] = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)
