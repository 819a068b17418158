"""Custom exceptions for rstwriter."""


class RstWriterError(Exception):
    """Base exception for rstwriter operations."""


class SectionStateError(RstWriterError):
    """Builder used out of order (unbalanced sub-section open/close)."""


class BorderResolutionError(RstWriterError):
    """No border character is defined for a section depth."""

    def __init__(self, level: int, message: str | None = None) -> None:
        self.level = level
        super().__init__(message or f"No border character defined for section level {level}")


class WriteError(RstWriterError):
    """Error while persisting rendered text."""
