"""
Parser Errors.

ParsingError is raised by the item extractor only. Every caller inside the
parsers package catches it and turns it into a skipped chunk or a warning,
so it never reaches the caller of the interpreter.
"""

from enum import Enum


class ParseErrorCode(str, Enum):
    """Machine-readable reason for a ParsingError."""
    EMPTY_INPUT = "empty_input"
    UNKNOWN_ITEM = "unknown_item"


class ParsingError(Exception):
    """Raised when an item name cannot be extracted from a chunk."""

    def __init__(self, message: str, code: ParseErrorCode):
        self.message = message
        self.code = code
        super().__init__(f"{code.value}: {message}")
