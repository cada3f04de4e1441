"""Exceptions raised by rangefix.

I/O failures are not wrapped: they propagate as the built-in ``OSError``
subclasses so callers can tell them apart from parse and print failures.
"""


class RangefixError(Exception):
    """Base class for rangefix failures."""


class ParseError(RangefixError):
    """Raised when the input is not valid Go.

    Attributes:
        filename: Name the source was parsed under
        line: 1-based line of the first syntax error
        column: 1-based column of the first syntax error
    """

    def __init__(self, message: str, filename: str = "<file>", line: int = 0, column: int = 0):
        super().__init__(f"{filename}:{line}:{column}: {message}")
        self.filename = filename
        self.line = line
        self.column = column


class PrintError(RangefixError):
    """Raised when a rewritten tree cannot be turned back into valid Go.

    The rewriter only builds well-formed nodes, so this always indicates a
    bug rather than bad input.
    """


class ConfigError(RangefixError):
    """Raised for unreadable or invalid rangefix configuration."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.details = details or {}
