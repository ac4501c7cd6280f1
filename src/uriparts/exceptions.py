"""src/uriparts/exceptions.py

uriparts Exceptions hierarchy.
"""

from typing import Optional


class UriPartsError(Exception):
    """Base exception for all uriparts errors."""


class ParseError(UriPartsError):
    """
    Base exception for references that could not be decomposed.
    No partial result is produced when one of these is raised.
    """


class PortParseError(ParseError):
    """
    The authority carries a port that is not a decimal integer in [0, 65535].
    """

    def __init__(self, port: str, message: Optional[str] = None):
        self.port = port
        super().__init__(message or f"Invalid port: {port!r}")


class ReferenceTooLongError(ParseError):
    """The reference exceeds the length limit configured on the parser."""

    def __init__(self, length: int, max_length: int):
        self.length = length
        self.max_length = max_length
        super().__init__(
            f"Reference of {length} characters exceeds maximum length of {max_length}"
        )
