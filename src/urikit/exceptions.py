"""src/urikit/exceptions.py

Urikit Exceptions hierarchy.
"""

from typing import Optional


class UrikitError(Exception):
    """Base exception for all Urikit errors."""


class ParseError(UrikitError, ValueError):
    """General exception for URI decomposition errors."""


class URISyntaxError(ParseError):
    """
    The input has no scheme delimiter.

    Raised only when no ``:`` appears anywhere in the input.
    """

    def __init__(
        self,
        message: str = "Missing scheme delimiter ':'",
        uri: Optional[str] = None,
    ):
        super().__init__(message)
        self.uri = uri


class InputTooLongError(ParseError):
    """Input exceeds the configured maximum length."""
