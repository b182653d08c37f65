"""Exception classes for Marklet.

Tokenizing never raises: malformed markdown degrades to a lower-precedence
interpretation instead. These exceptions cover the surrounding API, such as
rebuilding tokens from serialized data.
"""

from __future__ import annotations


class MarkletError(Exception):
    """Base exception for all Marklet errors.

    Subclass this for specific error categories.
    """


class SerializationError(MarkletError, ValueError):
    """Serialized token data has the wrong shape.

    Raised when a dict is missing its discriminant, names an unknown token
    kind, or carries fields the token does not accept.
    """

    def __init__(self, message: str, path: str | None = None) -> None:
        """Initialize serialization error with an optional location.

        Args:
            message: Error description
            path: Dotted path of the offending value (e.g. ``"[0].content[2]"``)
        """
        self.message = message
        self.path = path

        if path:
            super().__init__(f"{path}: {message}")
        else:
            super().__init__(message)


__all__ = [
    "MarkletError",
    "SerializationError",
]
