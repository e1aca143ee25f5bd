"""
Shared exceptions for path-to-unicode-filename.

Exception Hierarchy:
    UnicodeFilenameError (base)
    ├── ByteDecodingError (path or filename bytes are not valid UTF-8)
    ├── PrefixGrammarError (platform marker without a well-known root form)
    └── IncompleteInputError (decoder stopped before the end of its input)
"""

from __future__ import annotations


class UnicodeFilenameError(Exception):
    """Base exception for all path-to-unicode-filename errors."""


class ByteDecodingError(UnicodeFilenameError):
    """Raised when OS-supplied path bytes cannot be decoded as UTF-8 text."""

    def __init__(self, raw: bytes) -> None:
        self.raw = raw
        super().__init__(f'Could not decode {raw!r} as UTF-8')


class PrefixGrammarError(UnicodeFilenameError):
    """
    Raised when a platform marker is not followed by a well-known root form.

    Marker icons are always escaped in plain text, so an unescaped marker at
    the start of a filename can only come from the prefix grammar.
    """

    def __init__(self, remainder: str, rule: str) -> None:
        self.remainder = remainder
        self.rule = rule
        super().__init__(f'Expected {rule} at {remainder!r}')


class IncompleteInputError(UnicodeFilenameError):
    """Raised when the decoder finishes without consuming all of its input."""

    def __init__(self, remainder: str, needed: int | None = None) -> None:
        self.remainder = remainder
        self.needed = needed
        detail = f'{needed} more characters needed' if needed is not None else 'unknown amount needed'
        super().__init__(f'Incomplete input at {remainder!r} ({detail})')
