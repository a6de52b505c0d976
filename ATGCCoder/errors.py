"""
Exception types raised by ATGCCoder.

Every failure is a subclass of ATGCError and also of the closest builtin
exception, so callers can catch either.
"""

import io
from typing import Optional


class ATGCError(Exception):
    """Base class for all ATGCCoder errors."""


class BitStringFormatError(ATGCError, ValueError):
    """Bit-text is empty, not a multiple of 8 long, or not made of '0'/'1'."""


class SymbolFormatError(ATGCError, ValueError):
    """Symbol string contains a foreign character or is truncated."""

    def __init__(self, message: str, symbol: Optional[str] = None, position: Optional[int] = None):
        super().__init__(message)
        self.symbol = symbol
        self.position = position


class MappingError(ATGCError, ValueError):
    """A token fell outside the symbol table."""

    def __init__(self, token):
        super().__init__(f"Can not encode {token!r} to an ATGC symbol")
        self.token = token


class InputTooLargeError(ATGCError, OverflowError):
    """Input exceeds the configured size limit."""

    def __init__(self, size: int, limit: int):
        super().__init__(f"Input of {size} bytes exceeds the limit of {limit} bytes")
        self.size = size
        self.limit = limit


class UnsupportedStreamError(ATGCError, io.UnsupportedOperation):
    """Stream can not be read, seeked, or is not binary."""


class TextEncodingError(ATGCError, ValueError):
    """Conversion between text and bytes failed for the given encoding."""

    def __init__(self, message: str, encoding: str):
        super().__init__(message)
        self.encoding = encoding
