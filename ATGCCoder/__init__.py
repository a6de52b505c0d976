"""
ATGCCoder - Binary to ATGC Symbol Codec

Encodes bytes, strings, streams and files as text over the four-symbol
alphabet {A, T, G, C} (two bits per symbol) and decodes them back.
"""

from ATGCCoder.version import __version__

from ATGCCoder.interface.encoder import Encoder
from ATGCCoder.interface.decoder import Decoder

from ATGCCoder.config import CodecConfig
from ATGCCoder.encoding.codec import encode, decode
from ATGCCoder.errors import (
    ATGCError,
    BitStringFormatError,
    SymbolFormatError,
    MappingError,
    InputTooLargeError,
    UnsupportedStreamError,
    TextEncodingError,
)

from ATGCCoder import encoding
from ATGCCoder import utils

__all__ = [
    "__version__",
    "Encoder",
    "Decoder",
    "CodecConfig",
    "encode",
    "decode",
    "ATGCError",
    "BitStringFormatError",
    "SymbolFormatError",
    "MappingError",
    "InputTooLargeError",
    "UnsupportedStreamError",
    "TextEncodingError",
    "encoding",
    "utils",
]
