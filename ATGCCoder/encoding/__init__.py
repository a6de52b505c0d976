"""
Symbol encoding and decoding for ATGCCoder.

Handles conversion between bytes, bit-text and ATGC symbol strings.
"""

from ATGCCoder.encoding.codec import (
    map_group,
    encode_bit_string,
    decode_symbol_string,
    bytes_to_bits,
    bits_to_bytes,
    encode,
    decode,
)
from ATGCCoder.encoding.validation import is_valid_bit_string, validate_bit_string
from ATGCCoder.encoding.batch import (
    bytes_to_indices,
    indices_to_bytes,
    indices_to_symbols,
    symbols_to_indices,
    encode_batch,
    decode_batch,
)
from ATGCCoder.encoding.constants import (
    SYMBOLS,
    GROUP_TO_SYMBOL,
    SYMBOL_TO_GROUP,
    SYMBOLS_PER_BYTE,
    PAD_INDEX,
    MAX_INPUT_BYTES,
)

__all__ = [
    "map_group",
    "encode_bit_string",
    "decode_symbol_string",
    "bytes_to_bits",
    "bits_to_bytes",
    "encode",
    "decode",
    "is_valid_bit_string",
    "validate_bit_string",
    "bytes_to_indices",
    "indices_to_bytes",
    "indices_to_symbols",
    "symbols_to_indices",
    "encode_batch",
    "decode_batch",
    "SYMBOLS",
    "GROUP_TO_SYMBOL",
    "SYMBOL_TO_GROUP",
    "SYMBOLS_PER_BYTE",
    "PAD_INDEX",
    "MAX_INPUT_BYTES",
]
