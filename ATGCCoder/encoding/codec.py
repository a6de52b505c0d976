"""
Single-item conversion between bytes, bit-text and ATGC symbol strings.

Bit-text is a str of '0'/'1', eight characters per byte, most significant
bit first. Each 2-bit group maps to one symbol:

    00 -> A    01 -> T    10 -> G    11 -> C
"""

from typing import Union

from ATGCCoder.encoding.constants import (
    BITS_PER_BYTE,
    BITS_PER_SYMBOL,
    GROUP_TO_SYMBOL,
    MAX_INPUT_BYTES,
    SYMBOL_TO_GROUP,
    SYMBOLS_PER_BYTE,
)
from ATGCCoder.encoding.validation import validate_bit_string
from ATGCCoder.errors import (
    InputTooLargeError,
    MappingError,
    SymbolFormatError,
)

BytesLike = Union[bytes, bytearray, memoryview]


def map_group(group: str) -> str:
    """
    Maps one 2-bit group to its symbol.

    Args:
        group: One of "00", "01", "10", "11"

    Returns:
        The symbol for the group

    Raises:
        MappingError: group is not in the table
    """
    try:
        return GROUP_TO_SYMBOL[group]
    except (KeyError, TypeError):
        raise MappingError(group) from None


def encode_bit_string(text: str) -> str:
    """
    Encodes bit-text as a symbol string.

    Args:
        text: Non-empty bit-text whose length is a multiple of 8

    Returns:
        Symbol string, one symbol per 2-bit group in input order
    """
    validate_bit_string(text)
    return "".join(
        map_group(text[i:i + BITS_PER_SYMBOL])
        for i in range(0, len(text), BITS_PER_SYMBOL)
    )


def decode_symbol_string(symbols: str) -> str:
    """
    Decodes a symbol string to bit-text.

    No length check is made; callers rebuilding bytes must check that the
    result is a whole number of bytes.

    Args:
        symbols: String over {A, T, G, C}

    Returns:
        Bit-text, two characters per symbol
    """
    groups = []
    for position, symbol in enumerate(symbols):
        group = SYMBOL_TO_GROUP.get(symbol)
        if group is None:
            raise SymbolFormatError(
                f"Can not decode {symbol!r} at position {position}",
                symbol=symbol,
                position=position,
            )
        groups.append(group)
    return "".join(groups)


def bytes_to_bits(data: BytesLike) -> str:
    """Converts bytes to bit-text, MSB first, 8 characters per byte."""
    return "".join(format(byte, "08b") for byte in memoryview(data).tobytes())


def bits_to_bytes(text: str) -> bytes:
    """
    Converts bit-text back to bytes.

    Args:
        text: Bit-text whose length is a multiple of 8 (may be empty)

    Returns:
        One byte per 8-character chunk
    """
    if not text:
        return b""
    validate_bit_string(text)
    return bytes(
        int(text[i:i + BITS_PER_BYTE], 2)
        for i in range(0, len(text), BITS_PER_BYTE)
    )


def check_size(size: int, limit: int = MAX_INPUT_BYTES) -> None:
    if size > limit:
        raise InputTooLargeError(size, limit)


def encode(data: BytesLike, max_input_bytes: int = MAX_INPUT_BYTES) -> str:
    """
    Encodes bytes as a symbol string of exactly 4 symbols per byte.

    Args:
        data: Bytes-like object to encode
        max_input_bytes: Size limit for data, in bytes

    Returns:
        Symbol string ("" for empty input)

    Raises:
        TypeError: data does not support the buffer protocol
    """
    view = memoryview(data)
    check_size(view.nbytes, max_input_bytes)
    if not view.nbytes:
        return ""
    return encode_bit_string(bytes_to_bits(view))


def decode(symbols: str) -> bytes:
    """
    Decodes a symbol string back to bytes.

    Args:
        symbols: String over {A, T, G, C} with a length that is a multiple of 4

    Returns:
        Decoded bytes
    """
    bits = decode_symbol_string(symbols)
    if len(bits) % BITS_PER_BYTE:
        raise SymbolFormatError(
            f"Symbol string of length {len(symbols)} is not a multiple of "
            f"{SYMBOLS_PER_BYTE} and can not be a whole number of bytes"
        )
    return bits_to_bytes(bits)
