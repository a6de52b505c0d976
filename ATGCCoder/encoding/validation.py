"""
Bit-text validation run before any grouping or mapping.
"""

from ATGCCoder.encoding.constants import BITS_PER_BYTE
from ATGCCoder.errors import BitStringFormatError

_BIT_CHARS = frozenset("01")


def is_valid_bit_string(text) -> bool:
    """
    Checks that text is usable bit-text.

    Args:
        text: Candidate string

    Returns:
        True if text is a non-empty str of '0'/'1' whose length is a multiple of 8
    """
    if not isinstance(text, str):
        return False
    if not text or len(text) % BITS_PER_BYTE:
        return False
    return _BIT_CHARS.issuperset(text)


def validate_bit_string(text) -> str:
    """Returns text unchanged, or raises BitStringFormatError."""
    if not is_valid_bit_string(text):
        raise BitStringFormatError(
            "Bit string must be a non-empty sequence of '0'/'1' "
            f"with a length that is a multiple of {BITS_PER_BYTE}"
        )
    return text
