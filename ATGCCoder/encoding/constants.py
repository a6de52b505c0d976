import sys

BITS_PER_BYTE = 8
BITS_PER_SYMBOL = 2
SYMBOLS_PER_BYTE = BITS_PER_BYTE // BITS_PER_SYMBOL

# Indexed by the integer value of a 2-bit group.
SYMBOLS = ("A", "T", "G", "C")

GROUP_TO_SYMBOL = {
    format(i, "02b"): symbol for i, symbol in enumerate(SYMBOLS)
}
SYMBOL_TO_GROUP = {v: k for k, v in GROUP_TO_SYMBOL.items()}
SYMBOL_TO_INDEX = {symbol: i for i, symbol in enumerate(SYMBOLS)}

PAD_INDEX = -1

MAX_INPUT_BYTES = sys.maxsize // SYMBOLS_PER_BYTE
