import array

import pytest

from ATGCCoder.encoding.codec import (
    bits_to_bytes,
    bytes_to_bits,
    decode,
    decode_symbol_string,
    encode,
    encode_bit_string,
    map_group,
)
from ATGCCoder.encoding.constants import GROUP_TO_SYMBOL, SYMBOL_TO_GROUP, SYMBOLS
from ATGCCoder.errors import (
    ATGCError,
    BitStringFormatError,
    InputTooLargeError,
    MappingError,
    SymbolFormatError,
)


class TestTable:
    def test_bijection(self):
        groups = ["00", "01", "10", "11"]
        symbols = [map_group(g) for g in groups]
        assert symbols == ["A", "T", "G", "C"]
        assert len(set(symbols)) == 4
        for group, symbol in zip(groups, symbols):
            assert SYMBOL_TO_GROUP[symbol] == group
            assert decode_symbol_string(symbol) == group

    def test_table_indexed_by_group_value(self):
        for value, symbol in enumerate(SYMBOLS):
            assert GROUP_TO_SYMBOL[format(value, "02b")] == symbol

    @pytest.mark.parametrize("token", ["0", "000", "2", "ab", "", None])
    def test_map_group_rejects_foreign_token(self, token):
        with pytest.raises(MappingError) as excinfo:
            map_group(token)
        assert excinfo.value.token == token


class TestBitString:
    def test_encode_bit_string(self):
        assert encode_bit_string("01101100") == "TGCA"
        assert encode_bit_string("0000000011111111") == "AAAACCCC"

    @pytest.mark.parametrize("text", ["", "0110110", "011011001", "0110110x"])
    def test_encode_bit_string_rejects_malformed(self, text):
        with pytest.raises(BitStringFormatError):
            encode_bit_string(text)

    def test_bytes_to_bits_is_msb_first_and_padded(self):
        assert bytes_to_bits(b"\x01\x80") == "0000000110000000"
        assert bytes_to_bits(b"") == ""

    def test_bits_to_bytes(self):
        assert bits_to_bytes("0000000110000000") == b"\x01\x80"
        assert bits_to_bytes("") == b""

    @pytest.mark.parametrize("text", ["0", "000000001", "0000000x"])
    def test_bits_to_bytes_rejects_malformed(self, text):
        with pytest.raises(BitStringFormatError):
            bits_to_bytes(text)


class TestEncode:
    @pytest.mark.parametrize(
        "data, expected",
        [
            (b"\x00", "AAAA"),
            (b"\xff", "CCCC"),
            (bytes([0b01101100]), "TGCA"),
            (b"hi", "TGGATGGT"),
            (b"", ""),
        ],
    )
    def test_known_values(self, data, expected):
        assert encode(data) == expected

    def test_length_law(self, payload):
        assert len(encode(payload)) == 4 * len(payload)

    def test_accepts_bytes_like(self):
        assert encode(bytearray(b"\xff")) == "CCCC"
        assert encode(memoryview(b"\x00")) == "AAAA"

    def test_deterministic(self, random_payload):
        assert encode(random_payload) == encode(random_payload)

    def test_size_limit(self):
        with pytest.raises(InputTooLargeError) as excinfo:
            encode(b"12345", max_input_bytes=4)
        assert excinfo.value.size == 5
        assert excinfo.value.limit == 4
        assert isinstance(excinfo.value, OverflowError)
        assert encode(b"1234", max_input_bytes=4)


class TestDecode:
    def test_round_trip(self, payload):
        assert decode(encode(payload)) == payload

    def test_round_trip_random(self, random_payload):
        assert decode(encode(random_payload)) == random_payload

    def test_empty(self):
        assert decode("") == b""
        assert decode_symbol_string("") == ""

    def test_decode_symbol_string(self):
        assert decode_symbol_string("TGCA") == "01101100"
        assert decode_symbol_string("T") == "01"

    @pytest.mark.parametrize(
        "symbols, bad, position",
        [("ATGX", "X", 3), ("atgc", "a", 0), ("AT GC", " ", 2), ("AAAA\n", "\n", 4)],
    )
    def test_foreign_symbol(self, symbols, bad, position):
        with pytest.raises(SymbolFormatError) as excinfo:
            decode(symbols)
        assert excinfo.value.symbol == bad
        assert excinfo.value.position == position

    @pytest.mark.parametrize("symbols", ["A", "ATG", "AAAAA"])
    def test_truncated(self, symbols):
        with pytest.raises(SymbolFormatError):
            decode(symbols)

    def test_errors_are_structured_not_text(self):
        with pytest.raises(ATGCError):
            decode("ATGX")


class TestEncodeInputType:
    @pytest.mark.parametrize("data", [3, 10**12, "AAAA", None, [0, 1]])
    def test_rejects_non_bytes_like(self, data):
        with pytest.raises(TypeError):
            encode(data)

    def test_size_limit_counts_bytes_not_items(self):
        wide = array.array("H", [1, 2, 3])
        assert len(encode(wide)) == 4 * wide.itemsize * len(wide)
        with pytest.raises(InputTooLargeError) as excinfo:
            encode(wide, max_input_bytes=4)
        assert excinfo.value.size == 6
