import pytest

from ATGCCoder.encoding.validation import is_valid_bit_string, validate_bit_string
from ATGCCoder.errors import BitStringFormatError


@pytest.mark.parametrize("text", ["00000000", "0110110011111111", "1" * 64])
def test_accepts_whole_bytes(text):
    assert is_valid_bit_string(text)
    assert validate_bit_string(text) == text


@pytest.mark.parametrize(
    "text",
    [
        "",
        "0",
        "01",
        "0000000",
        "000000000",
        "0000000a",
        "0000 000",
        "２２２２２２２２",
        None,
        b"00000000",
    ],
)
def test_rejects_malformed(text):
    assert not is_valid_bit_string(text)
    with pytest.raises(BitStringFormatError):
        validate_bit_string(text)


def test_format_error_is_value_error():
    with pytest.raises(ValueError):
        validate_bit_string("012")
