"""
Decoder interface: ATGC symbols back to bytes, strings and bit-text.
"""

from typing import BinaryIO, Optional, TextIO, Union

from ATGCCoder.config import CodecConfig
from ATGCCoder.encoding.codec import decode, decode_symbol_string
from ATGCCoder.errors import TextEncodingError
from ATGCCoder.utils.io import FileSource, open_binary
from ATGCCoder.utils.logging import get_logger


class Decoder:
    """
    Decodes symbol strings produced by Encoder.

    Usage:
        decoder = Decoder()
        decoder.decode("TGCA")           # b'l'
        decoder.decode_string("TGGATGGT")
    """

    def __init__(self, config: Optional[CodecConfig] = None):
        self.config = config or CodecConfig()
        self.logger = get_logger()

    def decode(self, symbols: str) -> bytes:
        """
        Decodes a symbol string.

        Args:
            symbols: String over {A, T, G, C}, 4 symbols per byte

        Returns:
            Decoded bytes
        """
        data = decode(symbols)
        self.logger.transform("decode", "symbols", len(symbols), len(data))
        return data

    def decode_to_bits(self, symbols: str) -> str:
        """Decodes a symbol string to bit-text, 2 bits per symbol."""
        return decode_symbol_string(symbols)

    def decode_string(self, symbols: str, encoding: Optional[str] = None) -> str:
        """
        Decodes a symbol string and converts the bytes to text.

        Args:
            symbols: Symbol string
            encoding: Text encoding (default: config.text_encoding)

        Returns:
            Decoded text
        """
        encoding = encoding or self.config.text_encoding
        data = self.decode(symbols)
        try:
            return data.decode(encoding)
        except (UnicodeError, LookupError) as exc:
            raise TextEncodingError(
                f"Can not convert bytes to text with encoding {encoding!r}: {exc}",
                encoding=encoding,
            ) from exc

    def decode_stream(self, stream: Union[TextIO, BinaryIO]) -> bytes:
        """
        Decodes the symbols read from a text or binary stream.

        Trailing line endings are ignored.
        """
        content = stream.read()
        if isinstance(content, (bytes, bytearray)):
            # One character per byte so format errors report byte offsets.
            content = bytes(content).decode("latin-1")
        return self.decode(content.rstrip("\r\n"))

    def decode_file(self, file: FileSource) -> bytes:
        """
        Decodes a symbol file.

        Args:
            file: Path, file descriptor, or open file object

        Returns:
            Decoded bytes
        """
        with open_binary(file) as stream:
            return self.decode_stream(stream)
