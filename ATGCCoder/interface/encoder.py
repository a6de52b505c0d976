"""
Encoder interface: bytes, strings, streams and files to ATGC symbols.
"""

import io
from typing import BinaryIO, Optional

from ATGCCoder.config import CodecConfig
from ATGCCoder.encoding.codec import BytesLike, check_size, encode
from ATGCCoder.encoding.constants import SYMBOLS_PER_BYTE
from ATGCCoder.errors import TextEncodingError, UnsupportedStreamError
from ATGCCoder.utils.io import FileSource, open_binary
from ATGCCoder.utils.logging import get_logger


class Encoder:
    """
    Encodes data from various sources into a symbol string.

    Usage:
        encoder = Encoder()
        encoder.encode(b"\\x6c")          # 'TGCA'
        encoder.encode_string("hi")
        encoder.encode_file("data.bin")
    """

    def __init__(self, config: Optional[CodecConfig] = None):
        self.config = config or CodecConfig()
        self.logger = get_logger()

    def encode(self, data: BytesLike) -> str:
        """
        Encodes bytes.

        Args:
            data: Bytes to encode

        Returns:
            Symbol string, 4 symbols per byte
        """
        symbols = encode(data, max_input_bytes=self.config.max_input_bytes)
        self.logger.transform("encode", "bytes", len(symbols) // SYMBOLS_PER_BYTE, len(symbols))
        return symbols

    def encode_string(self, value: str, encoding: Optional[str] = None) -> str:
        """
        Encodes text after converting it to bytes.

        Args:
            value: Text to encode
            encoding: Text encoding (default: config.text_encoding)

        Returns:
            Symbol string
        """
        encoding = encoding or self.config.text_encoding
        try:
            data = value.encode(encoding)
        except (UnicodeError, LookupError) as exc:
            raise TextEncodingError(
                f"Can not convert text to bytes with encoding {encoding!r}: {exc}",
                encoding=encoding,
            ) from exc
        return self.encode(data)

    def encode_stream(self, stream: BinaryIO) -> str:
        """
        Encodes the whole content of a binary stream.

        The stream is read from its start whatever its current position,
        and the position is restored afterwards.

        Args:
            stream: Readable and seekable binary stream

        Returns:
            Symbol string

        Raises:
            UnsupportedStreamError: stream is text, not readable or not seekable;
                nothing is read in that case
        """
        if isinstance(stream, io.TextIOBase):
            raise UnsupportedStreamError("Stream is a text stream; open it in binary mode.")
        if not (stream.readable() and stream.seekable()):
            raise UnsupportedStreamError("Stream can not read or seek.")

        position = stream.tell()
        try:
            size = stream.seek(0, io.SEEK_END)
            check_size(size, self.config.max_input_bytes)
            stream.seek(0)
            data = stream.read()
        finally:
            stream.seek(position)

        if not isinstance(data, (bytes, bytearray)):
            raise UnsupportedStreamError(f"Stream returned {type(data).__name__}, expected bytes.")
        return self.encode(data)

    def encode_file(self, file: FileSource) -> str:
        """
        Encodes a file.

        Args:
            file: Path, file descriptor, or open binary file object

        Returns:
            Symbol string
        """
        with open_binary(file) as stream:
            return self.encode_stream(stream)
