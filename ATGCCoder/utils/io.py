"""
File I/O utilities for ATGCCoder.
"""

import os
from contextlib import contextmanager
from typing import BinaryIO, Union

FileSource = Union[str, os.PathLike, int, BinaryIO]


def read_bytes(filepath: str) -> bytes:
    """
    Reads a whole file as bytes.

    Args:
        filepath: Path to the file

    Returns:
        File contents
    """
    if not os.path.isfile(filepath):
        raise FileNotFoundError(f"Input file not found: {filepath}")

    with open(filepath, "rb") as f:
        return f.read()

def write_bytes(filepath: str, data: bytes) -> None:
    """Writes bytes, creating the parent directory if needed."""
    ensure_dir(os.path.dirname(os.fspath(filepath)) or ".")
    with open(filepath, "wb") as f:
        f.write(data)

def write_text(filepath: str, text: str, encoding: str = "ascii") -> None:
    """Writes text, creating the parent directory if needed."""
    ensure_dir(os.path.dirname(os.fspath(filepath)) or ".")
    with open(filepath, "w", encoding=encoding, newline="\n") as f:
        f.write(text)

def ensure_dir(path: str) -> str:
    """Ensures that a directory exists. Create it if it doesn't."""
    os.makedirs(path, exist_ok=True)
    return path

@contextmanager
def open_binary(file: FileSource):
    """
    Yields a readable binary stream for a path, file descriptor or open file.

    Streams opened here are closed on exit; descriptors and file objects
    passed in stay owned by the caller.
    """
    if isinstance(file, int):
        with open(file, "rb", closefd=False) as stream:
            yield stream
    elif hasattr(file, "read"):
        yield file
    else:
        with open(file, "rb") as stream:
            yield stream
