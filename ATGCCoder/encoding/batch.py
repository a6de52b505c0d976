"""
Vectorized conversion between byte payloads and symbol index tensors.

A symbol index is the integer value of a 2-bit group (A=0, T=1, G=2, C=3).
Batches are right-padded with PAD_INDEX.
"""

import torch
import numpy as np
from typing import List, Optional, Sequence, Union

from ATGCCoder.encoding.constants import (
    PAD_INDEX,
    SYMBOL_TO_INDEX,
    SYMBOLS,
    SYMBOLS_PER_BYTE,
)
from ATGCCoder.errors import SymbolFormatError
from ATGCCoder.utils.device import get_device

ArrayLike = Union[torch.Tensor, np.ndarray, Sequence[int]]

_SHIFTS = np.array([6, 4, 2, 0], dtype=np.uint8)
_SYMBOL_ARRAY = np.array(SYMBOLS)


def _as_index_array(indices: ArrayLike) -> np.ndarray:
    if isinstance(indices, torch.Tensor):
        indices = indices.detach().cpu().numpy()
    arr = np.asarray(indices)
    if not arr.size:
        return arr.astype(np.int64)
    if not np.issubdtype(arr.dtype, np.integer):
        raise SymbolFormatError(f"Symbol indices must be integers, got {arr.dtype}")
    return arr


def _check_range(arr: np.ndarray) -> None:
    if arr.size and (arr.min() < 0 or arr.max() >= len(SYMBOLS)):
        position = int(np.flatnonzero((arr < 0) | (arr >= len(SYMBOLS)))[0])
        raise SymbolFormatError(
            f"Symbol index {int(arr[position])} at position {position} is out of range",
            position=position,
        )


def bytes_to_indices(data: bytes) -> np.ndarray:
    """
    Converts bytes to symbol indices, 4 per byte, most significant group first.

    Args:
        data: Bytes to convert

    Returns:
        uint8 array of shape (4 * len(data),)
    """
    arr = np.frombuffer(memoryview(data).tobytes(), dtype=np.uint8)
    return ((arr[:, None] >> _SHIFTS) & 0b11).reshape(-1)


def indices_to_bytes(indices: ArrayLike) -> bytes:
    """
    Converts symbol indices back to bytes.

    Args:
        indices: 1-D tensor, array, or list of values in 0..3

    Returns:
        Decoded bytes
    """
    arr = _as_index_array(indices)
    if arr.ndim != 1:
        raise SymbolFormatError(f"Expected a 1-D index sequence, got shape {arr.shape}")
    if arr.size % SYMBOLS_PER_BYTE:
        raise SymbolFormatError(
            f"{arr.size} symbol indices are not a multiple of {SYMBOLS_PER_BYTE}"
        )
    _check_range(arr)
    groups = arr.astype(np.uint8).reshape(-1, SYMBOLS_PER_BYTE)
    return np.bitwise_or.reduce(groups << _SHIFTS, axis=1).astype(np.uint8).tobytes()


def indices_to_symbols(indices: ArrayLike) -> str:
    """Converts symbol indices to a symbol string."""
    arr = _as_index_array(indices).reshape(-1)
    _check_range(arr)
    return "".join(_SYMBOL_ARRAY[arr].tolist())


def symbols_to_indices(symbols: str) -> np.ndarray:
    """Converts a symbol string to a uint8 index array."""
    indices = []
    for position, symbol in enumerate(symbols):
        index = SYMBOL_TO_INDEX.get(symbol)
        if index is None:
            raise SymbolFormatError(
                f"Can not decode {symbol!r} at position {position}",
                symbol=symbol,
                position=position,
            )
        indices.append(index)
    return np.array(indices, dtype=np.uint8)


def encode_batch(
    payloads: List[bytes],
    device: Optional[torch.device] = None
) -> torch.Tensor:
    """
    Converts a batch of payloads to a padded index tensor.

    Args:
        payloads: List of byte payloads
        device: Target device for tensor (default: auto-detect)

    Returns:
        Long tensor of shape (batch_size, 4 * longest payload), padded with PAD_INDEX
    """
    if device is None:
        device = get_device()

    rows = [bytes_to_indices(payload) for payload in payloads]
    width = max((len(row) for row in rows), default=0)
    batch = np.full((len(rows), width), PAD_INDEX, dtype=np.int64)
    for i, row in enumerate(rows):
        batch[i, :len(row)] = row
    return torch.from_numpy(batch).to(device)


def decode_batch(indices_batch: ArrayLike) -> List[bytes]:
    """
    Converts a padded index tensor back to payloads.

    Args:
        indices_batch: Tensor or array of shape (batch_size, length)

    Returns:
        List of decoded payloads
    """
    arr = _as_index_array(indices_batch)
    if arr.ndim != 2:
        raise SymbolFormatError(f"Expected a 2-D index batch, got shape {arr.shape}")

    payloads = []
    for row in arr:
        length = int(np.count_nonzero(row != PAD_INDEX))
        if np.any(row[:length] == PAD_INDEX):
            raise SymbolFormatError("Padding found before the end of a row")
        payloads.append(indices_to_bytes(row[:length]))
    return payloads
