from __future__ import annotations

from typing import List, Sequence

import numpy as np

MASK32 = 0xFFFFFFFF

# little-endian unsigned 32-bit, independent of host byte order
_WORD_LE = np.dtype("<u4")


def bytes_to_words_le(data: bytes) -> List[int]:
    """
    Pack a byte string into 32-bit words, least-significant byte first.

    A trailing group of fewer than 4 bytes is zero-filled in its high bytes,
    so the result always has ceil(len(data) / 4) words.
    """
    tail = len(data) % 4
    if tail:
        data = bytes(data) + b"\x00" * (4 - tail)
    return np.frombuffer(data, dtype=_WORD_LE).tolist()


def words_to_bytes_le(words: Sequence[int]) -> bytes:
    arr = np.fromiter((w & MASK32 for w in words), dtype=np.uint32, count=len(words))
    return arr.astype(_WORD_LE, copy=False).tobytes()
