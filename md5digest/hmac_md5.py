"""
HMAC-MD5 (RFC 2104) over little-endian word sequences.

The key is packed into words, replaced by its own digest when it is longer
than one 64-byte block, and zero-extended to 16 words. The inner and outer
hashes are then computed with the block-sized pads prepended, so the bit
lengths passed to the padding include the extra 512 bits.
"""
from __future__ import annotations

from typing import List

from .core import md5_words
from .words import bytes_to_words_le, words_to_bytes_le

BLOCK_WORDS = 16
IPAD = 0x36363636
OPAD = 0x5C5C5C5C


def normalize_key(key: bytes) -> List[int]:
    bkey = bytes_to_words_le(key)
    if len(bkey) > BLOCK_WORDS:
        bkey = list(md5_words(bkey, len(key) * 8))
    return bkey + [0] * (BLOCK_WORDS - len(bkey))


def hmac_md5_bytes(key: bytes, data: bytes) -> bytes:
    bkey = normalize_key(key)
    ipad = [w ^ IPAD for w in bkey]
    opad = [w ^ OPAD for w in bkey]

    inner = md5_words(ipad + bytes_to_words_le(data), 512 + len(data) * 8)
    outer = md5_words(opad + list(inner), 512 + 128)
    return words_to_bytes_le(outer)
