from __future__ import annotations

import math
from typing import List, Sequence, Tuple

from .words import MASK32

Registers = Tuple[int, int, int, int]


def u32(x: int) -> int:
    return x & MASK32


def rl(x: int, s: int) -> int:
    x &= MASK32
    return ((x << s) | (x >> (32 - s))) & MASK32


# Rotation constants (RC_t) per MD5 specification
_RC: List[int] = (
    [7, 12, 17, 22] * 4
    + [5, 9, 14, 20] * 4
    + [4, 11, 16, 23] * 4
    + [6, 10, 15, 21] * 4
)


def _mk_AC() -> List[int]:
    # AC_t = floor(2^32 * abs(sin(t+1)))
    return [int(abs(math.sin(i + 1)) * (1 << 32)) & MASK32 for i in range(64)]


_AC: List[int] = _mk_AC()


def FF(b: int, c: int, d: int) -> int:
    return (b & c) | (~b & d)


def GG(b: int, c: int, d: int) -> int:
    return (b & d) | (c & ~d)


def HH(b: int, c: int, d: int) -> int:
    return b ^ c ^ d


def II(b: int, c: int, d: int) -> int:
    return c ^ (b | ~d)


_ROUNDS = (FF, GG, HH, II)


def wt_index(t: int) -> int:
    if 0 <= t < 16:
        return t
    if 16 <= t < 32:
        return (5 * t + 1) % 16
    if 32 <= t < 48:
        return (3 * t + 5) % 16
    if 48 <= t < 64:
        return (7 * t) % 16
    raise ValueError("t out of range")


_W_INDEX: List[int] = [wt_index(t) for t in range(64)]


def compress_block(ihv: Registers, m: Sequence[int]) -> Registers:
    """
    Run the 64 MD5 steps over one 512-bit block.

    Inputs:
      - ihv: (a, b, c, d) chaining registers before the block
      - m: 16 little-endian 32-bit words
    Returns the registers after the block, each added mod 2^32 to its
    value before the block.
    """
    if len(m) != 16:
        raise ValueError("m must have 16 words")

    a, b, c, d = (u32(ihv[0]), u32(ihv[1]), u32(ihv[2]), u32(ihv[3]))
    olda, oldb, oldc, oldd = a, b, c, d

    for t in range(64):
        f = _ROUNDS[t >> 4](b, c, d)
        x = u32(a + f + m[_W_INDEX[t]] + _AC[t])
        # a <- d <- c <- b <- new
        a, d, c, b = d, c, b, u32(b + rl(x, _RC[t]))

    return (u32(a + olda), u32(b + oldb), u32(c + oldc), u32(d + oldd))


# MD5 initial value
MD5_IV: Registers = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)


def pad_words(words: Sequence[int], bit_len: int) -> List[int]:
    """
    Append the MD5 padding to a little-endian word sequence.

    A single 1 bit goes at position `bit_len`, the 64-bit length lands in the
    last two words of the final 512-bit block. Returns a new list whose length
    is a multiple of 16.
    """
    total = (((bit_len + 64) >> 9) << 4) + 16
    x = list(words) + [0] * (total - len(words))
    x[bit_len >> 5] = u32(x[bit_len >> 5] | (0x80 << (bit_len % 32)))
    x[total - 2] = bit_len & MASK32
    x[total - 1] = (bit_len >> 32) & MASK32
    return x


def compress(padded: Sequence[int], ihv: Registers = MD5_IV) -> Registers:
    if len(padded) % 16:
        raise ValueError("padded word count must be a multiple of 16")
    for off in range(0, len(padded), 16):
        ihv = compress_block(ihv, padded[off : off + 16])
    return ihv


def md5_words(words: Sequence[int], bit_len: int) -> Registers:
    return compress(pad_words(words, bit_len))
