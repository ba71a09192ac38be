from __future__ import annotations

from .core import MD5_IV, Registers, compress, pad_words
from .words import bytes_to_words_le, words_to_bytes_le

SELF_TEST_VECTOR = (b"abc", "900150983cd24fb0d6963f7d28e17f72")


def md5_bytes(data: bytes, iv: Registers = MD5_IV) -> bytes:
    ihv = compress(pad_words(bytes_to_words_le(data), len(data) * 8), iv)
    # digest is little-endian of ihv words in order (a, b, c, d)
    return words_to_bytes_le(ihv)


def md5_hex(data: bytes, iv: Registers = MD5_IV) -> str:
    return md5_bytes(data, iv).hex()


def self_test() -> bool:
    msg, expected = SELF_TEST_VECTOR
    return md5_hex(msg) == expected
