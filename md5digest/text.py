from __future__ import annotations

from typing import Iterator, List

from .errors import UnsupportedInputError

# Highest code point the encoder will emit. The 4-byte form could carry up to
# 0x1FFFFF, anything past the Unicode range is refused.
MAX_CODE_POINT = 0x10FFFF


def utf16_code_units(text: str) -> Iterator[int]:
    """Yield the UTF-16 code units of `text` (astral characters become surrogate pairs)."""
    for ch in text:
        x = ord(ch)
        if x > 0xFFFF:
            x -= 0x10000
            yield 0xD800 | ((x >> 10) & 0x3FF)
            yield 0xDC00 | (x & 0x3FF)
        else:
            yield x


def encode_code_point(x: int) -> bytes:
    if x < 0 or x > MAX_CODE_POINT:
        raise UnsupportedInputError(f"code point {x:#x} cannot be encoded")
    if x <= 0x7F:
        return bytes((x,))
    if x <= 0x7FF:
        return bytes((0xC0 | ((x >> 6) & 0x1F), 0x80 | (x & 0x3F)))
    if x <= 0xFFFF:
        return bytes((
            0xE0 | ((x >> 12) & 0x0F),
            0x80 | ((x >> 6) & 0x3F),
            0x80 | (x & 0x3F),
        ))
    return bytes((
        0xF0 | ((x >> 18) & 0x07),
        0x80 | ((x >> 12) & 0x3F),
        0x80 | ((x >> 6) & 0x3F),
        0x80 | (x & 0x3F),
    ))


def text_to_utf8(text: str) -> bytes:
    """
    UTF-8 encode `text` one code point at a time.

    The text is scanned as UTF-16 code units so that a lead/trail surrogate
    pair written as two separate characters is combined into one code point,
    while an unpaired surrogate is emitted as its own 3-byte sequence
    (str.encode("utf-8") would refuse it).
    """
    units: List[int] = list(utf16_code_units(text))
    out = bytearray()
    i = 0
    n = len(units)
    while i < n:
        x = units[i]
        y = units[i + 1] if i + 1 < n else 0
        if 0xD800 <= x <= 0xDBFF and 0xDC00 <= y <= 0xDFFF:
            x = 0x10000 + ((x & 0x03FF) << 10) + (y & 0x03FF)
            i += 1
        out += encode_code_point(x)
        i += 1
    return bytes(out)


def text_to_utf16le(text: str) -> bytes:
    out = bytearray()
    for u in utf16_code_units(text):
        out.append(u & 0xFF)
        out.append((u >> 8) & 0xFF)
    return bytes(out)


def text_to_utf16be(text: str) -> bytes:
    out = bytearray()
    for u in utf16_code_units(text):
        out.append((u >> 8) & 0xFF)
        out.append(u & 0xFF)
    return bytes(out)


TEXT_ENCODERS = {
    "utf-8": text_to_utf8,
    "utf-16le": text_to_utf16le,
    "utf-16be": text_to_utf16be,
}
