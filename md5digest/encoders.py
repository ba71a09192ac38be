from __future__ import annotations

import base64
import math
from typing import List

from .errors import InvalidConfigurationError, check_alphabet

B64_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"


def to_hex(raw: bytes, uppercase: bool = False) -> str:
    out = raw.hex()
    return out.upper() if uppercase else out


def check_pad(pad: str) -> str:
    if len(pad) > 1:
        raise InvalidConfigurationError("base64 pad must be empty or a single character")
    if pad and pad in B64_ALPHABET:
        raise InvalidConfigurationError(f"base64 pad {pad!r} collides with the alphabet")
    return pad


def to_base64(raw: bytes, pad: str = "") -> str:
    """Standard base64; trailing pad positions are filled with `pad` (empty drops them)."""
    check_pad(pad)
    out = base64.b64encode(raw).decode("ascii")
    body = out.rstrip("=")
    return body + pad * (len(out) - len(body))


def _to_limbs(raw: bytes) -> List[int]:
    # 16-bit big-endian limbs; an odd trailing byte is the high half of the last limb
    limbs = []
    for i in range(0, len(raw), 2):
        hi = raw[i]
        lo = raw[i + 1] if i + 1 < len(raw) else 0
        limbs.append((hi << 8) | lo)
    return limbs


def output_length(n_bytes: int, radix: int) -> int:
    return math.ceil(n_bytes * 8 / math.log2(radix))


def to_radix(raw: bytes, alphabet: str) -> str:
    """
    Render `raw` in the positional system whose digits are `alphabet`.

    The input is read as a big-endian integer held in 16-bit limbs and divided
    by len(alphabet) repeatedly, one remainder per pass. The number of passes
    is fixed by the input width, ceil(8 * len(raw) / log2(radix)), so the
    output keeps its leading zero digits and always has the same length for a
    given input size and alphabet.
    """
    check_alphabet(alphabet)
    divisor = len(alphabet)

    # dividend lives in buf[start:]; each pass overwrites it with the quotient
    buf = _to_limbs(raw)
    start = 0
    remainders: List[int] = []
    for _ in range(output_length(len(raw), divisor)):
        x = 0
        for i in range(start, len(buf)):
            x = (x << 16) + buf[i]
            q = x // divisor
            x -= q * divisor
            buf[i] = q
        while start < len(buf) and buf[start] == 0:
            start += 1
        remainders.append(x)

    return "".join(alphabet[r] for r in reversed(remainders))
