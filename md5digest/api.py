"""
Public MD5 / HMAC-MD5 hashing surface.

The digest operations (`hex`, `b64`, `any`) and the HMAC operations
(`hmac_hex`, `hmac_b64`, `hmac`) encode text with the configured text
encoding, hash it and render the raw digest. `full_hash`, `salt_hash` and
`hash` are the validated helpers used for challenge-response password
hashing; they refuse empty arguments before doing any work.

`MD5Hasher` binds the operations to one `HashConfig`. The module-level
functions do the same with `DEFAULT_CONFIG` unless a `config` is passed.
"""
from __future__ import annotations

from typing import Optional

from .config import DEFAULT_CONFIG, HashConfig
from .encoders import to_base64, to_hex, to_radix
from .errors import check_alphabet, require_text
from .hmac_md5 import hmac_md5_bytes
from .md5 import md5_bytes


class MD5Hasher:
    def __init__(self, config: HashConfig = DEFAULT_CONFIG) -> None:
        self.config = config

    def digest(self, text: str) -> bytes:
        return md5_bytes(self.config.encode_text(text))

    def hmac_digest(self, key: str, data: str) -> bytes:
        require_text("key", key)
        require_text("data", data)
        encode = self.config.encode_text
        return hmac_md5_bytes(encode(key), encode(data))

    def hex(self, text: str) -> str:
        return to_hex(self.digest(text), self.config.hex_uppercase)

    def b64(self, text: str) -> str:
        return to_base64(self.digest(text), self.config.b64_pad)

    def any(self, text: str, alphabet: str) -> str:
        check_alphabet(alphabet)
        return to_radix(self.digest(text), alphabet)

    def hmac_hex(self, key: str, data: str) -> str:
        return to_hex(self.hmac_digest(key, data), self.config.hex_uppercase)

    def hmac_b64(self, key: str, data: str) -> str:
        return to_base64(self.hmac_digest(key, data), self.config.b64_pad)

    def hmac(self, key: str, data: str, alphabet: str) -> str:
        check_alphabet(alphabet)
        return to_radix(self.hmac_digest(key, data), alphabet)

    def full_hash(self, plaintext: str, salt: str, challenge: str) -> str:
        """Challenge-response hash: hmac_hex(hmac_hex(plaintext, salt), challenge)."""
        require_text("plaintext", plaintext)
        require_text("salt", salt)
        require_text("challenge", challenge)
        return self.hmac_hex(self.hmac_hex(plaintext, salt), challenge)

    def salt_hash(self, plaintext: str, salt: str) -> str:
        require_text("plaintext", plaintext)
        require_text("salt", salt)
        return self.hmac_hex(plaintext, salt)

    def hash(self, plaintext: str) -> str:
        require_text("plaintext", plaintext)
        return self.hex(plaintext)


def _hasher(config: Optional[HashConfig]) -> MD5Hasher:
    return MD5Hasher(config if config is not None else DEFAULT_CONFIG)


def hex_md5(text: str, config: Optional[HashConfig] = None) -> str:
    return _hasher(config).hex(text)


def b64_md5(text: str, config: Optional[HashConfig] = None) -> str:
    return _hasher(config).b64(text)


def any_md5(text: str, alphabet: str, config: Optional[HashConfig] = None) -> str:
    return _hasher(config).any(text, alphabet)


def hex_hmac_md5(key: str, data: str, config: Optional[HashConfig] = None) -> str:
    return _hasher(config).hmac_hex(key, data)


def b64_hmac_md5(key: str, data: str, config: Optional[HashConfig] = None) -> str:
    return _hasher(config).hmac_b64(key, data)


def any_hmac_md5(key: str, data: str, alphabet: str, config: Optional[HashConfig] = None) -> str:
    return _hasher(config).hmac(key, data, alphabet)


def full_hash(plaintext: str, salt: str, challenge: str, config: Optional[HashConfig] = None) -> str:
    return _hasher(config).full_hash(plaintext, salt, challenge)


def salt_hash(plaintext: str, salt: str, config: Optional[HashConfig] = None) -> str:
    return _hasher(config).salt_hash(plaintext, salt)


def hash_text(plaintext: str, config: Optional[HashConfig] = None) -> str:
    return _hasher(config).hash(plaintext)
