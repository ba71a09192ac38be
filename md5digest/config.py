from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Callable

from .encoders import check_pad
from .errors import InvalidConfigurationError
from .text import TEXT_ENCODERS

ENV_HEXCASE = "MD5DIGEST_HEXCASE"
ENV_B64PAD = "MD5DIGEST_B64PAD"
ENV_ENCODING = "MD5DIGEST_ENCODING"


@dataclass(frozen=True)
class HashConfig:
    """Output formatting for the public hashing API, passed explicitly per call."""

    hex_uppercase: bool = False
    b64_pad: str = ""
    text_encoding: str = "utf-8"

    def __post_init__(self) -> None:
        check_pad(self.b64_pad)
        if self.text_encoding not in TEXT_ENCODERS:
            raise InvalidConfigurationError(
                f"unknown text encoding {self.text_encoding!r} (choose from {', '.join(TEXT_ENCODERS)})"
            )

    @property
    def encode_text(self) -> Callable[[str], bytes]:
        return TEXT_ENCODERS[self.text_encoding]

    def with_overrides(self, **changes) -> "HashConfig":
        return replace(self, **changes)

    @classmethod
    def from_env(cls) -> "HashConfig":
        hexcase = os.getenv(ENV_HEXCASE, "lower").strip().lower()
        if hexcase not in ("lower", "upper"):
            raise InvalidConfigurationError(f"{ENV_HEXCASE} must be 'lower' or 'upper', got {hexcase!r}")
        return cls(
            hex_uppercase=hexcase == "upper",
            b64_pad=os.getenv(ENV_B64PAD, ""),
            text_encoding=os.getenv(ENV_ENCODING, "utf-8").strip().lower(),
        )


DEFAULT_CONFIG = HashConfig()
