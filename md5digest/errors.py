from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    INVALID_ARGUMENT = "invalid-argument"
    INVALID_CONFIGURATION = "invalid-configuration"
    UNSUPPORTED_INPUT = "unsupported-input"


class MD5DigestError(ValueError):
    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidArgumentError(MD5DigestError):
    kind = ErrorKind.INVALID_ARGUMENT


class InvalidConfigurationError(MD5DigestError):
    kind = ErrorKind.INVALID_CONFIGURATION


class UnsupportedInputError(MD5DigestError):
    kind = ErrorKind.UNSUPPORTED_INPUT


def require_text(name: str, value: Optional[str]) -> str:
    if value is None or len(value) == 0:
        raise InvalidArgumentError(f"{name} required")
    return value


def check_alphabet(alphabet: Optional[str]) -> str:
    """
    Validate a custom-radix alphabet.

    Radix 0 is a division by zero and radix 1 has log2(1) == 0 in the output
    length formula, so both are rejected. Duplicate symbols would make the
    encoding ambiguous.
    """
    if not alphabet:
        raise InvalidConfigurationError("alphabet must not be empty")
    if len(alphabet) < 2:
        raise InvalidConfigurationError("alphabet needs at least 2 symbols")
    if len(set(alphabet)) != len(alphabet):
        raise InvalidConfigurationError("alphabet symbols must be unique")
    return alphabet
