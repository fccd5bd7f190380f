"""Error types raised by picosr25519."""

from __future__ import annotations

from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]


class Sr25519Error(Exception):
    """Base exception for all picosr25519 errors."""


class InvalidArgumentError(Sr25519Error, ValueError):
    """Raised when an argument has the wrong length or cannot be parsed."""

    def __init__(self, alg: str, expected: str) -> None:
        super().__init__(f"invalid argument for {alg}: expected {expected}")
        self.alg = alg
        self.expected = expected


class DerivationError(Sr25519Error):
    """Raised when the backend fails while deriving a child key."""


class KeyPairZeroizedError(Sr25519Error):
    """Raised when a key pair is used after its secret was wiped."""


def expect_bytes(
    data: BytesLike, lengths: tuple[int, ...], alg: str, expected: str
) -> bytes:
    """
    Copy a bytes-like value and check its length.

    Args:
        data: bytes, bytearray or memoryview.
        lengths: Accepted lengths.
        alg: Operation name reported in the error.
        expected: Human readable description reported in the error.

    Returns:
        The value as immutable bytes.

    Raises:
        TypeError: data is not bytes-like (``str`` included).
        InvalidArgumentError: data has a length not in ``lengths``.
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"{alg}: expected bytes-like, got {type(data).__name__}")
    out = bytes(data)
    if len(out) not in lengths:
        raise InvalidArgumentError(alg, expected)
    return out


__all__: tuple[str, ...] = (
    "BytesLike",
    "DerivationError",
    "InvalidArgumentError",
    "KeyPairZeroizedError",
    "Sr25519Error",
    "expect_bytes",
)
