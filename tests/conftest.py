"""Shared fixtures: a hashlib-only stand-in for the sr25519 bindings."""

from __future__ import annotations

import hashlib

import pytest

from picosr25519 import InvalidArgumentError


def _h(*parts: bytes, size: int = 32) -> bytes:
    return hashlib.blake2b(b"".join(parts), digest_size=size).digest()


class MockBackend:
    """
    Insecure backend with the same shape as the real one.

    The public key is the first half of the secret, so soft public derivation
    can mirror soft secret derivation exactly. Every derivation call is
    recorded as (kind, chain_code, data).
    """

    def __init__(self, fail_derive: bool = False) -> None:
        self.calls: list[tuple[str, bytes, bytes]] = []
        self.fail_derive = fail_derive

    def pair_from_seed(self, seed: bytes) -> tuple[bytes, bytes]:
        secret = _h(b"expand", seed, size=64)
        return secret[:32], secret

    def public_from_secret(self, secret: bytes) -> bytes:
        return secret[:32]

    def sign(self, public: bytes, secret: bytes, message: bytes) -> bytes:
        return _h(secret[:32], message, size=64)

    def verify(self, signature: bytes, message: bytes, public: bytes) -> bool:
        return _h(public, message, size=64) == signature

    def derive_keypair(self, chain_code, public, secret, data, hard):
        self.calls.append(("hard" if hard else "soft", chain_code, data))
        if self.fail_derive:
            raise ValueError("mock derivation failure")
        next_cc = _h(b"cc", chain_code, data)
        if hard:
            child = _h(b"hard", chain_code, secret, data, size=64)
            return next_cc, child[:32], child
        child_public = _h(b"soft", chain_code, public, data)
        return next_cc, child_public, child_public + secret[32:]

    def derive_public(self, chain_code, public, data):
        self.calls.append(("public", chain_code, data))
        if self.fail_derive:
            raise ValueError("mock derivation failure")
        return _h(b"cc", chain_code, data), _h(b"soft", chain_code, public, data)

    def mini_secret_from_mnemonic(self, phrase: str, password: str) -> bytes:
        words = phrase.split(" ")
        if len(words) != 12 or not all(w.isalpha() and w.islower() for w in words):
            raise InvalidArgumentError("mnemonic", "an English BIP39 phrase")
        return _h(b"mnemonic", phrase.encode(), password.encode())


@pytest.fixture
def mock_backend() -> MockBackend:
    return MockBackend()


@pytest.fixture
def failing_backend() -> MockBackend:
    return MockBackend(fail_derive=True)
