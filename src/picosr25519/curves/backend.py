"""
sr25519 primitive backend: the narrow capability surface the key types use.

The default implementation wraps py-sr25519-bindings (schnorrkel) and
py-bip39-bindings. Anything with the same methods can be plugged in, e.g. a
mock in tests.
"""

from __future__ import annotations

import logging
from typing import Protocol

import bip39
import sr25519

from ..errors import InvalidArgumentError

logger = logging.getLogger(__name__)


class Sr25519Backend(Protocol):
    """Capabilities of an sr25519 primitive library. All values are raw bytes."""

    def pair_from_seed(self, seed: bytes) -> tuple[bytes, bytes]:
        """32-byte mini secret -> (32-byte public, 64-byte secret)."""
        ...

    def public_from_secret(self, secret: bytes) -> bytes:
        """64-byte secret -> 32-byte public."""
        ...

    def sign(self, public: bytes, secret: bytes, message: bytes) -> bytes:
        """64-byte signature of message."""
        ...

    def verify(self, signature: bytes, message: bytes, public: bytes) -> bool:
        ...

    def derive_keypair(
        self, chain_code: bytes, public: bytes, secret: bytes, data: bytes, hard: bool
    ) -> tuple[bytes, bytes, bytes]:
        """One secret derivation step -> (chain code, public, secret)."""
        ...

    def derive_public(
        self, chain_code: bytes, public: bytes, data: bytes
    ) -> tuple[bytes, bytes]:
        """One soft public derivation step -> (chain code, public)."""
        ...

    def mini_secret_from_mnemonic(self, phrase: str, password: str) -> bytes:
        """English BIP39 phrase + password -> 32-byte mini secret."""
        ...


class SchnorrkelBackend:
    """Backend over the ``sr25519`` and ``bip39`` native bindings."""

    def pair_from_seed(self, seed: bytes) -> tuple[bytes, bytes]:
        public, secret = sr25519.pair_from_seed(seed)
        return bytes(public), bytes(secret)

    def public_from_secret(self, secret: bytes) -> bytes:
        return bytes(sr25519.public_from_secret_key(secret))

    def sign(self, public: bytes, secret: bytes, message: bytes) -> bytes:
        return bytes(sr25519.sign((public, secret), message))

    def verify(self, signature: bytes, message: bytes, public: bytes) -> bool:
        try:
            return bool(sr25519.verify(signature, message, public))
        except (TypeError, ValueError):
            return False

    def derive_keypair(
        self, chain_code: bytes, public: bytes, secret: bytes, data: bytes, hard: bool
    ) -> tuple[bytes, bytes, bytes]:
        step = sr25519.hard_derive_keypair if hard else sr25519.derive_keypair
        cc, child_public, child_secret = step((chain_code, public, secret), data)
        return bytes(cc), bytes(child_public), bytes(child_secret)

    def derive_public(
        self, chain_code: bytes, public: bytes, data: bytes
    ) -> tuple[bytes, bytes]:
        cc, child_public = sr25519.derive_pubkey((chain_code, public), data)
        return bytes(cc), bytes(child_public)

    def mini_secret_from_mnemonic(self, phrase: str, password: str) -> bytes:
        if not bip39.bip39_validate(phrase):
            raise InvalidArgumentError("mnemonic", "an English BIP39 phrase")
        try:
            return bytes(bip39.bip39_to_mini_secret(phrase, password))
        except ValueError:
            raise InvalidArgumentError(
                "mnemonic", "an English BIP39 phrase"
            ) from None


_default_backend: Sr25519Backend | None = None


def get_default_backend() -> Sr25519Backend:
    """Process-wide backend used when none is passed explicitly."""
    global _default_backend
    if _default_backend is None:
        _default_backend = SchnorrkelBackend()
    return _default_backend


def set_default_backend(backend: Sr25519Backend | None) -> None:
    """Replace the process-wide backend; ``None`` restores the schnorrkel one."""
    global _default_backend
    logger.debug("sr25519 default backend set to %s", type(backend).__name__)
    _default_backend = backend


__all__: tuple[str, ...] = (
    "SchnorrkelBackend",
    "Sr25519Backend",
    "get_default_backend",
    "set_default_backend",
)
