"""Elliptic-curve signatures: sr25519 (Substrate / Polkadot)."""

from .backend import (SchnorrkelBackend, Sr25519Backend, get_default_backend,
                      set_default_backend)
from .sr25519 import (PUBLIC_KEY_LENGTH, SECRET_KEY_LENGTH, SEED_LENGTH,
                      SIGNATURE_LENGTH, KeyPair, PublicKey, Signature)

__all__: tuple[str, ...] = (
    "KeyPair",
    "PUBLIC_KEY_LENGTH",
    "PublicKey",
    "SECRET_KEY_LENGTH",
    "SEED_LENGTH",
    "SIGNATURE_LENGTH",
    "SchnorrkelBackend",
    "Signature",
    "Sr25519Backend",
    "get_default_backend",
    "set_default_backend",
)
