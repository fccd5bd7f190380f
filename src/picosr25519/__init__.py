"""
sr25519 signatures with Substrate-style HD derivation: key pairs, public keys,
signatures and soft/hard derivation junctions. Curve math comes from
py-sr25519-bindings; this package is the typed, length-checked layer on top.
"""

from .__about__ import __version__
from .curves import (KeyPair, PublicKey, SchnorrkelBackend, Signature,
                     Sr25519Backend, get_default_backend, set_default_backend)
from .derive import (DEV_PHRASE, DeriveJunction, JunctionKind, decode_path,
                     encode_path, parse_path, parse_suri)
from .errors import (DerivationError, InvalidArgumentError,
                     KeyPairZeroizedError, Sr25519Error)
from .hashes import blake2_256
from .serde import scale_compact, scale_encode

__all__: tuple[str, ...] = (
    # About
    "__version__",
    # Hashes
    "blake2_256",
    # Serde
    "scale_compact",
    "scale_encode",
    # Errors
    "DerivationError",
    "InvalidArgumentError",
    "KeyPairZeroizedError",
    "Sr25519Error",
    # Curves: sr25519 (Substrate / Polkadot)
    "KeyPair",
    "PublicKey",
    "Signature",
    "SchnorrkelBackend",
    "Sr25519Backend",
    "get_default_backend",
    "set_default_backend",
    # Derivation
    "DEV_PHRASE",
    "DeriveJunction",
    "JunctionKind",
    "decode_path",
    "encode_path",
    "parse_path",
    "parse_suri",
)
