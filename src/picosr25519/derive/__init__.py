"""HD derivation: junctions, derivation walk, secret URI parsing."""

from .junction import (JUNCTION_ID_LEN, DeriveJunction, JunctionKind,
                       decode_path, encode_path)
from .path import (DEV_PHRASE, derive_public, derive_secret, parse_path,
                   parse_suri)

__all__: tuple[str, ...] = (
    "DEV_PHRASE",
    "DeriveJunction",
    "JUNCTION_ID_LEN",
    "JunctionKind",
    "decode_path",
    "derive_public",
    "derive_secret",
    "encode_path",
    "parse_path",
    "parse_suri",
)
