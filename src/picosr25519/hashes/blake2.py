"""
BLAKE2b-256, the hash Substrate uses to compress long derivation indices.
Thin wrapper over stdlib hashlib.blake2b.
"""

from __future__ import annotations

import hashlib


def blake2_256(data: bytes) -> bytes:
    """
    BLAKE2b with a 32-byte digest and no key.

    Args:
        data: Input bytes (any length).

    Returns:
        32-byte digest.
    """
    return hashlib.blake2b(data, digest_size=32).digest()


__all__: tuple[str, ...] = ("blake2_256",)
