"""Hash functions: BLAKE2b-256."""

from .blake2 import blake2_256

__all__: tuple[str, ...] = ("blake2_256",)
