"""Serialization / deserialization (serde): SCALE encoding."""

from .scale import scale_compact, scale_decode_compact, scale_encode

__all__: tuple[str, ...] = ("scale_compact", "scale_decode_compact", "scale_encode")
