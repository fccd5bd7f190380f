"""
Minimal SCALE codec (the Substrate encoding): bool, u64 int, str, bytes,
list (Vec), tuple (concatenation), and objects with a ``scale_encode`` method.
Enough to turn a derivation index into junction bytes and to ship paths.
"""

from __future__ import annotations

from ..errors import InvalidArgumentError

_U64_MAX = 0xFFFFFFFFFFFFFFFF
# Big-integer compact mode stores the payload length in 6 bits (plus 4).
_COMPACT_MAX_BYTES = 4 + 0x3F


def scale_compact(n: int) -> bytes:
    """
    SCALE compact encoding of a non-negative integer.

    Args:
        n: Integer in [0, 2**536).

    Returns:
        1, 2, 4 or 5..68 encoded bytes.
    """
    if n < 0:
        raise InvalidArgumentError("scale_compact", "a non-negative integer")
    if n < 1 << 6:
        return bytes([n << 2])
    if n < 1 << 14:
        return ((n << 2) | 0b01).to_bytes(2, "little")
    if n < 1 << 30:
        return ((n << 2) | 0b10).to_bytes(4, "little")
    size = max(4, (n.bit_length() + 7) // 8)
    if size > _COMPACT_MAX_BYTES:
        raise InvalidArgumentError("scale_compact", "an integer below 2**536")
    return bytes([((size - 4) << 2) | 0b11]) + n.to_bytes(size, "little")


def scale_decode_compact(data: bytes, offset: int = 0) -> tuple[int, int]:
    """
    Decode a compact integer starting at ``offset``.

    Returns:
        (value, offset just past the encoding).
    """
    if offset >= len(data):
        raise InvalidArgumentError("scale_decode_compact", "a compact prefix")
    mode = data[offset] & 0b11
    if mode == 0b00:
        return data[offset] >> 2, offset + 1
    if mode == 0b01:
        size = 2
    elif mode == 0b10:
        size = 4
    else:
        size = 1 + (data[offset] >> 2) + 4
    end = offset + size
    if end > len(data):
        raise InvalidArgumentError("scale_decode_compact", "a complete compact integer")
    if mode == 0b11:
        return int.from_bytes(data[offset + 1 : end], "little"), end
    return int.from_bytes(data[offset:end], "little") >> 2, end


def _scale_encode_obj(obj, buf: bytearray) -> None:
    if isinstance(obj, bool):
        buf.append(1 if obj else 0)
    elif isinstance(obj, int):
        if not 0 <= obj <= _U64_MAX:
            raise InvalidArgumentError("scale_encode", "an integer in the u64 range")
        buf.extend(obj.to_bytes(8, "little"))
    elif isinstance(obj, (bytes, bytearray, memoryview)):
        s = bytes(obj)
        buf.extend(scale_compact(len(s)))
        buf.extend(s)
    elif isinstance(obj, str):
        s = obj.encode("utf-8")
        buf.extend(scale_compact(len(s)))
        buf.extend(s)
    elif isinstance(obj, list):
        buf.extend(scale_compact(len(obj)))
        for x in obj:
            _scale_encode_obj(x, buf)
    elif isinstance(obj, tuple):
        for x in obj:
            _scale_encode_obj(x, buf)
    elif hasattr(obj, "scale_encode"):
        buf.extend(obj.scale_encode())
    else:
        raise TypeError(f"scale encode: unsupported type {type(obj)}")


def scale_encode(obj) -> bytes:
    buf = bytearray()
    _scale_encode_obj(obj, buf)
    return bytes(buf)


__all__: tuple[str, ...] = (
    "scale_compact",
    "scale_decode_compact",
    "scale_encode",
)
