"""
Derivation junctions: one step of an HD path, soft or hard, with a 32-byte
payload used as the step's chain code.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Iterable

from ..errors import InvalidArgumentError, expect_bytes
from ..hashes import blake2_256
from ..serde import scale_decode_compact, scale_encode

JUNCTION_ID_LEN = 32
_U64_MAX = 0xFFFFFFFFFFFFFFFF


class JunctionKind(enum.IntEnum):
    """SCALE variant index of the junction enum."""

    SOFT = 0
    HARD = 1


def _junction_id(index: Any) -> bytes:
    """SCALE-encode index; hash it when longer than 32 bytes, else zero-pad."""
    data = scale_encode(index)
    if len(data) > JUNCTION_ID_LEN:
        return blake2_256(data)
    return data.ljust(JUNCTION_ID_LEN, b"\x00")


@dataclass(frozen=True)
class DeriveJunction:
    """
    A single derivation step.

    Soft junctions have a public counterpart: the child public key can be
    computed from the parent public key alone. Hard junctions need the secret.
    """

    kind: JunctionKind
    chain_code: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", JunctionKind(self.kind))
        object.__setattr__(
            self,
            "chain_code",
            expect_bytes(
                self.chain_code,
                (JUNCTION_ID_LEN,),
                "DeriveJunction",
                "a 32-byte chain code",
            ),
        )

    @classmethod
    def soft(cls, index: Any) -> DeriveJunction:
        """
        Soft junction from any SCALE-encodable index.

        Args:
            index: bool, int (u64), str, bytes, list or tuple of those.

        Returns:
            Soft junction whose payload is the padded (or hashed) encoding.
        """
        return cls(JunctionKind.SOFT, _junction_id(index))

    @classmethod
    def hard(cls, index: Any) -> DeriveJunction:
        """Hard junction from any SCALE-encodable index. See ``soft``."""
        return cls(JunctionKind.HARD, _junction_id(index))

    @classmethod
    def from_str(cls, component: str) -> DeriveJunction:
        """
        Junction from one secret-URI path component (text after a ``/``).

        A leading ``/`` marks it hard. Decimal text (optionally ``+``-signed)
        that fits in a u64 is encoded as an integer, anything else as a string.
        """
        hard = component.startswith("/")
        code = component[1:] if hard else component
        digits = code[1:] if code.startswith("+") else code
        index: Any = code
        if digits.isascii() and digits.isdigit() and int(digits) <= _U64_MAX:
            index = int(digits)
        junction = cls.soft(index)
        return junction.harden() if hard else junction

    @property
    def is_soft(self) -> bool:
        return self.kind is JunctionKind.SOFT

    @property
    def is_hard(self) -> bool:
        return self.kind is JunctionKind.HARD

    def harden(self) -> DeriveJunction:
        return DeriveJunction(JunctionKind.HARD, self.chain_code)

    def soften(self) -> DeriveJunction:
        return DeriveJunction(JunctionKind.SOFT, self.chain_code)

    def scale_encode(self) -> bytes:
        """Variant byte (0 soft, 1 hard) followed by the 32-byte payload."""
        return bytes([self.kind]) + self.chain_code

    @classmethod
    def scale_decode(cls, data: bytes, offset: int = 0) -> tuple[DeriveJunction, int]:
        """Decode one junction at ``offset``; returns (junction, next offset)."""
        end = offset + 1 + JUNCTION_ID_LEN
        if end > len(data):
            raise InvalidArgumentError("DeriveJunction.scale_decode", "33 bytes")
        tag = data[offset]
        if tag not in (JunctionKind.SOFT, JunctionKind.HARD):
            raise InvalidArgumentError(
                "DeriveJunction.scale_decode", "variant 0 (soft) or 1 (hard)"
            )
        return cls(JunctionKind(tag), bytes(data[offset + 1 : end])), end

    def to_dict(self) -> dict[str, str]:
        """``{"Soft": "0x…"}`` or ``{"Hard": "0x…"}``."""
        return {self.kind.name.title(): "0x" + self.chain_code.hex()}

    @classmethod
    def from_dict(cls, obj: dict[str, str]) -> DeriveJunction:
        if not isinstance(obj, dict) or len(obj) != 1:
            raise InvalidArgumentError(
                "DeriveJunction.from_dict", 'a single "Soft" or "Hard" key'
            )
        ((name, value),) = obj.items()
        try:
            kind = JunctionKind[str(name).upper()]
        except KeyError:
            raise InvalidArgumentError(
                "DeriveJunction.from_dict", 'a single "Soft" or "Hard" key'
            ) from None
        if not isinstance(value, str) or not value.startswith("0x"):
            raise InvalidArgumentError("DeriveJunction.from_dict", "0x-prefixed hex")
        try:
            payload = bytes.fromhex(value[2:])
        except ValueError:
            raise InvalidArgumentError(
                "DeriveJunction.from_dict", "0x-prefixed hex"
            ) from None
        return cls(kind, payload)

    def __repr__(self) -> str:
        return f"DeriveJunction.{self.kind.name.lower()}(0x{self.chain_code.hex()})"


def encode_path(path: Iterable[DeriveJunction]) -> bytes:
    """SCALE ``Vec<DeriveJunction>``: compact count, then each junction."""
    return scale_encode(list(path))


def decode_path(data: bytes) -> list[DeriveJunction]:
    """Inverse of ``encode_path``. Trailing bytes are rejected."""
    count, offset = scale_decode_compact(data)
    path = []
    for _ in range(count):
        junction, offset = DeriveJunction.scale_decode(data, offset)
        path.append(junction)
    if offset != len(data):
        raise InvalidArgumentError("decode_path", "no trailing bytes")
    return path


__all__: tuple[str, ...] = (
    "DeriveJunction",
    "JUNCTION_ID_LEN",
    "JunctionKind",
    "decode_path",
    "encode_path",
)
