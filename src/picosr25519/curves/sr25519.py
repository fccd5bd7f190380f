"""
sr25519 (Schnorrkel over Ristretto/curve25519) key pairs, public keys and
signatures, with Substrate-style HD derivation. Curve math is delegated to the
backend (py-sr25519-bindings by default).
"""

from __future__ import annotations

import logging
import secrets
from dataclasses import dataclass, field
from typing import Callable, Iterable

from ..derive.junction import DeriveJunction
from ..derive.path import derive_public, derive_secret, parse_suri
from ..errors import (
    BytesLike,
    InvalidArgumentError,
    KeyPairZeroizedError,
    expect_bytes,
)
from .backend import Sr25519Backend, get_default_backend

logger = logging.getLogger(__name__)

PUBLIC_KEY_LENGTH = 32
SIGNATURE_LENGTH = 64
SEED_LENGTH = 32
SECRET_KEY_LENGTH = 64


def _message_bytes(message: BytesLike) -> bytes:
    if not isinstance(message, (bytes, bytearray, memoryview)):
        raise TypeError(f"message must be bytes-like, got {type(message).__name__}")
    return bytes(message)


@dataclass(frozen=True, order=True)
class Signature:
    """
    A 64-byte sr25519 signature.

    NOTE: Construction does not check that the bytes came from a real signing
    operation; only ``PublicKey.verify`` does.
    """

    data: bytes

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "data",
            expect_bytes(
                self.data,
                (SIGNATURE_LENGTH,),
                "Signature",
                "a 64-byte signature",
            ),
        )

    @classmethod
    def from_slice(cls, data: BytesLike) -> Signature:
        """
        Signature from a byte slice that should be 64 bytes long.

        Raises:
            InvalidArgumentError: data is not exactly 64 bytes.
        """
        return cls(data)

    @classmethod
    def from_raw(cls, data: BytesLike) -> Signature:
        """Signature from 64 raw bytes; same caveat as ``from_slice``."""
        return cls(data)

    def hex(self) -> str:
        return self.data.hex()

    def __bytes__(self) -> bytes:
        return self.data

    def __len__(self) -> int:
        return SIGNATURE_LENGTH


@dataclass(frozen=True, order=True)
class PublicKey:
    """
    A 32-byte sr25519 public key.

    Equality, hashing and ordering use the raw bytes only.
    """

    data: bytes
    backend: Sr25519Backend | None = field(
        default=None, compare=False, repr=False, hash=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "data",
            expect_bytes(
                self.data,
                (PUBLIC_KEY_LENGTH,),
                "PublicKey",
                "a 32-byte public key",
            ),
        )

    @classmethod
    def from_raw(
        cls, data: BytesLike, backend: Sr25519Backend | None = None
    ) -> PublicKey:
        """
        Public key from 32 raw bytes.

        NOTE: No check that the bytes encode a valid curve point. Verification
        against an invalid point simply fails.
        """
        return cls(data, backend)

    def _backend(self) -> Sr25519Backend:
        return self.backend if self.backend is not None else get_default_backend()

    def derive(
        self,
        path: Iterable[DeriveJunction],
        chain_code: BytesLike | None = None,
    ) -> PublicKey | None:
        """
        Child public key along ``path``.

        Args:
            path: Ordered junctions; all must be soft.
            chain_code: Optional 32-byte chain code to continue from.

        Returns:
            Derived key, or None if the path contains a hard junction.
        """
        backend = self._backend()
        result = derive_public(backend, self.data, path, chain_code)
        if result is None:
            return None
        return PublicKey(result[0], self.backend)

    def verify(self, signature: Signature, message: BytesLike) -> bool:
        """True iff ``signature`` is a valid signature of ``message`` by this key."""
        return self._backend().verify(
            signature.data, _message_bytes(message), self.data
        )

    def hex(self) -> str:
        return self.data.hex()

    def __bytes__(self) -> bytes:
        return self.data

    def __len__(self) -> int:
        return PUBLIC_KEY_LENGTH


class KeyPair:
    """
    An sr25519 key pair.

    Immutable: ``derive`` returns a new pair. The 64-byte secret is only
    exposed through ``seed()``. Use as a context manager (or call
    ``zeroize()``) to wipe the secret when done.
    """

    __slots__ = ("_public", "_secret", "_backend", "_zeroized")

    def __init__(
        self, public: bytes, secret: bytes, backend: Sr25519Backend | None = None
    ) -> None:
        self._public = PublicKey(public, backend)
        self._secret = bytearray(
            expect_bytes(
                secret, (SECRET_KEY_LENGTH,), "KeyPair", "a 64-byte secret key"
            )
        )
        self._backend = backend
        self._zeroized = False

    @property
    def backend(self) -> Sr25519Backend:
        return self._backend if self._backend is not None else get_default_backend()

    @classmethod
    def generate(cls, backend: Sr25519Backend | None = None) -> KeyPair:
        """New key pair from 32 bytes of OS randomness."""
        return cls.generate_with(secrets.token_bytes, backend)

    @classmethod
    def generate_with(
        cls,
        rng: Callable[[int], bytes],
        backend: Sr25519Backend | None = None,
    ) -> KeyPair:
        """
        New key pair from an explicit random source.

        Args:
            rng: Callable returning n random bytes, e.g. ``os.urandom`` or
                ``random.Random(seed).randbytes`` for reproducible tests.
            backend: Primitive library; defaults to the process-wide one.

        Returns:
            Key pair built from ``rng(32)``. Errors from rng propagate.
        """
        return cls.from_seed(rng(SEED_LENGTH), backend)

    @classmethod
    def from_seed(
        cls, seed: BytesLike, backend: Sr25519Backend | None = None
    ) -> KeyPair:
        """
        Key pair from a 32-byte mini secret or a 64-byte secret key.

        A mini secret is expanded in Ed25519 mode, as Substrate does. A 64-byte
        value is taken as an already expanded secret (what ``seed()`` returns).

        Raises:
            InvalidArgumentError: seed is neither 32 nor 64 bytes.
        """
        raw = expect_bytes(
            seed,
            (SEED_LENGTH, SECRET_KEY_LENGTH),
            "KeyPair.from_seed",
            "a 32-byte seed or 64-byte secret key",
        )
        impl = backend if backend is not None else get_default_backend()
        if len(raw) == SEED_LENGTH:
            public, secret = impl.pair_from_seed(raw)
        else:
            try:
                public, secret = impl.public_from_secret(raw), raw
            except ValueError:
                raise InvalidArgumentError(
                    "KeyPair.from_seed", "a valid 64-byte secret key"
                ) from None
        return cls(public, secret, backend)

    @classmethod
    def from_string(
        cls,
        s: str,
        password: str | None = None,
        backend: Sr25519Backend | None = None,
    ) -> KeyPair:
        """
        Key pair from a secret URI: an English BIP39 mnemonic or a ``0x`` hex
        seed, optionally followed by ``//hard``/``/soft`` junctions and
        ``///password``.

        Args:
            s: Secret URI. A bare path such as ``//Alice`` uses ``DEV_PHRASE``.
            password: Mnemonic password; overrides the one in the URI.
            backend: Primitive library; defaults to the process-wide one.

        Raises:
            InvalidArgumentError: s is neither a valid seed nor a valid mnemonic.
        """
        try:
            phrase, path, uri_password = parse_suri(s)
        except InvalidArgumentError:
            raise InvalidArgumentError(
                "KeyPair#from_string", "a valid seed or english BIP39 mnemonic"
            ) from None
        if password is None:
            password = uri_password
        impl = backend if backend is not None else get_default_backend()
        if phrase.startswith("0x"):
            logger.debug("importing key pair from hex seed")
            try:
                raw = bytes.fromhex(phrase[2:])
                root = cls.from_seed(raw, backend)
            except ValueError:
                raise InvalidArgumentError(
                    "KeyPair#from_string", "a valid seed or english BIP39 mnemonic"
                ) from None
        else:
            logger.debug("importing key pair from mnemonic")
            try:
                mini = impl.mini_secret_from_mnemonic(phrase, password or "")
            except ValueError:
                raise InvalidArgumentError(
                    "KeyPair#from_string", "a valid seed or english BIP39 mnemonic"
                ) from None
            root = cls.from_seed(mini, backend)
        return root.derive(path) if path else root

    def _secret_bytes(self) -> bytes:
        if self._zeroized:
            raise KeyPairZeroizedError("key pair secret has been zeroized")
        return bytes(self._secret)

    def public_key(self) -> PublicKey:
        return self._public

    def sign(self, message: BytesLike) -> Signature:
        """Sign a message of any length, including empty."""
        raw = self.backend.sign(
            self._public.data, self._secret_bytes(), _message_bytes(message)
        )
        return Signature(raw)

    def derive(
        self,
        path: Iterable[DeriveJunction],
        chain_code: BytesLike | None = None,
    ) -> KeyPair:
        """
        Child key pair along ``path``; soft and hard junctions both work.

        Args:
            path: Ordered junctions.
            chain_code: Optional 32-byte chain code continuing a derivation
                started elsewhere. Without it each junction is its own chain code,
                which is the Substrate derivation. With it the junction becomes
                context data and the result differs from the Substrate key for
                the same path, so secret URIs never use this mode.

        Raises:
            InvalidArgumentError: chain_code is not 32 bytes.
            DerivationError: the backend rejected a step.
        """
        public, secret, _ = derive_secret(
            self.backend, self._public.data, self._secret_bytes(), path, chain_code
        )
        return KeyPair(public, secret, self._backend)

    def seed(self) -> bytes:
        """
        Raw 64-byte secret key. Sensitive: keep its lifetime short.

        Accepted back by ``from_seed`` and by ``from_string("0x" + hex)``.
        """
        return self._secret_bytes()

    def zeroize(self) -> None:
        """Overwrite the secret in place; later secret use raises."""
        for i in range(len(self._secret)):
            self._secret[i] = 0
        self._zeroized = True

    def __enter__(self) -> KeyPair:
        return self

    def __exit__(self, *exc_info) -> None:
        self.zeroize()

    def __repr__(self) -> str:
        return f"KeyPair(public={self._public.hex()})"


__all__: tuple[str, ...] = (
    "KeyPair",
    "PUBLIC_KEY_LENGTH",
    "PublicKey",
    "SECRET_KEY_LENGTH",
    "SEED_LENGTH",
    "SIGNATURE_LENGTH",
    "Signature",
)
