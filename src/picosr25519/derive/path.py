"""
HD derivation walk shared by key pairs and public keys, plus parsing of
secret URIs (``<phrase>//hard/soft///password``).
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Iterable

from ..errors import DerivationError, InvalidArgumentError, expect_bytes
from .junction import JUNCTION_ID_LEN, DeriveJunction

if TYPE_CHECKING:
    from ..curves.backend import Sr25519Backend

logger = logging.getLogger(__name__)

# Well-known Substrate development phrase, used when a secret URI has none.
DEV_PHRASE = "bottom drive obey lake curtain smoke basket hold race lonely fit walk"

_SURI_RE = re.compile(
    r"(?P<phrase>[\d\w ]+)?(?P<path>(//?[^/]+)*)(///(?P<password>.*))?"
)
_JUNCTION_RE = re.compile(r"/(/?[^/]+)")


def _check_chain_code(chain_code: bytes | None) -> bytes | None:
    if chain_code is None:
        return None
    return expect_bytes(
        chain_code, (JUNCTION_ID_LEN,), "derive", "a 32-byte chain code"
    )


def _step_input(
    junction: DeriveJunction, chain_code: bytes | None
) -> tuple[bytes, bytes]:
    """(chain code, context data) fed to the backend for one step."""
    if not isinstance(junction, DeriveJunction):
        raise TypeError(
            f"derive: path items must be DeriveJunction, got {type(junction).__name__}"
        )
    if chain_code is None:
        return junction.chain_code, b""
    return chain_code, junction.chain_code


def derive_secret(
    backend: Sr25519Backend,
    public: bytes,
    secret: bytes,
    path: Iterable[DeriveJunction],
    chain_code: bytes | None = None,
) -> tuple[bytes, bytes, bytes | None]:
    """
    Walk ``path`` with the secret key. Soft and hard junctions both succeed.

    Without ``chain_code`` every step uses the junction payload as its chain
    code (Substrate convention). With one, the first step uses it and the
    junction payload becomes context data; later steps reuse the chain code
    returned by the previous step. That mode does not reproduce Substrate
    keys for the same path.

    Args:
        backend: Primitive library.
        public: 32-byte parent public key.
        secret: 64-byte parent secret key.
        path: Ordered junctions.
        chain_code: Optional 32-byte chain code to continue from.

    Returns:
        (child public, child secret, chain code of the last step or None).

    Raises:
        InvalidArgumentError: chain_code is not 32 bytes.
        DerivationError: the backend rejected a step.
    """
    threaded = _check_chain_code(chain_code)
    last = threaded
    for i, junction in enumerate(path):
        cc, data = _step_input(junction, threaded)
        try:
            last, public, secret = backend.derive_keypair(
                cc, public, secret, data, junction.is_hard
            )
        except (TypeError, ValueError) as exc:
            raise DerivationError(
                f"{junction.kind.name.lower()} derivation failed at step {i}"
            ) from exc
        if threaded is not None:
            threaded = last
        logger.debug("derived secret step %d (%s)", i, junction.kind.name.lower())
    return public, secret, last


def derive_public(
    backend: Sr25519Backend,
    public: bytes,
    path: Iterable[DeriveJunction],
    chain_code: bytes | None = None,
) -> tuple[bytes, bytes | None] | None:
    """
    Walk ``path`` with the public key only.

    Same chain code rules as ``derive_secret``, so a soft path gives the public
    key matching the secret derivation.

    Returns:
        (child public, chain code of the last step or None), or None as soon
        as a hard junction is met.
    """
    threaded = _check_chain_code(chain_code)
    last = threaded
    for i, junction in enumerate(path):
        cc, data = _step_input(junction, threaded)
        if junction.is_hard:
            logger.debug("public derivation stopped at hard junction %d", i)
            return None
        try:
            last, public = backend.derive_public(cc, public, data)
        except (TypeError, ValueError) as exc:
            raise DerivationError(f"soft derivation failed at step {i}") from exc
        if threaded is not None:
            threaded = last
    return public, last


def parse_path(path: str) -> list[DeriveJunction]:
    """
    Junctions of a ``//hard/soft/...`` string.

    Args:
        path: Empty, or a sequence of ``/soft`` and ``//hard`` components.

    Returns:
        Junctions in order.
    """
    if _JUNCTION_RE.sub("", path):
        raise InvalidArgumentError("parse_path", "a path of /soft and //hard junctions")
    return [DeriveJunction.from_str(m) for m in _JUNCTION_RE.findall(path)]


def parse_suri(suri: str) -> tuple[str, list[DeriveJunction], str | None]:
    """
    Split a secret URI into phrase, junctions and password.

    The phrase defaults to ``DEV_PHRASE`` when the URI starts with a path.
    """
    m = _SURI_RE.fullmatch(suri)
    if m is None:
        raise InvalidArgumentError(
            "parse_suri", "<phrase or 0x seed>[//hard|/soft]*[///password]"
        )
    phrase = m.group("phrase") or DEV_PHRASE
    return phrase, parse_path(m.group("path")), m.group("password")


__all__: tuple[str, ...] = (
    "DEV_PHRASE",
    "derive_public",
    "derive_secret",
    "parse_path",
    "parse_suri",
)
