"""Minimal pytest tests for picosr25519 against the schnorrkel bindings."""

import random

import pytest

from picosr25519 import (
    DeriveJunction,
    InvalidArgumentError,
    KeyPair,
    KeyPairZeroizedError,
    PublicKey,
    Signature,
)

ZERO_SEED = bytes(32)
MSG = b"message to sign"


def test_sign_verify() -> None:
    k = KeyPair.from_seed(ZERO_SEED)
    sig = k.sign(MSG)
    assert len(bytes(sig)) == 64
    assert k.public_key().verify(sig, MSG) is True


def test_sign_verify_empty_message() -> None:
    k = KeyPair.from_seed(ZERO_SEED)
    assert k.public_key().verify(k.sign(b""), b"") is True


def test_verify_rejects_tampered_message() -> None:
    k = KeyPair.from_seed(ZERO_SEED)
    assert k.public_key().verify(k.sign(MSG), b"other message") is False


def test_verify_rejects_other_key() -> None:
    k1 = KeyPair.from_seed(bytes(31) + bytes([1]))
    k2 = KeyPair.from_seed(bytes(31) + bytes([2]))
    assert k2.public_key().verify(k1.sign(MSG), MSG) is False


def test_verify_garbage_signature_is_false() -> None:
    k = KeyPair.from_seed(ZERO_SEED)
    assert k.public_key().verify(Signature.from_raw(bytes(64)), MSG) is False


def test_from_seed_deterministic() -> None:
    a = KeyPair.from_seed(ZERO_SEED).public_key()
    b = KeyPair.from_seed(ZERO_SEED).public_key()
    assert a == b
    assert len(bytes(a)) == 32


def test_from_seed_rejects_bad_length() -> None:
    with pytest.raises(InvalidArgumentError):
        KeyPair.from_seed(bytes(31))
    with pytest.raises(InvalidArgumentError):
        KeyPair.from_seed(bytes(33))


def test_from_seed_rejects_invalid_secret_key() -> None:
    with pytest.raises(InvalidArgumentError):
        KeyPair.from_seed(b"\xff" * 64)


def test_signature_from_slice_lengths() -> None:
    with pytest.raises(InvalidArgumentError):
        Signature.from_slice(bytes(63))
    with pytest.raises(InvalidArgumentError):
        Signature.from_slice(bytes(65))
    assert bytes(Signature.from_slice(bytes(64))) == bytes(64)


def test_public_key_from_raw_lengths() -> None:
    with pytest.raises(InvalidArgumentError):
        PublicKey.from_raw(bytes(31))
    with pytest.raises(InvalidArgumentError):
        PublicKey.from_raw(bytes(33))
    assert bytes(PublicKey.from_raw(bytes(32))) == bytes(32)


def test_soft_derivation_corresponds() -> None:
    k = KeyPair.from_seed(ZERO_SEED)
    j = DeriveJunction.soft(7)
    assert k.derive([j]).public_key() == k.public_key().derive([j])


def test_soft_derivation_corresponds_with_chain_code() -> None:
    k = KeyPair.from_seed(ZERO_SEED)
    path = [DeriveJunction.soft("a"), DeriveJunction.soft("b")]
    cc = bytes(range(32))
    assert k.derive(path, cc).public_key() == k.public_key().derive(path, cc)


def test_hard_derivation_has_no_public_counterpart() -> None:
    k = KeyPair.from_seed(ZERO_SEED)
    assert k.public_key().derive([DeriveJunction.hard(7)]) is None
    assert k.public_key().derive([DeriveJunction.soft(1), DeriveJunction.hard(2)]) is None
    child = k.derive([DeriveJunction.hard(7)])
    assert child.public_key() != k.public_key()


def test_derived_key_signs() -> None:
    child = KeyPair.from_seed(ZERO_SEED).derive([DeriveJunction.hard("stash")])
    assert child.public_key().verify(child.sign(MSG), MSG) is True


def test_path_order_matters() -> None:
    k = KeyPair.from_seed(ZERO_SEED)
    j1, j2 = DeriveJunction.hard(1), DeriveJunction.soft(2)
    assert k.derive([j1, j2]).public_key() != k.derive([j2, j1]).public_key()


def test_derive_rejects_bad_chain_code() -> None:
    k = KeyPair.from_seed(ZERO_SEED)
    with pytest.raises(InvalidArgumentError):
        k.derive([DeriveJunction.soft(1)], bytes(31))


def test_seed_round_trip() -> None:
    k = KeyPair.from_seed(ZERO_SEED).derive([DeriveJunction.soft(3)])
    seed = k.seed()
    assert len(seed) == 64
    assert KeyPair.from_seed(seed).public_key() == k.public_key()
    assert KeyPair.from_string("0x" + seed.hex()).public_key() == k.public_key()


def test_from_string_hex_seed_matches_from_seed() -> None:
    k = KeyPair.from_string("0x" + ZERO_SEED.hex())
    assert k.public_key() == KeyPair.from_seed(ZERO_SEED).public_key()


def test_from_string_rejects_garbage() -> None:
    with pytest.raises(InvalidArgumentError):
        KeyPair.from_string("not a real mnemonic and not hex", None)
    with pytest.raises(InvalidArgumentError):
        KeyPair.from_string("0x1234")
    with pytest.raises(InvalidArgumentError):
        KeyPair.from_string("0xzz")


def test_generate_with_is_reproducible() -> None:
    a = KeyPair.generate_with(random.Random(42).randbytes)
    b = KeyPair.generate_with(random.Random(42).randbytes)
    assert a.public_key() == b.public_key()


def test_generate_is_random() -> None:
    assert KeyPair.generate().public_key() != KeyPair.generate().public_key()


def test_sign_rejects_str() -> None:
    with pytest.raises(TypeError):
        KeyPair.from_seed(ZERO_SEED).sign("text")  # type: ignore[arg-type]


def test_zeroize() -> None:
    with KeyPair.from_seed(ZERO_SEED) as k:
        pub = k.public_key()
    assert pub == KeyPair.from_seed(ZERO_SEED).public_key()
    with pytest.raises(KeyPairZeroizedError):
        k.sign(MSG)
    with pytest.raises(KeyPairZeroizedError):
        k.seed()


def test_explicit_chain_code_is_not_substrate_derivation() -> None:
    k = KeyPair.from_seed(ZERO_SEED)
    path = [DeriveJunction.hard("Alice")]
    assert k.derive(path).public_key() != k.derive(path, bytes(32)).public_key()
