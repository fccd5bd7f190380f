#!/usr/bin/env python3
"""Example: Substrate-style sr25519 keys (dev accounts, HD derivation, signing)."""

from picosr25519 import DeriveJunction, KeyPair

alice = KeyPair.from_string("//Alice")
print("Alice public key:", alice.public_key().hex())

message = b"Hello, Substrate"
signature = alice.sign(message)
print("Verify:", alice.public_key().verify(signature, message))

# Soft junctions can be followed from the public key alone.
path = [DeriveJunction.soft("accounts"), DeriveJunction.soft(0)]
child = alice.derive(path)
print("Soft child matches:", child.public_key() == alice.public_key().derive(path))

# Hard junctions need the secret.
print("Public hard derivation:", alice.public_key().derive([DeriveJunction.hard("stash")]))
print("Secret hard derivation:", alice.derive([DeriveJunction.hard("stash")]))
