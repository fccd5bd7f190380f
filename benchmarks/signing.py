"""
Benchmark sr25519 operations through picosr25519 (schnorrkel bindings).
Reports time per call and peak memory (tracemalloc) per run.

Run from repo root:

  PYTHONPATH=src python benchmarks/signing.py

Or after pip install -e .:

  python benchmarks/signing.py
"""

from __future__ import annotations

import os
import sys
import time
import tracemalloc

_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
_src = os.path.join(_root, "src")
if _src not in sys.path:
    sys.path.insert(0, _src)

from picosr25519 import DeriveJunction, KeyPair

N_TIME = 500
N_MEM = 200
SEED = bytes(31) + bytes([1])
MSG = b"bench message for sr25519"
PAIR = KeyPair.from_seed(SEED)
PUB = PAIR.public_key()
SIG = PAIR.sign(MSG)
SOFT_PATH = [DeriveJunction.soft("bench"), DeriveJunction.soft(0)]
HARD_PATH = [DeriveJunction.hard("bench"), DeriveJunction.hard(0)]


def _time_per_call(fn, *args, n: int = N_TIME, **kwargs) -> float:
    for _ in range(20):
        fn(*args, **kwargs)
    start = time.perf_counter()
    for _ in range(n):
        fn(*args, **kwargs)
    return (time.perf_counter() - start) / n


def _peak_kb(fn, *args, n: int = N_MEM, **kwargs) -> float:
    tracemalloc.start()
    if hasattr(tracemalloc, "reset_peak"):
        tracemalloc.reset_peak()
    for _ in range(n):
        fn(*args, **kwargs)
    _, peak = tracemalloc.get_traced_memory()
    tracemalloc.stop()
    return peak / 1024.0


def main() -> None:
    print("Benchmark: sr25519")
    print(f"  n = {N_TIME} (time), {N_MEM} (memory)")
    print()

    assert PUB.verify(SIG, MSG)
    rows = [
        ("KeyPair.from_seed", KeyPair.from_seed, (SEED,)),
        ("KeyPair.sign", PAIR.sign, (MSG,)),
        ("PublicKey.verify", PUB.verify, (SIG, MSG)),
        ("KeyPair.derive soft x2", PAIR.derive, (SOFT_PATH,)),
        ("KeyPair.derive hard x2", PAIR.derive, (HARD_PATH,)),
        ("PublicKey.derive soft x2", PUB.derive, (SOFT_PATH,)),
        ("DeriveJunction.soft", DeriveJunction.soft, ("account",)),
    ]
    for name, fn, args in rows:
        t = _time_per_call(fn, *args) * 1000
        print(f"  {name:<26} {t:.4f} ms")
    print()

    print("  --- Peak memory (KiB) ---")
    print(f"  KeyPair.sign               {_peak_kb(PAIR.sign, MSG):.2f}")
    print(f"  KeyPair.derive hard x2     {_peak_kb(PAIR.derive, HARD_PATH):.2f}")


if __name__ == "__main__":
    main()
