#!/usr/bin/env python3
"""Throughput micro-benchmarks for the pure-Python MD5 engine and encoders."""
from __future__ import annotations

import argparse
import hashlib
import random
import time
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

from md5digest.encoders import to_radix
from md5digest.hmac_md5 import hmac_md5_bytes
from md5digest.md5 import md5_bytes


def bench_md5(size: int, trials: int, seed: int) -> None:
    rng = random.Random(seed)
    msgs = [bytes(rng.getrandbits(8) for _ in range(size)) for _ in range(trials)]
    start = time.time()
    bad = 0
    for m in msgs:
        if md5_bytes(m) != hashlib.md5(m).digest():
            bad += 1
    elapsed = time.time() - start
    rate = size * trials / elapsed / 1024 if elapsed else 0.0
    print(f"md5: size={size} trials={trials} mismatches={bad} time={elapsed:.3f}s rate={rate:.1f} KiB/s")


def bench_hmac(trials: int, seed: int) -> None:
    rng = random.Random(seed)
    start = time.time()
    for _ in range(trials):
        key = bytes(rng.getrandbits(8) for _ in range(rng.randrange(1, 100)))
        hmac_md5_bytes(key, b"challenge")
    elapsed = time.time() - start
    rate = trials / elapsed if elapsed else 0.0
    print(f"hmac: trials={trials} time={elapsed:.3f}s rate={rate:.1f}/s")


def bench_radix(trials: int, alphabet: str) -> None:
    raw = hashlib.md5(b"radix").digest()
    start = time.time()
    for _ in range(trials):
        to_radix(raw, alphabet)
    elapsed = time.time() - start
    rate = trials / elapsed if elapsed else 0.0
    print(f"radix{len(alphabet)}: trials={trials} time={elapsed:.3f}s rate={rate:.1f}/s")


def main() -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("--size", type=int, default=4096)
    ap.add_argument("--trials", type=int, default=50)
    ap.add_argument("--seed", type=int, default=2024)
    args = ap.parse_args()

    bench_md5(args.size, args.trials, args.seed)
    bench_hmac(args.trials * 20, args.seed)
    bench_radix(args.trials * 20, "01")
    bench_radix(args.trials * 20, "0123456789")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
