# benchmark.py
from __future__ import annotations

import time
from dataclasses import dataclass
from random import Random, SystemRandom
from typing import List, Sequence, Tuple

from tqdm import tqdm

from alphabets import alphabet_for
from config import ConfigRecord
from debug import Debug
from keyspace import estimate_bits
from machine import build_machine

debug = Debug()
debug.disable("benchmark")

DEFAULT_SIZES: Tuple[int, ...] = (10, 100, 1_000, 10_000, 50_000)


@dataclass(slots=True)
class BenchmarkResult:
    size: int
    encrypt_seconds: float
    decrypt_seconds: float
    kat_seconds: float
    kat_passed: bool


def keyspace_report(cfg: ConfigRecord) -> Tuple[float, int, int, int]:
    """Return ``(bits, A, R, P)`` for *cfg* without building a machine."""
    a = len(alphabet_for(cfg.alphabet))
    r = cfg.total_rotors
    p = cfg.pair_count
    return estimate_bits(a, r, p), a, r, p


def random_text(alpha: str, size: int, rng: Random | SystemRandom) -> str:
    return "".join(rng.choice(alpha) for _ in range(size))


def run_benchmark(
    cfg: ConfigRecord,
    sizes: Sequence[int] = DEFAULT_SIZES,
    rng: Random | SystemRandom | None = None,
    *,
    progress: bool = True,
) -> List[BenchmarkResult]:
    """Round-trip and time random texts of each size on fresh machines."""
    rng = rng or SystemRandom()
    alpha = alphabet_for(cfg.alphabet)
    results: List[BenchmarkResult] = []

    for size in tqdm(sizes, desc="benchmark", unit="size", disable=not progress):
        text = random_text(alpha, size, rng)

        t0 = time.perf_counter()
        cipher = build_machine(cfg).transform(text)
        recovered = build_machine(cfg).transform(cipher)
        kat_time = time.perf_counter() - t0

        t1 = time.perf_counter()
        build_machine(cfg).transform(text)
        enc_time = time.perf_counter() - t1

        t2 = time.perf_counter()
        build_machine(cfg).transform(cipher)
        dec_time = time.perf_counter() - t2

        passed = recovered == text
        if not passed:
            debug.logger.error("KAT failed at size %d: decrypt(encrypt(text)) != text", size)
        results.append(BenchmarkResult(size, enc_time, dec_time, kat_time, passed))

    return results


def format_report(cfg: ConfigRecord, results: Sequence[BenchmarkResult]) -> str:
    bits, a, r, p = keyspace_report(cfg)
    lines = [f"Keyspace: {bits:.3f} bits (A = {a}, R = {r}, P = {p})"]
    for res in results:
        lines.append(
            f"KAT: {'pass' if res.kat_passed else 'FAILED'}  "
            f"{res.size} -> encrypt: {res.encrypt_seconds:.6f}, "
            f"decrypt: {res.decrypt_seconds:.6f}, KAT: {res.kat_seconds:.6f}"
        )
    return "\n".join(lines)
