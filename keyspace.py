# keyspace.py
from __future__ import annotations

import math


def log2_factorial(n: int) -> float:
    """log2(n!) by direct summation; ``n <= 1`` (negatives included) gives 0."""
    total = 0.0
    for i in range(2, n + 1):
        total += math.log2(i)
    return total


def estimate_bits(alphabet_size: int, rotor_count: int, pair_count: int) -> float:
    """Key-space size in bits for a machine of the given shape.

    Rotor offsets contribute ``R * log2(A)``; choosing ``P`` disjoint
    plugboard pairs out of ``A`` symbols contributes
    ``log2(A! / ((A - 2P)! * 2**P * P!))``.
    """
    if alphabet_size < 1:
        raise ValueError(f"alphabet_size must be positive, got {alphabet_size}")
    if rotor_count < 0 or pair_count < 0:
        raise ValueError("rotor_count and pair_count must not be negative")

    positions = rotor_count * math.log2(alphabet_size)
    pairing = (
        log2_factorial(alphabet_size)
        - log2_factorial(max(alphabet_size - 2 * pair_count, 0))
        - pair_count
        - log2_factorial(pair_count)
    )
    return positions + pairing
