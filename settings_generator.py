# settings_generator.py
from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path
from random import Random, SystemRandom
from typing import Dict, List, Sequence, Tuple

from alphabets import ALPHABETS, alphabet_for
from config import DEFAULT_PATH, ConfigRecord, save_config
from debug import Debug
from keyspace import estimate_bits
from rotor_and_reflector import COLOR_TOKENS

debug = Debug()
debug.disable("generator")

MIN_BLOCK_LEN = 3
MAX_BLOCK_LEN = 9


# ── presets ───────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class Preset:
    name: str
    description: str
    blocks: int
    speed: int                      # 0 (slowest) … 10 (fastest)


PRESETS: Tuple[Preset, ...] = (
    Preset("minimal", "3 blocks of short rotors. Fast, but weaker.", 3, 8),
    Preset("safe", "4 blocks. A good balance of speed and strength.", 4, 7),
    Preset("paranoid", "12 blocks. Slower, maximum strength.", 12, 4),
    Preset("forty-two", "42 blocks, named after its block count.", 42, 5),
    Preset("pocket", "A single block. The smallest and quickest.", 1, 10),
)

PRESETS_BY_NAME: Dict[str, Preset] = {p.name: p for p in PRESETS}


# ── helpers ───────────────────────────────────────────────────────


def build_rng(seed: int | None) -> Random | SystemRandom:
    """Deterministic RNG when *seed* given; CSPRNG otherwise."""
    return Random(seed) if seed is not None else SystemRandom()


def default_pair_count(alpha: str) -> int:
    return len(alpha) // 4


def choose_pairs(alpha: str, k: int, rng: Random | SystemRandom) -> List[Tuple[str, str]]:
    """Return *k* disjoint plug pairs (at most ``len(alpha) // 2``)."""
    k = max(0, min(k, len(alpha) // 2))
    pool = list(alpha)
    rng.shuffle(pool)
    return list(zip(pool[::2], pool[1::2]))[:k]


def random_blocks(rng: Random | SystemRandom, count: int) -> List[str]:
    """*count* color strings, each 3–9 rotors long."""
    return [
        "".join(rng.choice(COLOR_TOKENS) for _ in range(rng.randint(MIN_BLOCK_LEN, MAX_BLOCK_LEN)))
        for _ in range(count)
    ]


def random_positions(
    rng: Random | SystemRandom, blocks: Sequence[str], alphabet_size: int
) -> List[List[int]]:
    return [[rng.randrange(alphabet_size) for _ in block] for block in blocks]


def generate_config(
    alphabet: str,
    blocks: int,
    pairs: int | None = None,
    rng: Random | SystemRandom | None = None,
) -> ConfigRecord:
    """Random machine settings for the alphabet named *alphabet*."""
    rng = rng or SystemRandom()
    alpha = alphabet_for(alphabet)
    if pairs is None:
        pairs = default_pair_count(alpha)

    block_strings = random_blocks(rng, blocks)
    cfg = ConfigRecord(
        alphabet=alphabet.lower(),
        plugboard=choose_pairs(alpha, pairs, rng),
        blocks=block_strings,
        rotor_positions=random_positions(rng, block_strings, len(alpha)),
    )
    debug.log("generator", "generated %d blocks, %d pairs", len(cfg.blocks), cfg.pair_count)
    return cfg


def generate_from_preset(
    preset: Preset | str,
    alphabet: str,
    rng: Random | SystemRandom | None = None,
) -> ConfigRecord:
    if isinstance(preset, str):
        try:
            preset = PRESETS_BY_NAME[preset]
        except KeyError:
            raise ValueError(f"Unknown preset {preset!r}. Expected one of {list(PRESETS_BY_NAME)}") from None
    return generate_config(alphabet, preset.blocks, rng=rng)


def describe(cfg: ConfigRecord) -> str:
    alpha = alphabet_for(cfg.alphabet)
    bits = estimate_bits(len(alpha), cfg.total_rotors, cfg.pair_count)
    return (
        f"   alphabet    : {cfg.alphabet}\n"
        f"   blocks      : {len(cfg.blocks)} ({cfg.total_rotors} rotors)\n"
        f"   plug pairs  : {cfg.pair_count}\n"
        f"   keyspace    : {bits:.3f} bits"
    )


def parse_cli(argv: Sequence[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Generate a random machine config")
    p.add_argument("--alphabet", choices=sorted(ALPHABETS), default="latin")
    group = p.add_mutually_exclusive_group()
    group.add_argument("--preset", choices=list(PRESETS_BY_NAME), help="Block layout preset")
    group.add_argument("--blocks", type=int, default=4, help="Number of rotor blocks (default: 4)")
    p.add_argument("--pairs", type=int, help="Plugboard pairs (default: alphabet length // 4)")
    p.add_argument("--seed", type=int, help="Deterministic seed (omit for random)")
    p.add_argument(
        "--outfile",
        type=Path,
        default=DEFAULT_PATH,
        help=f"Destination JSON file (default: {DEFAULT_PATH})",
    )
    return p.parse_args(argv)


# ── main ─────────────────────────────────────────────────────────


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_cli(argv)
    rng = build_rng(args.seed)

    if args.preset:
        blocks = PRESETS_BY_NAME[args.preset].blocks
    else:
        blocks = args.blocks
    if blocks < 0:
        sys.exit("Block count must not be negative.")

    cfg = generate_config(args.alphabet, blocks, args.pairs, rng)
    save_config(cfg, args.outfile)
    print(f"✅  Wrote {args.outfile}\n{describe(cfg)}")


if __name__ == "__main__":
    main()
