# utilities.py
from __future__ import annotations

from random import Random, SystemRandom
from typing import List, Set, Tuple

from alphabets import ALPHABETS
from config import ConfigRecord
from settings_generator import (
    PRESETS,
    choose_pairs,
    default_pair_count,
    generate_config,
    generate_from_preset,
)

YES = {"", "y", "yes"}

# ────────────────────────────────────────────────────────────────────────
#  0. Trivial helpers
# ────────────────────────────────────────────────────────────────────────


def ask(prompt: str) -> str:
    """Read & normalise an operator's response (trimmed)."""
    return input(prompt).strip()


def confirm(prompt: str) -> bool:
    return ask(f"{prompt} (Y/n) ").lower() in YES


# ────────────────────────────────────────────────────────────────────────
#  1. Interactive question helpers
# ────────────────────────────────────────────────────────────────────────


def choose_alphabet(default: str = "latin") -> str:
    names = list(ALPHABETS)
    print("\nSelect alphabet:")
    for idx, name in enumerate(names, 1):
        print(f" [{idx}] {name} ({len(ALPHABETS[name])} symbols)")
    try:
        sel = int(ask("> "))
    except ValueError:
        return default
    return names[sel - 1] if 1 <= sel <= len(names) else default


def choose_preset() -> int:
    """Return 0 for manual setup, else the 1-based preset index."""
    print("\nConfiguration:")
    print(" [0] Manual setup")
    for idx, p in enumerate(PRESETS, 1):
        print(f" [{idx}] {p.name}: {p.description} (blocks: {p.blocks}, speed: {p.speed}/10)")
    try:
        sel = int(ask("Choice: "))
    except ValueError:
        return 0
    return sel if 0 <= sel <= len(PRESETS) else 0


# ––– plugboard helpers –––––––––––––––––––––––––––––––––––––––––––

def _validate_pair(parts: List[str], valid: Set[str], used: Set[str]) -> Tuple[bool, str | None]:
    if len(parts) != 2 or any(len(p) != 1 for p in parts):
        return False, "❌ Need exactly two symbols separated by a space."
    a, b = parts
    if {a, b} - valid:
        invalid = ({a, b} - valid).pop()
        return False, f"❌ Symbol {invalid!r} is not in the alphabet."
    if a == b:
        return False, f"❌ Pair '{a} {b}' cannot map to itself."
    if {a, b} & used:
        dup = ({a, b} & used).pop()
        return False, f"❌ Symbol {dup!r} already used."
    return True, None


def get_plugboard(alpha: str) -> List[Tuple[str, str]]:
    """Read pairs like ``a b`` one per line until a blank line."""
    valid = set(alpha)
    used: Set[str] = set()
    pairs: List[Tuple[str, str]] = []

    print("\nEnter pairs as 'a b'. Blank line to finish.")
    while True:
        raw = ask("Add pair: ").lower()
        if not raw:
            return pairs
        parts = raw.split()
        ok, err = _validate_pair(parts, valid, used)
        if not ok:
            print(err)
            continue
        a, b = parts
        pairs.append((a, b))
        used.update((a, b))


def get_block_count(default: int = 4) -> int:
    raw = ask(f"How many blocks? [{default}] ")
    if raw.isdigit():
        return int(raw)
    return default


# ––– orchestration –––––––––––––––––––––––––––––––––––––––––––––––

def prompt_config(rng: Random | SystemRandom | None = None) -> ConfigRecord:
    """Collect settings interactively and return a fresh record."""
    rng = rng or SystemRandom()
    name = choose_alphabet()
    alpha = ALPHABETS[name]

    choice = choose_preset()
    if choice:
        return generate_from_preset(PRESETS[choice - 1], name, rng)

    print("\nPlugboard:\n [1] Enter manually\n [2] Random")
    if ask("> ") == "1":
        pairs = get_plugboard(alpha)
    else:
        pairs = choose_pairs(alpha, default_pair_count(alpha), rng)
        print("Random plugboard pairs:", " ".join(a + b for a, b in pairs))

    cfg = generate_config(name, get_block_count(), pairs=0, rng=rng)
    cfg.plugboard = pairs
    for block, positions in zip(cfg.blocks, cfg.rotor_positions):
        print(f"  block: {block}  start: {positions}")
    return cfg


__all__ = [
    "ask",
    "confirm",
    "choose_alphabet",
    "choose_preset",
    "get_plugboard",
    "get_block_count",
    "prompt_config",
]
