"""
CipherMachine: construction, transform, round trips
====================================================
"""

from random import Random

import pytest

from alphabets import CYRILLIC, LATIN
from config import ConfigRecord
from errors import (
    AlphabetError,
    ConfigurationError,
    EmptyBlock,
    PlugboardOverlap,
    RotorPositionCountMismatch,
    UnknownColorToken,
)
from machine import CipherMachine, build_machine, transform
from settings_generator import generate_config

SIMPLE = ConfigRecord(alphabet="latin", blocks=["КБ"])

# ── Known answers ─────────────────────────────────────────────────────────────
def test_single_symbol_known_answer():
    m = build_machine(SIMPLE)
    assert m.transform("a") == "t"
    # odometer: only the first rotor moves
    assert m.save() == [[1, 0]]

def test_second_symbol_uses_stepped_rotor():
    assert build_machine(SIMPLE).transform("aa") == "tr"

def test_plugboard_and_reflector_only():
    m = CipherMachine(LATIN, [("a", "b")], [])
    assert m.transform("abc") == "yzx"

def test_module_level_transform():
    assert transform(build_machine(SIMPLE), "A") == "t"

# ── Pass-through ──────────────────────────────────────────────────────────────
def test_non_alphabet_passes_through_without_stepping():
    assert build_machine(SIMPLE).transform("a, a!") == "t, r!"

def test_input_is_lower_cased():
    assert build_machine(SIMPLE).transform("Hello, World 42") == build_machine(SIMPLE).transform("hello, world 42")

def test_only_foreign_text_is_unchanged():
    m = build_machine(SIMPLE)
    assert m.transform("123 ?! Привет") == "123 ?! привет"
    assert m.save() == [[0, 0]]

def test_cyrillic_machine_passes_latin_through():
    cfg = ConfigRecord(alphabet="cyrillic", blocks=["ЛГ"])
    out = build_machine(cfg).transform("ok ЁЖ")
    assert out[:3] == "ok "
    assert all(ch in CYRILLIC for ch in out[3:])

# ── Round trips (KAT) ─────────────────────────────────────────────────────────
KAT_CONFIGS = [
    SIMPLE,
    ConfigRecord("latin", [("a", "q"), ("z", "m")], ["КБЧЗР", "ОФСГЛ"], [[1, 2, 3, 4, 5], [25, 0, 13, 7, 9]]),
    ConfigRecord("cyrillic", [("ё", "я"), ("а", "б")], ["ЛЛЛ", "К", "ГСЧ"], []),
    ConfigRecord("latin", [], [], []),
]

@pytest.mark.parametrize("cfg", KAT_CONFIGS)
def test_round_trip(cfg):
    alpha = build_machine(cfg).alphabet
    rng = Random(7)
    text = "".join(rng.choice(alpha) for _ in range(500))
    cipher = build_machine(cfg).transform(text)
    assert cipher != text
    assert build_machine(cfg).transform(cipher) == text

@pytest.mark.parametrize("seed", range(5))
def test_round_trip_generated_configs(seed):
    rng = Random(seed)
    cfg = generate_config("cyrillic" if seed % 2 else "latin", blocks=3, rng=rng)
    msg = "Съешь же ещё этих мягких французских булок" if seed % 2 else "The quick brown fox, 1942!"
    cipher = build_machine(cfg).transform(msg)
    assert build_machine(cfg).transform(cipher) == msg.lower()

def test_reused_machine_continues_keystream():
    m = build_machine(SIMPLE)
    first = m.transform("aa")
    second = m.transform("aa")
    assert first + second == build_machine(SIMPLE).transform("aaaa")
    assert first != second

def test_save_restore_rewinds():
    m = build_machine(KAT_CONFIGS[1])
    start = m.save()
    out = m.transform("attack at dawn")
    m.restore(start)
    assert m.transform("attack at dawn") == out

# ── Queries ───────────────────────────────────────────────────────────────────
def test_machine_queries():
    m = build_machine(KAT_CONFIGS[1])
    assert m.alphabet == LATIN
    assert m.alphabet_size == 26
    assert m.rotor_count == 10
    assert m.pair_count == 2
    assert m.keyspace_bits() > 0

def test_starting_offsets_applied():
    m = build_machine(KAT_CONFIGS[1])
    assert m.save() == [[1, 2, 3, 4, 5], [25, 0, 13, 7, 9]]

# ── Construction errors ───────────────────────────────────────────────────────
@pytest.mark.parametrize("cfg, error", [
    (ConfigRecord("latin", [], ["КБ", "Ч"], [[0, 0]]), RotorPositionCountMismatch),
    (ConfigRecord("latin", [], ["КБ"], [[0, 0, 0]]), RotorPositionCountMismatch),
    (ConfigRecord("latin", [], ["КZ"]), UnknownColorToken),
    (ConfigRecord("latin", [], [""]), EmptyBlock),
    (ConfigRecord("latin", [("a", "b"), ("c", "a")], ["К"]), PlugboardOverlap),
    (ConfigRecord("klingon", [], ["К"]), AlphabetError),
])
def test_construction_errors(cfg, error):
    with pytest.raises(error):
        build_machine(cfg)
    assert issubclass(error, ConfigurationError)

def test_empty_positions_default_to_zero():
    m = build_machine(ConfigRecord("latin", [], ["КБЧ", "З"], []))
    assert m.save() == [[0, 0, 0], [0]]

def test_config_not_mutated_by_machine():
    cfg = ConfigRecord("latin", [("a", "b")], ["КБ"], [[3, 4]])
    build_machine(cfg).transform("some text")
    assert cfg.rotor_positions == [[3, 4]]
