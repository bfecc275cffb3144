"""
Random configuration generation + presets
=========================================
"""

import json
from random import Random

import pytest

from alphabets import CYRILLIC, LATIN
from machine import build_machine
from rotor_and_reflector import COLOR_TOKENS
from settings_generator import (
    PRESETS,
    build_rng,
    choose_pairs,
    generate_config,
    generate_from_preset,
    main,
    random_blocks,
)

def test_seeded_generation_is_deterministic():
    assert generate_config("latin", 5, rng=Random(3)) == generate_config("latin", 5, rng=Random(3))
    assert build_rng(3).random() == build_rng(3).random()

def test_block_shape():
    blocks = random_blocks(Random(1), 50)
    assert len(blocks) == 50
    assert all(3 <= len(b) <= 9 for b in blocks)
    assert all(set(b) <= set(COLOR_TOKENS) for b in blocks)

def test_positions_match_blocks():
    cfg = generate_config("cyrillic", 6, rng=Random(9))
    assert [len(row) for row in cfg.rotor_positions] == [len(b) for b in cfg.blocks]
    assert all(0 <= p < 33 for row in cfg.rotor_positions for p in row)

@pytest.mark.parametrize("name, alpha", [("latin", LATIN), ("cyrillic", CYRILLIC)])
def test_default_pair_count_is_quarter_alphabet(name, alpha):
    cfg = generate_config(name, 1, rng=Random(0))
    assert cfg.pair_count == len(alpha) // 4

def test_pairs_are_disjoint():
    pairs = choose_pairs(LATIN, 13, Random(4))
    used = [ch for pair in pairs for ch in pair]
    assert len(pairs) == 13
    assert len(used) == len(set(used)) == 26

def test_pair_count_capped():
    assert len(choose_pairs(CYRILLIC, 100, Random(0))) == 16
    assert choose_pairs(LATIN, 0, Random(0)) == []

@pytest.mark.parametrize("preset", PRESETS[:3] + PRESETS[4:], ids=lambda p: p.name)
def test_presets_build_machines(preset):
    cfg = generate_from_preset(preset, "latin", Random(2))
    assert len(cfg.blocks) == preset.blocks
    m = build_machine(cfg)
    assert build_machine(cfg).transform(m.transform("preset check")) == "preset check"

def test_preset_by_name():
    assert len(generate_from_preset("forty-two", "cyrillic", Random(0)).blocks) == 42
    with pytest.raises(ValueError):
        generate_from_preset("nonexistent", "latin")

def test_cli_writes_config(tmp_path, capsys):
    out = tmp_path / "gen.json"
    main(["--alphabet", "cyrillic", "--preset", "safe", "--seed", "11", "--outfile", str(out)])
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["alphabet"] == "cyrillic"
    assert len(data["blocks"]) == 4
    assert len(data["plugboard"]) == 8
    assert "keyspace" in capsys.readouterr().out

def test_cli_explicit_blocks_and_pairs(tmp_path):
    out = tmp_path / "gen.json"
    main(["--blocks", "2", "--pairs", "3", "--seed", "1", "--outfile", str(out)])
    data = json.loads(out.read_text(encoding="utf-8"))
    assert len(data["blocks"]) == 2
    assert len(data["plugboard"]) == 3
