# config.py
from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Tuple

from debug import Debug
from errors import ConfigFormatError

debug = Debug()
debug.disable("config")

DEFAULT_PATH = Path("esd_config.json")
REQUIRED_KEYS = {"alphabet", "plugboard", "blocks"}


@dataclass(slots=True)
class ConfigRecord:
    """Everything needed to rebuild one machine from scratch."""

    alphabet: str = "latin"
    plugboard: List[Tuple[str, str]] = field(default_factory=list)
    blocks: List[str] = field(default_factory=list)
    rotor_positions: List[List[int]] = field(default_factory=list)

    @property
    def total_rotors(self) -> int:
        return sum(len(b) for b in self.blocks)

    @property
    def pair_count(self) -> int:
        return len(self.plugboard)

    # ── (de)serialisation ────────────────────────────────────────
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ConfigRecord":
        if not isinstance(data, dict):
            raise ConfigFormatError("Config must be a JSON object")
        missing = REQUIRED_KEYS - data.keys()
        if missing:
            raise ConfigFormatError(f"Missing keys in config: {', '.join(sorted(missing))}")

        for key in ("plugboard", "blocks"):
            if not isinstance(data[key], list):
                raise ConfigFormatError(f"{key!r} must be a list, got {type(data[key]).__name__}")
        raw_positions = data.get("rotor_positions") or []
        if not isinstance(raw_positions, list) or not all(isinstance(row, list) for row in raw_positions):
            raise ConfigFormatError("'rotor_positions' must be a list of lists")

        pairs: List[Tuple[str, str]] = []
        for raw in data["plugboard"]:
            if not isinstance(raw, (list, tuple, str)) or len(raw) != 2:
                raise ConfigFormatError(f"Pair {raw!r} must be exactly 2 symbols")
            pairs.append((raw[0], raw[1]))

        if not all(isinstance(b, str) for b in data["blocks"]):
            raise ConfigFormatError("Every block must be a string of color tokens")

        try:
            positions = [[int(p) for p in row] for row in raw_positions]
        except (TypeError, ValueError) as exc:
            raise ConfigFormatError(f"Bad rotor_positions: {exc}") from exc

        return cls(
            alphabet=str(data["alphabet"]),
            plugboard=pairs,
            blocks=list(data["blocks"]),
            rotor_positions=positions,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "alphabet": self.alphabet,
            "plugboard": [list(p) for p in self.plugboard],
            "blocks": list(self.blocks),
            "rotor_positions": [list(row) for row in self.rotor_positions],
        }


def load_config(path: str | Path = DEFAULT_PATH) -> ConfigRecord:
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        raise ConfigFormatError(f"{path}: not UTF-8 text ({exc.reason})") from exc
    except json.JSONDecodeError as exc:
        raise ConfigFormatError(f"{path}: not valid JSON ({exc.msg})") from exc
    cfg = ConfigRecord.from_dict(data)
    debug.log("config", "loaded %s: %d blocks, %d pairs", path, len(cfg.blocks), cfg.pair_count)
    return cfg


def save_config(cfg: ConfigRecord, path: str | Path = DEFAULT_PATH) -> Path:
    path = Path(path)
    path.write_text(json.dumps(cfg.to_dict(), indent=2, ensure_ascii=False), encoding="utf-8")
    debug.log("config", "wrote %s", path)
    return path
