# codec_and_plugboard.py
from __future__ import annotations

from collections.abc import Sequence

from debug import Debug
from errors import (
    AlphabetError,
    ConfigFormatError,
    PlugboardCharacterOutOfAlphabet,
    PlugboardOverlap,
    PlugboardSelfPair,
)

debug = Debug()
debug.disable("codec", "plugboard")


# ── AlphabetCodec ─────────────────────────────────────────────────
class AlphabetCodec:
    """Character <-> index table for one fixed alphabet.

    Lookups go through a dense list spanning the code points from the
    lowest to the highest alphabet symbol; holes hold ``None``.
    """

    __slots__ = ("alphabet", "_low", "_table")

    def __init__(self, alphabet: str) -> None:
        if not alphabet:
            raise AlphabetError("Alphabet must contain at least one symbol")
        if len(set(alphabet)) != len(alphabet):
            dup = next(ch for i, ch in enumerate(alphabet) if ch in alphabet[:i])
            raise AlphabetError(f"Duplicate symbol {dup!r} in alphabet")

        codes = [ord(ch) for ch in alphabet]
        self._low: int = min(codes)
        self._table: list[int | None] = [None] * (max(codes) - self._low + 1)
        for i, code in enumerate(codes):
            self._table[code - self._low] = i

        self.alphabet: str = alphabet
        debug.log("codec", "table span %d for %d symbols", len(self._table), len(alphabet))

    def __len__(self) -> int:
        return len(self.alphabet)

    def __contains__(self, ch: str) -> bool:
        return self.encode(ch) is not None

    # letter → integer signal (None when not mapped)
    def encode(self, ch: str) -> int | None:
        slot = ord(ch) - self._low
        if 0 <= slot < len(self._table):
            return self._table[slot]
        return None

    # integer signal → letter
    def decode(self, index: int) -> str:
        return self.alphabet[index]

    def __repr__(self) -> str:
        return f"<AlphabetCodec size={len(self.alphabet)} span={len(self._table)}>"


# ── Plugboard ─────────────────────────────────────────────────────
class Plugboard:
    def __init__(
        self,
        pairs: Sequence[str | tuple[str, str]],
        codec: AlphabetCodec,
    ) -> None:
        self.codec = codec
        self.table: list[int] = list(range(len(codec)))
        self.pairs: list[tuple[str, str]] = []
        used: set[int] = set()

        for raw in pairs:
            # normalise to (a, b); "ab" and ("a", "b") are both accepted
            if len(raw) != 2 or not all(isinstance(c, str) and len(c) == 1 for c in raw):
                raise ConfigFormatError(f"Pair {raw!r} must be exactly 2 symbols")
            a, b = raw

            ia, ib = codec.encode(a), codec.encode(b)
            if ia is None or ib is None:
                raise PlugboardCharacterOutOfAlphabet(a if ia is None else b)
            if ia == ib:
                raise PlugboardSelfPair(a)
            if ia in used or ib in used:
                raise PlugboardOverlap(a if ia in used else b)

            # passed validation → commit swap
            self.table[ia], self.table[ib] = ib, ia
            used.update((ia, ib))
            self.pairs.append((a, b))

        debug.log("plugboard", "%d pairs wired", len(self.pairs))

    def __len__(self) -> int:
        return len(self.pairs)

    def swap(self, index: int) -> int:
        return self.table[index]

    def __repr__(self) -> str:
        swaps = [f"{a}{b}" for a, b in self.pairs]
        return f"<Plugboard {' '.join(swaps)}>"
