# rotor_and_reflector.py
from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from debug import Debug
from errors import EmptyBlock, RotorPositionCountMismatch, UnknownColorToken

debug = Debug()
debug.disable("rotor", "block", "reflector", "stepping")


# ── color tokens ──────────────────────────────────────────────────
class Color(Enum):
    """Rotor colors as written in block strings (Cyrillic initials)."""

    RED = "К"
    WHITE = "Б"
    BLACK = "Ч"
    PINK = "Р"
    GREEN = "З"
    ORANGE = "О"
    VIOLET = "Ф"
    BLUE = "С"
    SKY = "Г"
    LILAC = "Л"

    @property
    def shift(self) -> int:
        return _SHIFTS[self]

    @classmethod
    def from_token(cls, token: str) -> "Color":
        try:
            return cls(token)
        except ValueError:
            raise UnknownColorToken(token) from None


_SHIFTS: dict[Color, int] = {
    Color.RED: 1,
    Color.WHITE: 2,
    Color.BLACK: 3,
    Color.PINK: 4,
    Color.GREEN: 5,
    Color.ORANGE: 6,
    Color.VIOLET: 7,
    Color.BLUE: 8,
    Color.SKY: 9,
    Color.LILAC: 10,
}

COLOR_TOKENS: str = "".join(c.value for c in Color)


# ── Rotor ─────────────────────────────────────────────────────────
class Rotor:
    __slots__ = ("shift", "position", "size")

    def __init__(self, shift: int, size: int, position: int = 0) -> None:
        if size < 1:
            raise ValueError("Rotor size must be positive")
        self.shift = shift
        self.size = size
        self.position = position % size

    @classmethod
    def from_color(cls, color: Color, size: int) -> "Rotor":
        return cls(color.shift, size)

    # ── signal paths ---------------------------------------------
    def forward(self, sig: int) -> int:
        return (sig + self.shift + self.position) % self.size

    def backward(self, sig: int) -> int:
        return (sig + self.size - ((self.shift + self.position) % self.size)) % self.size

    # ── stepping --------------------------------------------------
    def step(self) -> bool:
        """Advance one and return True when the rotor wraps back to 0."""
        self.position = (self.position + 1) % self.size
        return self.position == 0

    def save(self) -> int:
        return self.position

    def restore(self, position: int) -> None:
        self.position = position % self.size

    def __repr__(self) -> str:
        return f"<Rotor shift={self.shift} pos={self.position}>"


# ── RotorBlock ────────────────────────────────────────────────────
class RotorBlock:
    """An odometer of rotors.

    Forward signals pass the rotors in declared order, reverse signals
    pass them last-to-first through each rotor's inverse, so that
    ``process(process(i), reverse=True) == i`` for fixed positions.
    """

    def __init__(self, rotors: Sequence[Rotor]) -> None:
        if not rotors:
            raise EmptyBlock("A rotor block needs at least one rotor")
        if len({r.size for r in rotors}) != 1:
            raise ValueError("All rotors in a block must share one alphabet size")
        self.rotors: list[Rotor] = list(rotors)

    @classmethod
    def from_colors(cls, colors: str, size: int) -> "RotorBlock":
        """Build a block from a token string such as ``"КБЧ"``."""
        if not colors:
            raise EmptyBlock("Block string declares no rotors")
        return cls([Rotor.from_color(Color.from_token(t), size) for t in colors])

    def __len__(self) -> int:
        return len(self.rotors)

    @property
    def colors(self) -> str:
        by_shift = {c.shift: c.value for c in Color}
        return "".join(by_shift.get(r.shift, "?") for r in self.rotors)

    def process(self, sig: int, reverse: bool = False) -> int:
        if not reverse:
            for rotor in self.rotors:
                sig = rotor.forward(sig)
        else:
            for rotor in reversed(self.rotors):
                sig = rotor.backward(sig)
        return sig

    def step(self) -> None:
        carry = True
        for rotor in self.rotors:
            if not carry:
                break
            carry = rotor.step()        # .step() returns bool roll-over
        if debug.is_on("stepping"):
            debug.log("stepping", "block positions %s", self.save())

    def save(self) -> list[int]:
        return [r.save() for r in self.rotors]

    def restore(self, positions: Sequence[int]) -> None:
        if len(positions) != len(self.rotors):
            raise RotorPositionCountMismatch("block", len(self.rotors), len(positions))
        for rotor, pos in zip(self.rotors, positions):
            rotor.restore(pos)

    def __repr__(self) -> str:
        return f"<RotorBlock {self.colors} pos={self.save()}>"


# ── Reflector ─────────────────────────────────────────────────────
class Reflector:
    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("Reflector size must be positive")
        self.size = size
        self._map = [size - 1 - i for i in range(size)]

    def reflect(self, sig: int) -> int:
        return self._map[sig]

    def __repr__(self) -> str:
        return f"<Reflector size={self.size}>"
