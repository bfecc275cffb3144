# machine.py  ─────────────────────────────────────────────────────
from __future__ import annotations

from collections.abc import Sequence

from alphabets import alphabet_for
from codec_and_plugboard import AlphabetCodec, Plugboard
from config import ConfigRecord
from debug import Debug
from errors import RotorPositionCountMismatch
from keyspace import estimate_bits
from rotor_and_reflector import Reflector, RotorBlock

debug = Debug()
debug.disable("encipher")


class CipherMachine:
    """Plugboard → blocks → reflector → blocks reversed → plugboard.

    Every block steps once after each in-alphabet symbol. Two machines
    built from the same settings walk the same rotor positions, so
    running the output through a fresh twin gives the input back.
    """

    def __init__(
        self,
        alphabet: str,
        plugs: Sequence[str | tuple[str, str]],
        blocks: Sequence[str],
        rotor_positions: Sequence[Sequence[int]] = (),
    ) -> None:
        codec = AlphabetCodec(alphabet)
        size = len(codec)

        plugboard = Plugboard(plugs, codec)
        rotor_blocks = [RotorBlock.from_colors(colors, size) for colors in blocks]

        # empty offsets mean "all zero"
        if rotor_positions:
            if len(rotor_positions) != len(rotor_blocks):
                raise RotorPositionCountMismatch(
                    "rotor_positions", len(rotor_blocks), len(rotor_positions)
                )
            for block, positions in zip(rotor_blocks, rotor_positions):
                block.restore(positions)

        self.codec = codec
        self.plugboard = plugboard
        self.blocks: list[RotorBlock] = rotor_blocks
        self.reflector = Reflector(size)

    @classmethod
    def from_config(cls, cfg: ConfigRecord) -> "CipherMachine":
        return cls(
            alphabet_for(cfg.alphabet),
            cfg.plugboard,
            cfg.blocks,
            cfg.rotor_positions,
        )

    # ── read-only queries ───────────────────────────────────────

    @property
    def alphabet(self) -> str:
        return self.codec.alphabet

    @property
    def alphabet_size(self) -> int:
        return len(self.codec)

    @property
    def rotor_count(self) -> int:
        return sum(len(b) for b in self.blocks)

    @property
    def pair_count(self) -> int:
        return len(self.plugboard)

    def keyspace_bits(self) -> float:
        return estimate_bits(self.alphabet_size, self.rotor_count, self.pair_count)

    # ── state snapshot ──────────────────────────────────────────

    def save(self) -> list[list[int]]:
        return [block.save() for block in self.blocks]

    def restore(self, positions: Sequence[Sequence[int]]) -> None:
        if len(positions) != len(self.blocks):
            raise RotorPositionCountMismatch("machine", len(self.blocks), len(positions))
        for block, row in zip(self.blocks, positions):
            block.restore(row)

    # ── encipher ────────────────────────────────────────────────

    def encipher_index(self, sig: int) -> int:
        """Run one index through the full path, then step every block."""
        sig = self.plugboard.swap(sig)

        for block in self.blocks:
            sig = block.process(sig)

        sig = self.reflector.reflect(sig)

        for block in reversed(self.blocks):
            sig = block.process(sig, reverse=True)

        sig = self.plugboard.swap(sig)

        for block in self.blocks:
            block.step()
        return sig

    def transform(self, text: str) -> str:
        """Encipher *text*; symbols outside the alphabet pass through as-is.

        Input is lower-cased first. Rotor state carries over to the next
        call, so use a fresh machine per message.
        """
        out: list[str] = []
        for ch in text.lower():
            sig = self.codec.encode(ch)
            if sig is None:
                out.append(ch)
                continue
            out_ch = self.codec.decode(self.encipher_index(sig))
            debug.log("encipher", "%r -> %r", ch, out_ch)
            out.append(out_ch)
        return "".join(out)

    def __repr__(self) -> str:
        return (
            f"<CipherMachine A={self.alphabet_size} blocks={len(self.blocks)} "
            f"rotors={self.rotor_count} pairs={self.pair_count}>"
        )


# ── module-level API ────────────────────────────────────────────

def build_machine(cfg: ConfigRecord) -> CipherMachine:
    """Fresh machine at the record's starting offsets."""
    return CipherMachine.from_config(cfg)


def transform(machine: CipherMachine, text: str) -> str:
    return machine.transform(text)
