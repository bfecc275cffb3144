# errors.py
from __future__ import annotations


class ConfigurationError(ValueError):
    """A machine cannot be built from the given settings."""


class ConfigFormatError(ConfigurationError):
    """The stored configuration record is missing keys or malformed."""


class AlphabetError(ConfigurationError):
    """Empty alphabet, duplicate symbols, or an unknown alphabet name."""


class UnknownColorToken(ConfigurationError):
    def __init__(self, token: str) -> None:
        super().__init__(f"Unknown rotor color {token!r}")
        self.token = token


class EmptyBlock(ConfigurationError):
    """A block string declares no rotors."""


class PlugboardCharacterOutOfAlphabet(ConfigurationError):
    def __init__(self, char: str) -> None:
        super().__init__(f"Plugboard symbol {char!r} not in alphabet")
        self.char = char


class PlugboardSelfPair(ConfigurationError):
    def __init__(self, char: str) -> None:
        super().__init__(f"Plugboard cannot map a symbol to itself: {char!r}")
        self.char = char


class PlugboardOverlap(ConfigurationError):
    def __init__(self, char: str) -> None:
        super().__init__(f"Character {char!r} already used in plugboard")
        self.char = char


class RotorPositionCountMismatch(ConfigurationError):
    def __init__(self, what: str, expected: int, got: int) -> None:
        super().__init__(f"{what}: expected {expected} positions, got {got}")
        self.expected = expected
        self.got = got


__all__ = [
    "ConfigurationError",
    "ConfigFormatError",
    "AlphabetError",
    "UnknownColorToken",
    "EmptyBlock",
    "PlugboardCharacterOutOfAlphabet",
    "PlugboardSelfPair",
    "PlugboardOverlap",
    "RotorPositionCountMismatch",
]
