# errors.py
from __future__ import annotations


class EnigmaError(ValueError):
    """Base for everything the machine refuses to do."""


class InvalidWiringError(EnigmaError):
    """Rotor/reflector table is not a permutation, or a notch/start is off the alphabet."""


class InvalidReflectorError(InvalidWiringError):
    """Reflector wiring is not an involution, or maps a contact to itself."""


class ConfigurationError(EnigmaError):
    """Rotors assembled into a machine the wrong way (shared or repeated)."""


class InvalidCharacterError(EnigmaError):
    def __init__(self, character: str, position: int | None = None) -> None:
        self.character = character
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(
            f"Invalid character {character!r}{where}: only lowercase a-z can be encoded"
        )
